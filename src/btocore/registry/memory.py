# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
In-memory implementations of the collaborator ports.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..core.identity import User
from ..core.primitives import FlatType, RegistrationStatus, UserRole
from .ports import BookingNotifier, OfficerRegistration, OfficerRegistrationQuery

if TYPE_CHECKING:
    from ..project.project import Project

logger = logging.getLogger(__name__)


class InMemoryOfficerRegistrations(OfficerRegistrationQuery):
    """
    Officer registrations held in a list.

    Registrations are matched to candidates by NRIC, so an applicant
    identity re-presented as an officer finds its own records.
    """

    def __init__(self, registrations: Optional[Sequence[OfficerRegistration]] = None):
        self._registrations: List[OfficerRegistration] = list(registrations or [])

    def __len__(self) -> int:
        return len(self._registrations)

    def register(
        self,
        officer: User,
        project: "Project",
        status: RegistrationStatus = RegistrationStatus.PENDING,
    ) -> OfficerRegistration:
        """File a registration, replacing any earlier one for the same pair."""
        officer = officer.as_role(UserRole.OFFICER)
        self._registrations = [
            r
            for r in self._registrations
            if not (r.officer == officer and r.project_id == project.project_id)
        ]
        registration = OfficerRegistration(
            officer=officer, project=project, status=status
        )
        self._registrations.append(registration)
        logger.debug(
            f"Registered {officer} for project {project.project_id} ({status.value})"
        )
        return registration

    def set_status(
        self, officer: User, project: "Project", status: RegistrationStatus
    ) -> bool:
        """Change the status of an existing registration. False if none exists."""
        for i, r in enumerate(self._registrations):
            if r.officer == officer and r.project_id == project.project_id:
                self._registrations[i] = OfficerRegistration(
                    officer=r.officer, project=r.project, status=status
                )
                return True
        return False

    def get_officer_registrations(
        self, candidate: User
    ) -> Sequence[OfficerRegistration]:
        return [r for r in self._registrations if r.officer == candidate]


class NullBookingNotifier(BookingNotifier):
    """Discards booking notifications."""

    def update_project_units_after_booking(
        self, project: "Project", flat_type: FlatType
    ) -> None:
        return None


class RecordingBookingNotifier(BookingNotifier):
    """Keeps every booking notification, in order."""

    def __init__(self):
        self.bookings: List[Tuple[str, FlatType]] = []

    def update_project_units_after_booking(
        self, project: "Project", flat_type: FlatType
    ) -> None:
        self.bookings.append((project.project_id, flat_type))
        logger.info(
            f"Booking recorded for project {project.project_id}: {flat_type.value}"
        )


__all__ = [
    "InMemoryOfficerRegistrations",
    "NullBookingNotifier",
    "RecordingBookingNotifier",
]
