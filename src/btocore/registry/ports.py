# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Interfaces to the subsystems the project core depends on.

The officer-registration store and the booking-persistence layer live
outside this package. Projects and the eligibility engine only see these
abstract ports, so tests and alternative backends can substitute them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from ..core.identity import User
from ..core.primitives import FlatType, RegistrationStatus

if TYPE_CHECKING:
    from ..project.project import Project


@dataclass(frozen=True)
class OfficerRegistration:
    """
    One officer's registration to handle a project.

    Attributes:
        officer: Identity that registered (presented as an officer)
        project: Project the registration targets
        status: Current registration state
    """

    officer: User
    project: "Project"
    status: RegistrationStatus

    @property
    def project_id(self) -> str:
        return self.project.project_id

    @property
    def is_approved(self) -> bool:
        return self.status == RegistrationStatus.APPROVED


class OfficerRegistrationQuery(ABC):
    """Read access to officer registrations."""

    @abstractmethod
    def get_officer_registrations(
        self, candidate: User
    ) -> Sequence[OfficerRegistration]:
        """Return every registration filed by the candidate's identity."""
        pass


class BookingNotifier(ABC):
    """Receives a notification after each successful unit booking."""

    @abstractmethod
    def update_project_units_after_booking(
        self, project: "Project", flat_type: FlatType
    ) -> None:
        pass


__all__ = [
    "BookingNotifier",
    "OfficerRegistration",
    "OfficerRegistrationQuery",
]
