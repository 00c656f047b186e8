# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
BTO Project Aggregate

A Project bundles the unit inventory, the officer slot ledger and the
application window of one BTO launch, together with its descriptive
fields and the manager in charge. All mutation goes through the bounded
ledger operations, so callers holding a Project cannot break the
inventory or roster invariants.

Example:
    ```python
    project = Project(
        project_id="P001",
        project_name="Acacia Breeze",
        neighborhood="Yishun",
        total_units={FlatType.TWO_ROOM: 2, FlatType.THREE_ROOM: 3},
        application_open_date="2026-01-01",
        application_close_date="2026-12-31",
        manager_in_charge=manager_user,
        officer_slots=3,
    )
    project.decrement_available_units(FlatType.TWO_ROOM)
    project.check_eligibility(user, registrations=registration_store)
    ```
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from ..core.identity import User
from ..core.primitives import (
    EligibilitySettings,
    FlatType,
    InstantLike,
    LedgerFailure,
    normalize_instant,
    utc_now,
)
from ..eligibility.engine import EligibilityEngine
from ..registry.memory import NullBookingNotifier
from ..registry.ports import BookingNotifier, OfficerRegistrationQuery
from .inventory import UnitInventory
from .officers import OfficerRoster
from .schedule import Clock, ScheduleWindow

logger = logging.getLogger(__name__)


class Project:
    """
    Aggregate root for a BTO launch.

    Two projects are equal iff their `project_id`s are equal, and the hash
    derives from `project_id` alone. Expected failures (no units, no
    slots, unknown officer) are False returns; the kind of the most
    recent failure is available as `last_failure`.
    """

    def __init__(
        self,
        project_id: str,
        project_name: str,
        neighborhood: str,
        total_units: Mapping[FlatType, int],
        application_open_date: InstantLike,
        application_close_date: InstantLike,
        manager_in_charge: User,
        officer_slots: int,
        *,
        is_visible: bool = True,
        booking_notifier: Optional[BookingNotifier] = None,
        clock: Optional[Clock] = None,
        warn_on_inverted_window: bool = True,
    ):
        if not project_id:
            raise ValueError("project_id must not be empty")
        if not manager_in_charge.is_manager:
            raise ValueError(
                f"Manager in charge must be an HDB manager, got {manager_in_charge}"
            )

        self._project_id = project_id
        self.project_name = project_name
        self.neighborhood = neighborhood
        self.manager_in_charge = manager_in_charge

        self.inventory = UnitInventory.from_totals(total_units)
        self.roster = OfficerRoster(max_officer_slots=officer_slots)
        self.schedule = ScheduleWindow(
            open_date=normalize_instant(application_open_date),
            close_date=normalize_instant(application_close_date),
            is_visible=is_visible,
            clock=clock or utc_now,
            warn_on_inverted=warn_on_inverted_window,
        )
        self.booking_notifier = booking_notifier or NullBookingNotifier()
        self.last_failure: Optional[LedgerFailure] = None

    # --- Identity ---

    @property
    def project_id(self) -> str:
        return self._project_id

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Project):
            return NotImplemented
        return self._project_id == other._project_id

    def __hash__(self) -> int:
        return hash(self._project_id)

    def __repr__(self) -> str:
        return f"Project(project_id={self._project_id!r}, project_name={self.project_name!r})"

    # --- Unit inventory ---

    @property
    def total_units(self) -> Dict[FlatType, int]:
        return dict(self.inventory.total_units)

    @property
    def available_units(self) -> Dict[FlatType, int]:
        return dict(self.inventory.available_units)

    def flat_types(self) -> List[FlatType]:
        return self.inventory.flat_types()

    def has_flat_type(self, flat_type: FlatType) -> bool:
        return self.inventory.has_flat_type(flat_type)

    def total_units_by_type(self, flat_type: FlatType) -> int:
        return self.inventory.total_units_by_type(flat_type)

    def available_units_by_type(self, flat_type: FlatType) -> int:
        return self.inventory.available_units_by_type(flat_type)

    def set_number_of_units_by_type(self, flat_type: FlatType, count: int) -> None:
        self.inventory.set_number_of_units_by_type(flat_type, count)

    def set_available_units_by_type(self, flat_type: FlatType, count: int) -> None:
        self.inventory.set_available_units_by_type(flat_type, count)

    def decrement_available_units(self, flat_type: FlatType) -> bool:
        """
        Book one unit of the given flat type.

        On success the booking notifier is told exactly once. Notifier
        errors are logged and never undo the booking.
        """
        if not self.inventory.decrement_available_units(flat_type):
            self.last_failure = self.inventory.last_failure
            return False
        self.last_failure = None

        try:
            self.booking_notifier.update_project_units_after_booking(self, flat_type)
        except Exception as e:
            logger.warning(
                f"Booking notification failed for project {self._project_id} "
                f"({flat_type.value}): {e}"
            )
        return True

    def increment_available_units(self, flat_type: FlatType) -> bool:
        ok = self.inventory.increment_available_units(flat_type)
        self.last_failure = None if ok else self.inventory.last_failure
        return ok

    # --- Officer slots ---

    @property
    def officers(self) -> List[User]:
        return self.roster.officers

    @property
    def max_officer_slots(self) -> int:
        return self.roster.max_officer_slots

    @property
    def available_officer_slots(self) -> int:
        return self.roster.available_officer_slots

    def has_officer(self, officer: User) -> bool:
        return self.roster.has_officer(officer)

    def add_officer(self, officer: User) -> bool:
        ok = self.roster.add_officer(officer)
        self.last_failure = None if ok else self.roster.last_failure
        if ok:
            logger.info(f"Officer {officer} assigned to project {self._project_id}")
        return ok

    def remove_officer(self, officer: User) -> bool:
        ok = self.roster.remove_officer(officer)
        self.last_failure = None if ok else self.roster.last_failure
        if ok:
            logger.info(f"Officer {officer} removed from project {self._project_id}")
        return ok

    def set_officer_slots(self, slots: int) -> None:
        self.roster.set_officer_slots(slots)

    def decrement_officer_slots(self) -> bool:
        ok = self.roster.decrement_officer_slots()
        self.last_failure = None if ok else self.roster.last_failure
        return ok

    def increment_officer_slots(self) -> bool:
        ok = self.roster.increment_officer_slots()
        self.last_failure = None if ok else self.roster.last_failure
        return ok

    # --- Schedule window ---

    @property
    def application_open_date(self) -> pd.Timestamp:
        return self.schedule.open_date

    @application_open_date.setter
    def application_open_date(self, value: InstantLike) -> None:
        self.schedule.set_open_date(value)

    @property
    def application_close_date(self) -> pd.Timestamp:
        return self.schedule.close_date

    @application_close_date.setter
    def application_close_date(self, value: InstantLike) -> None:
        self.schedule.set_close_date(value)

    @property
    def is_visible(self) -> bool:
        return self.schedule.is_visible

    @is_visible.setter
    def is_visible(self, visible: bool) -> None:
        self.schedule.set_visible(visible)

    def set_visible(self, visible: bool) -> None:
        self.schedule.set_visible(visible)

    def is_open_for_application(self, now: Optional[InstantLike] = None) -> bool:
        return self.schedule.is_open_for_application(now)

    # --- Eligibility ---

    def check_eligibility(
        self,
        user: User,
        project_id: Optional[str] = None,
        *,
        registrations: Optional[OfficerRegistrationQuery] = None,
        settings: Optional[EligibilitySettings] = None,
        engine: Optional[EligibilityEngine] = None,
    ) -> bool:
        """
        Decide whether `user` may apply to this project now.

        Args:
            user: Identity to evaluate
            project_id: Project id to match officer registrations against
                (defaults to this project's id)
            registrations: Officer-registration store to consult when no
                engine is given
            settings: Demographic thresholds (defaults apply if omitted)
            engine: Existing engine to reuse; takes precedence over
                `registrations` and `settings`

        Raises:
            ValueError: If neither `engine` nor `registrations` is given
        """
        if engine is None:
            if registrations is None:
                raise ValueError("check_eligibility needs an engine or registrations")
            engine = EligibilityEngine(registrations, settings=settings)
        return engine.check_eligibility(user, self, project_id)
