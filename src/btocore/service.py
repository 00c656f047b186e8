# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Project repository and service layer.

`ProjectRepository` keeps projects in memory keyed by id, each with its
own re-entrant lock. `ProjectService` is the narrow entry point for
callers that may share projects across threads: every ledger mutation
runs inside the project's lock, so the read-check-write sequences in the
ledgers become critical sections. Eligibility checks take the same lock
so the window and inventory they read are consistent, but the officer
registration store is read without ordering guarantees.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Dict, Iterator, List, Mapping, Optional

from .core.identity import User
from .core.primitives import FlatType, GlobalSettings, InstantLike
from .eligibility.engine import EligibilityDecision, EligibilityEngine
from .project.project import Project
from .project.schedule import Clock
from .registry.ports import BookingNotifier, OfficerRegistrationQuery

logger = logging.getLogger(__name__)


class ProjectRepository:
    """In-memory project store with one lock per project id."""

    def __init__(self):
        self._projects: Dict[str, Project] = {}
        self._locks: Dict[str, RLock] = {}
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._projects)

    def __contains__(self, project_id: str) -> bool:
        with self._lock:
            return project_id in self._projects

    def __iter__(self) -> Iterator[Project]:
        return iter(self.all())

    def add(self, project: Project) -> None:
        """Store a project. Raises ValueError if the id is already taken."""
        with self._lock:
            if project.project_id in self._projects:
                raise ValueError(f"Project {project.project_id} already exists")
            self._projects[project.project_id] = project
            self._locks[project.project_id] = RLock()
        logger.debug(f"Stored project {project.project_id}")

    def remove(self, project_id: str) -> Optional[Project]:
        with self._lock:
            self._locks.pop(project_id, None)
            return self._projects.pop(project_id, None)

    def find(self, project_id: str) -> Optional[Project]:
        with self._lock:
            return self._projects.get(project_id)

    def get(self, project_id: str) -> Project:
        """Fetch a project. Raises KeyError for unknown ids."""
        project = self.find(project_id)
        if project is None:
            raise KeyError(f"Unknown project: {project_id}")
        return project

    def lock_for(self, project_id: str) -> RLock:
        with self._lock:
            try:
                return self._locks[project_id]
            except KeyError:
                raise KeyError(f"Unknown project: {project_id}") from None

    def all(self) -> List[Project]:
        with self._lock:
            return list(self._projects.values())

    def visible(self) -> List[Project]:
        return [p for p in self.all() if p.is_visible]


class ProjectService:
    """
    Serialized access to project ledgers.

    Example:
        ```python
        service = ProjectService(ProjectRepository(), registrations)
        project = service.create_project(
            "P001", "Acacia Breeze", "Yishun",
            {FlatType.TWO_ROOM: 2}, "2026-01-01", "2026-12-31", manager,
        )
        service.book_unit("P001", FlatType.TWO_ROOM)
        ```
    """

    def __init__(
        self,
        repository: ProjectRepository,
        registrations: OfficerRegistrationQuery,
        settings: Optional[GlobalSettings] = None,
        booking_notifier: Optional[BookingNotifier] = None,
        clock: Optional[Clock] = None,
    ):
        self.repository = repository
        self.settings = settings or GlobalSettings()
        self.engine = EligibilityEngine(
            registrations, settings=self.settings.eligibility
        )
        self.booking_notifier = booking_notifier
        self.clock = clock

    def create_project(
        self,
        project_id: str,
        project_name: str,
        neighborhood: str,
        total_units: Mapping[FlatType, int],
        application_open_date: InstantLike,
        application_close_date: InstantLike,
        manager_in_charge: User,
        officer_slots: Optional[int] = None,
    ) -> Project:
        """Create and store a project using the configured defaults."""
        project_settings = self.settings.project
        if officer_slots is None:
            officer_slots = project_settings.default_officer_slots
        project = Project(
            project_id=project_id,
            project_name=project_name,
            neighborhood=neighborhood,
            total_units=total_units,
            application_open_date=application_open_date,
            application_close_date=application_close_date,
            manager_in_charge=manager_in_charge,
            officer_slots=officer_slots,
            is_visible=project_settings.visible_on_creation,
            booking_notifier=self.booking_notifier,
            clock=self.clock,
            warn_on_inverted_window=project_settings.warn_on_inverted_window,
        )
        self.repository.add(project)
        logger.info(f"Created project {project_id} ({project_name})")
        return project

    # --- Unit inventory ---

    def book_unit(self, project_id: str, flat_type: FlatType) -> bool:
        with self.repository.lock_for(project_id):
            return self.repository.get(project_id).decrement_available_units(
                flat_type
            )

    def release_unit(self, project_id: str, flat_type: FlatType) -> bool:
        with self.repository.lock_for(project_id):
            return self.repository.get(project_id).increment_available_units(
                flat_type
            )

    def set_total_units(self, project_id: str, flat_type: FlatType, count: int) -> None:
        with self.repository.lock_for(project_id):
            self.repository.get(project_id).set_number_of_units_by_type(
                flat_type, count
            )

    def set_available_units(
        self, project_id: str, flat_type: FlatType, count: int
    ) -> None:
        with self.repository.lock_for(project_id):
            self.repository.get(project_id).set_available_units_by_type(
                flat_type, count
            )

    # --- Officer slots ---

    def assign_officer(self, project_id: str, officer: User) -> bool:
        with self.repository.lock_for(project_id):
            return self.repository.get(project_id).add_officer(officer)

    def unassign_officer(self, project_id: str, officer: User) -> bool:
        with self.repository.lock_for(project_id):
            return self.repository.get(project_id).remove_officer(officer)

    def set_officer_slots(self, project_id: str, slots: int) -> None:
        with self.repository.lock_for(project_id):
            self.repository.get(project_id).set_officer_slots(slots)

    # --- Administrative edits ---

    def update_details(
        self,
        project_id: str,
        project_name: Optional[str] = None,
        neighborhood: Optional[str] = None,
        application_open_date: Optional[InstantLike] = None,
        application_close_date: Optional[InstantLike] = None,
    ) -> Project:
        """Edit descriptive fields and dates; None leaves a field unchanged."""
        with self.repository.lock_for(project_id):
            project = self.repository.get(project_id)
            if project_name is not None:
                project.project_name = project_name
            if neighborhood is not None:
                project.neighborhood = neighborhood
            if application_open_date is not None:
                project.application_open_date = application_open_date
            if application_close_date is not None:
                project.application_close_date = application_close_date
            return project

    def set_visibility(self, project_id: str, visible: bool) -> None:
        with self.repository.lock_for(project_id):
            self.repository.get(project_id).set_visible(visible)

    # --- Eligibility ---

    def check_eligibility(self, user: User, project_id: str) -> bool:
        return self.evaluate_eligibility(user, project_id).eligible

    def evaluate_eligibility(self, user: User, project_id: str) -> EligibilityDecision:
        with self.repository.lock_for(project_id):
            return self.engine.evaluate(user, self.repository.get(project_id))

    def eligible_projects(self, user: User) -> List[Project]:
        """Projects the user may currently apply to."""
        return [
            p for p in self.repository.all() if self.check_eligibility(user, p.project_id)
        ]
