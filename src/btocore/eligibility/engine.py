# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Eligibility decision engine.

The single authoritative answer to "may this user apply to this project
now". The engine reads the project's window and inventory, the user's
attributes and the officer-registration store; it mutates nothing.

Rules are applied in a fixed order and short-circuit on the first
rejection:

1. The project must be open for application (visible, inside its window).
2. The user must be presented as an applicant.
3. The same identity must not hold an APPROVED officer registration for
   the project under evaluation.
4. Demographics: SINGLE applicants need the minimum single age and a
   project that registers the single-applicant flat type; MARRIED
   applicants need the minimum married age; anything else is rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..core.identity import User
from ..core.primitives import (
    EligibilitySettings,
    IneligibilityReason,
    InstantLike,
    MaritalStatus,
    UserRole,
)
from ..registry.ports import OfficerRegistrationQuery

if TYPE_CHECKING:
    from ..project.project import Project

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EligibilityDecision:
    """Outcome of an eligibility evaluation with the first failing rule."""

    eligible: bool
    reason: Optional[IneligibilityReason] = None

    def __bool__(self) -> bool:
        return self.eligible

    @classmethod
    def accept(cls) -> "EligibilityDecision":
        return cls(eligible=True)

    @classmethod
    def reject(cls, reason: IneligibilityReason) -> "EligibilityDecision":
        return cls(eligible=False, reason=reason)


class EligibilityEngine:
    """
    Deny-by-default eligibility evaluation.

    The officer-registration store is injected so it can be swapped for a
    test double or another backend.

    Example:
        ```python
        engine = EligibilityEngine(registrations)
        if engine.check_eligibility(user, project):
            ...
        ```
    """

    def __init__(
        self,
        registrations: OfficerRegistrationQuery,
        settings: Optional[EligibilitySettings] = None,
    ):
        self.registrations = registrations
        self.settings = settings or EligibilitySettings()

    def check_eligibility(
        self,
        user: User,
        project: "Project",
        project_id: Optional[str] = None,
        now: Optional[InstantLike] = None,
    ) -> bool:
        return self.evaluate(user, project, project_id, now).eligible

    def evaluate(
        self,
        user: User,
        project: "Project",
        project_id: Optional[str] = None,
        now: Optional[InstantLike] = None,
    ) -> EligibilityDecision:
        """
        Evaluate every rule and report the first one that fails.

        Args:
            user: Identity to evaluate
            project: Project whose window and inventory are consulted
            project_id: Id matched against officer registrations
                (defaults to `project.project_id`)
            now: Evaluation instant (defaults to the project's clock)

        Returns:
            EligibilityDecision carrying the verdict and rejection reason
        """
        target_id = project.project_id if project_id is None else project_id
        decision = self._evaluate(user, project, target_id, now)
        if decision.eligible:
            logger.debug(f"{user} is eligible for project {target_id}")
        else:
            logger.debug(
                f"{user} is not eligible for project {target_id}: "
                f"{decision.reason.value}"
            )
        return decision

    def _evaluate(
        self,
        user: User,
        project: "Project",
        target_id: str,
        now: Optional[InstantLike],
    ) -> EligibilityDecision:
        if not project.is_open_for_application(now):
            return EligibilityDecision.reject(IneligibilityReason.WINDOW_CLOSED)

        if not user.is_applicant:
            return EligibilityDecision.reject(IneligibilityReason.NOT_APPLICANT)

        if self._is_approved_officer(user, target_id):
            return EligibilityDecision.reject(IneligibilityReason.APPROVED_OFFICER)

        return self._check_demographics(user, project)

    def _is_approved_officer(self, user: User, target_id: str) -> bool:
        candidate = user.as_role(UserRole.OFFICER)
        for registration in self.registrations.get_officer_registrations(candidate):
            if registration.is_approved and registration.project_id == target_id:
                return True
        return False

    def _check_demographics(
        self, user: User, project: "Project"
    ) -> EligibilityDecision:
        settings = self.settings

        if user.marital_status == MaritalStatus.SINGLE:
            if user.age < settings.single_min_age:
                return EligibilityDecision.reject(IneligibilityReason.UNDERAGE)
            # Registration alone counts; availability is not checked here
            if not project.inventory.is_registered(settings.single_flat_type):
                return EligibilityDecision.reject(IneligibilityReason.NO_TWO_ROOM)
            return EligibilityDecision.accept()

        if user.marital_status == MaritalStatus.MARRIED:
            if user.age < settings.married_min_age:
                return EligibilityDecision.reject(IneligibilityReason.UNDERAGE)
            return EligibilityDecision.accept()

        return EligibilityDecision.reject(IneligibilityReason.MARITAL_STATUS)
