# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Officer slot ledger.

Caps the number of officers assigned to a project and keeps the
available-slot counter in step with the roster.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.identity import User
from ..core.primitives import LedgerFailure, clamp_non_negative

logger = logging.getLogger(__name__)


@dataclass
class OfficerRoster:
    """
    Officers assigned to a project plus the slot counters.

    Roster changes keep `available_officer_slots == max_officer_slots -
    len(officers)`. The raw `increment_officer_slots` and
    `decrement_officer_slots` overrides adjust availability alone, bounded
    to [0, max_officer_slots]. Whatever the counter says, `add_officer`
    refuses once the roster has `max_officer_slots` members, and
    `remove_officer` never lifts availability above the ceiling.
    """

    max_officer_slots: int
    available_officer_slots: int = -1
    roster: List[User] = field(default_factory=list)
    last_failure: Optional[LedgerFailure] = field(default=None, compare=False)

    def __post_init__(self):
        self.max_officer_slots = clamp_non_negative(
            self.max_officer_slots, "officer slots"
        )
        if self.available_officer_slots < 0:
            self.available_officer_slots = self.max_officer_slots - len(self.roster)

    @property
    def officers(self) -> List[User]:
        """Copy of the current roster, in assignment order."""
        return list(self.roster)

    def has_officer(self, officer: User) -> bool:
        return officer in self.roster

    def add_officer(self, officer: User) -> bool:
        # The roster never outgrows the ceiling, even after raw slot overrides
        if (
            self.available_officer_slots <= 0
            or len(self.roster) >= self.max_officer_slots
        ):
            self.last_failure = LedgerFailure.NO_SLOTS_AVAILABLE
            logger.debug(f"Cannot add {officer}: no officer slots available")
            return False
        if officer in self.roster:
            self.last_failure = LedgerFailure.ALREADY_ASSIGNED
            logger.debug(f"Cannot add {officer}: already assigned")
            return False

        self.roster.append(officer)
        self.available_officer_slots -= 1
        self.last_failure = None
        return True

    def remove_officer(self, officer: User) -> bool:
        if officer not in self.roster:
            self.last_failure = LedgerFailure.NOT_ASSIGNED
            logger.debug(f"Cannot remove {officer}: not assigned")
            return False

        self.roster.remove(officer)
        self.available_officer_slots = min(
            self.available_officer_slots + 1, self.max_officer_slots
        )
        self.last_failure = None
        return True

    def set_officer_slots(self, slots: int) -> None:
        """Resize the slot ceiling; it never drops below the roster size."""
        self.max_officer_slots = max(slots, len(self.roster), 0)
        self.available_officer_slots = self.max_officer_slots - len(self.roster)

    def decrement_officer_slots(self) -> bool:
        if self.available_officer_slots <= 0:
            self.last_failure = LedgerFailure.NO_SLOTS_AVAILABLE
            return False
        self.available_officer_slots -= 1
        self.last_failure = None
        return True

    def increment_officer_slots(self) -> bool:
        if self.available_officer_slots >= self.max_officer_slots:
            self.last_failure = LedgerFailure.AT_CAPACITY
            return False
        self.available_officer_slots += 1
        self.last_failure = None
        return True
