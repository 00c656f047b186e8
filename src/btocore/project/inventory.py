# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-flat-type unit inventory.

The inventory is the source of truth for capacity. Bookings and releases
move availability by one unit at a time, bounded by [0, total], so the
invariant `0 <= available <= total` holds after every operation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from ..core.primitives import FlatType, LedgerFailure, clamp_non_negative

logger = logging.getLogger(__name__)


@dataclass
class UnitInventory:
    """
    Mutable ledger of total and available units per flat type.

    Unregistered flat types report zero for both counters. Failed
    mutations return False, leave the counters untouched and record the
    failure kind on `last_failure`.

    Example:
        ```python
        inventory = UnitInventory.from_totals({FlatType.TWO_ROOM: 2})
        inventory.decrement_available_units(FlatType.TWO_ROOM)  # True
        inventory.available_units_by_type(FlatType.TWO_ROOM)  # 1
        ```
    """

    total_units: Dict[FlatType, int] = field(default_factory=dict)
    available_units: Dict[FlatType, int] = field(default_factory=dict)
    last_failure: Optional[LedgerFailure] = field(default=None, compare=False)

    @classmethod
    def from_totals(cls, totals: Mapping[FlatType, int]) -> "UnitInventory":
        """Create an inventory with every unit initially available."""
        total_units = {
            flat_type: clamp_non_negative(count, flat_type.value)
            for flat_type, count in totals.items()
        }
        return cls(total_units=total_units, available_units=dict(total_units))

    # --- Queries ---

    def flat_types(self) -> List[FlatType]:
        """Flat types registered on this inventory, in registration order."""
        return list(self.total_units)

    def has_flat_type(self, flat_type: FlatType) -> bool:
        return self.total_units.get(flat_type, 0) > 0

    def is_registered(self, flat_type: FlatType) -> bool:
        """Check whether the flat type has an entry, even with zero capacity."""
        return flat_type in self.total_units

    def total_units_by_type(self, flat_type: FlatType) -> int:
        return self.total_units.get(flat_type, 0)

    def available_units_by_type(self, flat_type: FlatType) -> int:
        return self.available_units.get(flat_type, 0)

    # --- Administrative overrides ---

    def set_number_of_units_by_type(self, flat_type: FlatType, count: int) -> None:
        """
        Overwrite total capacity for a flat type.

        Availability is clamped down to the new total; it is never raised.
        """
        count = clamp_non_negative(count, flat_type.value)
        self.total_units[flat_type] = count
        current = self.available_units.get(flat_type, 0)
        self.available_units[flat_type] = min(current, count)

    def set_available_units_by_type(self, flat_type: FlatType, count: int) -> None:
        """Overwrite availability, silently clamped into [0, total]."""
        total = self.total_units.get(flat_type, 0)
        self.available_units[flat_type] = max(0, min(count, total))

    # --- Booking / release ---

    def decrement_available_units(self, flat_type: FlatType) -> bool:
        """Book one unit. Fails when nothing is available."""
        available = self.available_units.get(flat_type, 0)
        if available <= 0:
            self.last_failure = LedgerFailure.NO_UNITS_AVAILABLE
            logger.debug(
                f"Cannot decrement: no available units of type {flat_type.value}"
            )
            return False

        self.available_units[flat_type] = available - 1
        self.last_failure = None
        logger.debug(
            f"Decremented available units for {flat_type.value} "
            f"from {available} to {available - 1}"
        )
        return True

    def increment_available_units(self, flat_type: FlatType) -> bool:
        """Release one unit. Fails when availability already equals total."""
        available = self.available_units.get(flat_type, 0)
        total = self.total_units.get(flat_type, 0)
        if available >= total:
            self.last_failure = LedgerFailure.AT_CAPACITY
            logger.debug(
                f"Cannot increment: {flat_type.value} already at capacity ({total})"
            )
            return False

        self.available_units[flat_type] = available + 1
        self.last_failure = None
        return True
