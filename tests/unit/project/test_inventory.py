# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the per-flat-type unit inventory.
"""

from __future__ import annotations

import random

import pytest

from btocore.core.primitives import FlatType, LedgerFailure
from btocore.project import UnitInventory

TWO = FlatType.TWO_ROOM
THREE = FlatType.THREE_ROOM


@pytest.fixture
def inventory() -> UnitInventory:
    return UnitInventory.from_totals({TWO: 2, THREE: 3})


def assert_within_bounds(inventory: UnitInventory):
    for flat_type in FlatType:
        available = inventory.available_units_by_type(flat_type)
        total = inventory.total_units_by_type(flat_type)
        assert 0 <= available <= total


class TestQueries:
    def test_initially_all_available(self, inventory):
        assert inventory.available_units_by_type(TWO) == 2
        assert inventory.available_units_by_type(THREE) == 3

    def test_unregistered_type_reports_zero(self):
        inventory = UnitInventory.from_totals({THREE: 3})
        assert inventory.total_units_by_type(TWO) == 0
        assert inventory.available_units_by_type(TWO) == 0
        assert not inventory.has_flat_type(TWO)
        assert not inventory.is_registered(TWO)

    def test_zero_capacity_is_registered_but_not_offered(self):
        inventory = UnitInventory.from_totals({TWO: 0})
        assert inventory.is_registered(TWO)
        assert not inventory.has_flat_type(TWO)

    def test_flat_types_in_registration_order(self, inventory):
        assert inventory.flat_types() == [TWO, THREE]

    def test_from_totals_copies_mapping(self):
        totals = {TWO: 2}
        inventory = UnitInventory.from_totals(totals)
        totals[TWO] = 10
        assert inventory.total_units_by_type(TWO) == 2


class TestSetNumberOfUnits:
    def test_lowering_total_clamps_availability(self, inventory):
        inventory.set_number_of_units_by_type(THREE, 1)
        assert inventory.total_units_by_type(THREE) == 1
        assert inventory.available_units_by_type(THREE) == 1

    def test_raising_total_keeps_availability(self, inventory):
        inventory.decrement_available_units(TWO)
        inventory.set_number_of_units_by_type(TWO, 10)
        assert inventory.total_units_by_type(TWO) == 10
        assert inventory.available_units_by_type(TWO) == 1

    def test_new_type_starts_with_nothing_available(self):
        fresh = UnitInventory()
        fresh.set_number_of_units_by_type(TWO, 4)
        assert fresh.total_units_by_type(TWO) == 4
        assert fresh.available_units_by_type(TWO) == 0

    def test_negative_total_clamped_to_zero(self, inventory):
        inventory.set_number_of_units_by_type(TWO, -5)
        assert inventory.total_units_by_type(TWO) == 0
        assert inventory.available_units_by_type(TWO) == 0


class TestSetAvailableUnits:
    @pytest.mark.parametrize(
        "requested, expected",
        [(-3, 0), (0, 0), (1, 1), (2, 2), (99, 2)],
    )
    def test_clamped_into_bounds(self, inventory, requested, expected):
        inventory.set_available_units_by_type(TWO, requested)
        assert inventory.available_units_by_type(TWO) == expected

    @pytest.mark.parametrize("requested", [-1, 0, 1, 5])
    def test_idempotent(self, inventory, requested):
        inventory.set_available_units_by_type(THREE, requested)
        once = (dict(inventory.total_units), dict(inventory.available_units))
        inventory.set_available_units_by_type(THREE, requested)
        twice = (dict(inventory.total_units), dict(inventory.available_units))
        assert once == twice

    def test_unregistered_type_stays_zero(self):
        inventory = UnitInventory()
        inventory.set_available_units_by_type(TWO, 3)
        assert inventory.available_units_by_type(TWO) == 0


class TestBookingAndRelease:
    def test_decrement_exhausts_exactly_total(self, inventory):
        results = [inventory.decrement_available_units(THREE) for _ in range(4)]
        assert results == [True, True, True, False]
        assert inventory.available_units_by_type(THREE) == 0
        assert inventory.last_failure is LedgerFailure.NO_UNITS_AVAILABLE

    def test_decrement_unregistered_type_fails(self):
        inventory = UnitInventory.from_totals({THREE: 1})
        assert inventory.decrement_available_units(TWO) is False
        assert inventory.available_units_by_type(TWO) == 0

    def test_increment_at_capacity_fails(self, inventory):
        assert inventory.increment_available_units(TWO) is False
        assert inventory.last_failure is LedgerFailure.AT_CAPACITY
        assert inventory.available_units_by_type(TWO) == 2

    def test_release_after_booking(self, inventory):
        assert inventory.decrement_available_units(TWO)
        assert inventory.increment_available_units(TWO)
        assert inventory.available_units_by_type(TWO) == 2
        assert inventory.last_failure is None

    def test_random_operation_sequences_keep_bounds(self):
        rng = random.Random(42)
        inventory = UnitInventory.from_totals({TWO: 3, THREE: 5})
        for _ in range(500):
            flat_type = rng.choice(list(FlatType))
            op = rng.randrange(4)
            if op == 0:
                inventory.set_number_of_units_by_type(flat_type, rng.randint(-2, 8))
            elif op == 1:
                inventory.set_available_units_by_type(flat_type, rng.randint(-3, 10))
            elif op == 2:
                inventory.decrement_available_units(flat_type)
            else:
                inventory.increment_available_units(flat_type)
            assert_within_bounds(inventory)
