# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import random

from btocore.core import officer
from btocore.core.primitives import LedgerFailure, MaritalStatus
from btocore.project import OfficerRoster


def make_officers(n: int):
    return [officer(f"T000000{i}X", f"Officer {i}", 30, MaritalStatus.SINGLE) for i in range(n)]


def assert_slots_consistent(roster: OfficerRoster):
    assert roster.available_officer_slots == roster.max_officer_slots - len(roster.officers)
    assert len(roster.officers) <= roster.max_officer_slots
    assert len(set(roster.officers)) == len(roster.officers)


class TestOfficerRoster:
    def test_initial_state(self):
        roster = OfficerRoster(max_officer_slots=3)
        assert roster.available_officer_slots == 3
        assert roster.officers == []

    def test_negative_slot_count_clamped(self):
        roster = OfficerRoster(max_officer_slots=-2)
        assert roster.max_officer_slots == 0
        assert roster.available_officer_slots == 0

    def test_add_until_full(self):
        roster = OfficerRoster(max_officer_slots=2)
        a, b, c = make_officers(3)

        assert roster.add_officer(a)
        assert roster.add_officer(b)
        assert roster.available_officer_slots == 0

        assert roster.add_officer(c) is False
        assert roster.last_failure is LedgerFailure.NO_SLOTS_AVAILABLE
        assert roster.officers == [a, b]

    def test_duplicate_rejected(self):
        roster = OfficerRoster(max_officer_slots=3)
        (a,) = make_officers(1)
        assert roster.add_officer(a)
        assert roster.add_officer(a) is False
        assert roster.last_failure is LedgerFailure.ALREADY_ASSIGNED
        assert roster.available_officer_slots == 2

    def test_remove(self):
        roster = OfficerRoster(max_officer_slots=2)
        a, b = make_officers(2)
        roster.add_officer(a)

        assert roster.remove_officer(b) is False
        assert roster.last_failure is LedgerFailure.NOT_ASSIGNED
        assert roster.remove_officer(a)
        assert roster.available_officer_slots == 2
        assert not roster.has_officer(a)

    def test_officers_returns_copy(self):
        roster = OfficerRoster(max_officer_slots=2)
        (a,) = make_officers(1)
        roster.add_officer(a)
        roster.officers.clear()
        assert roster.officers == [a]

    def test_set_slots_never_below_roster(self):
        roster = OfficerRoster(max_officer_slots=3)
        for o in make_officers(2):
            roster.add_officer(o)

        roster.set_officer_slots(1)
        assert roster.max_officer_slots == 2
        assert roster.available_officer_slots == 0

        roster.set_officer_slots(5)
        assert roster.max_officer_slots == 5
        assert roster.available_officer_slots == 3

    def test_raw_slot_adjustments_bounded(self):
        roster = OfficerRoster(max_officer_slots=1)
        assert roster.increment_officer_slots() is False
        assert roster.decrement_officer_slots()
        assert roster.available_officer_slots == 0
        assert roster.decrement_officer_slots() is False
        assert roster.increment_officer_slots()
        assert roster.available_officer_slots == 1

    def test_add_after_raw_increment_stays_within_max(self):
        roster = OfficerRoster(max_officer_slots=1)
        a, b = make_officers(2)

        assert roster.add_officer(a)
        assert roster.increment_officer_slots()
        assert roster.available_officer_slots == 1

        assert roster.add_officer(b) is False
        assert roster.last_failure is LedgerFailure.NO_SLOTS_AVAILABLE
        assert roster.officers == [a]

    def test_remove_after_raw_increment_caps_availability(self):
        roster = OfficerRoster(max_officer_slots=1)
        (a,) = make_officers(1)
        roster.add_officer(a)
        roster.increment_officer_slots()

        assert roster.remove_officer(a)
        assert roster.available_officer_slots == 1

    def test_random_mixed_sequences_never_exceed_max(self):
        rng = random.Random(11)
        pool = make_officers(6)
        roster = OfficerRoster(max_officer_slots=3)
        for _ in range(300):
            op = rng.randrange(5)
            if op == 0:
                roster.add_officer(rng.choice(pool))
            elif op == 1:
                roster.remove_officer(rng.choice(pool))
            elif op == 2:
                roster.set_officer_slots(rng.randint(-1, 6))
            elif op == 3:
                roster.increment_officer_slots()
            else:
                roster.decrement_officer_slots()
            assert len(roster.officers) <= roster.max_officer_slots
            assert 0 <= roster.available_officer_slots <= roster.max_officer_slots

    def test_random_roster_sequences_keep_slot_invariant(self):
        rng = random.Random(7)
        pool = make_officers(6)
        roster = OfficerRoster(max_officer_slots=3)
        for _ in range(300):
            op = rng.randrange(3)
            if op == 0:
                roster.add_officer(rng.choice(pool))
            elif op == 1:
                roster.remove_officer(rng.choice(pool))
            else:
                roster.set_officer_slots(rng.randint(-1, 6))
            assert_slots_consistent(roster)
