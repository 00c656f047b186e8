# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for btocore testing.

This module provides convenient factories for identities and projects
with a fixed clock, so window checks never depend on wall-clock time.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import pytest

from btocore.core import User, applicant, manager, officer
from btocore.core.primitives import FlatType, MaritalStatus
from btocore.project import Project
from btocore.registry import InMemoryOfficerRegistrations, RecordingBookingNotifier

NOW = pd.Timestamp("2026-06-15 12:00:00")
OPEN_DATE = pd.Timestamp("2026-01-01")
CLOSE_DATE = pd.Timestamp("2026-12-31")


def fixed_clock() -> pd.Timestamp:
    return NOW


# Identity Utilities
def create_manager() -> User:
    return manager("T8765432F", "Jessica", 26, MaritalStatus.SINGLE)


def create_applicant(
    age: int = 35,
    marital_status: MaritalStatus = MaritalStatus.SINGLE,
    nric: str = "S1234567A",
) -> User:
    return applicant(nric, "John", age, marital_status)


def create_officer(nric: str = "T2109876H", name: str = "Daniel") -> User:
    return officer(nric, name, 36, MaritalStatus.SINGLE)


# Project Utilities
def create_test_project(
    project_id: str = "P001",
    total_units: Optional[Dict[FlatType, int]] = None,
    officer_slots: int = 3,
    is_visible: bool = True,
    open_date=OPEN_DATE,
    close_date=CLOSE_DATE,
    booking_notifier=None,
) -> Project:
    """
    Create a project that is open at the fixed test clock.

    Example:
        >>> project = create_test_project(total_units={FlatType.TWO_ROOM: 2})
        >>> project.is_open_for_application()
        True
    """
    if total_units is None:
        total_units = {FlatType.TWO_ROOM: 2, FlatType.THREE_ROOM: 3}
    return Project(
        project_id=project_id,
        project_name="Acacia Breeze",
        neighborhood="Yishun",
        total_units=total_units,
        application_open_date=open_date,
        application_close_date=close_date,
        manager_in_charge=create_manager(),
        officer_slots=officer_slots,
        is_visible=is_visible,
        booking_notifier=booking_notifier,
        clock=fixed_clock,
    )


@pytest.fixture
def project() -> Project:
    return create_test_project()


@pytest.fixture
def registrations() -> InMemoryOfficerRegistrations:
    return InMemoryOfficerRegistrations()


@pytest.fixture
def notifier() -> RecordingBookingNotifier:
    return RecordingBookingNotifier()
