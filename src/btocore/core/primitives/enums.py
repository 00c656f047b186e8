# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Optional


class FlatType(str, Enum):
    """
    Housing-unit categories offered by a BTO project.

    The enum value is the display label used in reports and listings.
    """

    TWO_ROOM = "2-Room"
    THREE_ROOM = "3-Room"

    @property
    def display_value(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: str) -> Optional["FlatType"]:
        """Look up enum member by its display label (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        return None


class MaritalStatus(str, Enum):
    """Marital status of an identity, as recorded at registration."""

    SINGLE = "Single"
    MARRIED = "Married"

    @property
    def display_value(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: str) -> Optional["MaritalStatus"]:
        """Look up enum member by its display label (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        return None


class RegistrationStatus(str, Enum):
    """
    Lifecycle state of an officer's registration to handle a project.

    Only APPROVED registrations bar the same identity from applying to
    that project as an applicant.
    """

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def display_value(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: str) -> Optional["RegistrationStatus"]:
        """Look up enum member by its display label (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        return None


class UserRole(str, Enum):
    """
    Capability set an identity presents.

    The same person (same NRIC) can be viewed as an applicant or as an
    officer candidate; see `User.as_role`.
    """

    APPLICANT = "Applicant"
    OFFICER = "HDBOfficer"
    MANAGER = "HDBManager"

    @classmethod
    def from_value(cls, value: str) -> Optional["UserRole"]:
        """Look up enum member by its string value."""
        for member in cls:
            if member.value == value:
                return member
        return None


class LedgerFailure(str, Enum):
    """
    Expected, recoverable reasons a ledger mutation was refused.

    Ledger operations return False and record one of these on
    `last_failure`; nothing is raised.
    """

    NO_UNITS_AVAILABLE = "No units available"  # Decrement at zero availability
    AT_CAPACITY = "At capacity"  # Increment with availability == total
    NO_SLOTS_AVAILABLE = "No officer slots available"
    ALREADY_ASSIGNED = "Officer already assigned"
    NOT_ASSIGNED = "Officer not assigned"


class IneligibilityReason(str, Enum):
    """
    Why an eligibility check answered False.

    Only used for diagnostics; `check_eligibility` callers see a bool.
    """

    WINDOW_CLOSED = "Project not open for application"
    NOT_APPLICANT = "Only applicants may apply"
    APPROVED_OFFICER = "Approved officer for this project"
    UNDERAGE = "Below minimum age"
    NO_TWO_ROOM = "Project offers no flat type open to singles"
    MARITAL_STATUS = "Unsupported marital status"
