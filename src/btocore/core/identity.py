# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Identity model for system users.

A single identity record carries the personal attributes (NRIC, name,
age, marital status) and a role tag. The same person can be re-presented
under another role with `as_role`, which is how the eligibility engine
looks a candidate up in the officer-registration store.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .primitives.enums import MaritalStatus, UserRole
from .primitives.model import Model


class User(Model):
    """Identity record with an explicit role tag."""

    # Core Identity
    nric: str = Field(..., description="National registration identity number")
    name: str = Field(..., description="Display name")
    age: int = Field(..., ge=0, description="Age in whole years")
    marital_status: MaritalStatus = Field(..., description="Marital status")
    role: UserRole = Field(default=UserRole.APPLICANT, description="Capability set")

    @field_validator("nric")
    @classmethod
    def normalize_nric(cls, v: str) -> str:
        """NRICs are matched case-insensitively; store them upper-cased."""
        v = v.strip().upper()
        if not v:
            raise ValueError("NRIC must not be empty")
        return v

    @property
    def is_applicant(self) -> bool:
        return self.role == UserRole.APPLICANT

    @property
    def is_officer(self) -> bool:
        return self.role == UserRole.OFFICER

    @property
    def is_manager(self) -> bool:
        return self.role == UserRole.MANAGER

    def as_role(self, role: UserRole) -> "User":
        """Return the same identity presented with a different role."""
        if role == self.role:
            return self
        return self.model_copy(update={"role": role})

    def __eq__(self, other: Any) -> bool:
        # Identity is the NRIC, whatever role it is presented under
        if not isinstance(other, User):
            return NotImplemented
        return self.nric == other.nric

    def __hash__(self) -> int:
        return hash(self.nric)

    def __str__(self) -> str:
        """Return string representation of the user."""
        return f"{self.name} ({self.role.value})"


def applicant(
    nric: str, name: str, age: int, marital_status: MaritalStatus
) -> User:
    """Create an applicant identity."""
    return User(nric=nric, name=name, age=age, marital_status=marital_status)


def officer(nric: str, name: str, age: int, marital_status: MaritalStatus) -> User:
    """Create an HDB officer identity."""
    return User(
        nric=nric,
        name=name,
        age=age,
        marital_status=marital_status,
        role=UserRole.OFFICER,
    )


def manager(nric: str, name: str, age: int, marital_status: MaritalStatus) -> User:
    """Create an HDB manager identity."""
    return User(
        nric=nric,
        name=name,
        age=age,
        marital_status=marital_status,
        role=UserRole.MANAGER,
    )


__all__ = [
    "User",
    "applicant",
    "manager",
    "officer",
]
