# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
btocore Core Primitives

Essential building blocks shared by the project ledgers and the
eligibility engine: enumerations, the immutable model base, settings and
input validation.
"""

from .enums import (
    FlatType,
    IneligibilityReason,
    LedgerFailure,
    MaritalStatus,
    RegistrationStatus,
    UserRole,
)
from .model import Model
from .settings import EligibilitySettings, GlobalSettings, ProjectSettings
from .validation import (
    InstantLike,
    clamp_non_negative,
    is_inverted_window,
    normalize_instant,
    utc_now,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "EligibilitySettings",
    "GlobalSettings",
    "ProjectSettings",
    # Enums
    "FlatType",
    "IneligibilityReason",
    "LedgerFailure",
    "MaritalStatus",
    "RegistrationStatus",
    "UserRole",
    # Validation
    "InstantLike",
    "clamp_non_negative",
    "is_inverted_window",
    "normalize_instant",
    "utc_now",
]
