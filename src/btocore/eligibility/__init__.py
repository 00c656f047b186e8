# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .engine import EligibilityDecision, EligibilityEngine

__all__ = [
    "EligibilityDecision",
    "EligibilityEngine",
]
