# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core building blocks: primitives and the identity model.
"""

from .identity import User, applicant, manager, officer

__all__ = [
    "User",
    "applicant",
    "manager",
    "officer",
]
