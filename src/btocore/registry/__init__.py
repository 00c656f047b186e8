# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Collaborator ports and their in-memory implementations.
"""

from .memory import (
    InMemoryOfficerRegistrations,
    NullBookingNotifier,
    RecordingBookingNotifier,
)
from .ports import BookingNotifier, OfficerRegistration, OfficerRegistrationQuery

__all__ = [
    "BookingNotifier",
    "InMemoryOfficerRegistrations",
    "NullBookingNotifier",
    "OfficerRegistration",
    "OfficerRegistrationQuery",
    "RecordingBookingNotifier",
]
