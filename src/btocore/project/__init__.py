# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Project aggregate and its ledgers.
"""

from .inventory import UnitInventory
from .officers import OfficerRoster
from .project import Project
from .schedule import Clock, ScheduleWindow

__all__ = [
    "Clock",
    "OfficerRoster",
    "Project",
    "ScheduleWindow",
    "UnitInventory",
]
