# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
btocore - BTO Project Inventory and Eligibility Engine

Tracks flat-type unit inventory, officer staffing slots and application
windows for Build-To-Order housing projects, and decides whether an
applicant may apply to a given project.

Key Entry Points:
- btocore.project.Project - Inventory, officer slots and schedule window
- btocore.eligibility.EligibilityEngine - Eligibility decisions
- btocore.service.ProjectService - Locked access to shared projects
- btocore.reporting - Project state tables

Example Usage:
    ```python
    from btocore.core import applicant, manager
    from btocore.core.primitives import FlatType, MaritalStatus
    from btocore.project import Project
    from btocore.registry import InMemoryOfficerRegistrations

    project = Project(
        project_id="P001",
        project_name="Acacia Breeze",
        neighborhood="Yishun",
        total_units={FlatType.TWO_ROOM: 2},
        application_open_date="2026-01-01",
        application_close_date="2026-12-31",
        manager_in_charge=manager("T1234567J", "Jessica", 26, MaritalStatus.SINGLE),
        officer_slots=3,
    )
    user = applicant("S1234567A", "John", 35, MaritalStatus.SINGLE)
    project.check_eligibility(user, registrations=InMemoryOfficerRegistrations())
    ```
"""

# Library logging: applications configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "eligibility",
    "project",
    "registry",
    "reporting",
    "service",
]


_LAZY_MODULES = {
    "core": "btocore.core",
    "eligibility": "btocore.eligibility",
    "project": "btocore.project",
    "registry": "btocore.registry",
    "reporting": "btocore.reporting",
    "service": "btocore.service",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'btocore' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
