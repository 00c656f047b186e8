# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Presentation-ready views of project state.
"""

from .project_state import (
    INVENTORY_COLUMNS,
    format_project_state,
    portfolio_inventory_frame,
    unit_inventory_frame,
)

__all__ = [
    "INVENTORY_COLUMNS",
    "format_project_state",
    "portfolio_inventory_frame",
    "unit_inventory_frame",
]
