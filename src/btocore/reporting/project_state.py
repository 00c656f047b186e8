# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Project state reporting.

Reports only format and present ledger contents; they never mutate a
project or recompute eligibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

import pandas as pd

from ..core.primitives import FlatType

if TYPE_CHECKING:
    from ..project.project import Project

INVENTORY_COLUMNS = ["Flat Type", "Available", "Total", "Booked"]


def unit_inventory_frame(project: "Project") -> pd.DataFrame:
    """
    Tabulate the unit inventory of a project.

    One row per flat type with positive capacity, in FlatType declaration
    order.

    Returns:
        DataFrame with columns Flat Type, Available, Total, Booked
    """
    rows = []
    for flat_type in FlatType:
        total = project.total_units_by_type(flat_type)
        if total <= 0:
            continue
        available = project.available_units_by_type(flat_type)
        rows.append(
            {
                "Flat Type": flat_type.value,
                "Available": available,
                "Total": total,
                "Booked": total - available,
            }
        )
    return pd.DataFrame(rows, columns=INVENTORY_COLUMNS)


def portfolio_inventory_frame(projects: Iterable["Project"]) -> pd.DataFrame:
    """Stack the unit inventories of several projects, keyed by project id."""
    frames = []
    for project in projects:
        df = unit_inventory_frame(project)
        df.insert(0, "Project ID", project.project_id)
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=["Project ID"] + INVENTORY_COLUMNS)
    return pd.concat(frames, ignore_index=True)


def format_project_state(project: "Project") -> str:
    """Human-readable summary of a project's inventory, slots and visibility."""
    lines: List[str] = [
        f"Project State for: {project.project_name} (ID: {project.project_id})",
        f"Neighborhood: {project.neighborhood}",
        "Flat Types and Units:",
    ]
    for row in unit_inventory_frame(project).itertuples(index=False):
        lines.append(f"- {row[0]}: {row[1]} available out of {row[2]} total")
    lines.append(
        f"Officer Slots: {project.available_officer_slots} available "
        f"out of {project.max_officer_slots}"
    )
    lines.append(f"Visibility: {'Visible' if project.is_visible else 'Hidden'}")
    return "\n".join(lines)
