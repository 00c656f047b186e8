# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .enums import FlatType
from .model import Model


class EligibilitySettings(Model):
    """
    Demographic thresholds applied by the eligibility engine.

    Defaults follow the BTO rules: singles aged 35 and above may only take
    2-Room flats, married couples qualify from 21.

    Usage Examples:
        # Standard rules
        settings = EligibilitySettings()

        # Pilot scheme with a lower single-applicant age
        settings = EligibilitySettings(single_min_age=30)
    """

    single_min_age: int = Field(
        default=35, ge=0, description="Minimum age for SINGLE applicants."
    )
    married_min_age: int = Field(
        default=21, ge=0, description="Minimum age for MARRIED applicants."
    )
    single_flat_type: FlatType = Field(
        default=FlatType.TWO_ROOM,
        description=(
            "Flat type a project must register for SINGLE applicants to qualify. "
            "Only registration matters, not current availability."
        ),
    )


class ProjectSettings(Model):
    """Defaults applied when projects are created through the service layer."""

    default_officer_slots: int = Field(
        default=10, ge=0, description="Officer slots for a new project."
    )
    visible_on_creation: bool = Field(
        default=True, description="Whether new projects start visible."
    )
    warn_on_inverted_window: bool = Field(
        default=True,
        description=(
            "Log a warning when the close date precedes the open date. "
            "Such windows are accepted but never open."
        ),
    )


class GlobalSettings(Model):
    """Top-level container for all engine configuration."""

    eligibility: EligibilitySettings = Field(default_factory=EligibilitySettings)
    project: ProjectSettings = Field(default_factory=ProjectSettings)
