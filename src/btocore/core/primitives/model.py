# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable value objects (identities, settings, registration records).
    Mutable project state (unit counts, officer rosters) lives in dataclasses.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Identities are shared between projects and must not drift
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
