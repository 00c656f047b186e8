# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Application window and visibility gate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

import pandas as pd

from ..core.primitives import (
    InstantLike,
    is_inverted_window,
    normalize_instant,
    utc_now,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], pd.Timestamp]


@dataclass
class ScheduleWindow:
    """
    Open/close instants plus a visibility flag.

    A project accepts applications only while visible and while "now"
    lies within [open_date, close_date], inclusive on both ends. "Now" is
    read from `clock` on every call; nothing is cached. All instants,
    including the clock reading, are compared as naive UTC. An inverted window
    (close before open) is accepted and simply never open.
    """

    open_date: pd.Timestamp
    close_date: pd.Timestamp
    is_visible: bool = True
    clock: Clock = field(default=utc_now, repr=False, compare=False)
    warn_on_inverted: bool = field(default=True, repr=False, compare=False)

    def __post_init__(self):
        self.open_date = normalize_instant(self.open_date)
        self.close_date = normalize_instant(self.close_date)
        self._check_ordering()

    def _check_ordering(self) -> None:
        if self.warn_on_inverted and is_inverted_window(
            self.open_date, self.close_date
        ):
            logger.warning(
                f"Application window closes ({self.close_date}) before it opens "
                f"({self.open_date}); it will never be open"
            )

    def set_open_date(self, value: InstantLike) -> None:
        self.open_date = normalize_instant(value)
        self._check_ordering()

    def set_close_date(self, value: InstantLike) -> None:
        self.close_date = normalize_instant(value)
        self._check_ordering()

    def set_visible(self, visible: bool) -> None:
        self.is_visible = visible

    def contains(self, instant: InstantLike) -> bool:
        """Check whether an instant lies inside the window, ignoring visibility."""
        instant = normalize_instant(instant)
        return self.open_date <= instant <= self.close_date

    def is_open_for_application(self, now: Optional[InstantLike] = None) -> bool:
        if not self.is_visible:
            return False
        return self.contains(self.clock() if now is None else now)
