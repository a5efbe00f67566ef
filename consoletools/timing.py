"""Elapsed wall-clock time between two explicitly recorded points."""

from __future__ import annotations

import time

from .errors import MissingTimePointError


class TimeMonitor:
    """Records a start and end point and reports whole seconds between them.

    Each point is truncated to whole seconds before subtracting, so the
    offset counts second boundaries crossed rather than rounding the
    duration. Reading the offset resets both points.
    """

    def __init__(self) -> None:
        self._start: float | None = None
        self._end: float | None = None

    def set_start_point(self) -> None:
        self._start = time.time()

    def set_end_point(self) -> None:
        self._end = time.time()

    def get_time_offset(self) -> int:
        if self._start is None:
            raise MissingTimePointError("missing start point")
        if self._end is None:
            raise MissingTimePointError("missing end point")
        offset = int(self._end) - int(self._start)
        self._start = None
        self._end = None
        return offset


__all__ = ["TimeMonitor"]
