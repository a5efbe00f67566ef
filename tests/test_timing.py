"""Tests for whole-second elapsed time measurement."""

from __future__ import annotations

import unittest
from unittest import mock

from consoletools.errors import MissingTimePointError
from consoletools.timing import TimeMonitor


class TimeMonitorTests(unittest.TestCase):
    def test_offset_truncates_each_point_to_seconds(self) -> None:
        monitor = TimeMonitor()
        with mock.patch("consoletools.timing.time.time", side_effect=[100.9, 103.1]):
            monitor.set_start_point()
            monitor.set_end_point()
        self.assertEqual(monitor.get_time_offset(), 3)

    def test_missing_start_point_raises(self) -> None:
        monitor = TimeMonitor()
        monitor.set_end_point()
        with self.assertRaisesRegex(MissingTimePointError, "missing start point"):
            monitor.get_time_offset()

    def test_missing_end_point_raises(self) -> None:
        monitor = TimeMonitor()
        monitor.set_start_point()
        with self.assertRaisesRegex(MissingTimePointError, "missing end point"):
            monitor.get_time_offset()

    def test_points_reset_after_successful_read(self) -> None:
        monitor = TimeMonitor()
        monitor.set_start_point()
        monitor.set_end_point()
        monitor.get_time_offset()
        with self.assertRaises(LookupError):
            monitor.get_time_offset()


if __name__ == "__main__":
    unittest.main()
