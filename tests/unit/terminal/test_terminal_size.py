"""Tests for terminal dimension lookup and width fallback."""

from __future__ import annotations

import io
import os
import unittest
from unittest import mock

from dirtrail.errors import TerminalSizeUnavailable
from dirtrail.terminal import resolve_terminal_width, terminal_dimensions


class _FakeTty(io.StringIO):
    def fileno(self) -> int:
        return 99


class TerminalSizeTests(unittest.TestCase):
    def test_non_terminal_stream_raises(self) -> None:
        with self.assertRaises(TerminalSizeUnavailable):
            terminal_dimensions(io.StringIO())

    def test_terminal_dimensions_reports_columns_and_rows(self) -> None:
        with mock.patch("dirtrail.terminal.os.get_terminal_size", return_value=os.terminal_size((132, 40))):
            self.assertEqual(terminal_dimensions(_FakeTty()), (132, 40))

    def test_zero_columns_is_unavailable(self) -> None:
        with mock.patch("dirtrail.terminal.os.get_terminal_size", return_value=os.terminal_size((0, 0))):
            with self.assertRaises(TerminalSizeUnavailable):
                terminal_dimensions(_FakeTty())

    def test_resolve_width_prefers_override_then_terminal_then_fallback(self) -> None:
        self.assertEqual(resolve_terminal_width(50, fallback=90, stream=io.StringIO()), 50)
        self.assertEqual(resolve_terminal_width(None, fallback=90, stream=io.StringIO()), 90)
        with mock.patch("dirtrail.terminal.os.get_terminal_size", return_value=os.terminal_size((132, 40))):
            self.assertEqual(resolve_terminal_width(None, fallback=90, stream=_FakeTty()), 132)


if __name__ == "__main__":
    unittest.main()
