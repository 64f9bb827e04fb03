"""Tests for terminal cell measurement, clipping and centering."""

from __future__ import annotations

import unittest

from dirtrail.ansi import ELLIPSIS, center_text, clip_to_width, display_width, printable_name, strip_ansi


class DisplayWidthTests(unittest.TestCase):
    def test_display_width_ignores_escapes_and_counts_wide_chars(self) -> None:
        self.assertEqual(display_width("\x1b[01m\x1b[34mabc\x1b[39;49;00m"), 3)
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(display_width("é"), 1)

    def test_strip_ansi(self) -> None:
        self.assertEqual(strip_ansi("\x1b[04mname\x1b[39;49;00m"), "name")

    def test_clip_to_width(self) -> None:
        self.assertEqual(clip_to_width("short", 10), "short")
        self.assertEqual(clip_to_width("abcdefgh", 5), "abcd" + ELLIPSIS)
        self.assertEqual(clip_to_width("abc", 0), "")
        self.assertEqual(clip_to_width("日本語", 4), "日" + ELLIPSIS)

    def test_printable_name_replaces_undecodable_bytes(self) -> None:
        self.assertEqual(printable_name("plain.txt"), "plain.txt")
        self.assertEqual(printable_name("bad\udcff.txt"), "bad�.txt")
        self.assertEqual(printable_name("日本"), "日本")
        printable_name("lone\ud800").encode("utf-8")

    def test_center_text_puts_odd_space_on_right(self) -> None:
        self.assertEqual(center_text("ab", 5), " ab  ")
        self.assertEqual(center_text("abc", 5), " abc ")
        self.assertEqual(center_text("toolong", 3), "toolong")


if __name__ == "__main__":
    unittest.main()
