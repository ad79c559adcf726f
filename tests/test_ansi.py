"""Tests for display-width measurement and entry colourising."""

import stat
import unittest
from pathlib import Path

from lazyls import ansi as ansi_mod
from lazyls.entries import Entry


def make_entry(name: str, mode: int) -> Entry:
    return Entry(name=name, path=Path(name), mode=mode, size=0, mtime=0.0, uid=0, gid=0)


class DisplayWidthTests(unittest.TestCase):
    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(ansi_mod.text_display_width("日本"), 4)

    def test_combining_marks_take_no_columns(self) -> None:
        self.assertEqual(ansi_mod.text_display_width("e\u0301"), 1)

    def test_escape_sequences_do_not_count(self) -> None:
        self.assertEqual(ansi_mod.text_display_width("\x1b[34;1mdocs\x1b[0m"), 4)


class ColorizeTests(unittest.TestCase):
    def test_styles_follow_kind_precedence(self) -> None:
        palette = ansi_mod.DEFAULT_PALETTE
        link = make_entry("link", stat.S_IFLNK | 0o777)
        directory = make_entry("docs", stat.S_IFDIR | 0o755)
        script = make_entry("run.sh", stat.S_IFREG | 0o755)
        plain = make_entry("notes.txt", stat.S_IFREG | 0o644)

        self.assertEqual(ansi_mod.colorize(link, palette), "\x1b[36;1mlink")
        self.assertEqual(ansi_mod.colorize(directory, palette), "\x1b[34;1mdocs")
        self.assertEqual(ansi_mod.colorize(script, palette), "\x1b[32;1mrun.sh")
        self.assertEqual(ansi_mod.colorize(plain, palette), "\x1b[0mnotes.txt")

    def test_plain_palette_leaves_names_unstyled(self) -> None:
        entry = make_entry("docs", stat.S_IFDIR | 0o755)
        self.assertEqual(ansi_mod.colorize(entry, ansi_mod.PLAIN_PALETTE), "docs")


if __name__ == "__main__":
    unittest.main()
