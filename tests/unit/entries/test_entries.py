"""Tests for directory enumeration into listing entries."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazyls.entries import scan_directory
from lazyls.errors import ListingError


class ScanDirectoryTests(unittest.TestCase):
    def test_scan_skips_hidden_entries_and_sorts_by_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("zeta.txt", "alpha.txt", ".hidden"):
                (root / name).write_text("x", encoding="utf-8")
            (root / "mid").mkdir()

            names = [entry.name for entry in scan_directory(root)]
            names_with_hidden = [entry.name for entry in scan_directory(root, show_hidden=True)]

        self.assertEqual(names, ["alpha.txt", "mid", "zeta.txt"])
        self.assertEqual(names_with_hidden, [".hidden", "alpha.txt", "mid", "zeta.txt"])

    def test_entries_expose_kind_flags_and_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            script = root / "run.sh"
            script.write_text("#!/bin/sh\n", encoding="utf-8")
            script.chmod(0o755)
            (root / "docs").mkdir()
            os.symlink("run.sh", root / "link")

            entries = {entry.name: entry for entry in scan_directory(root)}

        self.assertTrue(entries["run.sh"].is_executable)
        self.assertEqual(entries["run.sh"].size, len("#!/bin/sh\n"))
        self.assertEqual(entries["run.sh"].mode_string, "-rwxr-xr-x")
        self.assertTrue(entries["docs"].is_dir)
        self.assertTrue(entries["link"].is_symlink)
        self.assertFalse(entries["link"].is_dir)
        self.assertEqual(entries["link"].symlink_target, "run.sh")
        self.assertIsNone(entries["docs"].symlink_target)

    def test_directory_only_lists_the_directory_itself(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "target"
            root.mkdir()
            (root / "child").write_text("x", encoding="utf-8")

            entries = scan_directory(root, directory_only=True)

        self.assertEqual([entry.name for entry in entries], ["target"])
        self.assertTrue(entries[0].is_dir)

    def test_missing_directory_raises_listing_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(ListingError) as ctx:
                scan_directory(missing)
            with self.assertRaises(ListingError):
                scan_directory(missing, directory_only=True)

        self.assertEqual(str(ctx.exception), f"ls: {missing} - No such file or directory.")


if __name__ == "__main__":
    unittest.main()
