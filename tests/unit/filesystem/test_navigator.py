"""Tests for the interactive directory navigator session.

Sessions run against temporary directories with scripted token input.
Where more than one entry is listed, sorting is enabled so indices are stable.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from consoletools.console import TextRenderer, TokenReader
from consoletools.filesystem import DirectoryNavigator, Listing, list_directory
from consoletools.filesystem.navigator import MISSING_FILE_NOTICE, Step
from consoletools.ui_theme import PLAIN_THEME


def _navigator(root: Path, script: str = "", **options) -> tuple[DirectoryNavigator, io.StringIO]:
    out = io.StringIO()
    navigator = DirectoryNavigator(
        root,
        reader=TokenReader(io.StringIO(script)),
        renderer=TextRenderer(out, color=False),
        theme=PLAIN_THEME,
        **options,
    )
    return navigator, out


def _snapshot(root: Path) -> list[str]:
    return sorted(str(path.relative_to(root)) for path in root.rglob("*"))


class SessionTests(unittest.TestCase):
    def test_exit_immediately_returns_empty_and_changes_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("x", encoding="utf-8")
            before = _snapshot(root)

            navigator, _out = _navigator(root, "0\n")
            self.assertEqual(navigator.run(), "")
            self.assertEqual(_snapshot(root), before)

    def test_end_of_input_behaves_like_exit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            navigator, _out = _navigator(Path(tmp), "")
            self.assertEqual(navigator.run(), "")

    def test_render_numbers_entries_and_shows_menu(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            (root / "readme.md").write_text("", encoding="utf-8")

            navigator, out = _navigator(root, "0\n", sort_entries=True)
            navigator.run()

        screen = out.getvalue()
        self.assertTrue(screen.startswith("DIRS / FILES:\n\n"))
        self.assertIn("1. (Dir)\tdocs\n", screen)
        self.assertIn("2. (File)\treadme.md\n", screen)
        self.assertIn(f"CURRENT_DIR: {root}\n\n", screen)
        self.assertIn("b. BACK\nc. CREATE FILE\n0. EXIT\n", screen)
        self.assertNotIn("SELECT CURRENT DIRECTORY", screen)
        self.assertTrue(screen.endswith("Select menu item: "))

    def test_descend_then_select_file_returns_joined_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            target = root / "docs" / "guide.md"
            target.write_text("# guide\n", encoding="utf-8")

            navigator, out = _navigator(root, "1\n1\n")
            result = navigator.run()

        self.assertEqual(result, str(root / "docs" / "guide.md"))
        self.assertIn(f"CURRENT_DIR: {root / 'docs'}\n", out.getvalue())

    def test_back_then_select_reaches_sibling(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").mkdir()
            (root / "z.txt").write_text("", encoding="utf-8")

            navigator, _out = _navigator(root / "a", "b 2", sort_entries=True)
            self.assertEqual(navigator.run(), str(root / "z.txt"))

    def test_invalid_tokens_rerender_without_moving(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "only.txt").write_text("", encoding="utf-8")

            navigator, out = _navigator(root, "7 x 01 d 0")
            self.assertEqual(navigator.run(), "")

        screen = out.getvalue()
        self.assertEqual(screen.count("DIRS / FILES:"), 5)
        self.assertEqual(screen.count(f"CURRENT_DIR: {root}\n"), 5)

    def test_create_file_then_cancel_keeps_created_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            navigator, out = _navigator(root, "c\nnew.txt\n0\n")
            self.assertEqual(navigator.run(), "")

            created = root / "new.txt"
            self.assertTrue(created.is_file())
            self.assertEqual(created.read_bytes(), b"")
            self.assertEqual(_snapshot(root), ["new.txt"])
            self.assertIn("Enter filename: ", out.getvalue())
            self.assertIn("1. (File)\tnew.txt", out.getvalue())

    def test_create_failure_is_reported_and_session_continues(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            existing = root / "keep.txt"
            existing.write_text("data", encoding="utf-8")

            navigator, out = _navigator(root, "c keep.txt c ../up.txt 1")
            result = navigator.run()

            self.assertEqual(existing.read_text(encoding="utf-8"), "data")
            self.assertFalse((root.parent / "up.txt").exists())
        self.assertEqual(result, str(existing))
        self.assertIn("already exists", out.getvalue())
        self.assertIn("invalid filename", out.getvalue())

    def test_unreadable_directory_falls_back_to_parent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            missing = root / "gone"

            navigator, out = _navigator(missing, "0")
            self.assertEqual(navigator.run(), "")

        screen = out.getvalue()
        self.assertIn(f"Cannot open directory: {missing}", screen)
        self.assertIn(f"CURRENT_DIR: {root}\n", screen)
        self.assertNotIn(f"CURRENT_DIR: {missing}\n", screen)

    def test_unreadable_root_still_reads_commands(self) -> None:
        root = Path(Path.cwd().anchor)
        denied = Listing(directory=root, error=PermissionError(13, "Permission denied"))
        with mock.patch("consoletools.filesystem.navigator.list_directory", return_value=denied):
            navigator, out = _navigator(root, "b 0")
            self.assertEqual(navigator.run(), "")

        self.assertEqual(out.getvalue().count("Cannot open directory"), 2)


class DirectorySelectionTests(unittest.TestCase):
    def test_select_current_directory_returns_it(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()

            navigator, out = _navigator(root, "1 d", allow_directory_selection=True)
            self.assertEqual(navigator.run(), str(root / "sub"))
        self.assertIn("d. SELECT CURRENT DIRECTORY\n", out.getvalue())

    def test_select_directory_is_ignored_without_variant(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            navigator, _out = _navigator(Path(tmp), "d 0")
            self.assertEqual(navigator.run(), "")


class DispatchTests(unittest.TestCase):
    def test_back_at_root_keeps_root(self) -> None:
        root = Path(Path.cwd().anchor)
        navigator, _out = _navigator(root)
        step = navigator.dispatch(Listing(directory=root), "b")
        self.assertEqual(step, Step(root))

    def test_directory_selection_descends_by_exactly_one_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "child").mkdir()
            navigator, _out = _navigator(root)
            step = navigator.dispatch(list_directory(root), "1")
        self.assertEqual(step, Step(root / "child"))

    def test_out_of_range_index_is_a_no_op(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("", encoding="utf-8")
            navigator, _out = _navigator(root)
            step = navigator.dispatch(list_directory(root), "2")
        self.assertEqual(step, Step(root))

    def test_file_removed_after_render_reports_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            doomed = root / "doomed.txt"
            doomed.write_text("", encoding="utf-8")
            navigator, _out = _navigator(root)

            listing = list_directory(root)
            os.remove(doomed)
            step = navigator.dispatch(listing, "1")

        self.assertFalse(step.done)
        self.assertEqual(step.path, root)
        self.assertEqual(step.notice, MISSING_FILE_NOTICE)

    def test_stale_listing_index_applies_to_its_own_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "inner").mkdir()
            (root / "inner" / "deep").mkdir()
            navigator, _out = _navigator(root)

            outer = list_directory(root)
            step = navigator.dispatch(outer, "1")
        self.assertEqual(step.path, root / "inner")


if __name__ == "__main__":
    unittest.main()
