"""Tests for breadcrumb chain construction and cross-box navigation state."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtrail.box import DirectoryBox
from dirtrail.chain import ancestor_paths, build_chain, resolve_target
from dirtrail.entries import ItemState
from dirtrail.errors import DirectoryReadError


def _states(box: DirectoryBox, state: ItemState) -> list[Path]:
    return [item.path for item in box.items if item.state is state]


class BreadcrumbChainTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name).resolve()
        self.target = self.root / "one" / "two" / "three"
        self.target.mkdir(parents=True)
        (self.root / "one" / "sibling.txt").write_text("", encoding="utf-8")
        (self.target / "b.py").write_text("", encoding="utf-8")
        (self.target / "a.py").write_text("", encoding="utf-8")

    def test_chain_runs_from_filesystem_root_to_target(self) -> None:
        chain = build_chain(self.target)

        self.assertEqual(len(chain), len(self.target.parents) + 1)
        self.assertEqual(chain[0].path.parent, chain[0].path)
        self.assertEqual(chain.leaf.path, self.target)
        self.assertEqual(chain.target, self.target)
        self.assertEqual([box.path for box in chain], ancestor_paths(self.target))

    def test_each_non_terminal_box_marks_next_path(self) -> None:
        chain = build_chain(self.target)

        for box, next_box in zip(chain.boxes, chain.boxes[1:]):
            self.assertEqual(_states(box, ItemState.DIRECTORY_IN_PATH), [next_box.path])
        self.assertEqual(_states(chain.leaf, ItemState.DIRECTORY_IN_PATH), [])

    def test_leaf_selects_first_sorted_item_only(self) -> None:
        chain = build_chain(self.target)

        selected = [path for box in chain for path in _states(box, ItemState.SELECTED)]
        self.assertEqual(selected, [self.target / "a.py"])
        self.assertEqual(chain.selected_item().path, self.target / "a.py")

    def test_empty_leaf_has_no_selection(self) -> None:
        empty = self.target / "empty"
        empty.mkdir()

        chain = build_chain(empty)

        self.assertIsNone(chain.selected_item())
        self.assertEqual(chain.leaf.items, [])

    def test_relative_target_is_resolved(self) -> None:
        relative = self.target / ".." / "three"
        chain = build_chain(relative)
        self.assertEqual(chain.leaf.path, self.target)

    def test_file_target_selects_the_file_in_its_parent(self) -> None:
        chain = build_chain(self.target / "b.py")

        self.assertEqual(chain.leaf.path, self.target)
        self.assertEqual(chain.selected_item().path, self.target / "b.py")
        self.assertEqual(resolve_target(self.target / "b.py"), (self.target, self.target / "b.py"))

    def test_hidden_ancestors_stay_visible_when_hiding_dot_entries(self) -> None:
        hidden = self.root / ".cache" / "inner"
        hidden.mkdir(parents=True)

        chain = build_chain(hidden, show_hidden=False)

        root_box = next(box for box in chain if box.path == self.root)
        self.assertEqual(_states(root_box, ItemState.DIRECTORY_IN_PATH), [self.root / ".cache"])

    def test_unreadable_ancestor_fails_whole_chain(self) -> None:
        real_from_path = DirectoryBox.from_path.__func__
        unreadable = self.root / "one"

        def fake_from_path(cls, path, *args, **kwargs):
            if path == unreadable:
                raise DirectoryReadError(path, PermissionError(13, "Permission denied"))
            return real_from_path(cls, path, *args, **kwargs)

        with mock.patch.object(DirectoryBox, "from_path", classmethod(fake_from_path)):
            with self.assertRaises(DirectoryReadError) as ctx:
                build_chain(self.target)
        self.assertEqual(ctx.exception.path, unreadable)

    def test_inaccessible_target_raises_directory_read_error(self) -> None:
        denied = PermissionError(13, "Permission denied")
        with mock.patch("pathlib.Path.is_dir", side_effect=denied):
            with self.assertRaises(DirectoryReadError) as ctx:
                resolve_target(self.target)
            with self.assertRaises(DirectoryReadError):
                build_chain(self.target)
        self.assertIs(ctx.exception.cause, denied)
        self.assertIn("Permission denied", str(ctx.exception))


class AncestorPathTests(unittest.TestCase):
    def test_ancestor_paths_are_root_first(self) -> None:
        paths = ancestor_paths(Path("/usr/local/bin"))
        self.assertEqual(paths, [Path("/"), Path("/usr"), Path("/usr/local"), Path("/usr/local/bin")])

    def test_root_is_its_own_only_ancestor(self) -> None:
        self.assertEqual(ancestor_paths(Path("/")), [Path("/")])


if __name__ == "__main__":
    unittest.main()
