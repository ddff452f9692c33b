"""Unit tests for the FileSystemTree class."""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from graverobber.exclusion_rules.default_rules import create_default_exclusion_rules
from graverobber.exclusion_rules.name_rules import ExtensionExclusionRules
from graverobber.file_system_tree.file_system_tree import DIRECTORY_GLYPH, FILE_GLYPH, INDENT, FileSystemTree


@pytest.fixture
def temp_directory(tmp_path):
    (tmp_path / "dir1").mkdir()
    (tmp_path / "dir1" / "file1.txt").touch()
    (tmp_path / "dir2").mkdir()
    (tmp_path / "dir2" / "file2.py").touch()
    (tmp_path / "dir2" / "file2.png").touch()
    (tmp_path / "dir2" / "nested").mkdir()
    (tmp_path / "dir2" / "nested" / "deep.txt").touch()
    return tmp_path


def test_file_system_tree_initialization(temp_directory):
    fs_tree = FileSystemTree(str(temp_directory))
    assert fs_tree.root_path == Path(temp_directory)
    assert fs_tree._tree is None


def test_root_path_is_made_absolute(temp_directory, monkeypatch):
    monkeypatch.chdir(temp_directory)
    fs_tree = FileSystemTree(".")
    assert fs_tree.root_path == Path(os.path.abspath("."))
    assert fs_tree.get_tree().path == os.path.abspath(".")


def test_file_system_tree_build(temp_directory):
    fs_tree = FileSystemTree(temp_directory)
    tree = fs_tree.get_tree()
    assert tree.name == temp_directory.name
    assert tree.is_dir
    assert {child.name for child in tree.children} == {"dir1", "dir2"}


def test_nodes_carry_absolute_paths(temp_directory):
    fs_tree = FileSystemTree(temp_directory)
    paths = {node.abs_path for node in fs_tree.walk()}
    assert str(temp_directory / "dir2" / "nested" / "deep.txt") in paths
    assert str(temp_directory / "dir1") in paths


def test_file_system_tree_with_exclusions(temp_directory):
    fs_tree = FileSystemTree(temp_directory, ExtensionExclusionRules([".png"]))
    names = {node.name for node in fs_tree.walk()}
    assert "file2.png" not in names
    assert "file2.py" in names


def test_excluded_directory_is_never_listed(temp_directory):
    (temp_directory / "node_modules").mkdir()
    (temp_directory / "node_modules" / "pkg.js").touch()
    rules = create_default_exclusion_rules(temp_directory / "graverobber.py")

    listed = []
    real_listdir = os.listdir

    def recording_listdir(path):
        listed.append(os.fspath(path))
        return real_listdir(path)

    with patch("graverobber.file_system_tree.file_system_tree.os.listdir", side_effect=recording_listdir):
        FileSystemTree(temp_directory, rules).get_tree()

    assert str(temp_directory / "node_modules") not in listed
    assert str(temp_directory / "dir2" / "nested") in listed


def test_file_and_directory_counts(temp_directory):
    fs_tree = FileSystemTree(temp_directory)
    assert fs_tree.get_file_count() == 4
    assert fs_tree.get_directory_count() == 3

    fs_tree = FileSystemTree(temp_directory, ExtensionExclusionRules([".png"]))
    assert fs_tree.get_file_count() == 3


def test_walk_is_preorder(temp_directory):
    fs_tree = FileSystemTree(temp_directory)
    order = [node.abs_path for node in fs_tree.walk()]
    for node in fs_tree.walk():
        if node.parent is not fs_tree.get_tree():
            assert order.index(node.parent.abs_path) < order.index(node.abs_path)


def test_listing_order_is_preserved(temp_directory):
    listing = ["zeta.txt", "alpha.txt", "mid.txt"]
    for name in listing:
        (temp_directory / "dir1" / name).touch()

    real_listdir = os.listdir

    def fake_listdir(path):
        if os.fspath(path) == str(temp_directory / "dir1"):
            return list(listing)
        return real_listdir(path)

    with patch("graverobber.file_system_tree.file_system_tree.os.listdir", side_effect=fake_listdir):
        fs_tree = FileSystemTree(temp_directory)
        dir1 = next(node for node in fs_tree.get_tree().children if node.name == "dir1")

    assert [child.name for child in dir1.children] == listing


def test_iterate_files(temp_directory):
    fs_tree = FileSystemTree(temp_directory, ExtensionExclusionRules([".png"]))
    files = set(fs_tree.iterate_files())
    assert files == {
        (str(temp_directory / "dir1" / "file1.txt"), os.path.join("dir1", "file1.txt")),
        (str(temp_directory / "dir2" / "file2.py"), os.path.join("dir2", "file2.py")),
        (str(temp_directory / "dir2" / "nested" / "deep.txt"), os.path.join("dir2", "nested", "deep.txt")),
    }


def test_tree_representation_single_branch(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "b").mkdir()
    (tmp_path / "a" / "b" / "c.txt").write_text("c")

    fs_tree = FileSystemTree(tmp_path)
    assert fs_tree.get_tree_representation() == (
        f"{DIRECTORY_GLYPH}a\n" f"  {DIRECTORY_GLYPH}b\n" f"    {FILE_GLYPH}c.txt\n"
    )


def test_tree_indentation_matches_depth(temp_directory):
    fs_tree = FileSystemTree(temp_directory)
    lines = list(fs_tree.stream_tree_representation())
    assert len(lines) == 7

    expected_depth = {"dir1": 0, "file1.txt": 1, "dir2": 0, "file2.py": 1, "file2.png": 1, "nested": 1, "deep.txt": 2}
    for line in lines:
        assert line.endswith("\n")
        stripped = line.lstrip(" ")
        indent = len(line) - len(stripped)
        glyph, name = stripped[0], stripped[1:-1]
        assert indent == 2 * expected_depth[name]
        assert glyph == (FILE_GLYPH if "." in name else DIRECTORY_GLYPH)


def test_tree_lines_follow_walk_order(temp_directory):
    fs_tree = FileSystemTree(temp_directory)
    names = [line.strip()[1:] for line in fs_tree.stream_tree_representation()]
    assert names == [node.name for node in fs_tree.walk()]


def test_empty_directory(tmp_path):
    (tmp_path / "empty").mkdir()
    fs_tree = FileSystemTree(tmp_path)
    assert fs_tree.get_tree_representation() == f"{DIRECTORY_GLYPH}empty\n"
    assert fs_tree.get_file_count() == 0
    assert fs_tree.get_directory_count() == 1


def test_empty_root(tmp_path):
    fs_tree = FileSystemTree(tmp_path)
    assert fs_tree.get_tree_representation() == ""
    assert list(fs_tree.iterate_files()) == []


def test_default_rules_tree(sample_project):
    rules = create_default_exclusion_rules(sample_project / "graverobber.py", sample_project / "report.txt")
    fs_tree = FileSystemTree(sample_project, rules)
    assert sorted(fs_tree.stream_tree_representation()) == sorted([f"{FILE_GLYPH}a.txt\n", f"{DIRECTORY_GLYPH}sub\n"])


def _stack_depth():
    frame, depth = sys._getframe(), 0
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


def test_deep_hierarchy_does_not_recurse(tmp_path):
    depth = 200
    current = tmp_path
    for _ in range(depth):
        current = current / "d"
        current.mkdir()
    (current / "leaf.txt").write_text("leaf")

    original_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(_stack_depth() + 60)
    try:
        lines = FileSystemTree(tmp_path).get_tree_representation().splitlines()
    finally:
        sys.setrecursionlimit(original_limit)

    assert len(lines) == depth + 1
    assert lines[-1] == INDENT * depth + f"{FILE_GLYPH}leaf.txt"


def test_nonexistent_root(tmp_path):
    fs_tree = FileSystemTree(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        fs_tree.get_tree()


def test_root_not_a_directory(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    with pytest.raises(NotADirectoryError):
        FileSystemTree(file_path).get_tree()


def test_listing_error_aborts_build(temp_directory):
    with patch("graverobber.file_system_tree.file_system_tree.os.listdir", side_effect=PermissionError("denied")):
        fs_tree = FileSystemTree(temp_directory)
        with pytest.raises(PermissionError):
            fs_tree.get_tree()
    assert fs_tree._tree is None


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_dangling_symlink_aborts_build(tmp_path):
    try:
        os.symlink(tmp_path / "nowhere", tmp_path / "broken")
    except OSError:
        pytest.skip("cannot create symlinks")

    with pytest.raises(FileNotFoundError):
        FileSystemTree(tmp_path).get_tree()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlinked_directory_is_followed(tmp_path):
    (tmp_path / "real").mkdir()
    (tmp_path / "real" / "inside.txt").write_text("x")
    try:
        os.symlink(tmp_path / "real", tmp_path / "link")
    except OSError:
        pytest.skip("cannot create symlinks")

    fs_tree = FileSystemTree(tmp_path)
    link = next(node for node in fs_tree.get_tree().children if node.name == "link")
    assert link.is_dir
    assert [child.name for child in link.children] == ["inside.txt"]


def test_refresh(temp_directory):
    fs_tree = FileSystemTree(temp_directory)
    assert fs_tree.get_file_count() == 4
    (temp_directory / "new.txt").touch()
    fs_tree.refresh()
    assert fs_tree.get_file_count() == 5
