from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates idempotent directory and file creation, preservation of
existing content, error propagation and diagram file reading.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from mktree.domain.tree_models import EntryKind, ResolvedPath
from mktree.infra.fs import (
    create_directory,
    create_file_with_parents,
    materialize,
    normalize_path,
    read_lines,
)

# -----------------------------------------------------------------------------
# CREATION TESTS
# -----------------------------------------------------------------------------

def test_create_directory_is_recursive_and_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "nested" / "dir"

    create_directory(str(target))
    create_directory(str(target))

    assert target.is_dir()


def test_create_file_with_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "file.txt"

    create_file_with_parents(str(target))

    assert target.is_file()
    assert target.read_bytes() == b""


def test_create_file_does_not_truncate(tmp_path: Path) -> None:
    target = tmp_path / "keep.txt"
    target.write_text("precious", encoding="utf-8")

    create_file_with_parents(str(target))

    assert target.read_text(encoding="utf-8") == "precious"


def test_create_file_over_existing_directory_is_a_no_op(tmp_path: Path) -> None:
    target = tmp_path / "src"
    target.mkdir()
    (target / "inner.txt").write_text("x", encoding="utf-8")

    create_file_with_parents(str(target))
    create_file_with_parents(str(tmp_path / "."))

    assert target.is_dir()
    assert (target / "inner.txt").read_text(encoding="utf-8") == "x"


def test_create_file_in_current_directory(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    create_file_with_parents("top.txt")

    assert (tmp_path / "top.txt").is_file()


def test_directory_over_existing_file_fails(tmp_path: Path) -> None:
    (tmp_path / "clash").write_text("", encoding="utf-8")

    with pytest.raises(FileExistsError):
        create_directory(str(tmp_path / "clash"))


def test_permission_errors_propagate() -> None:
    with patch("os.makedirs", side_effect=PermissionError("Permission Denied")):
        with pytest.raises(PermissionError, match="Permission Denied"):
            create_file_with_parents("/root/forbidden/file.txt")


def test_materialize_dispatches_on_kind(tmp_path: Path) -> None:
    materialize(ResolvedPath("pkg/", 0, EntryKind.DIRECTORY), str(tmp_path))
    materialize(ResolvedPath("pkg/mod.py", 1, EntryKind.FILE), str(tmp_path))

    assert (tmp_path / "pkg").is_dir()
    assert (tmp_path / "pkg" / "mod.py").is_file()

# -----------------------------------------------------------------------------
# PATH AND INPUT TESTS
# -----------------------------------------------------------------------------

def test_normalize_path_expansion() -> None:
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.endswith(os.path.join("my_folder", "sub"))

    assert normalize_path("", fallback="/base") == os.path.abspath("/base")


def test_read_lines_strips_terminators(tmp_path: Path) -> None:
    tree = tmp_path / "tree.txt"
    tree.write_bytes("root/\r\n├── a.txt\n".encode("utf-8"))

    assert read_lines(str(tree)) == ["root/", "├── a.txt"]


def test_read_lines_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_lines(str(tmp_path / "missing.txt"))

    with pytest.raises(FileNotFoundError):
        read_lines(str(tmp_path))
