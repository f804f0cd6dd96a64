from __future__ import annotations

"""
Unit tests for the domain models and run configuration.
"""

import dataclasses
import os

import pytest

from mktree.domain.config import MktreeConfig, get_default_config, merge_config
from mktree.domain.pipeline_models import PipelineResult
from mktree.domain.tree_models import (
    EntryKind,
    ResolvedPath,
    TreeLine,
    classify_path,
)


def test_classify_path_by_trailing_separator():
    assert classify_path("a/b/") is EntryKind.DIRECTORY
    assert classify_path("a/b") is EntryKind.FILE
    assert classify_path("a/b.d") is EntryKind.FILE


def test_models_are_immutable():
    line = TreeLine(level=0, name="a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.level = 1  # type: ignore[misc]


def test_pipeline_result_counts():
    result = PipelineResult(
        base_dir="/tmp/x",
        entries=[
            ResolvedPath("a/", 0, EntryKind.DIRECTORY),
            ResolvedPath("a/b", 1, EntryKind.FILE),
            ResolvedPath("a/c", 1, EntryKind.FILE),
        ],
    )

    assert result.directory_count == 1
    assert result.file_count == 2
    assert result.paths == ["a/", "a/b", "a/c"]


def test_default_config_targets_working_directory():
    cfg = get_default_config()

    assert cfg.base_dir == os.getcwd()
    assert cfg.verbose is False
    assert cfg.strict is False
    assert cfg.log_level == "WARNING"


def test_merge_config_ignores_none_values():
    base = MktreeConfig(base_dir="/base", input_file="tree.txt")
    merged = merge_config(base, input_file=None, verbose=True)

    assert merged.input_file == "tree.txt"
    assert merged.verbose is True
    assert merged.log_level == "DEBUG"
    assert base.verbose is False
