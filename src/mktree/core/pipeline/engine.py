from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates a complete diagram materialization:
1. Normalizes raw lines into (level, name) pairs.
2. Resolves each pair into a full relative path.
3. Creates every directory or file on disk, strictly in order.

The run is sequential and stops at the first filesystem error, which
propagates to the caller unchanged.
"""

import logging
import os
from typing import Callable, Iterable, List, Optional

from mktree.core.parsing.normalizer import LineNormalizer
from mktree.core.parsing.path_builder import PathStackBuilder
from mktree.domain.config import MktreeConfig, get_default_config
from mktree.domain.pipeline_models import PipelineResult
from mktree.domain.tree_models import ResolvedPath
from mktree.infra.fs import materialize, normalize_path

logger = logging.getLogger(__name__)

EntryCallback = Callable[[ResolvedPath], None]


def resolve_tree(
        raw_lines: Iterable[str],
        *,
        strict: bool = False,
        log: Optional[logging.Logger] = None,
) -> Iterable[ResolvedPath]:
    """
    Chain both parsing stages without touching the filesystem.

    Args:
        raw_lines: Diagram text lines.
        strict: Forwarded to the path builder.
        log: Logger handed to both stages.

    Returns:
        Iterable[ResolvedPath]: Lazy sequence of resolved paths.
    """
    tree_lines = LineNormalizer(log).normalize(raw_lines)
    return PathStackBuilder(strict=strict, log=log).build(tree_lines)


def run_pipeline(
        raw_lines: Iterable[str],
        config: Optional[MktreeConfig] = None,
        *,
        on_entry: Optional[EntryCallback] = None,
        log: Optional[logging.Logger] = None,
) -> PipelineResult:
    """
    Materialize a tree diagram under the configured base directory.

    Args:
        raw_lines: Diagram text lines.
        config: Run configuration. Defaults to the current directory.
        on_entry: Observer invoked with each entry before it is created.
        log: Logger for parser diagnostics.

    Returns:
        PipelineResult: Created entries in order.

    Raises:
        OSError: On the first directory or file that cannot be created.
    """
    cfg = config or get_default_config()
    log = log or logger
    base_dir = normalize_path(cfg.base_dir, os.getcwd())

    log.debug(f"Materializing tree under: {base_dir}")

    created: List[ResolvedPath] = []
    for entry in resolve_tree(raw_lines, strict=cfg.strict, log=log):
        if on_entry is not None:
            on_entry(entry)
        materialize(entry, base_dir)
        created.append(entry)

    log.debug(f"Created {len(created)} entries")
    return PipelineResult(base_dir=base_dir, entries=created)
