from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure returned by the materialization engine to
the interface layer once a diagram has been fully applied to disk.
"""

from dataclasses import dataclass, field
from typing import List

from mktree.domain.tree_models import EntryKind, ResolvedPath

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Outcome of a complete, successful materialization run.

    Failed runs never produce a result: the first filesystem error
    propagates to the caller instead.

    Attributes:
        base_dir: Absolute directory the hierarchy was created under.
        entries: Resolved paths in the order they were materialized.
    """
    base_dir: str
    entries: List[ResolvedPath] = field(default_factory=list)

    @property
    def directory_count(self) -> int:
        return sum(1 for e in self.entries if e.kind is EntryKind.DIRECTORY)

    @property
    def file_count(self) -> int:
        return sum(1 for e in self.entries if e.kind is EntryKind.FILE)

    @property
    def paths(self) -> List[str]:
        return [e.path for e in self.entries]
