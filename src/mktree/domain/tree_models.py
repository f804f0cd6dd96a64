from __future__ import annotations

"""
Tree Diagram Data Models.

Provides the immutable value objects exchanged between the parsing stages:
normalized diagram lines, entries of the ancestor stack and the fully
resolved paths handed to the filesystem layer.
"""

from dataclasses import dataclass
from enum import Enum

from mktree.domain.constants import PATH_SEPARATOR

# -----------------------------------------------------------------------------
# PARSING STAGE MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeLine:
    """
    A diagram line reduced to its nesting depth and entry name.

    Attributes:
        level: Non-negative nesting depth derived from the indentation.
        name: Entry name with connectors and surrounding whitespace removed.
    """
    level: int
    name: str


@dataclass(frozen=True)
class PathStackEntry:
    """
    One open ancestor held by the path builder.

    Attributes:
        component: Path fragment contributed by this ancestor.
        level: Nesting depth the fragment was declared at.
    """
    component: str
    level: int


class EntryKind(Enum):
    """Filesystem object to materialize for a resolved path."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class ResolvedPath:
    """
    Full relative path reconstructed for a single diagram line.

    Attributes:
        path: Concatenation of all ancestor components, root first.
        level: Nesting depth of the originating diagram line.
        kind: Directory when the path ends with the separator, file otherwise.
    """
    path: str
    level: int
    kind: EntryKind

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def classify_path(path: str) -> EntryKind:
    """Return the entry kind implied by the trailing separator of a path."""
    if path.endswith(PATH_SEPARATOR):
        return EntryKind.DIRECTORY
    return EntryKind.FILE
