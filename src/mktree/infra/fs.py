from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Materializes resolved tree paths on disk and reads diagram input. All
creation is idempotent: existing directories are accepted and existing
files are never truncated, so re-applying a diagram preserves any
content written since the previous run. Errors from the operating
system are not caught here.
"""

import logging
import os
from typing import List, Optional

from mktree.domain.tree_models import EntryKind, ResolvedPath

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_target(path: str, base_dir: str) -> str:
    """Anchor a diagram path under the base directory."""
    return os.path.join(base_dir, path)

# -----------------------------------------------------------------------------
# MATERIALIZATION API
# -----------------------------------------------------------------------------

def create_directory(path: str) -> None:
    """
    Create a directory and any missing ancestors.

    Args:
        path: Target directory path.

    Raises:
        OSError: If the directory cannot be created, including when a
            file already occupies the path.
    """
    os.makedirs(path, exist_ok=True)


def create_file_with_parents(path: str) -> None:
    """
    Ensure the parent chain exists, then create an empty file if absent.

    Any existing entry at the path, file or directory, is left untouched.

    Args:
        path: Target file path.

    Raises:
        OSError: If the parent chain or the file cannot be created.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    if os.path.lexists(path):
        return
    with open(path, "a", encoding="utf-8"):
        pass


def materialize(entry: ResolvedPath, base_dir: str) -> str:
    """
    Create the filesystem object described by a resolved path.

    Args:
        entry: The resolved diagram path.
        base_dir: Directory the diagram is rooted at.

    Returns:
        str: The absolute or base-relative path that was created.
    """
    target = resolve_target(entry.path, base_dir)
    if entry.kind is EntryKind.DIRECTORY:
        create_directory(target)
    else:
        create_file_with_parents(target)
    logger.debug(f"Materialized {entry.kind.value}: {target}")
    return target

# -----------------------------------------------------------------------------
# INPUT API
# -----------------------------------------------------------------------------

def read_lines(path: str) -> List[str]:
    """
    Read a UTF-8 diagram file as a list of lines.

    Raises:
        FileNotFoundError: If the path does not name an existing file.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()
