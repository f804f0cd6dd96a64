from __future__ import annotations

"""
Hierarchical Path Builder.

Second parsing stage. Reconstructs the full relative path of every
diagram line from its nesting level alone, by keeping a stack of the
currently open ancestors and unwinding it on sibling and ascent
transitions.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from mktree.domain.constants import PATH_SEPARATOR
from mktree.domain.tree_models import (
    PathStackEntry,
    ResolvedPath,
    TreeLine,
    classify_path,
)

logger = logging.getLogger(__name__)

NO_LEVEL = -1


class TreeStructureError(ValueError):
    """Raised in strict mode when a line cannot be attached to an open ancestor."""

    def __init__(self, line: TreeLine, reason: str):
        super().__init__(f"Cannot place '{line.name}' at level {line.level}: {reason}")
        self.line = line
        self.reason = reason

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class PathStackBuilder:
    """
    Level-driven state machine over a stack of (component, level) entries.

    The stack belongs to this instance alone. Levels stored in it are
    strictly increasing from bottom to top after every update.

    In the default permissive mode any input sequence produces output:
    irregular level jumps simply attach the entry to whatever remains on
    the stack. Strict mode rejects lines that would land between two
    open levels or under a file.
    """

    def __init__(self, strict: bool = False, log: Optional[logging.Logger] = None):
        self.strict = strict
        self._log = log or logger
        self._stack: List[PathStackEntry] = []
        self._current_level = NO_LEVEL

    @property
    def stack(self) -> Tuple[PathStackEntry, ...]:
        return tuple(self._stack)

    @property
    def current_level(self) -> int:
        return self._current_level

    def reset(self) -> None:
        self._stack.clear()
        self._current_level = NO_LEVEL

    def build(self, lines: Iterable[TreeLine]) -> Iterator[ResolvedPath]:
        """
        Lazily resolve the full path of each TreeLine in order.

        Args:
            lines: Normalized diagram lines.

        Yields:
            ResolvedPath: The path of each line, tagged with its level and kind.

        Raises:
            TreeStructureError: Only in strict mode.
        """
        self.reset()
        for line in lines:
            yield self.advance(line)

    def advance(self, line: TreeLine) -> ResolvedPath:
        """Apply one line to the stack and return its resolved path."""
        level = line.level

        if level > self._current_level:
            self._log.debug(f"Deeper level: {level} > {self._current_level}")
            if self.strict:
                self._check_parent(line)
        elif level == self._current_level:
            self._log.debug(f"Same level: {level} = {self._current_level}")
            self.pop()
        else:
            self._log.debug(f"Back up: {level} < {self._current_level}")
            if self.strict:
                self._check_ascent(line)
            self.pop_until(level)

        self.push(line.name, level)
        self._current_level = level

        path = self.resolve()
        self._log.debug(f"Full path: '{path}'")
        return ResolvedPath(path=path, level=level, kind=classify_path(path))

    # -------------------------------------------------------------------------
    # STACK OPERATIONS
    # -------------------------------------------------------------------------

    def push(self, component: str, level: int) -> None:
        self._stack.append(PathStackEntry(component=component, level=level))

    def pop(self) -> Optional[PathStackEntry]:
        """Remove the top entry, if any."""
        if self._stack:
            return self._stack.pop()
        return None

    def pop_until(self, level: int) -> List[PathStackEntry]:
        """
        Unwind every entry declared at `level` or deeper.

        Returns:
            List[PathStackEntry]: Removed entries, top first.
        """
        removed: List[PathStackEntry] = []
        while self._stack and self._stack[-1].level >= level:
            entry = self._stack.pop()
            self._log.debug(f"Popping: level {entry.level}")
            removed.append(entry)
        return removed

    def resolve(self) -> str:
        """Concatenate stack components root first, adding no separators."""
        return "".join(entry.component for entry in self._stack)

    # -------------------------------------------------------------------------
    # STRICT MODE CHECKS
    # -------------------------------------------------------------------------

    def _check_parent(self, line: TreeLine) -> None:
        if self._stack and not self._stack[-1].component.endswith(PATH_SEPARATOR):
            raise TreeStructureError(line, f"parent '{self._stack[-1].component}' is a file")

    def _check_ascent(self, line: TreeLine) -> None:
        if not any(entry.level == line.level for entry in self._stack):
            raise TreeStructureError(line, "level does not match any open ancestor")


def build_paths(
        lines: Iterable[TreeLine],
        strict: bool = False,
        log: Optional[logging.Logger] = None,
) -> Iterator[ResolvedPath]:
    """Shortcut for PathStackBuilder(strict, log).build(lines)."""
    return PathStackBuilder(strict=strict, log=log).build(lines)
