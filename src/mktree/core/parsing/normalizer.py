from __future__ import annotations

"""
Tree Diagram Line Normalizer.

First parsing stage. Turns raw diagram text lines into (level, name)
pairs: blank lines, the optional root label and comments are discarded,
the nesting depth is inferred from the leading run of whitespace and
connector characters, and the entry name is isolated from its connectors.
"""

import logging
import re
from typing import Iterable, Iterator, Optional

from mktree.domain.constants import (
    COMMENT_CHAR,
    CONNECTOR_CHARS,
    INDENT_UNIT,
    PATH_SEPARATOR,
    TEE_CONNECTOR,
)
from mktree.domain.tree_models import TreeLine

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# COMPILED PATTERNS
# -----------------------------------------------------------------------------

_CONNECTOR_CLASS = "".join(re.escape(ch) for ch in sorted(CONNECTOR_CHARS))

_CONNECTOR_RX = re.compile(f"[{_CONNECTOR_CLASS}]")
_INDENT_RX = re.compile(rf"^[\s{_CONNECTOR_CLASS}]*")
_COMMENT_RX = re.compile(rf"(?<!\\){re.escape(COMMENT_CHAR)}.*$")
_ESCAPED_COMMENT = "\\" + COMMENT_CHAR

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class LineNormalizer:
    """
    Stateless converter from raw diagram lines to TreeLine records.

    A normalizer instance can be reused; each call to normalize() returns
    a fresh, lazy generator over its input.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def normalize(self, raw_lines: Iterable[str]) -> Iterator[TreeLine]:
        """
        Lazily reduce raw lines to TreeLine records in input order.

        Args:
            raw_lines: Diagram lines, with or without line terminators.

        Yields:
            TreeLine: One record per line that names a filesystem entry.
        """
        seen_first = False
        read = 0
        emitted = 0

        for raw in raw_lines:
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            read += 1

            if not seen_first:
                seen_first = True
                if is_root_label(line):
                    self._log.debug(f"Skipping root directory line: {line}")
                    continue

            clean = strip_comment(line)
            if not clean.strip():
                continue

            indent = measure_indent(clean)
            level = indent // INDENT_UNIT
            self._log.debug(f"Line: '{clean}', Indent: {indent}, Level: {level}")

            name = extract_name(clean)
            self._log.debug(f"Path part: '{name}'")
            if not name:
                continue

            emitted += 1
            yield TreeLine(level=level, name=name)

        self._log.debug(f"Read {read} lines, normalized {emitted} entries")


def normalize_lines(
        raw_lines: Iterable[str],
        log: Optional[logging.Logger] = None,
) -> Iterator[TreeLine]:
    """Shortcut for LineNormalizer(log).normalize(raw_lines)."""
    return LineNormalizer(log).normalize(raw_lines)

# -----------------------------------------------------------------------------
# LINE HELPERS
# -----------------------------------------------------------------------------

def has_connectors(line: str) -> bool:
    """Return True if the line contains any branch-drawing character."""
    return _CONNECTOR_RX.search(line) is not None


def is_root_label(line: str) -> bool:
    """
    Detect a bare root label such as 'myproject/'.

    Only meaningful for the first non-blank line of a diagram.
    """
    return line.endswith(PATH_SEPARATOR) and not has_connectors(line)


def strip_comment(line: str) -> str:
    """
    Remove text from the first unescaped comment marker to end of line.

    An escaped marker is kept as a literal character in the result.
    """
    stripped = _COMMENT_RX.sub("", line)
    return stripped.replace(_ESCAPED_COMMENT, COMMENT_CHAR)


def measure_indent(line: str) -> int:
    """Count the leading whitespace and connector characters of a line."""
    match = _INDENT_RX.match(line)
    return len(match.group(0)) if match else 0


def extract_name(line: str) -> str:
    """Isolate the entry name by dropping every connector character."""
    collapsed = line.replace(TEE_CONNECTOR, " ")
    return _CONNECTOR_RX.sub("", collapsed).strip()
