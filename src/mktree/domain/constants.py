from __future__ import annotations

"""
Domain Constants.

Centralizes the symbols and measurements that define how a textual tree
diagram is interpreted: the connector alphabet, the indentation unit and
the separator that marks a directory entry.
"""

from typing import FrozenSet

# -----------------------------------------------------------------------------
# TREE DIAGRAM GRAMMAR
# -----------------------------------------------------------------------------

# Box-drawing and ASCII characters used to draw branches
CONNECTOR_CHARS: FrozenSet[str] = frozenset("├└│─|")

# Horizontal "tee" run collapsed to a single space before stripping
TEE_CONNECTOR = "──"

# Leading characters per nesting level
INDENT_UNIT = 2

# Trailing character that marks a component as a directory
PATH_SEPARATOR = "/"

COMMENT_CHAR = "#"
