from __future__ import annotations

"""
Runtime Configuration Domain.

Describes the explicit settings of a single mktree run. Nothing is
persisted: every value comes from the command line or from the caller,
and the resulting object is threaded through the pipeline instead of
living in module-level globals.
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Optional

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MktreeConfig:
    """
    Immutable settings for one tree materialization run.

    Attributes:
        input_file: Path of the diagram file, if reading from disk.
        input_string: Literal diagram text, if passed inline.
        verbose: Emit debug diagnostics to stderr.
        base_dir: Directory the produced hierarchy is rooted at.
        strict: Reject level jumps instead of accepting them silently.
    """
    input_file: Optional[str] = None
    input_string: Optional[str] = None
    verbose: bool = False
    base_dir: str = "."
    strict: bool = False

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.verbose else "WARNING"


def get_default_config() -> MktreeConfig:
    """
    Generate the default runtime configuration.

    The hierarchy is always created relative to the current working
    directory, never under the diagram's root label.

    Returns:
        MktreeConfig: Default configuration values.
    """
    return MktreeConfig(base_dir=os.getcwd())


def merge_config(base: MktreeConfig, **overrides: Any) -> MktreeConfig:
    """
    Apply non-None overrides on top of a base configuration.

    Args:
        base: The starting configuration.
        **overrides: Field values to replace. None values are ignored.

    Returns:
        MktreeConfig: A new configuration instance.
    """
    clean = {k: v for k, v in overrides.items() if v is not None}
    return replace(base, **clean)
