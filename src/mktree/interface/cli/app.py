from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
input acquisition from a file or an inline string, pipeline execution
and progress rendering. Maps every failure category to a process exit
code; filesystem errors abort the run on the first failing entry.
"""

import sys
from typing import List, Optional

from mktree.core.pipeline.engine import run_pipeline
from mktree.domain.config import MktreeConfig
from mktree.domain.tree_models import EntryKind, ResolvedPath
from mktree.infra.fs import read_lines
from mktree.infra.logging import LoggingConfig, configure_logging, get_logger
from mktree.interface.cli import args as cli_args
from mktree.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class InputNotFoundError(FileNotFoundError):
    """Raised when the diagram file argument does not exist."""

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    if argv is None:
        argv = sys.argv[1:]

    # 1. Argument parsing phase
    if not argv:
        print_help()
        return EXIT_FAILURE

    try:
        args = cli_args.parse_args(argv)
        if args.show_help:
            print_help()
            return EXIT_OK
        config = cli_args.args_to_config(args)
    except cli_args.UsageError as e:
        _print_error(str(e))
        print_help(file=sys.stderr)
        return EXIT_FAILURE

    # 2. Logging bootstrap (console stderr, DEBUG only when verbose)
    configure_logging(LoggingConfig(level=config.log_level), force=True)
    logger.debug(f"CLI execution initiated with arguments: {argv}")

    # 3. Input acquisition
    try:
        raw_lines = acquire_input(config)
    except InputNotFoundError as e:
        _print_error(i18n.t("cli.errors.file_not_found", path=e.filename))
        return EXIT_FAILURE

    # 4. Pipeline execution phase
    try:
        result = run_pipeline(raw_lines, config, on_entry=print_entry, log=logger)
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.debug("Filesystem failure details", exc_info=True)
        _print_error(i18n.t("cli.errors.fs_failure", error=str(e)))
        return EXIT_FAILURE

    logger.debug(
        f"Created {result.directory_count} directories and "
        f"{result.file_count} files under {result.base_dir}"
    )
    print(i18n.t("cli.status.success"))
    return EXIT_OK

# -----------------------------------------------------------------------------
# INPUT ACQUISITION
# -----------------------------------------------------------------------------

def acquire_input(config: MktreeConfig) -> List[str]:
    """
    Load the diagram lines from the configured source.

    Args:
        config: Run configuration with a file or an inline string.

    Returns:
        List[str]: Diagram lines without terminators.

    Raises:
        InputNotFoundError: If the configured file does not exist.
    """
    if config.input_string is not None:
        logger.debug("Reading tree from inline string")
        return config.input_string.splitlines()

    path = config.input_file or ""
    logger.debug(f"Reading tree from file: {path}")
    try:
        return read_lines(path)
    except FileNotFoundError:
        raise InputNotFoundError(2, "No such file", path) from None

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def print_help(file=None) -> None:
    print(i18n.t("cli.help"), file=file or sys.stdout)


def print_entry(entry: ResolvedPath) -> None:
    """Announce an entry on stdout just before it is created."""
    if entry.kind is EntryKind.DIRECTORY:
        print(i18n.t("cli.status.creating_directory", path=entry.path))
    else:
        print(i18n.t("cli.status.creating_file", path=entry.path))


def _print_error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
