from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (a diagram file or an inline string,
plus help and verbosity flags) and translates the parsed namespace into
a validated run configuration. Usage problems are raised as UsageError
rather than terminating the process, so the controller decides the exit
code.
"""

import argparse
from typing import List, NoReturn, Optional

from mktree.domain.config import MktreeConfig, get_default_config, merge_config
from mktree.utils.i18n import i18n


class UsageError(Exception):
    """Raised when the command line does not describe a runnable invocation."""

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

class _CliParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors as exceptions instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(i18n.t("cli.errors.bad_usage", message=message))


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mktree CLI.

    Help output is rendered by the controller from the locale catalogue,
    so argparse's own -h handling is disabled.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = _CliParser(
        prog="mktree",
        description=i18n.t("app.description"),
        add_help=False,
    )

    p.add_argument(
        "file",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.file"),
    )
    # const="" lets a bare -s reach validation as "no string provided"
    p.add_argument(
        "-s", "--string",
        dest="input_string",
        nargs="?",
        const="",
        default=None,
        help=i18n.t("cli.args.string"),
    )
    p.add_argument(
        "-h", "--help",
        dest="show_help",
        action="store_true",
        help=i18n.t("cli.args.help"),
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help=i18n.t("cli.args.verbose"),
    )

    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line, raising UsageError on malformed input."""
    return build_parser().parse_args(argv)

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(
        args: argparse.Namespace,
        base: Optional[MktreeConfig] = None,
) -> MktreeConfig:
    """
    Translate the argparse Namespace into a run configuration.

    Args:
        args: Parsed command-line arguments.
        base: Starting configuration. Defaults to the working directory.

    Returns:
        MktreeConfig: Configuration with exactly one input source set.

    Raises:
        UsageError: If no input, an empty string, or both inputs are given.
    """
    if args.input_string is not None and args.file is not None:
        raise UsageError(i18n.t("cli.errors.conflicting_inputs"))
    if args.input_string is not None and not args.input_string:
        raise UsageError(i18n.t("cli.errors.no_string"))
    if args.input_string is None and not args.file:
        raise UsageError(i18n.t("cli.errors.no_input"))

    return merge_config(
        base or get_default_config(),
        input_file=args.file,
        input_string=args.input_string,
        verbose=bool(args.verbose),
    )
