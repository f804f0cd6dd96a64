from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of the file / string inputs to the run configuration.
2. Usage errors for missing, empty and conflicting inputs.
3. Handling of boolean flags (store_true).
"""

import pytest

from mktree.interface.cli.args import UsageError, args_to_config, parse_args


def test_file_argument_mapping():
    cfg = args_to_config(parse_args(["tree.txt"]))

    assert cfg.input_file == "tree.txt"
    assert cfg.input_string is None
    assert cfg.verbose is False


def test_string_argument_mapping():
    cfg = args_to_config(parse_args(["-v", "--string", "├── a/"]))

    assert cfg.input_string == "├── a/"
    assert cfg.input_file is None
    assert cfg.verbose is True


def test_help_flag_is_captured():
    args = parse_args(["--help"])
    assert args.show_help is True


def test_missing_string_value_is_a_usage_error():
    args = parse_args(["-s"])
    assert args.input_string == ""

    with pytest.raises(UsageError, match="No string provided"):
        args_to_config(args)


def test_empty_string_value_is_a_usage_error():
    with pytest.raises(UsageError, match="No string provided"):
        args_to_config(parse_args(["-s", ""]))


def test_no_input_is_a_usage_error():
    with pytest.raises(UsageError, match="No input"):
        args_to_config(parse_args(["--verbose"]))


def test_conflicting_inputs_are_a_usage_error():
    with pytest.raises(UsageError, match="not both"):
        args_to_config(parse_args(["tree.txt", "-s", "a/"]))


def test_unknown_flag_raises_instead_of_exiting():
    with pytest.raises(UsageError, match="unrecognized arguments"):
        parse_args(["tree.txt", "--dry-run"])
