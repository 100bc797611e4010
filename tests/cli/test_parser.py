"""Tests for CLI argument parsing."""

import pytest

from autocolor.cli import build_parser


def test_common_flags_before_command():
    args = build_parser().parse_args(["-v", "--json", "--repo", "/tmp/x", "get", "bug"])
    assert args.verbose is True
    assert args.json is True
    assert args.repo == "/tmp/x"


def test_common_flags_after_command():
    args = build_parser().parse_args(["scan", "-v", "--json", "--repo", "/tmp/x"])
    assert args.verbose is True
    assert args.json is True
    assert args.repo == "/tmp/x"


def test_common_flag_defaults():
    args = build_parser().parse_args(["precompute"])
    assert args.verbose is False
    assert args.json is False
    assert args.repo == "."


@pytest.mark.parametrize("argv", [["get", "x"], ["scan"], ["precompute"], ["preview"]])
def test_every_command_has_handler(argv):
    assert callable(build_parser().parse_args(argv).func)
