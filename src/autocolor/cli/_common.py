"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from autocolor.git import read_autocolor_config


def setup_logging(verbose: bool) -> None:
    """Send debug logs to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(message)s",
            stream=sys.stderr,
            level=logging.DEBUG,
        )


def repo_settings(args) -> dict:
    """Resolve repo path, extensions, config and output paths.

    Command-line flags win over the [autocolor] git config section, which
    wins over the built-in defaults. Relative paths are taken from the repo.
    """
    repo_path = Path(args.repo).resolve()
    settings = read_autocolor_config(repo_path)
    for key in ("extensions", "config", "output"):
        value = getattr(args, key, None)
        if value is not None:
            settings[key] = value
    settings["repo"] = repo_path
    for key in ("config", "output"):
        settings[key] = repo_path / settings[key]
    return settings


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output a result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> int:
    """Print error to stderr and return exit code 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    return 1
