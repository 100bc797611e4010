"""CLI argument parser and dispatch for autocolor."""

import argparse

from autocolor.cli.color import get_color
from autocolor.cli.preview import preview
from autocolor.cli.scan import precompute_colors, scan
from autocolor.color import DEFAULT_CATEGORY
from autocolor.similarity import Algorithm


def _common_options(defaults: bool) -> argparse.ArgumentParser:
    """Options accepted both before and after the command name."""
    repo_default = "." if defaults else argparse.SUPPRESS
    flag_default = False if defaults else argparse.SUPPRESS
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=repo_default, help="Path to project or git repository (default: .)")
    common.add_argument("--json", action="store_true", default=flag_default, help="Machine-readable JSON output")
    common.add_argument(
        "-v", "--verbose", action="store_true", default=flag_default, help="Debug logging on stderr"
    )
    return common


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = _common_options(defaults=True)
    # Repeated after the command name; suppressed defaults keep earlier values.
    command_common = _common_options(defaults=False)

    parser = argparse.ArgumentParser(
        prog="autocolor",
        description="Deterministic colors for text labels",
        parents=[common],
    )

    commands = parser.add_subparsers(dest="command")

    # --- get ---
    get_p = commands.add_parser("get", help="Print the color for a label", parents=[command_common])
    get_p.add_argument("label", help="Label text")
    get_p.add_argument("--category", default=DEFAULT_CATEGORY, help="Color set category (default: default)")
    get_p.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        help="Override the category's similarity algorithm",
    )
    get_p.add_argument("--threshold", type=float, help="Override the similarity threshold")
    get_p.add_argument("--config", help="Color set config file (default: git config or autocolor.yaml)")
    get_p.add_argument("--precomputed", help="Snapshot to load before resolving")
    get_p.set_defaults(func=get_color)

    # --- scan ---
    scan_p = commands.add_parser("scan", help="List color call sites in sources", parents=[command_common])
    scan_p.add_argument("--ext", dest="extensions", help="Comma-separated file extensions to scan")
    scan_p.set_defaults(func=scan)

    # --- precompute ---
    pre_p = commands.add_parser("precompute", help="Write a snapshot of precomputed colors", parents=[command_common])
    pre_p.add_argument("--ext", dest="extensions", help="Comma-separated file extensions to scan")
    pre_p.add_argument("--config", help="Color set config file (default: git config or autocolor.yaml)")
    pre_p.add_argument("-o", "--output", help="Snapshot path (default: autocolor-precomputed.json)")
    pre_p.set_defaults(func=precompute_colors)

    # --- preview ---
    preview_p = commands.add_parser("preview", help="Browse colors in a terminal UI", parents=[command_common])
    preview_p.add_argument("snapshot", nargs="?", help="Snapshot file (default: scan the repo)")
    preview_p.add_argument("--ext", dest="extensions", help="Comma-separated file extensions to scan")
    preview_p.add_argument("--config", help="Color set config file (default: git config or autocolor.yaml)")
    preview_p.set_defaults(func=preview)

    return parser
