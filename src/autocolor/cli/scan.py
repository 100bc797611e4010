"""Handlers for 'autocolor scan' and 'autocolor precompute'."""

from autocolor.cli._common import error, output_json, output_result, repo_settings
from autocolor.config import load_config
from autocolor.errors import AutocolorError
from autocolor.scanner import parse_extensions, precompute, scan_paths, write_snapshot


def scan(args) -> int:
    """List (category, label) pairs found in the repository's sources."""
    settings = repo_settings(args)
    pairs = sorted(scan_paths(settings["repo"], parse_extensions(settings["extensions"])))

    if args.json:
        output_json([{"category": category, "label": label} for category, label in pairs])
    elif not pairs:
        print("no color call sites found")
    else:
        for category, label in pairs:
            print(f"{category}  {label}")
    return 0


def precompute_colors(args) -> int:
    """Scan sources, compute their colors and write the snapshot file."""
    settings = repo_settings(args)
    try:
        configs = load_config(settings["config"])
        pairs = scan_paths(settings["repo"], parse_extensions(settings["extensions"]))
        snapshot = precompute(pairs, configs)
        path = write_snapshot(snapshot, settings["output"])
    except (AutocolorError, OSError) as e:
        return error(str(e), args.json)

    count = sum(len(colors) for colors in snapshot.values())
    noun = "color" if count == 1 else "colors"
    output_result(
        {"output": str(path), "categories": len(snapshot), "colors": count},
        f"Wrote {count} {noun} in {len(snapshot)} categories to {path}",
        args.json,
    )
    return 0
