"""Handler for 'autocolor preview'."""

from autocolor.cli._common import error, repo_settings
from autocolor.config import load_config
from autocolor.errors import AutocolorError
from autocolor.scanner import parse_extensions, precompute, read_snapshot, scan_paths


def preview(args) -> int:
    """Open the preview app over a snapshot file or a fresh scan."""
    settings = repo_settings(args)
    try:
        if args.snapshot:
            snapshot = read_snapshot(settings["repo"] / args.snapshot)
        else:
            pairs = scan_paths(settings["repo"], parse_extensions(settings["extensions"]))
            snapshot = precompute(pairs, load_config(settings["config"]))
    except (AutocolorError, OSError) as e:
        return error(str(e), args.json)

    from autocolor.ui import PreviewApp

    PreviewApp(snapshot).run()
    return 0
