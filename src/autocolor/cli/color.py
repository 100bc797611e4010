"""Handler for 'autocolor get'."""

from autocolor.cache import ColorCache
from autocolor.cli._common import error, output_result, repo_settings
from autocolor.color import hsl_to_hex
from autocolor.colorset import create_color_set
from autocolor.config import config_for, load_config
from autocolor.errors import AutocolorError
from autocolor.scanner import load_precomputed


def get_color(args) -> int:
    """Resolve one label's color, optionally warmed by a precomputed snapshot."""
    settings = repo_settings(args)
    cache = ColorCache()
    try:
        config = config_for(load_config(settings["config"]), args.category)
        overrides = {}
        if args.algorithm is not None:
            overrides["algorithm"] = args.algorithm
        if args.threshold is not None:
            overrides["similarity_threshold"] = args.threshold
        if overrides:
            config = config.replace(**overrides)
        if args.precomputed:
            load_precomputed(settings["repo"] / args.precomputed, cache=cache)
        color = create_color_set(config, cache=cache).get_color(args.label)
    except (AutocolorError, OSError) as e:
        return error(str(e), args.json)

    hex_color = hsl_to_hex(color)
    output_result(
        {"category": config.category, "label": args.label, "color": color, "hex": hex_color},
        f"{color}  {hex_color or '?'}",
        args.json,
    )
    return 0
