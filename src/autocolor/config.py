"""Load color set definitions from a YAML project file.

The file holds a ``color_sets`` mapping of category to options::

    color_sets:
      tags:
        hue: [180, 300]
        algorithm: jaccard
        similarity_threshold: 0.6
      status: {}
"""

from __future__ import annotations

from pathlib import Path

import yaml

from autocolor.color import ColorConfig
from autocolor.errors import ConfigError

CONFIG_FILENAME = "autocolor.yaml"


def parse_config(text: str) -> dict[str, ColorConfig]:
    """Parse YAML text into {category: ColorConfig}."""
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")

    color_sets = data.get("color_sets") or {}
    if not isinstance(color_sets, dict):
        raise ConfigError("color_sets must be a mapping of category to options")

    configs: dict[str, ColorConfig] = {}
    for category, options in color_sets.items():
        if options is not None and not isinstance(options, dict):
            raise ConfigError(f"options for color set {category!r} must be a mapping, got {options!r}")
        options = dict(options or {})
        if options.setdefault("category", str(category)) != str(category):
            raise ConfigError(f"color set {category!r} names a different category {options['category']!r}")
        configs[str(category)] = ColorConfig.from_value(options)
    return configs


def load_config(path: str | Path) -> dict[str, ColorConfig]:
    """Load color set configs from path. A missing file means no overrides."""
    path = Path(path)
    if not path.exists():
        return {}
    return parse_config(path.read_text(encoding="utf-8"))


def config_for(configs: dict[str, ColorConfig], category: str) -> ColorConfig:
    """The configured ColorConfig for category, or defaults."""
    return configs.get(category) or ColorConfig(category=category)
