"""Find color-set call sites in source text and precompute their colors.

A file that creates a color set for some category and calls
``.get_color("literal")`` contributes every (category, literal) pair it
contains. The snapshot written by ``precompute`` is loaded back at runtime
with ``load_precomputed`` so the engine starts warm.
"""

from __future__ import annotations

import json
import logging
import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from autocolor.cache import ColorCache
from autocolor.color import DEFAULT_CATEGORY, ColorConfig, ColorGenerator
from autocolor.colorset import set_precomputed_colors
from autocolor.config import config_for
from autocolor.errors import ConfigError
from autocolor.git import is_git_repo, tracked_files
from autocolor.hashing import text_hash

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".py", ".html", ".jinja", ".jinja2")

_COLOR_SET_CALL = re.compile(r"\b(?:create_color_set|use_auto_color)\s*\(")
_STRING_ARG = re.compile(r"""^\s*(['"])([^'"]+)\1\s*(?:,|$)""")
_CATEGORY_OPTION = re.compile(r"""['"]?category['"]?\s*[:=]\s*(['"])([^'"]+)\1""")
_GET_COLOR_CALL = re.compile(r"""\.get_color\s*\(\s*(['"])([^'"]+)\1\s*\)""")

_SKIP_DIRS = {".git", "__pycache__", "node_modules", ".venv", "venv", ".tox"}


def _call_arguments(text: str, start: int) -> str | None:
    """Argument text of a call whose opening parenthesis ends at start.

    Nested brackets and quoted strings are skipped over. None if the call
    is never closed.
    """
    depth = 1
    quote = None
    i = start
    while i < len(text):
        char = text[i]
        if quote:
            if char == "\\":
                i += 1
            elif char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char in "([{":
            depth += 1
        elif char in ")]}":
            depth -= 1
            if depth == 0:
                return text[start:i]
        i += 1
    return None


def find_categories(text: str) -> set[str]:
    """Categories of every color set created in text."""
    categories = set()
    for match in _COLOR_SET_CALL.finditer(text):
        args = _call_arguments(text, match.end())
        if args is None:
            continue
        literal = _STRING_ARG.match(args)
        option = _CATEGORY_OPTION.search(args)
        if literal:
            categories.add(literal.group(2))
        elif option:
            categories.add(option.group(2))
        else:
            categories.add(DEFAULT_CATEGORY)
    return categories


def find_labels(text: str) -> set[str]:
    """Literal labels passed to get_color in text."""
    return {match.group(2) for match in _GET_COLOR_CALL.finditer(text)}


def scan_text(text: str) -> set[tuple[str, str]]:
    """(category, label) pairs discovered in one source text."""
    categories = find_categories(text)
    labels = find_labels(text)
    return {(category, label) for category in categories for label in labels}


def parse_extensions(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize ".py,html" style input into (".py", ".html")."""
    if value is None:
        return DEFAULT_EXTENSIONS
    if isinstance(value, str):
        value = value.split(",")
    result = []
    for ext in value:
        ext = ext.strip().lower()
        if ext:
            result.append(ext if ext.startswith(".") else f".{ext}")
    return tuple(result)


def _walk(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in _SKIP_DIRS)
        for name in sorted(filenames):
            yield Path(dirpath) / name


def iter_source_files(root: str | Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> Iterator[Path]:
    """Files under root with a matching extension.

    Inside a git repository only tracked files are considered.
    """
    root = Path(root).resolve()
    suffixes = parse_extensions(extensions)
    candidates = tracked_files(root) if is_git_repo(root) else _walk(root)
    for path in candidates:
        if path.suffix.lower() in suffixes and path.is_file():
            yield path


def scan_paths(root: str | Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> set[tuple[str, str]]:
    """Union of scan_text over every source file under root."""
    pairs: set[tuple[str, str]] = set()
    for path in iter_source_files(root, extensions):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("skipping %s: %s", path, e)
            continue
        found = scan_text(text)
        if found:
            logger.debug("%s: %d color call sites", path, len(found))
        pairs |= found
    return pairs


def precompute(
    pairs: Iterable[tuple[str, str]],
    configs: dict[str, ColorConfig] | None = None,
) -> dict[str, dict[str, str]]:
    """Hash and color every pair exactly as a runtime cold lookup would."""
    configs = configs or {}
    generators: dict[str, ColorGenerator] = {}
    snapshot: dict[str, dict[str, str]] = {}
    for category, label in sorted(pairs):
        generator = generators.get(category)
        if generator is None:
            generator = generators[category] = ColorGenerator(config_for(configs, category))
        snapshot.setdefault(category, {})[label] = generator.color_for(label, text_hash)
    return snapshot


def write_snapshot(snapshot: dict[str, dict[str, str]], path: str | Path) -> Path:
    """Write a snapshot as JSON."""
    path = Path(path)
    path.write_text(json.dumps(snapshot, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def read_snapshot(path: str | Path) -> dict[str, dict[str, str]]:
    """Read a snapshot written by write_snapshot."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
        raise ConfigError(f"{path} is not a category -> label -> color mapping")
    return data


def load_precomputed(path: str | Path, cache: ColorCache | None = None) -> int:
    """Bulk-load a snapshot file into the cache. Returns the entry count."""
    return set_precomputed_colors(read_snapshot(path), cache=cache)
