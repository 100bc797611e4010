"""Git repository helpers for the source scanner."""

from pathlib import Path
from typing import Any

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

AUTOCOLOR_DEFAULTS = {
    "extensions": ".py,.html,.jinja,.jinja2",
    "output": "autocolor-precomputed.json",
    "config": "autocolor.yaml",
}


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def is_git_repo(path: str | Path) -> bool:
    """Check if path is inside a git repository."""
    try:
        Repo(path, search_parent_directories=True)
        return True
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False


def read_autocolor_config(repo_path: str | Path) -> dict[str, Any]:
    """Read the [autocolor] git config section merged over defaults.

    Outside a repository the defaults are returned unchanged.
    """
    result = {_python_key(k): v for k, v in AUTOCOLOR_DEFAULTS.items()}
    if not is_git_repo(repo_path):
        return result
    reader = Repo(repo_path, search_parent_directories=True).config_reader()
    if "autocolor" in reader.sections():
        for git_k, raw in reader.items("autocolor"):
            result[_python_key(git_k)] = raw
    return result


def tracked_files(repo_path: str | Path) -> list[Path]:
    """Absolute paths of files tracked by git under repo_path."""
    root = Path(repo_path).resolve()
    repo = Repo(root, search_parent_directories=True)
    # -z keeps non-ASCII names unquoted
    output = repo.git.ls_files("-z", "--full-name", str(root))
    work_tree = Path(repo.working_tree_dir)
    return [work_tree / name for name in output.split("\0") if name]
