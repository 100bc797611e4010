"""Shared fixtures."""

import pytest
from git import Repo

from autocolor.cache import DEFAULT_CACHE, ColorCache


@pytest.fixture
def cache():
    """A private cache so tests never see each other's colors."""
    return ColorCache()


@pytest.fixture(autouse=True)
def _reset_default_cache():
    yield
    DEFAULT_CACHE.clear()


@pytest.fixture
def source_repo(tmp_path):
    """A git repo with tracked and untracked color call sites."""
    repo = Repo.init(tmp_path)
    (tmp_path / "app.py").write_text(
        'tags = create_color_set("tags")\n'
        'tags.get_color("bug")\n'
        'tags.get_color("feature")\n'
    )
    (tmp_path / "pages.py").write_text(
        'pages = use_auto_color({"category": "pages", "algorithm": "jaccard"})\n'
        "pages.get_color('Login')\n"
    )
    (tmp_path / "notes.txt").write_text('create_color_set("ignored").get_color("nope")\n')
    repo.index.add(["app.py", "pages.py", "notes.txt"])
    repo.index.commit("Initial commit")
    (tmp_path / "scratch.py").write_text('create_color_set("scratch").get_color("untracked")\n')
    return tmp_path
