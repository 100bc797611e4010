"""Tests for git module."""

from git import Repo

from autocolor.git import AUTOCOLOR_DEFAULTS, is_git_repo, read_autocolor_config, tracked_files


def test_is_git_repo(source_repo, tmp_path_factory):
    assert is_git_repo(source_repo)
    plain = tmp_path_factory.mktemp("plain")
    assert not is_git_repo(plain)
    assert not is_git_repo(plain / "missing")


def test_is_git_repo_subdirectory(source_repo):
    sub = source_repo / "pkg"
    sub.mkdir()
    assert is_git_repo(sub)


def test_read_config_defaults(tmp_path):
    assert read_autocolor_config(tmp_path) == AUTOCOLOR_DEFAULTS


def test_read_config_from_git(source_repo):
    writer = Repo(source_repo).config_writer("repository")
    writer.set_value("autocolor", "extensions", ".py,.txt")
    writer.set_value("autocolor", "output", "build/colors.json")
    writer.release()

    config = read_autocolor_config(source_repo)
    assert config["extensions"] == ".py,.txt"
    assert config["output"] == "build/colors.json"
    assert config["config"] == "autocolor.yaml"


def test_tracked_files(source_repo):
    files = sorted(p.name for p in tracked_files(source_repo))
    assert files == ["app.py", "notes.txt", "pages.py"]
    assert all(p.is_absolute() for p in tracked_files(source_repo))


def test_tracked_files_non_ascii_names(tmp_path):
    repo = Repo.init(tmp_path)
    (tmp_path / "café.py").write_text('create_color_set("c").get_color("x")\n')
    (tmp_path / "naïve dir").mkdir()
    (tmp_path / "naïve dir" / "ü.py").write_text("")
    repo.index.add(["café.py", "naïve dir/ü.py"])
    repo.index.commit("Initial commit")

    files = tracked_files(tmp_path)
    assert sorted(p.relative_to(tmp_path).as_posix() for p in files) == ["café.py", "naïve dir/ü.py"]
    assert all(p.is_file() for p in files)
