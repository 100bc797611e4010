"""Tests for 'autocolor scan' and 'autocolor precompute' commands."""

import json
from argparse import Namespace

from git import Repo

from autocolor.cli import build_parser
from autocolor.cli.scan import precompute_colors, scan
from autocolor.scanner import read_snapshot


def test_scan_lists_pairs(source_repo, capsys):
    assert scan(Namespace(repo=str(source_repo), json=False, extensions=None)) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["pages  Login", "tags  bug", "tags  feature"]


def test_scan_json(source_repo, capsys):
    assert scan(Namespace(repo=str(source_repo), json=True, extensions=".txt")) == 0
    assert json.loads(capsys.readouterr().out) == [{"category": "ignored", "label": "nope"}]


def test_scan_nothing_found(tmp_path, capsys):
    assert scan(Namespace(repo=str(tmp_path), json=False, extensions=None)) == 0
    assert "no color call sites" in capsys.readouterr().out


def test_scan_extensions_from_git_config(source_repo, capsys):
    writer = Repo(source_repo).config_writer("repository")
    writer.set_value("autocolor", "extensions", ".txt")
    writer.release()
    assert scan(Namespace(repo=str(source_repo), json=False, extensions=None)) == 0
    assert capsys.readouterr().out.splitlines() == ["ignored  nope"]


def test_precompute_writes_snapshot(source_repo, capsys):
    args = Namespace(repo=str(source_repo), json=False, extensions=None, config=None, output=None)
    assert precompute_colors(args) == 0

    out = capsys.readouterr().out
    assert "Wrote 3 colors in 2 categories" in out

    snapshot = read_snapshot(source_repo / "autocolor-precomputed.json")
    assert set(snapshot) == {"tags", "pages"}
    assert snapshot["tags"]["bug"] == "hsl(297, 72%, 48%)"


def test_precompute_json_and_output(source_repo, capsys):
    (source_repo / "autocolor.yaml").write_text("color_sets:\n  tags:\n    hue: [0, 1]\n")
    args = Namespace(repo=str(source_repo), json=True, extensions=None, config=None, output="out.json")
    assert precompute_colors(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == {"output": str(source_repo.resolve() / "out.json"), "categories": 2, "colors": 3}
    snapshot = read_snapshot(source_repo / "out.json")
    assert all(color.startswith("hsl(0, ") for color in snapshot["tags"].values())


def test_precompute_bad_config(source_repo, capsys):
    (source_repo / "broken.yaml").write_text("color_sets:\n  tags:\n    algorithm: nope\n")
    args = Namespace(repo=str(source_repo), json=False, extensions=None, config="broken.yaml", output=None)
    assert precompute_colors(args) == 1
    assert "unknown algorithm" in capsys.readouterr().err
    assert not (source_repo / "autocolor-precomputed.json").exists()


def test_parser_precompute(source_repo):
    args = build_parser().parse_args(["precompute", "--repo", str(source_repo), "-o", "x.json", "--ext", ".py"])
    assert args.func is precompute_colors
    assert args.output == "x.json"
    assert args.extensions == ".py"
