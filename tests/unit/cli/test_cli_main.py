"""Tests for the clipgraph command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from clipgraph.cli.main import build_arg_parser, main


@pytest.fixture
def animations_dir(tmp_path: Path) -> Path:
    root = tmp_path / "animations"
    root.mkdir()
    for name in ["A_intro_01", "A_intro_01-02", "A_intro_02", "A_intro_02_B"]:
        (root / f"{name}.fbx").write_text("")
    return root


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test away from any clipgraph.yaml in the project."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestBuildCommand:
    """Tests for `clipgraph build`."""

    def test_prints_graph_to_stdout(self, animations_dir: Path, capsys) -> None:
        code = _run(["build", "--folder", str(animations_dir)])

        assert code == 0
        records = {r["Name"]: r for r in json.loads(capsys.readouterr().out)}
        assert records["A_intro_01"]["NextAnimations"] == ["A_intro_01-02"]
        assert records["A_intro_01-02"]["NextAnimations"] == ["A_intro_02"]
        assert records["A_intro_02"]["AlternateAnimations"] == ["A_intro_02_B"]
        assert records["A_intro_02"]["PreviousAnimation"] == "A_intro_01"

    def test_writes_output_file(self, animations_dir: Path, tmp_path: Path, capsys) -> None:
        out = tmp_path / "build" / "graph.json"

        code = _run(["build", "--folder", str(animations_dir), "--out", str(out), "--indent", "2"])

        assert code == 0
        assert capsys.readouterr().out == ""
        assert len(json.loads(out.read_text(encoding="utf-8"))) == 4

    def test_uses_config_file(self, animations_dir: Path, tmp_path: Path, capsys) -> None:
        config = tmp_path / "clipgraph.json"
        config.write_text(json.dumps({"animations_dir": str(animations_dir)}), encoding="utf-8")

        code = _run(["build", "--config", str(config)])

        assert code == 0
        assert len(json.loads(capsys.readouterr().out)) == 4

    def test_missing_folder(self, tmp_path: Path, capsys) -> None:
        code = _run(["build", "--folder", str(tmp_path / "missing")])

        assert code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_missing_config(self, tmp_path: Path) -> None:
        assert _run(["build", "--config", str(tmp_path / "missing.yaml")]) == 1

    def test_negative_indent_rejected(self, animations_dir: Path) -> None:
        assert _run(["build", "--folder", str(animations_dir), "--indent", "-1"]) == 1


class TestArgParser:
    """Tests for build_arg_parser."""

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args([])

    def test_log_level_is_case_insensitive(self) -> None:
        args = build_arg_parser().parse_args(["build", "--log-level", "debug"])
        assert args.log_level == "DEBUG"
