"""CLI tests for the show, check and convert commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

from typer.testing import CliRunner

from cfgparser.cli import app

runner = CliRunner()


def test_show_prints_sections(write_cfg: Callable[..., Path], sites_text: str) -> None:
    """Show should print every header followed by its aligned pairs."""

    result = runner.invoke(app, ["show", str(write_cfg(sites_text))])

    assert result.exit_code == 0
    assert "[playa]" in result.output
    assert "[portland]" in result.output
    assert "  name       = PlayaVista" in result.output
    assert result.output.index("[playa]") < result.output.index("[portland]")


def test_check_reports_counts(write_cfg: Callable[..., Path], sites_text: str) -> None:
    """Check should summarize a valid file and exit with code 0."""

    result = runner.invoke(app, ["check", str(write_cfg(sites_text))])

    assert result.exit_code == 0
    assert "OK, 2 section(s), 6 pair(s)." in result.output


def test_check_points_at_failure(write_cfg: Callable[..., Path]) -> None:
    """Check should print the error kind and a caret under the failing column."""

    path = write_cfg("[playa]\nname = Playa Vista\n")

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "check failed" in result.output
    assert "(line 2, column 14)" in result.output
    assert "kind: trailing content" in result.output
    assert "  name = Playa Vista\n" in result.output
    assert "  " + " " * 13 + "^" in result.output


def test_check_handles_error_at_end_of_input(write_cfg: Callable[..., Path]) -> None:
    """A failure past the last newline is still rendered."""

    result = runner.invoke(app, ["check", str(write_cfg("[test]\n"))])

    assert result.exit_code == 1
    assert "kind: empty section" in result.output


def test_show_reports_missing_file(tmp_path: Path) -> None:
    """Show should fail cleanly when the file does not exist."""

    result = runner.invoke(app, ["show", str(tmp_path / "missing.cfg")])

    assert result.exit_code == 1
    assert "show failed: unable to read" in result.output


def test_convert_cfg_to_json(
    write_cfg: Callable[..., Path], sites_text: str, tmp_path: Path
) -> None:
    """Convert should pick the target format from the extension."""

    target = tmp_path / "sites.json"

    result = runner.invoke(app, ["convert", str(write_cfg(sites_text)), str(target)])

    assert result.exit_code == 0
    assert "2 section(s)" in result.output
    assert json.loads(target.read_text(encoding="utf-8"))["portland"] == {
        "name": "Portland",
        "short_name": "ddpd",
        "prefix": "pd",
    }


def test_convert_yaml_back_to_cfg(tmp_path: Path) -> None:
    """Convert should honour explicit formats on both sides."""

    source = tmp_path / "source.txt"
    source.write_text("site:\n  name: Portland\n", encoding="utf-8")
    target = tmp_path / "target.out"

    result = runner.invoke(
        app, ["convert", str(source), str(target), "--from", "yaml", "--to", "cfg"]
    )

    assert result.exit_code == 0
    assert target.read_text() == "[site]\nname = Portland\n"


def test_convert_rejects_unknown_format(
    write_cfg: Callable[..., Path], sites_text: str, tmp_path: Path
) -> None:
    """Convert should fail for a target without a known format."""

    result = runner.invoke(
        app, ["convert", str(write_cfg(sites_text)), str(tmp_path / "sites.txt")]
    )

    assert result.exit_code == 1
    assert "unknown format" in result.output


def test_convert_reports_undecodable_source(tmp_path: Path) -> None:
    """A JSON source that is not UTF-8 fails with a diagnostic, not a traceback."""

    source = tmp_path / "latin.json"
    source.write_bytes(b'{"site": {"name": "Caf\xe9"}}')

    result = runner.invoke(app, ["convert", str(source), str(tmp_path / "out.cfg")])

    assert result.exit_code == 1
    assert "convert failed: unable to decode" in result.output
    assert not (tmp_path / "out.cfg").exists()


def test_convert_reports_unknown_encoding(
    write_cfg: Callable[..., Path], sites_text: str, tmp_path: Path
) -> None:
    """An unknown codec name given to convert fails cleanly."""

    result = runner.invoke(
        app,
        ["convert", str(write_cfg(sites_text)), str(tmp_path / "out.json"), "--encoding", "no-such-codec"],
    )

    assert result.exit_code == 1
    assert "convert failed: unknown encoding" in result.output


def test_check_reports_unknown_encoding(write_cfg: Callable[..., Path], sites_text: str) -> None:
    """Check goes through the same load error for a bad codec name."""

    result = runner.invoke(app, ["check", str(write_cfg(sites_text)), "-e", "no-such-codec"])

    assert result.exit_code == 1
    assert "check failed: unknown encoding" in result.output
