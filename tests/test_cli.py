from __future__ import annotations

import json
from pathlib import Path

import pytest

from scenariopilot.cli import build_parser, main


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["analyze", "reqs.md"])

    assert args.format == "summary"
    assert args.detail_level == "standard"
    assert args.max_scenarios_per_flow == 5
    assert args.no_edge_cases is False


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("scenariopilot ")


def test_analyze_summary(tmp_path: Path, checkout_text: str, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "reqs.md", checkout_text)

    assert main(["analyze", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Checkout Platform" in out
    assert "FEAT-001" in out
    assert "validation score 95/100" in out


def test_analyze_json_to_stdout(tmp_path: Path, login_text: str, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "reqs.md", login_text)

    assert main(["analyze", str(path), "--format", "json", "--no-error-cases"]) == 0

    payload = json.loads(capsys.readouterr().out)
    kinds = {s["kind"] for scenarios in payload["scenarios"].values() for s in scenarios}
    assert "error-case" not in kinds


def test_analyze_markdown_to_file(tmp_path: Path, checkout_text: str) -> None:
    path = _write(tmp_path, "reqs.md", checkout_text)
    output = tmp_path / "report.md"

    assert main(["analyze", str(path), "--format", "markdown", "--output", str(output)]) == 0

    assert output.read_text(encoding="utf-8").startswith("# Requirements Analysis Report")


def test_analyze_concatenates_files(tmp_path: Path, checkout_text: str, login_text: str) -> None:
    first = _write(tmp_path, "a.md", checkout_text)
    second = _write(tmp_path, "b.md", login_text)
    output = tmp_path / "report.json"

    assert main(["analyze", str(first), str(second), "--format", "json", "-o", str(output)]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["summary"]["total_requirements"] == 6


def test_analyze_export_dir(tmp_path: Path, checkout_text: str, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "reqs.md", checkout_text)
    export_dir = tmp_path / "out"

    assert main(["analyze", str(path), "--export-dir", str(export_dir), "--format", "json"]) == 0

    assert (export_dir / "analysis-report.md").is_file()
    assert (export_dir / "features" / "shopping-cart.feature").is_file()
    assert any((export_dir / "scenarios" / "shopping-cart").glob("*.md"))
    assert "Wrote" in capsys.readouterr().out.splitlines()[0]


def test_analyze_missing_file_exits_3(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["analyze", str(tmp_path / "missing.md")]) == 3

    assert "error: requirements file not found" in capsys.readouterr().err


def test_analyze_invalid_options_exit_3(tmp_path: Path, login_text: str, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "reqs.md", login_text)

    assert main(["analyze", str(path), "--max-scenarios-per-flow", "0"]) == 3

    assert "Invalid generation options" in capsys.readouterr().err


def test_analyze_bad_config_exit_3(tmp_path: Path, login_text: str, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "reqs.md", login_text)
    config = _write(tmp_path, "rules.json", "[]")

    assert main(["analyze", str(path), "--config", str(config)]) == 3

    assert "invalid rules" in capsys.readouterr().err


def test_analyze_with_config(tmp_path: Path, login_text: str, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "reqs.md", login_text)
    config = _write(tmp_path, "rules.json", json.dumps({"penalties": {"undefined_actor": 50}}))

    assert main(["analyze", str(path), "--config", str(config), "--format", "json"]) == 0

    assert json.loads(capsys.readouterr().out)["validation"]["score"] == 50


def test_validate_passes_with_warnings(tmp_path: Path, login_text: str, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "reqs.md", login_text)

    assert main(["validate", str(path)]) == 0

    out = capsys.readouterr().out
    assert "warning:" in out
    assert "Validation score: 95/100" in out


def test_validate_strict_fails_on_warnings(tmp_path: Path, login_text: str) -> None:
    path = _write(tmp_path, "reqs.md", login_text)

    assert main(["validate", str(path), "--strict"]) == 4


def test_validate_clean_document_strict(tmp_path: Path) -> None:
    path = _write(tmp_path, "reqs.md", "As a reader, I want to browse articles so that I stay informed.\n")

    assert main(["validate", str(path), "--strict"]) == 0


def test_verbose_enables_debug_logging(
    tmp_path: Path, login_text: str, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    path = _write(tmp_path, "reqs.md", login_text)
    calls: list[dict[str, object]] = []
    monkeypatch.setattr("scenariopilot.cli.logging.basicConfig", lambda **kwargs: calls.append(kwargs))

    assert main(["validate", str(path), "-v"]) == 0

    assert calls and calls[0]["level"] == 10


def test_directory_argument_is_a_load_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", str(tmp_path)]) == 3

    assert "error: requirements path is not a file" in capsys.readouterr().err
