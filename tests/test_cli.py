"""
Tests for the Typer CLI (freeseo.cli).

Commands are invoked in-process with ``typer.testing.CliRunner``.  Every
invocation uses a temp config with log level WARNING so stdout carries only
the rendered report.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from freeseo.cli import app
from tests.factories import audit_data

pytestmark = pytest.mark.usefixtures("restore_root_logger")

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config" / "default.toml"
    path.parent.mkdir()
    path.write_text(
        '[logging]\nlevel = "WARNING"\n\n'
        '[collector]\nbase_url = "http://127.0.0.1:9"\ntimeout_seconds = 0.5\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def audit_file(tmp_path: Path) -> Path:
    path = tmp_path / "audit.json"
    path.write_text(
        json.dumps(audit_data(title={"ok": False}, h1={"count": 3})), encoding="utf-8"
    )
    return path


class TestScoreCommand:
    def test_text_output(self, audit_file, config_file):
        result = runner.invoke(app, ["score", str(audit_file), "--config", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "=== FreeSEO Audit Report ===" in result.stdout
        assert "Ensure exactly one H1" in result.stdout

    def test_json_output(self, audit_file, config_file):
        result = runner.invoke(
            app, ["score", str(audit_file), "--format", "json", "--config", str(config_file)]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [s["score"] for s in data["scores"]][:3] == [40, 90, 60]
        assert [r["rule"] for r in data["recommendations"]] == ["title", "h1"]

    def test_html_to_file(self, audit_file, config_file, tmp_path):
        out = tmp_path / "out" / "report.html"
        result = runner.invoke(
            app,
            ["score", str(audit_file), "-f", "html", "-o", str(out), "--config", str(config_file)],
        )
        assert result.exit_code == 0, result.output
        assert "[OK] Report written" in result.stdout
        assert out.read_text(encoding="utf-8").startswith("<!doctype html>")

    def test_bare_output_name_goes_to_output_dir(self, audit_file, tmp_path, monkeypatch):
        reports = tmp_path / "reports"
        cfg = tmp_path / "cfg" / "default.toml"
        cfg.parent.mkdir()
        cfg.write_text(
            '[logging]\nlevel = "WARNING"\n\n'
            f'[report]\noutput_dir = "{reports.as_posix()}"\n',
            encoding="utf-8",
        )
        monkeypatch.delenv("FREESEO_OUTPUT_DIR", raising=False)
        result = runner.invoke(
            app, ["score", str(audit_file), "-f", "json", "-o", "audit.json", "--config", str(cfg)]
        )
        assert result.exit_code == 0, result.output
        assert json.loads((reports / "audit.json").read_text(encoding="utf-8"))["url"]

    def test_missing_file_exits_1(self, tmp_path, config_file):
        result = runner.invoke(
            app, ["score", str(tmp_path / "nope.json"), "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "[ERROR]" in result.output

    def test_invalid_audit_exits_1(self, tmp_path, config_file):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"url": "https://x.example"}), encoding="utf-8")
        result = runner.invoke(app, ["score", str(bad), "--config", str(config_file)])
        assert result.exit_code == 1
        assert "Invalid raw audit" in result.output

    def test_unknown_format_exits_1(self, audit_file, config_file):
        result = runner.invoke(
            app, ["score", str(audit_file), "--format", "pdf", "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "Unknown format" in result.output


class TestCollectorCommands:
    def test_analyze_url_unreachable_collector_exits_1(self, config_file):
        result = runner.invoke(
            app, ["analyze-url", "https://example.com", "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "[ERROR]" in result.output

    def test_analyze_html_missing_file_exits_1(self, tmp_path, config_file):
        result = runner.invoke(
            app, ["analyze-html", str(tmp_path / "page.html"), "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "HTML file not found" in result.output


class TestValidateConfig:
    def test_prints_values(self, config_file):
        result = runner.invoke(app, ["validate-config", "--config", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "Configuration validated successfully." in result.stdout
        assert "http://127.0.0.1:9" in result.stdout

    def test_full_dumps_json(self, config_file):
        result = runner.invoke(app, ["validate-config", "--config", str(config_file), "--full"])
        assert result.exit_code == 0
        assert '"link_sample_size": 30' in result.stdout

    def test_missing_config_exits_1(self, tmp_path):
        result = runner.invoke(app, ["validate-config", "--config", str(tmp_path / "x.toml")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output
