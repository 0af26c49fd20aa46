"""Tests for CLI commands via typer.testing.CliRunner."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from warden import __version__
from warden.cli import EXIT_CLEAN, EXIT_CRASHED, EXIT_FINDINGS, app
from warden.errors import TargetUnreachableError
from warden.models.finding import Category, Finding
from warden.models.report import Report

runner = CliRunner()


def _report(*findings: Finding) -> Report:
    return Report.build(list(findings), target="http://shop.test")


class TestVersionCommand:
    def test_version_output(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "Usage" in result.output or "warden" in result.output.lower()


class TestGroupsCommand:
    def test_lists_groups(self):
        result = runner.invoke(app, ["groups"])
        assert result.exit_code == 0
        assert "access_control" in result.output
        assert "A10" in result.output


class TestReviewCommand:
    def test_clean_exit(self, tmp_path):
        with patch("warden.Warden.run", new=AsyncMock(return_value=_report())):
            result = runner.invoke(app, ["review", "-u", "http://shop.test", "-o", str(tmp_path)])
        assert result.exit_code == EXIT_CLEAN
        assert "Total Findings: 0" in result.output
        assert list(tmp_path.glob("report_*.json"))

    def test_findings_exit(self):
        report = _report(Finding.high(Category.ACCESS_CONTROL, "Unauthorized access"))
        with patch("warden.Warden.run", new=AsyncMock(return_value=report)):
            result = runner.invoke(app, ["review", "--no-save"])
        assert result.exit_code == EXIT_FINDINGS

    def test_medium_only_is_clean(self):
        report = _report(Finding.medium(Category.LOGGING, "Security Event Logging"))
        with patch("warden.Warden.run", new=AsyncMock(return_value=report)):
            result = runner.invoke(app, ["review", "--no-save"])
        assert result.exit_code == EXIT_CLEAN

    def test_unreachable_target(self):
        error = TargetUnreachableError("http://shop.test/api/admin/users", "refused")
        with patch("warden.Warden.run", new=AsyncMock(side_effect=error)):
            result = runner.invoke(app, ["review", "--no-save"])
        assert result.exit_code == EXIT_CRASHED
        assert "Security review failed" in result.output

    def test_unknown_group(self):
        result = runner.invoke(app, ["review", "--only", "nope", "--no-save"])
        assert result.exit_code == EXIT_CRASHED
        assert "Unknown probe groups" in result.output

    def test_missing_configured_manifest(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            f"review:\n  manifest_path: {tmp_path / 'typo' / 'package.json'}\n"
        )
        result = runner.invoke(app, [
            "review", "--config", str(config_file), "--only", "components", "--no-save",
        ])
        assert result.exit_code == EXIT_CRASHED
        assert "Security review failed" in result.output

    def test_unexpected_error_not_reported_as_crash(self):
        with patch("warden.Warden.run", new=AsyncMock(side_effect=ValueError("bug in a group"))):
            result = runner.invoke(app, ["review", "--no-save"])
        assert result.exit_code != EXIT_CRASHED
        assert isinstance(result.exception, ValueError)
