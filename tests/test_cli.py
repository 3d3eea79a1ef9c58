"""Tests für die Kommandozeile (click CliRunner, Standardkonfiguration)."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from config.manager import ConfigManager
from main import cli


MONDAY_1030 = "2026-10-19 10:30"
SUNDAY_1030 = "2026-10-18 10:30"


@pytest.fixture(autouse=True)
def no_config_file(tmp_path: Path, monkeypatch):
    """Ohne Konfigurationsdatei greifen die Standardwerte."""
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG", tmp_path / "facility_config.yaml")
    monkeypatch.setattr(ConfigManager, "CONFIG_DIR", tmp_path)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# ─── LESEBEFEHLE ──────────────────────────────────────────────────────────────

class TestReadCommands:
    def test_floors_all(self, runner):
        result = runner.invoke(cli, ["floors", "--at", MONDAY_1030])
        assert result.exit_code == 0, result.output
        assert "Standardwerte" in result.output
        assert "Stockwerk 1" in result.output
        assert "Stockwerk 6" in result.output

    def test_floors_single(self, runner):
        result = runner.invoke(cli, ["floors", "--floor", "2", "--at", MONDAY_1030])
        assert result.exit_code == 0, result.output
        assert "Stockwerk 2" in result.output
        assert "Stockwerk 3" not in result.output

    def test_floors_unknown_floor(self, runner):
        result = runner.invoke(cli, ["floors", "--floor", "9"])
        assert result.exit_code == 1

    def test_sunday_everything_free(self, runner):
        result = runner.invoke(cli, ["floors", "--floor", "1", "--at", SUNDAY_1030])
        assert result.exit_code == 0, result.output
        assert "occupied" not in result.output

    def test_invalid_at_format(self, runner):
        result = runner.invoke(cli, ["floors", "--at", "Montag"])
        assert result.exit_code == 2

    def test_room(self, runner):
        result = runner.invoke(cli, ["room", "f1-r1", "--at", MONDAY_1030])
        assert result.exit_code == 0, result.output
        assert "MB-101" in result.output
        assert "Wochenplan" in result.output
        assert "Keine Wartungsmeldungen" in result.output

    def test_room_unknown(self, runner):
        result = runner.invoke(cli, ["room", "f9-r9"])
        assert result.exit_code == 1
        assert "nicht gefunden" in result.output

    def test_search(self, runner):
        result = runner.invoke(cli, ["search", "MB-30", "--at", MONDAY_1030])
        assert result.exit_code == 0, result.output
        assert "f3-r1" in result.output

    def test_search_no_hit(self, runner):
        result = runner.invoke(cli, ["search", "xyz"])
        assert result.exit_code == 0
        assert "Kein Raum" in result.output

    def test_summary(self, runner):
        result = runner.invoke(cli, ["summary", "--at", MONDAY_1030])
        assert result.exit_code == 0, result.output
        assert "Belegung" in result.output

    def test_lost_filter(self, runner):
        result = runner.invoke(cli, ["lost", "--kind", "found"])
        assert result.exit_code == 0, result.output
        assert "Umbrella" in result.output
        assert "Textbook" not in result.output

    def test_generate(self, runner):
        result = runner.invoke(cli, ["generate", "--seed", "1"])
        assert result.exit_code == 0, result.output
        assert "Räume: 72" in result.output


# ─── SETUP & CONFIG ───────────────────────────────────────────────────────────

class TestSetup:
    def test_setup_writes_config(self, runner):
        result = runner.invoke(cli, ["setup"])
        assert result.exit_code == 0, result.output
        assert ConfigManager.DEFAULT_CONFIG.exists()

    def test_config_show(self, runner):
        runner.invoke(cli, ["setup"])
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0, result.output
        assert "Main Building" in result.output
        assert "Standardwerte" not in result.output

    def test_broken_config_exits(self, runner):
        ConfigManager.DEFAULT_CONFIG.write_text("seed: nicht-zahl\n", encoding="utf-8")
        result = runner.invoke(cli, ["floors"])
        assert result.exit_code == 1


# ─── INTERAKTIVE SITZUNG ──────────────────────────────────────────────────────

class TestConsole:
    def test_admin_sets_override(self, runner):
        result = runner.invoke(
            cli, ["console", "--role", "admin", "--at", MONDAY_1030],
            input="3\nf1-r1\nreserved\n0\n",
        )
        assert result.exit_code == 0, result.output
        assert "Manual override set to reserved" in result.output

    def test_user_cannot_override(self, runner):
        result = runner.invoke(cli, ["console"], input="3\n0\n")
        assert result.exit_code == 0, result.output
        assert "Nur für Administratoren" in result.output

    def test_user_reports_issue(self, runner):
        result = runner.invoke(
            cli, ["console", "--at", MONDAY_1030],
            input="4\nf1-r1\nAC\nKlimaanlage defekt\n0\n",
        )
        assert result.exit_code == 0, result.output
        assert "mnt-000001" in result.output

    def test_error_shown_and_loop_continues(self, runner):
        result = runner.invoke(cli, ["console", "--role", "admin"],
                               input="8\nlf-000404\n0\n")
        assert result.exit_code == 0, result.output
        assert "nicht gefunden" in result.output
