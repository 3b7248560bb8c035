"""Tests for the command-line interface."""

import json
import tomllib
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from icon_fetch.cli import app, validate_output_format, validate_verbosity
from icon_fetch.config import get_user_config_path
from icon_fetch.history import FileHistoryStore
from icon_fetch.models import LookupRecord

runner = CliRunner()


@pytest.fixture
def history_file(tmp_path):
    return tmp_path / "history.json"


def lookup(history_file, *args):
    return runner.invoke(
        app,
        ["lookup", *args, "--history-file", str(history_file)],
    )


# ============================================================================
# Test CLI Entry Point
# ============================================================================


class TestCLIEntryPoint:
    """Test CLI entry point and help text."""

    def test_cli_help(self):
        """Test that CLI help lists the commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "lookup" in result.stdout
        assert "history" in result.stdout
        assert "download" in result.stdout

    def test_version(self):
        """Test version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "icon-fetch" in result.stdout


# ============================================================================
# Test Validators
# ============================================================================


class TestValidators:
    """Test option validators."""

    def test_verbosity(self):
        """Test verbosity validation is case-insensitive."""
        assert validate_verbosity("DEBUG") == "debug"

    def test_invalid_verbosity(self):
        """Test unknown verbosity is rejected."""
        result = runner.invoke(app, ["history", "--verbosity", "loud"])
        assert result.exit_code != 0

    def test_output_format(self):
        """Test output format validation."""
        assert validate_output_format("JSON") == "json"


# ============================================================================
# Test Lookup Command
# ============================================================================


class TestLookup:
    """Test lookup command."""

    def test_lookup_json(self, history_file):
        """Test JSON output of a lookup without analysis."""
        result = lookup(history_file, "https://www.GitHub.com/about", "--no-analysis", "-f", "json")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["domain"] == "github.com"
        assert data["iconUrl"] == "https://www.google.com/s2/favicons?domain=github.com&sz=128"
        assert data["analysis"] is None

    def test_lookup_records_history(self, history_file):
        """Test that lookups are stored in the history file."""
        lookup(history_file, "a.com", "--no-analysis")
        lookup(history_file, "b.com", "--no-analysis")

        assert [r.domain for r in FileHistoryStore(history_file).load()] == ["b.com", "a.com"]

    def test_lookup_quiet(self, history_file):
        """Test that quiet mode prints only the icon URL."""
        result = lookup(history_file, "github.com", "--no-analysis", "-v", "quiet")
        assert result.exit_code == 0
        assert result.stdout.strip() == (
            "https://www.google.com/s2/favicons?domain=github.com&sz=128"
        )

    def test_lookup_cli(self, history_file):
        """Test default terminal output."""
        result = lookup(history_file, "github.com", "--no-analysis")
        assert result.exit_code == 0
        assert "github.com" in result.stdout
        assert "Icon URL" in result.stdout

    def test_lookup_invalid_domain(self, history_file):
        """Test that invalid input exits with an error and records nothing."""
        result = lookup(history_file, "not a domain", "--no-analysis")

        assert result.exit_code == 1
        assert "valid website address" in result.stdout
        assert not history_file.exists()

    def test_lookup_with_analysis(self, history_file, github_analysis, monkeypatch):
        """Test that analysis is included when available."""
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        with patch(
            "icon_fetch.cli.BrandAnalysisClient.analyze",
            new=AsyncMock(return_value=github_analysis),
        ):
            result = lookup(history_file, "github.com", "-f", "json")

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["analysis"]["style"] == "Minimalist"
        assert data["analysis"]["colors"] == ["#181717", "#FFFFFF"]

    def test_lookup_custom_config(self, history_file, tmp_path):
        """Test that --config is applied."""
        config = tmp_path / "custom.toml"
        config.write_text("[favicon]\nsize = 32\n", encoding="utf-8")

        result = lookup(
            history_file, "github.com", "--no-analysis", "-f", "json", "-c", str(config)
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["iconUrl"].endswith("sz=32")


# ============================================================================
# Test History Commands
# ============================================================================


class TestHistory:
    """Test history and clear-history commands."""

    def seed(self, history_file, *domains):
        store = FileHistoryStore(history_file)
        for i, domain in enumerate(domains):
            store.upsert(LookupRecord(domain=domain, icon_url=f"https://i/{domain}", timestamp=i))

    def test_history_empty(self, history_file):
        """Test output with no history."""
        result = runner.invoke(app, ["history", "--history-file", str(history_file)])
        assert result.exit_code == 0
        assert "No history yet" in result.stdout

    def test_history_json(self, history_file):
        """Test JSON history output, most recent first."""
        self.seed(history_file, "a.com", "b.com")
        result = runner.invoke(app, ["history", "-f", "json", "--history-file", str(history_file)])

        assert result.exit_code == 0
        assert [item["domain"] for item in json.loads(result.stdout)] == ["b.com", "a.com"]

    def test_history_table(self, history_file):
        """Test table output."""
        self.seed(history_file, "a.com")
        result = runner.invoke(app, ["history", "--history-file", str(history_file)])
        assert result.exit_code == 0
        assert "Recent lookups" in result.stdout
        assert "a.com" in result.stdout

    def test_history_undecodable_file(self, history_file):
        """Test that a history file with invalid bytes is shown as empty history."""
        history_file.write_bytes(b"\xff\xfe[broken")

        result = runner.invoke(app, ["history", "--history-file", str(history_file)])

        assert result.exit_code == 0
        assert "No history yet" in result.stdout

    def test_lookup_replaces_undecodable_file(self, history_file):
        """Test that a lookup succeeds and rewrites an unreadable history file."""
        history_file.write_bytes(b"\xff\xfe[broken")

        result = lookup(history_file, "github.com", "--no-analysis", "-f", "json")

        assert result.exit_code == 0
        assert [r.domain for r in FileHistoryStore(history_file).load()] == ["github.com"]

    def test_clear_history(self, history_file):
        """Test clearing history without confirmation prompt."""
        self.seed(history_file, "a.com")
        result = runner.invoke(app, ["clear-history", "--yes", "--history-file", str(history_file)])

        assert result.exit_code == 0
        assert "History cleared" in result.stdout
        assert not history_file.exists()

    def test_clear_history_declined(self, history_file):
        """Test that declining the prompt keeps history."""
        self.seed(history_file, "a.com")
        result = runner.invoke(
            app,
            ["clear-history", "--history-file", str(history_file)],
            input="n\n",
        )

        assert result.exit_code == 0
        assert history_file.exists()


# ============================================================================
# Test Download Command
# ============================================================================


class TestDownload:
    """Test download command."""

    def test_download(self, tmp_path):
        """Test saving the icon to the default file name."""
        with patch(
            "icon_fetch.cli.safe_http_get_content", return_value=(b"\x89PNG", None)
        ) as mock_get:
            result = runner.invoke(app, ["download", "https://www.github.com/"])

        assert result.exit_code == 0
        assert (tmp_path / "github.com.png").read_bytes() == b"\x89PNG"
        assert mock_get.call_args.args[0] == (
            "https://www.google.com/s2/favicons?domain=github.com&sz=128"
        )

    def test_download_size_and_output(self, tmp_path):
        """Test --size and --output options."""
        output = tmp_path / "icon.png"
        with patch(
            "icon_fetch.cli.safe_http_get_content", return_value=(b"data", None)
        ) as mock_get:
            result = runner.invoke(app, ["download", "github.com", "-s", "64", "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_bytes() == b"data"
        assert mock_get.call_args.args[0].endswith("sz=64")

    def test_download_failure(self, tmp_path):
        """Test that download errors exit with an error."""
        with patch(
            "icon_fetch.cli.safe_http_get_content", return_value=(None, "HTTP 404: url")
        ):
            result = runner.invoke(app, ["download", "github.com"])

        assert result.exit_code == 1
        assert "Failed to download icon" in result.stdout
        assert not (tmp_path / "github.com.png").exists()

    def test_download_invalid_domain(self):
        """Test that invalid input is rejected before any request."""
        with patch("icon_fetch.cli.safe_http_get_content") as mock_get:
            result = runner.invoke(app, ["download", "nope"])

        assert result.exit_code == 1
        mock_get.assert_not_called()


# ============================================================================
# Test Create Config Command
# ============================================================================


class TestCreateConfig:
    """Test create-config command."""

    def test_create_config(self, tmp_path):
        """Test creating the default config file in the current directory."""
        result = runner.invoke(app, ["create-config"])
        assert result.exit_code == 0
        assert (tmp_path / ".icon-fetch.toml").exists()

    def test_create_config_exists(self, tmp_path):
        """Test that an existing file is not overwritten without --force."""
        output = tmp_path / "config.toml"
        output.write_text("# mine\n", encoding="utf-8")

        result = runner.invoke(app, ["create-config", "-o", str(output)])
        assert result.exit_code == 1
        assert output.read_text(encoding="utf-8") == "# mine\n"

        result = runner.invoke(app, ["create-config", "-o", str(output), "--force"])
        assert result.exit_code == 0
        assert "[history]" in output.read_text(encoding="utf-8")

    def test_create_config_ignores_environment(self, tmp_path, monkeypatch):
        """Test that the default file holds packaged defaults, not environment overrides."""
        monkeypatch.setenv("ICON_FETCH_OUTPUT__LANGUAGE", "zh")
        monkeypatch.setenv("GEMINI_API_KEY", "top-secret")

        result = runner.invoke(app, ["create-config"])

        assert result.exit_code == 0
        text = (tmp_path / ".icon-fetch.toml").read_text(encoding="utf-8")
        assert tomllib.loads(text)["output"]["language"] == "en"
        assert "top-secret" not in text

    def test_create_config_user(self):
        """Test writing the per-user config file."""
        result = runner.invoke(app, ["create-config", "--user"])

        assert result.exit_code == 0
        assert get_user_config_path().exists()

    def test_create_config_user_and_output(self, tmp_path):
        """Test that --user and --output cannot be combined."""
        result = runner.invoke(app, ["create-config", "--user", "-o", str(tmp_path / "x.toml")])
        assert result.exit_code == 1
        assert not (tmp_path / "x.toml").exists()

    def test_create_config_current(self, tmp_path, monkeypatch):
        """Test exporting the effective configuration without the API key."""
        monkeypatch.setenv("ICON_FETCH_OUTPUT__LANGUAGE", "zh")
        monkeypatch.setenv("GEMINI_API_KEY", "top-secret")
        output = tmp_path / "effective.toml"

        result = runner.invoke(app, ["create-config", "--current", "-o", str(output)])

        assert result.exit_code == 0
        text = output.read_text(encoding="utf-8")
        assert tomllib.loads(text)["output"]["language"] == "zh"
        assert "top-secret" not in text
