"""Tests for output renderers."""

import json

import pytest

from icon_fetch.models import LookupRecord
from icon_fetch.renderers import CLIRenderer, JSONRenderer
from icon_fetch.utils.logger import VerbosityLevel


@pytest.fixture
def record():
    return LookupRecord(
        domain="github.com",
        icon_url="https://www.google.com/s2/favicons?domain=github.com&sz=128",
        timestamp=1_700_000_000_000,
    )


class TestJSONRenderer:
    """Test JSON output."""

    def test_lookup_with_analysis(self, capsys, record, github_analysis):
        """Test that analysis is nested under its own key."""
        JSONRenderer().render_lookup(record, github_analysis)
        data = json.loads(capsys.readouterr().out)

        assert data["domain"] == "github.com"
        assert data["timestamp"] == 1_700_000_000_000
        assert data["analysis"]["brandIdentity"] == github_analysis.brand_identity
        assert data["analysis"]["suggestedImprovements"] == github_analysis.suggested_improvements

    def test_history(self, capsys, record):
        """Test history as a JSON array."""
        JSONRenderer().render_history([record])
        assert json.loads(capsys.readouterr().out) == [record.to_dict()]

    def test_non_ascii_kept(self, capsys, record, github_analysis):
        """Test that non-ASCII text is written as-is."""
        analysis = github_analysis.model_copy(update={"style": "极简"})
        JSONRenderer().render_lookup(record, analysis)
        assert "极简" in capsys.readouterr().out


class TestCLIRenderer:
    """Test terminal output."""

    def test_lookup_with_analysis(self, capsys, record, github_analysis):
        """Test that all analysis fields are printed."""
        CLIRenderer(color=False).render_lookup(record, github_analysis)
        out = capsys.readouterr().out

        assert "github.com" in out
        assert "AI brand analysis" in out
        assert "#181717" in out
        assert "Minimalist" in out
        assert "octocat" in out

    def test_lookup_without_analysis(self, capsys, record):
        """Test that the analysis section is omitted when absent."""
        CLIRenderer(color=False).render_lookup(record, None)
        out = capsys.readouterr().out
        assert "github.com" in out
        assert "AI brand analysis" not in out

    def test_lookup_localized(self, capsys, record, github_analysis):
        """Test Chinese labels."""
        CLIRenderer(language="zh", color=False).render_lookup(record, github_analysis)
        assert "品牌调色盘" in capsys.readouterr().out

    def test_lookup_quiet(self, capsys, record, github_analysis):
        """Test that quiet mode prints only the URL."""
        CLIRenderer(verbosity=VerbosityLevel.QUIET).render_lookup(record, github_analysis)
        assert capsys.readouterr().out.strip() == record.icon_url

    def test_unparseable_color(self, capsys, record, github_analysis):
        """Test that a color Rich cannot parse is still listed."""
        analysis = github_analysis.model_copy(update={"colors": ["brand-blue"]})
        CLIRenderer(color=False).render_lookup(record, analysis)
        assert "BRAND-BLUE" in capsys.readouterr().out

    def test_history_empty(self, capsys):
        """Test empty history message."""
        CLIRenderer(color=False).render_history([])
        assert "No history yet" in capsys.readouterr().out

    def test_history_quiet(self, capsys, record):
        """Test that quiet history lists domains only."""
        CLIRenderer(verbosity=VerbosityLevel.QUIET).render_history([record])
        assert capsys.readouterr().out.strip() == "github.com"

    def test_history_table(self, capsys, record):
        """Test history table rows."""
        CLIRenderer(color=False).render_history([record])
        out = capsys.readouterr().out
        assert "Recent lookups" in out
        assert "github.com" in out
