"""Tests for human-friendly ownership output."""

import pytest
from ownerfmt.contracts.summary import OwnershipSummary
from ownerfmt.presentation.human_formatter import format_human_friendly


@pytest.fixture
def sample_summary():
    return OwnershipSummary(
        owner_id="alice",
        owner_email="a@x",
        co_owner_ids="alice,bob",
        co_owner_emails="a@x"
    )


class TestHumanFormatter:
    """Test terminal rendering."""
    
    def test_contains_values(self, sample_summary):
        text = format_human_friendly(sample_summary, ascii_mode=True)
        
        assert "OWNERSHIP" in text
        assert "alice,bob" in text
        assert "a@x" in text
        assert "disabled" not in text
    
    def test_ascii_mode_borders(self, sample_summary):
        text = format_human_friendly(sample_summary, ascii_mode=True)
        assert text.splitlines()[0].startswith("+")
        assert "┌" not in text
    
    def test_ascii_from_environment(self, sample_summary, monkeypatch):
        monkeypatch.setenv("OWNERFMT_ASCII", "true")
        assert "┌" not in format_human_friendly(sample_summary)
        
        monkeypatch.setenv("OWNERFMT_ASCII", "0")
        assert "┌" in format_human_friendly(sample_summary)
    
    def test_empty_values_shown_as_dash(self):
        summary = OwnershipSummary(owner_id="unknown", co_owner_ids="unknown")
        lines = format_human_friendly(summary, ascii_mode=True).splitlines()
        
        email_line = next(line for line in lines if "Owner email:" in line)
        assert email_line.rstrip().endswith("-")
    
    def test_disabled_notice(self):
        summary = OwnershipSummary(ownership_enabled=False, owner_id="unknown", co_owner_ids="unknown")
        assert "Ownership is disabled" in format_human_friendly(summary, ascii_mode=True)
