"""Tests for switchconvert.ubnt_ruckus.formatters output formatters."""

from __future__ import annotations

import pytest

from switchconvert.ubnt_ruckus.extractor import ModelExtractor
from switchconvert.ubnt_ruckus.formatters import MarkdownFormatter, TerminalFormatter


@pytest.fixture()
def sample_model(sample_export_lines):
    return ModelExtractor(sample_export_lines).extract()


class TestTerminalFormatter:
    """Test TerminalFormatter."""

    def test_format_returns_string(self, sample_model):
        """format() produces a string."""
        output = TerminalFormatter(sample_model).format()
        assert isinstance(output, str)
        assert len(output) > 0

    def test_contains_table_headers(self, sample_model):
        """Output contains the port table header."""
        output = TerminalFormatter(sample_model).format()
        assert "Port" in output
        assert "State" in output
        assert "PVID" in output
        assert "PORTS  (52)" in output

    def test_contains_port_rows(self, sample_model):
        """Port names and states are listed."""
        output = TerminalFormatter(sample_model).format()
        assert "Uplink" in output
        assert "disabled" in output
        assert "Port-52" in output

    def test_vlan_summary(self, sample_model):
        """VLAN summary lists members as compact ranges."""
        output = TerminalFormatter(sample_model).format()
        assert "VLAN 20 (Office Staff):" in output
        assert "  Untagged: 2-3" in output
        assert "  Tagged:   1" in output

    def test_vlan_without_ports(self):
        """A VLAN with no members is marked."""
        model = ModelExtractor(["switch.vlan.1.id=99"]).extract()
        assert "(no ports)" in TerminalFormatter(model).format()


class TestMarkdownFormatter:
    """Test MarkdownFormatter."""

    def test_contains_markdown_headings(self, sample_model):
        """Output contains Markdown headings."""
        output = MarkdownFormatter(sample_model, title="core.json").format()
        assert "# Switch Model: core.json" in output
        assert "## Ports" in output
        assert "## VLAN Summary" in output

    def test_contains_markdown_table(self, sample_model):
        """Port table uses pipe syntax."""
        output = MarkdownFormatter(sample_model).format()
        assert "| Port | Name | State | PVID | Untagged | Tagged VLANs |" in output
        assert "| 1 | Uplink | enabled | 1 | - | 20, 1103 |" in output

    def test_disabled_ports_bullet(self, sample_model):
        """Disabled ports are summarized."""
        output = MarkdownFormatter(sample_model).format()
        assert "- **Disabled ports:** 4" in output

    def test_vlan_summary(self, sample_model):
        output = MarkdownFormatter(sample_model).format()
        assert "**VLAN 1103 (MGMT):**" in output
        assert "- Tagged: 1" in output
