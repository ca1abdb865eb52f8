"""Terminal and Markdown summaries of an extracted switch model."""

from __future__ import annotations

from switchconvert.ubnt_ruckus._util import format_port_range
from switchconvert.ubnt_ruckus.models import SwitchModel


def _vlan_members(model: SwitchModel, vlan_id: str) -> tuple[list[int], list[int]]:
    """Return (untagged, tagged) enabled port numbers for a VLAN."""
    untagged = [n for n, p in model.ports.items() if p.enabled and p.untagged_vlan == vlan_id]
    tagged = [n for n, p in model.ports.items() if p.enabled and vlan_id in p.tagged_vlans]
    return untagged, tagged


class TerminalFormatter:
    """Format a SwitchModel as plain-text terminal output."""

    def __init__(self, model: SwitchModel) -> None:
        self.model = model

    def format(self) -> str:
        """Return the complete terminal output as a string."""
        m = self.model
        lines: list[str] = []

        # ── Port table ─────────────────────────────────────────────────
        lines.append(f"{'=' * 85}")
        lines.append(f"  PORTS  ({len(m.ports)})")
        lines.append(f"{'=' * 85}")
        lines.append(f"{'Port':<6} {'Name':<24} {'State':<9} {'PVID':>5}  " f"{'Untagged':<10} {'Tagged VLANs'}")
        lines.append("-" * 85)

        for n, p in m.ports.items():
            untag_str = p.untagged_vlan or "-"
            tag_str = ", ".join(p.tagged_vlans) or "-"
            lines.append(f"{n:<6} {p.name:<24} {p.status.value:<9} {p.pvid:>5}  {untag_str:<10} {tag_str}")

        # ── VLAN summary ──────────────────────────────────────────────
        lines.append(f"\n{'=' * 85}")
        lines.append(f"  VLANS  ({len(m.vlans)})")
        lines.append(f"{'=' * 85}\n")

        for vlan in m.vlans:
            untagged, tagged = _vlan_members(m, vlan.id)
            lines.append(f"VLAN {vlan.id} ({vlan.name}):")
            if untagged:
                lines.append(f"  Untagged: {format_port_range(untagged)}")
            if tagged:
                lines.append(f"  Tagged:   {format_port_range(tagged)}")
            if not untagged and not tagged:
                lines.append("  (no ports)")
            lines.append("")

        return "\n".join(lines)


class MarkdownFormatter:
    """Format a SwitchModel as a Markdown document."""

    def __init__(self, model: SwitchModel, title: str = "Ubiquiti export") -> None:
        self.model = model
        self.title = title

    def format(self) -> str:
        """Return the complete Markdown document as a string."""
        m = self.model
        lines: list[str] = []

        lines.append(f"# Switch Model: {self.title}\n")
        lines.append(f"- **Ports:** {len(m.ports)}")
        lines.append(f"- **VLANs:** {len(m.vlans)}")
        disabled = [n for n, p in m.ports.items() if p.disabled]
        lines.append(f"- **Disabled ports:** {format_port_range(disabled) or '-'}")
        lines.append("")

        lines.append("## Ports\n")
        lines.append("| Port | Name | State | PVID | Untagged | Tagged VLANs |")
        lines.append("|-----:|------|-------|-----:|----------|--------------|")
        for n, p in m.ports.items():
            untag_str = p.untagged_vlan or "-"
            tag_str = ", ".join(p.tagged_vlans) or "-"
            lines.append(f"| {n} | {p.name} | {p.status.value} | {p.pvid} | {untag_str} | {tag_str} |")
        lines.append("")

        lines.append("## VLAN Summary\n")
        for vlan in m.vlans:
            untagged, tagged = _vlan_members(m, vlan.id)
            lines.append(f"**VLAN {vlan.id} ({vlan.name}):**")
            if untagged:
                lines.append(f"- Untagged: {format_port_range(untagged)}")
            if tagged:
                lines.append(f"- Tagged: {format_port_range(tagged)}")
            if not untagged and not tagged:
                lines.append("- (no ports)")
            lines.append("")

        return "\n".join(lines)
