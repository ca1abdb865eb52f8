"""Render the extracted switch model as a Ruckus ICX configuration script."""

from __future__ import annotations

from pydantic import BaseModel, Field

from switchconvert.ubnt_ruckus._util import ethe_port_list
from switchconvert.ubnt_ruckus.models import Port, Vlan


class RuckusProfile(BaseModel):
    """Constants of the target hardware/site profile.

    None of these are derived from the input. Porting to another target
    profile means editing this table, not the renderer.
    """

    stack_unit: int = 1
    modules: list[str] = Field(
        default_factory=lambda: ["icx7650-48p-poe-module", "icx7650-8x10g-module"],
    )
    interface_prefix: str = "1/1/"
    default_vlan_id: str = "1"
    default_vlan_name: str = "DEFAULT-VLAN"

    mgmt_vlan_id: str = "1103"
    mgmt_ip: str = "10.255.103.25 255.255.255.0"
    mgmt_gateway: str = "10.255.103.1"
    fallback_ve: str = "1"
    fallback_ip: str = "192.168.1.100 255.255.255.0"

    hostname: str = "SWITCHIGDLT2"
    timezone: str = '"WIB-7" 7'
    snmp_community: str = "public"
    ntp_server: str = "172.16.0.2"
    usernames: list[str] = Field(default_factory=lambda: ["itikom", "admin"])
    password_placeholder: str = "....."


class ConfigRenderer:
    """Render VLAN and port tables into Ruckus CLI syntax."""

    def __init__(self, profile: RuckusProfile | None = None) -> None:
        self.profile = profile or RuckusProfile()

    def render(self, vlans: list[Vlan], ports: dict[int, Port]) -> str:
        """Return the complete configuration; ``\\n`` line endings, ends with ``end``."""
        lines: list[str] = []
        lines.extend(self._render_preamble())
        lines.extend(self._render_vlans(vlans, ports))
        lines.extend(self._render_ports(ports))
        lines.extend(self._render_management(vlans))
        lines.extend(self._render_system())
        lines.append("end")
        return "\n".join(lines) + "\n"

    def _render_preamble(self) -> list[str]:
        p = self.profile
        lines = ["!", f"stack unit {p.stack_unit}"]
        for slot, module in enumerate(p.modules, start=1):
            lines.append(f"  module {slot} {module}")
        lines.extend(["!", "global-stp", "!"])
        lines.extend([f"vlan {p.default_vlan_id} name {p.default_vlan_name} by port", "!"])
        return lines

    def _render_vlans(self, vlans: list[Vlan], ports: dict[int, Port]) -> list[str]:
        p = self.profile
        lines: list[str] = []
        for vlan in vlans:
            if vlan.id == p.default_vlan_id:
                continue
            lines.append(f"vlan {vlan.id} name {vlan.name.replace(' ', '-')} by port")

            untagged = [n for n, port in ports.items() if port.enabled and port.untagged_vlan == vlan.id]
            if untagged:
                lines.append(f" untagged {ethe_port_list(untagged, p.interface_prefix)}")

            tagged = [n for n, port in ports.items() if port.enabled and vlan.id in port.tagged_vlans]
            if tagged:
                lines.append(f" tagged {ethe_port_list(tagged, p.interface_prefix)}")

            if vlan.id == p.mgmt_vlan_id:
                lines.append(f" router-interface ve {vlan.id}")
            lines.append("!")
        return lines

    def _render_ports(self, ports: dict[int, Port]) -> list[str]:
        lines = ["! Port Configuration"]
        for n, port in ports.items():
            lines.append(f"interface ethernet {self.profile.interface_prefix}{n}")
            lines.append(f' port-name "{port.name}"')
            if port.disabled:
                lines.append(" disable")
            lines.append("!")
        return lines

    def _render_management(self, vlans: list[Vlan]) -> list[str]:
        p = self.profile
        lines = ["! Management Interface"]
        if any(v.id == p.mgmt_vlan_id for v in vlans):
            lines.append(f"interface ve {p.mgmt_vlan_id}")
            lines.append(f" ip address {p.mgmt_ip}")
            lines.append(f" ip gateway {p.mgmt_gateway}")
        else:
            lines.append(f"interface ve {p.fallback_ve}")
            lines.append(f" ip address {p.fallback_ip}")
        lines.append("!")
        return lines

    def _render_system(self) -> list[str]:
        p = self.profile
        lines = [
            "! System Configuration",
            f"hostname {p.hostname}",
            f"clock timezone {p.timezone}",
            f"snmp-server community {p.snmp_community} ro",
            f"ntp-server {p.ntp_server}",
            "!",
            "! User Accounts",
        ]
        for user in p.usernames:
            lines.append(f"username {user} password {p.password_placeholder}")
        lines.extend(["!", "! PoE Configuration", "power-over-ethernet enable", "!"])
        return lines
