"""Extract the VLAN and port tables from Ubiquiti property lines."""

from __future__ import annotations

import re

from loguru import logger

from switchconvert.ubnt_ruckus._util import build_property_map
from switchconvert.ubnt_ruckus.models import PORT_COUNT, Port, PortState, SwitchModel, Vlan

_VLAN_ID_RE = re.compile(r"switch\.vlan\.(\d+)\.id=(\d+)")


class ModelExtractor:
    """Build the VLAN and port tables for one conversion.

    The property lines are indexed once into a first-wins key/value map; all
    lookups after that are direct.
    """

    def __init__(self, lines: list[str]) -> None:
        self.lines = lines
        self.props = build_property_map(lines)

    def extract_vlans(self) -> list[Vlan]:
        """Return the enabled VLANs in the order their ``.id=`` lines appear."""
        logger.debug("Extracting VLANs from config...")
        vlans: list[Vlan] = []

        for line in self.lines:
            m = _VLAN_ID_RE.match(line)
            if not m:
                continue
            vlan_index, vlan_id = m.group(1), m.group(2)

            name = self.props.get(f"switch.vlan.{vlan_index}.name") or f"VLAN-{vlan_id}"

            # Substring check: any status value mentioning "enabled" counts
            status = self.props.get(f"switch.vlan.{vlan_index}.status")
            if status is not None and "enabled" not in status:
                logger.debug(f"Skipping VLAN {vlan_id} (status={status!r})")
                continue

            vlans.append(Vlan(id=vlan_id, name=name, index=vlan_index))

        logger.debug(f"Found {len(vlans)} VLANs: {[v.id for v in vlans]}")
        return vlans

    def extract_port_configs(self, vlans: list[Vlan] | None = None) -> dict[int, Port]:
        """Return all ports keyed by port number, 1..PORT_COUNT.

        Args:
            vlans: Enabled VLANs to apply per-port modes from. Defaults to
                ``extract_vlans()``.
        """
        logger.debug("Extracting port configurations...")
        ports: dict[int, Port] = {}

        # ── Pass 1: per-port properties ───────────────────────────────
        for n in range(1, PORT_COUNT + 1):
            port = Port(number=n)

            name = self.props.get(f"switch.port.{n}.name")
            if name:
                port.name = name

            status = self.props.get(f"switch.port.{n}.status")
            if status is not None and "disabled" in status:
                port.status = PortState.DISABLED

            pvid = self.props.get(f"switch.port.{n}.pvid")
            if pvid:
                port.pvid = pvid
                port.untagged_vlan = pvid

            ports[n] = port

        # ── Pass 2: per-VLAN port modes ───────────────────────────────
        if vlans is None:
            vlans = self.extract_vlans()

        for vlan in vlans:
            for n, port in ports.items():
                mode = self.props.get(f"switch.vlan.{vlan.index}.port.{n}.mode")
                if mode is None or port.disabled:
                    continue
                if mode == "untagged":
                    port.untagged_vlan = vlan.id
                elif mode == "tagged" and vlan.id not in port.tagged_vlans:
                    port.tagged_vlans.append(vlan.id)

        disabled = [n for n, p in ports.items() if p.disabled]
        logger.debug(f"Port configurations built: {len(ports)} ports, disabled: {disabled or '-'}")
        return ports

    def extract(self) -> SwitchModel:
        """Return both tables, sharing one VLAN extraction."""
        vlans = self.extract_vlans()
        ports = self.extract_port_configs(vlans)
        return SwitchModel(vlans=vlans, ports=ports)
