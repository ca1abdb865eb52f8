"""Shared fixtures for the switchconvert test suite."""

from __future__ import annotations

import json

import pytest

# ── Ubiquiti export fixtures ──────────────────────────────────────────


@pytest.fixture()
def guest_vlan_lines():
    """Minimal export: VLAN 10 'Guest', port 3 PVID 10, port 5 tagged."""
    return [
        "switch.vlan.1.id=10",
        "switch.vlan.1.name=Guest",
        "switch.port.3.pvid=10",
        "switch.vlan.1.port.5.mode=tagged",
    ]


@pytest.fixture()
def sample_export_lines():
    """Realistic export with default, data, management and disabled VLANs."""
    return [
        "switch.hostname=ubnt-core",
        "switch.vlan.1.id=1",
        "switch.vlan.1.name=default",
        "switch.vlan.1.status=enabled",
        "switch.vlan.2.id=20",
        "switch.vlan.2.name=Office Staff",
        "switch.vlan.2.status=enabled",
        "switch.vlan.3.id=1103",
        "switch.vlan.3.name=MGMT",
        "switch.vlan.4.id=30",
        "switch.vlan.4.name=Old",
        "switch.vlan.4.status=disabled",
        "switch.port.1.name=Uplink",
        "switch.port.2.name=Desk 2",
        "switch.port.2.pvid=20",
        "switch.port.4.status=disabled",
        "switch.port.4.pvid=20",
        "switch.vlan.2.port.1.mode=tagged",
        "switch.vlan.2.port.3.mode=untagged",
        "switch.vlan.2.port.4.mode=untagged",
        "switch.vlan.3.port.1.mode=tagged",
        "switch.vlan.4.port.6.mode=untagged",
        "switch.vlan.4.port.1.mode=tagged",
    ]


@pytest.fixture()
def make_export():
    """Factory fixture returning a JSON export string for the given lines."""

    def _make(lines=None, **extra):
        doc = dict(extra)
        if lines is not None:
            doc["expected_system_cfg"] = lines
        return json.dumps(doc)

    return _make
