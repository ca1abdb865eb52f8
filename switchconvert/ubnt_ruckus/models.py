"""Pydantic models for the Ubiquiti source export and the extracted switch model."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

# Fixed single-unit hardware layout
PORT_COUNT = 52


class PortState(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class Vlan(BaseModel):
    """A VLAN as defined in the source export."""

    id: str
    name: str
    index: str  # source-side ordinal, not the VLAN id


class Port(BaseModel):
    """Configuration of one physical switch port."""

    number: int = Field(ge=1, le=PORT_COUNT)
    name: str = ""
    status: PortState = PortState.ENABLED
    pvid: str = "1"
    untagged_vlan: str | None = None
    tagged_vlans: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _default_name(self) -> Port:
        if not self.name:
            self.name = f"Port-{self.number}"
        return self

    @property
    def disabled(self) -> bool:
        return self.status is PortState.DISABLED

    @property
    def enabled(self) -> bool:
        return not self.disabled


class UbiquitiConfig(BaseModel):
    """Top-level Ubiquiti JSON export; only the property-line list is used."""

    expected_system_cfg: list[str] = Field(default_factory=list)

    @field_validator("expected_system_cfg", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SwitchModel(BaseModel):
    """VLAN and port tables extracted for a single conversion."""

    vlans: list[Vlan] = Field(default_factory=list)
    ports: dict[int, Port] = Field(default_factory=dict)
