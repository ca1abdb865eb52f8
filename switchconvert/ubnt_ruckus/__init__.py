"""Ubiquiti -> Ruckus ICX configuration conversion."""

from switchconvert.ubnt_ruckus.converter import UbiquitiToRuckusConverter
from switchconvert.ubnt_ruckus.exceptions import ConversionError, FormatError
from switchconvert.ubnt_ruckus.extractor import ModelExtractor
from switchconvert.ubnt_ruckus.formatters import MarkdownFormatter, TerminalFormatter
from switchconvert.ubnt_ruckus.models import PORT_COUNT, Port, PortState, SwitchModel, UbiquitiConfig, Vlan
from switchconvert.ubnt_ruckus.parser import ConfigParser
from switchconvert.ubnt_ruckus.renderer import ConfigRenderer, RuckusProfile

__all__ = [
    "UbiquitiToRuckusConverter",
    "ConfigParser",
    "ModelExtractor",
    "ConfigRenderer",
    "RuckusProfile",
    "TerminalFormatter",
    "MarkdownFormatter",
    "ConversionError",
    "FormatError",
    "PORT_COUNT",
    "Port",
    "PortState",
    "SwitchModel",
    "UbiquitiConfig",
    "Vlan",
]
