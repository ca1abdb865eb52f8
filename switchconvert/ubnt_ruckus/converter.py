"""Ubiquiti -> Ruckus conversion pipeline."""

from __future__ import annotations

from typing import Any

from loguru import logger

from switchconvert.ubnt_ruckus.extractor import ModelExtractor
from switchconvert.ubnt_ruckus.models import SwitchModel
from switchconvert.ubnt_ruckus.parser import ConfigParser
from switchconvert.ubnt_ruckus.renderer import ConfigRenderer, RuckusProfile


class UbiquitiToRuckusConverter:
    """Run parse -> extract -> render over one input.

    Every call uses its own parser and extractor, so a single converter can
    be shared between callers.
    """

    def __init__(self, profile: RuckusProfile | None = None) -> None:
        self.renderer = ConfigRenderer(profile)

    def extract(self, data: Any) -> SwitchModel:
        """Parse *data* and return the extracted VLAN and port tables."""
        lines = ConfigParser().lines(data)
        return ModelExtractor(lines).extract()

    def convert(self, data: Any) -> str:
        """Convert a Ubiquiti export (text, bytes or dict) into a Ruckus config.

        Raises:
            FormatError: If *data* cannot be parsed; nothing is rendered.
        """
        logger.debug("Starting conversion...")
        model = self.extract(data)
        config = self.renderer.render(model.vlans, model.ports)
        logger.debug(f"Conversion completed: {len(model.vlans)} VLANs, {len(config.splitlines())} lines")
        return config
