"""Parse a Ubiquiti JSON export into its property-line sequence."""

from __future__ import annotations

import json
from typing import Any

from loguru import logger
from pydantic import ValidationError

from switchconvert.ubnt_ruckus.exceptions import FormatError
from switchconvert.ubnt_ruckus.models import UbiquitiConfig


class ConfigParser:
    """Turn raw text, bytes or an already-decoded object into a UbiquitiConfig."""

    def parse(self, data: Any) -> UbiquitiConfig:
        """Parse *data* and return the validated export container.

        Raises:
            FormatError: If *data* is not valid JSON or does not have the
                shape of a Ubiquiti export.
        """
        if isinstance(data, UbiquitiConfig):
            return data

        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise FormatError(f"Invalid JSON format: {e}") from e

        if isinstance(data, str):
            try:
                data = json.loads(data.removeprefix("\ufeff"))
            except json.JSONDecodeError as e:
                raise FormatError(f"Invalid JSON format: {e}") from e

        if not isinstance(data, dict):
            raise FormatError(f"Invalid JSON format: expected an object, got {type(data).__name__}")

        try:
            config = UbiquitiConfig.model_validate(data)
        except ValidationError as e:
            raise FormatError(f"Invalid JSON format: {e}") from e

        logger.debug(f"JSON parsed successfully: {len(config.expected_system_cfg)} property lines")
        return config

    def lines(self, data: Any) -> list[str]:
        """Parse *data* and return only the ordered property-line sequence."""
        return self.parse(data).expected_system_cfg
