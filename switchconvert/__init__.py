"""Switch configuration converter.

Translates a Ubiquiti ``expected_system_cfg`` JSON export into a Ruckus ICX
configuration script.
"""

__version__ = "0.0.1"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink and enable logging for this package."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from switchconvert.ubnt_ruckus import (  # noqa: E402
    ConfigParser,
    ConfigRenderer,
    ConversionError,
    FormatError,
    ModelExtractor,
    RuckusProfile,
    UbiquitiToRuckusConverter,
)

__all__ = [
    "glogger",
    "configure_logging",
    "ConfigParser",
    "ModelExtractor",
    "ConfigRenderer",
    "RuckusProfile",
    "UbiquitiToRuckusConverter",
    "ConversionError",
    "FormatError",
]
