"""Exception hierarchy for configuration conversion."""


class ConversionError(Exception):
    """Base exception for all conversion errors."""


class FormatError(ConversionError):
    """Input could not be interpreted as a Ubiquiti JSON export."""
