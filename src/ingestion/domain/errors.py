class UnsupportedDumpFormatError(ValueError):
    """Raised before parsing when the dump extension is neither .xml nor .bz2."""


class DumpParseError(RuntimeError):
    """Malformed markup or compressed framing; the scan cannot be resumed."""


class UnknownTopicFilterError(ValueError):
    """Raised when a topic filter name is not in the catalogue."""
