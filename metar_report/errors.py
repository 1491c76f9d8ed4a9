from __future__ import annotations


class MetarReportError(Exception):
    """Base class for every error raised by metar_report."""


class FormatError(MetarReportError, ValueError):
    """The raw METAR carries no DDHHMMZ observation time token."""


class DecodeError(MetarReportError, ValueError):
    """The metarDecode payload is not a JSON object."""


class ConfigError(MetarReportError, ValueError):
    pass


class FetchError(MetarReportError):
    def __init__(self, icao: str, message: str) -> None:
        super().__init__(f"{icao}: {message}")
        self.icao = icao
        self.message = message
