from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from metar_report.errors import FetchError

SUCCESS_CODE = 20000


@dataclass(frozen=True)
class MetarResponse:
    icao: str
    metar: str | None
    metar_decode: Any
    source: str


class MetarAdapter(Protocol):
    def fetch_metar(self, icao: str) -> MetarResponse: ...


def response_from_envelope(icao: str, envelope: Any, source: str) -> MetarResponse:
    """Unwrap ``{code, message, data: {metar, icao, metarDecode}}``."""
    if not isinstance(envelope, dict):
        raise FetchError(icao, "response is not a JSON object")
    if envelope.get("code") != SUCCESS_CODE:
        raise FetchError(icao, envelope.get("message") or "无法获取 METAR 数据")
    data = envelope.get("data")
    if not isinstance(data, dict):
        raise FetchError(icao, "response has no data object")
    metar = data.get("metar")
    return MetarResponse(
        icao=data.get("icao") or icao,
        metar=metar if isinstance(metar, str) and metar.strip() else None,
        metar_decode=data.get("metarDecode"),
        source=source,
    )
