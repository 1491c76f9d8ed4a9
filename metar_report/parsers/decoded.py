from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from metar_report.errors import DecodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloudLayer:
    coverage: str | None = None
    height: str | None = None


@dataclass(frozen=True)
class DecodedFields:
    wind_dir: str | None = None
    wind_speed: str | None = None
    wind_unit: str | None = None
    visibility: str | None = None
    visibility_unit: str | None = None
    temperature: str | None = None
    dewpoint: str | None = None
    qnh: str | None = None
    qnh_unit: str | None = None
    weather: tuple[str, ...] = ()
    clouds: tuple[CloudLayer, ...] = ()
    forecast: str | None = None


SCALAR_FIELDS = (
    "wind_dir",
    "wind_speed",
    "wind_unit",
    "visibility",
    "visibility_unit",
    "temperature",
    "dewpoint",
    "qnh",
    "qnh_unit",
    "forecast",
)


def _text(value: Any) -> str | None:
    if value is None or isinstance(value, (bool, dict, list)):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def _weather_codes(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    if not isinstance(value, list):
        return ()
    return tuple(code for code in (_text(item) for item in value) if code)


def _cloud_layers(value: Any) -> tuple[CloudLayer, ...]:
    if not isinstance(value, list):
        return ()
    layers = []
    for item in value:
        if not isinstance(item, dict):
            logger.debug("skipping malformed cloud entry %r", item)
            continue
        layers.append(CloudLayer(coverage=_text(item.get("type")), height=_text(item.get("height"))))
    return tuple(layers)


def parse_decoded(payload: str | Mapping[str, Any] | None) -> DecodedFields:
    """Build :class:`DecodedFields` from the API's ``metarDecode`` value.

    Raises :class:`DecodeError` if a non-empty string is not a JSON object.
    """
    if payload is None:
        return DecodedFields()
    if isinstance(payload, str):
        if not payload.strip():
            return DecodedFields()
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"metarDecode is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise DecodeError(f"metarDecode must be a JSON object, got {type(payload).__name__}")

    scalars = {name: _text(payload.get(name)) for name in SCALAR_FIELDS}
    return DecodedFields(
        weather=_weather_codes(payload.get("weather")),
        clouds=_cloud_layers(payload.get("cloud")),
        **scalars,
    )


def decode_or_empty(payload: str | Mapping[str, Any] | None) -> DecodedFields:
    try:
        return parse_decoded(payload)
    except DecodeError as exc:
        logger.warning("ignoring metarDecode payload: %s", exc)
        return DecodedFields()
