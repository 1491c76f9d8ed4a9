from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from metar_report.errors import FormatError
from metar_report.parsers.codes import describe_cloud_coverage, describe_weather
from metar_report.parsers.decoded import CloudLayer, DecodedFields
from metar_report.parsers.metar_time import format_metar_time
from metar_report.parsers.remarks import extract_remarks

logger = logging.getLogger(__name__)

# Summary tiles and detail lines use different placeholders for missing values.
TILE_MISSING = "N/A"
DETAIL_MISSING = "未知"
CALM_WIND = "地面静风"
NO_SIGNIFICANT_CLOUD = "无特别云层（NSC）"
NO_SIGNIFICANT_CHANGE = "无显著变化"
CLOUD_SEPARATOR = "，"
DATA_SOURCE = "XFlysim Network"

VISIBILITY_UNITS = {"meter": "米", "mile": "英里"}


@dataclass(frozen=True)
class DisplayModel:
    icao: str
    generated_at: str
    tile_wind_dir: str
    tile_wind_speed: str
    tile_temperature: str
    tile_visibility: str
    tile_qnh: str
    time: str
    wind_dir: str
    wind_speed: str
    wind_unit: str
    visibility: str
    visibility_unit: str
    weather: str
    temperature: str
    dewpoint: str
    qnh: str
    qnh_unit: str
    clouds: str
    forecast: str
    remark: str
    raw_metar: str


def visibility_unit_label(unit: str | None) -> str:
    return VISIBILITY_UNITS.get(unit or "", DETAIL_MISSING)


def format_cloud_layer(layer: CloudLayer, cloud_map: Mapping[str, str]) -> str:
    coverage = describe_cloud_coverage(layer.coverage, cloud_map) if layer.coverage else DETAIL_MISSING
    return f"{coverage} 云层高度 {layer.height or DETAIL_MISSING} 00英尺"


def parse_clouds(layers: Iterable[CloudLayer] | None, cloud_map: Mapping[str, str]) -> str:
    layers = list(layers or [])
    if not layers:
        return NO_SIGNIFICANT_CLOUD
    return CLOUD_SEPARATOR.join(format_cloud_layer(layer, cloud_map) for layer in layers)


def observation_time(raw_metar: str | None, now: dt.datetime, display_tz: dt.tzinfo | None = None) -> str:
    if not raw_metar:
        return DETAIL_MISSING
    try:
        return format_metar_time(raw_metar, now, display_tz)
    except FormatError as exc:
        logger.warning("cannot resolve observation time: %s", exc)
        return DETAIL_MISSING


def generated_label(now: dt.datetime, display_tz: dt.tzinfo | None = None) -> str:
    local = now.astimezone(display_tz) if now.tzinfo is not None else now
    stamp = local.strftime("%Y年%m月%d日%H时%M分%S秒")
    return f"本页面由九号生成于 {stamp}，数据源于{DATA_SOURCE}"


def format_report(
    decoded: DecodedFields,
    raw_metar: str | None,
    icao: str | None,
    now: dt.datetime,
    weather_map: Mapping[str, str],
    cloud_map: Mapping[str, str],
    display_tz: dt.tzinfo | None = None,
) -> DisplayModel:
    """Resolve every decoded field into display text.

    Missing values never raise; they degrade to placeholders.
    """
    visibility_unit = visibility_unit_label(decoded.visibility_unit)
    return DisplayModel(
        icao=icao or DETAIL_MISSING,
        generated_at=generated_label(now, display_tz),
        tile_wind_dir=decoded.wind_dir or CALM_WIND,
        tile_wind_speed=decoded.wind_speed or TILE_MISSING,
        tile_temperature=decoded.temperature or TILE_MISSING,
        tile_visibility=decoded.visibility or TILE_MISSING,
        tile_qnh=decoded.qnh or TILE_MISSING,
        time=observation_time(raw_metar, now, display_tz),
        wind_dir=decoded.wind_dir or DETAIL_MISSING,
        wind_speed=decoded.wind_speed or DETAIL_MISSING,
        wind_unit=decoded.wind_unit or DETAIL_MISSING,
        visibility=decoded.visibility or DETAIL_MISSING,
        visibility_unit=visibility_unit,
        weather=describe_weather(decoded.weather, weather_map),
        temperature=decoded.temperature or DETAIL_MISSING,
        dewpoint=decoded.dewpoint or DETAIL_MISSING,
        qnh=decoded.qnh or DETAIL_MISSING,
        qnh_unit=decoded.qnh_unit or DETAIL_MISSING,
        clouds=parse_clouds(decoded.clouds, cloud_map),
        forecast=decoded.forecast or NO_SIGNIFICANT_CHANGE,
        remark=extract_remarks(raw_metar or ""),
        raw_metar=raw_metar or DETAIL_MISSING,
    )
