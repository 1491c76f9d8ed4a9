from __future__ import annotations

import logging
from typing import Iterable, Mapping

logger = logging.getLogger(__name__)

UNKNOWN_WEATHER = "未知天气现象"
FINE_WEATHER = "晴天"


def resolve(code: str, table: Mapping[str, str], fallback: str) -> str:
    return table.get(code, fallback)


def resolve_many(codes: Iterable[str] | str | None, table: Mapping[str, str], fallback: str) -> str:
    if isinstance(codes, str):
        codes = [codes]
    codes = tuple(codes or ())
    # nothing observed is not the same as an unknown code
    if not codes:
        return FINE_WEATHER
    result = ", ".join(resolve(code, table, fallback) for code in codes)
    logger.debug("resolved weather codes: %s", result)
    return result


def describe_weather(codes: Iterable[str] | str | None, table: Mapping[str, str]) -> str:
    return resolve_many(codes, table, UNKNOWN_WEATHER)


def describe_cloud_coverage(code: str, table: Mapping[str, str]) -> str:
    return resolve(code, table, code)
