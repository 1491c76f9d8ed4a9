from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from metar_report.adapters.base import MetarAdapter
from metar_report.build.render_html import write_report
from metar_report.config import CodeTables
from metar_report.errors import FetchError
from metar_report.parsers.decoded import decode_or_empty
from metar_report.report import format_report

logger = logging.getLogger(__name__)

COMMAND_NAME = "metar"
COMMAND_ALIASES = ("weather", "气象", "metarinfo")
COMMAND_DESCRIPTION = "查询指定 ICAO 机场的 METAR/SPECI 天气报告"
COMMAND_USAGE = "使用方法：metar <ICAO代码>"
COMMAND_EXAMPLE = "metar KSFO"

ICAO_RE = re.compile(r"[A-Z0-9]{3,4}")

MSG_MISSING_ICAO = "请提供一个有效的 ICAO 代码。"
MSG_FETCHING = "稍等一会，小九正在获取中~"
MSG_FETCH_FAILED = "无法获取 METAR 数据，请稍后再试。"
MSG_RENDER_FAILED = "生成 METAR 截图失败，请稍后再试。"


@dataclass
class CommandResult:
    replies: list[str] = field(default_factory=list)
    html_path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.html_path is not None


def run_metar_command(
    icao: str | None,
    adapter: MetarAdapter,
    tables: CodeTables,
    out_dir: Path,
    now: dt.datetime | None = None,
    display_tz: dt.tzinfo | None = None,
) -> CommandResult:
    """Handle ``metar <icao>``: fetch, format and write the report page.

    The returned HTML file is what the chat layer screenshots and sends.
    """
    result = CommandResult()
    icao = (icao or "").strip().upper()
    if not ICAO_RE.fullmatch(icao):
        result.replies.append(MSG_MISSING_ICAO)
        return result

    result.replies.append(MSG_FETCHING)
    try:
        response = adapter.fetch_metar(icao)
    except FetchError as exc:
        logger.warning("METAR fetch failed: %s", exc)
        result.replies.append(MSG_FETCH_FAILED)
        return result
    if not response.metar:
        logger.warning("%s: response carries no METAR", icao)
        result.replies.append(MSG_FETCH_FAILED)
        return result
    logger.info("%s (%s): %s", icao, response.source, response.metar)

    now = now or dt.datetime.now(dt.timezone.utc)
    model = format_report(
        decode_or_empty(response.metar_decode),
        response.metar,
        response.icao,
        now,
        tables.weather,
        tables.cloud,
        display_tz,
    )
    try:
        result.html_path = write_report(model, out_dir)
    except OSError as exc:
        logger.error("cannot write report for %s: %s", icao, exc)
        result.replies.append(MSG_RENDER_FAILED)
    return result
