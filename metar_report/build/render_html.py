from __future__ import annotations

import html
import logging
from dataclasses import asdict
from pathlib import Path

from metar_report.report import DisplayModel

logger = logging.getLogger(__name__)

STYLE = """
    body { font-family: sans-serif; margin: 0; padding: 0; display: flex; justify-content: center;
      align-items: center; height: 100vh; background-color: #f4f4f4; }
    .container { background-color: #fff; border-radius: 10px; box-shadow: 0 2px 10px rgba(0, 0, 0, 0.1);
      padding: 20px; width: 90%; max-width: 800px; text-align: center; }
    .header { font-size: 1.5em; margin-bottom: 10px; color: #333; }
    .subheader { font-size: 0.8em; color: rgb(94, 94, 94); margin-bottom: 20px; }
    .overview { display: flex; flex-wrap: wrap; gap: 16px; justify-content: center; margin-bottom: 20px; }
    .overview div { flex: 1 1 calc(20% - 16px); min-width: 150px; background-color: #f9f9f9; padding: 10px;
      border: 1px solid #ddd; border-radius: 8px; text-align: center; }
    .highlight { font-size: 1.2em; font-weight: bold; color: #555; }
    .details { margin-top: 20px; text-align: left; }
    .details p { margin: 5px 0; font-size: 0.9em; color: #555; }
"""


def _tile(label: str, value: str) -> str:
    return f'<div>{label}<br><span class="highlight">{value}</span></div>'


def _line(label: str, value: str) -> str:
    return f"<p><strong>{label}：</strong>{value}</p>"


def render_report(model: DisplayModel) -> str:
    m = {key: html.escape(value) for key, value in asdict(model).items()}
    tiles = "\n        ".join(
        [
            _tile("风向", f"{m['tile_wind_dir']}°"),
            _tile("风速", f"{m['tile_wind_speed']} m/s"),
            _tile("温度", f"{m['tile_temperature']}°C"),
            _tile("能见度", f"{m['tile_visibility']} {m['visibility_unit']}"),
            _tile("气压", f"{m['tile_qnh']} hPa"),
        ]
    )
    details = "\n        ".join(
        [
            _line("时间", m["time"]),
            _line("风向", f"{m['wind_dir']}°"),
            _line("风速", f"{m['wind_speed']} /{m['wind_unit']}"),
            _line("能见度", f"{m['visibility']} {m['visibility_unit']}"),
            _line("天气现象", m["weather"]),
            _line("温度", f"{m['temperature']}°C"),
            _line("露点", f"{m['dewpoint']}°C"),
            _line("气压", f"{m['qnh']}   {m['qnh_unit']}"),
            _line("云层状况", m["clouds"]),
            _line("预报", m["forecast"]),
            _line("Remark", m["remark"]),
            _line("原始METAR", m["raw_metar"]),
        ]
    )
    return f"""<!DOCTYPE html>
<html lang="zh-CN">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <style>{STYLE}</style>
  <title>METAR 报告</title>
</head>
<body>
  <div class="container">
    <div class="header">METAR 信息 - {m['icao']}</div>
    <div class="subheader">{m['generated_at']}</div>
    <div class="overview">
        {tiles}
    </div>
    <div class="details">
        {details}
    </div>
  </div>
</body>
</html>
"""


def write_report(model: DisplayModel, out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"metar_{model.icao}.html"
    path.write_text(render_report(model), encoding="utf-8")
    logger.info("wrote %s", path)
    return path
