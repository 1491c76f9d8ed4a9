import datetime as dt

from metar_report.build.render_html import render_report, write_report
from metar_report.parsers.decoded import DecodedFields
from metar_report.report import format_report

UTC = dt.timezone.utc
NOW = dt.datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


def _model(raw="METAR ZSPD 190300Z 06006MPS 9999 NSC 18/16 Q1021 RMK <b>", icao="ZSPD"):
    decoded = DecodedFields(wind_dir="060", visibility="9999", visibility_unit="meter")
    return format_report(decoded, raw, icao, NOW, {}, {}, display_tz=UTC)


def test_render_contains_fields():
    page = render_report(_model())
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>METAR 报告</title>" in page
    assert "METAR 信息 - ZSPD" in page
    assert '<span class="highlight">060°</span>' in page
    assert '<span class="highlight">9999 米</span>' in page
    assert "<p><strong>时间：</strong>UTC 03:00 / CST  19:00</p>" in page
    assert "<p><strong>天气现象：</strong>晴天</p>" in page


def test_render_escapes_values():
    page = render_report(_model())
    assert "<b>" not in page
    assert "&lt;b&gt;" in page


def test_write_report(tmp_path):
    path = write_report(_model(), tmp_path / "out")
    assert path.name == "metar_ZSPD.html"
    assert "METAR 信息 - ZSPD" in path.read_text(encoding="utf-8")
