import datetime as dt

from metar_report.config import DEFAULT_CONFIG_PATH, load_code_tables
from metar_report.parsers.decoded import CloudLayer, DecodedFields
from metar_report.report import (
    NO_SIGNIFICANT_CLOUD,
    format_report,
    parse_clouds,
    visibility_unit_label,
)

TABLES = load_code_tables(DEFAULT_CONFIG_PATH)
UTC = dt.timezone.utc
NOW = dt.datetime(2026, 10, 19, 12, 0, 5, tzinfo=UTC)
RAW = "METAR ZSPD 190300Z 06006MPS 9999 -RA BR FEW012 BKN040 18/16 Q1021 RMK QFE1019"


def _format(decoded: DecodedFields, raw=RAW, icao="ZSPD"):
    return format_report(decoded, raw, icao, NOW, TABLES.weather, TABLES.cloud, display_tz=UTC)


def test_single_cloud_layer_with_default_table():
    assert parse_clouds([CloudLayer("BKN", "040")], TABLES.cloud) == "多云 云层高度 040 00英尺"


def test_cloud_layers_joined_with_full_width_comma():
    layers = [CloudLayer("FEW", "012"), CloudLayer("XYZ", "040")]
    assert parse_clouds(layers, TABLES.cloud) == "少云 云层高度 012 00英尺，XYZ 云层高度 040 00英尺"


def test_no_clouds():
    assert parse_clouds([], TABLES.cloud) == NO_SIGNIFICANT_CLOUD
    assert parse_clouds(None, TABLES.cloud) == NO_SIGNIFICANT_CLOUD


def test_visibility_units():
    assert visibility_unit_label("meter") == "米"
    assert visibility_unit_label("mile") == "英里"
    assert visibility_unit_label("km") == "未知"
    assert visibility_unit_label(None) == "未知"


def test_full_report():
    decoded = DecodedFields(
        wind_dir="060",
        wind_speed="6",
        wind_unit="MPS",
        visibility="9999",
        visibility_unit="meter",
        temperature="18",
        dewpoint="16",
        qnh="1021",
        qnh_unit="hPa",
        weather=("-", "RA", "BR"),
        clouds=(CloudLayer("FEW", "012"), CloudLayer("BKN", "040")),
    )
    model = _format(decoded)
    assert model.icao == "ZSPD"
    assert model.time == "UTC 03:00 / CST  19:00"
    assert model.weather == "小, 雨, 雾"
    assert model.clouds == "少云 云层高度 012 00英尺，多云 云层高度 040 00英尺"
    assert model.visibility_unit == "米"
    assert model.remark == "QFE1019"
    assert model.forecast == "无显著变化"
    assert model.generated_at == "本页面由九号生成于 2026年10月19日12时00分05秒，数据源于XFlysim Network"


def test_missing_fields_use_placeholders():
    model = _format(DecodedFields(), raw=None, icao=None)
    assert model.icao == "未知"
    assert model.time == "未知"
    assert model.tile_wind_dir == "地面静风"
    assert model.tile_wind_speed == "N/A"
    assert model.tile_temperature == "N/A"
    assert model.tile_qnh == "N/A"
    assert model.wind_dir == "未知"
    assert model.temperature == "未知"
    assert model.qnh_unit == "未知"
    assert model.weather == "晴天"
    assert model.clouds == NO_SIGNIFICANT_CLOUD
    assert model.remark == "无 RMK 信息"
    assert model.raw_metar == "未知"


def test_zero_is_a_value():
    model = _format(DecodedFields(temperature="0"))
    assert model.temperature == "0"
    assert model.tile_temperature == "0"


def test_bad_time_group_degrades_to_placeholder():
    model = _format(DecodedFields(), raw="METAR ZSPD NIL")
    assert model.time == "未知"
    assert model.raw_metar == "METAR ZSPD NIL"


def test_format_is_repeatable():
    decoded = DecodedFields(weather=("BR",), clouds=(CloudLayer("OVC", "008"),))
    assert _format(decoded) == _format(decoded)
