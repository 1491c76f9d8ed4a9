from metar_report.parsers.codes import (
    FINE_WEATHER,
    UNKNOWN_WEATHER,
    describe_cloud_coverage,
    describe_weather,
    resolve,
    resolve_many,
)

WEATHER = {"BR": "雾", "RA": "雨", "-": "小"}
CLOUD = {"BKN": "多云"}


def test_resolve_unknown_code_uses_fallback():
    assert resolve("XX", WEATHER, "fallback") == "fallback"
    assert resolve("", WEATHER, "fallback") == "fallback"


def test_resolve_does_not_mutate_table():
    table = dict(WEATHER)
    resolve("ZZ", table, "?")
    assert table == WEATHER


def test_resolve_many_empty_is_fine_weather():
    assert resolve_many(None, WEATHER, UNKNOWN_WEATHER) == FINE_WEATHER
    assert resolve_many([], WEATHER, UNKNOWN_WEATHER) == FINE_WEATHER
    assert FINE_WEATHER != UNKNOWN_WEATHER


def test_resolve_many_single_code():
    assert describe_weather(["BR"], WEATHER) == "雾"


def test_resolve_many_keeps_order_and_marks_unknown():
    assert describe_weather(["-", "RA", "XX"], WEATHER) == f"小, 雨, {UNKNOWN_WEATHER}"


def test_resolve_many_accepts_bare_string():
    assert describe_weather("RA", WEATHER) == "雨"


def test_cloud_coverage_falls_back_to_code():
    assert describe_cloud_coverage("BKN", CLOUD) == "多云"
    assert describe_cloud_coverage("VV", CLOUD) == "VV"


def test_resolve_many_empty_iterator_is_fine_weather():
    assert describe_weather(iter([]), WEATHER) == FINE_WEATHER
    assert describe_weather((code for code in ["BR"]), WEATHER) == "雾"
