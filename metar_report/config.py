from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from metar_report.errors import ConfigError
from metar_report.yaml_loader import load_yaml

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_CONFIG_PATH = DATA_DIR / "config.yaml"
SAMPLES_DIR = DATA_DIR / "samples"

DEFAULT_URL_TEMPLATE = "https://api.xflysim.com/pilot/api/realTimeMap/weather/{icao}"
DEFAULT_TIMEOUT_S = 10.0

CodeMap = Mapping[str, str]


@dataclass(frozen=True)
class CodeTables:
    weather: CodeMap
    cloud: CodeMap


@dataclass(frozen=True)
class Settings:
    url_template: str
    timeout_s: float
    output_dir: Path
    config_path: Path


EMPTY_TABLES = CodeTables(weather=MappingProxyType({}), cloud=MappingProxyType({}))


def _require_keys(item: Any, keys: list[str], label: str) -> None:
    if not isinstance(item, dict):
        raise ConfigError(f"Expected mapping in {label}, got {item!r}")
    for key in keys:
        if key not in item or item[key] is None:
            raise ConfigError(f"Missing {key} in {label}")


def build_code_map(entries: Iterable[Any], label: str) -> CodeMap:
    """Turn ``[{code, description}, ...]`` into a read-only map.

    Duplicate codes are accepted; the last entry wins.
    """
    table: dict[str, str] = {}
    for entry in entries:
        _require_keys(entry, ["code", "description"], label)
        code = str(entry["code"])
        if code in table:
            logger.debug("duplicate %s code %r overrides %r", label, code, table[code])
        table[code] = str(entry["description"])
    return MappingProxyType(table)


def load_config(path: Path | None = None) -> dict:
    path = path or Path(os.getenv("METAR_CONFIG", "") or DEFAULT_CONFIG_PATH)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    data = load_yaml(text)
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    return data


def load_code_tables(path: Path | None = None) -> CodeTables:
    data = load_config(path)
    for key in ("weather", "cloud"):
        if not isinstance(data.get(key) or [], list):
            raise ConfigError(f"'{key}' must be a list of code/description pairs")
    return CodeTables(
        weather=build_code_map(data.get("weather") or [], "weather"),
        cloud=build_code_map(data.get("cloud") or [], "cloud"),
    )


def load_code_tables_or_empty(path: Path | None = None) -> CodeTables:
    try:
        return load_code_tables(path)
    except ConfigError as exc:
        logger.warning("code tables unavailable, falling back to raw codes: %s", exc)
        return EMPTY_TABLES


def load_settings(path: Path | None = None) -> Settings:
    config_path = path or Path(os.getenv("METAR_CONFIG", "") or DEFAULT_CONFIG_PATH)
    api: dict = {}
    try:
        api = load_config(config_path).get("api") or {}
    except ConfigError as exc:
        logger.warning("using default API settings: %s", exc)
    if not isinstance(api, dict):
        raise ConfigError("'api' must be a mapping")

    url_template = os.getenv("METAR_API_URL", "").strip() or api.get("url_template") or DEFAULT_URL_TEMPLATE
    if "{icao}" not in url_template:
        raise ConfigError(f"API url template must contain {{icao}}: {url_template!r}")

    raw_timeout = os.getenv("METAR_API_TIMEOUT", "").strip() or api.get("timeout_s", DEFAULT_TIMEOUT_S)
    try:
        timeout_s = float(raw_timeout)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid API timeout {raw_timeout!r}") from exc

    output_dir = Path(os.getenv("METAR_OUTPUT_DIR", "").strip() or Path.cwd() / "out")
    return Settings(
        url_template=url_template,
        timeout_s=timeout_s,
        output_dir=output_dir,
        config_path=config_path,
    )
