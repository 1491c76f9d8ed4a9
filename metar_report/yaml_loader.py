from __future__ import annotations

from typing import Any

from metar_report.errors import ConfigError

# Subset of YAML used by data/config.yaml: nested mappings, block lists of
# scalars or mappings, quoted/unquoted scalars, inline [a, b] lists and
# whole-line comments.


def _parse_scalar(value: str) -> Any:
    value = value.strip()
    if not value:
        return ""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    if value.startswith("[") and value.endswith("]"):
        inner = value[1:-1].strip()
        if not inner:
            return []
        return [_parse_scalar(part) for part in inner.split(",")]
    lowered = value.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "~"}:
        return None
    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        return value


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _split_pair(content: str, line_no: int) -> tuple[str, str]:
    if ":" not in content:
        raise ConfigError(f"line {line_no}: expected 'key: value', got {content!r}")
    key, raw_val = content.split(":", 1)
    key = key.strip()
    if not key:
        raise ConfigError(f"line {line_no}: empty key")
    return key, raw_val.strip()


def load_yaml(text: str) -> Any:
    lines = [
        (number, line.rstrip())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip() and not line.lstrip().startswith("#")
    ]

    def parse_list(start: int, indent: int) -> tuple[list, int]:
        items: list[Any] = []
        index = start
        marker = " " * indent + "- "
        while index < len(lines) and lines[index][1].startswith(marker):
            number, line = lines[index]
            content = line[indent + 2 :].strip()
            item: Any
            if ":" in content and not content.startswith(('"', "'")):
                key, raw_val = _split_pair(content, number)
                item = {key: _parse_scalar(raw_val)}
            else:
                item = _parse_scalar(content)
            index += 1
            if index < len(lines) and _indent(lines[index][1]) > indent:
                nested, index = parse_block(index, _indent(lines[index][1]))
                if isinstance(item, dict) and isinstance(nested, dict):
                    item.update(nested)
                else:
                    raise ConfigError(f"line {number}: cannot nest block under scalar list item")
            items.append(item)
        return items, index

    def parse_mapping(start: int, indent: int) -> tuple[dict, int]:
        mapping: dict[str, Any] = {}
        index = start
        while index < len(lines):
            number, line = lines[index]
            current = _indent(line)
            if current < indent or line.startswith(" " * indent + "- "):
                break
            if current > indent:
                raise ConfigError(f"line {number}: unexpected indentation")
            key, raw_val = _split_pair(line[indent:], number)
            index += 1
            if raw_val:
                mapping[key] = _parse_scalar(raw_val)
            elif index < len(lines) and _indent(lines[index][1]) > indent:
                mapping[key], index = parse_block(index, _indent(lines[index][1]))
            elif index < len(lines) and lines[index][1].startswith(" " * indent + "- "):
                mapping[key], index = parse_list(index, indent)
            else:
                mapping[key] = None
        return mapping, index

    def parse_block(start: int, indent: int) -> tuple[Any, int]:
        if lines[start][1].startswith(" " * indent + "- "):
            return parse_list(start, indent)
        return parse_mapping(start, indent)

    if not lines:
        return {}
    parsed, index = parse_block(0, _indent(lines[0][1]))
    if index < len(lines):
        raise ConfigError(f"line {lines[index][0]}: unexpected content")
    return parsed
