from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

from tagcheck.schema import RuleOptions, TagCheckSettings, validate_rule_options, validate_settings

DEFAULT_CONFIG_NAME = "tagcheck.toml"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def options_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("options", {})
    return section if isinstance(section, dict) else {}


def settings_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("settings", {})
    return section if isinstance(section, dict) else {}


def _normalize_name_list(value: TomlValue) -> list[str]:
    items: list[str] = []
    if value is None:
        return items
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple, set)):
        for item in value:
            if isinstance(item, str):
                items.extend([part.strip() for part in item.split(",") if part.strip()])
    return [item for item in items if item]


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def rule_options(section: TomlTable | None) -> RuleOptions:
    payload = dict(section or {})
    for key in ("definedTags", "defined_tags"):
        if key in payload and isinstance(payload[key], str):
            payload[key] = _normalize_name_list(payload[key])
    return validate_rule_options(payload)


def load_rule_config(
    root: Path | None = None,
    config_path: Path | None = None,
    *,
    options_overrides: TomlTable | None = None,
    settings_overrides: TomlTable | None = None,
) -> tuple[RuleOptions, TagCheckSettings]:
    options = merge_payload(
        options_overrides or {},
        options_defaults(root=root, config_path=config_path),
    )
    settings = merge_payload(
        settings_overrides or {},
        settings_defaults(root=root, config_path=config_path),
    )
    return rule_options(options), validate_settings(settings)
