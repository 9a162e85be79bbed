from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from rich.color import Color, ColorParseError

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli as tomllib  # type: ignore


DEFAULT_CONFIG_FILE = "config.toml"
CONFIG_FILE_ENV = "APP_CONFIG_FILE"

_LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class DisplaySettings:
    title: str = "Flying Tomato"
    title_color: str = "white"
    border_color: str = "red"
    header_color: str = "yellow"


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    file: str = ""

    @property
    def level_number(self) -> int:
        return _LOG_LEVELS[self.level]


@dataclass(frozen=True)
class AppConfig:
    display: DisplaySettings
    logging: LoggingSettings
    source_file: Optional[str]


def resolve_config_path(config_path: str | None = None) -> Path:
    env_path = os.getenv(CONFIG_FILE_ENV)
    raw = config_path or env_path or DEFAULT_CONFIG_FILE
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    return path


def load_app_config(config_path: str | None = None) -> AppConfig:
    """Load settings from TOML.

    The default ``config.toml`` is optional and falls back to built-in
    defaults. A file requested explicitly, or through ``APP_CONFIG_FILE``,
    must exist.
    """
    explicit = bool(config_path or os.getenv(CONFIG_FILE_ENV))
    path = resolve_config_path(config_path)
    if not path.exists():
        if explicit:
            raise AppConfigurationError(f"Config file not found: {path}")
        return AppConfig(
            display=DisplaySettings(),
            logging=LoggingSettings(),
            source_file=None,
        )
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except Exception as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    if not isinstance(raw, Mapping):
        raise AppConfigurationError("Root config TOML object must be a table.")

    base_dir = path.parent

    display_raw = _section(raw, "display")
    defaults = DisplaySettings()
    display = DisplaySettings(
        title=_non_empty_str(display_raw, "title", defaults.title, "display"),
        title_color=_color(display_raw, "title_color", defaults.title_color),
        border_color=_color(display_raw, "border_color", defaults.border_color),
        header_color=_color(display_raw, "header_color", defaults.header_color),
    )

    logging_raw = _section(raw, "logging")
    level = _as_str(logging_raw.get("level", "INFO"), "logging.level").upper()
    if level not in _LOG_LEVELS:
        allowed = ", ".join(_LOG_LEVELS)
        raise AppConfigurationError(f"logging.level must be one of: {allowed}")
    log_file = _as_str(logging_raw.get("file", ""), "logging.file")
    logging_settings = LoggingSettings(
        level=level,
        file=_resolve_path(base_dir, log_file),
    )

    return AppConfig(
        display=display,
        logging=logging_settings,
        source_file=str(path),
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _non_empty_str(
    section: Mapping[str, Any],
    field: str,
    default: str,
    section_name: str,
) -> str:
    text = _as_str(section.get(field, default), f"{section_name}.{field}")
    if not text:
        raise AppConfigurationError(f"{section_name}.{field} cannot be empty.")
    return text


def _color(section: Mapping[str, Any], field: str, default: str) -> str:
    text = _non_empty_str(section, field, default, "display")
    try:
        Color.parse(text)
    except ColorParseError as error:
        raise AppConfigurationError(
            f"display.{field} is not a valid color: {text!r}"
        ) from error
    return text


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
