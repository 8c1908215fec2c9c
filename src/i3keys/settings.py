"""Settings: rendering and comment-filter parameters loaded from ``config.yml``."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from i3keys.errors import SettingsError

logger = logging.getLogger(__name__)

# Document-header prose that should never become a binding description.
DEFAULT_IGNORED_COMMENTS: tuple[str, ...] = (
    "This file",
    "It will",
    "Should you",
    "Please see",
    "http",
    "These bindings",
    "Pressing",
    "same bind",
    "back to",
    "alternatively",
)

AUTO_WIDTH = "auto"


@dataclass(frozen=True)
class Settings:
    """Report layout and comment eligibility parameters.

    ``width`` is either a fixed column count or ``"auto"``, in which case the
    renderer sizes the report from the longest description.
    """

    show_modes: tuple[str, ...] = ("Global", "resize")
    key_column: int = 30
    width: int | str = 72
    min_width: int = 60
    comment_max_length: int = 120
    ignored_comments: tuple[str, ...] = field(default=DEFAULT_IGNORED_COMMENTS)
    title: str = "i3 Keybindings"
    color: bool = True

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with every non-``None`` override applied and validated."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        updated = replace(self, **changes)
        _validate(updated)
        return updated


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def _config_home(environ: dict[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    home = env.get("HOME")
    if home:
        return Path(home) / ".config"
    return Path.home() / ".config"


def default_i3_config_path(environ: dict[str, str] | None = None) -> Path:
    """Return ``$XDG_CONFIG_HOME/i3/config`` (falling back to ``~/.config``)."""
    return _config_home(environ) / "i3" / "config"


def default_settings_path(environ: dict[str, str] | None = None) -> Path:
    """Return ``$XDG_CONFIG_HOME/i3keys/config.yml`` (falling back to ``~/.config``)."""
    return _config_home(environ) / "i3keys" / "config.yml"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_width(value: object) -> int | str:
    """Coerce a ``width`` value: a positive int or the literal ``"auto"``."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text == AUTO_WIDTH:
            return AUTO_WIDTH
        if not text.isdigit():
            raise SettingsError("width", f"expected a number or 'auto', got {value!r}")
        value = int(text)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError("width", f"expected a number or 'auto', got {value!r}")
    if value <= 0:
        raise SettingsError("width", "must be positive")
    return value


def _positive_int(key: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(key, f"expected an integer, got {value!r}")
    if value <= 0:
        raise SettingsError(key, "must be positive")
    return value


def _string_list(key: str, value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SettingsError(key, "expected a list of strings")
    return tuple(value)


def _validate(settings: Settings) -> None:
    parse_width(settings.width)
    _positive_int("key_column", settings.key_column)
    _positive_int("min_width", settings.min_width)
    _positive_int("comment_max_length", settings.comment_max_length)


def settings_from_dict(data: dict[str, Any]) -> Settings:
    """Build :class:`Settings` from a mapping, defaulting missing keys.

    Unknown keys are ignored. Raises :class:`SettingsError` on bad values.
    """
    kwargs: dict[str, Any] = {}

    if "show_modes" in data:
        kwargs["show_modes"] = _string_list("show_modes", data["show_modes"])
    if "ignored_comments" in data:
        kwargs["ignored_comments"] = _string_list("ignored_comments", data["ignored_comments"])
    for int_key in ("key_column", "min_width", "comment_max_length"):
        if int_key in data:
            kwargs[int_key] = _positive_int(int_key, data[int_key])
    if "width" in data:
        kwargs["width"] = parse_width(data["width"])
    if "title" in data:
        if not isinstance(data["title"], str):
            raise SettingsError("title", "expected a string")
        kwargs["title"] = data["title"]
    if "color" in data:
        if not isinstance(data["color"], bool):
            raise SettingsError("color", "expected true or false")
        kwargs["color"] = data["color"]

    return Settings(**kwargs)


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from *path* (default: :func:`default_settings_path`).

    Falls back to defaults for a missing file or unreadable YAML.
    """
    config_path = path if path is not None else default_settings_path()
    if not config_path.is_file():
        logger.debug("No settings file at %s, using defaults", config_path)
        return Settings()

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        logger.warning("Failed to read %s, using default settings", config_path)
        return Settings()

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        logger.warning("%s is not a mapping, using default settings", config_path)
        return Settings()

    return settings_from_dict(data)
