"""Exception hierarchy for i3keys."""

from __future__ import annotations


class I3KeysError(Exception):
    """Base class for all i3keys errors."""


class SettingsError(I3KeysError):
    """Raised when ``config.yml`` contains an invalid value."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key
