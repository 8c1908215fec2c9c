"""Key chord normalization: ``$mod+Shift+Return`` -> ``SUPER+SHIFT+ENTER``."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from i3keys.keymap.variables import VariableTable

# Applied in order as plain substring replacements. "Mod1" must run before
# "mod1"; "$mod" runs before any variable resolution.
KEY_RULES: tuple[tuple[str, str], ...] = (
    ("$mod", "SUPER"),
    ("Mod4", "SUPER"),
    ("Mod1", "ALT"),
    ("mod1", "ALT"),
    ("Mod5", "ALTGR"),
    ("Control", "CTRL"),
    ("Shift", "SHIFT"),
    ("Return", "ENTER"),
    ("Prior", "PGUP"),
    ("Next", "PGDN"),
    ("--release", ""),
)


def apply_key_rules(key: str) -> str:
    for pattern, replacement in KEY_RULES:
        key = key.replace(pattern, replacement)
    return key


def normalize_key(key: str, variables: VariableTable) -> str:
    """Return a human-readable form of a raw key chord.

    After the fixed rules, variables are resolved once more so that a custom
    modifier variable (``$alt+Tab``) still renders.
    """
    return variables.resolve(apply_key_rules(key))
