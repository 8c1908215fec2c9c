"""Report domain: terminal cheat sheet and JSON export."""

from i3keys.report.render import (
    compute_width,
    format_keymap_json,
    format_keymap_report,
    format_title,
    select_modes,
)

__all__ = [
    "compute_width",
    "format_keymap_json",
    "format_keymap_report",
    "format_title",
    "select_modes",
]
