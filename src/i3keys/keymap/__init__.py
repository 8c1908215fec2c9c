"""Keymap domain: variable table, line scanner, descriptions and key names."""

from i3keys.keymap.descriptions import (
    ACTION_REWRITES,
    EXEC_PREFIXES,
    CommentFilter,
    describe_action,
    resolve_description,
)
from i3keys.keymap.keys import KEY_RULES, normalize_key
from i3keys.keymap.scanner import (
    GLOBAL_MODE,
    Binding,
    Keymap,
    ScanState,
    parse_config,
    scan_lines,
    step,
)
from i3keys.keymap.variables import VariableTable, collect_variables

__all__ = [
    "ACTION_REWRITES",
    "EXEC_PREFIXES",
    "GLOBAL_MODE",
    "KEY_RULES",
    "Binding",
    "CommentFilter",
    "Keymap",
    "ScanState",
    "VariableTable",
    "collect_variables",
    "describe_action",
    "normalize_key",
    "parse_config",
    "resolve_description",
    "scan_lines",
    "step",
]
