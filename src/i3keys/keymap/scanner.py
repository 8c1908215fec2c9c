"""Block-aware line scanner: turns i3 config lines into per-mode bindings.

The scan is a fold over the config lines. :func:`step` takes the current
:class:`ScanState` and one line, and returns the next state plus the
:class:`Binding` the line produced, if any. :func:`scan_lines` drives the
fold and groups the emitted bindings by mode in declaration order.

Recognized lines, in precedence order:

- ``# comment`` -- candidate description for the next binding
- blank line -- forgets the pending comment
- ``mode "$var" {`` / ``mode "name" {`` -- enters a mode
- ``}`` -- returns to the Global mode
- ``bindsym KEY ACTION`` / ``bindcode KEY ACTION`` -- emits a binding

Anything else is inert and only forgets the pending comment.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from i3keys.keymap.descriptions import CommentFilter, resolve_description
from i3keys.keymap.keys import normalize_key
from i3keys.keymap.variables import VariableTable, collect_variables

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)

GLOBAL_MODE = "Global"

_COMMENT_RE = re.compile(r"^# ?(.*)")
_MODE_VAR_RE = re.compile(r'^mode\s+"?(\$[a-zA-Z0-9_]+)"?')
_MODE_LITERAL_RE = re.compile(r'^mode\s+"([^"]+)"')
_BIND_RE = re.compile(r"^(bindsym|bindcode)\s+(\S+)\s+(.*)")


@dataclass(frozen=True)
class Binding:
    """One bind directive, ready for display."""

    mode: str
    key: str
    description: str


@dataclass(frozen=True)
class ScanState:
    """Scanner state between two lines."""

    mode: str = GLOBAL_MODE
    pending_comment: str | None = None


@dataclass
class Keymap:
    """Parsed bindings grouped by mode, plus the variables used to resolve them."""

    variables: VariableTable = field(default_factory=VariableTable)
    mode_order: list[str] = field(default_factory=lambda: [GLOBAL_MODE])
    modes: dict[str, list[Binding]] = field(default_factory=lambda: {GLOBAL_MODE: []})
    source: Path | None = None

    def bindings(self, mode: str) -> list[Binding]:
        return self.modes.get(mode, [])

    def all_bindings(self) -> list[Binding]:
        return [b for mode in self.mode_order for b in self.modes[mode]]

    def register_mode(self, mode: str) -> None:
        if mode not in self.modes:
            self.modes[mode] = []
            self.mode_order.append(mode)
            logger.debug("Registered mode %r", mode)


def _enter_mode(name: str) -> ScanState:
    return ScanState(mode=name, pending_comment=None)


def step(
    state: ScanState,
    line: str,
    variables: VariableTable,
    comment_filter: CommentFilter,
) -> tuple[ScanState, Binding | None]:
    """Classify one raw line and return ``(next_state, emitted_binding)``."""
    line = line.rstrip("\r\n").lstrip()

    m = _COMMENT_RE.match(line)
    if m is not None:
        candidate = m.group(1)
        if not candidate.strip():
            return replace(state, pending_comment=None), None
        if comment_filter.is_eligible(candidate):
            return replace(state, pending_comment=candidate), None
        # Boilerplate prose neither sets nor clears the pending comment.
        return state, None

    if not line:
        return replace(state, pending_comment=None), None

    m = _MODE_VAR_RE.match(line)
    if m is not None:
        return _enter_mode(variables.resolve(m.group(1))), None

    m = _MODE_LITERAL_RE.match(line)
    if m is not None:
        return _enter_mode(m.group(1)), None

    if line == "}":
        return _enter_mode(GLOBAL_MODE), None

    m = _BIND_RE.match(line)
    if m is not None:
        _, key, action = m.groups()
        binding = Binding(
            mode=state.mode,
            key=normalize_key(key, variables),
            description=resolve_description(action, state.pending_comment, variables),
        )
        return replace(state, pending_comment=None), binding

    return replace(state, pending_comment=None), None


def scan_lines(
    lines: Iterable[str],
    *,
    comment_filter: CommentFilter | None = None,
    variables: VariableTable | None = None,
) -> Keymap:
    """Parse config *lines* into a :class:`Keymap`.

    The variable table is built in a first pass over the same lines unless
    one is supplied.
    """
    lines = list(lines)
    if variables is None:
        variables = collect_variables(lines)
    if comment_filter is None:
        comment_filter = CommentFilter()

    keymap = Keymap(variables=variables)
    state = ScanState()
    for line in lines:
        state, binding = step(state, line, variables, comment_filter)
        keymap.register_mode(state.mode)
        if binding is not None:
            keymap.modes[binding.mode].append(binding)

    logger.debug(
        "Scanned %d lines: %d bindings in %d modes",
        len(lines),
        len(keymap.all_bindings()),
        len(keymap.mode_order),
    )
    return keymap


def parse_config(path: Path, *, comment_filter: CommentFilter | None = None) -> Keymap:
    """Read an i3 config file and parse it.

    Raises ``OSError`` or ``UnicodeDecodeError`` if the file cannot be read;
    the content itself never causes an error.
    """
    lines = path.read_text(encoding="utf-8").splitlines()
    keymap = scan_lines(lines, comment_filter=comment_filter)
    keymap.source = path
    return keymap
