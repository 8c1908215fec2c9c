"""Variable table: ``set $name value`` declarations and their substitution."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

_SET_RE = re.compile(r"^\s*set\s+(\$[a-zA-Z0-9_]+)\s+(.*)")

# Workspace names such as "3: web" keep only the label.
_WORKSPACE_NUMBER_RE = re.compile(r"^[0-9]+:\s*")


@dataclass(frozen=True)
class VariableTable:
    """Immutable mapping of variable name to value.

    ``ordered`` holds the same pairs sorted longest-name-first so that
    ``$mode_gaps`` is substituted before ``$mod`` can match its prefix.
    """

    ordered: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_mapping(cls, values: dict[str, str]) -> VariableTable:
        pairs = sorted(values.items(), key=lambda kv: -len(kv[0]))
        return cls(ordered=tuple(pairs))

    def as_dict(self) -> dict[str, str]:
        return dict(self.ordered)

    def get(self, name: str) -> str | None:
        return self.as_dict().get(name)

    def resolve(self, text: str) -> str:
        """Substitute every known variable in *text*, longest name first."""
        for name, value in self.ordered:
            text = text.replace(name, value)
        return text

    def __len__(self) -> int:
        return len(self.ordered)


def _unquote(value: str) -> str:
    # One layer of quotes only.
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def collect_variables(lines: Iterable[str]) -> VariableTable:
    """Build the variable table from every ``set`` line in *lines*.

    Later definitions overwrite earlier ones. Lines that are not ``set``
    declarations are ignored.
    """
    values: dict[str, str] = {}
    for line in lines:
        m = _SET_RE.match(line)
        if m is None:
            continue
        value = _unquote(m.group(2).rstrip("\r\n"))
        value = _WORKSPACE_NUMBER_RE.sub("", value)
        values[m.group(1)] = value
    return VariableTable.from_mapping(values)
