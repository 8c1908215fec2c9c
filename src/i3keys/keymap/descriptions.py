"""Binding descriptions: curated comments or text inferred from the action."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i3keys.settings import DEFAULT_IGNORED_COMMENTS

if TYPE_CHECKING:
    from i3keys.keymap.variables import VariableTable
    from i3keys.settings import Settings

# Tried in order; at most one is stripped.
EXEC_PREFIXES: tuple[str, ...] = (
    "exec_always --no-startup-id ",
    "exec_always ",
    "exec --no-startup-id ",
    "exec ",
)

# First match wins; unmatched actions are left as they are.
ACTION_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^workspace number (.+)"), r"Switch to: \1"),
    (re.compile(r"^move container to workspace number (.+)"), r"Move to: \1"),
)


@dataclass(frozen=True)
class CommentFilter:
    """Decides whether a comment is worth keeping as a description."""

    max_length: int = 120
    ignored_prefixes: tuple[str, ...] = DEFAULT_IGNORED_COMMENTS

    @classmethod
    def from_settings(cls, settings: Settings) -> CommentFilter:
        return cls(
            max_length=settings.comment_max_length,
            ignored_prefixes=settings.ignored_comments,
        )

    def is_eligible(self, text: str) -> bool:
        if len(text) >= self.max_length:
            return False
        return not text.lstrip().startswith(self.ignored_prefixes)


def strip_exec_prefix(action: str) -> str:
    for prefix in EXEC_PREFIXES:
        if action.startswith(prefix):
            return action[len(prefix):]
    return action


def rewrite_action(text: str) -> str:
    for pattern, template in ACTION_REWRITES:
        m = pattern.match(text)
        if m is not None:
            return m.expand(template)
    return text


def describe_action(action: str, variables: VariableTable) -> str:
    """Infer a description from a bind action.

    ``exec --no-startup-id "$term"`` becomes the resolved terminal name,
    ``workspace number 3`` becomes ``Switch to: 3``.
    """
    text = strip_exec_prefix(action.strip())
    text = text.replace('"', "")
    text = variables.resolve(text)
    return rewrite_action(text)


def resolve_description(
    action: str, pending_comment: str | None, variables: VariableTable
) -> str:
    """Return the pending comment verbatim, or a description inferred from *action*."""
    if pending_comment:
        return pending_comment
    return describe_action(action, variables)
