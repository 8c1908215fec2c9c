"""Keymap report: aligned, color-annotated cheat sheet and JSON export."""

from __future__ import annotations

from datetime import datetime
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text

from i3keys.settings import AUTO_WIDTH, Settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from i3keys.keymap.scanner import Keymap

INDENT = "  "
KEY_GAP = "  "
# Extra columns around the description when sizing automatically.
_AUTO_PADDING = 4

_TITLE_STYLE = "bold cyan"
_RULE_STYLE = "cyan"
_HEADER_STYLE = "bold yellow"
_HEADER_RULE_STYLE = "yellow"
_KEY_STYLE = "bold green"
_FOOTER_STYLE = "dim"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def compute_width(keymap: Keymap, settings: Settings) -> int:
    """Return the report width for *keymap*.

    A fixed ``settings.width`` is used as is. ``"auto"`` sizes the report to
    the longest description among all parsed bindings, shown or not, and never
    goes below ``settings.min_width``.
    """
    if settings.width != AUTO_WIDTH:
        return int(settings.width)
    longest = max((len(b.description) for b in keymap.all_bindings()), default=0)
    width = len(INDENT) + settings.key_column + len(KEY_GAP) + longest + _AUTO_PADDING
    return max(width, settings.min_width)


def select_modes(
    keymap: Keymap, show_modes: Sequence[str], *, all_modes: bool = False
) -> list[str]:
    """Return the modes to render, skipping those without bindings.

    With *all_modes* every parsed mode is shown in declaration order;
    otherwise the allow-list order of *show_modes* is kept.
    """
    candidates = keymap.mode_order if all_modes else show_modes
    return [mode for mode in candidates if keymap.bindings(mode)]


def format_title(title: str, width: int, now: datetime) -> tuple[str, str]:
    """Return ``(padding, title)`` for the centered banner."""
    text = f" {title} — {now:%H:%M:%S} "
    pad = max((width - len(text)) // 2, 0)
    return " " * pad, text


def _make_console(settings: Settings, width: int) -> tuple[Console, StringIO]:
    buf = StringIO()
    console = Console(
        file=buf,
        force_terminal=settings.color,
        no_color=not settings.color,
        color_system="standard" if settings.color else None,
        width=width,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    return console, buf


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


def format_keymap_report(
    keymap: Keymap,
    settings: Settings | None = None,
    *,
    modes: Sequence[str] | None = None,
    now: datetime | None = None,
) -> str:
    """Render *keymap* as a cheat sheet for terminal display.

    Produces:
    - a centered title banner with the render time
    - a top rule
    - per mode: a ``▸ name`` header, a rule, one ``key  description`` row
      per binding
    - a bottom rule and the config path
    """
    settings = settings or Settings()
    now = now or datetime.now()
    width = compute_width(keymap, settings)
    shown = list(modes) if modes is not None else select_modes(keymap, settings.show_modes)

    longest_row = max(
        (len(INDENT) + max(len(b.key), settings.key_column) + len(KEY_GAP) + len(b.description)
         for b in keymap.all_bindings()),
        default=0,
    )
    console, buf = _make_console(settings, max(width, longest_row) + 1)

    def emit(text: Text | None = None) -> None:
        if text is None:
            console.print()
        else:
            console.print(text, soft_wrap=True)

    # -- Header --
    pad, title = format_title(settings.title, width, now)
    banner = Text()
    banner.append(pad, style=_RULE_STYLE)
    banner.append(title, style=_TITLE_STYLE)
    banner.append(pad, style=_RULE_STYLE)
    emit()
    emit(banner)
    emit(Text("═" * width, style=_RULE_STYLE))

    # -- Modes --
    for mode in shown:
        bindings = keymap.bindings(mode)
        if not bindings:
            continue
        emit()
        header = Text(INDENT)
        header.append(f"▸ {mode}", style=_HEADER_STYLE)
        emit(header)
        rule = Text(INDENT)
        rule.append("─" * (width - len(INDENT)), style=_HEADER_RULE_STYLE)
        emit(rule)
        for binding in bindings:
            row = Text(INDENT)
            row.append(binding.key.ljust(settings.key_column), style=_KEY_STYLE)
            row.append(KEY_GAP)
            row.append(binding.description)
            emit(row)
        emit()

    # -- Footer --
    emit(Text("═" * width, style=_RULE_STYLE))
    if keymap.source is not None:
        emit(Text(f"{INDENT}{keymap.source}", style=_FOOTER_STYLE))

    return buf.getvalue()


def format_keymap_json(keymap: Keymap) -> dict[str, Any]:
    """Serialize every parsed mode, binding and variable to a JSON-ready dict."""
    return {
        "config": str(keymap.source) if keymap.source is not None else None,
        "modes": [
            {
                "name": mode,
                "bindings": [
                    {"key": b.key, "description": b.description}
                    for b in keymap.bindings(mode)
                ],
            }
            for mode in keymap.mode_order
        ],
        "variables": keymap.variables.as_dict(),
    }
