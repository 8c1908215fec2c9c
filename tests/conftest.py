"""Shared test fixtures for i3keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_CONFIG = """\
# This file has been auto-generated by i3-config-wizard(1).
# It will not be overwritten, so edit it as you like.
#
# Please see https://i3wm.org/docs/userguide.html for a complete reference!

set $mod Mod4
set $term alacritty
set $ws1 "1: web"
set $mode_gaps "Gaps: (o) outer, (i) inner"

font pango:monospace 8

# start a terminal
bindsym $mod+Return exec $term

bindsym $mod+d exec --no-startup-id "rofi -show drun"
bindsym $mod+Shift+q kill

bindsym $mod+1 workspace number 1
bindsym $mod+Shift+1 move container to workspace number 1

mode "resize" {
        # These bindings trigger as soon as you enter the resize mode
        # shrink width
        bindsym h resize shrink width 10 px or 10 ppt
        bindsym Return mode "default"
}

bindsym $mod+r mode "resize"

mode "$mode_gaps" {
        bindsym o mode "default"
}
"""


def write_config(path: Path, content: str) -> Path:
    """Write an i3 config and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def sample_config(tmp_path: Path) -> Path:
    """A small but realistic i3 config file."""
    return write_config(tmp_path / "i3" / "config", SAMPLE_CONFIG)
