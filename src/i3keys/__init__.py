"""i3keys - keybinding cheat sheet generator for i3 configs."""

__version__ = "0.4.0"
