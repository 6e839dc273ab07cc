"""Core library for the Neovim keybinding helper.

Contains the keybinding data model, configuration loading and row filtering
shared by the CLI and the TUI.
"""

__all__ = [
    "config",
    "errors",
    "filtering",
    "table",
]
