"""Colour scheme for the keybinding TUI."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorScheme:
    """Colours used by the screen, as hex equivalents of xterm-256 indexes."""

    border: str = "#585858"        # 240
    accent: str = "#ff5faf"        # 205
    muted: str = "#626262"         # 241
    cursor_fg: str = "#ffffaf"     # 229
    cursor_bg: str = "#5f00ff"     # 57

    @property
    def accent_style(self) -> str:
        """Rich style string for prompts."""
        return f"bold {self.accent}"

    def to_css(self) -> str:
        """Render the app stylesheet for this scheme."""
        return f"""
        Screen {{
            layout: vertical;
        }}

        #keybind-table {{
            border: solid {self.border};
            width: auto;
            max-width: 100%;
        }}

        #keybind-table > .datatable--header {{
            text-style: bold;
        }}

        #keybind-table > .datatable--cursor {{
            color: {self.cursor_fg};
            background: {self.cursor_bg};
        }}

        #search-bar {{
            height: 1;
            margin-top: 1;
        }}

        #search-prompt {{
            width: auto;
            color: {self.accent};
            text-style: bold;
        }}

        #search-input {{
            width: 30;
            height: 1;
            border: none;
            padding: 0;
        }}

        #filter-line {{
            height: 1;
            margin-top: 1;
        }}

        #help-line {{
            color: {self.muted};
        }}
        """
