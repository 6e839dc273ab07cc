"""Main TUI application for browsing keybindings."""

import logging
import os
import tempfile
from typing import Optional

from textual.app import App

from kblib.config import Config

from .controller import Keymap
from .screens.keybind_screen import KeybindScreen
from .theme import ColorScheme


logger = logging.getLogger(__name__)

LOG_FILE_NAME = "kbtui_debug.log"


class KeybindApp(App):
    """Searchable table of editor keybindings."""

    TITLE = "nvim keybind helper"

    def __init__(
        self,
        config: Config,
        color_scheme: Optional[ColorScheme] = None,
        keymap: Optional[Keymap] = None,
    ):
        super().__init__()
        self.config = config
        self.color_scheme = color_scheme or ColorScheme()
        self.keymap = keymap or Keymap()
        self.CSS = self.color_scheme.to_css()

    def on_mount(self) -> None:
        """Show the keybinding screen."""
        logger.info(
            "TUI started with %d rows from %s",
            len(self.config.rows),
            self.config.source_path or "built-in table",
        )
        self.push_screen(KeybindScreen(self.config, self.color_scheme, self.keymap))

    def report_exception(self, error: BaseException) -> None:
        """Write an unhandled error and its traceback to the debug log."""
        logger.error("TUI exception: %s", error, exc_info=error)

    def _handle_exception(self, error: Exception) -> None:
        self.report_exception(error)
        super()._handle_exception(error)


def run_tui(config: Config) -> None:
    """Entry point for running the TUI."""
    # Log to a file only; the terminal belongs to the TUI
    log_file = os.path.join(tempfile.gettempdir(), LOG_FILE_NAME)
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode='w')
        ],
        force=True,
    )
    logger.info("Starting TUI, debug log at: %s", log_file)

    app = KeybindApp(config)
    app.run()
