"""
main.py - Application entry point for PassForge.

This is the orchestrator. It:
1. Loads the configuration (defaults + PASSFORGE_* environment overrides)
2. Sets up logging
3. Creates the main application window with the sidebar view
4. Rebuilds the view when the theme changes, keeping the session history
5. Handles clean shutdown (wiping a pending clipboard copy)
"""

import logging
import sys

import customtkinter as ctk

from config import AppConfig, ConfigError
from gui.clipboard import ClipboardGuard
from gui.main_window import MainWindow
from gui.session import SessionHistory
from gui.theme import get_colors, set_mode

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


def configure_logging(config: AppConfig):
    """Console logging always, plus a log file when one is configured."""
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


class PassForgeApp(ctk.CTk):
    """Main application window."""

    def __init__(self, config: AppConfig):
        super().__init__()
        self.app_config = config

        # Window setup
        self.title("PassForge - Password Generator")
        self.geometry("760x640")
        self.minsize(640, 560)
        self.configure(fg_color=get_colors()["bg_primary"])

        self.protocol("WM_DELETE_WINDOW", self._on_close)

        # Lives as long as the process; never written to disk
        self.history = SessionHistory(limit=config.history_limit)
        # Outlives view rebuilds so a pending wipe still fires after a theme change
        self.clipboard_guard = ClipboardGuard(self, config.clipboard_clear_seconds)

        self.current_frame = None
        self._show_main("generator")

    def _show_main(self, view: str):
        """(Re)build the main view, e.g. after a theme change."""
        if self.current_frame:
            self.current_frame.detach()
            self.current_frame.destroy()

        self.configure(fg_color=get_colors()["bg_primary"])
        self.current_frame = MainWindow(
            parent=self,
            config=self.app_config,
            history=self.history,
            clipboard=self.clipboard_guard,
            on_theme_change=self._show_main,
            initial_view=view,
        )
        self.current_frame.pack(fill="both", expand=True)

    def _on_close(self):
        """Clean shutdown: wipe a pending clipboard copy and destroy the window."""
        if self.current_frame:
            self.current_frame.shutdown()
        logger.info("Shutting down")
        self.destroy()


def main():
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    configure_logging(config)
    logger.info("Starting PassForge %s", APP_VERSION)

    set_mode(config.appearance_mode)
    ctk.set_appearance_mode(config.appearance_mode)

    try:
        app = PassForgeApp(config)
        app.mainloop()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
        sys.exit(0)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
