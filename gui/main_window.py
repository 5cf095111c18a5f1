"""
main_window.py - Main view with sidebar navigation.

Features:
- Sidebar switching between Generator, Checker and History
- Dark/light mode toggle
- Clipboard copy that wipes itself after a delay
- Keyboard shortcuts
"""

import logging
import tkinter
from typing import Callable, Optional

import customtkinter as ctk

from config import AppConfig
from engine.strength import EvaluationResult
from gui.checker import CheckerView
from gui.clipboard import ClipboardGuard
from gui.generator import GeneratorView
from gui.history import HistoryView
from gui.session import SessionHistory
from gui.theme import get_colors, get_mode, toggle_mode

logger = logging.getLogger(__name__)

NAV_ITEMS = (
    ("generator", "🎲", "Generator"),
    ("checker", "🔍", "Checker"),
    ("history", "🕘", "History"),
)

SHORTCUTS = ("<Control-g>", "<Control-h>", "<Control-k>")


class MainWindow(ctk.CTkFrame):
    """
    Main view with sidebar navigation.

    Args:
        parent: The app window
        config: App configuration
        history: Session history shared across rebuilds (theme changes)
        clipboard: App-owned clipboard guard, so a pending wipe outlives rebuilds
        on_theme_change: Called after the mode flips so the app can rebuild
        initial_view: Which view to open on
    """

    def __init__(
        self,
        parent: ctk.CTk,
        config: AppConfig,
        history: SessionHistory,
        clipboard: ClipboardGuard,
        on_theme_change: Optional[Callable[[str], None]] = None,
        initial_view: str = "generator",
    ):
        C = get_colors()
        super().__init__(parent, fg_color=C["bg_primary"])
        self.app_config = config
        self.history = history
        self.on_theme_change = on_theme_change
        self.clipboard_guard = clipboard
        self.clipboard_guard.on_cleared = self._on_clipboard_cleared
        self.active_view = None
        self.views = {}

        self._build_ui()
        self.show_view(initial_view)
        self._bind_shortcuts()

    def _bind_shortcuts(self):
        top = self.winfo_toplevel()
        top.bind("<Control-g>", lambda e: self._shortcut_generate())
        top.bind("<Control-h>", lambda e: self.show_view("history"))
        top.bind("<Control-k>", lambda e: self.show_view("checker"))

    def _build_ui(self):
        C = get_colors()

        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        # ==========================================
        # SIDEBAR
        # ==========================================
        self.sidebar = ctk.CTkFrame(
            self, width=200, fg_color=C["bg_sidebar"],
            corner_radius=0, border_width=0,
        )
        self.sidebar.grid(row=0, column=0, sticky="nsew")
        self.sidebar.grid_propagate(False)
        self.sidebar.grid_columnconfigure(0, weight=1)
        self.sidebar.grid_rowconfigure(2, weight=1)

        # -- Logo --
        logo_frame = ctk.CTkFrame(self.sidebar, fg_color="transparent")
        logo_frame.grid(row=0, column=0, sticky="ew", padx=16, pady=(20, 24))

        ctk.CTkLabel(
            logo_frame, text="🔐", font=ctk.CTkFont(size=22),
        ).pack(side="left", padx=(0, 8))

        ctk.CTkLabel(
            logo_frame, text="PassForge",
            font=ctk.CTkFont(size=20, weight="bold"),
            text_color=C["text_primary"],
        ).pack(side="left")

        # -- Navigation --
        nav_frame = ctk.CTkFrame(self.sidebar, fg_color="transparent")
        nav_frame.grid(row=1, column=0, sticky="new", padx=8)

        self.nav_buttons = {}
        for key, icon, label in NAV_ITEMS:
            btn = ctk.CTkButton(
                nav_frame,
                text=f"  {icon}  {label}",
                font=ctk.CTkFont(size=13),
                height=36,
                fg_color="transparent",
                hover_color=C["bg_hover"],
                text_color=C["text_secondary"],
                anchor="w",
                corner_radius=8,
                command=lambda k=key: self.show_view(k),
            )
            btn.pack(fill="x", pady=1)
            self.nav_buttons[key] = btn

        # -- Bottom controls --
        bottom_frame = ctk.CTkFrame(self.sidebar, fg_color="transparent")
        bottom_frame.grid(row=3, column=0, sticky="sew", padx=16, pady=(8, 16))

        self.theme_btn = ctk.CTkButton(
            bottom_frame,
            text="☀  Light mode" if get_mode() == "dark" else "🌙  Dark mode",
            font=ctk.CTkFont(size=12),
            height=34,
            fg_color="transparent",
            hover_color=C["bg_hover"],
            border_width=1,
            border_color=C["border"],
            text_color=C["text_secondary"],
            command=self._toggle_theme,
        )
        self.theme_btn.pack(fill="x")

        self.status_label = ctk.CTkLabel(
            bottom_frame, text="",
            font=ctk.CTkFont(size=11),
            text_color=C["text_muted"],
            wraplength=160,
        )
        self.status_label.pack(fill="x", pady=(8, 0))

        # ==========================================
        # CONTENT
        # ==========================================
        self.content = ctk.CTkFrame(self, fg_color=C["bg_primary"], corner_radius=0)
        self.content.grid(row=0, column=1, sticky="nsew")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _create_view(self, name: str) -> ctk.CTkFrame:
        if name == "generator":
            return GeneratorView(
                self.content, config=self.app_config,
                on_copy=self.copy_to_clipboard,
                on_copied=self._record_copied,
            )
        if name == "checker":
            return CheckerView(self.content)
        if name == "history":
            return HistoryView(self.content, history=self.history, on_copy=self.copy_to_clipboard)
        raise ValueError(f"Unknown view: {name!r}")

    def show_view(self, name: str):
        """Switch the content area to the named view."""
        C = get_colors()
        if name not in self.views:
            self.views[name] = self._create_view(name)
        elif name == "history":
            self.views[name].refresh()

        if self.active_view and self.active_view != name:
            self.views[self.active_view].pack_forget()
        self.views[name].pack(fill="both", expand=True)
        self.active_view = name

        for key, btn in self.nav_buttons.items():
            active = key == name
            btn.configure(
                fg_color=C["sidebar_active"] if active else "transparent",
                text_color=C["text_primary"] if active else C["text_secondary"],
            )

    def _shortcut_generate(self):
        self.show_view("generator")
        self.views["generator"].generate()

    def _record_copied(self, password: str, result: EvaluationResult):
        self.history.add(password, result)

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def copy_to_clipboard(self, text: str):
        C = get_colors()
        try:
            self.clipboard_guard.copy(text)
        except tkinter.TclError as e:
            logger.error("Copy to clipboard failed: %s", e)
            self.status_label.configure(text="Couldn't access the clipboard.", text_color=C["error"])
            return

        delay = self.clipboard_guard.clear_seconds
        if delay:
            self.status_label.configure(
                text=f"Copied. Clipboard clears in {delay}s.", text_color=C["text_muted"],
            )
        else:
            self.status_label.configure(text="Copied.", text_color=C["text_muted"])

    def _on_clipboard_cleared(self):
        self.status_label.configure(text="")

    # ------------------------------------------------------------------
    # Theme Toggle
    # ------------------------------------------------------------------

    def _toggle_theme(self):
        new_mode = toggle_mode()
        ctk.set_appearance_mode(new_mode)
        logger.info("Switched to %s mode", new_mode)
        if self.on_theme_change:
            self.on_theme_change(self.active_view)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def detach(self):
        """Drop shortcuts and clipboard callbacks before a rebuild. A pending wipe keeps running."""
        if self.clipboard_guard.on_cleared == self._on_clipboard_cleared:
            self.clipboard_guard.on_cleared = None

        top = self.winfo_toplevel()
        for shortcut in SHORTCUTS:
            top.unbind(shortcut)

    def shutdown(self):
        """Wipe the clipboard if a clear is pending, then detach."""
        self.clipboard_guard.wipe_now()
        self.detach()
