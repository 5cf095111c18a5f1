"""
history.py - Session history view.

Lists the passwords copied from the generator this session (see session.py for
the model), with a copy button per entry and a button to clear the list.
"""

from typing import Callable

import customtkinter as ctk

from gui.clipboard import flash_button
from gui.session import HistoryItem, SessionHistory
from gui.theme import get_colors, get_strength_color, get_strength_label


class HistoryView(ctk.CTkFrame):
    """
    Lists this session's generated passwords.

    Args:
        parent: Parent widget
        history: The SessionHistory to display
        on_copy: Callback that copies a password to the clipboard
    """

    def __init__(self, parent, history: SessionHistory, on_copy: Callable[[str], None]):
        C = get_colors()
        super().__init__(parent, fg_color=C["bg_primary"])
        self.history = history
        self.on_copy = on_copy

        self._build_ui()
        self.refresh()

    def _build_ui(self):
        C = get_colors()

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.pack(fill="x", padx=24, pady=(24, 12))

        ctk.CTkLabel(
            header, text="Session History",
            font=ctk.CTkFont(size=20, weight="bold"),
            text_color=C["text_primary"],
        ).pack(side="left")

        ctk.CTkButton(
            header, text="Clear", width=80, height=32,
            fg_color=C["delete_btn"], hover_color=C["delete_btn_hover"],
            command=self._clear,
        ).pack(side="right")

        ctk.CTkLabel(
            self,
            text="Passwords copied from the generator this session. They are never saved to disk.",
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"], anchor="w",
        ).pack(fill="x", padx=24, pady=(0, 12))

        self.list_frame = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.list_frame.pack(fill="both", expand=True, padx=16, pady=(0, 16))

    def refresh(self):
        """Rebuild the list from the model."""
        C = get_colors()
        for child in self.list_frame.winfo_children():
            child.destroy()

        items = self.history.items()
        if not items:
            ctk.CTkLabel(
                self.list_frame, text="Nothing copied yet.",
                font=ctk.CTkFont(size=13),
                text_color=C["text_muted"],
            ).pack(pady=40)
            return

        for item in items:
            self._create_row(item)

    def _create_row(self, item: HistoryItem):
        C = get_colors()
        row = ctk.CTkFrame(
            self.list_frame, fg_color=C["bg_card"], corner_radius=10,
            border_width=1, border_color=C["border_subtle"],
        )
        row.pack(fill="x", pady=4, padx=4)

        info = ctk.CTkFrame(row, fg_color="transparent")
        info.pack(side="left", fill="x", expand=True, padx=12, pady=10)

        ctk.CTkLabel(
            info, text=item.password,
            font=ctk.CTkFont(family="Courier", size=13),
            text_color=C["text_primary"], anchor="w",
        ).pack(fill="x")

        color = get_strength_color(item.level)
        ctk.CTkLabel(
            info,
            text=f"{get_strength_label(item.level)}  •  {item.entropy_bits:.1f} bits  •  "
                 f"{item.created_at:%H:%M:%S}",
            font=ctk.CTkFont(size=11),
            text_color=color, anchor="w",
        ).pack(fill="x")

        btn = ctk.CTkButton(
            row, text="Copy", width=64, height=30,
            fg_color=C["copy_btn"], hover_color=C["copy_btn_hover"],
        )
        btn.configure(command=lambda: self._copy(item, btn))
        btn.pack(side="right", padx=12)

    def _copy(self, item: HistoryItem, btn: ctk.CTkButton):
        C = get_colors()
        self.on_copy(item.password)
        flash_button(btn, "✓", C["success"], "Copy", C["copy_btn"])

    def _clear(self):
        self.history.clear()
        self.refresh()
