"""
checker.py - Strength checker for any password the user types.

Design decisions:
- Every keystroke calls evaluate() from scratch. The engine has no
  subscription mechanism and keeps no state, so this view just polls it.
- Password visibility toggle (eye icon) so users can check what they typed
- Shows which character types were detected, since that's what the
  entropy estimate and the score are built from
"""

import customtkinter as ctk

from engine.strength import Composition, analyze_composition, evaluate
from gui.theme import get_colors, get_strength_color, get_strength_label, get_strength_progress


def describe_composition(composition: Composition) -> str:
    """One-line summary of the character types found, e.g. 'lowercase, digits'."""
    found = [
        name for name, present in (
            ("lowercase", composition.has_lowercase),
            ("uppercase", composition.has_uppercase),
            ("digits", composition.has_digits),
            ("symbols", composition.has_symbols),
        ) if present
    ]
    return ", ".join(found) if found else "none"


class CheckerView(ctk.CTkFrame):
    """Free-text strength checker with a live meter."""

    def __init__(self, parent):
        C = get_colors()
        super().__init__(parent, fg_color=C["bg_primary"])
        self.password_visible = False

        self._build_ui()

    def _build_ui(self):
        C = get_colors()

        container = ctk.CTkFrame(self, fg_color="transparent")
        container.pack(fill="both", expand=True, padx=24, pady=24)

        # --- Title ---
        ctk.CTkLabel(
            container,
            text="Strength Checker",
            font=ctk.CTkFont(size=20, weight="bold"),
            text_color=C["text_primary"],
            anchor="w",
        ).pack(fill="x", pady=(0, 4))

        ctk.CTkLabel(
            container,
            text="Type or paste a password to see how it holds up.\nNothing you type here is stored.",
            font=ctk.CTkFont(size=13),
            text_color=C["text_secondary"],
            justify="left",
            anchor="w",
        ).pack(fill="x", pady=(0, 16))

        # --- Password Field ---
        pw_frame = ctk.CTkFrame(container, fg_color="transparent")
        pw_frame.pack(fill="x", pady=(0, 4))

        self.password_entry = ctk.CTkEntry(
            pw_frame,
            placeholder_text="Enter a password",
            show="•",
            font=ctk.CTkFont(size=14),
            height=42,
            fg_color=C["bg_input"],
            border_color=C["border"],
            text_color=C["text_primary"],
            placeholder_text_color=C["text_muted"],
        )
        self.password_entry.pack(side="left", fill="x", expand=True, padx=(0, 8))

        self.toggle_pw_btn = ctk.CTkButton(
            pw_frame,
            text="👁",
            width=42,
            height=42,
            fg_color=C["bg_input"],
            hover_color=C["border"],
            command=self._toggle_password_visibility,
            font=ctk.CTkFont(size=16),
        )
        self.toggle_pw_btn.pack(side="right")

        # --- Strength meter ---
        self.strength_bar = ctk.CTkProgressBar(
            container,
            height=6,
            corner_radius=3,
            fg_color=C["border"],
            progress_color=C["text_muted"],
        )
        self.strength_bar.pack(fill="x", pady=(8, 2))
        self.strength_bar.set(0)

        self.strength_label = ctk.CTkLabel(
            container,
            text="",
            font=ctk.CTkFont(size=12, weight="bold"),
            text_color=C["text_muted"],
            anchor="w",
        )
        self.strength_label.pack(fill="x")

        self.details_label = ctk.CTkLabel(
            container,
            text="",
            font=ctk.CTkFont(size=11),
            text_color=C["text_secondary"],
            justify="left",
            anchor="w",
        )
        self.details_label.pack(fill="x", pady=(4, 0))

        # Bind keystroke tracking for real-time strength updates
        self.password_entry.bind("<KeyRelease>", self._update_strength)
        self.password_entry.focus_set()

    def _toggle_password_visibility(self):
        """Toggle the password field between hidden and visible."""
        self.password_visible = not self.password_visible
        self.password_entry.configure(show="" if self.password_visible else "•")
        self.toggle_pw_btn.configure(text="🙈" if self.password_visible else "👁")

    def _update_strength(self, event=None):
        """Update the strength meter as the user types."""
        C = get_colors()
        password = self.password_entry.get()
        result = evaluate(password)

        if not password:
            self.strength_bar.set(0)
            self.strength_bar.configure(progress_color=C["text_muted"])
            self.strength_label.configure(text="", text_color=C["text_muted"])
            self.details_label.configure(text="")
            return

        color = get_strength_color(result.level)
        self.strength_bar.set(get_strength_progress(result.level))
        self.strength_bar.configure(progress_color=color)
        self.strength_label.configure(
            text=f"{get_strength_label(result.level)}  •  {result.entropy_bits:.1f} bits of entropy",
            text_color=color,
        )
        self.details_label.configure(
            text=f"{len(password)} characters  •  types: "
                 f"{describe_composition(analyze_composition(password))}",
        )
