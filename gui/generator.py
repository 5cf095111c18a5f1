"""
generator.py - Password generator view.

Lets the user pick a length, the character types and characters to leave
out, then shows the generated password with its strength. Every password
the user copies is handed to on_copied so the History view can record it.
"""

from typing import Callable, Optional

import customtkinter as ctk

from config import AppConfig
from engine.charsets import AMBIGUOUS
from engine.password_gen import ConfigurationError, GenerationRequest, PoolExhaustedError
from engine.strength import EvaluationResult, evaluate
from gui.clipboard import flash_button
from gui.theme import get_colors, get_strength_color, get_strength_label, get_strength_progress

ERROR_MESSAGES = {
    ConfigurationError: "Select at least one character type.",
    PoolExhaustedError: "Every character of the selected types is excluded.",
}


class GeneratorView(ctk.CTkFrame):
    """
    Generator screen.

    Args:
        parent: Parent widget
        config: App configuration (slider range and starting length)
        on_copy: Callback that copies a password to the clipboard
        on_copied: Callback with each copied password and its evaluation
    """

    def __init__(
        self,
        parent,
        config: AppConfig,
        on_copy: Callable[[str], None],
        on_copied: Optional[Callable[[str, EvaluationResult], None]] = None,
    ):
        C = get_colors()
        super().__init__(parent, fg_color=C["bg_primary"])
        self.app_config = config
        self.on_copy = on_copy
        self.on_copied = on_copied
        self.generated_password = ""
        self.result: Optional[EvaluationResult] = None

        self._build_ui()
        self.generate()  # Generate one immediately

    def _build_ui(self):
        """Build the generator interface."""
        C = get_colors()

        container = ctk.CTkFrame(self, fg_color="transparent")
        container.pack(fill="both", expand=True, padx=24, pady=24)

        # --- Title ---
        ctk.CTkLabel(
            container,
            text="Password Generator",
            font=ctk.CTkFont(size=20, weight="bold"),
            text_color=C["text_primary"],
            anchor="w",
        ).pack(fill="x", pady=(0, 16))

        # --- Generated Password Display ---
        output_frame = ctk.CTkFrame(
            container,
            fg_color=C["bg_card"],
            corner_radius=10,
            border_width=1,
            border_color=C["border"],
        )
        output_frame.pack(fill="x", pady=(0, 8))

        self.output_label = ctk.CTkLabel(
            output_frame,
            text="",
            font=ctk.CTkFont(family="Courier", size=14),
            text_color=C["success"],
            wraplength=420,
        )
        self.output_label.pack(padx=16, pady=16)

        # Strength indicator
        self.strength_bar = ctk.CTkProgressBar(
            container,
            height=6,
            corner_radius=3,
            fg_color=C["border"],
            progress_color=C["text_muted"],
        )
        self.strength_bar.pack(fill="x", pady=(0, 2))
        self.strength_bar.set(0)

        self.strength_label = ctk.CTkLabel(
            container,
            text="",
            font=ctk.CTkFont(size=11),
            text_color=C["text_muted"],
            anchor="w",
        )
        self.strength_label.pack(fill="x", pady=(0, 12))

        # --- Options Card ---
        options_card = ctk.CTkFrame(
            container,
            fg_color=C["bg_card"],
            corner_radius=10,
            border_width=1,
            border_color=C["border"],
        )
        options_card.pack(fill="x", pady=(0, 16))

        options = ctk.CTkFrame(options_card, fg_color="transparent")
        options.pack(padx=16, pady=16, fill="x")

        # Length slider
        length_row = ctk.CTkFrame(options, fg_color="transparent")
        length_row.pack(fill="x", pady=(0, 12))

        ctk.CTkLabel(
            length_row,
            text="Length",
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"],
        ).pack(side="left")

        self.length_value_label = ctk.CTkLabel(
            length_row,
            text=str(self.app_config.default_length),
            font=ctk.CTkFont(size=12, weight="bold"),
            text_color=C["text_primary"],
        )
        self.length_value_label.pack(side="right")

        steps = max(self.app_config.max_length - self.app_config.min_length, 1)
        self.length_slider = ctk.CTkSlider(
            options,
            from_=self.app_config.min_length,
            to=self.app_config.max_length,
            number_of_steps=steps,
            fg_color=C["border"],
            progress_color=C["accent"],
            button_color=C["accent"],
            button_hover_color=C["accent_hover"],
            command=self._on_length_change,
        )
        self.length_slider.set(self.app_config.default_length)
        self.length_slider.pack(fill="x", pady=(0, 12))

        # Checkboxes
        self.use_upper = self._add_checkbox(options, "Uppercase (A-Z)", checked=True)
        self.use_lower = self._add_checkbox(options, "Lowercase (a-z)", checked=True)
        self.use_digits = self._add_checkbox(options, "Digits (0-9)", checked=True)
        self.use_symbols = self._add_checkbox(options, "Symbols (!@#$%...)", checked=True)
        self.exclude_ambiguous = self._add_checkbox(
            options, f"Exclude ambiguous ({', '.join(AMBIGUOUS)})", checked=False,
        )

        # Exclusion field
        ctk.CTkLabel(
            options,
            text="Exclude these characters",
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"],
            anchor="w",
        ).pack(fill="x", pady=(12, 4))

        self.exclude_entry = ctk.CTkEntry(
            options,
            placeholder_text="e.g. {}[]|",
            font=ctk.CTkFont(family="Courier", size=13),
            height=36,
            fg_color=C["bg_input"],
            border_color=C["border"],
            text_color=C["text_primary"],
            placeholder_text_color=C["text_muted"],
        )
        self.exclude_entry.pack(fill="x")
        self.exclude_entry.bind("<KeyRelease>", lambda e: self.generate())

        # --- Action Buttons ---
        btn_frame = ctk.CTkFrame(container, fg_color="transparent")
        btn_frame.pack(fill="x")

        self.regenerate_btn = ctk.CTkButton(
            btn_frame,
            text="🔄 Regenerate",
            font=ctk.CTkFont(size=13),
            height=40,
            fg_color=C["bg_card"],
            hover_color=C["border"],
            border_width=1,
            border_color=C["border"],
            text_color=C["text_primary"],
            command=self.generate,
        )
        self.regenerate_btn.pack(side="left", fill="x", expand=True, padx=(0, 8))

        self.copy_btn = ctk.CTkButton(
            btn_frame,
            text="Copy",
            font=ctk.CTkFont(size=13, weight="bold"),
            height=40,
            fg_color=C["accent"],
            hover_color=C["accent_hover"],
            command=self.copy,
        )
        self.copy_btn.pack(side="right", fill="x", expand=True)

    def _add_checkbox(self, parent, text: str, checked: bool) -> ctk.CTkCheckBox:
        C = get_colors()
        box = ctk.CTkCheckBox(
            parent,
            text=text,
            font=ctk.CTkFont(size=12),
            text_color=C["text_secondary"],
            fg_color=C["accent"],
            hover_color=C["accent_hover"],
            command=self.generate,
        )
        if checked:
            box.select()
        box.pack(anchor="w", pady=2)
        return box

    # ------------------------------------------------------------------
    # Event Handlers
    # ------------------------------------------------------------------

    def _on_length_change(self, value):
        """Update length label and regenerate."""
        self.length_value_label.configure(text=str(int(value)))
        self.generate()

    def _build_request(self) -> GenerationRequest:
        return GenerationRequest.from_options(
            length=int(self.length_slider.get()),
            use_uppercase=bool(self.use_upper.get()),
            use_lowercase=bool(self.use_lower.get()),
            use_digits=bool(self.use_digits.get()),
            use_symbols=bool(self.use_symbols.get()),
            exclude=self.exclude_entry.get(),
            exclude_ambiguous=bool(self.exclude_ambiguous.get()),
        )

    def generate(self, *args):
        """Generate a new password with current settings."""
        C = get_colors()
        request = self._build_request()

        try:
            password = request.generate()
        except (ConfigurationError, PoolExhaustedError) as e:
            self.generated_password = ""
            self.result = None
            self.output_label.configure(
                text=ERROR_MESSAGES.get(type(e), str(e)), text_color=C["error"],
            )
            self.strength_bar.set(0)
            self.strength_bar.configure(progress_color=C["text_muted"])
            self.strength_label.configure(text="", text_color=C["text_muted"])
            return

        self.generated_password = password
        self.output_label.configure(text=password, text_color=C["success"])

        self.result = evaluate(password)
        self._show_strength(self.result, grown=len(password) > request.length)

    def _show_strength(self, result: EvaluationResult, grown: bool = False):
        color = get_strength_color(result.level)
        self.strength_bar.set(get_strength_progress(result.level))
        self.strength_bar.configure(progress_color=color)

        text = f"{get_strength_label(result.level)}  •  {result.entropy_bits:.1f} bits"
        if grown:
            text += "  •  lengthened to fit one of each type"
        self.strength_label.configure(text=text, text_color=color)

    def copy(self):
        """Copy the current password, if there is one."""
        if not self.generated_password:
            return
        C = get_colors()
        self.on_copy(self.generated_password)
        if self.on_copied:
            self.on_copied(self.generated_password, self.result)
        flash_button(self.copy_btn, "✓ Copied", C["success"], "Copy", C["accent"])
