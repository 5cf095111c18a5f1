"""
theme.py - Centralized theme system with dark/light mode support.

All colors, fonts, and styling constants live here so every screen
stays visually consistent. The toggle_mode() function swaps everything
at once.

This is also the only place strength levels get a name and a color. The
engine just hands back a StrengthLevel.
"""

from engine.strength import StrengthLevel

# Current mode: "dark" or "light"
_current_mode = "dark"

DARK = {
    # Backgrounds
    "bg_primary": "#0f1117",
    "bg_card": "#1c2333",
    "bg_input": "#232b3e",
    "bg_sidebar": "#0d1117",
    "bg_hover": "#2a3346",

    # Accent
    "accent": "#4f8ff7",
    "accent_hover": "#3a7ae0",

    # Status
    "success": "#3fb950",
    "error": "#f85149",

    # Text
    "text_primary": "#e6edf3",
    "text_secondary": "#8b949e",
    "text_muted": "#484f58",

    # Borders
    "border": "#30363d",
    "border_subtle": "#21262d",

    # Strength meter
    "strength_weak": "#f85149",
    "strength_medium": "#d29922",
    "strength_strong": "#3fb950",
    "strength_very_strong": "#56d364",

    # Special
    "sidebar_active": "#1e3a5f",
    "copy_btn": "#238636",
    "copy_btn_hover": "#2ea043",
    "delete_btn": "#da3633",
    "delete_btn_hover": "#f85149",
}

LIGHT = {
    # Backgrounds
    "bg_primary": "#ffffff",
    "bg_card": "#ffffff",
    "bg_input": "#f6f8fa",
    "bg_sidebar": "#f0f2f5",
    "bg_hover": "#eaeef2",

    # Accent
    "accent": "#0969da",
    "accent_hover": "#0550ae",

    # Status
    "success": "#1a7f37",
    "error": "#cf222e",

    # Text
    "text_primary": "#1f2328",
    "text_secondary": "#656d76",
    "text_muted": "#8c959f",

    # Borders
    "border": "#d0d7de",
    "border_subtle": "#e1e4e8",

    # Strength meter
    "strength_weak": "#cf222e",
    "strength_medium": "#9a6700",
    "strength_strong": "#1a7f37",
    "strength_very_strong": "#116329",

    # Special
    "sidebar_active": "#ddf4ff",
    "copy_btn": "#1a7f37",
    "copy_btn_hover": "#116329",
    "delete_btn": "#cf222e",
    "delete_btn_hover": "#a40e26",
}

STRENGTH_LABELS = {
    StrengthLevel.EMPTY: "",
    StrengthLevel.WEAK: "Weak",
    StrengthLevel.MEDIUM: "Medium",
    StrengthLevel.STRONG: "Strong",
    StrengthLevel.VERY_STRONG: "Very Strong",
}

# How full the strength bar is for each level
STRENGTH_PROGRESS = {
    StrengthLevel.EMPTY: 0.0,
    StrengthLevel.WEAK: 0.25,
    StrengthLevel.MEDIUM: 0.5,
    StrengthLevel.STRONG: 0.75,
    StrengthLevel.VERY_STRONG: 1.0,
}


def get_colors() -> dict:
    """Get the current theme's color palette."""
    return DARK if _current_mode == "dark" else LIGHT


def get_mode() -> str:
    """Get the current theme mode."""
    return _current_mode


def set_mode(mode: str):
    """Set the theme mode ('dark' or 'light')."""
    global _current_mode
    if mode not in ("dark", "light"):
        raise ValueError(f"Unknown theme mode: {mode!r}")
    _current_mode = mode


def toggle_mode() -> str:
    """Toggle between dark and light mode. Returns the new mode."""
    global _current_mode
    _current_mode = "light" if _current_mode == "dark" else "dark"
    return _current_mode


def get_strength_color(level: StrengthLevel) -> str:
    """Get the color for a strength level."""
    colors = get_colors()
    mapping = {
        StrengthLevel.WEAK: colors["strength_weak"],
        StrengthLevel.MEDIUM: colors["strength_medium"],
        StrengthLevel.STRONG: colors["strength_strong"],
        StrengthLevel.VERY_STRONG: colors["strength_very_strong"],
    }
    return mapping.get(level, colors["text_muted"])


def get_strength_label(level: StrengthLevel) -> str:
    return STRENGTH_LABELS[level]


def get_strength_progress(level: StrengthLevel) -> float:
    return STRENGTH_PROGRESS[level]
