"""
Mushaf TUI Theme Definitions.

Green and gold on paper, registered with Textual's theming system.
"""

from typing import Any

from textual.theme import Theme

# =============================================================================
# Mushaf Dark Theme (Default)
# =============================================================================

MUSHAF_DARK = Theme(
    name="mushaf-dark",
    primary="#2e7d4f",      # Green - header, badges
    secondary="#1a472a",    # Deep green
    accent="#c9a44c",       # Gold - focus ring
    foreground="#f4f1ea",   # Paper-white text
    background="#0f1f16",
    surface="#163222",      # Cards
    panel="#1a472a",
    boost="#214d33",
    success="#4EBF71",
    warning="#c9a44c",
    error="#ba3c5b",
    dark=True,
)

# =============================================================================
# Mushaf Light Theme
# =============================================================================

MUSHAF_LIGHT = Theme(
    name="mushaf-light",
    primary="#1a472a",      # Green
    secondary="#2d3436",    # Body text
    accent="#c9a44c",       # Gold
    foreground="#2d3436",
    background="#f4f1ea",   # Paper
    surface="#ffffff",      # Cards
    panel="#ebe6da",
    boost="#e3dccb",
    success="#1a472a",
    warning="#b38a2e",
    error="#b3261e",
    dark=False,
)

MUSHAF_THEMES: dict[str, Theme] = {
    "mushaf-dark": MUSHAF_DARK,
    "mushaf-light": MUSHAF_LIGHT,
}

THEME_PAIRS: dict[str, str] = {
    "mushaf-dark": "mushaf-light",
    "mushaf-light": "mushaf-dark",
}


def register_all_themes(app: Any) -> None:
    """Register the mushaf themes with a Textual app."""
    for theme in MUSHAF_THEMES.values():
        app.register_theme(theme)


def get_theme_names() -> list[str]:
    return list(MUSHAF_THEMES.keys())


def get_opposite_theme(theme_name: str) -> str:
    """Paired theme for the dark/light toggle, falling back to mushaf-dark."""
    return THEME_PAIRS.get(theme_name, "mushaf-dark")
