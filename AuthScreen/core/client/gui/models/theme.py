"""
Theme definitions - sv_ttk handles actual widget styling.
These are only for colors ttk does not theme.
"""
from dataclasses import dataclass


@dataclass
class Theme:
    """Colors for status text; sv_ttk provides everything else."""

    success_fg: str = "#0f9d58"
    error_fg: str = "#d93025"
    title_font: tuple = ("Segoe UI", 28, "bold")
    subtitle_font: tuple = ("Segoe UI", 13)


class WinUI3Styles:
    """Spacing constants."""

    SPACE_8 = 8
    SPACE_16 = 16
    SPACE_24 = 24
    SPACE_64 = 64
