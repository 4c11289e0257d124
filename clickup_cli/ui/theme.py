"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for the CLI - ClickUp purple with orange accents."""

    # Primary colors
    primary: str = "#7B68EE"      # ClickUp purple
    secondary: str = "#FF8C42"    # Orange
    tertiary: str = "#C77DFF"     # Light purple

    # Status colors
    success: str = "#00E676"
    error: str = "#FF5252"
    warning: str = "#FFB347"
    info: str = "#B388FF"

    # Text colors
    text: str = "#E8E8E8"
    muted: str = "#888888"
    highlight: str = "#FFFFFF"
    dim: str = "#555555"

    accent: str = "#00CED1"

    # ClickUp priority colors (1 = urgent ... 4 = low)
    urgent: str = "#F50000"
    high: str = "#FFCC00"
    normal: str = "#6FDDFF"
    low: str = "#D8D8D8"

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            "primary": Style(color=self.primary),
            "secondary": Style(color=self.secondary),
            "tertiary": Style(color=self.tertiary),
            "primary.bold": Style(color=self.primary, bold=True),

            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),
            "info": Style(color=self.info),

            "text": Style(color=self.text),
            "muted": Style(color=self.muted),
            "dim": Style(color=self.dim),
            "highlight": Style(color=self.highlight, bold=True),
            "accent": Style(color=self.accent),

            # Semantic styles
            "command": Style(color=self.primary, bold=True),
            "id": Style(color=self.accent),
            "name": Style(color=self.text, bold=True),
            "status": Style(color=self.secondary),
            "number": Style(color=self.warning),
            "user": Style(color=self.tertiary),
            "url": Style(color=self.accent, underline=True),

            "priority.urgent": Style(color=self.urgent, bold=True),
            "priority.high": Style(color=self.high),
            "priority.normal": Style(color=self.normal),
            "priority.low": Style(color=self.low),
        })


# Default theme instance
_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
