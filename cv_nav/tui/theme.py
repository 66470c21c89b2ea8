"""Visual configuration handed to the renderer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.style import Style

if TYPE_CHECKING:
    from ..settings import Settings


# ═══════════════════════════════════════════════════════════════════════════════
# BRAND STYLING
# ═══════════════════════════════════════════════════════════════════════════════

ACCENT = "#ee6ff8"          # Selected row, pointer bar
TITLE_FG = "#fffdf5"
TITLE_BG = "#5f5fd7"        # Title bar background
DIM = "#777777"             # Descriptions, help line


@dataclass(frozen=True)
class Theme:
    """Colours used by one renderer instance.

    Built from settings at startup; tests construct their own.
    """

    accent: str = ACCENT
    title_fg: str = TITLE_FG
    title_bg: str = TITLE_BG
    dim: str = DIM

    @property
    def title(self) -> Style:
        return Style(color=self.title_fg, bgcolor=self.title_bg, bold=True)

    @property
    def selected_label(self) -> Style:
        return Style(color=self.accent, bold=True)

    @property
    def selected_description(self) -> Style:
        return Style(color=self.accent)

    @property
    def label(self) -> Style:
        return Style()

    @property
    def description(self) -> Style:
        return Style(color=self.dim)

    @property
    def detail_title(self) -> Style:
        return Style(bold=True, underline=True)

    @property
    def hint(self) -> Style:
        return Style(color=self.dim)

    @classmethod
    def from_settings(cls, settings: Settings) -> Theme:
        return cls(
            accent=settings.CV_NAV_ACCENT,
            title_fg=settings.CV_NAV_TITLE_FG,
            title_bg=settings.CV_NAV_TITLE_BG,
            dim=settings.CV_NAV_DIM,
        )
