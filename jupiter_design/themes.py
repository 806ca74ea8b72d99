"""Themes and the default Jupiter colour provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from .color import ColorPalette, ColorProvider


class Theme(ABC):
    """A named theme."""

    @abstractmethod
    def name(self) -> str:
        """Return the theme's name."""


class VibeColors(ColorProvider):
    """Colour provider backed by the Jupiter palette."""

    def __init__(self, palette: ColorPalette | None = None) -> None:
        self._palette = palette if palette is not None else ColorPalette()

    def palette(self) -> ColorPalette:
        return self._palette

    @classmethod
    def with_overrides(cls, overrides: Callable[[ColorPalette], None]) -> "VibeColors":
        """Start from the default palette and let ``overrides`` modify it in place."""
        palette = ColorPalette()
        overrides(palette)
        return cls(palette)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VibeColors):
            return NotImplemented
        return self._palette == other._palette

    def __hash__(self) -> int:
        return hash(tuple(self._palette.to_dict().values()))

    def __repr__(self) -> str:
        return f"VibeColors({self._palette!r})"


_THEME_DESCRIPTIONS = {
    "jupiter": "Jupiter Design System with vibrant psychedelic colors",
}


class VibeTheme(Theme):
    """The Jupiter theme."""

    def __init__(self, colors: VibeColors | None = None) -> None:
        self.colors = colors if colors is not None else VibeColors()

    def name(self) -> str:
        return "Jupiter"

    @staticmethod
    def available_themes() -> list[str]:
        return list(_THEME_DESCRIPTIONS)

    @staticmethod
    def theme_description(theme: str) -> str:
        return _THEME_DESCRIPTIONS.get(theme, "Unknown theme")


class DesignSystem:
    """Entry point marker for the design system."""