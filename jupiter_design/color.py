"""Semantic colour tokens, colour palettes and the colour provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Mapping


class Color(Enum):
    """Semantic colour tokens for consistent theming."""

    # Brand colours
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    ACCENT = "Accent"

    # Semantic colours
    SUCCESS = "Success"
    WARNING = "Warning"
    ERROR = "Error"
    INFO = "Info"

    # Neutral colours
    SURFACE = "Surface"
    BACKGROUND = "Background"
    FOREGROUND = "Foreground"
    BORDER = "Border"

    # Text colours
    TEXT_PRIMARY = "TextPrimary"
    TEXT_SECONDARY = "TextSecondary"
    TEXT_TERTIARY = "TextTertiary"
    TEXT_INVERSE = "TextInverse"

    # Interactive states
    INTERACTIVE = "Interactive"
    INTERACTIVE_HOVER = "InteractiveHover"
    INTERACTIVE_ACTIVE = "InteractiveActive"
    INTERACTIVE_DISABLED = "InteractiveDisabled"


@dataclass
class ColorPalette:
    """All colour values of a theme; the defaults are the Jupiter palette."""

    primary: str = "jupiter-blue-500"
    secondary: str = "jupiter-green-500"
    accent: str = "jupiter-orange-500"

    success: str = "green-500"
    warning: str = "amber-500"
    error: str = "red-500"
    info: str = "blue-500"

    surface: str = "white"
    background: str = "gray-50"
    foreground: str = "gray-900"
    border: str = "gray-200"

    text_primary: str = "gray-900"
    text_secondary: str = "gray-600"
    text_tertiary: str = "gray-400"
    text_inverse: str = "white"

    interactive: str = "jupiter-blue-500"
    interactive_hover: str = "jupiter-blue-600"
    interactive_active: str = "jupiter-blue-700"
    interactive_disabled: str = "gray-300"

    def to_dict(self) -> dict[str, str]:
        """Return the palette as a plain mapping of field name to value."""
        return asdict(self)


def palette_from_dict(data: Mapping[str, Any]) -> ColorPalette:
    """Build a palette from a mapping; every field must be present as a string."""
    names = [field.name for field in fields(ColorPalette)]
    missing = [name for name in names if name not in data]
    if missing:
        raise ValueError(f"missing palette fields: {', '.join(missing)}")
    values: dict[str, str] = {}
    for name in names:
        value = data[name]
        if not isinstance(value, str):
            raise TypeError(f"palette field {name!r} must be a string, got {type(value).__name__}")
        values[name] = value
    return ColorPalette(**values)


_FIELD_BY_COLOR: dict[Color, str] = {
    Color.PRIMARY: "primary",
    Color.SECONDARY: "secondary",
    Color.ACCENT: "accent",
    Color.SUCCESS: "success",
    Color.WARNING: "warning",
    Color.ERROR: "error",
    Color.INFO: "info",
    Color.SURFACE: "surface",
    Color.BACKGROUND: "background",
    Color.FOREGROUND: "foreground",
    Color.BORDER: "border",
    Color.TEXT_PRIMARY: "text_primary",
    Color.TEXT_SECONDARY: "text_secondary",
    Color.TEXT_TERTIARY: "text_tertiary",
    Color.TEXT_INVERSE: "text_inverse",
    Color.INTERACTIVE: "interactive",
    Color.INTERACTIVE_HOVER: "interactive_hover",
    Color.INTERACTIVE_ACTIVE: "interactive_active",
    Color.INTERACTIVE_DISABLED: "interactive_disabled",
}


class ColorProvider(ABC):
    """Source of colour values, turning semantic colours into Tailwind classes."""

    @abstractmethod
    def palette(self) -> ColorPalette:
        """Return the palette this provider draws from."""

    def resolve_color(self, color: Color | str) -> str:
        """Resolve a semantic colour to its palette value."""
        return getattr(self.palette(), _FIELD_BY_COLOR[Color(color)])

    def text_class(self, color: Color | str) -> str:
        """Tailwind class for text colour."""
        return f"text-{self.resolve_color(color)}"

    def bg_class(self, color: Color | str) -> str:
        """Tailwind class for background colour."""
        return f"bg-{self.resolve_color(color)}"

    def border_class(self, color: Color | str) -> str:
        """Tailwind class for border colour."""
        return f"border-{self.resolve_color(color)}"