"""Sizing, spacing and typography tokens with their provider interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Size(Enum):
    """Size tokens for consistent component sizing."""

    X_SMALL = "XSmall"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    X_LARGE = "XLarge"


class Breakpoint(Enum):
    """Breakpoint tokens for responsive design."""

    MOBILE = "Mobile"
    TABLET = "Tablet"
    DESKTOP = "Desktop"
    LARGE = "Large"


class Spacing(Enum):
    """Spacing tokens for consistent spacing."""

    NONE = "None"
    X_SMALL = "XSmall"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    X_LARGE = "XLarge"
    XX_LARGE = "XXLarge"


class Typography(Enum):
    """Typography tokens for consistent text styling."""

    HEADING1 = "Heading1"
    HEADING2 = "Heading2"
    HEADING3 = "Heading3"
    HEADING4 = "Heading4"
    HEADING5 = "Heading5"
    HEADING6 = "Heading6"
    BODY = "Body"
    BODY_SMALL = "BodySmall"
    CAPTION = "Caption"
    LABEL = "Label"


class FontWeight(Enum):
    """Font weight tokens."""

    LIGHT = "Light"
    NORMAL = "Normal"
    MEDIUM = "Medium"
    SEMI_BOLD = "SemiBold"
    BOLD = "Bold"


class FontFamily(Enum):
    """Font family tokens."""

    SANS = "Sans"
    SERIF = "Serif"
    MONO = "Mono"


_FONT_WEIGHT_CLASSES = {
    FontWeight.LIGHT: "font-light",
    FontWeight.NORMAL: "font-normal",
    FontWeight.MEDIUM: "font-medium",
    FontWeight.SEMI_BOLD: "font-semibold",
    FontWeight.BOLD: "font-bold",
}

_FONT_FAMILY_CLASSES = {
    FontFamily.SANS: "font-sans",
    FontFamily.SERIF: "font-serif",
    FontFamily.MONO: "font-mono",
}


class SizeProvider(ABC):
    """Source of size values."""

    @abstractmethod
    def resolve_size(self, size: Size) -> str:
        """Resolve a size token to its class value."""

    def width_class(self, size: Size) -> str:
        return f"w-{self.resolve_size(size)}"

    def height_class(self, size: Size) -> str:
        return f"h-{self.resolve_size(size)}"


class SpacingProvider(ABC):
    """Source of spacing values."""

    @abstractmethod
    def resolve_spacing(self, spacing: Spacing) -> str:
        """Resolve a spacing token to its class value."""

    def padding_class(self, spacing: Spacing) -> str:
        return f"p-{self.resolve_spacing(spacing)}"

    def margin_class(self, spacing: Spacing) -> str:
        return f"m-{self.resolve_spacing(spacing)}"


class TypographyProvider(ABC):
    """Source of typography values."""

    @abstractmethod
    def resolve_typography(self, typography: Typography) -> str:
        """Resolve a typography token to its class value."""

    def typography_class(self, typography: Typography) -> str:
        return f"text-{self.resolve_typography(typography)}"

    def font_weight_class(self, weight: FontWeight | str) -> str:
        return _FONT_WEIGHT_CLASSES[FontWeight(weight)]

    def font_family_class(self, family: FontFamily | str) -> str:
        return _FONT_FAMILY_CLASSES[FontFamily(family)]