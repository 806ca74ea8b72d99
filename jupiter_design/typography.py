"""Typography patterns: text hierarchy, sizing, weight, colour and overflow."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from .color import Color, ColorProvider


class TypographyHierarchy(Enum):
    """Semantic text levels."""

    TITLE = "Title"
    HEADING = "Heading"
    SUBHEADING = "Subheading"
    H4 = "H4"
    BODY = "Body"
    BODY_LARGE = "BodyLarge"
    BODY_SMALL = "BodySmall"
    CAPTION = "Caption"
    OVERLINE = "Overline"
    CODE = "Code"


class TypographySize(Enum):
    """Text size scale."""

    XS = "XS"
    SM = "SM"
    MD = "MD"
    LG = "LG"
    XL = "XL"
    XL2 = "XL2"
    XL3 = "XL3"
    XL4 = "XL4"


class TypographyWeight(Enum):
    """Font weight progression."""

    LIGHT = "Light"
    NORMAL = "Normal"
    MEDIUM = "Medium"
    SEMIBOLD = "Semibold"
    BOLD = "Bold"
    EXTRA_BOLD = "ExtraBold"


class TypographyColor(Enum):
    """Colour semantics for text."""

    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    ACCENT = "Accent"
    MUTED = "Muted"
    DISABLED = "Disabled"
    WHITE = "White"
    BLACK = "Black"
    SUCCESS = "Success"
    WARNING = "Warning"
    ERROR = "Error"
    INFO = "Info"
    AUTO = "Auto"


class TypographyAlignment(Enum):
    """Text alignment."""

    LEFT = "Left"
    CENTER = "Center"
    RIGHT = "Right"
    JUSTIFY = "Justify"


class TypographyOverflow(Enum):
    """Simple overflow behaviours; see :class:`LineClamp` for clamping."""

    NORMAL = "Normal"
    TRUNCATE = "Truncate"


@dataclass(frozen=True)
class LineClamp:
    """Overflow behaviour that clamps text to a number of lines."""

    lines: int

    def __post_init__(self) -> None:
        if isinstance(self.lines, bool) or not isinstance(self.lines, int):
            raise TypeError("line count must be an integer")
        if not 0 <= self.lines <= 0xFFFFFFFF:
            raise ValueError(f"line count out of range: {self.lines}")


Overflow = Union[TypographyOverflow, LineClamp]


class TypographyElement(Enum):
    """HTML element used for the text."""

    AUTO = "Auto"
    H1 = "H1"
    H2 = "H2"
    H3 = "H3"
    H4 = "H4"
    H5 = "H5"
    H6 = "H6"
    P = "P"
    SPAN = "Span"
    DIV = "Div"


# (always-present classes, default size class, default weight class)
_HIERARCHY_CLASSES: dict[TypographyHierarchy, tuple[tuple[str, ...], str, Optional[str]]] = {
    TypographyHierarchy.TITLE: (("tracking-tight",), "text-4xl", "font-bold"),
    TypographyHierarchy.HEADING: (("tracking-tight",), "text-3xl", "font-bold"),
    TypographyHierarchy.SUBHEADING: (("tracking-tight",), "text-2xl", "font-bold"),
    TypographyHierarchy.H4: (("tracking-tight",), "text-xl", "font-bold"),
    TypographyHierarchy.BODY: ((), "text-base", "font-normal"),
    TypographyHierarchy.BODY_LARGE: ((), "text-lg", "font-normal"),
    TypographyHierarchy.BODY_SMALL: ((), "text-sm", "font-normal"),
    TypographyHierarchy.CAPTION: ((), "text-sm", "font-medium"),
    TypographyHierarchy.OVERLINE: (("uppercase", "tracking-wider"), "text-xs", "font-medium"),
    TypographyHierarchy.CODE: (
        ("font-mono", "bg-gray-100", "px-1", "py-0.5", "rounded"),
        "text-sm",
        None,
    ),
}

_SIZE_CLASSES = {
    TypographySize.XS: "text-xs",
    TypographySize.SM: "text-sm",
    TypographySize.MD: "text-base",
    TypographySize.LG: "text-lg",
    TypographySize.XL: "text-xl",
    TypographySize.XL2: "text-2xl",
    TypographySize.XL3: "text-3xl",
    TypographySize.XL4: "text-4xl",
}

_WEIGHT_CLASSES = {
    TypographyWeight.LIGHT: "font-light",
    TypographyWeight.NORMAL: "font-normal",
    TypographyWeight.MEDIUM: "font-medium",
    TypographyWeight.SEMIBOLD: "font-semibold",
    TypographyWeight.BOLD: "font-bold",
    TypographyWeight.EXTRA_BOLD: "font-extrabold",
}

_EXPLICIT_COLORS = {
    TypographyColor.PRIMARY: Color.PRIMARY,
    TypographyColor.SECONDARY: Color.SECONDARY,
    TypographyColor.ACCENT: Color.ACCENT,
    TypographyColor.MUTED: Color.TEXT_SECONDARY,
    TypographyColor.DISABLED: Color.INTERACTIVE_DISABLED,
    TypographyColor.WHITE: Color.TEXT_INVERSE,
    TypographyColor.BLACK: Color.FOREGROUND,
    TypographyColor.SUCCESS: Color.SUCCESS,
    TypographyColor.WARNING: Color.WARNING,
    TypographyColor.ERROR: Color.ERROR,
    TypographyColor.INFO: Color.INFO,
}

_AUTO_COLORS = {
    TypographyHierarchy.CAPTION: Color.TEXT_SECONDARY,
    TypographyHierarchy.OVERLINE: Color.TEXT_TERTIARY,
}

_ALIGNMENT_CLASSES = {
    TypographyAlignment.LEFT: "text-left",
    TypographyAlignment.CENTER: "text-center",
    TypographyAlignment.RIGHT: "text-right",
    TypographyAlignment.JUSTIFY: "text-justify",
}

_AUTO_ELEMENTS = {
    TypographyHierarchy.TITLE: "h1",
    TypographyHierarchy.HEADING: "h2",
    TypographyHierarchy.SUBHEADING: "h3",
    TypographyHierarchy.H4: "h4",
    TypographyHierarchy.CAPTION: "span",
    TypographyHierarchy.OVERLINE: "span",
    TypographyHierarchy.CODE: "code",
}

_ELEMENT_TAGS = {
    TypographyElement.H1: "h1",
    TypographyElement.H2: "h2",
    TypographyElement.H3: "h3",
    TypographyElement.H4: "h4",
    TypographyElement.H5: "h5",
    TypographyElement.H6: "h6",
    TypographyElement.P: "p",
    TypographyElement.SPAN: "span",
    TypographyElement.DIV: "div",
}


def _coerce_overflow(overflow: Overflow | str) -> Overflow:
    if isinstance(overflow, LineClamp):
        return overflow
    return TypographyOverflow(overflow)


@dataclass(frozen=True)
class TypographyPattern:
    """Immutable builder for text styling."""

    color_provider: ColorProvider
    hierarchy: TypographyHierarchy = TypographyHierarchy.BODY
    size: Optional[TypographySize] = None
    weight: Optional[TypographyWeight] = None
    color: TypographyColor = TypographyColor.AUTO
    alignment: Optional[TypographyAlignment] = None
    overflow: Overflow = TypographyOverflow.NORMAL
    element: TypographyElement = TypographyElement.AUTO

    def with_hierarchy(self, hierarchy: TypographyHierarchy | str) -> "TypographyPattern":
        return replace(self, hierarchy=TypographyHierarchy(hierarchy))

    def with_size(self, size: TypographySize | str) -> "TypographyPattern":
        """Override the hierarchy's default size."""
        return replace(self, size=TypographySize(size))

    def with_weight(self, weight: TypographyWeight | str) -> "TypographyPattern":
        """Override the hierarchy's default weight."""
        return replace(self, weight=TypographyWeight(weight))

    def with_color(self, color: TypographyColor | str) -> "TypographyPattern":
        return replace(self, color=TypographyColor(color))

    def with_alignment(self, alignment: TypographyAlignment | str) -> "TypographyPattern":
        return replace(self, alignment=TypographyAlignment(alignment))

    def with_overflow(self, overflow: Overflow | str) -> "TypographyPattern":
        return replace(self, overflow=_coerce_overflow(overflow))

    def with_element(self, element: TypographyElement | str) -> "TypographyPattern":
        return replace(self, element=TypographyElement(element))

    def classes(self) -> str:
        """Build the classes, sorted and without duplicates."""
        words = ["leading-relaxed", *self._hierarchy_classes()]
        if self.size is not None:
            words.append(_SIZE_CLASSES[self.size])
        if self.weight is not None:
            words.append(_WEIGHT_CLASSES[self.weight])
        words.append(self._color_class())
        if self.alignment is not None:
            words.append(_ALIGNMENT_CLASSES[self.alignment])
        if self.overflow is TypographyOverflow.TRUNCATE:
            words.append("truncate")
        return " ".join(sorted(set(" ".join(words).split())))

    def _hierarchy_classes(self) -> list[str]:
        fixed, default_size, default_weight = _HIERARCHY_CLASSES[self.hierarchy]
        parts = list(fixed)
        if self.size is None:
            parts.append(default_size)
        if self.weight is None and default_weight is not None:
            parts.append(default_weight)
        return parts

    def _color_class(self) -> str:
        if self.color is TypographyColor.AUTO:
            semantic = _AUTO_COLORS.get(self.hierarchy, Color.TEXT_PRIMARY)
        else:
            semantic = _EXPLICIT_COLORS[self.color]
        return self.color_provider.text_class(semantic)

    def get_element(self) -> str:
        """HTML tag name for this text."""
        if self.element is TypographyElement.AUTO:
            return _AUTO_ELEMENTS.get(self.hierarchy, "p")
        return _ELEMENT_TAGS[self.element]

    def get_clamp_style(self) -> str:
        """Inline CSS for line clamping, or an empty string when not clamped."""
        if isinstance(self.overflow, LineClamp):
            return (
                f"display: -webkit-box; -webkit-line-clamp: {self.overflow.lines}; "
                "-webkit-box-orient: vertical; overflow: hidden;"
            )
        return ""


def typography_pattern(color_provider: ColorProvider) -> TypographyPattern:
    """Create a body-text typography pattern."""
    return TypographyPattern(color_provider)


def title_typography(color_provider: ColorProvider) -> TypographyPattern:
    return TypographyPattern(color_provider).with_hierarchy(TypographyHierarchy.TITLE)


def heading_typography(color_provider: ColorProvider) -> TypographyPattern:
    return TypographyPattern(color_provider).with_hierarchy(TypographyHierarchy.HEADING)


def body_typography(color_provider: ColorProvider) -> TypographyPattern:
    return TypographyPattern(color_provider).with_hierarchy(TypographyHierarchy.BODY)


def caption_typography(color_provider: ColorProvider) -> TypographyPattern:
    return TypographyPattern(color_provider).with_hierarchy(TypographyHierarchy.CAPTION)


def code_typography(color_provider: ColorProvider) -> TypographyPattern:
    return TypographyPattern(color_provider).with_hierarchy(TypographyHierarchy.CODE)