"""Layout patterns for card sections and other structural elements."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .color import Color, ColorProvider


class LayoutSpacing(Enum):
    """Internal spacing of a layout section."""

    NONE = "None"
    XS = "XS"
    SM = "SM"
    MD = "MD"
    LG = "LG"
    XL = "XL"
    XL2 = "XL2"


class LayoutDivider(Enum):
    """Which side carries a divider border."""

    NONE = "None"
    TOP = "Top"
    BOTTOM = "Bottom"
    LEFT = "Left"
    RIGHT = "Right"


class LayoutAlignment(Enum):
    """Alignment of items in a section."""

    START = "Start"
    CENTER = "Center"
    END = "End"
    BETWEEN = "Between"
    AROUND = "Around"
    EVENLY = "Evenly"


class LayoutDirection(Enum):
    """Flow direction of a section."""

    VERTICAL = "Vertical"
    HORIZONTAL = "Horizontal"


_DIVIDER_SIDES = {
    LayoutDivider.TOP: "border-t",
    LayoutDivider.BOTTOM: "border-b",
    LayoutDivider.LEFT: "border-l",
    LayoutDivider.RIGHT: "border-r",
}

_SPACING_CLASSES = {
    LayoutSpacing.NONE: "",
    LayoutSpacing.XS: "p-1",
    LayoutSpacing.SM: "p-2",
    LayoutSpacing.MD: "p-4",
    LayoutSpacing.LG: "p-6",
    LayoutSpacing.XL: "p-8",
    LayoutSpacing.XL2: "p-12",
}

_DIRECTION_CLASSES = {
    LayoutDirection.VERTICAL: "flex flex-col",
    LayoutDirection.HORIZONTAL: "flex flex-row",
}

_ALIGNMENT_CLASSES = {
    LayoutAlignment.START: "items-start justify-start",
    LayoutAlignment.CENTER: "items-center justify-center",
    LayoutAlignment.END: "items-end justify-end",
    LayoutAlignment.BETWEEN: "items-center justify-between",
    LayoutAlignment.AROUND: "items-center justify-around",
    LayoutAlignment.EVENLY: "items-center justify-evenly",
}


@dataclass(frozen=True)
class CardSectionLayout:
    """Immutable builder for card header, content and footer sections."""

    color_provider: ColorProvider
    divider_side: LayoutDivider = LayoutDivider.NONE
    spacing_size: LayoutSpacing = LayoutSpacing.MD
    alignment_mode: Optional[LayoutAlignment] = None
    flow_direction: Optional[LayoutDirection] = None
    custom_classes: tuple[str, ...] = ()

    def divider(self, divider: LayoutDivider | str) -> "CardSectionLayout":
        return replace(self, divider_side=LayoutDivider(divider))

    def spacing(self, spacing: LayoutSpacing | str) -> "CardSectionLayout":
        return replace(self, spacing_size=LayoutSpacing(spacing))

    def alignment(self, alignment: LayoutAlignment | str) -> "CardSectionLayout":
        return replace(self, alignment_mode=LayoutAlignment(alignment))

    def direction(self, direction: LayoutDirection | str) -> "CardSectionLayout":
        return replace(self, flow_direction=LayoutDirection(direction))

    def custom(self, classes: str) -> "CardSectionLayout":
        return replace(self, custom_classes=(*self.custom_classes, classes))

    def classes(self) -> str:
        """Build the classes, sorted and without duplicates."""
        parts: list[str] = []
        side = _DIVIDER_SIDES.get(self.divider_side)
        if side:
            parts.append(f"{side} {self.color_provider.border_class(Color.BORDER)}")
        spacing = _SPACING_CLASSES[self.spacing_size]
        if spacing:
            parts.append(spacing)
        if self.flow_direction is not None:
            parts.append(_DIRECTION_CLASSES[self.flow_direction])
        if self.alignment_mode is not None:
            parts.append(_ALIGNMENT_CLASSES[self.alignment_mode])
        parts.extend(self.custom_classes)
        return " ".join(sorted(set(" ".join(parts).split())))


def card_header_layout(color_provider: ColorProvider) -> CardSectionLayout:
    return (
        CardSectionLayout(color_provider)
        .divider(LayoutDivider.BOTTOM)
        .spacing(LayoutSpacing.MD)
    )


def card_content_layout(color_provider: ColorProvider) -> CardSectionLayout:
    return CardSectionLayout(color_provider).spacing(LayoutSpacing.MD).custom("space-y-4")


def card_footer_layout(color_provider: ColorProvider) -> CardSectionLayout:
    return (
        CardSectionLayout(color_provider)
        .divider(LayoutDivider.TOP)
        .spacing(LayoutSpacing.MD)
        .direction(LayoutDirection.HORIZONTAL)
        .alignment(LayoutAlignment.BETWEEN)
    )


@dataclass(frozen=True)
class LayoutBuilder:
    """Entry point for the various layout builders."""

    color_provider: ColorProvider

    def card_section(self) -> CardSectionLayout:
        return CardSectionLayout(self.color_provider)

    def card_header(self) -> CardSectionLayout:
        return card_header_layout(self.color_provider)

    def card_content(self) -> CardSectionLayout:
        return card_content_layout(self.color_provider)

    def card_footer(self) -> CardSectionLayout:
        return card_footer_layout(self.color_provider)


def layout(color_provider: ColorProvider) -> LayoutBuilder:
    """Create a layout builder."""
    return LayoutBuilder(color_provider)