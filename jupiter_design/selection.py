"""Selection patterns: filters, toggles, single and multiple selection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .color import Color, ColorProvider


class SelectionBehavior(Enum):
    """How items can be selected."""

    NONE = "None"
    SINGLE = "Single"
    MULTIPLE = "Multiple"
    TOGGLE = "Toggle"


class SelectionState(Enum):
    """Selection state of a single item."""

    UNSELECTED = "Unselected"
    SELECTED = "Selected"
    PARTIALLY_SELECTED = "PartiallySelected"
    DISABLED = "Disabled"


class SelectionDisplay(Enum):
    """Visual presentation of selection items."""

    BUTTON = "Button"
    CHIP = "Chip"
    LIST_ITEM = "ListItem"
    CARD = "Card"
    TAB = "Tab"


class SelectionLayout(Enum):
    """How a group of selection items is arranged."""

    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"
    GRID = "Grid"
    DROPDOWN = "Dropdown"
    INLINE = "Inline"


class SelectionSize(Enum):
    """Dimensions of selection items."""

    XS = "XS"
    SM = "SM"
    MD = "MD"
    LG = "LG"
    XL = "XL"


class SelectionInteraction(Enum):
    """Strength of selection interaction effects."""

    SUBTLE = "Subtle"
    STANDARD = "Standard"
    PROMINENT = "Prominent"


_LAYOUT_CLASSES = {
    SelectionLayout.HORIZONTAL: "flex flex-row gap-2 items-center",
    SelectionLayout.VERTICAL: "flex flex-col gap-2",
    SelectionLayout.GRID: "grid grid-cols-auto gap-2",
    SelectionLayout.DROPDOWN: "relative",
    SelectionLayout.INLINE: "flex flex-wrap gap-2 items-center",
}

_GAP_CLASSES = {
    SelectionSize.XS: "gap-1",
    SelectionSize.SM: "gap-1.5",
    SelectionSize.MD: "gap-2",
    SelectionSize.LG: "gap-3",
    SelectionSize.XL: "gap-4",
}

_DISPLAY_CLASSES = {
    SelectionDisplay.BUTTON: (
        "inline-flex items-center justify-center font-medium rounded-md "
        "transition-all duration-200"
    ),
    SelectionDisplay.CHIP: "inline-flex items-center rounded-full transition-all duration-200",
    SelectionDisplay.LIST_ITEM: (
        "flex items-center w-full px-3 py-2 transition-all duration-200"
    ),
    SelectionDisplay.CARD: (
        "flex flex-col items-center p-4 rounded-lg border transition-all duration-200"
    ),
    SelectionDisplay.TAB: "flex items-center px-4 py-2 border-b-2 transition-all duration-200",
}

_SIZE_CLASSES = {
    (SelectionDisplay.BUTTON, SelectionSize.XS): "px-2 py-1 text-xs",
    (SelectionDisplay.BUTTON, SelectionSize.SM): "px-3 py-1.5 text-sm",
    (SelectionDisplay.BUTTON, SelectionSize.MD): "px-4 py-2 text-base",
    (SelectionDisplay.BUTTON, SelectionSize.LG): "px-6 py-3 text-lg",
    (SelectionDisplay.BUTTON, SelectionSize.XL): "px-8 py-4 text-xl",
    (SelectionDisplay.CHIP, SelectionSize.XS): "px-2 py-0.5 text-xs",
    (SelectionDisplay.CHIP, SelectionSize.SM): "px-3 py-1 text-sm",
    (SelectionDisplay.CHIP, SelectionSize.MD): "px-3 py-1.5 text-base",
    (SelectionDisplay.CHIP, SelectionSize.LG): "px-4 py-2 text-lg",
    (SelectionDisplay.CHIP, SelectionSize.XL): "px-6 py-3 text-xl",
}

_FALLBACK_SIZE_CLASSES = "px-4 py-2 text-base"


def _sorted_unique(parts: list[str]) -> str:
    return " ".join(sorted(set(" ".join(parts).split())))


@dataclass(frozen=True)
class SelectionSemanticInfo:
    """What a selection pattern means, independent of its styling."""

    behavior: SelectionBehavior
    state: SelectionState
    display: SelectionDisplay
    layout: SelectionLayout
    size: SelectionSize
    interaction: SelectionInteraction
    allows_multiple: bool
    is_interactive: bool
    has_counts: bool
    has_clear_all: bool


@dataclass(frozen=True)
class SelectionPattern:
    """Immutable builder for selection groups and their items."""

    color_provider: ColorProvider
    behavior: SelectionBehavior = SelectionBehavior.SINGLE
    state: SelectionState = SelectionState.UNSELECTED
    display: SelectionDisplay = SelectionDisplay.BUTTON
    layout: SelectionLayout = SelectionLayout.HORIZONTAL
    size: SelectionSize = SelectionSize.MD
    interaction: SelectionInteraction = SelectionInteraction.STANDARD
    show_counts: bool = False
    show_clear_all: bool = False
    custom_classes: tuple[str, ...] = ()

    # Behaviour

    def no_selection(self) -> "SelectionPattern":
        return replace(self, behavior=SelectionBehavior.NONE)

    def single_selection(self) -> "SelectionPattern":
        return replace(self, behavior=SelectionBehavior.SINGLE)

    def multiple_selection(self) -> "SelectionPattern":
        return replace(self, behavior=SelectionBehavior.MULTIPLE)

    def toggle_selection(self) -> "SelectionPattern":
        return replace(self, behavior=SelectionBehavior.TOGGLE)

    # State

    def unselected(self) -> "SelectionPattern":
        return replace(self, state=SelectionState.UNSELECTED)

    def selected(self) -> "SelectionPattern":
        return replace(self, state=SelectionState.SELECTED)

    def partially_selected(self) -> "SelectionPattern":
        return replace(self, state=SelectionState.PARTIALLY_SELECTED)

    def disabled(self) -> "SelectionPattern":
        return replace(self, state=SelectionState.DISABLED)

    # Display

    def button_display(self) -> "SelectionPattern":
        return replace(self, display=SelectionDisplay.BUTTON)

    def chip_display(self) -> "SelectionPattern":
        return replace(self, display=SelectionDisplay.CHIP)

    def list_item_display(self) -> "SelectionPattern":
        return replace(self, display=SelectionDisplay.LIST_ITEM)

    def card_display(self) -> "SelectionPattern":
        return replace(self, display=SelectionDisplay.CARD)

    def tab_display(self) -> "SelectionPattern":
        return replace(self, display=SelectionDisplay.TAB)

    # Layout

    def horizontal_layout(self) -> "SelectionPattern":
        return replace(self, layout=SelectionLayout.HORIZONTAL)

    def vertical_layout(self) -> "SelectionPattern":
        return replace(self, layout=SelectionLayout.VERTICAL)

    def grid_layout(self) -> "SelectionPattern":
        return replace(self, layout=SelectionLayout.GRID)

    def dropdown_layout(self) -> "SelectionPattern":
        return replace(self, layout=SelectionLayout.DROPDOWN)

    def inline_layout(self) -> "SelectionPattern":
        return replace(self, layout=SelectionLayout.INLINE)

    # Size

    def xs(self) -> "SelectionPattern":
        return replace(self, size=SelectionSize.XS)

    def sm(self) -> "SelectionPattern":
        return replace(self, size=SelectionSize.SM)

    def md(self) -> "SelectionPattern":
        return replace(self, size=SelectionSize.MD)

    def lg(self) -> "SelectionPattern":
        return replace(self, size=SelectionSize.LG)

    def xl(self) -> "SelectionPattern":
        return replace(self, size=SelectionSize.XL)

    # Interaction

    def subtle_interaction(self) -> "SelectionPattern":
        return replace(self, interaction=SelectionInteraction.SUBTLE)

    def standard_interaction(self) -> "SelectionPattern":
        return replace(self, interaction=SelectionInteraction.STANDARD)

    def prominent_interaction(self) -> "SelectionPattern":
        return replace(self, interaction=SelectionInteraction.PROMINENT)

    # Features

    def with_counts(self, show_counts: bool) -> "SelectionPattern":
        return replace(self, show_counts=show_counts)

    def with_clear_all(self, show_clear_all: bool) -> "SelectionPattern":
        return replace(self, show_clear_all=show_clear_all)

    def custom(self, classes: str) -> "SelectionPattern":
        return replace(self, custom_classes=(*self.custom_classes, classes))

    # Output

    def container_classes(self) -> str:
        """Classes for the group container, sorted and without duplicates."""
        parts = [
            "selection-pattern",
            _LAYOUT_CLASSES[self.layout],
            _GAP_CLASSES[self.size],
            *self.custom_classes,
        ]
        return _sorted_unique(parts)

    def item_classes(self) -> str:
        """Classes for one selection item, sorted and without duplicates."""
        parts = [
            "selection-item",
            _DISPLAY_CLASSES[self.display],
            _SIZE_CLASSES.get((self.display, self.size), _FALLBACK_SIZE_CLASSES),
        ]
        for extra in (self._state_classes(), self._interaction_classes()):
            if extra:
                parts.append(extra)
        return _sorted_unique(parts)

    def count_classes(self) -> str:
        """Classes for the count badge, or an empty string when counts are off."""
        if not self.show_counts:
            return ""
        cp = self.color_provider
        if self.state is SelectionState.SELECTED:
            colours = f"{cp.bg_class(Color.PRIMARY)} {cp.text_class(Color.TEXT_INVERSE)}"
        else:
            colours = f"{cp.bg_class(Color.BACKGROUND)} {cp.text_class(Color.TEXT_SECONDARY)}"
        return f"ml-2 px-2 py-0.5 text-xs rounded-full {colours}"

    def semantic_info(self) -> SelectionSemanticInfo:
        return SelectionSemanticInfo(
            behavior=self.behavior,
            state=self.state,
            display=self.display,
            layout=self.layout,
            size=self.size,
            interaction=self.interaction,
            allows_multiple=self.behavior
            in (SelectionBehavior.MULTIPLE, SelectionBehavior.TOGGLE),
            is_interactive=self.behavior is not SelectionBehavior.NONE
            and self.state is not SelectionState.DISABLED,
            has_counts=self.show_counts,
            has_clear_all=self.show_clear_all,
        )

    def _state_classes(self) -> str:
        cp = self.color_provider
        state = self.state
        if state is SelectionState.UNSELECTED:
            bg, text, border = Color.SURFACE, Color.TEXT_PRIMARY, Color.BORDER
        elif state is SelectionState.SELECTED:
            bg, text, border = Color.PRIMARY, Color.TEXT_INVERSE, Color.PRIMARY
        elif state is SelectionState.PARTIALLY_SELECTED:
            bg, text, border = Color.BACKGROUND, Color.PRIMARY, Color.PRIMARY
        else:
            bg, text, border = (
                Color.INTERACTIVE_DISABLED,
                Color.TEXT_TERTIARY,
                Color.INTERACTIVE_DISABLED,
            )
        return f"{cp.bg_class(bg)} {cp.text_class(text)} {cp.border_class(border)}"

    def _interaction_classes(self) -> str:
        if self.state is SelectionState.DISABLED:
            return "cursor-not-allowed"
        cp = self.color_provider
        unselected = self.state is SelectionState.UNSELECTED
        parts = ["cursor-pointer"]
        if self.interaction is SelectionInteraction.SUBTLE:
            parts.append("hover:opacity-80")
        elif self.interaction is SelectionInteraction.STANDARD:
            if unselected:
                parts.append(
                    f"hover:{cp.bg_class(Color.BACKGROUND)} "
                    f"hover:{cp.border_class(Color.INTERACTIVE)}"
                )
            parts.append("hover:scale-105 active:scale-95")
        else:
            if unselected:
                parts.append(
                    f"hover:{cp.bg_class(Color.INTERACTIVE)} "
                    f"hover:{cp.text_class(Color.TEXT_INVERSE)}"
                )
            parts.append("hover:scale-110 active:scale-90 shadow-lg hover:shadow-xl")
        return " ".join(parts)


def filter_selection(color_provider: ColorProvider) -> SelectionPattern:
    """Single selection shown as buttons, with counts."""
    return (
        SelectionPattern(color_provider)
        .single_selection()
        .button_display()
        .horizontal_layout()
        .standard_interaction()
        .with_counts(True)
    )


def chip_selection(color_provider: ColorProvider) -> SelectionPattern:
    """Multiple selection shown as chips, with a clear-all option."""
    return (
        SelectionPattern(color_provider)
        .multiple_selection()
        .chip_display()
        .inline_layout()
        .subtle_interaction()
        .with_clear_all(True)
    )


def tab_selection(color_provider: ColorProvider) -> SelectionPattern:
    """Single selection shown as tabs."""
    return (
        SelectionPattern(color_provider)
        .single_selection()
        .tab_display()
        .horizontal_layout()
        .standard_interaction()
    )


def list_selection(color_provider: ColorProvider) -> SelectionPattern:
    """Multiple selection shown as list items, with counts."""
    return (
        SelectionPattern(color_provider)
        .multiple_selection()
        .list_item_display()
        .vertical_layout()
        .standard_interaction()
        .with_counts(True)
    )


def card_selection(color_provider: ColorProvider) -> SelectionPattern:
    """Single selection shown as cards in a grid."""
    return (
        SelectionPattern(color_provider)
        .single_selection()
        .card_display()
        .grid_layout()
        .prominent_interaction()
    )