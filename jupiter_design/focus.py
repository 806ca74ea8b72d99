"""Focus and accessibility patterns."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .color import Color, ColorProvider


class FocusBehavior(Enum):
    """How focus is shown."""

    STANDARD = "Standard"
    SUBTLE = "Subtle"
    PROMINENT = "Prominent"
    NONE = "None"
    CUSTOM = "Custom"


class KeyboardPattern(Enum):
    """Keyboard navigation patterns."""

    BUTTON = "Button"
    LINK = "Link"
    MENU_ITEM = "MenuItem"
    TAB = "Tab"
    TOGGLE = "Toggle"
    EXPANDABLE = "Expandable"


class ScreenReaderPattern(Enum):
    """Screen reader patterns."""

    BUTTON = "Button"
    LINK = "Link"
    MENU_ITEM = "MenuItem"
    TAB = "Tab"
    TOGGLE_BUTTON = "ToggleButton"
    EXPANDABLE = "Expandable"


_ROLES = {
    ScreenReaderPattern.BUTTON: "button",
    ScreenReaderPattern.LINK: "link",
    ScreenReaderPattern.MENU_ITEM: "menuitem",
    ScreenReaderPattern.TAB: "tab",
    ScreenReaderPattern.TOGGLE_BUTTON: "button",
    ScreenReaderPattern.EXPANDABLE: "button",
}


def _primary_ring(color_provider: ColorProvider) -> str:
    return color_provider.resolve_color(Color.PRIMARY).replace("bg-", "").replace("-500", "-300")


@dataclass(frozen=True)
class FocusManagement:
    """Immutable builder for focus styling and accessibility attributes."""

    color_provider: ColorProvider
    focus_behavior: FocusBehavior = FocusBehavior.STANDARD
    keyboard_pattern: Optional[KeyboardPattern] = None
    screen_reader_pattern: Optional[ScreenReaderPattern] = None
    is_focusable: bool = True
    tab_index: Optional[int] = None
    custom_classes: tuple[str, ...] = ()

    def with_focus_behavior(self, behavior: FocusBehavior | str) -> "FocusManagement":
        return replace(self, focus_behavior=FocusBehavior(behavior))

    def _with_patterns(
        self,
        keyboard: KeyboardPattern,
        reader: ScreenReaderPattern,
        behavior: FocusBehavior = FocusBehavior.STANDARD,
    ) -> "FocusManagement":
        return replace(
            self,
            keyboard_pattern=keyboard,
            screen_reader_pattern=reader,
            focus_behavior=behavior,
        )

    def button(self) -> "FocusManagement":
        return self._with_patterns(KeyboardPattern.BUTTON, ScreenReaderPattern.BUTTON)

    def link(self) -> "FocusManagement":
        return self._with_patterns(KeyboardPattern.LINK, ScreenReaderPattern.LINK)

    def menu_item(self) -> "FocusManagement":
        return self._with_patterns(
            KeyboardPattern.MENU_ITEM, ScreenReaderPattern.MENU_ITEM, FocusBehavior.SUBTLE
        )

    def tab(self) -> "FocusManagement":
        return self._with_patterns(KeyboardPattern.TAB, ScreenReaderPattern.TAB)

    def toggle(self) -> "FocusManagement":
        return self._with_patterns(KeyboardPattern.TOGGLE, ScreenReaderPattern.TOGGLE_BUTTON)

    def classes(self) -> str:
        """Build focus classes."""
        parts: list[str] = []
        if self.is_focusable:
            parts.append("focus:outline-none")
            ring = self._focus_ring()
            if ring:
                parts.append(ring)
        parts.extend(self.custom_classes)
        return " ".join(parts)

    def _focus_ring(self) -> str:
        behavior = self.focus_behavior
        if behavior is FocusBehavior.STANDARD:
            return f"focus:ring-2 focus:ring-offset-2 focus:ring-{_primary_ring(self.color_provider)}"
        if behavior is FocusBehavior.SUBTLE:
            border = self.color_provider.resolve_color(Color.BORDER).replace("border-", "")
            return f"focus:ring-1 focus:ring-offset-1 focus:ring-{border}"
        if behavior is FocusBehavior.PROMINENT:
            return f"focus:ring-4 focus:ring-offset-2 focus:ring-{_primary_ring(self.color_provider)}"
        if behavior is FocusBehavior.NONE:
            return "focus:ring-0"
        return ""

    def data_attributes(self) -> list[tuple[str, str]]:
        """Attributes for semantic markup, as (name, value) pairs."""
        attrs: list[tuple[str, str]] = []
        if self.tab_index is not None:
            attrs.append(("tabindex", str(self.tab_index)))
        elif self.is_focusable:
            attrs.append(("tabindex", "0"))

        pattern = self.screen_reader_pattern
        if pattern is not None:
            attrs.append(("role", _ROLES[pattern]))
        if pattern is ScreenReaderPattern.TOGGLE_BUTTON:
            attrs.append(("aria-pressed", "false"))
        elif pattern is ScreenReaderPattern.EXPANDABLE:
            attrs.append(("aria-expanded", "false"))
        return attrs


def focus_management(color_provider: ColorProvider) -> FocusManagement:
    """Create focus management with default settings."""
    return FocusManagement(color_provider)