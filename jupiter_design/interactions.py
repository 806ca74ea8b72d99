"""Interaction states and effects for clickable elements."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .color import Color, ColorProvider


class InteractiveState(Enum):
    """Current state of an interactive element."""

    DEFAULT = "Default"
    HOVER = "Hover"
    ACTIVE = "Active"
    FOCUSED = "Focused"
    DISABLED = "Disabled"
    LOADING = "Loading"


class InteractionIntensity(Enum):
    """Strength of interaction effects."""

    GENTLE = "Gentle"
    STANDARD = "Standard"
    PROMINENT = "Prominent"


_HOVER_CLASSES = {
    InteractionIntensity.GENTLE: "hover:scale-101 hover:shadow-sm",
    InteractionIntensity.STANDARD: "hover:scale-105 hover:shadow-md",
    InteractionIntensity.PROMINENT: "hover:scale-110 hover:shadow-lg",
}

_ACTIVE_CLASSES = {
    InteractionIntensity.GENTLE: "active:scale-100",
    InteractionIntensity.STANDARD: "active:scale-95",
    InteractionIntensity.PROMINENT: "active:scale-95",
}


@dataclass(frozen=True)
class InteractiveElement:
    """Immutable builder for hover, press and focus effects."""

    color_provider: ColorProvider
    state: InteractiveState = InteractiveState.DEFAULT
    is_hoverable: bool = False
    is_focusable: bool = False
    is_pressable: bool = False
    interaction_intensity: InteractionIntensity = InteractionIntensity.STANDARD
    custom_classes: tuple[str, ...] = ()

    def hoverable(self) -> "InteractiveElement":
        return replace(self, is_hoverable=True)

    def focusable(self) -> "InteractiveElement":
        return replace(self, is_focusable=True)

    def pressable(self) -> "InteractiveElement":
        return replace(self, is_pressable=True)

    def gentle_interaction(self) -> "InteractiveElement":
        return replace(self, interaction_intensity=InteractionIntensity.GENTLE)

    def standard_interaction(self) -> "InteractiveElement":
        return replace(self, interaction_intensity=InteractionIntensity.STANDARD)

    def prominent_interaction(self) -> "InteractiveElement":
        return replace(self, interaction_intensity=InteractionIntensity.PROMINENT)

    def with_state(self, state: InteractiveState | str) -> "InteractiveElement":
        return replace(self, state=InteractiveState(state))

    def custom(self, class_name: str) -> "InteractiveElement":
        return replace(self, custom_classes=(*self.custom_classes, class_name))

    def hover(self) -> "InteractiveElement":
        return replace(self, state=InteractiveState.HOVER)

    def active(self) -> "InteractiveElement":
        return replace(self, state=InteractiveState.ACTIVE)

    def focused(self) -> "InteractiveElement":
        return replace(self, state=InteractiveState.FOCUSED)

    def disabled(self) -> "InteractiveElement":
        return replace(self, state=InteractiveState.DISABLED)

    def loading(self) -> "InteractiveElement":
        return replace(self, state=InteractiveState.LOADING)

    def _ring_color(self) -> str:
        return (
            self.color_provider.resolve_color(Color.PRIMARY)
            .replace("bg-", "")
            .replace("-500", "-300")
        )

    def classes(self) -> str:
        """Build the interactive classes."""
        parts: list[str] = []
        state = self.state
        is_disabled = state is InteractiveState.DISABLED

        if self.is_hoverable or self.is_focusable or self.is_pressable:
            parts.append("transition-all duration-200 ease-in-out")

        if is_disabled:
            parts.append("cursor-not-allowed")
        elif state is InteractiveState.LOADING:
            parts.append("cursor-wait")
        elif self.is_hoverable or self.is_pressable:
            parts.append("cursor-pointer")

        if self.is_hoverable and not is_disabled:
            parts.append(_HOVER_CLASSES[self.interaction_intensity])
        if self.is_pressable and not is_disabled:
            parts.append(_ACTIVE_CLASSES[self.interaction_intensity])

        if self.is_focusable:
            parts.append("focus:outline-none focus:ring-2 focus:ring-offset-2")
            parts.append(f"focus:ring-{self._ring_color()}")

        if state is InteractiveState.FOCUSED and self.is_focusable:
            parts.append("ring-2 ring-offset-2")
            parts.append(f"ring-{self._ring_color()}")
        elif is_disabled:
            parts.append("opacity-50 pointer-events-none")
        elif state is InteractiveState.LOADING:
            parts.append("opacity-75")

        parts.extend(self.custom_classes)
        return " ".join(parts)


def interactive_element(color_provider: ColorProvider) -> InteractiveElement:
    """Create an interactive element with no effects enabled."""
    return InteractiveElement(color_provider)