"""Card pattern: containers with elevation, surface, spacing and interactivity."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from itertools import groupby
from typing import Optional

from .color import Color, ColorProvider
from .focus import FocusManagement
from .interactions import InteractiveElement


class CardElevation(Enum):
    """Visual elevation of a card."""

    FLAT = "Flat"
    SUBTLE = "Subtle"
    RAISED = "Raised"
    FLOATING = "Floating"
    MODAL = "Modal"


class CardSurface(Enum):
    """Visual treatment of a card's surface."""

    STANDARD = "Standard"
    ELEVATED = "Elevated"
    BRANDED = "Branded"
    GLASS = "Glass"
    DARK = "Dark"
    TRANSPARENT = "Transparent"


class CardSpacing(Enum):
    """Internal padding of a card."""

    NONE = "None"
    COMPACT = "Compact"
    STANDARD = "Standard"
    COMFORTABLE = "Comfortable"
    SPACIOUS = "Spacious"


class CardInteraction(Enum):
    """How a card responds to the user."""

    STATIC = "Static"
    HOVERABLE = "Hoverable"
    CLICKABLE = "Clickable"
    SELECTABLE = "Selectable"
    DRAGGABLE = "Draggable"


_ELEVATION_CLASSES = {
    CardElevation.FLAT: "shadow-none",
    CardElevation.SUBTLE: "shadow-sm",
    CardElevation.RAISED: "shadow-md",
    CardElevation.FLOATING: "shadow-lg",
    CardElevation.MODAL: "shadow-2xl",
}

_SPACING_CLASSES = {
    CardSpacing.NONE: "p-0",
    CardSpacing.COMPACT: "p-3",
    CardSpacing.STANDARD: "p-5",
    CardSpacing.COMFORTABLE: "p-6",
    CardSpacing.SPACIOUS: "p-8",
}

_HOVER_ELEVATION = {
    CardElevation.SUBTLE: "hover:shadow-md",
    CardElevation.RAISED: "hover:shadow-lg",
    CardElevation.FLOATING: "hover:shadow-xl",
}

_FIXED_SURFACES = {
    CardSurface.BRANDED: (
        "bg-gradient-to-br from-jupiter-navy-900/80 to-jupiter-blue-900/80 "
        "border-white/10 text-white"
    ),
    CardSurface.GLASS: "bg-white/10 backdrop-blur-md border-white/20 text-white",
    CardSurface.DARK: "bg-gray-900 border-gray-700 text-white",
    CardSurface.TRANSPARENT: "bg-transparent border-transparent",
}

_ROLES = {
    CardInteraction.CLICKABLE: "button",
    CardInteraction.SELECTABLE: "option",
}


@dataclass(frozen=True)
class CardSemanticInfo:
    """What a card pattern means, independent of its styling."""

    elevation: CardElevation
    surface: CardSurface
    spacing: CardSpacing
    interaction: CardInteraction
    is_selected: bool
    is_interactive: bool


@dataclass(frozen=True)
class CardPattern:
    """Immutable builder for the full styling and semantics of a card."""

    color_provider: ColorProvider
    elevation: CardElevation = CardElevation.SUBTLE
    surface: CardSurface = CardSurface.STANDARD
    spacing: CardSpacing = CardSpacing.STANDARD
    interaction: CardInteraction = CardInteraction.STATIC
    is_selected: bool = False
    interactive_element: Optional[InteractiveElement] = None
    focus_management: Optional[FocusManagement] = None
    custom_classes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.interactive_element is None:
            object.__setattr__(
                self, "interactive_element", InteractiveElement(self.color_provider)
            )
        if self.focus_management is None:
            object.__setattr__(self, "focus_management", FocusManagement(self.color_provider))

    # Elevation

    def flat_elevation(self) -> "CardPattern":
        return replace(self, elevation=CardElevation.FLAT)

    def subtle_elevation(self) -> "CardPattern":
        return replace(self, elevation=CardElevation.SUBTLE)

    def raised_elevation(self) -> "CardPattern":
        return replace(self, elevation=CardElevation.RAISED)

    def floating_elevation(self) -> "CardPattern":
        return replace(self, elevation=CardElevation.FLOATING)

    def modal_elevation(self) -> "CardPattern":
        return replace(self, elevation=CardElevation.MODAL)

    # Surface

    def standard_surface(self) -> "CardPattern":
        return replace(self, surface=CardSurface.STANDARD)

    def elevated_surface(self) -> "CardPattern":
        return replace(self, surface=CardSurface.ELEVATED)

    def branded_surface(self) -> "CardPattern":
        return replace(self, surface=CardSurface.BRANDED)

    def glass_surface(self) -> "CardPattern":
        return replace(self, surface=CardSurface.GLASS)

    def dark_surface(self) -> "CardPattern":
        return replace(self, surface=CardSurface.DARK)

    def transparent_surface(self) -> "CardPattern":
        return replace(self, surface=CardSurface.TRANSPARENT)

    # Spacing

    def no_spacing(self) -> "CardPattern":
        return replace(self, spacing=CardSpacing.NONE)

    def compact_spacing(self) -> "CardPattern":
        return replace(self, spacing=CardSpacing.COMPACT)

    def standard_spacing(self) -> "CardPattern":
        return replace(self, spacing=CardSpacing.STANDARD)

    def comfortable_spacing(self) -> "CardPattern":
        return replace(self, spacing=CardSpacing.COMFORTABLE)

    def spacious_spacing(self) -> "CardPattern":
        return replace(self, spacing=CardSpacing.SPACIOUS)

    # Interaction

    def static_interaction(self) -> "CardPattern":
        return replace(
            self,
            interaction=CardInteraction.STATIC,
            interactive_element=InteractiveElement(self.color_provider),
        )

    def hoverable_interaction(self) -> "CardPattern":
        element = InteractiveElement(self.color_provider).hoverable().gentle_interaction()
        return replace(
            self, interaction=CardInteraction.HOVERABLE, interactive_element=element
        )

    def clickable_interaction(self) -> "CardPattern":
        element = (
            InteractiveElement(self.color_provider)
            .hoverable()
            .focusable()
            .pressable()
            .standard_interaction()
        )
        return replace(
            self,
            interaction=CardInteraction.CLICKABLE,
            interactive_element=element,
            focus_management=self.focus_management.button(),
        )

    def selectable_interaction(self) -> "CardPattern":
        element = (
            InteractiveElement(self.color_provider)
            .hoverable()
            .focusable()
            .pressable()
            .gentle_interaction()
        )
        return replace(
            self,
            interaction=CardInteraction.SELECTABLE,
            interactive_element=element,
            focus_management=self.focus_management.toggle(),
        )

    def draggable_interaction(self) -> "CardPattern":
        element = (
            InteractiveElement(self.color_provider)
            .hoverable()
            .focusable()
            .standard_interaction()
        )
        return replace(
            self, interaction=CardInteraction.DRAGGABLE, interactive_element=element
        )

    # State

    def selected(self, selected: bool) -> "CardPattern":
        return replace(self, is_selected=selected)

    def hover(self) -> "CardPattern":
        return replace(self, interactive_element=self.interactive_element.hover())

    def active(self) -> "CardPattern":
        return replace(self, interactive_element=self.interactive_element.active())

    def focused(self) -> "CardPattern":
        return replace(self, interactive_element=self.interactive_element.focused())

    # Overrides

    def custom(self, classes: str) -> "CardPattern":
        return replace(self, custom_classes=(*self.custom_classes, classes))

    # Output

    def classes(self) -> str:
        """Build the complete class string, collapsing adjacent duplicates."""
        parts = [
            "rounded-lg border transition-all duration-300",
            _ELEVATION_CLASSES[self.elevation],
        ]
        surface = self._surface_classes()
        if surface:
            parts.append(surface)
        parts.append(_SPACING_CLASSES[self.spacing])

        interactive = self.interactive_element.classes()
        if interactive:
            parts.append(interactive)
        focus = self.focus_management.classes()
        if focus:
            parts.append(focus)

        if self.is_selected:
            ring = (
                self.color_provider.resolve_color(Color.PRIMARY)
                .replace("bg-", "")
                .replace("-500", "-300")
            )
            parts.append("ring-2 ring-offset-2")
            parts.append(f"ring-{ring}")

        if self.interaction in (CardInteraction.HOVERABLE, CardInteraction.CLICKABLE):
            hover = _HOVER_ELEVATION.get(self.elevation)
            if hover:
                parts.append(hover)

        parts.extend(self.custom_classes)
        words = " ".join(parts).split()
        return " ".join(word for word, _ in groupby(words))

    def _surface_classes(self) -> str:
        fixed = _FIXED_SURFACES.get(self.surface)
        if fixed is not None:
            return fixed
        cp = self.color_provider
        background = Color.SURFACE if self.surface is CardSurface.STANDARD else Color.BACKGROUND
        return (
            f"{cp.bg_class(background)} {cp.text_class(Color.TEXT_PRIMARY)} "
            f"{cp.border_class(Color.BORDER)}"
        )

    def accessibility_attributes(self) -> list[tuple[str, str]]:
        """Accessibility attributes as (name, value) pairs."""
        attrs = self.focus_management.data_attributes()
        if self.is_selected:
            attrs.append(("aria-selected", "true"))
        role = _ROLES.get(self.interaction)
        if role is not None:
            attrs.append(("role", role))
        return attrs

    def semantic_info(self) -> CardSemanticInfo:
        return CardSemanticInfo(
            elevation=self.elevation,
            surface=self.surface,
            spacing=self.spacing,
            interaction=self.interaction,
            is_selected=self.is_selected,
            is_interactive=self.interaction is not CardInteraction.STATIC,
        )


def card_pattern(color_provider: ColorProvider) -> CardPattern:
    """Create a card pattern with default settings."""
    return CardPattern(color_provider)


def content_card(color_provider: ColorProvider) -> CardPattern:
    return (
        CardPattern(color_provider)
        .standard_surface()
        .raised_elevation()
        .standard_spacing()
        .static_interaction()
    )


def interactive_card(color_provider: ColorProvider) -> CardPattern:
    return (
        CardPattern(color_provider)
        .elevated_surface()
        .floating_elevation()
        .clickable_interaction()
        .comfortable_spacing()
    )


def hero_card(color_provider: ColorProvider) -> CardPattern:
    return (
        CardPattern(color_provider)
        .branded_surface()
        .modal_elevation()
        .spacious_spacing()
        .hoverable_interaction()
    )


def glass_card(color_provider: ColorProvider) -> CardPattern:
    return (
        CardPattern(color_provider)
        .glass_surface()
        .floating_elevation()
        .hoverable_interaction()
        .standard_spacing()
    )


def minimal_card(color_provider: ColorProvider) -> CardPattern:
    return (
        CardPattern(color_provider)
        .standard_surface()
        .flat_elevation()
        .compact_spacing()
        .static_interaction()
    )