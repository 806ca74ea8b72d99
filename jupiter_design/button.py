"""Button pattern composed from action, interaction and focus patterns."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from itertools import groupby
from typing import Optional

from .actions import ActionContext, ActionHierarchy, ActionIntent, ActionSemantics
from .color import ColorProvider
from .focus import FocusBehavior, FocusManagement
from .interactions import InteractiveElement


@dataclass(frozen=True)
class ButtonSemanticInfo:
    """What a button pattern means, independent of its styling."""

    action_intent: ActionIntent
    is_primary: bool
    is_destructive: bool
    is_disabled: bool
    is_loading: bool
    is_selected: bool


@dataclass(frozen=True)
class ButtonPattern:
    """Immutable builder for the full styling and semantics of a button."""

    color_provider: ColorProvider
    is_disabled: bool = False
    is_loading: bool = False
    is_selected: bool = False
    action_semantics: Optional[ActionSemantics] = None
    interactive_element: Optional[InteractiveElement] = None
    focus_management: Optional[FocusManagement] = None
    custom_classes: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        cp = self.color_provider
        if self.action_semantics is None:
            object.__setattr__(
                self,
                "action_semantics",
                ActionSemantics(cp).secondary().with_context(ActionContext.STANDALONE),
            )
        if self.interactive_element is None:
            object.__setattr__(
                self,
                "interactive_element",
                InteractiveElement(cp)
                .hoverable()
                .focusable()
                .pressable()
                .standard_interaction(),
            )
        if self.focus_management is None:
            object.__setattr__(self, "focus_management", FocusManagement(cp).button())

    # Action semantics

    def _action(self, action: ActionSemantics) -> "ButtonPattern":
        return replace(self, action_semantics=action)

    def primary_action(self) -> "ButtonPattern":
        return self._action(self.action_semantics.primary())

    def secondary_action(self) -> "ButtonPattern":
        return self._action(self.action_semantics.secondary())

    def destructive_action(self) -> "ButtonPattern":
        return self._action(self.action_semantics.destructive())

    def navigation_action(self) -> "ButtonPattern":
        return self._action(self.action_semantics.navigation())

    def hero_prominence(self) -> "ButtonPattern":
        return self._action(self.action_semantics.with_hierarchy(ActionHierarchy.HERO))

    def primary_prominence(self) -> "ButtonPattern":
        return self._action(self.action_semantics.with_hierarchy(ActionHierarchy.PRIMARY))

    def standard_prominence(self) -> "ButtonPattern":
        return self._action(self.action_semantics.with_hierarchy(ActionHierarchy.SECONDARY))

    def tertiary_prominence(self) -> "ButtonPattern":
        return self._action(self.action_semantics.with_hierarchy(ActionHierarchy.TERTIARY))

    def inline_context(self) -> "ButtonPattern":
        return self._action(self.action_semantics.with_context(ActionContext.INLINE))

    def form_context(self) -> "ButtonPattern":
        return self._action(self.action_semantics.with_context(ActionContext.FORM))

    def toolbar_context(self) -> "ButtonPattern":
        return self._action(self.action_semantics.with_context(ActionContext.TOOLBAR))

    # Interactive behaviour

    def _interactive(self, element: InteractiveElement) -> "ButtonPattern":
        return replace(self, interactive_element=element)

    def gentle_interaction(self) -> "ButtonPattern":
        return self._interactive(self.interactive_element.gentle_interaction())

    def standard_interaction(self) -> "ButtonPattern":
        return self._interactive(self.interactive_element.standard_interaction())

    def prominent_interaction(self) -> "ButtonPattern":
        return self._interactive(self.interactive_element.prominent_interaction())

    def custom_interaction(self, classes: str) -> "ButtonPattern":
        return self._interactive(self.interactive_element.custom(classes))

    # Focus management

    def _focus(self, focus: FocusManagement) -> "ButtonPattern":
        return replace(self, focus_management=focus)

    def menu_item_focus(self) -> "ButtonPattern":
        return self._focus(self.focus_management.menu_item())

    def link_focus(self) -> "ButtonPattern":
        return self._focus(self.focus_management.link())

    def toggle_focus(self) -> "ButtonPattern":
        return self._focus(self.focus_management.toggle())

    def subtle_focus(self) -> "ButtonPattern":
        return self._focus(self.focus_management.with_focus_behavior(FocusBehavior.SUBTLE))

    def prominent_focus(self) -> "ButtonPattern":
        return self._focus(self.focus_management.with_focus_behavior(FocusBehavior.PROMINENT))

    # State

    def disabled(self, disabled: bool) -> "ButtonPattern":
        element = self.interactive_element.disabled() if disabled else self.interactive_element
        return replace(self, is_disabled=disabled, interactive_element=element)

    def loading(self, loading: bool) -> "ButtonPattern":
        element = self.interactive_element.loading() if loading else self.interactive_element
        return replace(self, is_loading=loading, interactive_element=element)

    def selected(self, selected: bool) -> "ButtonPattern":
        return replace(self, is_selected=selected)

    def hover(self) -> "ButtonPattern":
        return self._interactive(self.interactive_element.hover())

    def active(self) -> "ButtonPattern":
        return self._interactive(self.interactive_element.active())

    def focused(self) -> "ButtonPattern":
        return self._interactive(self.interactive_element.focused())

    # Overrides

    def custom(self, classes: str) -> "ButtonPattern":
        return replace(self, custom_classes=(*self.custom_classes, classes))

    def urgent(self) -> "ButtonPattern":
        return self._action(self.action_semantics.urgent())

    # Output

    def classes(self) -> str:
        """Build the complete class string, collapsing adjacent duplicates."""
        parts = [
            part
            for part in (
                self.action_semantics.classes(),
                self.interactive_element.classes(),
                self.focus_management.classes(),
            )
            if part
        ]
        if self.is_selected:
            parts.append("bg-opacity-80")
        parts.extend(self.custom_classes)
        words = " ".join(parts).split()
        return " ".join(word for word, _ in groupby(words))

    def accessibility_attributes(self) -> list[tuple[str, str]]:
        """Accessibility attributes as (name, value) pairs."""
        attrs = self.focus_management.data_attributes()
        if self.is_disabled:
            attrs.append(("aria-disabled", "true"))
        if self.is_loading:
            attrs.append(("aria-busy", "true"))
        if self.is_selected:
            attrs.append(("aria-pressed", "true"))
        return attrs

    def semantic_info(self) -> ButtonSemanticInfo:
        intent = self.action_semantics.intent
        return ButtonSemanticInfo(
            action_intent=intent,
            is_primary=intent is ActionIntent.PRIMARY,
            is_destructive=intent is ActionIntent.DESTRUCTIVE,
            is_disabled=self.is_disabled,
            is_loading=self.is_loading,
            is_selected=self.is_selected,
        )


def button_pattern(color_provider: ColorProvider) -> ButtonPattern:
    """Create a button pattern with default settings."""
    return ButtonPattern(color_provider)


def primary_button(color_provider: ColorProvider) -> ButtonPattern:
    return (
        ButtonPattern(color_provider)
        .primary_action()
        .primary_prominence()
        .standard_interaction()
    )


def secondary_button(color_provider: ColorProvider) -> ButtonPattern:
    return (
        ButtonPattern(color_provider)
        .secondary_action()
        .standard_prominence()
        .standard_interaction()
    )


def destructive_button(color_provider: ColorProvider) -> ButtonPattern:
    return (
        ButtonPattern(color_provider)
        .destructive_action()
        .standard_prominence()
        .standard_interaction()
    )


def hero_button(color_provider: ColorProvider) -> ButtonPattern:
    return (
        ButtonPattern(color_provider)
        .primary_action()
        .hero_prominence()
        .prominent_interaction()
        .prominent_focus()
    )


def navigation_button(color_provider: ColorProvider) -> ButtonPattern:
    return (
        ButtonPattern(color_provider)
        .navigation_action()
        .tertiary_prominence()
        .gentle_interaction()
        .menu_item_focus()
    )


def button_link(color_provider: ColorProvider) -> ButtonPattern:
    return (
        ButtonPattern(color_provider)
        .secondary_action()
        .inline_context()
        .gentle_interaction()
        .link_focus()
    )