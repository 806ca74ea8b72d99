"""Action semantics: the intent, prominence and context of user actions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .color import Color, ColorProvider


class ActionIntent(Enum):
    """What an action means."""

    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    CONSTRUCTIVE = "Constructive"
    DESTRUCTIVE = "Destructive"
    NAVIGATION = "Navigation"
    INFORMATIONAL = "Informational"


class ActionHierarchy(Enum):
    """How prominent an action should be."""

    HERO = "Hero"
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    TERTIARY = "Tertiary"
    MINIMAL = "Minimal"


class ActionContext(Enum):
    """Where an action is used."""

    STANDALONE = "Standalone"
    FORM = "Form"
    NAVIGATION = "Navigation"
    INLINE = "Inline"
    TOOLBAR = "Toolbar"
    FLOATING = "Floating"


_HIERARCHY_WEIGHT = {
    ActionHierarchy.HERO: "text-xl font-bold px-8 py-4 rounded-lg shadow-lg",
    ActionHierarchy.PRIMARY: "text-base font-semibold px-6 py-3 rounded-md shadow-md",
    ActionHierarchy.SECONDARY: "text-sm font-medium px-4 py-2 rounded-md shadow-sm",
    ActionHierarchy.TERTIARY: "text-sm font-normal px-3 py-1.5 rounded",
    ActionHierarchy.MINIMAL: "text-xs font-normal px-2 py-1 rounded",
}

_CONTEXT_ADJUSTMENTS = {
    ActionContext.STANDALONE: "",
    ActionContext.FORM: "min-w-24",
    ActionContext.NAVIGATION: "w-full justify-start",
    ActionContext.INLINE: "inline underline-offset-2",
    ActionContext.TOOLBAR: "h-8 px-2 text-xs",
    ActionContext.FLOATING: "rounded-full w-14 h-14 shadow-xl",
}


@dataclass(frozen=True)
class ActionSemantics:
    """Immutable builder for the colour and visual weight of an action."""

    color_provider: ColorProvider
    intent: ActionIntent = ActionIntent.SECONDARY
    hierarchy: ActionHierarchy = ActionHierarchy.SECONDARY
    context: ActionContext = ActionContext.STANDALONE
    is_urgent: bool = False
    custom_classes: tuple[str, ...] = ()

    def with_intent(self, intent: ActionIntent | str) -> "ActionSemantics":
        return replace(self, intent=ActionIntent(intent))

    def with_hierarchy(self, hierarchy: ActionHierarchy | str) -> "ActionSemantics":
        return replace(self, hierarchy=ActionHierarchy(hierarchy))

    def with_context(self, context: ActionContext | str) -> "ActionSemantics":
        return replace(self, context=ActionContext(context))

    def urgent(self) -> "ActionSemantics":
        """Mark the action as time-sensitive or critical."""
        return replace(self, is_urgent=True)

    def custom(self, class_name: str) -> "ActionSemantics":
        return replace(self, custom_classes=(*self.custom_classes, class_name))

    def primary(self) -> "ActionSemantics":
        return replace(self, intent=ActionIntent.PRIMARY, hierarchy=ActionHierarchy.PRIMARY)

    def secondary(self) -> "ActionSemantics":
        return replace(
            self, intent=ActionIntent.SECONDARY, hierarchy=ActionHierarchy.SECONDARY
        )

    def destructive(self) -> "ActionSemantics":
        return replace(self, intent=ActionIntent.DESTRUCTIVE)

    def hero(self) -> "ActionSemantics":
        return replace(self, intent=ActionIntent.PRIMARY, hierarchy=ActionHierarchy.HERO)

    def navigation(self) -> "ActionSemantics":
        return replace(self, intent=ActionIntent.NAVIGATION, context=ActionContext.NAVIGATION)

    def classes(self) -> str:
        """Build the semantic colour and visual weight classes."""
        parts = [self._intent_colors(), _HIERARCHY_WEIGHT[self.hierarchy]]
        context = _CONTEXT_ADJUSTMENTS[self.context]
        if context:
            parts.append(context)
        if self.is_urgent:
            parts.append("animate-pulse")
        parts.extend(self.custom_classes)
        return " ".join(parts)

    def _intent_colors(self) -> str:
        cp = self.color_provider
        intent = self.intent
        if intent is ActionIntent.PRIMARY:
            return (
                f"{cp.bg_class(Color.PRIMARY)} {cp.text_class(Color.TEXT_INVERSE)} "
                f"hover:{cp.bg_class(Color.INTERACTIVE_HOVER)}"
            )
        if intent is ActionIntent.SECONDARY:
            return (
                f"{cp.bg_class(Color.SURFACE)} {cp.text_class(Color.TEXT_PRIMARY)} "
                f"{cp.border_class(Color.BORDER)} border"
            )
        if intent is ActionIntent.CONSTRUCTIVE:
            return (
                f"{cp.bg_class(Color.SUCCESS)} {cp.text_class(Color.TEXT_INVERSE)} "
                "hover:bg-green-600"
            )
        if intent is ActionIntent.DESTRUCTIVE:
            return (
                f"{cp.bg_class(Color.ERROR)} {cp.text_class(Color.TEXT_INVERSE)} "
                "hover:bg-red-600"
            )
        if intent is ActionIntent.NAVIGATION:
            return (
                f"bg-transparent {cp.text_class(Color.TEXT_PRIMARY)} "
                f"hover:{cp.bg_class(Color.BACKGROUND)}"
            )
        return f"bg-transparent {cp.text_class(Color.TEXT_SECONDARY)} hover:underline"


def action_semantics(color_provider: ColorProvider) -> ActionSemantics:
    """Create action semantics with default settings."""
    return ActionSemantics(color_provider)