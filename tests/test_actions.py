import pytest

from jupiter_design.actions import (
    ActionContext,
    ActionHierarchy,
    ActionIntent,
    ActionSemantics,
    action_semantics,
)
from jupiter_design.color import Color
from jupiter_design.themes import VibeColors


@pytest.fixture
def colors():
    return VibeColors()


def test_defaults(colors):
    semantics = ActionSemantics(colors)
    assert semantics.intent is ActionIntent.SECONDARY
    assert semantics.hierarchy is ActionHierarchy.SECONDARY
    assert semantics.context is ActionContext.STANDALONE
    assert semantics.is_urgent is False


def test_default_classes_are_secondary(colors):
    result = ActionSemantics(colors).classes()
    tokens = result.split()
    assert colors.bg_class(Color.SURFACE) in tokens
    assert colors.border_class(Color.BORDER) in tokens
    assert "border" in tokens
    assert result.endswith("text-sm font-medium px-4 py-2 rounded-md shadow-sm")


def test_primary_shorthand(colors):
    semantics = ActionSemantics(colors).primary()
    assert semantics.intent is ActionIntent.PRIMARY
    assert semantics.hierarchy is ActionHierarchy.PRIMARY
    result = semantics.classes()
    tokens = result.split()
    assert tokens[0] == colors.bg_class(Color.PRIMARY)
    assert tokens[1] == colors.text_class(Color.TEXT_INVERSE)
    assert "text-base font-semibold px-6 py-3 rounded-md shadow-md" in result


def test_hero_shorthand(colors):
    semantics = ActionSemantics(colors).hero()
    assert semantics.intent is ActionIntent.PRIMARY
    assert semantics.hierarchy is ActionHierarchy.HERO
    assert "text-xl font-bold px-8 py-4 rounded-lg shadow-lg" in semantics.classes()


def test_destructive_keeps_hierarchy(colors):
    semantics = ActionSemantics(colors).with_hierarchy(ActionHierarchy.MINIMAL).destructive()
    assert semantics.hierarchy is ActionHierarchy.MINIMAL
    tokens = semantics.classes().split()
    assert colors.bg_class(Color.ERROR) in tokens
    assert "hover:bg-red-600" in tokens
    assert "text-xs" in tokens


def test_constructive_colors(colors):
    tokens = ActionSemantics(colors).with_intent(ActionIntent.CONSTRUCTIVE).classes().split()
    assert colors.bg_class(Color.SUCCESS) in tokens
    assert "hover:bg-green-600" in tokens


def test_informational_colors(colors):
    tokens = ActionSemantics(colors).with_intent("Informational").classes().split()
    assert tokens[0] == "bg-transparent"
    assert colors.text_class(Color.TEXT_SECONDARY) in tokens
    assert "hover:underline" in tokens


def test_navigation_shorthand(colors):
    semantics = ActionSemantics(colors).navigation()
    assert semantics.intent is ActionIntent.NAVIGATION
    assert semantics.context is ActionContext.NAVIGATION
    result = semantics.classes()
    assert result.startswith("bg-transparent")
    assert result.endswith("w-full justify-start")


@pytest.mark.parametrize(
    "context, adjustment",
    [
        (ActionContext.FORM, "min-w-24"),
        (ActionContext.NAVIGATION, "w-full justify-start"),
        (ActionContext.INLINE, "inline underline-offset-2"),
        (ActionContext.TOOLBAR, "h-8 px-2 text-xs"),
        (ActionContext.FLOATING, "rounded-full w-14 h-14 shadow-xl"),
    ],
)
def test_context_adjustments(colors, context, adjustment):
    standalone = ActionSemantics(colors).classes()
    adjusted = ActionSemantics(colors).with_context(context).classes()
    assert adjusted == f"{standalone} {adjustment}"


def test_urgent_and_custom_order(colors):
    result = ActionSemantics(colors).urgent().custom("a").custom("b").classes()
    assert result.split()[-3:] == ["animate-pulse", "a", "b"]


def test_builder_does_not_mutate(colors):
    base = ActionSemantics(colors)
    base.primary().urgent().custom("extra")
    assert base.intent is ActionIntent.SECONDARY
    assert base.is_urgent is False
    assert base.custom_classes == ()


def test_secondary_resets_after_primary(colors):
    assert (
        ActionSemantics(colors).hero().secondary().classes()
        == ActionSemantics(colors).classes()
    )


def test_invalid_intent_rejected(colors):
    with pytest.raises(ValueError):
        ActionSemantics(colors).with_intent("Explosive")


def test_action_semantics_factory(colors):
    assert action_semantics(colors) == ActionSemantics(colors)
    assert action_semantics(colors).classes() == ActionSemantics(colors).classes()