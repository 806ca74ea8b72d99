import pytest

from jupiter_design.selection import (
    SelectionBehavior,
    SelectionDisplay,
    SelectionInteraction,
    SelectionLayout,
    SelectionPattern,
    SelectionSize,
    SelectionState,
    card_selection,
    chip_selection,
    filter_selection,
    list_selection,
    tab_selection,
)
from jupiter_design.themes import VibeColors


@pytest.fixture
def colors():
    return VibeColors()


def _is_sorted_unique(classes: str) -> bool:
    words = classes.split()
    return words == sorted(set(words))


def test_defaults(colors):
    info = SelectionPattern(colors).semantic_info()
    assert info.behavior is SelectionBehavior.SINGLE
    assert info.state is SelectionState.UNSELECTED
    assert info.display is SelectionDisplay.BUTTON
    assert info.layout is SelectionLayout.HORIZONTAL
    assert info.size is SelectionSize.MD
    assert info.interaction is SelectionInteraction.STANDARD
    assert info.has_counts is False
    assert info.has_clear_all is False


def test_builder_returns_new_object(colors):
    base = SelectionPattern(colors)
    chosen = base.selected()
    assert base.state is SelectionState.UNSELECTED
    assert chosen.state is SelectionState.SELECTED


def test_container_classes_sorted_and_contain_layout(colors):
    classes = SelectionPattern(colors).grid_layout().lg().custom("extra").container_classes()
    words = classes.split()
    assert _is_sorted_unique(classes)
    for word in ("selection-pattern", "grid", "grid-cols-auto", "gap-3", "extra"):
        assert word in words


def test_dropdown_container(colors):
    words = SelectionPattern(colors).dropdown_layout().xs().container_classes().split()
    assert words == sorted(["selection-pattern", "relative", "gap-1"])


@pytest.mark.parametrize(
    "builder, expected",
    [
        (lambda p: p.xs(), "px-2 py-1 text-xs"),
        (lambda p: p.xl(), "px-8 py-4 text-xl"),
        (lambda p: p.chip_display().xs(), "px-2 py-0.5 text-xs"),
        (lambda p: p.chip_display().lg(), "px-4 py-2 text-lg"),
        (lambda p: p.tab_display().xs(), "px-4 py-2 text-base"),
    ],
)
def test_item_size_classes(colors, builder, expected):
    classes = builder(SelectionPattern(colors)).item_classes()
    assert _is_sorted_unique(classes)
    assert set(expected.split()) <= set(classes.split())


def test_item_excludes_custom_classes(colors):
    words = SelectionPattern(colors).custom("my-class").item_classes().split()
    assert "my-class" not in words
    assert "selection-item" in words


def test_unselected_standard_item_colors(colors):
    words = SelectionPattern(colors).item_classes().split()
    assert colors.bg_class("Surface") in words
    assert colors.text_class("TextPrimary") in words
    assert colors.border_class("Border") in words
    assert "hover:" + colors.bg_class("Background") in words
    assert "hover:" + colors.border_class("Interactive") in words
    assert "cursor-pointer" in words


def test_selected_item_has_no_unselected_hover(colors):
    words = SelectionPattern(colors).selected().item_classes().split()
    assert colors.bg_class("Primary") in words
    assert colors.border_class("Primary") in words
    assert "hover:" + colors.bg_class("Background") not in words
    assert "hover:scale-105" in words


def test_disabled_item(colors):
    words = SelectionPattern(colors).disabled().item_classes().split()
    assert "cursor-not-allowed" in words
    assert "cursor-pointer" not in words
    assert colors.bg_class("InteractiveDisabled") in words
    assert colors.text_class("TextTertiary") in words


def test_subtle_and_prominent_interactions(colors):
    subtle = SelectionPattern(colors).subtle_interaction().item_classes().split()
    assert "hover:opacity-80" in subtle
    prominent = SelectionPattern(colors).prominent_interaction().item_classes().split()
    assert "shadow-lg" in prominent
    assert "hover:" + colors.bg_class("Interactive") in prominent
    assert "hover:" + colors.text_class("TextInverse") in prominent


def test_partially_selected_colors(colors):
    words = SelectionPattern(colors).partially_selected().item_classes().split()
    assert colors.bg_class("Background") in words
    assert colors.text_class("Primary") in words


def test_count_classes_off_by_default(colors):
    assert SelectionPattern(colors).count_classes() == ""


def test_count_classes_follow_state(colors):
    selected = SelectionPattern(colors).with_counts(True).selected().count_classes()
    assert selected.startswith("ml-2 px-2 py-0.5 text-xs rounded-full ")
    assert selected.endswith(f"{colors.bg_class('Primary')} {colors.text_class('TextInverse')}")
    other = SelectionPattern(colors).with_counts(True).count_classes()
    assert other.endswith(
        f"{colors.bg_class('Background')} {colors.text_class('TextSecondary')}"
    )


def test_semantic_info_flags(colors):
    assert SelectionPattern(colors).toggle_selection().semantic_info().allows_multiple
    assert not SelectionPattern(colors).semantic_info().allows_multiple
    assert not SelectionPattern(colors).no_selection().semantic_info().is_interactive
    assert not SelectionPattern(colors).disabled().semantic_info().is_interactive
    assert SelectionPattern(colors).semantic_info().is_interactive


def test_convenience_functions(colors):
    f = filter_selection(colors).semantic_info()
    assert (f.display, f.has_counts) == (SelectionDisplay.BUTTON, True)
    c = chip_selection(colors).semantic_info()
    assert (c.behavior, c.layout, c.has_clear_all) == (
        SelectionBehavior.MULTIPLE,
        SelectionLayout.INLINE,
        True,
    )
    assert tab_selection(colors).semantic_info().display is SelectionDisplay.TAB
    lst = list_selection(colors).semantic_info()
    assert (lst.layout, lst.has_counts) == (SelectionLayout.VERTICAL, True)
    card = card_selection(colors).semantic_info()
    assert (card.layout, card.interaction) == (
        SelectionLayout.GRID,
        SelectionInteraction.PROMINENT,
    )