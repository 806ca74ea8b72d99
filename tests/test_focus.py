import pytest

from jupiter_design.focus import (
    FocusBehavior,
    FocusManagement,
    KeyboardPattern,
    ScreenReaderPattern,
    focus_management,
)
from jupiter_design.themes import VibeColors


@pytest.fixture
def colors():
    return VibeColors()


def test_default_classes(colors):
    tokens = FocusManagement(colors).classes().split()
    assert tokens[0] == "focus:outline-none"
    assert tokens[1:3] == ["focus:ring-2", "focus:ring-offset-2"]
    assert tokens[3] == "focus:ring-jupiter-blue-300"


def test_subtle_uses_border_color(colors):
    tokens = FocusManagement(colors).with_focus_behavior(FocusBehavior.SUBTLE).classes().split()
    assert "focus:ring-1" in tokens
    assert "focus:ring-offset-1" in tokens
    assert "focus:ring-gray-200" in tokens


def test_prominent_ring(colors):
    standard = FocusManagement(colors).classes().split()
    prominent = FocusManagement(colors).with_focus_behavior("Prominent").classes().split()
    assert "focus:ring-4" in prominent
    assert prominent[-1] == standard[-1]


def test_none_behavior(colors):
    result = FocusManagement(colors).with_focus_behavior(FocusBehavior.NONE).classes()
    assert result.split() == ["focus:outline-none", "focus:ring-0"]


def test_custom_behavior_has_no_ring(colors):
    result = FocusManagement(colors).with_focus_behavior(FocusBehavior.CUSTOM).classes()
    assert result == "focus:outline-none"


def test_not_focusable(colors):
    management = FocusManagement(colors, is_focusable=False)
    assert management.classes() == ""
    assert management.data_attributes() == []


def test_custom_classes_appended(colors):
    management = FocusManagement(colors, is_focusable=False, custom_classes=("x", "y"))
    assert management.classes() == "x y"


def test_default_data_attributes(colors):
    assert FocusManagement(colors).data_attributes() == [("tabindex", "0")]


def test_explicit_tab_index(colors):
    attrs = FocusManagement(colors, tab_index=-1).data_attributes()
    assert attrs == [("tabindex", "-1")]


def test_button(colors):
    management = FocusManagement(colors).button()
    assert management.keyboard_pattern is KeyboardPattern.BUTTON
    assert management.screen_reader_pattern is ScreenReaderPattern.BUTTON
    assert management.data_attributes() == [("tabindex", "0"), ("role", "button")]


@pytest.mark.parametrize(
    "builder, role",
    [("link", "link"), ("menu_item", "menuitem"), ("tab", "tab")],
)
def test_roles(colors, builder, role):
    management = getattr(FocusManagement(colors), builder)()
    assert ("role", role) in management.data_attributes()


def test_menu_item_is_subtle(colors):
    management = FocusManagement(colors).menu_item()
    assert management.focus_behavior is FocusBehavior.SUBTLE
    assert (
        management.classes()
        == FocusManagement(colors).with_focus_behavior(FocusBehavior.SUBTLE).classes()
    )


def test_button_resets_behavior(colors):
    management = FocusManagement(colors).menu_item().button()
    assert management.focus_behavior is FocusBehavior.STANDARD


def test_toggle_attributes(colors):
    attrs = FocusManagement(colors).toggle().data_attributes()
    assert attrs == [("tabindex", "0"), ("role", "button"), ("aria-pressed", "false")]


def test_expandable_attributes(colors):
    management = FocusManagement(colors, screen_reader_pattern=ScreenReaderPattern.EXPANDABLE)
    assert ("aria-expanded", "false") in management.data_attributes()
    assert ("role", "button") in management.data_attributes()


def test_invalid_behavior(colors):
    with pytest.raises(ValueError):
        FocusManagement(colors).with_focus_behavior("Blinking")


def test_factory(colors):
    assert focus_management(colors) == FocusManagement(colors)