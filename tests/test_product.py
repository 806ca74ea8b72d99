from dataclasses import replace

import pytest

from jupiter_design.color import Color
from jupiter_design.product import (
    CustomBadge,
    ProductActionType,
    ProductAvailabilityState,
    ProductBadgeType,
    ProductCardPattern,
    ProductDisplayPattern,
    ProductImagePattern,
    ProductInfoSection,
    ProductInteractionState,
    ProductProminence,
)
from jupiter_design.themes import VibeColors


def test_defaults():
    card = ProductCardPattern()
    assert card.display is ProductDisplayPattern.LIST_ITEM
    assert card.availability is ProductAvailabilityState.AVAILABLE
    assert card.info_sections == [ProductInfoSection.BASIC]
    assert card.actions == [ProductActionType.ADD_TO_CART]
    assert card.badges == []
    assert card.variant_pattern is None


def test_default_lists_are_not_shared():
    first, second = ProductCardPattern(), ProductCardPattern()
    first.badges.append(ProductBadgeType.SALE)
    assert second.badges == []


def test_default_suggestions():
    card = ProductCardPattern()
    assert card.suggested_image_aspect_ratio() == "aspect-[4/3]"
    assert card.suggested_image_sizes() == "h-48 w-48"
    assert card.suggested_container_padding() == "p-4"
    assert card.suggested_spacing() == "space-y-3"


def test_default_classes():
    colors = VibeColors()
    parts = ProductCardPattern().classes(colors).split()
    assert parts[:2] == ["product-card", "product-card--list"]
    assert parts[-1] == colors.bg_class(Color.SURFACE)
    assert len(parts) == 3


@pytest.mark.parametrize(
    "display, expected",
    [
        (ProductDisplayPattern.FEATURED, "product-card--featured"),
        (ProductDisplayPattern.TILE, "product-card--tile"),
        (ProductDisplayPattern.SHOWCASE, "product-card--showcase"),
        (ProductDisplayPattern.PREVIEW, "product-card--preview"),
    ],
)
def test_display_class(display, expected):
    card = ProductCardPattern(display=display)
    assert expected in card.classes(VibeColors()).split()


def test_unavailable_uses_disabled_text_color():
    colors = VibeColors()
    card = ProductCardPattern(
        availability=ProductAvailabilityState.OUT_OF_STOCK,
        prominence=ProductProminence.HERO,
    )
    parts = card.classes(colors).split()
    assert "product-card--out-of-stock" in parts
    assert "product-card--hero" in parts
    assert colors.text_class(Color.INTERACTIVE_DISABLED) in parts
    assert colors.bg_class(Color.PRIMARY) not in parts


def test_prominence_picks_background():
    colors = VibeColors()
    hero = ProductCardPattern(prominence=ProductProminence.HERO).classes(colors).split()
    prominent = ProductCardPattern(prominence=ProductProminence.PROMINENT).classes(colors).split()
    subtle = ProductCardPattern(prominence=ProductProminence.SUBTLE).classes(colors).split()
    assert hero[-1] == colors.bg_class(Color.PRIMARY)
    assert prominent[-1] == colors.bg_class(Color.SECONDARY)
    assert subtle[-1] == colors.bg_class(Color.SURFACE)
    assert "product-card--subtle" in subtle


def test_interaction_state_class():
    card = ProductCardPattern(interaction_state=ProductInteractionState.LOADING)
    assert "product-card--loading" in card.classes(VibeColors()).split()


def test_image_patterns():
    card = ProductCardPattern()
    assert replace(card, image_pattern=ProductImagePattern.SQUARE).suggested_image_aspect_ratio() == "aspect-square"
    assert (
        replace(card, image_pattern=ProductImagePattern.CIRCLE).suggested_image_aspect_ratio()
        == "aspect-square rounded-full"
    )


def test_showcase_suggestions():
    card = ProductCardPattern(display=ProductDisplayPattern.SHOWCASE)
    assert card.suggested_image_sizes() == "h-80 w-80"
    assert card.suggested_container_padding() == "p-8"
    assert card.suggested_spacing() == "space-y-6"


def test_custom_badge_equality():
    card = ProductCardPattern(badges=[CustomBadge("Hot"), ProductBadgeType.NEW])
    assert card.badges[0] == CustomBadge("Hot")
    assert card.badges[0] != CustomBadge("Cold")
    assert card == ProductCardPattern(badges=[CustomBadge("Hot"), ProductBadgeType.NEW])