"""Product display patterns for commerce components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

from .color import Color, ColorProvider


class ProductDisplayPattern(Enum):
    """How a product is displayed."""

    LIST_ITEM = auto()
    FEATURED = auto()
    TILE = auto()
    SHOWCASE = auto()
    PREVIEW = auto()


class ProductInteractionState(Enum):
    """Interaction state of a product card."""

    DEFAULT = auto()
    FOCUSED = auto()
    SELECTED = auto()
    LOADING = auto()
    DISABLED = auto()


class ProductAvailabilityState(Enum):
    """Availability of a product."""

    AVAILABLE = auto()
    OUT_OF_STOCK = auto()
    BACKORDER = auto()
    DISCONTINUED = auto()
    LIMITED = auto()


class ProductProminence(Enum):
    """Prominence level of a product display."""

    SUBTLE = auto()
    STANDARD = auto()
    PROMINENT = auto()
    HERO = auto()


class ProductImagePattern(Enum):
    """Shape of a product image."""

    STANDARD = auto()
    SQUARE = auto()
    WIDE = auto()
    PORTRAIT = auto()
    CIRCLE = auto()


class ProductBadgeType(Enum):
    """Predefined product badges."""

    SALE = auto()
    NEW = auto()
    FEATURED = auto()
    BEST_SELLER = auto()
    LIMITED = auto()
    OUT_OF_STOCK = auto()


@dataclass(frozen=True)
class CustomBadge:
    """A product badge with its own text."""

    text: str


Badge = Union[ProductBadgeType, CustomBadge]


class ProductActionType(Enum):
    """Actions available on a product."""

    ADD_TO_CART = auto()
    QUICK_VIEW = auto()
    COMPARE = auto()
    WISHLIST = auto()
    SHARE = auto()
    VIEW_DETAILS = auto()


class ProductInfoSection(Enum):
    """Sections of product information to show."""

    BASIC = auto()
    EXTENDED = auto()
    DETAILED = auto()
    MINIMAL = auto()


class ProductPricePattern(Enum):
    """How a price is displayed."""

    STANDARD = auto()
    WITH_COMPARE = auto()
    RANGE = auto()
    WITH_DISCOUNT = auto()
    ON_SALE = auto()


class ProductVariantPattern(Enum):
    """How product variants are selected."""

    DROPDOWN = auto()
    BUTTONS = auto()
    SWATCHES = auto()
    LIST = auto()
    RADIO = auto()


_DISPLAY_CLASSES = {
    ProductDisplayPattern.LIST_ITEM: "product-card--list",
    ProductDisplayPattern.FEATURED: "product-card--featured",
    ProductDisplayPattern.TILE: "product-card--tile",
    ProductDisplayPattern.SHOWCASE: "product-card--showcase",
    ProductDisplayPattern.PREVIEW: "product-card--preview",
}

_INTERACTION_CLASSES = {
    ProductInteractionState.FOCUSED: "product-card--focused",
    ProductInteractionState.SELECTED: "product-card--selected",
    ProductInteractionState.LOADING: "product-card--loading",
    ProductInteractionState.DISABLED: "product-card--disabled",
}

_AVAILABILITY_CLASSES = {
    ProductAvailabilityState.OUT_OF_STOCK: "product-card--out-of-stock",
    ProductAvailabilityState.BACKORDER: "product-card--backorder",
    ProductAvailabilityState.DISCONTINUED: "product-card--discontinued",
    ProductAvailabilityState.LIMITED: "product-card--limited",
}

_PROMINENCE_CLASSES = {
    ProductProminence.SUBTLE: "product-card--subtle",
    ProductProminence.PROMINENT: "product-card--prominent",
    ProductProminence.HERO: "product-card--hero",
}

_ASPECT_RATIOS = {
    ProductImagePattern.STANDARD: "aspect-[4/3]",
    ProductImagePattern.SQUARE: "aspect-square",
    ProductImagePattern.WIDE: "aspect-[16/9]",
    ProductImagePattern.PORTRAIT: "aspect-[3/4]",
    ProductImagePattern.CIRCLE: "aspect-square rounded-full",
}

_IMAGE_SIZES = {
    ProductDisplayPattern.LIST_ITEM: "h-48 w-48",
    ProductDisplayPattern.FEATURED: "h-64 w-64",
    ProductDisplayPattern.TILE: "h-40 w-40",
    ProductDisplayPattern.SHOWCASE: "h-80 w-80",
    ProductDisplayPattern.PREVIEW: "h-32 w-32",
}

_CONTAINER_PADDING = {
    ProductDisplayPattern.LIST_ITEM: "p-4",
    ProductDisplayPattern.FEATURED: "p-6",
    ProductDisplayPattern.TILE: "p-3",
    ProductDisplayPattern.SHOWCASE: "p-8",
    ProductDisplayPattern.PREVIEW: "p-2",
}

_SPACING = {
    ProductDisplayPattern.LIST_ITEM: "space-y-3",
    ProductDisplayPattern.FEATURED: "space-y-4",
    ProductDisplayPattern.TILE: "space-y-2",
    ProductDisplayPattern.SHOWCASE: "space-y-6",
    ProductDisplayPattern.PREVIEW: "space-y-1",
}


@dataclass
class ProductCardPattern:
    """Configuration of a product card and the classes it produces."""

    display: ProductDisplayPattern = ProductDisplayPattern.LIST_ITEM
    interaction_state: ProductInteractionState = ProductInteractionState.DEFAULT
    availability: ProductAvailabilityState = ProductAvailabilityState.AVAILABLE
    prominence: ProductProminence = ProductProminence.STANDARD
    image_pattern: ProductImagePattern = ProductImagePattern.STANDARD
    info_sections: list[ProductInfoSection] = field(
        default_factory=lambda: [ProductInfoSection.BASIC]
    )
    price_pattern: ProductPricePattern = ProductPricePattern.STANDARD
    actions: list[ProductActionType] = field(
        default_factory=lambda: [ProductActionType.ADD_TO_CART]
    )
    badges: list[Badge] = field(default_factory=list)
    variant_pattern: Optional[ProductVariantPattern] = None

    def classes(self, colors: ColorProvider) -> str:
        """CSS classes for the card, coloured by ``colors``."""
        result = ["product-card", _DISPLAY_CLASSES[self.display]]
        for extra in (
            _INTERACTION_CLASSES.get(self.interaction_state),
            _AVAILABILITY_CLASSES.get(self.availability),
            _PROMINENCE_CLASSES.get(self.prominence),
        ):
            if extra:
                result.append(extra)

        if self.availability is not ProductAvailabilityState.AVAILABLE:
            result.append(colors.text_class(Color.INTERACTIVE_DISABLED))
        elif self.prominence is ProductProminence.HERO:
            result.append(colors.bg_class(Color.PRIMARY))
        elif self.prominence is ProductProminence.PROMINENT:
            result.append(colors.bg_class(Color.SECONDARY))
        else:
            result.append(colors.bg_class(Color.SURFACE))
        return " ".join(result)

    def suggested_image_aspect_ratio(self) -> str:
        return _ASPECT_RATIOS[self.image_pattern]

    def suggested_image_sizes(self) -> str:
        return _IMAGE_SIZES[self.display]

    def suggested_container_padding(self) -> str:
        return _CONTAINER_PADDING[self.display]

    def suggested_spacing(self) -> str:
        return _SPACING[self.display]