import pytest

from jupiter_design.tokens import (
    Breakpoint,
    FontFamily,
    FontWeight,
    Size,
    SizeProvider,
    Spacing,
    SpacingProvider,
    Typography,
    TypographyProvider,
)


class _Sizes(SizeProvider):
    def resolve_size(self, size):
        return {Size.SMALL: "8", Size.LARGE: "full"}.get(size, "auto")


class _Spacings(SpacingProvider):
    def resolve_spacing(self, spacing):
        return {Spacing.NONE: "0", Spacing.MEDIUM: "4"}.get(spacing, "2")


class _Type(TypographyProvider):
    def resolve_typography(self, typography):
        return "4xl" if typography is Typography.HEADING1 else "base"


def test_width_and_height_use_resolved_size():
    sizes = _Sizes()
    assert SizeProvider.width_class(sizes, Size("Small")) == "w-8"
    assert SizeProvider.height_class(sizes, Size.SMALL) == "h-8"
    assert SizeProvider.width_class(sizes, Size.LARGE) == "w-full"


def test_padding_and_margin_use_resolved_spacing():
    spacings = _Spacings()
    assert SpacingProvider.padding_class(spacings, Spacing.MEDIUM) == "p-4"
    assert SpacingProvider.margin_class(spacings, Spacing("None")) == "m-0"


def test_typography_class():
    provider = _Type()
    assert TypographyProvider.typography_class(provider, Typography.HEADING1) == "text-4xl"
    assert TypographyProvider.typography_class(provider, Typography.BODY) == "text-base"


@pytest.mark.parametrize(
    "weight, expected",
    [
        (FontWeight.LIGHT, "font-light"),
        (FontWeight.NORMAL, "font-normal"),
        (FontWeight.MEDIUM, "font-medium"),
        (FontWeight.SEMI_BOLD, "font-semibold"),
        (FontWeight.BOLD, "font-bold"),
    ],
)
def test_font_weight_class(weight, expected):
    assert TypographyProvider.font_weight_class(_Type(), weight) == expected


@pytest.mark.parametrize(
    "family, expected",
    [
        (FontFamily.SANS, "font-sans"),
        (FontFamily.SERIF, "font-serif"),
        (FontFamily.MONO, "font-mono"),
    ],
)
def test_font_family_class(family, expected):
    assert TypographyProvider.font_family_class(_Type(), family) == expected


def test_font_weight_class_accepts_serialized_name():
    assert TypographyProvider.font_weight_class(_Type(), "SemiBold") == "font-semibold"


def test_font_weight_class_rejects_unknown():
    with pytest.raises(ValueError):
        TypographyProvider.font_weight_class(_Type(), "Heavy")


@pytest.mark.parametrize("enum_cls", [Size, Breakpoint, Spacing, Typography, FontWeight, FontFamily])
def test_tokens_round_trip_through_value(enum_cls):
    for member in enum_cls:
        assert enum_cls(member.value) is member


def test_providers_are_abstract():
    with pytest.raises(TypeError):
        SizeProvider()
    with pytest.raises(TypeError):
        SpacingProvider()
    with pytest.raises(TypeError):
        TypographyProvider()