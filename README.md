# jupiter-design

Chainable builders that turn design-system concepts (colors, actions, focus,
interaction, buttons, cards, layout, selection, products and typography) into
consistent Tailwind CSS class strings. The output is a plain string, so it
works with any templating engine or component framework.

The builders are immutable: every chained call returns a new object and
leaves the one it was called on unchanged.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Colors and themes

`VibeColors` (in `jupiter_design.themes`) is the default color provider. It
resolves semantic `Color` tokens to palette values and builds `text-`, `bg-`
and `border-` classes.

```python
from jupiter_design.color import Color
from jupiter_design.themes import VibeColors

colors = VibeColors()
colors.resolve_color(Color.PRIMARY)   # "jupiter-blue-500"
colors.bg_class(Color.SURFACE)        # "bg-white"
colors.text_class(Color.ERROR)        # "text-red-500"
```

Override palette entries with `VibeColors.with_overrides`, passing a function
that edits the default palette in place:

```python
def brand(palette):
    palette.primary = "custom-blue-500"

colors = VibeColors.with_overrides(brand)
```

A `ColorPalette` converts to a plain dict with `to_dict()`, and
`palette_from_dict` builds one back; it raises `ValueError` when a field is
missing and `TypeError` when a value is not a string. To supply your own
colors, subclass `ColorProvider` and implement `palette()`.

`VibeTheme` names the theme (`"Jupiter"`); `VibeTheme.available_themes()`
returns `["jupiter"]` and `VibeTheme.theme_description(name)` describes it,
returning `"Unknown theme"` for any other name.

## Buttons

```python
from jupiter_design.button import ButtonPattern, hero_button, primary_button

cta = hero_button(colors).classes()

delete = (
    ButtonPattern(colors)
    .destructive_action()
    .standard_prominence()
    .disabled(True)
)
delete.classes()
delete.accessibility_attributes()   # [("tabindex", "0"), ("role", "button"), ("aria-disabled", "true")]
delete.semantic_info().is_destructive   # True
```

Other presets: `button_pattern`, `secondary_button`, `destructive_button`,
`navigation_button` and `button_link`.

## Cards

```python
from jupiter_design.card import CardPattern, content_card, glass_card

CardPattern(colors).elevated_surface().floating_elevation().clickable_interaction().classes()
content_card(colors).classes()
glass_card(colors).selected(True).accessibility_attributes()
```

Other presets: `card_pattern`, `interactive_card`, `hero_card` and
`minimal_card`.

## Layout, selection and typography

```python
from jupiter_design.layout import card_footer_layout
from jupiter_design.selection import chip_selection
from jupiter_design.typography import LineClamp, TypographyAlignment, title_typography

card_footer_layout(colors).classes()
chip_selection(colors).selected().item_classes()
title_typography(colors).with_alignment(TypographyAlignment.CENTER).classes()
title_typography(colors).with_overflow(LineClamp(2)).get_clamp_style()
```

`jupiter_design.layout` also offers `card_header_layout`,
`card_content_layout` and `layout(colors)`, a `LayoutBuilder`.
`jupiter_design.selection` offers `filter_selection`, `tab_selection`,
`list_selection` and `card_selection`, and `SelectionPattern` produces
`container_classes()`, `item_classes()` and `count_classes()`.

## Other building blocks

- `jupiter_design.actions`: `ActionSemantics`, the color and visual weight of
  an action by intent, hierarchy and context.
- `jupiter_design.focus`: `FocusManagement`, focus rings and `tabindex`/`role`
  attributes.
- `jupiter_design.interactions`: `InteractiveElement`, hover, press, focus,
  disabled and loading effects.
- `jupiter_design.product`: `ProductCardPattern`, classes and suggested image
  and spacing classes for product cards.
- `jupiter_design.tokens`: the `Size`, `Breakpoint`, `Spacing`, `Typography`,
  `FontWeight` and `FontFamily` enums and the abstract `SizeProvider`,
  `SpacingProvider` and `TypographyProvider` base classes.

## What it does not do

The package only produces class-name strings and attribute pairs. It does not
render HTML or components, does not generate CSS, and has no command-line
tool. The `jupiter-*` color names in the default palette must be defined in
your own Tailwind configuration. No concrete size, spacing or typography
provider is included; those base classes are meant to be subclassed.