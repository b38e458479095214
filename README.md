# kitcla

A kit of HTML components rendered on the server. Each component returns
a markup tree that renders to an HTML string. The markup carries
Tailwind CSS classes. The `*Alp` variants also carry Alpine.js bindings
such as `x-model`, `@click` and `x-data`.

## Installation

```
pip install kitcla
```

It needs Python 3.11 or later and has no runtime dependencies.

## The markup tree

`kitcla.markup` holds the tree and its renderer.

- `element(tag, *args)` builds an `Element` from its arguments:
  - Mappings add attributes, and a later mapping wins over an earlier one.
  - Strings become text, which is escaped when rendered.
  - `Element` and `Raw` values become children.
  - Lists and tuples are flattened.
  - `None` is skipped.
  - Any other value raises `TypeError`.
- `Raw(html)` wraps markup that is inserted without escaping.
- `render(node)` renders an `Element`, a `Raw`, a string, a sequence of
  these, or `None` (which gives `""`).
- Attribute values are always quoted and escaped.
- Void elements such as `input` and `link` get no closing tag when they
  have no children.

## The Component shorthands

`kitcla.component.Component` builds elements with short method names:

```python
from kitcla.component import Component
from kitcla.markup import render

c = Component()
page = c.dcs(
    "space-y-4 p-6",
    c.ccv("h1", "text-3xl font-bold", "Garden"),
    c.cav("a", {"href": "/plants"}, "Plant library"),
)
print(render(page))
```

The names follow one pattern:

- The first letter says what element is built: `c` builds the given tag and `d` builds a `div`.
- The letters after it say what the method takes:
  - `c`: a css class string
  - `a`: an attribute dict
  - `v`: text values
  - `s`: child elements

There are also these helpers:

- `w` and `wrap` wrap children in a div with css classes.
- `wa` wraps children in a div with attributes.
- `ti` builds a `template` with `x-if`.
- `tf` builds a `template` with `x-for`.
- `exp_html` builds a div holding raw markup.
- `or_nil(element, is_nil)` returns `[element]`, or `[]` when `is_nil` is true.

## Components

Every component is a dataclass, and all of its collaborators have
defaults, so `Button()` or `Pagination()` works as is. Each has:

- convenience methods for common uses;
- `h(mod)`, which gives full control through a `*Mod` dataclass.

```python
from kitcla.buttons import Button
from kitcla.markup import render

button = Button()
print(render(button.primary_link("Plant it", "/plant")))

mod = button.mod()
mod.kind = "primary"
mod.size = "36"
mod.label = "Save"
mod.html_kind = "submit"
print(render(button.h(mod)))
```

Modules and what they provide:

- `kitcla.buttons`
  - `Button`: links, submit buttons and small POST forms; `ButtonMod.add_post_value` adds hidden fields.
  - `ButtonAlp`: link buttons that run an Alpine.js expression on click.
  - `ButtonKind`, `ButtonSize` and `HtmlKind`: the accepted values.
- `kitcla.buttons_groups`: `ButtonsGroupAlp`, a row of buttons that tracks the selected key.
- `kitcla.cards`: `CardWrapper`, `CardHeader`, and `DuoCardBody` (a body split in two sides).
- `kitcla.cells`: table cells for booleans, decimals, integers, JSON, long and rich text, pills, relations, plain text and datetimes.
  - `TimeCell` formats with `strftime` layouts. The default is `%d/%m/%Y %H:%M`.
- `kitcla.dropdowns`: `Dropdown`, a button that opens a menu.
- `kitcla.fields`: `Field`, an input with a bold label. `hidden_field` returns the input alone.
- `kitcla.headers`: `Header`, heading levels 1 to 3.
- `kitcla.icons`: `Icon`, which renders inline SVG inside a sized span.
- `kitcla.inputs`: text, textarea, checkbox, switch, number, decimal, datetime, hidden, JSON, file and rich-text inputs, and their Alpine.js variants.
  - `RichTextInput.deps()` returns the script and stylesheet tags for the editor.
- `kitcla.selects`:
  - `SelectInput` and `SelectInputAlp`: native selects.
  - `AdvancedSelectInput`: an autocomplete select.
  - `GridIdInput`: radio cards in a grid.
  - `RadioInputAlp`: a group of radio buttons.
- `kitcla.links`: `Link`, which renders text links, icon links and submit links.
- `kitcla.paginations`: `Pagination`.
  - It shows the current page and its neighbours, plus the first and last three pages.
  - Gaps between pages are shown as ellipses.
  - It rewrites the `page` query parameter of `base_url`.
- `kitcla.alerts`: `Alert`, with success, warning, danger and info kinds.
- `kitcla.messages`: `Message`, which shows a `FlashMessage`.
- `kitcla.navbars`: `Navbar`.
- `kitcla.popovers`: `Popover`, a button that toggles a floating panel.
- `kitcla.steppers`: `Stepper`, a row of numbered steps.
- `kitcla.trees`: `Tree`, nested lists with an optional text renderer.
- `kitcla.placeholders`, `kitcla.resources`, `kitcla.shows` and `kitcla.tabs`: smaller building blocks.
- `kitcla.aria`: `Role` and `Property`, string enums of ARIA role and attribute names.

## Return values and errors

Some components return `None` instead of an element:

- `Pagination.h` returns `None` when everything fits on one page.
- `PillCell` returns `None` for an empty value.

`render(None)` gives `""`, so these results can be placed in a tree as
they are.

Invalid input raises `ValueError`:

- an unknown button kind or size;
- an unknown header level;
- an unknown alert kind;
- a pagination with a missing state or with `per_page` below 1;
- a tree without a root item;
- an icon name that is not registered.

`RichTextShow` inserts its value unescaped, so sanitise it first.

## Icons

`Icon` ships SVG markup for only a few names:

- `pen-to-square`
- `eye`
- `trash-can`
- `code`
- `filter`
- `home`
- `explosion`
- `chevron-right`

Several components use other names:

- `circle-check` and `circle-xmark`, in boolean cells and alerts;
- `circle-exclamation` and `circle-info`, in alerts;
- `ellipsis-vertical`, in `Dropdown.ellipsis_dropdown`;
- `minus` and `plus`, in `IntegerInputAlp.mini`.

Supply markup for these with `Icon.register(name, svg)`, and pass that
`Icon` to the component:

```python
from kitcla.icons import Icon
from kitcla.cells import BooleanCell

icon = Icon()
icon.register("circle-check", "<svg>…</svg>")
icon.register("circle-xmark", "<svg>…</svg>")
cell = BooleanCell(icon=icon)
```

## What this package does not do

It produces HTML fragments only. It does not ship:

- Tailwind CSS or Alpine.js;
- a full icon set;
- any page layout or web server.

The markup calls browser-side functions that you must provide yourself:

- `showTextIntoModal`
- `G_getRemoteForm`
- `advancedInput`
- `fetchOptions`

## Running the tests

```
pip install -e ".[test]"
pytest
```