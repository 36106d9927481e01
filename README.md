# wayedges

Building blocks for small widgets that hide on the edges of the screen.

## What is in the package

- **Colours** (`wayedges.color`): `parse_color` reads CSS-style colours
  (`#rgb`, `#rgba`, `#rrggbb`, `#rrggbbaa`, 3- and 4-digit-per-channel hex,
  `rgb()`/`rgba()` with bytes or percentages, `hsl()`/`hsla()`) into a frozen
  `Color(r, g, b, a)`. Malformed input raises `ParseColorError`, a
  `ValueError`. `color_transition` blends two colours by a factor that is
  clamped to 0..1, and `color_mix` composites one colour over another. Ready
  made colours: `COLOR_BLACK`, `COLOR_RED`, `COLOR_GREEN`, `COLOR_BLUE`,
  `COLOR_WHITE`, `COLOR_TRANSPARENT`.
- **Drawing** (`wayedges.draw`): a `Path` that records `move_to`, `line_to`,
  `arc` and `close_path` as elements (`MoveTo`, `LineTo`, `Arc`, `ClosePath`)
  and tracks its `current_point`. `draw_rect_path` builds a rectangle whose
  corners (top-left, top-right, bottom-right, bottom-left) are each optionally
  rounded, `draw_fan` appends a pie slice (angles in multiples of pi), and
  `copy_pixmap` copies a 4-byte-per-pixel block into a `bytearray`, clipping
  at every edge.
- **Lookup helpers** (`wayedges.search`): `binary_search_within_range` gives
  the index of the sorted half-open range holding a value, or `None`;
  `binary_search_end` gives the index of the segment holding a value when the
  segments are described by their end values, or `None` past the last end;
  `premultiply_to_bgra` turns an RGBA pixel into premultiplied B, G, R, A
  bytes.
- **Shell** (`wayedges.shell`): `shell_cmd` runs a command through
  `/bin/sh -c` and returns its standard output, raising `CommandError` (after
  logging it and sending a critical notification) on failure;
  `shell_cmd_non_block` runs one on a background thread and returns that
  thread; `notify_send` shows a desktop notification through the `notify-send`
  program and only logs if that fails.
- **Templates** (`wayedges.template.base`, `wayedges.template.args`): text
  with `{name}` or `{name:argument}` placeholders, parsed with
  `Template.from_str` against a `TemplateProcessor` and rendered with
  `Template.render(callback)`. A backslash escapes braces and is removed from
  literal text. Unknown or invalid placeholders are logged, reported through
  `notify_send`, and dropped. Built-in placeholders are `{float}` (`FloatArg`,
  via `FloatArgProcessor`) and `{preset}` (`RingPresetArg`, via
  `RingPresetArgProcessor`).
- **Text** (`wayedges.text`): `draw_text` renders a string with Pillow into a
  `Canvas` of premultiplied BGRA bytes just large enough to hold it, following
  a `TextConfig(family, weight, color, size)`. `family` is a font name or file
  Pillow can open; if it cannot, Pillow's default font is used. Where the font
  has a variable weight axis, `weight` sets it. `Canvas.to_image` returns a
  straight-alpha RGBA Pillow image.
- **Command-line model** (`wayedges.cli`): `parse_args` reads arguments
  (`-d/--mouse-debug`, `--version`, and the subcommands `schema`, `daemon`/`d`,
  `add`/`a`, `rm`/`r`, `togglepin`, `reload`, `quit`/`q`) into a `Cli`. Each
  subcommand becomes a `Command` with a `CommandKind`; `Command.ipc_body`
  gives the `{"command": ..., "args": [...]}` message for it, or `None` for
  `schema` and `daemon`, and raises `ValueError` when a `togglepin` argument
  lacks the `group:widget` colon. `complete_only_group` and
  `complete_group_and_widget` offer completion candidates from a mapping of
  group names to widget names.

## What the package does not do

It draws no windows on the screen and has no command to start. It builds IPC
messages but does not send them, reads no configuration files (the completion
helpers take the group names as an argument) and prints no configuration
schema.

## Installing

Install it with your usual Python packaging tool; it needs Python 3.10 or
later and Pillow.

## Examples

### Colours

```python
from wayedges.color import ParseColorError, color_transition, parse_color

red = parse_color("#f00")                          # Color(255, 0, 0, 255)
half_green = parse_color("hsla(120, 100%, 50%, 0.5)")  # Color(0, 255, 0, 128)
between = color_transition(red, half_green, 0.25)

try:
    parse_color("not a colour")
except ParseColorError as err:
    print("bad colour:", err)
```

### Templates

A `{float}` placeholder takes an optional precision and multiplier, as in
`{float:3,100}`; with no argument it prints two decimals.

```python
from wayedges.template.args import FloatArg, FloatArgProcessor, RingPresetArgProcessor
from wayedges.template.base import Template, TemplateProcessor

processors = (
    TemplateProcessor()
    .add_processor(FloatArgProcessor())
    .add_processor(RingPresetArgProcessor())
)

template = Template.from_str("{preset} at {float:2,100}%", processors)


def fill(arg):
    if isinstance(arg, FloatArg):
        return arg.format(0.5125)
    return "CPU"


print(template.render(fill))  # CPU at 51.25%
```

### Drawing

```python
from wayedges.draw import draw_rect_path

# Rounded top-left and bottom-right corners only.
path = draw_rect_path(8.0, (120.0, 40.0), (True, False, True, False))
```

### Command line

```python
from wayedges.cli import parse_args

cli = parse_args(["togglepin", "bar:clock"])
print(cli.command.ipc_body())  # {'command': 'togglepin', 'args': ['bar', 'clock']}
```