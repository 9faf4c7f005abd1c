# intuitive

A small declarative component model for terminal user interfaces. You
describe a screen as a tree of components — text, vertical and horizontal
stacks, buttons, input fields, lists, modals, scroll views, tables,
padding, spacers, spinners and toasts — and rebuild that tree from your
application state whenever the state changes.

The package has no dependencies outside the standard library.

## What is inside

- `intuitive.component` — the `Component` tree node with its
  `ComponentType`, the per-widget data records (`TextData`, `ButtonData`,
  `InputData`, `ListData`, `ModalData`, `ScrollViewData`, `TableData`,
  `StackData`, `PaddingData`, `SpinnerData`, `ToastData`), `PaddingConfig`,
  and the enums `Color`, `Style`, `Alignment`, `SpinnerStyle` and
  `ToastPosition`. `Ref` is a mutable cell holding state that a widget
  shares with the application, such as a scroll offset, a selected index
  or an "is open" flag. `Component.add_child` appends a child and
  `Component.walk` yields a node and everything beneath it, including the
  content held by modals, scroll views and padding.
- `intuitive.widgets` — builder functions that create components:
  `text`, `vstack`, `vstack_array`, `hstack`, `aligned_vstack`,
  `aligned_hstack`, `button`, `input_field`, `list_view`, `modal`,
  `padded`, `scroll_view`, `spacer`, `spinner`, `table` and `toast`,
  with their config classes (`TextConfig`, `StackConfig`, `InputConfig`,
  `ListConfig`, `ModalConfig`, `ScrollConfig`, `SpinnerConfig`,
  `TableConfig`, `ToastConfig`). Builders raise `ValueError` or
  `TypeError` when given missing or invalid input (an empty list, a table
  without rows, a scroll view with no positive height, and so on).
  `spinner_frames` returns the frame sequence for a `SpinnerStyle`.
- `intuitive.animation` — easing functions (`ease_linear`, `ease_in`,
  `ease_out`, `ease_in_out`, chosen through `Easing` and
  `get_easing_function`), a time-based `Animation`, an `AnimationManager`
  that updates many animations and drops finished ones, a `FrameLimiter`
  for frame-rate limiting, and the timing helpers `get_time_us` and
  `delta_time`. Each of these takes an optional `clock` so time can be
  supplied from outside.
- `intuitive.events` — key codes (`Key`), `EventType`, `MouseButton`,
  `MouseAction` and the `Event` record, with helpers `key_event`,
  `mouse_event` and `quit_event`.
- Ready-made screens built on the above:
  - `intuitive.basic_demos`: `hello_world`, `styling_demo`, `table_demo`,
    `stat_bar`, `Counter`, `Dashboard`, `ScrollViewDemo`, `SpinnerDemo`
    and `KeyTest`.
  - `intuitive.interactive_demos`: `sample_content`, `LayoutDemo`,
    `MouseDemo`, `ScrollbarDemo`, `ToastDemo` and `TodoApp`.
  - `intuitive.file_manager`: `FileManager`, a directory browser that
    lists directories before files and opens directories on selection,
    plus the helpers `display_name` and `sort_entries`.
  - `intuitive.sysmon`: `SystemMonitor`, which samples CPU, memory and
    the busiest processes and can refresh itself on a background thread
    (`start` / `stop`). Its readers run `sysctl`, `vm_stat` and `ps`, so
    live figures are only available where those commands exist (macOS);
    elsewhere they read as zero. Readers can be replaced through the
    constructor.

Stateful screens have a `build()` method that returns a fresh tree from
their current state; most accept an `on_change` callback that is called
whenever an action changes that state.

## Building a tree

```python
from intuitive.component import Color, Style
from intuitive.widgets import TextConfig, button, hstack, text, vstack

count = 0

def increment():
    global count
    count += 1

def screen():
    return vstack(
        text("Counter Example", TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD)),
        text(f"Count: {count}"),
        hstack(
            button("+", increment),
            text("  "),
        ),
    )

root = screen()
for node in root.walk():
    print(node.type)
```

Every builder returns a `Component`. Containers keep their children in
order, and `None` entries given to the stack builders are skipped.

## Animations

```python
from intuitive.animation import Animation, AnimationManager, Easing

manager = AnimationManager()
slide = Animation(0.0, 10.0, 200, Easing.OUT)
slide.start()
manager.add(slide)

while manager.update():
    ...  # redraw using slide.value

manager.cleanup()
```

An animation runs for its duration in milliseconds, moving its value from
start to end along the chosen easing curve; `update()` returns `False` once
the duration has passed and the value has reached its end.

## What this package does not do

It builds and holds component trees, but it does not draw them. There is
no terminal driver, no layout pass that fills in the `x`, `y`, `width` and
`height` fields, no renderer, no focus handling and no event loop that
reads keys or mouse input and dispatches them to components. The demo
screens therefore produce trees and react to method calls; they are not
runnable full-screen programs, and the package installs no commands.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.