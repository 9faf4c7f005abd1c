"""Small demo applications: counter, dashboard, styling, tables and more."""

from __future__ import annotations

from typing import Callable, Optional

from intuitive.component import Color, Component, Ref, Style
from intuitive.widgets import (
    ListConfig,
    ModalConfig,
    ScrollConfig,
    SpinnerConfig,
    SpinnerStyle,
    TableConfig,
    TextConfig,
    button,
    hstack,
    list_view,
    modal,
    scroll_view,
    spinner,
    table,
    text,
    vstack,
    vstack_array,
)

ChangeHook = Optional[Callable[[], None]]

BAR_WIDTH = 20
PROGRESS_STEP = 5.0
SCROLL_DEMO_LINES = 20
SCROLL_DEMO_HEIGHT = 10
KEY_NAME_LIMIT = 255

RECENT_EVENTS = (
    "System started successfully",
    "Network connection established",
    "Background task completed",
    "Cache cleaned (2.3 GB freed)",
    "Update check completed",
)


class _Stateful:
    """Base for demos whose callbacks ask for a redraw."""

    def __init__(self, on_change: ChangeHook = None) -> None:
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()


def hello_world() -> Component:
    """A greeting with a hint on how to quit."""
    return vstack(
        text("Hello, inTUItive!"),
        text("Welcome to declarative TUI"),
        text(""),
        hstack(text("["), text("Press 'q' to quit"), text("]")),
    )


def styling_demo() -> Component:
    """Text in every supported colour and style."""
    return vstack(
        text("inTUItive Styling Demo", TextConfig(style=Style.BOLD)),
        text(""),
        text("=== Colors ==="),
        text("Red text", TextConfig(fg_color=Color.RED)),
        text("Green text", TextConfig(fg_color=Color.GREEN)),
        text("Blue text", TextConfig(fg_color=Color.BLUE)),
        text("Yellow text", TextConfig(fg_color=Color.YELLOW)),
        text("Magenta text", TextConfig(fg_color=Color.MAGENTA)),
        text("Cyan text", TextConfig(fg_color=Color.CYAN)),
        text(""),
        text("=== Bright Colors ==="),
        text("Bright Red text", TextConfig(fg_color=Color.BRIGHT_RED)),
        text("Bright Green text", TextConfig(fg_color=Color.BRIGHT_GREEN)),
        text("Bright Blue text", TextConfig(fg_color=Color.BRIGHT_BLUE)),
        text("Bright Yellow text", TextConfig(fg_color=Color.BRIGHT_YELLOW)),
        text(""),
        text("=== Styles ==="),
        text("Bold text", TextConfig(style=Style.BOLD)),
        text("Underlined text", TextConfig(style=Style.UNDERLINE)),
        text("Bold and underlined", TextConfig(style=Style.BOLD | Style.UNDERLINE)),
        text(""),
        text("=== Combined Styling ==="),
        text("Bold Red Error", TextConfig(fg_color=Color.RED, style=Style.BOLD)),
        text("Bold Green Success", TextConfig(fg_color=Color.GREEN, style=Style.BOLD)),
        text("Underlined Blue Link", TextConfig(fg_color=Color.BLUE, style=Style.UNDERLINE)),
        text(""),
        text("=== Background Colors ==="),
        text(" White on Red ", TextConfig(fg_color=Color.WHITE, bg_color=Color.RED)),
        text(" Black on Yellow ", TextConfig(fg_color=Color.BLACK, bg_color=Color.YELLOW)),
        text(" White on Blue ", TextConfig(fg_color=Color.WHITE, bg_color=Color.BLUE)),
        text(""),
        text("Press 'q' to quit"),
    )


def table_demo() -> Component:
    """Two tables, one with borders and one without."""
    people = table(
        TableConfig(
            headers=["Name", "Age", "City", "Status"],
            rows=[
                ["Alice", "30", "New York", "Active"],
                ["Bob", "25", "Los Angeles", "Active"],
                ["Charlie", "35", "Chicago", "Inactive"],
            ],
            show_borders=True,
        )
    )
    products = table(
        TableConfig(
            headers=["Product", "Price", "Stock"],
            rows=[
                ["Laptop", "$999", "15"],
                ["Mouse", "$29", "50"],
                ["Keyboard", "$79", "30"],
            ],
            show_borders=False,
        )
    )
    return vstack(
        text("=== Table Component Demo ===", TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD)),
        text(""),
        text("Table with borders:"),
        people,
        text(""),
        text("Table without borders:"),
        products,
        text(""),
        text("Press 'q' to quit", TextConfig(fg_color=Color.BRIGHT_GREEN)),
    )


def stat_bar(label: str, percentage: int, color: Color) -> Component:
    """A labelled twenty-cell usage bar with its percentage."""
    filled = int(percentage * BAR_WIDTH / 100)
    bar = "".join("=" if i < filled else "-" for i in range(BAR_WIDTH))
    return hstack(
        text(label),
        text(": ["),
        text(bar, TextConfig(fg_color=color)),
        text("] "),
        text(f"{percentage:3d}%", TextConfig(style=Style.BOLD)),
    )


class Counter(_Stateful):
    """A number changed by three buttons."""

    def __init__(self, on_change: ChangeHook = None) -> None:
        super().__init__(on_change)
        self.count = 0

    def increment(self) -> None:
        self.count += 1
        self._changed()

    def decrement(self) -> None:
        self.count -= 1
        self._changed()

    def reset(self) -> None:
        self.count = 0
        self._changed()

    def build(self) -> Component:
        return vstack(
            text("Counter Example"),
            text(""),
            text(f"Count: {self.count}"),
            text(""),
            hstack(
                button("-", self.decrement),
                text("  "),
                button("+", self.increment),
                text("  "),
                button("Reset", self.reset),
            ),
            text(""),
            text("Press Tab to navigate, Enter to activate"),
            text("Press 'q' to quit"),
        )


class Dashboard(_Stateful):
    """Resource bars, recent events and help/about dialogs."""

    def __init__(
        self,
        cpu_usage: int = 42,
        memory_usage: int = 68,
        disk_usage: int = 73,
        on_change: ChangeHook = None,
    ) -> None:
        super().__init__(on_change)
        self.cpu_usage = cpu_usage
        self.memory_usage = memory_usage
        self.disk_usage = disk_usage
        self.show_help: Ref[bool] = Ref(False)
        self.show_about: Ref[bool] = Ref(False)

    def toggle_help(self) -> None:
        self.show_help.value = not self.show_help.value
        self._changed()

    def toggle_about(self) -> None:
        self.show_about.value = not self.show_about.value
        self._changed()

    def close_modal(self) -> None:
        self.show_help.value = False
        self.show_about.value = False
        self._changed()

    def _main(self) -> Component:
        heading = TextConfig(fg_color=Color.BRIGHT_YELLOW)
        return vstack(
            text("=== System Dashboard ===", TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD)),
            text(""),
            text("System Resources:", heading),
            stat_bar("CPU    ", self.cpu_usage, Color.GREEN),
            stat_bar("Memory ", self.memory_usage, Color.YELLOW),
            stat_bar("Disk   ", self.disk_usage, Color.RED),
            text(""),
            text("Recent Events:", heading),
            list_view(ListConfig(items=RECENT_EVENTS, max_visible=10)),
            text(""),
            hstack(
                button("Help", self.toggle_help),
                text("  "),
                button("About", self.toggle_about),
            ),
            text(""),
            text("Press 'q' to quit"),
        )

    def _help_content(self) -> Component:
        return vstack(
            text("Dashboard Help"),
            text(""),
            text("Navigation:", TextConfig(fg_color=Color.BRIGHT_GREEN)),
            text("  Tab - Switch between buttons"),
            text("  Enter - Activate button"),
            text("  Esc - Close modal"),
            text("  q - Quit application"),
            text(""),
            text("Press any key to close..."),
        )

    def _about_content(self) -> Component:
        return vstack(
            text("inTUItive Framework", TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD)),
            text(""),
            text("Version: 0.2.0 (Phase 2)"),
            text(""),
            text("Features:", TextConfig(fg_color=Color.BRIGHT_GREEN)),
            text("  * Declarative UI"),
            text("  * Colors & Styling"),
            text("  * Interactive Components"),
            text("  * Modal Dialogs"),
            text("  * List Views"),
            text(""),
            text("intuitive-tui", TextConfig(style=Style.UNDERLINE)),
            text(""),
            text("Press any key to close..."),
        )

    def build(self) -> Component:
        main_ui = self._main()
        if self.show_help.value:
            return vstack(
                main_ui,
                modal(
                    ModalConfig(
                        is_open=self.show_help,
                        title="Help",
                        content=self._help_content(),
                        on_close=self.close_modal,
                    )
                ),
            )
        if self.show_about.value:
            return vstack(
                main_ui,
                modal(
                    ModalConfig(
                        is_open=self.show_about,
                        title="About",
                        content=self._about_content(),
                        on_close=self.close_modal,
                    )
                ),
            )
        return main_ui


class ScrollViewDemo:
    """Twenty lines of content shown through a ten-line viewport."""

    def __init__(self) -> None:
        self.scroll_pos: Ref[int] = Ref(0)

    def build(self) -> Component:
        long_content = vstack_array(
            text(f"Line {i} - This is some content") for i in range(1, SCROLL_DEMO_LINES + 1)
        )
        return vstack(
            text("ScrollView Demo", TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD)),
            text(""),
            text(f"Scroll position: {self.scroll_pos.value}"),
            text("Content (showing 10 of 20 lines):"),
            scroll_view(
                long_content,
                self.scroll_pos,
                ScrollConfig(max_height=SCROLL_DEMO_HEIGHT, show_indicators=True),
            ),
            text(""),
            text("Controls:", TextConfig(fg_color=Color.BRIGHT_GREEN)),
            text("  Tab - Focus scrollview"),
            text("  Up/Down arrows - Scroll"),
            text("  q - Quit"),
        )


class SpinnerDemo(_Stateful):
    """Every spinner style, plus one showing adjustable progress."""

    def __init__(self, on_change: ChangeHook = None) -> None:
        super().__init__(on_change)
        self.progress: Ref[float] = Ref(0.0)

    def increment_progress(self) -> None:
        self.progress.value += PROGRESS_STEP
        if self.progress.value > 100.0:
            self.progress.value = 0.0
        self._changed()

    def decrement_progress(self) -> None:
        self.progress.value -= PROGRESS_STEP
        if self.progress.value < 0.0:
            self.progress.value = 100.0
        self._changed()

    def build(self) -> Component:
        def labelled(label: str, style: SpinnerStyle, speed: int) -> Component:
            return hstack(text(label), spinner(SpinnerConfig(style=style, speed=speed)))

        return vstack(
            text("=== SPINNER DEMO ===", TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD)),
            text(""),
            text("Basic Spinners:"),
            text(""),
            labelled("Braille:  ", SpinnerStyle.BRAILLE, 80),
            labelled("Classic:  ", SpinnerStyle.CLASSIC, 100),
            labelled("Dots:     ", SpinnerStyle.DOTS, 80),
            labelled("Box:      ", SpinnerStyle.BOX, 120),
            labelled("Arrow:    ", SpinnerStyle.ARROW, 100),
            text(""),
            text("Spinners with Text:"),
            text(""),
            spinner(SpinnerConfig(style=SpinnerStyle.BRAILLE, speed=80, text="Loading data...")),
            spinner(SpinnerConfig(style=SpinnerStyle.DOTS, speed=80, text="Processing...")),
            text(""),
            text("Spinner with Progress:"),
            text(""),
            spinner(
                SpinnerConfig(
                    style=SpinnerStyle.BRAILLE,
                    speed=80,
                    text="Downloading",
                    progress=self.progress,
                )
            ),
            text(""),
            hstack(
                button("-5%", self.decrement_progress),
                text("  "),
                button("+5%", self.increment_progress),
            ),
            text(""),
            text(
                "Tab to focus buttons, +/- to change progress, q to quit",
                TextConfig(fg_color=Color.BRIGHT_BLACK),
            ),
        )


class KeyTest(_Stateful):
    """Shows the code and name of the last key pressed."""

    def __init__(self, on_change: ChangeHook = None) -> None:
        super().__init__(on_change)
        self.last_code = 0
        self.last_key = ""

    def record(self, code: int, name: str = "") -> None:
        """Remember a key press."""
        self.last_code = int(code)
        self.last_key = name[:KEY_NAME_LIMIT]
        self._changed()

    def info(self) -> str:
        shown = chr(self.last_code) if 32 <= self.last_code < 127 else "?"
        return f"Last key code: {self.last_code} (char: '{shown}') [{self.last_key}]"

    def build(self) -> Component:
        return vstack(
            text("Key Test - Press keys to see codes"),
            text(""),
            text(self.info()),
            text(""),
            button("Test Button", lambda: None),
            text(""),
            text("Press 'q' to quit"),
        )