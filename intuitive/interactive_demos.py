"""Demo applications for layout, mouse input, scroll bars, toasts and a todo list."""

from __future__ import annotations

import shutil
from typing import Callable, Optional

from intuitive.component import (
    Alignment,
    Color,
    Component,
    PaddingConfig,
    Ref,
    Style,
    ToastPosition,
)
from intuitive.widgets import (
    InputConfig,
    ListConfig,
    ScrollConfig,
    StackConfig,
    TextConfig,
    ToastConfig,
    aligned_hstack,
    aligned_vstack,
    button,
    hstack,
    input_field,
    list_view,
    padded,
    scroll_view,
    text,
    toast,
    vstack,
    vstack_array,
)

ChangeHook = Optional[Callable[[], None]]

LAYOUT_RESERVED_ROWS = 6
SAMPLE_LINES = 15
SCROLLBAR_VIEW_HEIGHT = 8
MOUSE_LIST_VISIBLE = 8
MESSAGE_LIMIT = 127
MAX_TODOS = 20
TODO_LENGTH = 256

MOUSE_ITEMS = (
    "📋 Item 1 - Click me!",
    "📋 Item 2 - Or me!",
    "📋 Item 3 - Try scrolling too!",
    "📋 Item 4 - Scroll with mouse wheel",
    "📋 Item 5 - Or use arrow keys",
    "📋 Item 6 - Mouse and keyboard both work",
    "📋 Item 7 - Keep scrolling...",
    "📋 Item 8 - Still more items below",
    "📋 Item 9 - Getting closer",
    "📋 Item 10 - Halfway there!",
    "📋 Item 11 - More to go",
    "📋 Item 12 - Keep going",
    "📋 Item 13 - Almost done",
    "📋 Item 14 - One more",
    "📋 Item 15 - You found me!",
    "📋 Item 16 - Wait, there's more?",
    "📋 Item 17 - Yes, more items",
    "📋 Item 18 - Keep scrolling",
    "📋 Item 19 - Nearly at the end",
    "📋 Item 20 - This is the last one!",
)

_TITLE = TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD)
_DIM = TextConfig(fg_color=Color.BRIGHT_BLACK)
_SECTION = TextConfig(fg_color=Color.BRIGHT_YELLOW)
_BOXED = TextConfig(fg_color=Color.WHITE, bg_color=Color.BLUE)


class _Notifying:
    """Base for demos whose actions ask for a redraw."""

    def __init__(self, on_change: ChangeHook = None) -> None:
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()


def sample_content() -> Component:
    """Fifteen numbered lines used to fill a scroll view."""
    return vstack_array(text(f"Line {i}") for i in range(1, SAMPLE_LINES + 1))


def _three_texts() -> list[Component]:
    return [text("Short"), text("Medium text"), text("This is a longer piece of text")]


def _boxes() -> list[Component]:
    return [text("[Box 1]"), text("[Box 2]"), text("[Box 3]")]


def _columns() -> list[Component]:
    return [
        vstack(text("A"), text("B"), text("C")),
        vstack(text("1")),
        vstack(text("X"), text("Y")),
    ]


class LayoutDemo:
    """Alignment, spacing and padding shown inside a scrolling viewport."""

    def __init__(self) -> None:
        self.scroll_offset: Ref[int] = Ref(0)

    def _content(self) -> Component:
        return vstack(
            text("1. Horizontal Alignment in VStack", _SECTION),
            text(""),
            text("Left aligned (default):"),
            aligned_vstack(StackConfig(children=_three_texts(), alignment=Alignment.START)),
            text(""),
            text("Center aligned:"),
            aligned_vstack(StackConfig(children=_three_texts(), alignment=Alignment.CENTER)),
            text(""),
            text("Right aligned:"),
            aligned_vstack(StackConfig(children=_three_texts(), alignment=Alignment.END)),
            text(""),
            text("2. Spacing Between Children", _SECTION),
            text(""),
            text("No spacing:"),
            vstack(*_boxes()),
            text(""),
            text("Spacing = 1:"),
            aligned_vstack(StackConfig(children=_boxes(), alignment=Alignment.START, spacing=1)),
            text(""),
            text("3. Padding", _SECTION),
            text(""),
            text("No padding:"),
            text("Content", _BOXED),
            text(""),
            text("Padding all sides (2):"),
            padded(text("Content", _BOXED), PaddingConfig(top=2, bottom=2, left=2, right=2)),
            text(""),
            text("Padding left/right only:"),
            padded(text("Content", _BOXED), PaddingConfig(top=0, bottom=0, left=4, right=4)),
            text(""),
            text("4. Vertical Alignment in HStack", _SECTION),
            text(""),
            text("Top aligned (default):"),
            aligned_hstack(StackConfig(children=_columns(), alignment=Alignment.START, spacing=2)),
            text(""),
            text("Center aligned:"),
            aligned_hstack(StackConfig(children=_columns(), alignment=Alignment.CENTER, spacing=2)),
            text(""),
            text("Bottom aligned:"),
            aligned_hstack(StackConfig(children=_columns(), alignment=Alignment.END, spacing=2)),
            text(""),
        )

    def build(self, terminal_height: Optional[int] = None) -> Component:
        """Build the view; the viewport takes all rows but the fixed ones."""
        if terminal_height is None:
            terminal_height = shutil.get_terminal_size().lines
        viewport_height = max(terminal_height - LAYOUT_RESERVED_ROWS, 1)
        return vstack(
            text("=== Layout System Demo ===", _TITLE),
            text(""),
            text("Use ↑↓ arrow keys or mouse wheel to scroll", _SECTION),
            text(""),
            scroll_view(
                self._content(),
                self.scroll_offset,
                ScrollConfig(max_height=viewport_height, show_indicators=True, show_arrows=True),
            ),
            text(""),
            text("Press 'q' to quit", _DIM),
        )


class MouseDemo(_Notifying):
    """Buttons and a long list that react to clicks and the wheel."""

    def __init__(self, on_change: ChangeHook = None) -> None:
        super().__init__(on_change)
        self.click_count = 0
        self.selected_item: Ref[int] = Ref(0)
        self.list_scroll: Ref[int] = Ref(0)
        self.message = "Welcome! Click the buttons or list items."

    def _say(self, message: str) -> None:
        self.message = message[:MESSAGE_LIMIT]
        self._changed()

    def click(self) -> None:
        self.click_count += 1
        plural = "" if self.click_count == 1 else "s"
        self._say(f"Button clicked {self.click_count} time{plural}!")

    def reset_counter(self) -> None:
        self.click_count = 0
        self._say("Counter reset!")

    def select_item(self, index: int) -> None:
        self._say(f"You clicked item #{index + 1}")

    def scroll_info(self) -> str:
        """Describe which items the list currently shows."""
        scroll = self.list_scroll.value
        total = len(MOUSE_ITEMS)
        last = min(scroll + MOUSE_LIST_VISIBLE, total)
        return f"Showing items {scroll + 1}-{last} of {total} (scroll: {scroll})"

    def build(self) -> Component:
        return vstack(
            text("=== Mouse Support Demo ===", _TITLE),
            text(""),
            text("🖱️  This demo showcases mouse interaction!", _SECTION),
            text(""),
            text("Try clicking the buttons:"),
            hstack(
                button("Click Me!", self.click),
                text("  "),
                button("Reset Counter", self.reset_counter),
            ),
            text(f"Click count: {self.click_count}"),
            text(""),
            text("Try clicking items in the list:"),
            text("(Press Tab to focus, then use ↑↓ arrow keys or mouse wheel ▲▼)", _DIM),
            text(self.scroll_info(), TextConfig(fg_color=Color.YELLOW)),
            list_view(
                ListConfig(
                    items=MOUSE_ITEMS,
                    max_visible=MOUSE_LIST_VISIBLE,
                    scroll_offset=self.list_scroll,
                    selected_index=self.selected_item,
                    on_select=self.select_item,
                )
            ),
            text(""),
            text(self.message, TextConfig(fg_color=Color.BRIGHT_GREEN)),
            text(""),
            text("Press 'q' to quit", _DIM),
        )


class ScrollbarDemo:
    """Three scroll views side by side with different scroll bar characters."""

    def __init__(self) -> None:
        self.scroll1: Ref[int] = Ref(0)
        self.scroll2: Ref[int] = Ref(0)
        self.scroll3: Ref[int] = Ref(0)

    def build(self) -> Component:
        bold = TextConfig(style=Style.BOLD)
        green = TextConfig(fg_color=Color.BRIGHT_GREEN)
        return vstack(
            text("=== ScrollBar Customization Demo ===", _TITLE),
            text(""),
            text("Tab between scroll views, use ↑↓ or mouse wheel to scroll", _SECTION),
            text(""),
            hstack(
                vstack(
                    text("Default Style:", bold),
                    text("█ / ▓ / │ + arrows"),
                    text(""),
                    scroll_view(
                        sample_content(),
                        self.scroll1,
                        ScrollConfig(
                            max_height=SCROLLBAR_VIEW_HEIGHT,
                            show_indicators=True,
                            show_arrows=True,
                        ),
                    ),
                ),
                text("    "),
                vstack(
                    text("Square Style:", bold),
                    text("■ / □ / ┆ no arrows"),
                    text(""),
                    scroll_view(
                        sample_content(),
                        self.scroll2,
                        ScrollConfig(
                            max_height=SCROLLBAR_VIEW_HEIGHT,
                            show_indicators=True,
                            thumb_focused="■",
                            thumb_unfocused="□",
                            track_char="┆",
                            show_arrows=False,
                        ),
                    ),
                ),
                text("    "),
                vstack(
                    text("Circle Style:", bold),
                    text("● / ○ / ┊ + arrows"),
                    text(""),
                    scroll_view(
                        sample_content(),
                        self.scroll3,
                        ScrollConfig(
                            max_height=SCROLLBAR_VIEW_HEIGHT,
                            show_indicators=True,
                            thumb_focused="●",
                            thumb_unfocused="○",
                            track_char="┊",
                            show_arrows=True,
                        ),
                    ),
                ),
            ),
            text(""),
            text("Other options you can try:"),
            text("  • thumb_focused: █ ■ ● ◆ ▮ ▪ ◼", green),
            text("  • thumb_unfocused: ▓ □ ○ ◇ ▯ ▫ ◻", green),
            text("  • track_char: │ ┆ ┊ ╎ ╏ ║ |", green),
            text(""),
            text("Press 'q' to quit", _DIM),
        )


class ToastDemo:
    """Buttons that pop up notifications in four screen positions."""

    def __init__(self) -> None:
        self.show_toast_bottom: Ref[bool] = Ref(False)
        self.show_toast_top: Ref[bool] = Ref(False)
        self.show_toast_top_right: Ref[bool] = Ref(False)
        self.show_toast_bottom_right: Ref[bool] = Ref(False)

    def show_bottom(self) -> None:
        self.show_toast_bottom.value = True

    def show_top(self) -> None:
        self.show_toast_top.value = True

    def show_top_right(self) -> None:
        self.show_toast_top_right.value = True

    def show_bottom_right(self) -> None:
        self.show_toast_bottom_right.value = True

    def _close_toast(self) -> None:
        """Called when a toast is dismissed; nothing further to do."""

    def build(self) -> Component:
        def notice(message: str, flag: Ref[bool], position: ToastPosition) -> Component:
            return toast(
                ToastConfig(
                    message=message,
                    is_visible=flag,
                    position=position,
                    on_close=self._close_toast,
                )
            )

        return vstack(
            text("=== TOAST NOTIFICATION DEMO ===", _TITLE),
            text(""),
            text("Click buttons to show toasts at different positions:"),
            text("Toasts auto-dismiss after 2 seconds with smooth slide animations", _DIM),
            text(""),
            hstack(
                button("Bottom", self.show_bottom),
                text("  "),
                button("Top", self.show_top),
                text("  "),
                button("Top Right", self.show_top_right),
                text("  "),
                button("Bottom Right", self.show_bottom_right),
            ),
            text(""),
            text("Tab to navigate, Enter/Space to activate, q to quit", _DIM),
            notice("File saved successfully!", self.show_toast_bottom, ToastPosition.BOTTOM),
            notice("Task completed!", self.show_toast_top, ToastPosition.TOP),
            notice("New message received", self.show_toast_top_right, ToastPosition.TOP_RIGHT),
            notice("Download complete!", self.show_toast_bottom_right, ToastPosition.BOTTOM_RIGHT),
        )


class TodoApp(_Notifying):
    """A list of up to twenty items entered through a text field."""

    def __init__(self, on_change: ChangeHook = None) -> None:
        super().__init__(on_change)
        self.items: list[str] = []
        self.input_buffer: Ref[str] = Ref("")

    def add_todo(self) -> None:
        """Move the typed text into the list, if there is any and room for it."""
        if self.input_buffer.value and len(self.items) < MAX_TODOS:
            self.items.append(self.input_buffer.value[: TODO_LENGTH - 1])
            self.input_buffer.value = ""
            self._changed()

    def clear_all(self) -> None:
        self.items.clear()
        self._changed()

    def build(self) -> Component:
        children: list[Component] = [
            text(f"TODO List ({len(self.items)}/{MAX_TODOS} items)"),
            text(""),
            hstack(
                text("Add: "),
                input_field(InputConfig(buffer=self.input_buffer, size=TODO_LENGTH)),
                text(" "),
                button("Add", self.add_todo),
            ),
            text(""),
        ]

        if self.items:
            children.append(text("Items:"))
            children += [text(f"  {n}. {item}") for n, item in enumerate(self.items, start=1)]
            children += [text(""), button("Clear All", self.clear_all)]
        else:
            children.append(text("No items yet. Add one above!"))

        children += [
            text(""),
            text("Controls:"),
            text("  Tab: Navigate between fields"),
            text("  Enter: Add item / Activate button"),
            text("  q: Quit"),
        ]
        return vstack_array(children)