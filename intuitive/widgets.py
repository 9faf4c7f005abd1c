"""Constructors for every kind of UI component, with their configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

from intuitive.component import (
    Alignment,
    ButtonData,
    Callback,
    Color,
    Component,
    ComponentType,
    InputData,
    ListData,
    ModalData,
    PaddingConfig,
    PaddingData,
    Ref,
    ScrollViewData,
    SpinnerData,
    SpinnerStyle,
    StackData,
    Style,
    TableData,
    TextData,
    ToastData,
    ToastPosition,
)

DEFAULT_LIST_VISIBLE = 10
DEFAULT_SPINNER_SPEED_MS = 100
DEFAULT_THUMB_FOCUSED = "█"
DEFAULT_THUMB_UNFOCUSED = "▓"
DEFAULT_TRACK_CHAR = "│"

_SPINNER_FRAMES: dict[SpinnerStyle, tuple[str, ...]] = {
    SpinnerStyle.BRAILLE: ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"),
    SpinnerStyle.CLASSIC: ("|", "/", "-", "\\"),
    SpinnerStyle.DOTS: ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷"),
    SpinnerStyle.BOX: ("◰", "◳", "◲", "◱"),
    SpinnerStyle.ARROW: ("←", "↖", "↑", "↗", "→", "↘", "↓", "↙"),
}


@dataclass
class TextConfig:
    fg_color: Color = Color.DEFAULT
    bg_color: Color = Color.DEFAULT
    style: Style = Style.NONE


@dataclass
class StackConfig:
    children: Sequence[Optional[Component]] = ()
    alignment: Alignment = Alignment.START
    spacing: int = 0


@dataclass
class InputConfig:
    buffer: Ref[str]
    size: int


@dataclass
class ListConfig:
    items: Sequence[str]
    max_visible: int = 0
    scroll_offset: Optional[Ref[int]] = None
    selected_index: Optional[Ref[int]] = None
    on_select: Optional[Callable[[int], None]] = None


@dataclass
class ModalConfig:
    is_open: Ref[bool]
    content: Component
    title: Optional[str] = None
    on_close: Optional[Callback] = None


@dataclass
class ScrollConfig:
    max_height: int
    show_indicators: bool = False
    thumb_focused: Optional[str] = None
    thumb_unfocused: Optional[str] = None
    track_char: Optional[str] = None
    show_arrows: bool = False


@dataclass
class SpinnerConfig:
    style: SpinnerStyle = SpinnerStyle.BRAILLE
    speed: int = 0
    text: Optional[str] = None
    progress: Optional[Ref[float]] = None


@dataclass
class TableConfig:
    headers: Sequence[str]
    rows: Sequence[Sequence[str]]
    show_borders: bool = False


@dataclass
class ToastConfig:
    message: str
    is_visible: Ref[bool]
    position: ToastPosition = ToastPosition.BOTTOM
    on_close: Optional[Callback] = field(default=None)


def _stack(kind: ComponentType, children: Iterable[Optional[Component]]) -> Component:
    node = Component(kind)
    for child in children:
        if child is not None:
            node.add_child(child)
    return node


def text(content: str, config: Optional[TextConfig] = None) -> Component:
    """A line of styled text."""
    if not isinstance(content, str):
        raise TypeError("text content must be a string")
    config = config or TextConfig()
    return Component(
        ComponentType.TEXT,
        data=TextData(content),
        fg_color=config.fg_color,
        bg_color=config.bg_color,
        style=config.style,
    )


def vstack(*args: Optional[Component]) -> Component:
    """Stack the given components vertically; ``None`` entries are skipped."""
    return _stack(ComponentType.VSTACK, args)


def vstack_array(children: Iterable[Optional[Component]]) -> Component:
    """Stack the components of an iterable vertically; ``None`` entries are skipped."""
    return _stack(ComponentType.VSTACK, children)


def hstack(*args: Optional[Component]) -> Component:
    """Place the given components side by side; ``None`` entries are skipped."""
    return _stack(ComponentType.HSTACK, args)


def aligned_vstack(config: StackConfig) -> Component:
    """A vertical stack with alignment and spacing."""
    node = _stack(ComponentType.VSTACK, config.children)
    node.data = StackData(alignment=config.alignment, spacing=config.spacing)
    return node


def aligned_hstack(config: StackConfig) -> Component:
    """A horizontal stack with alignment and spacing."""
    node = _stack(ComponentType.HSTACK, config.children)
    node.data = StackData(alignment=config.alignment, spacing=config.spacing)
    return node


def button(label: str, on_click: Optional[Callback] = None) -> Component:
    """A focusable button that calls ``on_click`` when activated."""
    if not isinstance(label, str):
        raise TypeError("button label must be a string")
    return Component(
        ComponentType.BUTTON,
        data=ButtonData(label=label, on_click=on_click),
        focusable=True,
    )


def input_field(config: InputConfig) -> Component:
    """A focusable text input editing the shared ``config.buffer``."""
    if config.buffer is None or config.size <= 0:
        raise ValueError("input needs a buffer and a positive size")
    data = InputData(
        buffer=config.buffer,
        buffer_size=config.size,
        cursor_pos=len(config.buffer.value),
    )
    return Component(ComponentType.INPUT, data=data, focusable=True)


def list_view(config: ListConfig) -> Component:
    """A scrolling list; focusable when it tracks a selected index."""
    if not config.items:
        raise ValueError("list needs at least one item")
    data = ListData(
        items=[str(item) for item in config.items],
        scroll_offset=config.scroll_offset,
        max_visible_items=config.max_visible if config.max_visible > 0 else DEFAULT_LIST_VISIBLE,
        selected_index=config.selected_index,
        on_select=config.on_select,
    )
    return Component(
        ComponentType.LIST,
        data=data,
        focusable=config.selected_index is not None,
    )


def modal(config: ModalConfig) -> Component:
    """A dialog shown over the rest of the interface."""
    if config.is_open is None or config.content is None:
        raise ValueError("modal needs an open flag and content")
    data = ModalData(
        is_open=config.is_open,
        content=config.content,
        title=config.title,
        on_close=config.on_close,
    )
    return Component(ComponentType.MODAL, data=data)


def padded(child: Component, padding: Optional[PaddingConfig] = None) -> Component:
    """Wrap ``child`` with blank space, taking over any styling it has."""
    if child is None:
        raise ValueError("padding needs a child")
    node = Component(
        ComponentType.PADDING,
        data=PaddingData(child=child, padding=padding or PaddingConfig()),
    )
    if child.fg_color != Color.DEFAULT:
        node.fg_color = child.fg_color
    if child.bg_color != Color.DEFAULT:
        node.bg_color = child.bg_color
    if child.style != Style.NONE:
        node.style = child.style
    return node


def scroll_view(content: Component, scroll_offset: Ref[int], config: ScrollConfig) -> Component:
    """A focusable viewport showing at most ``config.max_height`` rows of content."""
    if content is None or scroll_offset is None or config.max_height <= 0:
        raise ValueError("scroll view needs content, a scroll offset and a positive height")
    data = ScrollViewData(
        content=content,
        scroll_offset=scroll_offset,
        max_visible_height=config.max_height,
        show_indicators=config.show_indicators,
        thumb_focused=config.thumb_focused or DEFAULT_THUMB_FOCUSED,
        thumb_unfocused=config.thumb_unfocused or DEFAULT_THUMB_UNFOCUSED,
        track_char=config.track_char or DEFAULT_TRACK_CHAR,
        show_arrows=config.show_arrows,
    )
    return Component(ComponentType.SCROLLVIEW, data=data, focusable=True)


def spacer() -> Component:
    """Flexible empty space; its size is decided by layout."""
    return Component(ComponentType.SPACER)


def spinner_frames(style: SpinnerStyle) -> tuple[str, ...]:
    """Animation frames for ``style``; unknown styles use braille."""
    return _SPINNER_FRAMES.get(style, _SPINNER_FRAMES[SpinnerStyle.BRAILLE])


def spinner(config: Optional[SpinnerConfig] = None) -> Component:
    """An animated activity indicator, optionally with text and progress."""
    config = config or SpinnerConfig()
    data = SpinnerData(
        style=config.style,
        speed_ms=config.speed if config.speed > 0 else DEFAULT_SPINNER_SPEED_MS,
        text=config.text,
        progress=config.progress,
    )
    return Component(ComponentType.SPINNER, data=data)


def table(config: TableConfig) -> Component:
    """A grid of cells under a header row."""
    if not config.headers or not config.rows:
        raise ValueError("table needs headers and at least one row")
    data = TableData(
        headers=[str(h) for h in config.headers],
        rows=[[str(cell) for cell in row] for row in config.rows],
        show_borders=config.show_borders,
    )
    return Component(ComponentType.TABLE, data=data)


def toast(config: ToastConfig) -> Component:
    """A transient notification shown while ``config.is_visible`` holds True."""
    if config.message is None or config.is_visible is None:
        raise ValueError("toast needs a message and a visibility flag")
    data = ToastData(
        message=config.message,
        is_visible=config.is_visible,
        position=config.position,
        on_close=config.on_close,
    )
    return Component(ComponentType.TOAST, data=data)