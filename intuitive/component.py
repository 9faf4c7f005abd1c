"""The component tree: node type, styling enums and per-widget data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag, auto
from typing import Callable, Generic, Iterator, Optional, TypeVar

from intuitive.animation import Animation, get_time_us

T = TypeVar("T")

Callback = Callable[[], None]


@dataclass
class Ref(Generic[T]):
    """A mutable cell shared between application state and a component."""

    value: T


class Color(IntEnum):
    """Terminal colours; DEFAULT keeps the terminal's own colour."""

    DEFAULT = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    YELLOW = 4
    BLUE = 5
    MAGENTA = 6
    CYAN = 7
    WHITE = 8
    BRIGHT_BLACK = 9
    BRIGHT_RED = 10
    BRIGHT_GREEN = 11
    BRIGHT_YELLOW = 12
    BRIGHT_BLUE = 13
    BRIGHT_MAGENTA = 14
    BRIGHT_CYAN = 15
    BRIGHT_WHITE = 16


class Style(IntFlag):
    """Text attributes, combinable with ``|``."""

    NONE = 0
    BOLD = 1
    UNDERLINE = 2


class Alignment(Enum):
    START = auto()
    CENTER = auto()
    END = auto()


class SpinnerStyle(Enum):
    BRAILLE = auto()
    CLASSIC = auto()
    DOTS = auto()
    BOX = auto()
    ARROW = auto()


class ToastPosition(Enum):
    BOTTOM = auto()
    TOP = auto()
    TOP_RIGHT = auto()
    BOTTOM_RIGHT = auto()


class ComponentType(Enum):
    TEXT = auto()
    VSTACK = auto()
    HSTACK = auto()
    BUTTON = auto()
    INPUT = auto()
    LIST = auto()
    MODAL = auto()
    SCROLLVIEW = auto()
    TABLE = auto()
    PADDING = auto()
    SPACER = auto()
    SPINNER = auto()
    TOAST = auto()


@dataclass
class PaddingConfig:
    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0


@dataclass
class TextData:
    content: str


@dataclass
class ButtonData:
    label: str
    on_click: Optional[Callback] = None


@dataclass
class InputData:
    buffer: Ref[str]
    buffer_size: int
    cursor_pos: int = 0
    scroll_offset: int = 0


@dataclass
class ListData:
    items: list[str]
    scroll_offset: Optional[Ref[int]] = None
    max_visible_items: int = 10
    selected_index: Optional[Ref[int]] = None
    on_select: Optional[Callable[[int], None]] = None
    visual_scroll_offset: float = 0.0
    target_scroll_offset: int = 0
    scroll_animation: Optional[Animation] = None

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass
class ModalData:
    is_open: Ref[bool]
    content: "Component"
    title: Optional[str] = None
    on_close: Optional[Callback] = None


@dataclass
class ScrollViewData:
    content: "Component"
    scroll_offset: Ref[int]
    max_visible_height: int
    show_indicators: bool = False
    thumb_focused: str = "█"
    thumb_unfocused: str = "▓"
    track_char: str = "│"
    show_arrows: bool = False
    visual_scroll_offset: float = 0.0
    target_scroll_offset: int = 0
    scroll_animation: Optional[Animation] = None


@dataclass
class TableData:
    """Table cells; column widths are the widest cell of each column."""

    headers: list[str]
    rows: list[list[str]]
    show_borders: bool = False
    column_widths: list[int] = field(init=False)

    def __post_init__(self) -> None:
        columns = len(self.headers)
        normalised = []
        for row in self.rows:
            if len(row) < columns:
                raise ValueError(f"row {row!r} has fewer than {columns} cells")
            normalised.append(list(row[:columns]))
        self.headers = list(self.headers)
        self.rows = normalised
        self.column_widths = [
            max(len(cell) for cell in [header, *(row[col] for row in self.rows)])
            for col, header in enumerate(self.headers)
        ]

    @property
    def header_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)


@dataclass
class StackData:
    alignment: Alignment = Alignment.START
    spacing: int = 0


@dataclass
class PaddingData:
    child: "Component"
    padding: PaddingConfig = field(default_factory=PaddingConfig)


@dataclass
class SpinnerData:
    style: SpinnerStyle = SpinnerStyle.BRAILLE
    speed_ms: int = 100
    text: Optional[str] = None
    progress: Optional[Ref[float]] = None
    frame_index: int = 0
    last_update_time_us: int = field(default_factory=get_time_us)


@dataclass
class ToastData:
    message: str
    is_visible: Ref[bool]
    position: ToastPosition = ToastPosition.BOTTOM
    on_close: Optional[Callback] = None


ComponentData = (
    TextData | ButtonData | InputData | ListData | ModalData | ScrollViewData
    | TableData | StackData | PaddingData | SpinnerData | ToastData
)


@dataclass(eq=False)
class Component:
    """A node of the UI tree; layout fields are filled in by the layout pass."""

    type: ComponentType
    data: Optional[ComponentData] = None
    children: list["Component"] = field(default_factory=list)
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    focusable: bool = False
    focused: bool = False
    focus_index: int = -1
    fg_color: Color = Color.DEFAULT
    bg_color: Color = Color.DEFAULT
    style: Style = Style.NONE
    dirty: bool = True
    content_hash: int = 0

    def add_child(self, child: "Component") -> None:
        """Append ``child`` to this container."""
        if not isinstance(child, Component):
            raise TypeError(f"expected a Component, got {type(child).__name__}")
        self.children.append(child)

    def _owned(self) -> Iterator["Component"]:
        if isinstance(self.data, (ModalData, ScrollViewData)):
            yield self.data.content
        elif isinstance(self.data, PaddingData):
            yield self.data.child

    def walk(self) -> Iterator["Component"]:
        """Yield this node and every node beneath it, depth first.

        Subtrees held in the node's data (modal or scroll view content, a
        padded child) come before the regular children.
        """
        yield self
        for owned in self._owned():
            yield from owned.walk()
        for child in self.children:
            yield from child.walk()