"""A directory browser built from list and modal components."""

from __future__ import annotations

import os
from typing import Callable, Iterable, Optional

from intuitive.component import Color, Component, Ref, Style
from intuitive.widgets import (
    ListConfig,
    ModalConfig,
    TextConfig,
    list_view,
    modal,
    text,
    vstack,
    vstack_array,
)

DIR_PREFIX = "📁"
FILE_PREFIX = "📄"
PARENT_ENTRY = f"{DIR_PREFIX} .."
MAX_FILES = 1000
ERROR_MESSAGE_LIMIT = 255
DEFAULT_VISIBLE = 10
MIN_VISIBLE = 5
RESERVED_ROWS = 15

KIB = 1024
MIB = 1024 * 1024


def display_name(name: str, is_dir: bool, size: int) -> str:
    """Return the list label for a directory entry."""
    if is_dir:
        return f"{DIR_PREFIX} {name}"
    if size > MIB:
        return f"{FILE_PREFIX} {name} ({size / MIB:.1f}M)"
    if size > KIB:
        return f"{FILE_PREFIX} {name} ({size / KIB:.1f}K)"
    return f"{FILE_PREFIX} {name} ({size}B)"


def _sort_key(entry: str) -> tuple[bool, bool, bytes]:
    return (
        entry != PARENT_ENTRY,
        not entry.startswith(DIR_PREFIX),
        entry.encode("utf-8", "surrogateescape"),
    )


def sort_entries(entries: Iterable[str]) -> list[str]:
    """Order labels: the parent entry first, then directories, then files, bytewise."""
    return sorted(entries, key=_sort_key)


class FileManager:
    """State and view of a simple file browser."""

    def __init__(
        self,
        path: Optional[str | os.PathLike] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        if path is None:
            try:
                path = os.getcwd()
            except OSError:
                path = "/"
        self.current_path: str = os.fspath(path)
        self.entries: list[str] = []
        self.selected_index: Ref[int] = Ref(0)
        self.list_scroll: Ref[int] = Ref(0)
        self.error_open: Ref[bool] = Ref(False)
        self.error_message: str = ""
        self._on_change = on_change
        self.load_directory(self.current_path)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def show_error(self, message: str) -> None:
        """Open the error dialog with ``message``."""
        self.error_message = message[:ERROR_MESSAGE_LIMIT]
        self.error_open.value = True
        self._changed()

    def close_error(self) -> None:
        """Dismiss the error dialog."""
        self.error_open.value = False
        self._changed()

    def load_directory(self, path: str | os.PathLike) -> None:
        """Replace the listing with the contents of ``path``."""
        path = os.fspath(path)
        self.entries = []
        self.selected_index.value = 0
        self.list_scroll.value = 0

        try:
            scanner = os.scandir(path)
        except OSError:
            self.show_error("Failed to open directory")
            return

        entries: list[str] = []
        if path != "/":
            entries.append(PARENT_ENTRY)

        with scanner:
            for entry in scanner:
                if len(entries) >= MAX_FILES:
                    break
                try:
                    st = os.stat(os.path.join(path, entry.name))
                except OSError:
                    continue
                is_dir = os.path.isdir(os.path.join(path, entry.name))
                entries.append(display_name(entry.name, is_dir, st.st_size))

        self.entries = sort_entries(entries)

    def navigate_to(self, path: str | os.PathLike) -> None:
        """Resolve ``path`` and show its contents."""
        try:
            resolved = os.path.realpath(path, strict=True)
        except OSError:
            self.show_error("Invalid path")
            return
        self.current_path = resolved
        self.load_directory(self.current_path)
        self._changed()

    def navigate_up(self) -> None:
        """Show the parent of the current directory."""
        self.navigate_to(os.path.join(self.current_path, ".."))

    def select(self, index: int) -> None:
        """Open the entry at ``index`` if it is a directory."""
        if not 0 <= index < len(self.entries):
            return
        selected = self.entries[index]
        if selected == PARENT_ENTRY:
            self.navigate_up()
            return
        if not selected.startswith(DIR_PREFIX):
            self.show_error("Not a directory - file preview not implemented yet")
            return
        dir_name = selected[len(DIR_PREFIX) + 1:]
        self.navigate_to(os.path.join(self.current_path, dir_name))

    def build(self, terminal_height: Optional[int] = None) -> Component:
        """Build the component tree for the current state."""
        if terminal_height is None:
            max_visible = DEFAULT_VISIBLE
        else:
            max_visible = max(terminal_height - RESERVED_ROWS, MIN_VISIBLE)

        items: list[Component] = [
            text("=== File Manager ===", TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD)),
            text(""),
            text(f"Path: {self.current_path}", TextConfig(fg_color=Color.BRIGHT_YELLOW)),
            text(""),
            text(f"Items: {len(self.entries)}"),
            text(""),
        ]

        if self.entries:
            items.append(text("Files and Directories:"))
            items.append(
                list_view(
                    ListConfig(
                        items=self.entries,
                        max_visible=max_visible,
                        scroll_offset=self.list_scroll,
                        selected_index=self.selected_index,
                        on_select=self.select,
                    )
                )
            )
        else:
            items.append(text("(empty directory)", TextConfig(fg_color=Color.BRIGHT_BLACK)))

        items += [
            text(""),
            text(""),
            text("Controls:", TextConfig(fg_color=Color.BRIGHT_GREEN)),
            text("  Tab - Focus file list"),
            text("  Up/Down - Navigate list"),
            text("  Enter - Open directory"),
            text("  q - Quit"),
        ]

        main_ui = vstack_array(items)
        if self.error_open.value:
            return vstack(
                main_ui,
                modal(
                    ModalConfig(
                        is_open=self.error_open,
                        title="Error",
                        content=text(self.error_message, TextConfig(fg_color=Color.BRIGHT_RED)),
                        on_close=self.close_error,
                    )
                ),
            )
        return main_ui