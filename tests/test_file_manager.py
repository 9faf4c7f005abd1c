import os

import pytest

from intuitive.component import ComponentType, ModalData
from intuitive.file_manager import (
    MAX_FILES,
    MIN_VISIBLE,
    DEFAULT_VISIBLE,
    PARENT_ENTRY,
    FileManager,
    display_name,
    sort_entries,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "f.txt").write_bytes(b"x" * 10)
    return tmp_path


def _lists(root):
    return [c for c in root.walk() if c.type is ComponentType.LIST]


def _texts(root):
    return [c.data.content for c in root.walk() if c.type is ComponentType.TEXT]


def test_display_name_directory():
    assert display_name("docs", True, 4096) == "📁 docs"


def test_display_name_small_file_in_bytes():
    assert display_name("f", False, 500) == "📄 f (500B)"
    assert display_name("f", False, 1024) == "📄 f (1024B)"


def test_display_name_kilobytes_and_megabytes():
    assert display_name("f", False, 2048) == "📄 f (2.0K)"
    assert display_name("big", False, 3 * 1024 * 1024) == "📄 big (3.0M)"


def test_sort_entries_parent_then_dirs_then_files():
    entries = ["📄 b (1B)", "📁 z", PARENT_ENTRY, "📄 a (1B)", "📁 a"]
    assert sort_entries(entries) == [PARENT_ENTRY, "📁 a", "📁 z", "📄 a (1B)", "📄 b (1B)"]


def test_load_directory_lists_entries(tree):
    fm = FileManager(tree)
    assert fm.entries == [PARENT_ENTRY, "📁 sub", display_name("f.txt", False, 10)]


def test_load_directory_resets_selection(tree):
    fm = FileManager(tree)
    fm.selected_index.value = 2
    fm.list_scroll.value = 1
    fm.load_directory(tree)
    assert (fm.selected_index.value, fm.list_scroll.value) == (0, 0)


def test_load_missing_directory_shows_error(tmp_path):
    fm = FileManager(tmp_path)
    fm.load_directory(tmp_path / "missing")
    assert fm.error_open.value is True
    assert fm.error_message == "Failed to open directory"
    assert fm.entries == []


def test_root_has_no_parent_entry():
    fm = FileManager("/")
    assert PARENT_ENTRY not in fm.entries


def test_listing_is_capped(tmp_path):
    for i in range(MAX_FILES + 5):
        (tmp_path / f"f{i}").touch()
    fm = FileManager(tmp_path)
    assert len(fm.entries) == MAX_FILES
    assert fm.entries[0] == PARENT_ENTRY


def test_select_directory_enters_it(tree):
    calls = []
    fm = FileManager(tree, on_change=lambda: calls.append(1))
    fm.select(fm.entries.index("📁 sub"))
    assert fm.current_path == os.path.realpath(tree / "sub")
    assert fm.entries == [PARENT_ENTRY]
    assert calls


def test_select_parent_goes_up(tree):
    fm = FileManager(tree / "sub")
    fm.select(0)
    assert fm.current_path == os.path.realpath(tree)


def test_navigate_up(tree):
    fm = FileManager(os.path.realpath(tree / "sub"))
    fm.navigate_up()
    assert fm.current_path == os.path.realpath(tree)


def test_select_file_shows_error(tree):
    fm = FileManager(tree)
    fm.select(2)
    assert fm.error_open.value is True
    assert fm.error_message == "Not a directory - file preview not implemented yet"


def test_select_out_of_range_does_nothing(tree):
    fm = FileManager(tree)
    before = fm.current_path
    fm.select(99)
    fm.select(-1)
    assert fm.current_path == before
    assert fm.error_open.value is False


def test_navigate_to_invalid_path(tree):
    fm = FileManager(tree)
    fm.navigate_to(tree / "nope")
    assert fm.error_message == "Invalid path"
    assert fm.current_path == os.fspath(tree)


def test_error_message_truncated_and_closed(tree):
    fm = FileManager(tree)
    fm.show_error("x" * 300)
    assert len(fm.error_message) == 255
    fm.close_error()
    assert fm.error_open.value is False


def test_build_list_matches_entries(tree):
    fm = FileManager(tree)
    lists = _lists(fm.build())
    assert len(lists) == 1
    assert lists[0].data.items == fm.entries
    assert lists[0].data.max_visible_items == DEFAULT_VISIBLE
    assert lists[0].data.selected_index is fm.selected_index


def test_build_visible_rows_follow_height(tree):
    fm = FileManager(tree)
    small = _lists(fm.build(3))[0].data.max_visible_items
    a = _lists(fm.build(40))[0].data.max_visible_items
    b = _lists(fm.build(41))[0].data.max_visible_items
    assert small == MIN_VISIBLE
    assert b == a + 1


def test_build_shows_path_and_count(tree):
    fm = FileManager(tree)
    texts = _texts(fm.build())
    assert f"Path: {fm.current_path}" in texts
    assert f"Items: {len(fm.entries)}" in texts


def test_build_empty_directory(tmp_path, monkeypatch):
    fm = FileManager(tmp_path)
    fm.entries = []
    root = fm.build()
    assert "(empty directory)" in _texts(root)
    assert _lists(root) == []


def test_build_with_error_adds_modal(tree):
    fm = FileManager(tree)
    fm.show_error("boom")
    root = fm.build()
    modals = [c for c in root.children if c.type is ComponentType.MODAL]
    assert len(modals) == 1
    assert isinstance(modals[0].data, ModalData)
    assert modals[0].data.title == "Error"
    assert modals[0].data.content.data.content == "boom"