from intuitive.component import (
    Alignment,
    ComponentType,
    PaddingData,
    StackData,
    ToastPosition,
)
from intuitive.interactive_demos import (
    MOUSE_ITEMS,
    LayoutDemo,
    MouseDemo,
    ScrollbarDemo,
    ToastDemo,
    TodoApp,
    sample_content,
)


def texts(tree):
    return [c.data.content for c in tree.walk() if c.type == ComponentType.TEXT]


def of_type(tree, kind):
    return [c for c in tree.walk() if c.type == kind]


def test_sample_content_has_fifteen_lines():
    content = sample_content()
    assert len(content.children) == 15
    assert texts(content)[0] == "Line 1"
    assert texts(content)[-1] == "Line 15"


def test_layout_viewport_follows_terminal_height():
    small = of_type(LayoutDemo().build(20), ComponentType.SCROLLVIEW)[0]
    large = of_type(LayoutDemo().build(40), ComponentType.SCROLLVIEW)[0]
    assert large.data.max_visible_height - small.data.max_visible_height == 20
    assert large.data.show_arrows and large.data.show_indicators


def test_layout_viewport_never_empty():
    view = of_type(LayoutDemo().build(2), ComponentType.SCROLLVIEW)[0]
    assert view.data.max_visible_height >= 1


def test_layout_alignments_and_padding():
    demo = LayoutDemo()
    tree = demo.build(30)
    stacks = [c.data for c in tree.walk() if isinstance(c.data, StackData)]
    assert [s.alignment for s in stacks] == [
        Alignment.START, Alignment.CENTER, Alignment.END, Alignment.START,
        Alignment.START, Alignment.CENTER, Alignment.END,
    ]
    assert [s.spacing for s in stacks] == [0, 0, 0, 1, 2, 2, 2]
    paddings = [c.data.padding for c in tree.walk() if isinstance(c.data, PaddingData)]
    assert [(p.left, p.top) for p in paddings] == [(2, 2), (4, 0)]
    view = of_type(tree, ComponentType.SCROLLVIEW)[0]
    assert view.data.scroll_offset is demo.scroll_offset
    assert "Press 'q' to quit" in texts(tree)


def test_mouse_click_counts_and_notifies():
    calls = []
    demo = MouseDemo(on_change=lambda: calls.append(1))
    demo.click()
    demo.click()
    assert demo.click_count == 2
    assert demo.message == "Button clicked 2 times!"
    assert len(calls) == 2


def test_mouse_reset_and_select():
    demo = MouseDemo()
    demo.click()
    demo.reset_counter()
    assert demo.click_count == 0
    assert demo.message == "Counter reset!"
    demo.select_item(4)
    assert demo.message == "You clicked item #5"


def test_mouse_scroll_info_end_is_clamped():
    demo = MouseDemo()
    assert demo.scroll_info() == "Showing items 1-8 of 20 (scroll: 0)"
    demo.list_scroll.value = 15
    assert demo.scroll_info().endswith("-20 of 20 (scroll: 15)")


def test_mouse_build_list_is_wired_to_state():
    demo = MouseDemo()
    tree = demo.build()
    lst = of_type(tree, ComponentType.LIST)[0]
    assert lst.data.items == list(MOUSE_ITEMS)
    assert lst.data.max_visible_items == 8
    assert lst.data.selected_index is demo.selected_item
    assert lst.focusable
    lst.data.on_select(0)
    assert demo.message == "You clicked item #1"
    assert "Welcome! Click the buttons or list items." not in texts(demo.build())


def test_scrollbar_styles():
    demo = ScrollbarDemo()
    views = of_type(demo.build(), ComponentType.SCROLLVIEW)
    assert [(v.data.thumb_focused, v.data.thumb_unfocused, v.data.track_char) for v in views] == [
        ("█", "▓", "│"), ("■", "□", "┆"), ("●", "○", "┊"),
    ]
    assert [v.data.show_arrows for v in views] == [True, False, True]
    assert [v.data.scroll_offset for v in views] == [demo.scroll1, demo.scroll2, demo.scroll3]
    assert all(v.data.max_visible_height == 8 for v in views)


def test_toast_buttons_raise_flags():
    demo = ToastDemo()
    demo.show_top()
    demo.show_bottom_right()
    assert demo.show_toast_top.value is True
    assert demo.show_toast_bottom_right.value is True
    assert demo.show_toast_bottom.value is False
    assert demo.show_toast_top_right.value is False


def test_toast_build_positions_and_messages():
    demo = ToastDemo()
    toasts = of_type(demo.build(), ComponentType.TOAST)
    assert [t.data.position for t in toasts] == [
        ToastPosition.BOTTOM, ToastPosition.TOP,
        ToastPosition.TOP_RIGHT, ToastPosition.BOTTOM_RIGHT,
    ]
    assert toasts[0].data.message == "File saved successfully!"
    assert toasts[3].data.is_visible is demo.show_toast_bottom_right


def test_todo_add_ignores_empty_input():
    app = TodoApp()
    app.add_todo()
    assert app.items == []
    assert "No items yet. Add one above!" in texts(app.build())


def test_todo_add_and_clear():
    calls = []
    app = TodoApp(on_change=lambda: calls.append(1))
    app.input_buffer.value = "milk"
    app.add_todo()
    assert app.items == ["milk"]
    assert app.input_buffer.value == ""
    assert "  1. milk" in texts(app.build())
    app.clear_all()
    assert app.items == []
    assert len(calls) == 2


def test_todo_limit_and_truncation():
    app = TodoApp()
    for n in range(25):
        app.input_buffer.value = f"task {n}"
        app.add_todo()
    assert len(app.items) == 20
    assert app.input_buffer.value == "task 24"

    long_app = TodoApp()
    long_app.input_buffer.value = "x" * 300
    long_app.add_todo()
    assert len(long_app.items[0]) == 255


def test_todo_build_input_shares_buffer():
    app = TodoApp()
    app.input_buffer.value = "draft"
    field = of_type(app.build(), ComponentType.INPUT)[0]
    assert field.data.buffer is app.input_buffer
    assert field.data.buffer_size == 256
    assert field.data.cursor_pos == len("draft")