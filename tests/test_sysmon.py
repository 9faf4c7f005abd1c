import subprocess
import threading
from unittest.mock import patch

import pytest

from intuitive.component import Color, ComponentType
from intuitive.sysmon import (
    MAX_PROCESSES,
    PAGE_SIZE,
    ProcessInfo,
    SystemMonitor,
    format_bytes,
    parse_process_line,
    progress_bar,
    read_cpu_usage,
    read_memory_used,
    read_process_count,
    read_processes,
    read_total_memory,
)

PS_AUX = (
    "USER PID %CPU %MEM VSZ RSS TT STAT STARTED TIME COMMAND\n"
    "alice 10 1.0 0.5 1 1 ?? S 9:00 0:00 /bin/low\n"
    "bob 20 9.5 2.0 1 1 ?? S 9:00 0:00 /usr/bin/high --flag\n"
    "broken line\n"
)


def _done(stdout):
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout)


def _monitor(processes=None, on_change=None):
    procs = processes if processes is not None else [ProcessInfo(123, "foo", 5.5, 1.2, "root")]
    return SystemMonitor(
        mem_total=2048,
        cpu_reader=lambda: 12.5,
        memory_reader=lambda: 1024,
        count_reader=lambda: 42,
        process_reader=lambda: procs,
        on_change=on_change,
    )


def test_format_bytes_values():
    assert format_bytes(0) == "0.0 B"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(1024 ** 5) == "1024.0 TB"


def test_progress_bar_full_empty_and_capped():
    assert progress_bar(100, 7).data.content == "█" * 7
    assert progress_bar(0, 7).data.content == "░" * 7
    assert progress_bar(250, 5).data.content == "█" * 5


def test_progress_bar_width_invariant():
    for pct in (0, 13, 50, 99):
        assert len(progress_bar(pct, 40).data.content) == 40


@pytest.mark.parametrize(
    "pct,color",
    [(60, Color.BRIGHT_GREEN), (61, Color.BRIGHT_YELLOW), (80, Color.BRIGHT_YELLOW), (81, Color.BRIGHT_RED)],
)
def test_progress_bar_colors(pct, color):
    assert progress_bar(pct, 10).fg_color is color


def test_parse_process_line():
    line = "root  123  5.5  1.2  4000  2000  ??  Ss  10:00AM  0:01.00 /usr/bin/foo --bar\n"
    assert parse_process_line(line) == ProcessInfo(123, "foo", 5.5, 1.2, "root")


def test_parse_process_line_rejects_short_or_bad():
    assert parse_process_line("root 1 2.0") is None
    assert parse_process_line("root x 1 1 a b c d e f cmd") is None


def test_parse_truncates_name():
    line = "u 1 0 0 a b c d e f /x/" + "n" * 100
    assert len(parse_process_line(line).name) == 63


def test_read_total_memory():
    with patch("intuitive.sysmon.subprocess.run", return_value=_done("hw.memsize: 17179869184\n")):
        assert read_total_memory() == 17179869184


def test_read_total_memory_failure():
    with patch("intuitive.sysmon.subprocess.run", side_effect=FileNotFoundError):
        assert read_total_memory() == 0


def test_read_cpu_usage_sums():
    with patch("intuitive.sysmon.subprocess.run", return_value=_done("%CPU\n 1.5\n 2.5\n")):
        assert read_cpu_usage() == pytest.approx(1.5 + 2.5)


def test_read_memory_used_active_pages():
    with patch("intuitive.sysmon.subprocess.run", return_value=_done("Pages free: 5.\nPages active: 100.\n")):
        assert read_memory_used() == 100 * PAGE_SIZE


def test_read_memory_used_unavailable():
    with patch("intuitive.sysmon.subprocess.run", side_effect=FileNotFoundError):
        assert read_memory_used() is None


def test_read_process_count():
    with patch("intuitive.sysmon.subprocess.run", return_value=_done(PS_AUX)):
        assert read_process_count() == PS_AUX.count("\n") - 1


def test_read_processes_sorted_by_cpu():
    with patch("intuitive.sysmon.subprocess.run", return_value=_done(PS_AUX)):
        assert read_processes() == [
            ProcessInfo(20, "high", 9.5, 2.0, "bob"),
            ProcessInfo(10, "low", 1.0, 0.5, "alice"),
        ]


def test_read_processes_failure():
    with patch("intuitive.sysmon.subprocess.run", side_effect=FileNotFoundError):
        assert read_processes() == []


def test_refresh_updates_state():
    calls = []
    mon = _monitor(on_change=lambda: calls.append(1))
    assert mon.status_message == "Initializing..."
    mon.refresh()
    assert mon.cpu_usage == 12.5
    assert mon.mem_used == 1024
    assert mon.mem_usage * mon.mem_total == pytest.approx(100 * mon.mem_used)
    assert mon.process_count_total == 42
    assert mon.status_message.startswith("Updated at ")
    assert calls == [1]


def test_refresh_caps_processes():
    many = [ProcessInfo(i, "p", 0.0, 0.0, "u") for i in range(MAX_PROCESSES + 10)]
    mon = _monitor(processes=many)
    mon.refresh()
    assert len(mon.processes) == MAX_PROCESSES


def test_select_process():
    mon = _monitor()
    mon.select_process(3)
    assert mon.selected_process.value == 3


def test_build_lists_processes():
    mon = _monitor()
    mon.refresh()
    root = mon.build(40)
    lists = [c for c in root.walk() if c.type is ComponentType.LIST]
    assert len(lists) == 1
    line = lists[0].data.items[0]
    assert line.startswith("123 ")
    assert line.endswith("root          foo")
    assert root.children[-1].data.content == mon.status_message


def test_build_list_height_minimum():
    mon = _monitor()
    mon.refresh()
    lists = [c for c in mon.build(2).walk() if c.type is ComponentType.LIST]
    assert lists[0].data.max_visible_items == 5


def test_build_without_processes_ends_at_separator():
    mon = _monitor(processes=[])
    mon.refresh()
    root = mon.build(40)
    assert not any(c.type is ComponentType.LIST for c in root.walk())
    assert set(root.children[-1].data.content) == {"─"}


def test_background_thread_refreshes():
    updated = threading.Event()
    mon = _monitor(on_change=updated.set)
    mon.start(0.01)
    try:
        assert updated.wait(5)
    finally:
        mon.stop()
    assert mon.running is False
    assert mon.cpu_usage == 12.5