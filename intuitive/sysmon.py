"""A system monitor: samples CPU, memory and processes and builds a view."""

from __future__ import annotations

import re
import shutil
import subprocess
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from intuitive.component import Alignment, Color, Component, PaddingConfig, Ref, Style
from intuitive.widgets import (
    ListConfig,
    StackConfig,
    TextConfig,
    aligned_vstack,
    hstack,
    list_view,
    padded,
    text,
    vstack,
)

MAX_PROCESSES = 100
MAX_PROCESS_NAME = 64
MAX_USER = 31
MAX_COMMAND = 255
TOP_PROCESS_LINES = 50
PAGE_SIZE = 4096
LINE_LIMIT = 127
MIN_LIST_HEIGHT = 5
RESERVED_ROWS = 18
BAR_WIDTH = 40

_UNITS = ("B", "KB", "MB", "GB", "TB")
_VM_STAT_PATTERN = re.compile(r"Pages active|Pages wired")


@dataclass
class ProcessInfo:
    pid: int
    name: str
    cpu: float
    mem: float
    user: str


def format_bytes(num_bytes: float) -> str:
    """Format a byte count with one decimal and a binary unit up to TB."""
    value = float(num_bytes)
    unit = 0
    while value >= 1024.0 and unit < len(_UNITS) - 1:
        value /= 1024.0
        unit += 1
    return f"{value:.1f} {_UNITS[unit]}"


def progress_bar(percentage: float, width: int) -> Component:
    """A bar of ``width`` cells, coloured by how full it is."""
    filled = min(int((percentage / 100.0) * width), width)
    bar = "".join("█" if i < filled else "░" for i in range(width))
    if percentage > 80:
        color = Color.BRIGHT_RED
    elif percentage > 60:
        color = Color.BRIGHT_YELLOW
    else:
        color = Color.BRIGHT_GREEN
    return text(bar, TextConfig(fg_color=color))


def parse_process_line(line: str) -> Optional[ProcessInfo]:
    """Parse one ``ps aux`` line; return None when it does not fit."""
    parts = line.split(None, 10)
    if len(parts) < 11:
        return None
    try:
        pid = int(parts[1])
        cpu = float(parts[2])
        mem = float(parts[3])
    except ValueError:
        return None
    command = parts[10].split("\n", 1)[0][:MAX_COMMAND]
    if not command:
        return None
    name = command.split(" ", 1)[0].rsplit("/", 1)[-1]
    return ProcessInfo(
        pid=pid,
        name=name[: MAX_PROCESS_NAME - 1],
        cpu=cpu,
        mem=mem,
        user=parts[0][:MAX_USER],
    )


def _run(args: list[str]) -> Optional[str]:
    try:
        result = subprocess.run(args, capture_output=True, text=True, check=False)
    except OSError:
        return None
    return result.stdout


def read_total_memory() -> int:
    """Total physical memory in bytes, or 0 when it cannot be read."""
    output = _run(["sysctl", "hw.memsize"])
    if output is None:
        return 0
    try:
        return int(output.split()[1])
    except (IndexError, ValueError):
        return 0


def read_cpu_usage() -> float:
    """Sum of the CPU percentages of all processes."""
    output = _run(["ps", "-A", "-o", "%cpu"])
    if output is None:
        return 0.0
    total = 0.0
    for line in output.splitlines():
        fields = line.split()
        if not fields:
            continue
        try:
            total += float(fields[0])
        except ValueError:
            continue
    return total


def read_memory_used() -> Optional[int]:
    """Bytes in active and wired pages, or None when unavailable."""
    output = _run(["vm_stat"])
    if output is None:
        return None
    tokens = []
    for line in output.splitlines():
        if _VM_STAT_PATTERN.search(line):
            fields = line.split()
            if len(fields) > 2:
                tokens.append(fields[2].replace(".", ""))
    numbers: list[int] = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            break
        if len(numbers) == 2:
            break
    active, wired = (numbers + [0, 0])[:2]
    return (active + wired) * PAGE_SIZE


def read_process_count() -> Optional[int]:
    """Number of running processes, or None when unavailable."""
    output = _run(["ps", "aux"])
    if output is None:
        return None
    return output.count("\n") - 1


def _cpu_field(line: str) -> float:
    fields = line.split()
    if len(fields) < 3:
        return 0.0
    try:
        return float(fields[2])
    except ValueError:
        return 0.0


def read_processes() -> list[ProcessInfo]:
    """The busiest processes by CPU, highest first."""
    output = _run(["ps", "aux"])
    if output is None:
        return []
    lines = output.splitlines()[1:]
    lines.sort(key=_cpu_field, reverse=True)
    parsed = (parse_process_line(line) for line in lines[:TOP_PROCESS_LINES])
    return [proc for proc in parsed if proc is not None][:MAX_PROCESSES]


class SystemMonitor:
    """Shared monitor state, refreshed in the background and rendered on demand."""

    def __init__(
        self,
        *,
        mem_total: Optional[int] = None,
        cpu_reader: Callable[[], float] = read_cpu_usage,
        memory_reader: Callable[[], Optional[int]] = read_memory_used,
        count_reader: Callable[[], Optional[int]] = read_process_count,
        process_reader: Callable[[], list[ProcessInfo]] = read_processes,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.cpu_usage = 0.0
        self.mem_usage = 0.0
        self.mem_total = read_total_memory() if mem_total is None else mem_total
        self.mem_used = 0
        self.process_count_total = 0
        self.processes: list[ProcessInfo] = []
        self.selected_process: Ref[int] = Ref(0)
        self.process_scroll: Ref[int] = Ref(0)
        self.last_update = 0.0
        self.status_message = "Initializing..."
        self._cpu_reader = cpu_reader
        self._memory_reader = memory_reader
        self._count_reader = count_reader
        self._process_reader = process_reader
        self._on_change = on_change
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def refresh(self) -> None:
        """Sample the system once and update the shared state."""
        cpu = self._cpu_reader()
        mem_used = self._memory_reader()
        count = self._count_reader()
        processes = list(self._process_reader())[:MAX_PROCESSES]
        now = time.time()
        with self._lock:
            self.cpu_usage = cpu
            if mem_used is not None:
                self.mem_used = mem_used
                if self.mem_total > 0:
                    self.mem_usage = self.mem_used * 100.0 / self.mem_total
            if count is not None:
                self.process_count_total = count
            self.processes = processes
            self.last_update = now
            self.status_message = f"Updated at {time.ctime(now)}"
        if self._on_change is not None:
            self._on_change()

    def _loop(self, interval: float) -> None:
        while not self._stop.is_set():
            self.refresh()
            self._stop.wait(interval)

    def start(self, interval: float = 1) -> None:
        """Refresh every ``interval`` seconds on a background thread."""
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, args=(interval,), daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the background thread and wait for it to finish."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def select_process(self, index: int) -> None:
        self.selected_process.value = index

    def build(self, terminal_height: Optional[int] = None) -> Component:
        """Build the component tree from a consistent snapshot of the state."""
        if terminal_height is None:
            terminal_height = shutil.get_terminal_size().lines

        with self._lock:
            cpu_usage = self.cpu_usage
            mem_usage = self.mem_usage
            mem_total = self.mem_total
            mem_used = self.mem_used
            process_count_total = self.process_count_total
            processes = list(self.processes)
            status_message = self.status_message

        lines = [
            f"{p.pid:<6d}  {p.cpu:5.1f}%  {p.mem:5.1f}%  {p.user:<12s}  {p.name}"[:LINE_LIMIT]
            for p in processes
        ]
        list_height = max(terminal_height - RESERVED_ROWS, MIN_LIST_HEIGHT)
        dim = TextConfig(fg_color=Color.BRIGHT_BLACK)
        label = TextConfig(fg_color=Color.BRIGHT_YELLOW, style=Style.BOLD)

        stats = padded(
            vstack(
                hstack(text("CPU Usage:", label), text("  "), text(f"{cpu_usage:.1f}%")),
                progress_bar(cpu_usage, BAR_WIDTH),
                text(""),
                hstack(
                    text("Memory:   ", label),
                    text("  "),
                    text(f"{mem_usage:.1f}%"),
                    text("  ("),
                    text(format_bytes(mem_used)),
                    text(" / "),
                    text(format_bytes(mem_total)),
                    text(")"),
                ),
                progress_bar(mem_usage, BAR_WIDTH),
            ),
            PaddingConfig(top=1, bottom=1, left=2, right=2),
        )

        children: list[Component] = [
            aligned_vstack(
                StackConfig(
                    children=[
                        text(
                            "=== SYSTEM MONITOR ===",
                            TextConfig(fg_color=Color.BRIGHT_CYAN, style=Style.BOLD),
                        )
                    ],
                    alignment=Alignment.CENTER,
                    spacing=0,
                )
            ),
            text(""),
            stats,
            text(
                f"Total Processes: {process_count_total} (showing top {len(processes)} by CPU)",
                dim,
            ),
            text(""),
            text("Top Processes (by CPU usage):", TextConfig(style=Style.BOLD)),
            text("PID     CPU    MEM    USER          NAME", dim),
            text("─" * 68, dim),
        ]

        # Without processes there is no list, and the view ends at the separator.
        if lines:
            children += [
                list_view(
                    ListConfig(
                        items=lines,
                        max_visible=list_height,
                        scroll_offset=self.process_scroll,
                        selected_index=self.selected_process,
                        on_select=self.select_process,
                    )
                ),
                text(""),
                hstack(
                    text("Auto-updates every 1s", dim),
                    text(" • "),
                    text("Tab to focus, ↑↓ or wheel to scroll", dim),
                    text(" • "),
                    text("Click to select", dim),
                    text(" • "),
                    text("'q' quits", dim),
                ),
                text(status_message, dim),
            ]

        return vstack(*children)