"""Stack snapshots for error info entries.

A snapshot covers every live thread, calling thread first. Each thread is
rendered as a header line followed by exactly two lines per frame,
innermost frame first:

    thread 140213 [MainThread] (running):
    package.module.Class.method()
    	/path/to/module.py:42

Threads are separated by a blank line. The fixed two-line frame layout is
what lets trim_frames() drop frames by counting lines.
"""

from __future__ import annotations

import sys
import threading
from types import FrameType

__all__ = [
    "STACK_SENTINEL",
    "STACK_BUFFER_SIZE",
    "LINES_PER_FRAME",
    "capture_stack",
    "trim_frames",
]

# Info entry replaced by a stack snapshot when added to an error.
STACK_SENTINEL = "debug.stack"

# Snapshots are cut to this many bytes (UTF-8).
STACK_BUFFER_SIZE = 4096

LINES_PER_FRAME = 2


def _thread_names() -> dict[int | None, str]:
    return {t.ident: t.name for t in threading.enumerate()}


def _format_frame(frame: FrameType) -> str:
    code = frame.f_code
    module = frame.f_globals.get("__name__") or "?"
    qualname = getattr(code, "co_qualname", code.co_name)
    return f"{module}.{qualname}()\n\t{code.co_filename}:{frame.f_lineno or 0}\n"


def _format_thread(ident: int, name: str, state: str, frame: FrameType | None) -> str:
    lines = [f"thread {ident} [{name}] ({state}):\n"]
    while frame is not None:
        lines.append(_format_frame(frame))
        frame = frame.f_back
    return "".join(lines)


def _truncate(text: str, size: int) -> str:
    data = text.encode("utf-8")
    if len(data) <= size:
        return text
    return data[:size].decode("utf-8", errors="ignore")


def capture_stack(*, size: int = STACK_BUFFER_SIZE) -> str:
    """Return a snapshot of the call stacks of all live threads.

    The snapshot starts at the caller of this function; capture_stack
    itself never appears in it. The result is cut to size bytes.
    """
    current = threading.get_ident()
    names = _thread_names()
    caller = sys._getframe(1)

    blocks = [_format_thread(current, names.get(current, "?"), "running", caller)]
    for ident, frame in sys._current_frames().items():
        if ident == current:
            continue
        blocks.append(_format_thread(ident, names.get(ident, "?"), "active", frame))

    return _truncate("\n".join(blocks), size)


def trim_frames(trace: str, frames: int) -> str:
    """Remove frames leading frames from a snapshot, keeping its header.

    frames counts stack frames; since every frame spans LINES_PER_FRAME
    lines, frames * LINES_PER_FRAME lines following the header are dropped.
    A trace too short for the requested depth is returned untouched.
    """
    skip = frames * LINES_PER_FRAME
    if skip <= 0:
        return trace

    header_end = trace.find("\n")
    if header_end < 0:
        return trace

    pos = header_end
    for _ in range(skip):
        pos = trace.find("\n", pos + 1)
        if pos < 0:
            return trace

    return trace[: header_end + 1] + trace[pos + 1 :]
