"""
Stack trace minimizer.

Instead of a trace several thousand chars long, return one that fits into a
few hundred. A Dartium line like::

    #0      newFile (chrome-extension://ldgidbpjipgjnfimmhbmjbebaffmmdjc/spark.dart:157:7)

becomes::

    newFile spark.dart:157:7

and the run of SDK/package frames at the top of the trace is cut down to the
one frame that called into application code.
"""
from __future__ import annotations

from typing import Optional

from .frames import INTERNAL_PREFIXES, Frame, recognize


def parse_stack_trace(
    trace: Optional[str],
    internal_prefixes: tuple[str, ...] = INTERNAL_PREFIXES,
) -> list[Frame]:
    """Recognize every non-blank line of ``trace``, in order."""
    if trace is None:
        return []
    lines = (line.strip() for line in trace.split("\n"))
    return [recognize(line, internal_prefixes) for line in lines if line]


def trim_internal_frames(frames: list[Frame]) -> list[Frame]:
    """Drop all but the last of the leading internal frames.

    A trace made only of internal frames is kept whole.
    """
    index = 0
    while index < len(frames) and frames[index].is_internal:
        index += 1

    if 0 < index < len(frames):
        return frames[index - 1:]
    return list(frames)


def render_frames(frames: list[Frame]) -> str:
    return "\n".join(frame.render() for frame in frames)


def minimize_stack_trace(
    trace: Optional[str],
    internal_prefixes: tuple[str, ...] = INTERNAL_PREFIXES,
) -> str:
    """Return a minimal textual description of ``trace`` ("" for None)."""
    if trace is None:
        return ""
    frames = parse_stack_trace(trace, internal_prefixes)
    return render_frames(trim_internal_frames(frames))
