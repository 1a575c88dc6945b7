"""
Trace endpoints.

POST /v1/traces/minimize → minimized trace + frame counts
POST /v1/traces/frames   → recognized frames, before trimming
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ..logs import log_event
from ..minimize import parse_stack_trace, render_frames, trim_internal_frames
from ..models import (
    FrameModel,
    MinimizeTraceRequest,
    MinimizeTraceResponse,
    TraceFramesResponse,
)
from ..profiler import PrintProfiler
from ..settings import Settings, load_settings

router = APIRouter(prefix="/v1/traces", tags=["traces"])


def _enforce_budget(trace: str | None, settings: Settings) -> None:
    if trace is None:
        return
    byte_size = len(trace.encode("utf-8"))
    if byte_size > settings.max_trace_bytes:
        log_event("trace_rejected", byte_size=byte_size, max_trace_bytes=settings.max_trace_bytes)
        raise HTTPException(
            status_code=413,
            detail=f"stack_trace is {byte_size} bytes; limit is {settings.max_trace_bytes}",
        )


@router.post("/minimize", response_model=MinimizeTraceResponse)
def minimize_trace(req: MinimizeTraceRequest):
    settings = load_settings()
    _enforce_budget(req.stack_trace, settings)

    profiler = PrintProfiler("minimize")
    frames = parse_stack_trace(req.stack_trace, settings.internal_prefixes)
    parse_timing = profiler.finish_current_task("parse")
    retained = trim_internal_frames(frames)
    text = render_frames(retained)
    total_timing = profiler.finish_profiler()

    log_event(
        "trace_minimized",
        frame_count=len(frames),
        retained_count=len(retained),
        trimmed_count=len(frames) - len(retained),
        timings=[parse_timing, total_timing],
    )
    return MinimizeTraceResponse(
        stack_trace=text,
        frame_count=len(frames),
        retained_count=len(retained),
        trimmed_count=len(frames) - len(retained),
    )


@router.post("/frames", response_model=TraceFramesResponse)
def trace_frames(req: MinimizeTraceRequest):
    settings = load_settings()
    _enforce_budget(req.stack_trace, settings)

    frames = parse_stack_trace(req.stack_trace, settings.internal_prefixes)
    return TraceFramesResponse(frames=[FrameModel.from_frame(f) for f in frames])
