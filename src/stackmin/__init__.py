from .frames import Frame, recognize
from .minimize import minimize_stack_trace, parse_stack_trace, render_frames, trim_internal_frames
from .profiler import PrintProfiler

__version__ = "1.0.0"

__all__ = [
    "Frame",
    "recognize",
    "minimize_stack_trace",
    "parse_stack_trace",
    "render_frames",
    "trim_internal_frames",
    "PrintProfiler",
]
