"""
API-layer request/response models for the trace endpoints.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .frames import Frame


class MinimizeTraceRequest(BaseModel):
    # None is allowed and minimizes to ""
    stack_trace: Optional[str] = Field(default=None, description="raw multi-line stack trace")


class MinimizeTraceResponse(BaseModel):
    stack_trace: str
    frame_count: int = Field(ge=0)
    retained_count: int = Field(ge=0)
    trimmed_count: int = Field(ge=0)


class FrameModel(BaseModel):
    raw_text: str
    method: Optional[str] = None
    location: Optional[str] = None
    is_internal: bool = False

    @classmethod
    def from_frame(cls, frame: Frame) -> "FrameModel":
        return cls(**frame.to_dict())


class TraceFramesResponse(BaseModel):
    frames: list[FrameModel] = Field(default_factory=list)
