import os

from pydantic import BaseModel, Field, field_validator

from .frames import INTERNAL_PREFIXES


class Settings(BaseModel):
    internal_prefixes: tuple[str, ...] = INTERNAL_PREFIXES

    # Budgets
    max_trace_bytes: int = Field(default=200_000, gt=0)

    @field_validator("internal_prefixes", mode="before")
    @classmethod
    def split_prefixes(cls, v):
        if isinstance(v, str):
            v = v.split(",")
        cleaned = tuple(x.strip() for x in v if x and x.strip())
        if not cleaned:
            raise ValueError("internal_prefixes must contain at least one non-empty prefix")
        return cleaned


def load_settings() -> Settings:
    return Settings(
        internal_prefixes=os.getenv("STACKMIN_INTERNAL_PREFIXES", ",".join(INTERNAL_PREFIXES)),
        max_trace_bytes=os.getenv("STACKMIN_MAX_TRACE_BYTES", "200000"),
    )
