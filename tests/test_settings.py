import json

import pytest
from pydantic import ValidationError

from stackmin.logs import log_event
from stackmin.settings import Settings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("STACKMIN_INTERNAL_PREFIXES", raising=False)
    monkeypatch.delenv("STACKMIN_MAX_TRACE_BYTES", raising=False)
    s = load_settings()
    assert s.internal_prefixes == ("dart:", "package:")
    assert s.max_trace_bytes == 200_000


def test_prefixes_from_env(monkeypatch):
    monkeypatch.setenv("STACKMIN_INTERNAL_PREFIXES", " dart: , ,package:flutter/ ")
    assert load_settings().internal_prefixes == ("dart:", "package:flutter/")


def test_blank_prefixes_rejected():
    with pytest.raises(ValidationError):
        Settings(internal_prefixes=" , ")


def test_budget_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(max_trace_bytes=0)


def test_log_event_is_json(capsys):
    log_event("trace_minimized", frame_count=3)
    entry = json.loads(capsys.readouterr().out)
    assert entry == {"msg": "trace_minimized", "frame_count": 3}


def test_non_numeric_budget_rejected(monkeypatch):
    monkeypatch.setenv("STACKMIN_MAX_TRACE_BYTES", "200kb")
    with pytest.raises(ValidationError):
        load_settings()
