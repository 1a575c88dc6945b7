import json

import pytest
from fastapi.testclient import TestClient

from stackmin.app import app

TRACE = (
    "#0      _rootRun (dart:async/zone.dart:683)\n"
    "#1      _RootZone.run (dart:async/zone.dart:823)\n"
    "#2      main (chrome-extension://abcd1234/web/main.dart:9:5)"
)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("STACKMIN_INTERNAL_PREFIXES", raising=False)
    monkeypatch.delenv("STACKMIN_MAX_TRACE_BYTES", raising=False)
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["internal_prefixes"] == ["dart:", "package:"]


def test_minimize(client, capsys):
    resp = client.post("/v1/traces/minimize", json={"stack_trace": TRACE})
    assert resp.status_code == 200
    body = resp.json()
    assert body["stack_trace"] == "_RootZone.run dart:async/zone.dart:823\nmain web/main.dart:9:5"
    assert body["frame_count"] == 3
    assert body["retained_count"] == 2
    assert body["trimmed_count"] == 1

    logged = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert logged[-1]["msg"] == "trace_minimized"
    assert TRACE not in str(logged)


def test_minimize_null_trace(client):
    resp = client.post("/v1/traces/minimize", json={"stack_trace": None})
    assert resp.status_code == 200
    assert resp.json()["stack_trace"] == ""
    assert resp.json()["frame_count"] == 0


def test_minimize_rejects_non_string(client):
    resp = client.post("/v1/traces/minimize", json={"stack_trace": 42})
    assert resp.status_code == 422


def test_minimize_over_budget(client, monkeypatch):
    monkeypatch.setenv("STACKMIN_MAX_TRACE_BYTES", "16")
    resp = client.post("/v1/traces/minimize", json={"stack_trace": TRACE})
    assert resp.status_code == 413


def test_frames(client):
    resp = client.post("/v1/traces/frames", json={"stack_trace": TRACE + "\nnot a frame"})
    assert resp.status_code == 200
    frames = resp.json()["frames"]
    assert [f["is_internal"] for f in frames] == [True, True, False, False]
    assert frames[2]["location"] == "web/main.dart:9:5"
    assert frames[3] == {"raw_text": "not a frame", "method": None, "location": None, "is_internal": False}


def test_custom_prefixes(client, monkeypatch):
    monkeypatch.setenv("STACKMIN_INTERNAL_PREFIXES", "package:")
    resp = client.post("/v1/traces/minimize", json={"stack_trace": TRACE})
    assert resp.json()["trimmed_count"] == 0
