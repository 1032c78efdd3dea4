import base64

from fastapi.testclient import TestClient
from hoconfmt.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_format_replaces_space_indent():
    files = {"file": ("app.conf", b"\n  key = 1\n", "text/plain")}
    r = client.post("/format", files=files)
    assert r.status_code == 200

    data = r.json()
    assert base64.b64decode(data["formatted"]["content_b64"]) == b"\n\tkey = 1\n"
    assert data["report"]["changed"] is True
    assert data["report"]["indent_tabs"] == 1
    assert data["report"]["leading_blank_bytes"] == 1
    assert data["diff"] is None

def test_format_with_diff():
    files = {"file": ("app.conf", b"  key = 1\n", "text/plain")}
    r = client.post("/format", params={"diff": "true"}, files=files)
    assert r.status_code == 200
    diff = r.json()["diff"]
    assert "-  key = 1\n" in diff
    assert "+\tkey = 1\n" in diff

def test_unchanged_document():
    files = {"file": ("app.conf", b"key = 1\n", "text/plain")}
    data = client.post("/format", files=files).json()
    assert data["report"]["changed"] is False

def test_rejects_other_suffixes():
    files = {"file": ("data.csv", b"a,b\n", "text/csv")}
    r = client.post("/format", files=files)
    assert r.status_code == 422
