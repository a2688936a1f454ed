from fastapi.testclient import TestClient

from clarityspace.core.sample_payloads import SAMPLE_LEAD, SAMPLE_REQUESTS
from clarityspace.leads import leads_client
from clarityspace.main import app

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_tool_catalogue():
    keys = [t["key"] for t in client.get("/tools").json()]
    assert keys == ["resilience", "protection", "education", "retirement"]


def test_protection_estimate():
    resp = client.post("/tools/protection", json=SAMPLE_REQUESTS["protection"])
    assert resp.status_code == 200
    body = resp.json()
    assert body["label"] == "RISK"
    assert body["result"]["total_gap"] == 1254000
    assert body["contact_href"].startswith("/contact?tool=protection")


def test_estimate_without_result():
    resp = client.post("/tools/resilience", json={"essentials": 0})
    assert resp.status_code == 200
    assert resp.json()["has_result"] is False
    assert resp.json()["summary"] == ""


def test_estimate_rejects_out_of_range_rate():
    resp = client.post("/tools/retirement", json={"inflation_pct": 12})
    assert resp.status_code == 422


def test_unknown_tool_is_rejected():
    assert client.post("/tools/crypto", json={}).status_code == 422


def test_contact_invalid_form():
    resp = client.post("/contact", json={**SAMPLE_LEAD, "mobile": "1234"})
    assert resp.status_code == 422
    assert resp.json()["detail"]["field"] == "mobile"


def test_contact_without_endpoint(monkeypatch):
    monkeypatch.setattr(leads_client, "LEADS_ENDPOINT", "")
    assert client.post("/contact", json=SAMPLE_LEAD).status_code == 503


def test_contact_sends_lead(monkeypatch):
    sent = []

    class Ok:
        ok = True
        status_code = 200
        text = ""

    def fake_post(url, json=None, headers=None, timeout=None):
        sent.append(json)
        return Ok()

    monkeypatch.setattr(leads_client, "LEADS_ENDPOINT", "https://leads.example/hook")
    monkeypatch.setattr(leads_client.requests, "post", fake_post)
    resp = client.post("/contact", json=SAMPLE_LEAD)
    assert resp.status_code == 200
    assert resp.json() == {"sent": True, "preferred_contact": "WhatsApp"}
    assert sent[0]["mobile"] == "+6591234567"
    assert sent[0]["tool"] == "resilience"


def test_contact_upstream_failure(monkeypatch):
    class Bad:
        ok = False
        status_code = 400
        text = "bad payload"

    monkeypatch.setattr(leads_client, "LEADS_ENDPOINT", "https://leads.example/hook")
    monkeypatch.setattr(leads_client.requests, "post", lambda *a, **k: Bad())
    resp = client.post("/contact", json=SAMPLE_LEAD)
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Couldn't send. bad payload"
