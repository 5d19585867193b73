import logging

import pytest

import app as app_module


@pytest.fixture
def client():
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"/api/diagnose" in resp.data


def test_diagnose_from_text(client):
    resp = client.post("/api/diagnose", json={"symptoms": "runny nose and sore throat with sneezing"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["diagnosis"]["condition"] == "Common Cold"
    assert body["diagnosis"]["should_see_doctor"] is False
    assert body["diagnosis"]["symptoms"][0]["severity"] == "moderate"
    assert body["disclaimer"]


def test_diagnose_from_symptom_records(client):
    payload = {
        "symptoms": [
            {"id": "1", "name": "sneezing", "severity": "mild", "duration": "recent",
             "description": "sneezing", "timestamp": "2024-01-01T00:00:00Z"},
            {"id": "2", "name": "nose", "severity": "mild", "duration": "recent",
             "description": "runny nose", "timestamp": "2024-01-01T00:00:01Z"},
        ]
    }
    resp = client.post("/api/diagnose", json=payload)
    assert resp.status_code == 200
    diagnosis = resp.get_json()["diagnosis"]
    assert diagnosis["condition"] == "Common Cold"
    assert [s["id"] for s in diagnosis["symptoms"]] == ["1", "2"]


def test_diagnose_blank_text_falls_back(client):
    resp = client.post("/api/diagnose", json={"symptoms": "   "})
    assert resp.status_code == 200
    assert resp.get_json()["diagnosis"]["condition"] == "Unspecified Condition"


def test_diagnose_missing_field(client):
    resp = client.post("/api/diagnose", json={"text": "fever"})
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_diagnose_not_json(client):
    resp = client.post("/api/diagnose", data="fever", content_type="text/plain")
    assert resp.status_code == 400


def test_diagnose_invalid_severity(client):
    resp = client.post("/api/diagnose", json={"symptoms": "fever", "severity": "extreme"})
    assert resp.status_code == 400
    assert "severity" in resp.get_json()["error"]


def test_diagnose_unexpected_error(client, monkeypatch):
    def boom(_symptoms):
        raise RuntimeError("boom")

    monkeypatch.setattr(app_module, "diagnose", boom)
    resp = client.post("/api/diagnose", json={"symptoms": "fever"})
    assert resp.status_code == 500
    assert resp.get_json()["error"] == app_module.PROCESSING_ERROR


def test_feedback_logged(client, caplog):
    with caplog.at_level("INFO", logger="symptom_checker.api"):
        resp = client.post("/api/feedback", json={"diagnosis_id": "abc", "was_helpful": True})
    assert resp.status_code == 200
    assert resp.get_json()["message"] == app_module.FEEDBACK_THANKS
    assert any("abc" in r.getMessage() for r in caplog.records)


def test_feedback_invalid(client):
    resp = client.post("/api/feedback", json={"diagnosis_id": "abc"})
    assert resp.status_code == 400
    resp = client.post("/api/feedback", json=[1, 2])
    assert resp.status_code == 400


def test_log_level_applied_on_import():
    level = logging.getLevelName(app_module.LOG_LEVEL)
    assert logging.getLogger("symptom_checker").level == level
    assert logging.getLogger("symptom_checker.engine").getEffectiveLevel() == level
