from __future__ import annotations

import json

import pytest

from checkin_system import create_app
from checkin_system.core.constants import RECORDS_KEY


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["checkin_container"]


def _login(client, password="2020"):
    return client.post("/professor/login", data={"username": "professor", "password": password})


def test_checkin_form_renders_when_enabled(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert "Registro de Presença" in resp.get_data(as_text=True)


def test_checkin_disabled_page(client, container):
    container.review_service.toggle_gate(False)

    resp = client.get("/")

    assert "Check-in Desativado" in resp.get_data(as_text=True)


def test_form_submission_success_clears_inputs(client, container):
    resp = client.post("/", data={"full_name": "João Silva", "enrollment_id": "123"})
    body = resp.get_data(as_text=True)

    assert "Presença registrada com sucesso" in body
    assert 'value="João Silva"' not in body
    assert len(container.record_store.list_records()) == 1


def test_form_submission_failure_keeps_inputs(client, container):
    resp = client.post("/", data={"full_name": "João", "enrollment_id": "123"})
    body = resp.get_data(as_text=True)

    assert "pelo menos duas palavras" in body
    assert 'value="João"' in body
    assert container.record_store.list_records() == []


def test_api_checkin_status_codes(client, container):
    ok = client.post("/api/checkins", json={"full_name": "João Silva", "enrollment_id": "123"})
    dup = client.post("/api/checkins", json={"full_name": "João Silva", "enrollment_id": "123"})
    bad = client.post("/api/checkins", json={"full_name": "João Silva", "enrollment_id": " "})

    assert ok.status_code == 201
    assert ok.get_json()["record"]["enrollment_id"] == "123"
    assert dup.status_code == 409
    assert dup.get_json()["existing_time"] == ok.get_json()["record"]["time_label"]
    assert bad.status_code == 400

    container.review_service.toggle_gate(False)
    closed = client.post("/api/checkins", json={"full_name": "Ana Pereira", "enrollment_id": "456"})
    assert closed.status_code == 403
    assert len(container.record_store.list_records()) == 1


def test_panel_requires_login(client):
    resp = client.get("/professor")

    assert resp.status_code == 302
    assert "/professor/login" in resp.headers["Location"]


def test_wrong_password_keeps_panel_locked(client):
    resp = _login(client, password="nope")

    assert resp.status_code == 401
    assert "Credenciais inválidas" in resp.get_data(as_text=True)
    assert client.get("/professor").status_code == 302


def test_panel_lists_todays_records(client):
    client.post("/api/checkins", json={"full_name": "João Silva", "enrollment_id": "123"})
    _login(client)

    resp = client.get("/professor")

    assert resp.status_code == 200
    assert "João Silva" in resp.get_data(as_text=True)


def test_gate_toggle_route(client, container):
    _login(client)

    client.post("/professor/gate", data={"enabled": "0"})
    assert container.record_store.get_config().enabled is False
    assert container.record_store.get_config().updated_by == "professor"

    client.post("/professor/gate", data={"enabled": "1"})
    assert container.record_store.get_config().enabled is True


def test_delete_needs_confirmation_post(client, container):
    record_id = client.post(
        "/api/checkins", json={"full_name": "João Silva", "enrollment_id": "123"}
    ).get_json()["record"]["id"]
    _login(client)

    page = client.get(f"/professor/records/{record_id}/delete")
    assert "Tem certeza que deseja apagar o registro de João Silva?" in page.get_data(as_text=True)

    client.post(f"/professor/records/{record_id}/delete", data={})
    assert len(container.record_store.list_records()) == 1

    client.post(f"/professor/records/{record_id}/delete", data={"confirm": "yes"})
    assert container.record_store.list_records() == []


def test_export_route_returns_csv(client):
    client.post("/api/checkins", json={"full_name": "João Silva", "enrollment_id": "123"})
    _login(client)

    resp = client.get("/professor/export?mode=day")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "presencas_export_day_" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Data,Hora,Nome Completo,Matricula,Status,IP,Dispositivo"
    assert len(lines) == 2


def test_export_of_empty_view_redirects(client):
    _login(client)

    resp = client.get("/professor/export")

    assert resp.status_code == 302


@pytest.mark.parametrize("payload", [
    {"full_name": "João Silva", "enrollment_id": None},
    {"full_name": "João Silva"},
    {"full_name": None, "enrollment_id": "123"},
])
def test_api_null_or_missing_fields_are_validation_errors(client, container, payload):
    resp = client.post("/api/checkins", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert container.record_store.list_records() == []


def test_api_numeric_enrollment_is_stored_as_text(client, container):
    resp = client.post("/api/checkins", json={"full_name": "João Silva", "enrollment_id": 456})

    assert resp.status_code == 201
    assert resp.get_json()["record"]["enrollment_id"] == "456"
    assert [r.enrollment_id for r in container.record_store.list_records()] == ["456"]


@pytest.mark.parametrize("body", [["x"], "João Silva", 7])
def test_api_non_object_body_is_validation_error(client, container, body):
    resp = client.post("/api/checkins", json=body)

    assert resp.status_code == 400
    assert container.record_store.list_records() == []


def test_panel_tolerates_malformed_date_key(client, container):
    record = client.post(
        "/api/checkins", json={"full_name": "João Silva", "enrollment_id": "123"}
    ).get_json()["record"]
    record["date_key"] = "not-a-date"
    container.kv_store.set(RECORDS_KEY, json.dumps([record]))
    _login(client)

    resp = client.get("/professor?mode=year")

    assert resp.status_code == 200
    assert "not-a-date" in resp.get_data(as_text=True)


def test_export_filename_is_quoted(client):
    client.post("/api/checkins", json={"full_name": "João Silva", "enrollment_id": "123"})
    _login(client)

    resp = client.get("/professor/export?mode=day")

    disposition = resp.headers["Content-Disposition"]
    assert disposition.startswith('attachment; filename="presencas_export_day_')
    assert disposition.endswith('.csv"')
