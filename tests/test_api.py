from __future__ import annotations

import base64
import re
from datetime import date, datetime

import pytest

from src.evidence_uploader.evidence_uploader.container import Container
from src.evidence_uploader.evidence_uploader.main import create_app, request_body_limit
from src.evidence_uploader.evidence_uploader.submissions.service import EvidenceSubmissionService
from tests.fakes import FakeClientFactory, InMemoryBackend, fixed_clock

SMALL_JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 64 + b"\xff\xd9"
DIRECTORY = [{"id": "123", "nombre": "Ana"}]


def _container(backend: InMemoryBackend, *, clock=None, max_size_bytes: int = 25 * 1024 * 1024) -> Container:
    factory = FakeClientFactory(backend)
    kwargs = {"clock": clock} if clock else {}
    service = EvidenceSubmissionService(factory, max_size_bytes=max_size_bytes, **kwargs)
    return Container(client_factory=factory, submission_service=service, max_size_bytes=max_size_bytes)


@pytest.fixture
def backend():
    return InMemoryBackend(directory=DIRECTORY)


@pytest.fixture
def client_for(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(container: Container):
        return create_app(container).test_client()

    return _make


def _body(**overrides):
    body = {
        "employeeId": "123",
        "kind": "entrada",
        "filename": "foto.jpg",
        "contentBase64": base64.b64encode(SMALL_JPEG).decode("ascii"),
    }
    body.update(overrides)
    return body


def test_health(client_for, backend):
    resp = client_for(_container(backend)).get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}
    assert backend.calls == []


def test_upload_success_scenario(client_for, backend):
    client = client_for(_container(backend))

    resp = client.post("/api/upload", json=_body())

    assert resp.status_code == 201
    assert resp.get_json() == {"ok": True, "prUrl": "https://github.com/acme/evidencias/pull/1"}
    today = date.today().strftime("%Y-%m-%d")
    pr = backend.pull_requests[0]
    assert re.fullmatch(rf"evidencia/123/{today}-\d{{6}}", pr["head"])
    assert pr["title"] == f"ENTRADA: Ana (123) - {today}"
    assert backend.labels == {1: ["evidencia"]}


def test_upload_writes_evidence_and_metadata(client_for, backend):
    client = client_for(_container(backend, clock=fixed_clock(datetime(2026, 10, 19, 7, 59, 1))))

    client.post("/api/upload", json=_body(notes="  portón norte "))

    branch = "evidencia/123/2026-10-19-075901"
    assert backend.files[(branch, "evidencias/123/2026-10-19/entrada-075901-foto.jpg")] == SMALL_JPEG
    assert (branch, "evidencias/123/2026-10-19/entrada-075901-meta.json") in backend.files
    assert "- Notas: portón norte" in backend.pull_requests[0]["body"]


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"kind": "invalida"}, "Tipo inválido."),
        ({"filename": "doc.exe"}, "Extensión no permitida."),
        ({"employeeId": "999"}, "Empleado no válido."),
        ({"filename": None}, "Faltan campos requeridos."),
    ],
)
def test_upload_rejections(client_for, backend, overrides, message):
    client = client_for(_container(backend))

    resp = client.post("/api/upload", json=_body(**overrides))

    assert resp.status_code == 400
    assert resp.get_json() == {"message": message}
    assert set(backend.branches) == {"main"}


def test_upload_too_large_with_default_limit(client_for, backend):
    client = client_for(_container(backend))
    content = base64.b64encode(b"\0" * (26 * 1024 * 1024)).decode("ascii")

    resp = client.post("/api/upload", json=_body(contentBase64=content))

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Archivo demasiado grande."}


def test_non_json_body_is_missing_fields(client_for, backend):
    resp = client_for(_container(backend)).post("/api/upload", data="hola", content_type="text/plain")

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Faltan campos requeridos."}


def test_backend_failure_is_generic_500(client_for, backend):
    backend.fail_on.add("create_pull_request")
    client = client_for(_container(backend))

    resp = client.post("/api/upload", json=_body())

    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Error interno al procesar la evidencia."}
    assert len(backend.commits) == 2


def test_branch_collision_is_500(client_for, backend):
    client = client_for(_container(backend, clock=fixed_clock(datetime(2026, 10, 19, 7, 59, 1))))

    assert client.post("/api/upload", json=_body()).status_code == 201
    resp = client.post("/api/upload", json=_body())

    assert resp.status_code == 500
    assert "already exists" not in resp.get_data(as_text=True)


def test_label_failure_still_201(client_for, backend):
    backend.fail_on.add("add_labels")

    resp = client_for(_container(backend)).post("/api/upload", json=_body())

    assert resp.status_code == 201


def test_oversized_body_gets_413(client_for, backend):
    client = client_for(_container(backend, max_size_bytes=10))
    limit = request_body_limit(10)

    resp = client.post("/api/upload", data=b"x" * (limit + 1), content_type="application/json")

    assert resp.status_code == 413
    assert resp.get_json() == {"message": "Archivo demasiado grande."}


def test_request_body_limit_fits_base64_payload():
    assert request_body_limit(1) == 30 * 1024 * 1024
    assert request_body_limit(60 * 1024 * 1024) > 80 * 1024 * 1024


def test_cors_headers_present(client_for, backend):
    resp = client_for(_container(backend)).get("/health", headers={"Origin": "https://app.example"})

    assert resp.headers.get("Access-Control-Allow-Origin") in {"*", "https://app.example"}
