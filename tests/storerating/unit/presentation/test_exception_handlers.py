"""Unit tests for the API exception handlers."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from storerating.domain.shared import (
    ErrorCode,
    ForbiddenError,
    UnauthenticatedError,
    ValidationError,
)
from storerating.domain.store import StoreEmailAlreadyExistsError, StoreNotFoundError
from storerating.presentation.api.exception_handlers import (
    ERROR_CODE_TO_STATUS,
    setup_exception_handlers,
)
from storerating.presentation.api.schemas import SubmitRatingRequest


@pytest.fixture(scope="module")
def client() -> TestClient:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/unauthenticated")
    async def unauthenticated():
        raise UnauthenticatedError

    @app.get("/forbidden")
    async def forbidden():
        raise ForbiddenError("Unauthorized")

    @app.get("/missing")
    async def missing():
        raise StoreNotFoundError(9)

    @app.get("/conflict")
    async def conflict():
        raise StoreEmailAlreadyExistsError("corner@example.com")

    @app.get("/invalid")
    async def invalid():
        raise ValidationError("Please provide either ownerId or all details")

    @app.get("/http")
    async def http():
        raise HTTPException(status_code=418, detail="Teapot")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database is on fire")

    @app.post("/ratings")
    async def ratings(body: SubmitRatingRequest):
        return {"ok": True}

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize(
    ("path", "status", "code"),
    [
        ("/unauthenticated", 401, "UNAUTHENTICATED"),
        ("/forbidden", 403, "FORBIDDEN"),
        ("/missing", 404, "STORE_NOT_FOUND"),
        ("/conflict", 409, "CONFLICT"),
        ("/invalid", 400, "VALIDATION_ERROR"),
        ("/boom", 500, "INTERNAL_ERROR"),
    ],
)
def test_error_envelope(client, path, status, code):
    response = client.get(path)

    assert response.status_code == status
    body = response.json()
    assert body["code"] == code
    assert set(body) == {"error", "code"}


def test_internal_error_hides_details(client):
    assert client.get("/boom").json()["error"] == "An internal error occurred"


def test_http_exception_uses_error_key(client):
    response = client.get("/http")

    assert response.status_code == 418
    assert response.json() == {"error": "Teapot"}


def test_request_validation_lists_every_field(client):
    response = client.post("/ratings", json={"storeId": "abc", "rating": 9})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["errors"] == [
        {"msg": "storeId must be a valid integer", "path": "storeId", "location": "body"},
        {
            "msg": "Rating must be an integer between 1 and 5",
            "path": "rating",
            "location": "body",
        },
    ]


def test_missing_body_field(client):
    response = client.post("/ratings", json={"rating": 3})

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"msg": "Field required", "path": "storeId", "location": "body"},
    ]


def test_every_error_code_has_a_status():
    assert set(ERROR_CODE_TO_STATUS) == set(ErrorCode)
