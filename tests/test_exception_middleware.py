"""Tests for the exception middleware and the validation handler, on a bare app."""
import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, OperationalError

from app.domain.exceptions import (
    ConflictError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)
from app.shared.middleware import AsyncExceptionMiddleware, request_validation_exception_handler


class _Body(BaseModel):
    name: str
    age: int


def _build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(AsyncExceptionMiddleware)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("User with ID 7 not found")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("User with email a@b.c already exists.")

    @app.get("/invalid")
    async def invalid():
        raise ValidationError("Invalid input data", fields={"email": "Invalid email format"})

    @app.get("/database")
    async def database():
        raise UnexpectedError("Error listing users", original_error=Exception("password=hunter2"))

    @app.get("/integrity")
    async def integrity():
        raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.email"))

    @app.get("/operational")
    async def operational():
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    @app.get("/boom")
    async def boom():
        raise KeyError("secret")

    @app.post("/body")
    async def body(payload: _Body):
        return payload

    return app


@pytest.fixture
async def bare_client():
    transport = ASGITransport(app=_build_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_not_found_maps_to_404(bare_client):
    response = await bare_client.get("/not-found")

    assert response.status_code == 404
    assert response.json() == {"detail": "User with ID 7 not found", "code": "RESOURCE_NOT_FOUND"}


async def test_conflict_maps_to_400(bare_client):
    response = await bare_client.get("/conflict")

    assert response.status_code == 400
    assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"


async def test_invalid_input_lists_field_errors(bare_client):
    response = await bare_client.get("/invalid")

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "email", "message": "Invalid email format"}]


async def test_integrity_error_on_unique_constraint_maps_to_400(bare_client):
    response = await bare_client.get("/integrity")

    assert response.status_code == 400
    assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"


@pytest.mark.parametrize("path", ["/database", "/operational", "/boom"])
async def test_unexpected_errors_are_not_echoed(bare_client, path):
    response = await bare_client.get(path)

    assert response.status_code == 500
    assert response.json() == {"detail": "An unexpected error occurred", "code": "INTERNAL_SERVER_ERROR"}


async def test_successful_responses_carry_process_time(bare_client):
    response = await bare_client.post("/body", json={"name": "x", "age": 3})

    assert response.status_code == 200
    assert "x-process-time" in response.headers


async def test_request_validation_returns_400_with_fields(bare_client):
    response = await bare_client.post("/body", json={"age": "old"})

    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Validation failed"
    assert body["code"] == "VALIDATION_ERROR"
    assert {error["field"] for error in body["errors"]} == {"name", "age"}
