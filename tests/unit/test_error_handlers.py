"""
Unit tests for the HTTP rendering of domain errors.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bloglist.api.v1.error_handlers import register_exception_handlers
from bloglist.domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateKeyError,
    NotFoundError,
    TokenError,
    ValidationError,
)


@pytest.fixture
def client():
    application = FastAPI()
    register_exception_handlers(application)

    errors = {
        "validation": ValidationError("`title` is required", field="title"),
        "duplicate": DuplicateKeyError("username"),
        "credentials": AuthenticationError("invalid username or password"),
        "token": TokenError(TokenError.EXPIRED),
        "ownership": AuthorizationError(),
        "missing": NotFoundError("blog not found"),
        "crash": RuntimeError("connection string with password=hunter2"),
    }

    @application.get("/raise/{kind}")
    async def raise_error(kind: str):
        raise errors[kind]

    return TestClient(application, raise_server_exceptions=False)


@pytest.mark.parametrize(
    "kind,status_code,message",
    [
        ("validation", 400, "`title` is required"),
        ("duplicate", 400, "expected `username` to be unique"),
        ("credentials", 401, "invalid username or password"),
        ("token", 401, "token expired"),
        ("ownership", 401, "token invalid"),
        ("missing", 404, "blog not found"),
    ],
)
def test_domain_errors_render_error_body(client, kind, status_code, message):
    response = client.get(f"/raise/{kind}")
    assert response.status_code == status_code
    assert response.json() == {"error": message}


def test_token_errors_advertise_bearer_scheme(client):
    response = client.get("/raise/token")
    assert response.headers["www-authenticate"] == "Bearer"


def test_unexpected_error_hides_details(client):
    response = client.get("/raise/crash")
    assert response.status_code == 500
    assert response.json() == {"error": "internal server error"}


def test_unknown_route_uses_error_body(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert "error" in response.json()
