"""Tests for the HTTP submission client."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from recharge.adapters.submission import (
    NOT_CONFIGURED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    HTTPSubmissionClient,
)

ENDPOINT = "https://forms.example.com/submit"


def make_response(status, body=b"", reason=None):
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.reason = reason
    response.encoding = "utf-8"
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return HTTPSubmissionClient(endpoint=ENDPOINT, session=session)


@pytest.mark.parametrize("endpoint", [None, "", "   "])
def test_unconfigured_endpoint_fails_without_network(session, endpoint):
    client = HTTPSubmissionClient(endpoint=endpoint, session=session)

    result = client.submit("Alice", ["bali", "taiwan"])

    assert result.to_dict() == {"success": False, "error": NOT_CONFIGURED_MESSAGE}
    session.post.assert_not_called()


def test_posts_json_body_with_content_type(client, session):
    session.post.return_value = make_response(200, b"{}", "OK")

    result = client.submit("Alice", ["bali", "taiwan"])

    assert result.to_dict() == {"success": True}
    args, kwargs = session.post.call_args
    assert args == (ENDPOINT,)
    assert kwargs["json"] == {"name": "Alice", "destinations": ["bali", "taiwan"]}
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert kwargs["timeout"] == 10.0


def test_created_status_counts_as_success(client, session):
    session.post.return_value = make_response(201, b"", "Created")

    assert client.submit("Bob", []).success is True


@pytest.mark.parametrize(
    "status, reason",
    [(300, "Multiple Choices"), (302, "Found"), (304, "Not Modified")],
)
def test_redirect_status_is_a_failure(client, session, status, reason):
    session.post.return_value = make_response(status, b"", reason)

    result = client.submit("Alice", ["bali"])

    assert result.to_dict() == {"success": False, "error": reason}


def test_error_message_taken_from_json_body(client, session):
    body = json.dumps({"error": {"message": "bad input"}}).encode()
    session.post.return_value = make_response(500, body, "Internal Server Error")

    result = client.submit("Alice", ["bali", "taiwan"])

    assert result.to_dict() == {"success": False, "error": "bad input"}


def test_unparseable_error_body_falls_back_to_status_text(client, session):
    session.post.return_value = make_response(500, b"<html>oops</html>", "Internal Server Error")

    result = client.submit("Alice", ["bali", "taiwan"])

    assert result.to_dict() == {"success": False, "error": "Internal Server Error"}


@pytest.mark.parametrize(
    "body",
    [
        {"error": "flat string"},
        {"error": {"code": 42}},
        {"error": {"message": ""}},
        ["not", "a", "dict"],
    ],
)
def test_error_body_without_nested_message_uses_status_text(client, session, body):
    session.post.return_value = make_response(422, json.dumps(body).encode(), "Unprocessable Entity")

    assert client.submit("Alice", []).error == "Unprocessable Entity"


def test_missing_reason_phrase_uses_status_code(client, session):
    session.post.return_value = make_response(503, b"", None)

    assert client.submit("Alice", []).error == "HTTP 503"


def test_network_error_message_is_returned(client, session):
    session.post.side_effect = requests.ConnectionError("Connection refused")

    result = client.submit("Alice", ["bali"])

    assert result.to_dict() == {"success": False, "error": "Connection refused"}


def test_network_error_without_message_uses_generic_text(client, session):
    session.post.side_effect = requests.Timeout()

    assert client.submit("Alice", ["bali"]).error == UNEXPECTED_ERROR_MESSAGE


def test_unexpected_exception_never_escapes(client, session):
    session.post.side_effect = RuntimeError("socket exploded")

    result = client.submit("Alice", ["bali"])

    assert result.success is False
    assert result.error == "socket exploded"
