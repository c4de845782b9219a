from __future__ import annotations

from typing import Any

import pytest
import requests

from sentiment_analyzer.http_client import HttpConfig, InferenceClient, upstream_error_detail


def _response(status: int, body: bytes) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = "https://example.test/model"
    return resp


class _RecordingSession(requests.Session):
    def __init__(self, response: requests.Response | None = None, error: Exception | None = None):
        super().__init__()
        self.posts: list[dict[str, Any]] = []
        self._response = response
        self._error = error

    def post(self, url, **kwargs):  # type: ignore[override]
        self.posts.append({"url": url, **kwargs})
        if self._error is not None:
            raise self._error
        return self._response


def _client(session: requests.Session, timeout: float | None = None) -> InferenceClient:
    return InferenceClient(HttpConfig(timeout_sec=timeout, user_agent="test-agent"), session=session)


def test_post_json_sends_bearer_token_and_json_body():
    session = _RecordingSession(_response(200, b'[{"label": "POSITIVE", "score": 0.9}]'))
    data = _client(session, timeout=5.0).post_json(
        "https://example.test/model", {"inputs": "hi"}, "hf_secret"
    )

    assert data == [{"label": "POSITIVE", "score": 0.9}]
    assert len(session.posts) == 1
    sent = session.posts[0]
    assert sent["url"] == "https://example.test/model"
    assert sent["json"] == {"inputs": "hi"}
    assert sent["headers"] == {
        "Authorization": "Bearer hf_secret",
        "Content-Type": "application/json",
    }
    assert sent["timeout"] == 5.0
    assert session.headers["User-Agent"] == "test-agent"


def test_post_json_empty_body_returns_none():
    session = _RecordingSession(_response(200, b""))
    assert _client(session).post_json("https://example.test/model", {"inputs": "hi"}, "k") is None


def test_post_json_non_2xx_raises_without_retry():
    session = _RecordingSession(_response(401, b'{"error": "Invalid credentials in Authorization header"}'))
    with pytest.raises(requests.HTTPError) as exc_info:
        _client(session).post_json("https://example.test/model", {"inputs": "hi"}, "bad")

    assert len(session.posts) == 1
    assert upstream_error_detail(exc_info.value) == "Invalid credentials in Authorization header"


def test_post_json_connection_error_propagates():
    session = _RecordingSession(error=requests.ConnectionError("boom"))
    with pytest.raises(requests.ConnectionError):
        _client(session).post_json("https://example.test/model", {"inputs": "hi"}, "k")
    assert len(session.posts) == 1


def test_post_json_invalid_json_is_a_request_exception():
    session = _RecordingSession(_response(200, b"not json"))
    with pytest.raises(requests.RequestException):
        _client(session).post_json("https://example.test/model", {"inputs": "hi"}, "k")


def test_upstream_error_detail_variants():
    assert upstream_error_detail(requests.ConnectionError("x")) is None
    err = requests.HTTPError("500", response=_response(500, b'{"error": ["a", "b"]}'))
    assert upstream_error_detail(err) == "a; b"
    err = requests.HTTPError("500", response=_response(500, b'{"message": "nope"}'))
    assert upstream_error_detail(err) is None
