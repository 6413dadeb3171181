# tests/test_client.py
"""Tests for the dictionary service client."""

import httpx
import pytest

from dictweb.core.client import DictionaryClient, RawResponse
from dictweb.core.errors import MalformedPayloadError, TransportFailure

from conftest import API_URL, HELLO, body


@pytest.fixture
def dictionary(upstream):
    return DictionaryClient(API_URL, timeout=2.0, http=upstream.client())


def test_build_url():
    c = DictionaryClient(API_URL)
    try:
        assert c.build_url("hello") == API_URL + "hello"
        assert c.build_url("ice cream") == API_URL + "ice%20cream"
        assert c.build_url("a/b?c#d") == API_URL + "a%2Fb%3Fc%23d"
        assert c.build_url("café") == API_URL + "caf%C3%A9"
        assert c.build_url("..") == API_URL + "%2E%2E"
        assert c.build_url(".") == API_URL + "%2E"
        assert c.build_url("...") == API_URL + "..."
    finally:
        c.close()


def test_fetch_ok(dictionary, upstream):
    resp = dictionary.fetch("hello")

    assert resp.status_code == 200
    assert resp.ok
    assert resp.body == body(HELLO)
    assert upstream.calls == ["hello"]


def test_fetch_not_found_is_a_response(dictionary):
    resp = dictionary.fetch("zzzz")

    assert resp.status_code == 404
    assert not resp.ok
    assert b"No Definitions Found" in resp.body


def test_fetch_sends_encoded_word(dictionary, upstream):
    dictionary.fetch("../secret")

    assert upstream.raw_paths == ["/api/v2/entries/en/..%2Fsecret"]
    assert upstream.calls == ["../secret"]


@pytest.mark.parametrize("status,ok", [
    (200, True),
    (201, True),
    (204, True),
    (299, True),
    (301, False),
    (404, False),
    (429, False),
    (500, False),
])
def test_raw_response_ok(status, ok):
    assert RawResponse(status, b"").ok is ok


@pytest.mark.parametrize("error", [
    httpx.ConnectError("connection refused"),
    httpx.ReadTimeout("timed out"),
])
def test_transport_errors(dictionary, upstream, error):
    upstream.error = error

    with pytest.raises(TransportFailure) as exc:
        dictionary.fetch("hello")

    assert exc.value.word == "hello"
    assert exc.value.cause is error


def test_injected_client_is_not_closed(upstream):
    http = upstream.client()
    with DictionaryClient(API_URL, http=http) as c:
        c.fetch("hello")

    assert not http.is_closed


def test_own_client_is_closed():
    c = DictionaryClient(API_URL)
    c.close()

    assert c.http.is_closed


def test_fetch_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v3/hello":
            return httpx.Response(200, content=body(HELLO))
        return httpx.Response(301, headers={"location": "https://dict.test/v3/hello"})

    http = httpx.Client(transport=httpx.MockTransport(handler))
    with DictionaryClient(API_URL, http=http) as c:
        resp = c.fetch("hello")

    assert resp.status_code == 200
    assert resp.body == body(HELLO)


def test_redirect_loop_is_a_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"location": str(request.url)})

    http = httpx.Client(transport=httpx.MockTransport(handler))
    with DictionaryClient(API_URL, http=http) as c:
        with pytest.raises(TransportFailure) as exc:
            c.fetch("hello")

    assert isinstance(exc.value.cause, httpx.TooManyRedirects)


def test_undecodable_body_is_malformed(dictionary, upstream):
    upstream.add("hello", content=b"not gzip", headers={"content-encoding": "gzip"})

    with pytest.raises(MalformedPayloadError) as exc:
        dictionary.fetch("hello")

    assert exc.value.source == "upstream"
    assert exc.value.key == "hello"
