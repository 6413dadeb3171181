# tests/conftest.py
"""Shared fixtures: a fake dictionary service and an app wired to it."""

import json
from urllib.parse import unquote

import httpx
import pytest
from fastapi.testclient import TestClient

from dictweb.config import Settings
from dictweb.logging_setup import get_logger
from dictweb.server.main import create_app


API_URL = "https://dict.test/api/v2/entries/en/"

HELLO = [
    {
        "word": "hello",
        "phonetic": "həˈləʊ",
        "phonetics": [
            {"text": "həˈləʊ", "audio": "https://dict.test/media/hello-uk.mp3"},
            {"text": "hɛˈləʊ"},
        ],
        "origin": "early 19th century: variant of earlier hollo.",
        "meanings": [
            {
                "partOfSpeech": "exclamation",
                "definitions": [
                    {
                        "definition": "used as a greeting or to begin a phone conversation.",
                        "example": "hello there, Katie!",
                        "synonyms": [],
                        "antonyms": [],
                    }
                ],
                "synonyms": [],
                "antonyms": [],
            },
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": "an utterance of 'hello'; a greeting.",
                        "example": "she was getting polite nods and hellos from people",
                        "synonyms": ["greeting"],
                        "antonyms": [],
                    }
                ],
                "synonyms": ["greeting", "salutation"],
                "antonyms": ["goodbye"],
            },
        ],
        "license": {"name": "CC BY-SA 3.0", "url": "https://dict.test/license"},
        "sourceUrls": ["https://dict.test/wiki/hello"],
    }
]

NOT_FOUND = {
    "title": "No Definitions Found",
    "message": "Sorry pal, we couldn't find definitions for the word you were looking for.",
    "resolution": "You can try the search again at later time or head to the web instead.",
}


def body(data) -> bytes:
    return json.dumps(data).encode()


class FakeUpstream:
    """Stands in for the dictionary service; records every request."""

    def __init__(self):
        self.responses: dict[str, tuple[int, bytes]] = {}
        self.calls: list[str] = []
        self.raw_paths: list[str] = []
        self.headers: dict[str, dict[str, str]] = {}
        self.error: Exception | None = None

    def add(self, word: str, status: int = 200, content: bytes | None = None, headers: dict | None = None):
        self.responses[word] = (status, body(HELLO) if content is None else content)
        if headers:
            self.headers[word] = headers

    def handler(self, request: httpx.Request) -> httpx.Response:
        raw_path = request.url.raw_path.decode()
        word = unquote(raw_path.rsplit("/", 1)[-1])
        self.calls.append(word)
        self.raw_paths.append(raw_path)
        if self.error is not None:
            raise self.error
        status, content = self.responses.get(word, (404, body(NOT_FOUND)))
        return httpx.Response(status, headers=self.headers.get(word), content=content)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream():
    up = FakeUpstream()
    up.add("hello")
    return up


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def settings(cache_dir):
    return Settings(api_url=API_URL, cache_dir=cache_dir, rate_interval=0)


@pytest.fixture
def app(settings, upstream):
    return create_app(settings, http=upstream.client())


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def dictweb_log(caplog):
    """caplog wired straight to the "dictweb" logger, which does not propagate."""
    logger = get_logger()
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
