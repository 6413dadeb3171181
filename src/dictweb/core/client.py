# src/dictweb/core/client.py
"""
HTTP client for the dictionary service.

    GET <base_url><word>  ->  RawResponse(status_code, body)

Redirects are followed. Requests that never produce a final response
raise TransportFailure; a body that cannot be content-decoded raises
MalformedPayloadError. Any status code comes back as a RawResponse; the
caller decides what a non-2xx body means.
"""

from dataclasses import dataclass
from urllib.parse import quote

import httpx

from dictweb.config import DEFAULT_API_URL
from dictweb.core.errors import MalformedPayloadError, TransportFailure
from dictweb.logging_setup import get_logger

log = get_logger("client")


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: bytes

    @property
    def ok(self) -> bool:
        return str(self.status_code).startswith("2")


class DictionaryClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        http: httpx.Client | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._owns_http = http is None
        self.http = http or httpx.Client(timeout=timeout)

    def build_url(self, word: str) -> str:
        quoted = quote(word, safe="")
        # "." and ".." would be collapsed as dot segments by the URL parser
        if quoted in (".", ".."):
            quoted = quoted.replace(".", "%2E")
        return self.base_url + quoted

    def fetch(self, word: str) -> RawResponse:
        url = self.build_url(word)
        try:
            r = self.http.get(url, timeout=self.timeout, follow_redirects=True)
        except httpx.DecodingError as e:
            log.error("failed to decode body of %s: %s", url, e)
            raise MalformedPayloadError("upstream", word, str(e)) from e
        except httpx.RequestError as e:
            log.error("failed to GET %s: %s", url, e)
            raise TransportFailure(word, e) from e
        log.info("response status code: %s", r.status_code)
        return RawResponse(r.status_code, r.content)

    def close(self):
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "DictionaryClient":
        return self

    def __exit__(self, *exc):
        self.close()
