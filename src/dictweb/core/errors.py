# src/dictweb/core/errors.py
"""
Errors raised along the lookup pipeline.

Cache misses and cache write failures are not errors; they are reported
through return values. Only failures that change what the user sees are
raised.
"""


class DictwebError(Exception):
    """Base class for dictweb errors."""


class TransportFailure(DictwebError):
    """No final response from the dictionary service (connect error, timeout, redirect loop)."""

    def __init__(self, word: str, cause: Exception):
        super().__init__(f"failed to fetch {word!r}: {cause}")
        self.word = word
        self.cause = cause


class MalformedPayloadError(DictwebError):
    """A cached or fetched body could not be decoded."""

    def __init__(self, source: str, key: str, detail: str = ""):
        msg = f"malformed {source} payload for {key!r}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.source = source
        self.key = key
