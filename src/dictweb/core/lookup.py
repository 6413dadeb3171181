# src/dictweb/core/lookup.py
"""
Resolve a word: cache first, then the dictionary service.

Order:
  1. cache hit          -> decode and return, no network call
  2. miss / unreadable  -> fetch
  3. transport failure  -> empty page (logged)
  4. non-2xx            -> LookupFailure with " — <word>" on the title, not cached
  5. 2xx                -> decode, cache the raw body, return the words

A body that does not decode raises MalformedPayloadError; the server turns
that into a 500 for this one request.
"""

from dictweb.core.cache import CacheStore, normalize_key
from dictweb.core.client import DictionaryClient
from dictweb.core.context import PresentationContext
from dictweb.core.errors import TransportFailure
from dictweb.core.models import decode_entries, decode_failure
from dictweb.logging_setup import get_logger

log = get_logger("lookup")


class LookupService:
    def __init__(self, cache: CacheStore, client: DictionaryClient):
        self.cache = cache
        self.client = client

    def resolve(self, word: str) -> PresentationContext:
        log.info("asking: %s", word)
        key = normalize_key(word)
        if not key:
            return PresentationContext.empty()

        cached = self.cache.get(key)
        if cached.hit:
            words = decode_entries(cached.data, "cache", key)
            return PresentationContext.found(key, words)

        try:
            resp = self.client.fetch(key)
        except TransportFailure as e:
            log.error("lookup of %r degraded to an empty result: %s", key, e.cause)
            return PresentationContext.empty(key)

        if not resp.ok:
            failure = decode_failure(resp.body, "upstream", key)
            return PresentationContext.failed(key, failure.for_word(key))

        words = decode_entries(resp.body, "upstream", key)
        self.cache.put(key, resp.body)
        return PresentationContext.found(key, words)
