# src/dictweb/core/models.py
"""
Dictionary data model.

Mirrors the parts of the dictionaryapi.dev JSON that the pages use:

    [{"word": "hello",
      "phonetics": [{"text": "/həˈləʊ/", "audio": "https://..."}],
      "meanings": [{"partOfSpeech": "noun",
                    "definitions": [{"definition": "...", "example": "..."}],
                    "synonyms": [], "antonyms": []}]}]

Error bodies look like {"title": ..., "message": ..., "resolution": ...}.
Unknown fields are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from dictweb.core.errors import MalformedPayloadError


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Phonetic(_Model):
    text: str | None = None
    audio: str | None = None


class Definition(_Model):
    definition: str
    example: str | None = None
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class Meaning(_Model):
    part_of_speech: str = Field("", alias="partOfSpeech")
    definitions: list[Definition] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class WordEntry(_Model):
    word: str
    phonetic: str | None = None
    phonetics: list[Phonetic] = Field(default_factory=list)
    origin: str | None = None
    meanings: list[Meaning] = Field(default_factory=list)
    source_urls: list[str] = Field(default_factory=list, alias="sourceUrls")


class LookupFailure(_Model):
    """Error reported for a lookup: a non-2xx body or one made up locally."""

    title: str = ""
    message: str = ""
    resolution: str = ""

    def for_word(self, word: str) -> "LookupFailure":
        return self.model_copy(update={"title": f"{self.title} — {word}"})


_ENTRIES = TypeAdapter(list[WordEntry])


def decode_entries(data: bytes, source: str, key: str) -> list[WordEntry]:
    """Decode a 2xx body (or a cached copy of one) into entries."""
    try:
        return _ENTRIES.validate_json(data)
    except ValidationError as e:
        raise MalformedPayloadError(source, key, f"{e.error_count()} error(s)") from e


def decode_failure(data: bytes, source: str, key: str) -> LookupFailure:
    """Decode a non-2xx body into a LookupFailure."""
    try:
        return LookupFailure.model_validate_json(data)
    except ValidationError as e:
        raise MalformedPayloadError(source, key, f"{e.error_count()} error(s)") from e


def encode_entries(entries: list[WordEntry]) -> bytes:
    """Serialize entries back to the upstream JSON shape."""
    return _ENTRIES.dump_json(entries, by_alias=True)
