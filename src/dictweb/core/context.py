# src/dictweb/core/context.py
"""
What a page gets to render: either words or an error, never both.
"""

from dataclasses import dataclass

from dictweb.core.models import LookupFailure, WordEntry


@dataclass(frozen=True)
class PresentationContext:
    query: str = ""
    words: tuple[WordEntry, ...] = ()
    error: LookupFailure | None = None

    def __post_init__(self):
        if self.error is not None and self.words:
            raise ValueError("a page shows either words or an error, not both")

    @classmethod
    def empty(cls, query: str = "") -> "PresentationContext":
        return cls(query=query)

    @classmethod
    def found(cls, query: str, words: list[WordEntry]) -> "PresentationContext":
        return cls(query=query, words=tuple(words))

    @classmethod
    def failed(cls, query: str, error: LookupFailure) -> "PresentationContext":
        return cls(query=query, error=error)

    @property
    def has_results(self) -> bool:
        return self.error is None and len(self.words) > 0
