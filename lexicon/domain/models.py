"""Pydantic models shared across the cache, buffer and repository."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from lexicon.utils.tokens import translation_token


class TranslationEntry(BaseModel):
    """Session-independent copy of a translation row.

    Cached and buffered translations are kept as entries so they stay readable
    after the session that loaded them commits, rolls back or closes.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    token: str
    source: str
    domain: str
    locale: str
    translation: str | None = None

    @classmethod
    def dirty(cls, source: str, domain: str, locale: str) -> "TranslationEntry":
        return cls(
            token=translation_token(source, domain, locale),
            source=source,
            domain=domain,
            locale=locale,
        )

    @classmethod
    def from_record(cls, record: Any) -> "TranslationEntry":
        return cls.model_validate(record)

    @property
    def is_dirty(self) -> bool:
        return not (self.translation and self.translation.strip())


__all__ = ["TranslationEntry"]
