"""Process-wide cache of persisted translations, filled one bucket at a time."""

from __future__ import annotations

import asyncio
from typing import Any, Iterator, Protocol, Sequence

from lexicon.domain.models import TranslationEntry
from lexicon.logging import logger
from lexicon.services.exceptions import CatalogueLoadFailure


class TranslationStore(Protocol):
    async def find_by(self, locale: str, domain: str) -> Sequence[Any]: ...


class PersistentCatalogueCache:
    """``locale -> domain -> token -> TranslationEntry``.

    A bucket key being present means the bucket was loaded, even when it holds
    no records. ``lock`` serialises load, lookup and insert across every
    service sharing the cache.
    """

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self._buckets: dict[str, dict[str, dict[str, TranslationEntry]]] = {}

    def is_loaded(self, locale: str, domain: str) -> bool:
        return domain in self._buckets.get(locale, {})

    async def ensure_loaded(self, store: TranslationStore, locale: str, domain: str) -> None:
        if self.is_loaded(locale, domain):
            return
        try:
            rows = await store.find_by(locale, domain)
        except Exception as exc:
            raise CatalogueLoadFailure(
                f"Unable to load translations for {locale}/{domain}: {exc}",
                locale=locale,
                domain=domain,
            ) from exc

        bucket = self._buckets.setdefault(locale, {}).setdefault(domain, {})
        for row in rows:
            entry = TranslationEntry.from_record(row)
            bucket[entry.token] = entry
        logger.info("translation_bucket_loaded", locale=locale, domain=domain, rows=len(bucket))

    def get(self, locale: str, domain: str, token: str) -> TranslationEntry | None:
        return self._buckets.get(locale, {}).get(domain, {}).get(token)

    def find_token(self, token: str) -> TranslationEntry | None:
        """Search every loaded bucket for ``token``."""

        for locale_buckets in self._buckets.values():
            for bucket in locale_buckets.values():
                entry = bucket.get(token)
                if entry is not None:
                    return entry
        return None

    def add(self, entry: TranslationEntry) -> None:
        bucket = self._buckets.setdefault(entry.locale, {}).setdefault(entry.domain, {})
        existing = bucket.get(entry.token)
        if existing is not None and existing != entry:
            raise ValueError(f"Token {entry.token} is already cached with another value.")
        bucket[entry.token] = entry

    def entries(self) -> Iterator[TranslationEntry]:
        for locale_buckets in self._buckets.values():
            for bucket in locale_buckets.values():
                yield from bucket.values()

    def __len__(self) -> int:
        return sum(len(bucket) for buckets in self._buckets.values() for bucket in buckets.values())


__all__ = ["PersistentCatalogueCache", "TranslationStore"]
