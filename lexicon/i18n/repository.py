"""Persistence access for translation records."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lexicon.db.models.core import Translation
from lexicon.domain.models import TranslationEntry


class TranslationRepository:
    """Reads and writes :class:`Translation` rows as detached entries.

    No ORM instance handed to or received from callers outlives a call, so a
    rollback or an ``expire_on_commit`` session never touches cached data.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by(self, locale: str, domain: str) -> Sequence[TranslationEntry]:
        stmt = select(Translation).where(
            Translation.locale == locale,
            Translation.domain == domain,
        )
        result = await self.session.execute(stmt)
        return [TranslationEntry.from_record(row) for row in result.scalars().all()]

    def persist(self, entry: TranslationEntry) -> None:
        self.session.add(Translation(**entry.model_dump()))

    async def flush(self) -> None:
        """Commit everything persisted so far as one batch."""

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    def clear(self) -> None:
        self.session.expunge_all()


__all__ = ["TranslationRepository"]
