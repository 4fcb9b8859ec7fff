"""SQLAlchemy models for persisted translations."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, validates

from lexicon.db.base import Base
from lexicon.utils.tokens import translation_token

DEFAULT_DOMAIN = "messages"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Translation(Base):
    """One (source, domain, locale) lookup and its translated value, if any."""

    __tablename__ = "translations"
    __table_args__ = (
        UniqueConstraint("token", name="uq_translations_token"),
        Index("ix_translations_locale_domain", "locale", "domain"),
    )

    token: Mapped[str] = mapped_column(String(32), nullable=False)
    source: Mapped[str] = mapped_column(Text, nullable=False)
    domain: Mapped[str] = mapped_column(String(64), nullable=False, default=DEFAULT_DOMAIN)
    locale: Mapped[str] = mapped_column(String(16), nullable=False)
    translation: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, onupdate=utc_now
    )

    @classmethod
    def dirty(cls, source: str, domain: str, locale: str) -> "Translation":
        """Build an untranslated record keyed by its derived token."""

        return cls(
            token=translation_token(source, domain, locale),
            source=source,
            domain=domain,
            locale=locale,
        )

    @validates("token", "source", "domain", "locale")
    def _freeze_identity(self, key: str, value: str) -> str:
        current = self.__dict__.get(key)
        if current is not None and current != value:
            raise ValueError(f"Translation.{key} cannot change once set.")
        return value

    @property
    def is_dirty(self) -> bool:
        return not (self.translation and self.translation.strip())

    def __repr__(self) -> str:
        return (
            f"Translation(token={self.token!r}, locale={self.locale!r}, "
            f"domain={self.domain!r}, source={self.source!r})"
        )


__all__ = ["DEFAULT_DOMAIN", "Translation"]
