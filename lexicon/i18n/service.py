"""Translation lookup across static resources and the database.

Lookups go to the native catalogue first, then to the persisted catalogue.
A string found in neither is recorded as an untranslated row so that it can
be filled in later, and the message id itself is returned.

The service owns the write-back buffer; use it as an async context manager so
the buffer is flushed when the unit of work ends::

    async with TranslationService.from_settings(session) as translator:
        title = await translator.resolve("Hello %name%", {"%name%": user.name})

Leaving the block flushes every pending row, including rows discovered after an
explicit :meth:`TranslationService.flush`. Log output goes through structlog;
the embedding application configures it with
:func:`lexicon.logging.configure_logging`.
"""

from __future__ import annotations

import re
from types import TracebackType
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from lexicon.config import LexiconSettings, get_settings
from lexicon.db.models.core import DEFAULT_DOMAIN
from lexicon.domain.models import TranslationEntry
from lexicon.i18n.buffer import WriteBackBuffer
from lexicon.i18n.cache import PersistentCatalogueCache
from lexicon.i18n.native import NativeCatalogueLoader
from lexicon.i18n.repository import TranslationRepository
from lexicon.i18n.resources import JsonResourceLoader, NullResourceLoader
from lexicon.i18n.selector import ChoiceSelector, IntervalChoiceSelector
from lexicon.logging import logger
from lexicon.services.exceptions import PersistFailure
from lexicon.utils.locales import assert_valid_locale
from lexicon.utils.tokens import translation_token

_NUMERIC_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")


def is_untranslatable(message_id: Any) -> bool:
    """True for ids that must never reach the catalogue: empty, blank or numeric."""

    if not message_id:
        return True
    if isinstance(message_id, (int, float)):
        return True
    if isinstance(message_id, str):
        return not message_id.strip() or bool(_NUMERIC_RE.match(message_id))
    return not str(message_id).strip()


def substitute(text: str, parameters: Mapping[str, Any] | None) -> str:
    """Replace each parameter key found literally in ``text`` by its value.

    Longer keys win over shorter ones at the same position and replaced text
    is not scanned again.
    """

    if not parameters:
        return text
    keys = sorted((str(key) for key in parameters if str(key)), key=len, reverse=True)
    if not keys:
        return text
    values = {str(key): str(value) for key, value in parameters.items()}
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: values[match.group(0)], text)


class TranslationService:
    def __init__(
        self,
        repository: TranslationRepository,
        native: NativeCatalogueLoader,
        *,
        default_locale: str = "en",
        default_domain: str = DEFAULT_DOMAIN,
        selector: ChoiceSelector | None = None,
        cache: PersistentCatalogueCache | None = None,
        buffer: WriteBackBuffer | None = None,
        locales: Mapping[str, str] | None = None,
        scoped_token_search: bool = True,
    ) -> None:
        assert_valid_locale(default_locale)
        self.repository = repository
        self.native = native
        self.default_domain = default_domain
        self.selector = selector or IntervalChoiceSelector()
        self.cache = cache if cache is not None else PersistentCatalogueCache()
        self.buffer = buffer if buffer is not None else WriteBackBuffer(repository)
        self.scoped_token_search = scoped_token_search
        self._locale = default_locale
        self._locales = dict(locales or {default_locale: default_locale})

    @classmethod
    def from_settings(
        cls,
        session: AsyncSession,
        settings: LexiconSettings | None = None,
        *,
        cache: PersistentCatalogueCache | None = None,
    ) -> "TranslationService":
        settings = settings or get_settings()
        if settings.translations_path is not None:
            resource_loader = JsonResourceLoader(settings.translations_path)
        else:
            resource_loader = NullResourceLoader()
        return cls(
            TranslationRepository(session),
            NativeCatalogueLoader(resource_loader),
            default_locale=settings.default_locale,
            default_domain=settings.default_domain,
            cache=cache,
            locales=settings.locales,
            scoped_token_search=settings.scoped_token_search,
        )

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        assert_valid_locale(value)
        self._locale = value

    def available_locales(self) -> dict[str, str]:
        """Configured locale codes mapped to their public language names."""

        return dict(self._locales)

    async def resolve(
        self,
        message_id: Any,
        parameters: Mapping[str, Any] | None = None,
        domain: str | None = None,
        locale: str | None = None,
    ) -> Any:
        if is_untranslatable(message_id):
            return message_id
        translation = await self._find(str(message_id), domain, locale)
        return substitute(translation, parameters)

    translate = resolve

    async def resolve_choice(
        self,
        message_id: Any,
        count: int | float,
        parameters: Mapping[str, Any] | None = None,
        domain: str | None = None,
        locale: str | None = None,
    ) -> Any:
        if is_untranslatable(message_id):
            return message_id
        locale = self._resolve_locale(locale)
        translation = await self._find(str(message_id), domain, locale)
        chosen = self.selector.choose(translation, int(count), locale)
        return substitute(chosen, parameters)

    async def flush(self) -> int:
        return await self.buffer.flush()

    async def __aenter__(self) -> "TranslationService":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.buffer.flushed and self.buffer.dirty:
            self.buffer.reset()
        if exc_type is None:
            await self.flush()
            return
        try:
            await self.flush()
        except PersistFailure:
            # The error raised inside the block takes precedence.
            logger.error("translation_teardown_flush_failed", pending=len(self.buffer), exc_info=True)

    def _resolve_locale(self, locale: str | None) -> str:
        if locale is None:
            return self._locale
        assert_valid_locale(locale)
        return locale

    async def _find(self, message_id: str, domain: str | None, locale: str | None) -> str:
        locale = self._resolve_locale(locale)
        domain = domain or self.default_domain

        native = self.native.get(locale, message_id, domain)
        if native is not None:
            return native

        async with self.cache.lock:
            await self.cache.ensure_loaded(self.repository, locale, domain)
            token = translation_token(message_id, domain, locale)
            if self.scoped_token_search:
                record = self.cache.get(locale, domain, token)
            else:
                record = self.cache.find_token(token)

            if record is None:
                record = TranslationEntry.dirty(message_id, domain, locale)
                self.cache.add(record)
                self.buffer.append(record)
                logger.debug("translation_missing", token=token, locale=locale, domain=domain)
                return message_id

        if record.is_dirty:
            return message_id
        return record.translation


__all__ = ["TranslationService", "is_untranslatable", "substitute"]
