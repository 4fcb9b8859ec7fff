"""Write-back buffer for translations discovered at runtime."""

from __future__ import annotations

import asyncio
from typing import Protocol

from lexicon.domain.models import TranslationEntry
from lexicon.logging import logger
from lexicon.services.exceptions import PersistFailure


class TranslationSink(Protocol):
    def persist(self, record: TranslationEntry) -> None: ...

    async def flush(self) -> None: ...

    def clear(self) -> None: ...


class WriteBackBuffer:
    """Collects dirty records and writes them in a single batch.

    ``flush`` is one-shot: after a successful write every later call is a
    no-op until :meth:`reset`. A failed write keeps the records pending and
    leaves the buffer armed.
    """

    def __init__(self, sink: TranslationSink) -> None:
        self.sink = sink
        self._pending: list[TranslationEntry] = []
        self._flushed = False
        self._lock = asyncio.Lock()

    @property
    def pending(self) -> tuple[TranslationEntry, ...]:
        return tuple(self._pending)

    @property
    def flushed(self) -> bool:
        return self._flushed

    @property
    def dirty(self) -> bool:
        return bool(self._pending)

    def append(self, record: TranslationEntry) -> None:
        if self._flushed:
            logger.warning(
                "translation_buffered_after_flush",
                token=record.token,
                locale=record.locale,
                domain=record.domain,
            )
        self._pending.append(record)

    async def flush(self) -> int:
        """Persist pending records; return how many were written."""

        async with self._lock:
            if self._flushed or not self._pending:
                return 0

            batch = list(self._pending)
            try:
                for record in batch:
                    self.sink.persist(record)
                await self.sink.flush()
            except Exception as exc:
                logger.error("translation_flush_failed", pending=len(batch), exc_info=True)
                raise PersistFailure(
                    f"Unable to persist {len(batch)} translation(s): {exc}",
                    pending=len(batch),
                ) from exc

            self.sink.clear()
            # Records appended while the commit was in flight stay pending.
            del self._pending[: len(batch)]
            self._flushed = True
            logger.info("translations_flushed", count=len(batch))
            return len(batch)

    def reset(self) -> None:
        self._flushed = False

    def __len__(self) -> int:
        return len(self._pending)


__all__ = ["TranslationSink", "WriteBackBuffer"]
