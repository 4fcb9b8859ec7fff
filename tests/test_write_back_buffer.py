"""Tests for the write-back buffer."""

from __future__ import annotations

import asyncio

import pytest
from sqlalchemy import select

from lexicon.db.models.core import Translation
from lexicon.domain.models import TranslationEntry
from lexicon.i18n.buffer import WriteBackBuffer
from lexicon.i18n.repository import TranslationRepository
from lexicon.services.exceptions import PersistFailure


class RecordingSink:
    def __init__(self, fail_times: int = 0) -> None:
        self.persisted: list[TranslationEntry] = []
        self.commits = 0
        self.clears = 0
        self.fail_times = fail_times

    def persist(self, record: TranslationEntry) -> None:
        self.persisted.append(record)

    async def flush(self) -> None:
        await asyncio.sleep(0)
        if self.fail_times:
            self.fail_times -= 1
            raise RuntimeError("disk full")
        self.commits += 1

    def clear(self) -> None:
        self.clears += 1


@pytest.mark.asyncio
async def test_flush_without_pending_records_is_noop():
    sink = RecordingSink()
    buffer = WriteBackBuffer(sink)

    assert await buffer.flush() == 0
    assert sink.commits == 0
    assert not buffer.flushed


@pytest.mark.asyncio
async def test_flush_writes_batch_exactly_once():
    sink = RecordingSink()
    buffer = WriteBackBuffer(sink)
    buffer.append(TranslationEntry.dirty("Hello", "messages", "fr"))
    buffer.append(TranslationEntry.dirty("Bye", "messages", "fr"))

    assert await buffer.flush() == 2
    assert await buffer.flush() == 0

    assert sink.commits == 1
    assert sink.clears == 1
    assert [record.source for record in sink.persisted] == ["Hello", "Bye"]
    assert len(buffer) == 0
    assert buffer.flushed


@pytest.mark.asyncio
async def test_concurrent_flushes_write_one_batch():
    sink = RecordingSink()
    buffer = WriteBackBuffer(sink)
    buffer.append(TranslationEntry.dirty("Hello", "messages", "fr"))

    results = await asyncio.gather(*(buffer.flush() for _ in range(5)))

    assert sorted(results) == [0, 0, 0, 0, 1]
    assert sink.commits == 1


@pytest.mark.asyncio
async def test_failed_flush_keeps_records_for_retry():
    sink = RecordingSink(fail_times=1)
    buffer = WriteBackBuffer(sink)
    buffer.append(TranslationEntry.dirty("Hello", "messages", "fr"))

    with pytest.raises(PersistFailure) as excinfo:
        await buffer.flush()

    assert excinfo.value.pending == 1
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert len(buffer) == 1
    assert not buffer.flushed

    assert await buffer.flush() == 1
    assert sink.commits == 1


@pytest.mark.asyncio
async def test_reset_rearms_flush():
    sink = RecordingSink()
    buffer = WriteBackBuffer(sink)
    buffer.append(TranslationEntry.dirty("Hello", "messages", "fr"))
    await buffer.flush()

    buffer.append(TranslationEntry.dirty("Bye", "messages", "fr"))
    assert await buffer.flush() == 0
    assert buffer.dirty

    buffer.reset()
    assert await buffer.flush() == 1
    assert sink.commits == 2


@pytest.mark.asyncio
async def test_flush_through_repository_persists_rows(session):
    buffer = WriteBackBuffer(TranslationRepository(session))
    buffer.append(TranslationEntry.dirty("Hello", "messages", "fr"))

    await buffer.flush()

    result = await session.execute(select(Translation))
    rows = result.scalars().all()
    assert [(row.source, row.locale, row.translation) for row in rows] == [("Hello", "fr", None)]
    assert session.commits == 1
