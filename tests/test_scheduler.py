import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from scheduler import DailyJob, seconds_until
from services.notes import purge_expired_notes


def test_seconds_until_later_today():
    assert seconds_until(0, 0, now=datetime(2024, 5, 1, 23, 0, 0)) == 3600


def test_seconds_until_exactly_now_waits_a_full_day():
    assert seconds_until(0, 0, now=datetime(2024, 5, 1, 0, 0, 0)) == 86400


def test_seconds_until_with_minutes():
    assert seconds_until(6, 30, now=datetime(2024, 5, 1, 6, 0, 0)) == 1800


@pytest.mark.asyncio
async def test_run_once_supports_sync_and_async_jobs():
    async def async_job():
        return "async"

    assert await DailyJob("sync", lambda: "sync").run_once() == "sync"
    assert await DailyJob("async", async_job).run_once() == "async"


@pytest.mark.asyncio
async def test_run_once_swallows_job_errors(caplog):
    def broken():
        raise RuntimeError("disk on fire")

    assert await DailyJob("broken", broken).run_once() is None
    assert "disk on fire" in caplog.text


@pytest.mark.asyncio
async def test_start_and_stop():
    job = DailyJob("idle", lambda: None)

    task = job.start()
    assert job.start() is task
    await asyncio.sleep(0)
    await job.stop()

    assert task.cancelled()
    assert job.task is None


@pytest.mark.asyncio
async def test_job_fires_when_due(monkeypatch):
    calls = []
    fired = asyncio.Event()

    def job_func():
        calls.append(1)
        fired.set()

    monkeypatch.setattr("scheduler.seconds_until", lambda hour, minute: 0.01)
    job = DailyJob("fast", job_func)
    job.start()
    await asyncio.wait_for(fired.wait(), timeout=2)
    await job.stop()

    assert len(calls) >= 1


def test_purge_expired_notes(db):
    notes = db.collection("notes")
    now = datetime(2024, 6, 2, 0, 0, tzinfo=timezone.utc)
    notes.write([
        {"id": 1, "title": "old", "content": "", "created_at": (now - timedelta(hours=25)).isoformat()},
        {"id": 2, "title": "fresh", "content": "", "created_at": (now - timedelta(hours=1)).isoformat()},
        {"id": 3, "title": "garbage", "content": "", "created_at": "yesterday-ish"},
        {"id": 4, "title": "naive", "content": "", "created_at": "2024-05-31T00:00:00"},
        {"id": 5, "title": "zulu", "content": "", "created_at": "2024-06-01T00:00:00Z"},
    ])

    removed = purge_expired_notes(notes, now=now)

    assert sorted(n["id"] for n in removed) == [1, 4, 5]
    assert [n["id"] for n in notes.all()] == [2, 3]


def test_purge_respects_ttl(db):
    notes = db.collection("notes")
    now = datetime(2024, 6, 2, 0, 0, tzinfo=timezone.utc)
    notes.write([{"id": 1, "title": "t", "content": "", "created_at": (now - timedelta(hours=3)).isoformat()}])

    assert purge_expired_notes(notes, now=now, ttl_hours=48) == []
    assert len(purge_expired_notes(notes, now=now, ttl_hours=2)) == 1
