"""
Tests for SummaryRepository against an in-memory SQLite database.
"""
import uuid
from datetime import datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.db import Base
from app.core.exceptions import PersistenceError
from app.models.sql import SummaryModel, User
from app.repositories.summary import SummaryRepository


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


async def _create_user(session: AsyncSession) -> User:
    user = User(
        id=uuid.uuid4(),
        email=f"{uuid.uuid4().hex}@example.com",
        hashed_password="not-a-real-hash",
        is_active=True,
        is_superuser=False,
        is_verified=True,
    )
    session.add(user)
    await session.commit()
    return user


def _summary(user_id, video_id="dQw4w9WgXcQ", created_at=None, **overrides) -> SummaryModel:
    values = dict(
        user_id=user_id,
        video_id=video_id,
        video_title="Intro to Go Testing",
        video_url=f"https://youtu.be/{video_id}",
        transcript="Today we write table driven tests in Go.",
        summary="Summary\nTags: go, testing",
        tags=["go", "testing"],
        duration=212,
    )
    if created_at is not None:
        values["created_at"] = created_at
        values["updated_at"] = created_at
    values.update(overrides)
    return SummaryModel(**values)


@pytest.mark.asyncio
async def test_create_summary_generates_id_and_timestamps(db_session):
    user = await _create_user(db_session)
    repo = SummaryRepository(db_session)

    saved = await repo.create_summary(_summary(user.id))

    assert isinstance(saved.id, uuid.UUID)
    assert saved.created_at is not None
    assert saved.updated_at is not None
    assert saved.tags == ["go", "testing"]


@pytest.mark.asyncio
async def test_create_summary_failure_raises_and_leaves_no_row(db_session):
    user = await _create_user(db_session)
    repo = SummaryRepository(db_session)

    with pytest.raises(PersistenceError):
        await repo.create_summary(_summary(user.id, video_title=None))

    count = await db_session.scalar(select(func.count()).select_from(SummaryModel))
    assert count == 0


@pytest.mark.asyncio
async def test_get_user_summaries_newest_first_and_owner_scoped(db_session):
    user = await _create_user(db_session)
    other = await _create_user(db_session)
    repo = SummaryRepository(db_session)
    base = datetime(2026, 10, 1, 9, 0, 0)

    await repo.create_summary(_summary(user.id, "aaaaaaaaaaa", created_at=base))
    await repo.create_summary(_summary(user.id, "ccccccccccc", created_at=base + timedelta(days=2)))
    await repo.create_summary(_summary(user.id, "bbbbbbbbbbb", created_at=base + timedelta(days=1)))
    await repo.create_summary(_summary(other.id, "zzzzzzzzzzz", created_at=base + timedelta(days=3)))

    summaries = await repo.get_user_summaries(user.id)

    assert [s.video_id for s in summaries] == ["ccccccccccc", "bbbbbbbbbbb", "aaaaaaaaaaa"]

    page = await repo.get_user_summaries(user.id, limit=1, offset=1)
    assert [s.video_id for s in page] == ["bbbbbbbbbbb"]


@pytest.mark.asyncio
async def test_get_summary_is_owner_scoped(db_session):
    user = await _create_user(db_session)
    other = await _create_user(db_session)
    repo = SummaryRepository(db_session)
    saved = await repo.create_summary(_summary(user.id))

    assert (await repo.get_summary(saved.id, user.id)).id == saved.id
    assert await repo.get_summary(saved.id, other.id) is None


@pytest.mark.asyncio
async def test_delete_summary(db_session):
    user = await _create_user(db_session)
    repo = SummaryRepository(db_session)
    saved = await repo.create_summary(_summary(user.id))

    await repo.delete_summary(saved.id, user.id)

    assert await repo.get_user_summaries(user.id) == []


@pytest.mark.asyncio
async def test_delete_nonexistent_summary_raises(db_session):
    repo = SummaryRepository(db_session)

    with pytest.raises(PersistenceError) as exc_info:
        await repo.delete_summary(uuid.uuid4())

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_summary_of_other_user_raises(db_session):
    user = await _create_user(db_session)
    other = await _create_user(db_session)
    repo = SummaryRepository(db_session)
    saved = await repo.create_summary(_summary(user.id))

    with pytest.raises(PersistenceError):
        await repo.delete_summary(saved.id, other.id)

    assert len(await repo.get_user_summaries(user.id)) == 1


@pytest.mark.asyncio
async def test_reload_failure_after_commit_does_not_roll_back():
    session = AsyncMock(spec=AsyncSession)
    session.refresh.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
    repo = SummaryRepository(session)
    summary = _summary(uuid.uuid4(), id=uuid.uuid4())

    with pytest.raises(PersistenceError) as exc_info:
        await repo.create_summary(summary)

    assert "was saved" in exc_info.value.detail
    assert str(summary.id) in exc_info.value.detail
    session.commit.assert_awaited_once()
    session.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_summary_is_kept_when_reload_fails(db_session):
    user = await _create_user(db_session)
    repo = SummaryRepository(db_session)
    summary = _summary(user.id)

    with patch.object(db_session, "refresh", side_effect=OperationalError("SELECT", {}, Exception("x"))):
        with pytest.raises(PersistenceError):
            await repo.create_summary(summary)

    saved = await repo.get_user_summaries(user.id)
    assert [s.id for s in saved] == [summary.id]
