"""Unit tests for InMemoryTransactionManager."""

import asyncio

import pytest

from tube.persistence.repository.inmemory import (
    InMemoryTransactionManager,
    InMemoryVideoRepository,
)
from tests.conftest import make_video


class TestInMemoryTransactionManager:
    """Tests for atomic units over in-memory repositories."""

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self):
        """Writes inside a successful unit should persist."""
        videos = InMemoryVideoRepository()
        manager = InMemoryTransactionManager(videos)
        video = make_video()

        async with manager.atomic():
            await videos.save(video)

        assert await videos.find_by_id(video.id) == video

    @pytest.mark.asyncio
    async def test_exception_restores_state(self):
        """Writes inside a failing unit should be undone."""
        videos = InMemoryVideoRepository()
        manager = InMemoryTransactionManager(videos)
        video = make_video()

        with pytest.raises(RuntimeError):
            async with manager.atomic():
                await videos.save(video)
                raise RuntimeError("boom")

        assert await videos.find_by_id(video.id) is None

    @pytest.mark.asyncio
    async def test_cancellation_restores_state(self):
        """A cancelled unit should be undone like a failed one."""
        videos = InMemoryVideoRepository()
        manager = InMemoryTransactionManager(videos)
        video = make_video()

        async def unit():
            async with manager.atomic():
                await videos.save(video)
                await asyncio.sleep(10)

        with pytest.raises(TimeoutError):
            await asyncio.wait_for(unit(), timeout=0.05)

        assert await videos.find_by_id(video.id) is None
