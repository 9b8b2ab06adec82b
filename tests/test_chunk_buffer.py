"""Tests for the ChunkBuffer helper class."""

import asyncio

import pytest

from streamtint.chunk_buffer import ChunkBuffer


class TestChunkBuffer:
    def test_append_schedules_drain(self):
        """Appending text schedules a drain callback."""
        scheduled = []
        drained = []

        buf = ChunkBuffer(
            schedule=lambda fn: scheduled.append(fn), drain=lambda t: drained.append(t)
        )
        buf.append("hello")

        assert len(scheduled) == 1
        assert drained == []  # Not drained yet

        # Simulate event-loop calling the scheduled callback
        scheduled[0]()
        assert drained == ["hello"]

    def test_multiple_appends_batch_into_single_drain(self):
        """Multiple appends before drain fires are batched together."""
        scheduled = []
        drained = []

        buf = ChunkBuffer(
            schedule=lambda fn: scheduled.append(fn), drain=lambda t: drained.append(t)
        )
        buf.append("```py")
        buf.append("thon\n")
        buf.append("x")

        assert len(scheduled) == 1

        scheduled[0]()
        assert drained == ["```python\nx"]

    def test_empty_append_schedules_nothing(self):
        scheduled = []
        buf = ChunkBuffer(schedule=lambda fn: scheduled.append(fn), drain=lambda t: None)
        buf.append("")
        assert scheduled == []
        assert not buf.pending

    def test_flush_sync_drains_immediately(self):
        """flush_sync drains buffered text without waiting for schedule."""
        drained = []

        buf = ChunkBuffer(schedule=lambda fn: None, drain=lambda t: drained.append(t))
        buf.append("data")
        buf.flush_sync()

        assert drained == ["data"]

    def test_flush_sync_noop_when_empty(self):
        """flush_sync is a no-op when buffer is empty."""
        drained = []
        buf = ChunkBuffer(schedule=lambda fn: None, drain=lambda t: drained.append(t))
        buf.flush_sync()
        assert drained == []

    def test_pending_property(self):
        """pending reflects whether there is un-drained text."""
        buf = ChunkBuffer(schedule=lambda fn: None, drain=lambda t: None)
        assert not buf.pending

        buf.append("text")
        assert buf.pending

        buf.flush_sync()
        assert not buf.pending

    @pytest.mark.asyncio
    async def test_throttled_drain_runs_later(self):
        """A second drain inside the frame interval is delayed, not dropped."""
        drained = []
        buf = ChunkBuffer(
            schedule=lambda fn: fn(), drain=lambda t: drained.append(t), max_fps=20
        )
        buf.append("first")
        assert drained == ["first"]

        buf.append("second")
        assert drained == ["first"]
        assert buf.pending

        await asyncio.sleep(0.2)
        assert drained == ["first", "second"]
