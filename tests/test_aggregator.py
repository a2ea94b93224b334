"""
Tests for the stream consumer and run termination.
"""

from __future__ import annotations

import asyncio

import pytest

from speedview.schemas import Snapshot
from speedview.services import MeasurementOptions, StreamError
from speedview.utils.ui.managers import AnimationTicker, StreamConsumer
from speedview.utils.ui.renderers import BaseRenderer
from speedview.utils.ui.state import DisplayContext, RunPhase


class _EventRenderer(BaseRenderer):
    interactive = True

    def __init__(self) -> None:
        super().__init__(console=None)
        self.events: list[tuple[str, object]] = []

    def refresh(self, context) -> None:
        self.events.append(("refresh", context.snapshot))

    def tick(self, context, spinner) -> None:
        self.events.append(("tick", context.snapshot))

    def finish(self, context) -> None:
        self.events.append(("finish", context.snapshot))

    def abort(self, context) -> None:
        self.events.append(("abort", context.snapshot))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


def _run(engine, renderer, interval=0.01, measure_upload=True):
    context = DisplayContext(measure_upload=measure_upload)
    ticker = AnimationTicker(context, renderer, interval=interval)
    consumer = StreamConsumer(context, renderer, ticker)

    async def scenario():
        ticker.start()
        try:
            return await consumer.consume(
                engine.stream(MeasurementOptions(measure_upload=measure_upload))
            )
        finally:
            assert not ticker.is_running

    return context, scenario


def test_completion_finishes_exactly_once(scripted_engine, upload_sequence) -> None:
    engine = scripted_engine(upload_sequence, delay=0.02)
    renderer = _EventRenderer()
    context, scenario = _run(engine, renderer)

    phase = asyncio.run(scenario())

    assert phase == RunPhase.DONE
    names = renderer.names()
    assert names.count("finish") == 1
    assert names[-1] == "finish"
    assert names.count("refresh") == 2
    assert "tick" in names
    final = renderer.events[-1][1]
    assert final.is_done and final.upload_speed == 4.4


def test_last_snapshot_wins(scripted_engine) -> None:
    engine = scripted_engine(
        [
            {"downloadSpeed": 5, "downloadUnit": "Mbps", "latency": 12},
            {"downloadSpeed": 9, "downloadUnit": "Mbps", "isDone": True},
        ]
    )
    renderer = _EventRenderer()
    context, scenario = _run(engine, renderer)
    asyncio.run(scenario())
    assert context.snapshot.download_speed == 9
    assert context.snapshot.latency is None


def test_error_after_partial_skips_final_render(scripted_engine) -> None:
    engine = scripted_engine(
        [{"downloadSpeed": 17, "downloadUnit": "Mbps"}],
        error=ConnectionError("Connection reset by peer"),
        delay=0.02,
    )
    renderer = _EventRenderer()
    context, scenario = _run(engine, renderer)

    with pytest.raises(StreamError, match="Connection reset by peer") as info:
        asyncio.run(scenario())

    assert isinstance(info.value.__cause__, ConnectionError)
    assert context.phase == RunPhase.FAILED
    names = renderer.names()
    assert "finish" not in names
    assert names[-1] == "abort"


def test_error_before_any_data(scripted_engine) -> None:
    engine = scripted_engine([], error=RuntimeError("no servers"))
    renderer = _EventRenderer()
    context, scenario = _run(engine, renderer)
    with pytest.raises(StreamError, match="no servers"):
        asyncio.run(scenario())
    assert context.updates == 0
    assert context.phase == RunPhase.FAILED


def test_empty_error_message_is_still_reported(scripted_engine) -> None:
    engine = scripted_engine([], error=TimeoutError())
    renderer = _EventRenderer()
    _, scenario = _run(engine, renderer)
    with pytest.raises(StreamError, match="TimeoutError"):
        asyncio.run(scenario())


def test_no_tick_after_final_render(scripted_engine) -> None:
    """Verify a tick racing the last update never lands after the final frame."""
    snapshots = [
        Snapshot(download_speed=i + 1, download_unit="Mbps") for i in range(5)
    ] + [Snapshot(download_speed=6, download_unit="Mbps", is_done=True)]
    engine = scripted_engine(snapshots, delay=0.005)
    renderer = _EventRenderer()
    _, scenario = _run(engine, renderer, interval=0.001, measure_upload=False)

    async def scenario_and_wait():
        await scenario()
        await asyncio.sleep(0.02)

    asyncio.run(scenario_and_wait())
    assert renderer.names()[-1] == "finish"


class _BrokenPipeRenderer(_EventRenderer):
    def finish(self, context) -> None:
        super().finish(context)
        raise BrokenPipeError(32, "Broken pipe")


def test_final_render_failure_is_reported_as_stream_error(
    scripted_engine, upload_sequence
) -> None:
    engine = scripted_engine(upload_sequence)
    renderer = _BrokenPipeRenderer()
    context, scenario = _run(engine, renderer)

    with pytest.raises(StreamError, match="Broken pipe") as info:
        asyncio.run(scenario())

    assert isinstance(info.value.__cause__, BrokenPipeError)
    assert context.phase == RunPhase.DONE
    assert renderer.names().count("finish") == 1
    assert "abort" not in renderer.names()
