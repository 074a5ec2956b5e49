"""
test_frame_scheduler.py
-----------------------
Tests for the single-slot frame scheduler.
"""

from unittest.mock import MagicMock

from dodger.core.runtime.frame_scheduler import FrameScheduler, ManualFrameScheduler


def test_run_pending_without_request_does_nothing():
    scheduler = FrameScheduler()
    assert scheduler.run_pending() is False
    assert scheduler.frames_run == 0


def test_request_runs_once():
    scheduler = FrameScheduler()
    callback = MagicMock()

    scheduler.request_frame(callback)
    assert scheduler.pending

    assert scheduler.run_pending() is True
    assert scheduler.run_pending() is False
    callback.assert_called_once_with()
    assert not scheduler.pending


def test_later_request_replaces_earlier():
    scheduler = FrameScheduler()
    first, second = MagicMock(), MagicMock()

    scheduler.request_frame(first)
    scheduler.request_frame(second)
    scheduler.run_pending()

    first.assert_not_called()
    second.assert_called_once_with()


def test_cancel_drops_request():
    scheduler = FrameScheduler()
    callback = MagicMock()
    scheduler.request_frame(callback)
    scheduler.cancel()

    assert scheduler.run_pending() is False
    callback.assert_not_called()


def test_manual_tick_stops_when_no_frame_requested():
    scheduler = ManualFrameScheduler()
    calls = []

    def step():
        calls.append(len(calls))
        if len(calls) < 3:
            scheduler.request_frame(step)

    scheduler.request_frame(step)
    assert scheduler.tick(10) == 3
    assert calls == [0, 1, 2]
    assert scheduler.frames_run == 3
