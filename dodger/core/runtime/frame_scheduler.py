"""
frame_scheduler.py
------------------
Per-frame callback scheduling, modelled on a display refresh request.

A scheduler holds at most one standing frame request. The simulation asks
for the next frame at the end of each step and stops asking when the game
ends; the host (GameLoop or a test) decides when a frame actually happens.

Usage:
    scheduler.request_frame(simulation.advance_frame)
    ...
    scheduler.run_pending()   # host calls this once per displayed frame
"""

from typing import Callable, Optional

from dodger.core.debug.debug_logger import DebugLogger


class FrameScheduler:
    """Single-slot frame request queue driven by the host loop."""

    def __init__(self):
        self._pending: Optional[Callable[[], None]] = None
        self.frames_run = 0

    # ===========================================================
    # Requests
    # ===========================================================

    def request_frame(self, callback: Callable[[], None]) -> None:
        """Request that callback runs on the next frame. Replaces any earlier request."""
        self._pending = callback

    def cancel(self) -> None:
        """Drop the standing frame request, if any."""
        if self._pending is not None:
            DebugLogger.trace("Frame request cancelled", category="timing")
        self._pending = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    # ===========================================================
    # Host Side
    # ===========================================================

    def run_pending(self) -> bool:
        """
        Run the standing request, if any.

        The request is cleared before the callback runs, so a callback that
        wants another frame must request it again.

        Returns:
            bool: True if a callback ran
        """
        callback = self._pending
        if callback is None:
            return False

        self._pending = None
        callback()
        self.frames_run += 1
        return True


class ManualFrameScheduler(FrameScheduler):
    """Scheduler driven synchronously, one tick per call, for tests and replays."""

    def tick(self, count: int = 1) -> int:
        """
        Run up to count frames.

        Stops early once no frame is requested (e.g. the game ended).

        Returns:
            int: Number of frames that actually ran
        """
        ran = 0
        for _ in range(count):
            if not self.run_pending():
                break
            ran += 1
        return ran
