"""endless_translating.session.animator

Timed handoff between two fully-built frames.

The outgoing frame slides from offset 0 to -height along an ease-in/ease-out
curve, then completion is signalled. When the height cannot be measured (or
there is no running event loop to time against) completion is signalled
immediately, with the same end state.
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from typing import Callable, Optional

from endless_translating.session.models import Frame
from endless_translating.utils.logger import get_logger

logger = get_logger(__name__)

MeasureFn = Callable[[Frame], Optional[float]]
OffsetFn = Callable[[float], None]
CompleteFn = Callable[[Frame], None]


@dataclass(frozen=True)
class AnimationConfig:
    duration_s: float = 0.4
    steps: int = 24


def ease_in_out(t: float) -> float:
    """Sine ease-in/ease-out over [0, 1]."""
    t = min(1.0, max(0.0, t))
    return 0.5 - 0.5 * math.cos(math.pi * t)


class TransitionAnimator:
    def __init__(
        self,
        *,
        measure: Optional[MeasureFn] = None,
        on_offset: Optional[OffsetFn] = None,
        config: Optional[AnimationConfig] = None,
    ) -> None:
        self._measure = measure
        self._on_offset = on_offset
        self.config = config or AnimationConfig()
        self._task: Optional[asyncio.Task] = None
        self._cancelled = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def _measure_height(self, frame: Frame) -> Optional[float]:
        if self._measure is None:
            return None
        try:
            height = self._measure(frame)
        except Exception as e:
            logger.warning("Frame measurement failed: %s", e)
            return None
        if height is None or height <= 0:
            return None
        return float(height)

    def start(self, from_frame: Frame, to_frame: Frame, on_complete: CompleteFn) -> None:
        """Begin the handoff; `on_complete(to_frame)` fires exactly once unless cancelled."""
        if self.running:
            raise RuntimeError("A transition is already running.")
        self._cancelled = False

        height = self._measure_height(from_frame)
        loop: Optional[asyncio.AbstractEventLoop] = None
        if height is not None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None

        if height is None or loop is None:
            logger.info("Transition cannot be timed; committing immediately.")
            on_complete(to_frame)
            return

        self._task = loop.create_task(self._play(height, to_frame, on_complete))

    async def _play(self, height: float, to_frame: Frame, on_complete: CompleteFn) -> None:
        steps = max(1, self.config.steps)
        interval = self.config.duration_s / steps
        for i in range(1, steps + 1):
            await asyncio.sleep(interval)
            if self._on_offset is not None:
                self._on_offset(-height * ease_in_out(i / steps))
        if not self._cancelled:
            on_complete(to_frame)

    async def wait(self) -> None:
        """Wait for the running transition, if any. Cancellation is not re-raised."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    def cancel(self) -> None:
        self._cancelled = True
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling scheduled transition.")
            self._task.cancel()
        self._task = None
