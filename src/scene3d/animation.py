"""Fixed-cadence frame driver for a :class:`Space`."""

from __future__ import annotations

import asyncio
import time
from typing import Callable

from .objects import BACKGROUND
from .polygon import Color
from .space import Space
from .surface import RenderSurface

FRAME_LENGTH = 0.025


class Animator:
    """Advance the scene one rotation step per frame and present it."""

    def __init__(
        self,
        space: Space,
        *,
        axis: str = "y",
        step: float = 0.033,
        frame_length: float = FRAME_LENGTH,
        background: Color = BACKGROUND,
    ) -> None:
        if frame_length < 0:
            raise ValueError("frame_length must not be negative")
        self.space = space
        self.axis = axis
        self.step = step
        self.frame_length = frame_length
        self.background = background
        self.frames_drawn = 0

    def advance(self, surface: RenderSurface) -> None:
        surface.clear(self.background)
        self.space.draw(surface)
        if self.step:
            self.space.rotate_axis(self.axis, self.step)
        surface.update()
        self.frames_drawn += 1

    def run(
        self,
        surface: RenderSurface,
        *,
        frames: int = 0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Draw until the surface closes or ``frames`` frames (0 = forever)."""
        drawn = 0
        while not surface.closed():
            self.advance(surface)
            drawn += 1
            if frames and drawn >= frames:
                break
            sleep(self.frame_length)
        return drawn

    async def run_async(self, surface: RenderSurface, *, frames: int = 0) -> int:
        drawn = 0
        while not surface.closed():
            self.advance(surface)
            drawn += 1
            if frames and drawn >= frames:
                break
            await asyncio.sleep(self.frame_length)
        return drawn
