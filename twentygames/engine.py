"""The engine: owns input state and the renderer, and drives the frame loop."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from twentygames.game import FixedUpdateContext, Game, GameContext
from twentygames.input import InputState
from twentygames.log import LOGGER_NAME
from twentygames.renderer import Renderer

#: Length of one simulation step, in seconds (60 Hz).
FIXED_DT = 1.0 / 60.0

#: Most fixed steps' worth of time one frame may add after a long stall.
MAX_CATCH_UP_STEPS = 4

_log = logging.getLogger(LOGGER_NAME)


def version() -> str:
    """The engine version string."""
    return "0.0.1"


@dataclass
class FixedTimestep:
    """Accumulates wall time and hands it out in whole fixed steps."""

    dt: float = FIXED_DT
    accumulator: float = 0.0

    def __post_init__(self) -> None:
        if self.dt <= 0.0:
            raise ValueError("fixed step length must be positive")

    def advance(self, elapsed: float) -> int:
        """Add ``elapsed`` seconds and return how many fixed steps are now due.

        Elapsed time is capped so a long stall cannot trigger a burst of
        catch-up steps that stalls the next frame in turn.
        """
        self.accumulator += min(elapsed, self.dt * MAX_CATCH_UP_STEPS)
        steps = 0
        while self.accumulator >= self.dt:
            self.accumulator -= self.dt
            steps += 1
        return steps

    def alpha(self) -> float:
        """Fraction of a step left in the accumulator, in [0, 1)."""
        return self.accumulator / self.dt


class Engine:
    """Runs a :class:`Game` against a platform window."""

    def __init__(self, platform: Any) -> None:
        self._platform = platform
        self._renderer: Renderer | None = None
        self._input_state = InputState()

    def init_renderer(self, app_name: str) -> None:
        """Create the renderer for the platform's window.

        Raises :class:`RuntimeError` if the window has no drawable surface.
        """
        surface = self._platform.surface
        if surface is None:
            raise RuntimeError(f"{app_name}: platform has no drawable surface")
        self._renderer = Renderer(surface)
        width, height = self._renderer.viewport_extent()
        _log.info("renderer ready for %s: %dx%d", app_name, width, height)

    def renderer(self) -> Renderer:
        """The renderer; valid only after :meth:`init_renderer` succeeded."""
        if self._renderer is None:
            raise RuntimeError("renderer is not initialised")
        return self._renderer

    def run(self, game: Game) -> None:
        """Tick ``game`` once per frame until the platform asks to close.

        Does nothing unless :meth:`init_renderer` has succeeded.
        """
        renderer = self._renderer
        if renderer is None:
            return
        self._platform.show()

        keyboard = self._input_state.keyboard
        timestep = FixedTimestep()
        prev = time.monotonic()

        while not self._platform.should_close():
            self._platform.poll_events()
            keyboard.update(self._platform.poll_pressed_keys())

            # Frames that cannot be drawn accumulate no time, so they do not
            # cause a burst of fixed steps on the next real frame.
            if not renderer.begin_frame():
                continue

            now = time.monotonic()
            elapsed = now - prev
            prev = now

            for _ in range(timestep.advance(elapsed)):
                game.fixed_update(FixedUpdateContext(keyboard=keyboard), timestep.dt)

            ctx = GameContext(keyboard=keyboard, renderer=renderer, alpha=timestep.alpha())
            game.update(ctx, elapsed)
            renderer.end_frame()