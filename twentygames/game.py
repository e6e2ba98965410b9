"""The interface a game implements, and the contexts the engine hands it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from twentygames.input import KeyboardInput

if TYPE_CHECKING:
    from twentygames.renderer import Renderer


@dataclass(frozen=True)
class FixedUpdateContext:
    """Services available during a fixed simulation step.

    The renderer is deliberately absent: drawing is only valid inside a frame.
    """

    keyboard: KeyboardInput


@dataclass(frozen=True)
class GameContext:
    """Services a game may use while the current frame is being drawn.

    ``alpha`` is the fraction of a fixed step elapsed since the last
    simulation tick, in [0, 1). Interpolate between the previous and current
    simulation state by it when positioning objects. Do not keep a reference
    to the context past the call.
    """

    keyboard: KeyboardInput
    renderer: Renderer
    alpha: float


class Game(ABC):
    """Base class for a game's logic, driven by :meth:`Engine.run`.

    :meth:`fixed_update` runs zero or more times per frame at a fixed step,
    before drawing; use it for simulation. :meth:`update` runs once per frame
    inside the frame; use it for draw calls.
    """

    def fixed_update(self, ctx: FixedUpdateContext, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds. Does nothing by default."""

    @abstractmethod
    def update(self, ctx: GameContext, dt: float) -> None:
        """Draw the current frame; ``dt`` is the wall time since the last one."""