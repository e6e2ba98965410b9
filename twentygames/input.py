"""Per-frame keyboard state with edge detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from twentygames.keycodes import KeyCode


@dataclass
class KeyboardInput:
    """Held keys plus the keys that changed state on the last update."""

    keys_just_pressed: frozenset[KeyCode] = frozenset()
    keys_pressed: frozenset[KeyCode] = frozenset()
    keys_just_released: frozenset[KeyCode] = frozenset()

    def just_pressed(self, key: KeyCode) -> bool:
        """True if ``key`` went down on the last update."""
        return key in self.keys_just_pressed

    def pressed(self, key: KeyCode) -> bool:
        """True while ``key`` is held."""
        return key in self.keys_pressed

    def just_released(self, key: KeyCode) -> bool:
        """True if ``key`` went up on the last update."""
        return key in self.keys_just_released

    def update(self, down_keys: Iterable[KeyCode]) -> None:
        """Fold a snapshot of the currently held keys into this state.

        Edges are computed against the previous held set, so call this once
        per tick before game logic reads the state.
        """
        down = frozenset(down_keys)
        self.keys_just_pressed = down - self.keys_pressed
        self.keys_just_released = self.keys_pressed - down
        self.keys_pressed = down


@dataclass
class InputState:
    """All input the engine tracks for a frame."""

    keyboard: KeyboardInput = field(default_factory=KeyboardInput)