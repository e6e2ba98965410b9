import dataclasses

import pygame
import pytest

from twentygames.game import FixedUpdateContext, Game, GameContext
from twentygames.input import KeyboardInput
from twentygames.keycodes import KeyCode
from twentygames.renderer import Renderer


class RecordingGame(Game):
    def __init__(self):
        self.updates = []

    def update(self, ctx, dt):
        self.updates.append((ctx, dt))


def test_game_is_abstract():
    with pytest.raises(TypeError):
        Game()


def test_default_fixed_update_does_nothing():
    game = RecordingGame()
    ctx = FixedUpdateContext(keyboard=KeyboardInput())
    assert game.fixed_update(ctx, 1.0 / 60.0) is None
    assert game.updates == []


def test_update_receives_context_and_dt():
    game = RecordingGame()
    renderer = Renderer(pygame.Surface((4, 4)))
    keyboard = KeyboardInput()
    ctx = GameContext(keyboard=keyboard, renderer=renderer, alpha=0.25)
    game.update(ctx, 0.5)
    assert len(game.updates) == 1
    seen_ctx, seen_dt = game.updates[0]
    assert seen_ctx.renderer is renderer
    assert seen_ctx.keyboard is keyboard
    assert seen_ctx.alpha == 0.25
    assert seen_dt == 0.5


def test_fixed_context_exposes_keyboard_state():
    keyboard = KeyboardInput()
    keyboard.update({KeyCode.KEY_W})
    ctx = FixedUpdateContext(keyboard=keyboard)
    assert ctx.keyboard.pressed(KeyCode.KEY_W)
    assert not ctx.keyboard.pressed(KeyCode.KEY_S)


def test_contexts_are_frozen():
    ctx = FixedUpdateContext(keyboard=KeyboardInput())
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.keyboard = KeyboardInput()
    game_ctx = GameContext(
        keyboard=KeyboardInput(), renderer=Renderer(pygame.Surface((4, 4))), alpha=0.0
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        game_ctx.alpha = 0.5