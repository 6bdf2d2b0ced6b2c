# src/platformer/simulation.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Sequence
import pygame
from pygame import K_LEFT, K_RIGHT, K_UP, K_SPACE
from . import config
from .config import (
    PLATFORM_POSITIONS, CHECKPOINT_POSITIONS, KEY_X_VELOCITY, JUMP_IMPULSE, COLOR_BG,
)
from .checkpoints import evaluate_checkpoints
from .collisions import resolve_platform_collisions
from .level import LevelConfigError
from .world import SimulationState, update_scroll

# key code -> logical action; every other key is ignored
ACTION_LEFT, ACTION_RIGHT, ACTION_JUMP = "left", "right", "jump"
KEY_BINDINGS = {
    K_LEFT: ACTION_LEFT,
    K_RIGHT: ACTION_RIGHT,
    K_UP: ACTION_JUMP,
    K_SPACE: ACTION_JUMP,
}


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


def _noop_message(text: str, auto_hide: bool):
    pass


def _noop():
    pass


class Simulation:
    """
    Owns one run: the player, the ordered level entities and the phase.
    Hosts call start() once, feed key events into on_input(), and per display
    frame call render() then step_frame().
    """

    def __init__(self,
                 viewport: Viewport,
                 platform_positions: Sequence = PLATFORM_POSITIONS,
                 checkpoint_positions: Sequence = CHECKPOINT_POSITIONS,
                 on_checkpoint_message: Optional[Callable[[str, bool], None]] = None,
                 on_run_complete: Optional[Callable[[], None]] = None,
                 debug: Optional[bool] = None):
        if viewport.width <= 0:
            raise LevelConfigError(f"viewport width must be positive, got {viewport.width}")
        self.state = SimulationState.create(viewport.height, platform_positions, checkpoint_positions)
        self.on_checkpoint_message = on_checkpoint_message or _noop_message
        self.on_run_complete = on_run_complete or _noop
        self.debug = config.DEBUG_SIM_LOGS if debug is None else debug
        self.running = False
        self.frame = 0

    # -------------------- Lifecycle --------------------

    def start(self):
        self.running = True
        if self.debug:
            print(f"[sim] start: {len(self.state.platforms)} platforms, "
                  f"{len(self.state.checkpoints)} checkpoints")

    @property
    def completed(self) -> bool:
        return not self.state.active

    # -------------------- Input --------------------

    def on_input(self, key: int, held: bool):
        """
        Key down (held=True) / key up (held=False). Left/right set the level flag and
        kick vx by KEY_X_VELOCITY on press, zero it on release. Jump kicks vy up on
        every event. Once the run is complete every key just freezes the player.
        """
        state = self.state
        player = state.player
        if not state.active:
            player.stop()
            return

        action = KEY_BINDINGS.get(key)
        x_velocity = KEY_X_VELOCITY if held else 0

        if action == ACTION_LEFT:
            state.keys.left_held = held
            if x_velocity == 0:
                player.vx = 0.0
            player.vx -= x_velocity
        elif action == ACTION_RIGHT:
            state.keys.right_held = held
            if x_velocity == 0:
                player.vx = 0.0
            player.vx += x_velocity
        elif action == ACTION_JUMP:
            player.vy -= JUMP_IMPULSE

    # -------------------- Frame --------------------

    def step_frame(self, viewport: Viewport):
        """Advance one frame. Does nothing until start() has been called."""
        if not self.running:
            return
        state = self.state

        state.player.advance(floor_y=viewport.height, world_width=viewport.width)
        update_scroll(state)
        resolve_platform_collisions(state.player, state.platforms)

        for event in evaluate_checkpoints(state):
            if self.debug:
                print(f"[sim] frame {self.frame}: claimed checkpoint #{event.index}"
                      f"{' (final)' if event.final else ''}")
            if event.message is not None:
                self.on_checkpoint_message(event.message, event.auto_hide)
            if event.final:
                self.on_run_complete()

        self.frame += 1

    def render(self, surf: pygame.Surface):
        """Draw the current (pre-step) state: background, level, then the player."""
        surf.fill(COLOR_BG)
        for platform in self.state.platforms:
            platform.render(surf)
        for checkpoint in self.state.checkpoints:
            checkpoint.render(surf)
        self.state.player.render(surf)
