# src/platformer/world.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence
from .config import BAND_LEFT, BAND_RIGHT, MOVE_SPEED, SCROLL_SPEED
from .level import Platform, Checkpoint, build_level
from .player import Player
from .scaling import proportional_size


class Phase(Enum):
    ACTIVE = "active"          # checkpoints detectable, input and scrolling live
    COMPLETED = "completed"    # last checkpoint claimed; permanent


@dataclass
class InputState:
    """Current-frame key levels, written by key events and read once per frame."""
    right_held: bool = False
    left_held: bool = False

    def release_all(self):
        self.right_held = False
        self.left_held = False


@dataclass
class SimulationState:
    player: Player
    platforms: List[Platform]
    checkpoints: List[Checkpoint]
    band_left: float
    band_right: float
    keys: InputState = field(default_factory=InputState)
    phase: Phase = Phase.ACTIVE

    @classmethod
    def create(cls, viewport_height: float,
               platform_positions: Sequence,
               checkpoint_positions: Sequence) -> "SimulationState":
        """Load the level and size everything once for this viewport height."""
        level = build_level(viewport_height, platform_positions, checkpoint_positions)
        return cls(
            player=Player.spawn(viewport_height),
            platforms=level.platforms,
            checkpoints=level.checkpoints,
            band_left=proportional_size(BAND_LEFT, viewport_height),
            band_right=proportional_size(BAND_RIGHT, viewport_height),
        )

    @property
    def active(self) -> bool:
        return self.phase is Phase.ACTIVE

    @property
    def claimed_count(self) -> int:
        return sum(1 for c in self.checkpoints if c.claimed)

    def next_checkpoint(self) -> Checkpoint | None:
        for c in self.checkpoints:
            if not c.claimed:
                return c
        return None


def shift_world(state: SimulationState, dx: float):
    for platform in state.platforms:
        platform.x += dx
    for checkpoint in state.checkpoints:
        checkpoint.x += dx


def update_scroll(state: SimulationState):
    """
    Dead-zone camera: inside [band_left, band_right] the player moves;
    at the band edges the player stands still and the world slides instead.
    """
    player, keys = state.player, state.keys

    if keys.right_held and player.x < state.band_right:
        player.vx = MOVE_SPEED
    elif keys.left_held and player.x > state.band_left:
        player.vx = -MOVE_SPEED
    else:
        player.vx = 0.0
        if keys.right_held and state.active:
            shift_world(state, -SCROLL_SPEED)
        elif keys.left_held and state.active:
            shift_world(state, SCROLL_SPEED)
