# src/platformer/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from .config import (
    GRAVITY, PLAYER_START_X, PLAYER_START_Y, PLAYER_W, PLAYER_H, COLOR_PLAYER
)
from .scaling import proportional_size


@dataclass
class Player:
    """
    Player box in screen coordinates (y grows downward, TOP-based).
    - width/height never change after construction
    - vx is assigned by input / scroll band, vy by gravity and collisions
    """
    x: float
    y: float
    width: float
    height: float
    vx: float = 0.0
    vy: float = 0.0

    @classmethod
    def spawn(cls, viewport_height: float) -> "Player":
        """Build the player at the level start, sized for this viewport."""
        return cls(
            x=float(proportional_size(PLAYER_START_X, viewport_height)),
            y=float(proportional_size(PLAYER_START_Y, viewport_height)),
            width=proportional_size(PLAYER_W, viewport_height),
            height=proportional_size(PLAYER_H, viewport_height),
        )

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def advance(self, floor_y: float, world_width: float):
        """Integrate one frame: move, apply gravity / floor stop, clamp to the side bands."""
        self.x += self.vx
        self.y += self.vy

        if self.y + self.height + self.vy <= floor_y:
            # only reached while there is room to fall; a player above the
            # screen on a floor-crossing frame is not snapped back
            if self.y < 0:
                self.y = 0
                self.vy = GRAVITY
            self.vy += GRAVITY
        else:
            self.vy = 0.0

        if self.x < self.width:
            self.x = self.width
        if self.x >= world_width - self.width * 2:
            self.x = world_width - self.width * 2

    def stop(self):
        self.vx = 0.0
        self.vy = 0.0

    def render(self, surf: pygame.Surface):
        pygame.draw.rect(surf, COLOR_PLAYER, self.rect)
