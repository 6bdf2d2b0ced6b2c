# src/platformer/level.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple
import pygame
from .config import (
    PLATFORM_W, PLATFORM_H, CHECKPOINT_W, CHECKPOINT_H,
    COLOR_PLAT, COLOR_CHECKPOINT,
)
from .scaling import proportional_size


class LevelConfigError(ValueError):
    """Level data that cannot be simulated (raised once, at load)."""


@dataclass
class Platform:
    x: float
    y: float
    width: float
    height: float

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def render(self, surf: pygame.Surface):
        pygame.draw.rect(surf, COLOR_PLAT, self.rect)


@dataclass
class Checkpoint:
    """A flag the player has to touch. Claiming is one-way."""
    x: float
    y: float
    width: float
    height: float
    claimed: bool = False

    def claim(self):
        """Collapse to an unreachable zero-size box and remember the claim."""
        self.width = 0
        self.height = 0
        self.y = math.inf
        self.claimed = True

    def render(self, surf: pygame.Surface):
        if self.claimed:
            return
        pygame.draw.rect(surf, COLOR_CHECKPOINT,
                         pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height)))


@dataclass
class Level:
    platforms: List[Platform] = field(default_factory=list)
    checkpoints: List[Checkpoint] = field(default_factory=list)


def _coords(entry, kind: str, index: int) -> Tuple[float, float]:
    """Accept (x, y) pairs or {"x":..,"y":..} mappings; anything else is a config error."""
    try:
        if isinstance(entry, dict):
            x, y = entry["x"], entry["y"]
        else:
            x, y = entry[0], entry[1]
        x, y = float(x), float(y)
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise LevelConfigError(f"{kind} #{index}: expected an (x, y) pair, got {entry!r}") from e
    if not (math.isfinite(x) and math.isfinite(y)):
        raise LevelConfigError(f"{kind} #{index}: coordinates must be finite, got ({x}, {y})")
    return x, y


def _overlaps(a: Platform, b: Platform) -> bool:
    """Strict intersection: platforms that only touch edges are fine."""
    return (a.x < b.x + b.width and b.x < a.x + a.width and
            a.y < b.y + b.height and b.y < a.y + a.height)


def build_level(viewport_height: float,
                platform_positions: Sequence,
                checkpoint_positions: Sequence) -> Level:
    """
    Create the ordered platform / checkpoint lists from nominal coordinates.
    y coordinates and heights are scaled for the viewport, platform x and width are not.
    Raises LevelConfigError on data the per-frame step could not handle.
    """
    if viewport_height <= 0:
        raise LevelConfigError(f"viewport height must be positive, got {viewport_height}")
    if not checkpoint_positions:
        raise LevelConfigError("level needs at least one checkpoint (the last one ends the run)")

    plat_h = proportional_size(PLATFORM_H, viewport_height)
    platforms: List[Platform] = []
    for i, entry in enumerate(platform_positions):
        x, y = _coords(entry, "platform", i)
        platforms.append(Platform(x=x, y=proportional_size(y, viewport_height),
                                  width=PLATFORM_W, height=plat_h))

    for i, a in enumerate(platforms):
        for j in range(i + 1, len(platforms)):
            b = platforms[j]
            if _overlaps(a, b):
                raise LevelConfigError(
                    f"platforms #{i} at ({a.x:g}, {a.y:g}) and #{j} at ({b.x:g}, {b.y:g}) overlap"
                )

    cp_w = proportional_size(CHECKPOINT_W, viewport_height)
    cp_h = proportional_size(CHECKPOINT_H, viewport_height)
    checkpoints: List[Checkpoint] = []
    for i, entry in enumerate(checkpoint_positions):
        x, y = _coords(entry, "checkpoint", i)
        checkpoints.append(Checkpoint(x=x, y=proportional_size(y, viewport_height),
                                      width=cp_w, height=cp_h))

    return Level(platforms=platforms, checkpoints=checkpoints)
