# src/platformer/collisions.py
from __future__ import annotations
from typing import Iterable
from .config import GRAVITY
from .level import Platform
from .player import Player


def _within_x(player: Player, platform: Platform) -> bool:
    # asymmetric margins: half a player width on the left, a third on the right
    return (player.x >= platform.x - player.width / 2 and
            player.x <= platform.x + platform.width - player.width / 3)


def lands_on_top(player: Player, platform: Platform) -> bool:
    """Feet at/above the top now and at/below it after this frame's fall."""
    bottom = player.y + player.height
    return (bottom <= platform.y and
            bottom + player.vy >= platform.y and
            _within_x(player, platform))


def hits_from_below(player: Player, platform: Platform) -> bool:
    return (_within_x(player, platform) and
            player.y + player.height >= platform.y and
            player.y <= platform.y + platform.height)


def resolve_platform_collisions(player: Player, platforms: Iterable[Platform]):
    """
    Vertical-only resolution against every platform, in list order.
    Landing wins over bouncing for a given platform.
    """
    for platform in platforms:
        if lands_on_top(player, platform):
            player.vy = 0.0
            continue

        if hits_from_below(player, platform):
            # push below the platform and start falling right away
            player.y = platform.y + player.height
            player.vy = GRAVITY
