# src/tests/level_unit.py
"""
Level loading / validation and the message overlay timer.

Usage (from repo root):
  python -m src.tests.level_unit
"""
from __future__ import annotations
import sys

import pygame

from src.platformer.config import (
    PLATFORM_POSITIONS, CHECKPOINT_POSITIONS, MESSAGE_HIDE_MS, PLATFORM_W,
    COLOR_BG, COLOR_PLAT, COLOR_PLAYER, COLOR_CHECKPOINT,
)
from src.platformer.hud import MessageOverlay
from src.platformer.level import LevelConfigError, build_level
from src.platformer.simulation import Simulation, Viewport


def expect_config_error(fn, fragment: str):
    try:
        fn()
    except LevelConfigError as e:
        assert fragment in str(e), f"unexpected message: {e}"
        return
    raise AssertionError(f"expected LevelConfigError mentioning {fragment!r}")


def test_default_level_loads():
    level = build_level(600, PLATFORM_POSITIONS, CHECKPOINT_POSITIONS)
    assert len(level.platforms) == len(PLATFORM_POSITIONS)
    assert len(level.checkpoints) == len(CHECKPOINT_POSITIONS)
    assert [c.x for c in level.checkpoints] == sorted(c.x for c in level.checkpoints)
    assert not any(c.claimed for c in level.checkpoints)


def test_sizes_scaled_for_short_viewport():
    level = build_level(250, [(500, 450)], [(1170, 80)])
    plat, cp = level.platforms[0], level.checkpoints[0]
    assert (plat.x, plat.y, plat.width, plat.height) == (500, 225, PLATFORM_W, 20)
    assert (cp.x, cp.y, cp.width, cp.height) == (1170, 40, 20, 35)


def test_empty_checkpoints_rejected():
    expect_config_error(lambda: build_level(600, PLATFORM_POSITIONS, []), "checkpoint")


def test_overlapping_platforms_rejected():
    expect_config_error(lambda: build_level(600, [(850, 350), (900, 350)], [(1170, 80)]), "overlap")


def test_touching_platforms_allowed():
    level = build_level(600, [(0, 100), (200, 100), (0, 140)], [(1170, 80)])
    assert len(level.platforms) == 3


def test_malformed_entries_rejected():
    expect_config_error(lambda: build_level(600, [("a",)], [(1170, 80)]), "platform #0")
    expect_config_error(lambda: build_level(600, [], [(1170, None)]), "checkpoint #0")
    expect_config_error(lambda: build_level(600, [], [(float("nan"), 80)]), "finite")


def test_mapping_entries_accepted():
    level = build_level(600, [{"x": 500, "y": 450}], [{"x": 1170, "y": 80, "z": 1}])
    assert level.platforms[0].x == 500 and level.checkpoints[0].y == 80


def test_bad_viewport_rejected():
    expect_config_error(lambda: Simulation(Viewport(0, 600)), "width")
    expect_config_error(lambda: Simulation(Viewport(800, 0)), "height")


def test_render_to_surface():
    sim = Simulation(Viewport(800, 600), platform_positions=[(300, 500)], checkpoint_positions=[(20, 300), (600, 80)])
    sim.state.checkpoints[0].claim()          # claimed ones are skipped, y is inf
    surf = pygame.Surface((800, 600))
    sim.render(surf)
    assert tuple(surf.get_at((15, 410)))[:3] == COLOR_PLAYER
    assert tuple(surf.get_at((350, 510)))[:3] == COLOR_PLAT
    assert tuple(surf.get_at((610, 100)))[:3] == COLOR_CHECKPOINT
    assert tuple(surf.get_at((25, 310)))[:3] == COLOR_BG


def test_overlay_auto_hide():
    overlay = MessageOverlay()
    overlay.show("hello", auto_hide=True, now_ms=1000)
    overlay.update(1000 + MESSAGE_HIDE_MS - 1)
    assert overlay.visible
    overlay.update(1000 + MESSAGE_HIDE_MS)
    assert not overlay.visible


def test_overlay_new_message_replaces_deadline():
    overlay = MessageOverlay()
    overlay.show("first", auto_hide=True, now_ms=0)
    overlay.show("second", auto_hide=True, now_ms=1500)
    overlay.update(MESSAGE_HIDE_MS)
    assert overlay.visible and overlay.text == "second"
    overlay.update(1500 + MESSAGE_HIDE_MS)
    assert not overlay.visible

    overlay.show("third", auto_hide=True, now_ms=0)
    overlay.show("final", auto_hide=False, now_ms=100)
    overlay.update(10 ** 6)
    assert overlay.visible and overlay.text == "final"


def main():
    tests = [
        test_default_level_loads, test_sizes_scaled_for_short_viewport,
        test_empty_checkpoints_rejected, test_overlapping_platforms_rejected,
        test_touching_platforms_allowed, test_malformed_entries_rejected,
        test_mapping_entries_accepted, test_bad_viewport_rejected, test_render_to_surface,
        test_overlay_auto_hide, test_overlay_new_message_replaces_deadline,
    ]
    try:
        for t in tests:
            t()
            print(f"✓ {t.__name__}")
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    print("🎉 Level checks passed")


if __name__ == "__main__":
    main()
