# src/tests/scroll_unit.py
"""
Scroll band + key handling checks.

Usage (from repo root):
  python -m src.tests.scroll_unit
"""
from __future__ import annotations
import sys

import pygame

from src.platformer.config import KEY_X_VELOCITY, JUMP_IMPULSE, MOVE_SPEED, SCROLL_SPEED
from src.platformer.simulation import Simulation, Viewport
from src.platformer.world import Phase

VIEW = Viewport(1000, 600)
PLATFORMS = [(500, 450), (900, 300)]
CHECKPOINTS = [(3000, 80), (4000, 80)]


def make_sim() -> Simulation:
    sim = Simulation(VIEW, platform_positions=PLATFORMS, checkpoint_positions=CHECKPOINTS)
    sim.start()
    return sim


def world_xs(sim: Simulation):
    return ([p.x for p in sim.state.platforms], [c.x for c in sim.state.checkpoints])


def test_band_bounds_follow_viewport():
    assert (make_sim().state.band_left, make_sim().state.band_right) == (100, 400)
    small = Simulation(Viewport(800, 250), platform_positions=PLATFORMS, checkpoint_positions=CHECKPOINTS)
    assert (small.state.band_left, small.state.band_right) == (50, 200)


def test_player_moves_inside_band():
    sim = make_sim()
    player = sim.state.player
    player.x = 200.0
    sim.state.keys.right_held = True
    before = world_xs(sim)
    sim.step_frame(VIEW)
    assert player.vx == MOVE_SPEED
    assert world_xs(sim) == before

    sim.step_frame(VIEW)
    assert player.x == 205.0


def test_world_scrolls_left_at_right_edge():
    sim = make_sim()
    player = sim.state.player
    player.x = 400.0
    sim.state.keys.right_held = True

    for _ in range(3):
        plats, cps = world_xs(sim)
        sim.step_frame(VIEW)
        assert player.vx == 0.0
        assert player.x == 400.0
        new_plats, new_cps = world_xs(sim)
        assert new_plats == [x - SCROLL_SPEED for x in plats]
        assert new_cps == [x - SCROLL_SPEED for x in cps]


def test_world_scrolls_right_at_left_edge():
    sim = make_sim()
    player = sim.state.player
    player.x = 100.0
    sim.state.keys.left_held = True
    plats, cps = world_xs(sim)
    sim.step_frame(VIEW)
    assert player.vx == 0.0
    assert world_xs(sim) == ([x + SCROLL_SPEED for x in plats], [x + SCROLL_SPEED for x in cps])


def test_no_scroll_once_completed():
    sim = make_sim()
    sim.state.phase = Phase.COMPLETED
    sim.state.player.x = 400.0
    sim.state.keys.right_held = True
    before = world_xs(sim)
    sim.step_frame(VIEW)
    assert sim.state.player.vx == 0.0
    assert world_xs(sim) == before


def test_arrow_keys():
    sim = make_sim()
    player, keys = sim.state.player, sim.state.keys

    sim.on_input(pygame.K_RIGHT, True)
    assert keys.right_held and player.vx == KEY_X_VELOCITY
    sim.on_input(pygame.K_RIGHT, False)
    assert not keys.right_held and player.vx == 0.0

    sim.on_input(pygame.K_LEFT, True)
    assert keys.left_held and player.vx == -KEY_X_VELOCITY
    sim.on_input(pygame.K_LEFT, False)
    assert not keys.left_held and player.vx == 0.0


def test_jump_keys():
    sim = make_sim()
    player = sim.state.player
    sim.on_input(pygame.K_UP, True)
    assert player.vy == -JUMP_IMPULSE
    sim.on_input(pygame.K_SPACE, True)
    assert player.vy == -2 * JUMP_IMPULSE
    # the release event kicks too
    sim.on_input(pygame.K_SPACE, False)
    assert player.vy == -3 * JUMP_IMPULSE


def test_unbound_keys_ignored():
    sim = make_sim()
    player, keys = sim.state.player, sim.state.keys
    sim.on_input(pygame.K_a, True)
    sim.on_input(pygame.K_DOWN, True)
    assert (player.vx, player.vy) == (0.0, 0.0)
    assert not keys.left_held and not keys.right_held


def test_frames_before_start_do_nothing():
    sim = Simulation(VIEW, platform_positions=PLATFORMS, checkpoint_positions=CHECKPOINTS)
    player = sim.state.player
    start = (player.x, player.y, player.vx, player.vy)
    sim.step_frame(VIEW)
    assert (player.x, player.y, player.vx, player.vy) == start
    assert sim.frame == 0


def main():
    tests = [
        test_band_bounds_follow_viewport, test_player_moves_inside_band,
        test_world_scrolls_left_at_right_edge, test_world_scrolls_right_at_left_edge,
        test_no_scroll_once_completed, test_arrow_keys, test_jump_keys,
        test_unbound_keys_ignored, test_frames_before_start_do_nothing,
    ]
    try:
        for t in tests:
            t()
            print(f"✓ {t.__name__}")
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    print("🎉 Scroll checks passed")


if __name__ == "__main__":
    main()
