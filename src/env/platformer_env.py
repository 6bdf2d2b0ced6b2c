# src/env/platformer_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame
from pygame import K_LEFT, K_RIGHT, K_UP

from src.platformer.config import WIDTH, HEIGHT, FPS, PLATFORM_POSITIONS, CHECKPOINT_POSITIONS
from src.platformer.simulation import Simulation, Viewport
from src.env.observations import build_observation, OBS_SIZE

NOOP, LEFT, RIGHT, JUMP = 0, 1, 2, 3

REWARD_CHECKPOINT = 1.0
REWARD_COMPLETE = 5.0
STEP_PENALTY = 0.001


class PlatformerEnv(gym.Env):
    """
    Checkpoint platformer as a Gymnasium environment (vector observations).
    - One sim step per display frame (60 Hz reference).
    - Agent acts every `frame_skip` frames (default 4).
    - Actions: 0 NOOP (release arrows), 1 hold LEFT, 2 hold RIGHT, 3 JUMP (keeps held arrows).
    - Episode terminates when the last checkpoint is claimed.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0,
                 width: int = WIDTH,
                 height: int = HEIGHT,
                 platform_positions=PLATFORM_POSITIONS,
                 checkpoint_positions=CHECKPOINT_POSITIONS):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode {render_mode!r}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.viewport = Viewport(width, height)
        self.platform_positions = platform_positions
        self.checkpoint_positions = checkpoint_positions

        self.sim_fps = FPS
        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # --- Gym spaces ---
        self.action_space = gym.spaces.Discrete(4)
        low = np.array([0.0, 0.0, -1.0, -1.0, -1.0, -1.0, 0.0, 0.0], dtype=np.float32)
        high = np.array([1.0] * OBS_SIZE, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        # --- Runtime state ---
        self.sim: Optional[Simulation] = None
        self.timestep: int = 0
        self._claims_before: int = 0
        self._completed_this_step: bool = False

        # Rendering
        self.screen = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        self.sim = Simulation(
            self.viewport,
            platform_positions=self.platform_positions,
            checkpoint_positions=self.checkpoint_positions,
            on_checkpoint_message=self._on_message,
            on_run_complete=self._on_complete,
        )
        self.sim.start()
        self.timestep = 0

        obs = self._get_obs()
        return obs, self._info()

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.sim is not None, "Call reset() before step()"

        self._apply_action(int(action))
        self._claims_before = self.sim.state.claimed_count
        self._completed_this_step = False

        for _ in range(self.frame_skip):
            if self.render_mode == "human":
                self.render()
            self.sim.step_frame(self.viewport)
            if self.sim.completed:
                break

        claims = self.sim.state.claimed_count - self._claims_before
        reward = REWARD_CHECKPOINT * claims - STEP_PENALTY
        if self._completed_this_step:
            reward += REWARD_COMPLETE

        self.timestep += 1
        terminated = self.sim.completed
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        return self._get_obs(), float(reward), terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _apply_action(self, action: int):
        keys = self.sim.state.keys
        if action == JUMP:
            self.sim.on_input(K_UP, True)
            return
        want_left = action == LEFT
        want_right = action == RIGHT
        # only emit edges, the sim treats repeated presses as extra kicks
        if keys.left_held != want_left:
            self.sim.on_input(K_LEFT, want_left)
        if keys.right_held != want_right:
            self.sim.on_input(K_RIGHT, want_right)

    def _on_message(self, text: str, auto_hide: bool):
        pass

    def _on_complete(self):
        self._completed_this_step = True

    def _get_obs(self) -> np.ndarray:
        assert self.sim is not None
        return build_observation(self.sim.state, self.viewport)

    def _info(self) -> Dict[str, Any]:
        state = self.sim.state
        return {
            "timestep": self.timestep,
            "checkpoints_claimed": state.claimed_count,
            "checkpoints_total": len(state.checkpoints),
            "phase": state.phase.value,
            "player_x": float(state.player.x),
            "player_y": float(state.player.y),
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.sim is None:
            return

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((self.viewport.width, self.viewport.height))
                pygame.display.set_caption("Platformer - Gym Env")
            else:
                self.screen = pygame.Surface((self.viewport.width, self.viewport.height))
            self.clock = pygame.time.Clock()

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()

        self.sim.render(self.screen)

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata.get("render_fps", FPS))
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
