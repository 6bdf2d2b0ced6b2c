# src/env/observations.py
from __future__ import annotations
import numpy as np
from src.platformer.simulation import Viewport
from src.platformer.world import SimulationState
from src.platformer.config import KEY_X_VELOCITY, JUMP_IMPULSE

OBS_SIZE = 8
MAX_OBS_VY = 4 * JUMP_IMPULSE   # vy normalisation; faster falls saturate at 1

# index -> meaning, for debugging overlays / notebooks
OBS_LABELS = (
    "x_norm", "y_norm", "vx_norm", "vy_norm",
    "cp_dx_norm", "cp_dy_norm", "floor_clear_norm", "progress",
)


def _clip(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def _floor_clearance(state: SimulationState, viewport: Viewport) -> float:
    """Gap between the player's feet and whatever is below (platform top or floor)."""
    p = state.player
    bottom = p.y + p.height
    best = viewport.height - bottom
    for plat in state.platforms:
        if plat.x - p.width / 2 <= p.x <= plat.x + plat.width - p.width / 3 and plat.y >= bottom:
            best = min(best, plat.y - bottom)
    return best


def build_observation(state: SimulationState, viewport: Viewport) -> np.ndarray:
    """
    [x_norm, y_norm, vx_norm, vy_norm,
     next_checkpoint_dx, next_checkpoint_dy, floor_clearance, progress]
    All values in [0, 1] or [-1, 1]; float32, shape (8,).
    """
    p = state.player
    w = max(1.0, float(viewport.width))
    h = max(1.0, float(viewport.height))

    x_norm = _clip(p.x / w, 0.0, 1.0)
    y_norm = _clip(p.y / h, 0.0, 1.0)
    vx_norm = _clip(p.vx / KEY_X_VELOCITY, -1.0, 1.0)
    vy_norm = _clip(p.vy / MAX_OBS_VY, -1.0, 1.0)

    nxt = state.next_checkpoint()
    if nxt is None:
        dx, dy = 0.0, 0.0
    else:
        dx = _clip((nxt.x - p.x) / w, -1.0, 1.0)
        dy = _clip((nxt.y - p.y) / h, -1.0, 1.0)

    clear = _clip(_floor_clearance(state, viewport) / h, 0.0, 1.0)
    total = len(state.checkpoints)
    progress = state.claimed_count / total if total else 1.0

    return np.array([x_norm, y_norm, vx_norm, vy_norm, dx, dy, clear, progress], dtype=np.float32)
