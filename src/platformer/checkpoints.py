# src/platformer/checkpoints.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List
from .config import (
    CHECKPOINT_ENTRY_TOLERANCE, CHECKPOINT_MESSAGE_WINDOW,
    MESSAGE_CHECKPOINT, MESSAGE_FINAL,
)
from .level import Checkpoint
from .player import Player
from .world import Phase, SimulationState


@dataclass(frozen=True)
class CheckpointEvent:
    """Something the UI should hear about after a claim."""
    index: int
    final: bool
    message: str | None     # None when the claim happened outside the message window
    auto_hide: bool


def touches(player: Player, checkpoint: Checkpoint) -> bool:
    """Spatial part of the claim test (wide horizontal entry window)."""
    return (player.x >= checkpoint.x and
            player.y >= checkpoint.y and
            player.y + player.height <= checkpoint.y + checkpoint.height and
            player.x - player.width
            <= checkpoint.x - checkpoint.width + player.width * CHECKPOINT_ENTRY_TOLERANCE)


def in_message_window(player: Player, checkpoint: Checkpoint) -> bool:
    return checkpoint.x <= player.x <= checkpoint.x + CHECKPOINT_MESSAGE_WINDOW


def unlocked(checkpoints: List[Checkpoint], index: int) -> bool:
    """Only the first checkpoint, or one whose predecessor is claimed, can be taken."""
    return index == 0 or checkpoints[index - 1].claimed


def evaluate_checkpoints(state: SimulationState) -> List[CheckpointEvent]:
    """
    Claim every checkpoint the player is standing in, strictly in order.
    Claiming the last one completes the run: phase flips, the player is frozen
    and the held keys are released.
    """
    events: List[CheckpointEvent] = []
    player, checkpoints = state.player, state.checkpoints
    last = len(checkpoints) - 1

    for i, checkpoint in enumerate(checkpoints):
        if not (touches(player, checkpoint) and state.active and unlocked(checkpoints, i)):
            continue

        checkpoint.claim()

        if i == last:
            state.phase = Phase.COMPLETED
            player.stop()
            state.keys.release_all()
            events.append(CheckpointEvent(index=i, final=True,
                                          message=MESSAGE_FINAL, auto_hide=False))
        elif in_message_window(player, checkpoint):
            events.append(CheckpointEvent(index=i, final=False,
                                          message=MESSAGE_CHECKPOINT, auto_hide=state.active))
        else:
            events.append(CheckpointEvent(index=i, final=False, message=None, auto_hide=False))

    return events
