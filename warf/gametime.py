"""The game clock: frame counting, movement ticks and cycles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from warf.grid import CYCLE_LENGTH


class GameSpeed(IntEnum):
    """Frames skipped between movement updates."""

    NORMAL = 2
    FAST = 1
    SUPER = 0


@dataclass
class Clock:
    """Counts frames down through a cycle of CYCLE_LENGTH frames."""

    frame: int = 1
    frames_to_move: int = 0
    speed: GameSpeed = GameSpeed.NORMAL
    paused: bool = False

    def tick(self) -> bool:
        """Advance one frame; returns False while paused."""
        if self.paused:
            return False
        self.frame -= 1
        if self.frame <= -1:
            self.frame = CYCLE_LENGTH
        self.frames_to_move -= 1
        if self.frames_to_move <= -1:
            self.frames_to_move = int(self.speed)
        return True

    def time_to_move(self) -> bool:
        return self.frames_to_move == 0

    def new_cycle(self) -> bool:
        return self.frame == 0

    def half_cycle(self) -> bool:
        return self.new_cycle() or self.frame == CYCLE_LENGTH // 2

    def quarter_cycle(self) -> bool:
        quarter = CYCLE_LENGTH // 4
        return self.half_cycle() or self.frame in (quarter, quarter * 2, quarter * 3)