"""Sprite-sheet frame stepping for walking and idle animations."""

from __future__ import annotations

from dataclasses import dataclass

IDLE_SLOWDOWN = 1.5


@dataclass
class Animation:
    """Cycles through the frames of a sprite sheet at a fixed rate."""

    current_frame: int = 0
    frame_speed: int = 6
    total_frames: int = 4
    frame_timer: float = 0.0
    frame_count: int = 0
    is_attacking: bool = False

    def _advance(self, delta_time: float, frame_duration: float) -> None:
        self.frame_timer += delta_time
        if self.frame_timer >= frame_duration:
            self.frame_timer = 0.0
            self.current_frame += 1
            if self.current_frame >= self.total_frames:
                self.current_frame = 0

    def handle_walk(self, is_walking: bool, is_idle: bool, delta_time: float) -> None:
        """Step the walk cycle, or the slower idle cycle when standing still."""
        if is_walking:
            self._advance(delta_time, 1.0 / self.frame_speed)
        elif is_idle:
            self.handle_idle(delta_time)

    def handle_idle(self, delta_time: float) -> None:
        """Step the idle cycle, which runs slower than the walk cycle."""
        idle_speed = self.frame_speed / IDLE_SLOWDOWN
        self._advance(delta_time, 1.0 / idle_speed)