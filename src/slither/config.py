from dataclasses import dataclass
from typing import Optional, Tuple
import math

# ----- Window -----
WIDTH, HEIGHT = 1366, 768
TITLE = "Snake Game"
START_POS = (WIDTH / 2, HEIGHT / 2)

# ----- Cells -----
SEG_SIZE = 40.0
FOOD_SIZE = 20.0

# ----- Colors -----
BG         = (0, 0, 0)
HEAD_COLOR = (0, 0, 255)
TAIL_COLOR = (0, 255, 0)
FOOD_COLOR = (255, 0, 0)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, LEFT, RIGHT, DOWN)

# ----- Motion -----
SPEED = 400.0          # units per second
SPEED_FACTOR = 2.0     # shift boost
GROWTH_BATCH = 8
SELF_COLLISION_SKIP = 16


def derive_skip_window(seg_size: float, speed: float, fps: int) -> int:
    """
    Smallest number of body segments, counted from the head, that can still
    overlap the head's box without a real self-collision.

    The clock reports whole milliseconds, so at the frame cap a frame lasts at
    least floor(1000 / fps) ms and moves the head at least that far. body[i]
    trails (i + 1) frames behind. Right after a 90° turn the Chebyshev distance
    to a trailing segment is only half its path distance, so boxes of side
    seg_size stop overlapping once that path is 2 * seg_size long.

    Segments added by grow() start stacked on the tail. If the tail is still
    near the head (growing twice within the first few frames) those segments
    sit past the window while overlapping the head, and the check reports a
    self-collision. The window does not cover that case.
    """
    if seg_size <= 0 or speed <= 0 or fps <= 0:
        raise ValueError("seg_size, speed and fps must be positive")
    frame_ms = max(1, 1000 // fps)
    min_step = speed * frame_ms / 1000
    return max(0, math.ceil(2 * seg_size / min_step) - 1)


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    fps: int = 60
    speed: float = SPEED
    boost_factor: float = SPEED_FACTOR
    growth_batch: int = GROWTH_BATCH
    self_collision_skip: int = SELF_COLLISION_SKIP
    # True: boost while Shift is held. False: latch Shift from the last key event.
    boost_from_key_state: bool = True
    food_x: Tuple[int, int] = (100, 1000)
    food_y: Tuple[int, int] = (100, 600)

    def validate(self) -> "Config":
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")
        if self.boost_factor < 1:
            raise ValueError(f"boost_factor must be >= 1, got {self.boost_factor}")
        if self.growth_batch < 0:
            raise ValueError(f"growth_batch must be >= 0, got {self.growth_batch}")
        if self.self_collision_skip < 0:
            raise ValueError(f"self_collision_skip must be >= 0, got {self.self_collision_skip}")
        for name, (lo, hi) in (("food_x", self.food_x), ("food_y", self.food_y)):
            if lo >= hi:
                raise ValueError(f"{name} range is empty: [{lo}, {hi})")
        return self

    @property
    def min_skip(self) -> int:
        return derive_skip_window(SEG_SIZE, self.speed, self.fps)


CFG = Config()
