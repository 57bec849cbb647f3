# chain.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from pygame.math import Vector2  # type: ignore

from .config import (
    SEG_SIZE, START_POS, SPEED, GROWTH_BATCH,
    HEAD_COLOR, TAIL_COLOR,
    DIRECTIONS, LEFT,
)


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


# ---------- Cell ----------
@dataclass(frozen=True)
class Cell:
    """A square centred on `position`. Only the position may change."""
    position: Vector2
    size: float = SEG_SIZE
    color: Tuple[int, int, int] = TAIL_COLOR

    def move_to(self, pos) -> None:
        self.position.update(pos)

    def bounds(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom)"""
        half = self.size / 2
        x, y = self.position
        return (x - half, y - half, x + half, y + half)

    def overlaps(self, other: "Cell") -> bool:
        """Open-box overlap: cells sharing only an edge or a corner do not overlap."""
        l1, t1, r1, b1 = self.bounds()
        l2, t2, r2, b2 = other.bounds()
        return max(l1, l2) < min(r1, r2) and max(t1, t2) < min(b1, b2)


def build_seg(pos, color: Tuple[int, int, int] = TAIL_COLOR) -> Cell:
    return Cell(Vector2(pos), SEG_SIZE, color)


# ---------- Chain ----------
@dataclass
class Chain:
    head: Cell
    body: List[Cell]          # index 0 nearest the head
    direction: Tuple[int, int]
    base_speed: float = SPEED
    speed: float = SPEED
    growth_batch: int = GROWTH_BATCH

    @classmethod
    def new(cls, start=START_POS, base_speed: float = SPEED,
            growth_batch: int = GROWTH_BATCH) -> "Chain":
        head = build_seg(start, HEAD_COLOR)
        return cls(
            head=head,
            body=[build_seg(head.position)],
            direction=LEFT,
            base_speed=base_speed,
            speed=base_speed,
            growth_batch=growth_batch,
        )

    def __len__(self) -> int:
        return len(self.body)

    def cells(self) -> Iterator[Cell]:
        yield self.head
        yield from self.body

    # ----- steering -----
    def set_direction(self, requested: Tuple[int, int]) -> bool:
        """Turn unless `requested` is a 180° reversal. Returns True if the direction changed."""
        if requested not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {requested!r}")
        if is_opposite(requested, self.direction):
            return False
        changed = requested != self.direction
        self.direction = requested
        return changed

    def reset_speed(self) -> None:
        self.speed = self.base_speed

    def boost(self, factor: float) -> None:
        self.speed *= factor

    # ----- motion -----
    def velocity(self) -> Vector2:
        dx, dy = self.direction
        return Vector2(dx, dy) * self.speed

    def advance(self, elapsed: float) -> None:
        """
        Shift the body one slot toward the head and move the head by
        speed * elapsed seconds. body[i] takes body[i-1]'s old position,
        body[0] takes the head's old position.
        """
        elapsed = max(0.0, elapsed)
        velocity = self.velocity()
        # tail first so nothing is overwritten before it is read
        for i in range(len(self.body) - 1, 0, -1):
            self.body[i].move_to(self.body[i - 1].position)
        self.body[0].move_to(self.head.position)
        self.head.move_to(self.head.position + velocity * elapsed)

    def grow(self) -> None:
        for _ in range(self.growth_batch):
            self.body.append(build_seg(self.body[-1].position))

    # ----- queries -----
    def intersects(self, other: Cell) -> bool:
        return self.head.overlaps(other)

    def position(self) -> Vector2:
        return Vector2(self.head.position)
