# game.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
import random

import pygame  # type: ignore
from pygame.math import Vector2  # type: ignore

from .chain import Cell, Chain
from .config import (
    FOOD_SIZE, START_POS,
    BG, FOOD_COLOR,
    UP, DOWN, LEFT, RIGHT,
    Config, CFG,
)

BOUNDARY = "boundary"
SELF = "self"

CRASH_MESSAGES = {
    BOUNDARY: "You crashed with the boundaries",
    SELF: "You crashed with yourself",
}

# vim keys, arrows as a convenience
KEY_DIRECTIONS = {
    pygame.K_k: UP,
    pygame.K_j: DOWN,
    pygame.K_h: LEFT,
    pygame.K_l: RIGHT,
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


# ---------- Helpers ----------
def spawn_food(rng: random.Random, cfg: Config = CFG) -> Vector2:
    fx = rng.randrange(*cfg.food_x)
    fy = rng.randrange(*cfg.food_y)
    return Vector2(fx, fy)

def out_of_bounds(pos: Vector2, width: float, height: float) -> bool:
    """Outside [0, width] x [0, height]; the edges themselves are inside."""
    return pos.x < 0 or pos.x > width or pos.y < 0 or pos.y > height

def draw_cell(screen: pygame.Surface, cell: Cell) -> None:
    half = cell.size / 2
    rect = pygame.Rect(
        round(cell.position.x - half),
        round(cell.position.y - half),
        round(cell.size),
        round(cell.size),
    )
    pygame.draw.rect(screen, cell.color, rect)


# ---------- State ----------
@dataclass
class GameState:
    chain: Chain
    food: Cell
    rng: random.Random
    cfg: Config
    boost: bool = False            # double speed on the next step
    crash: Optional[str] = None    # BOUNDARY / SELF once the game is over

    @property
    def alive(self) -> bool:
        return self.crash is None

@dataclass
class InputFrame:
    direction: Optional[Tuple[int, int]] = None
    shift: Optional[bool] = None   # shift flag of the last key event, if any
    quit: bool = False

def new_game_state(cfg: Config = CFG, start=START_POS) -> GameState:
    rng = random.Random(cfg.seed)
    chain = Chain.new(start, base_speed=cfg.speed, growth_batch=cfg.growth_batch)
    food = Cell(spawn_food(rng, cfg), FOOD_SIZE, FOOD_COLOR)
    return GameState(chain=chain, food=food, rng=rng, cfg=cfg)


# ---------- Input / Update / Draw ----------
def resolve_events(events: Iterable[pygame.event.Event]) -> InputFrame:
    """
    Fold all events polled this frame. The last directional key wins,
    the shift flag comes from the last key event.
    """
    frame = InputFrame()
    for event in events:
        if event.type == pygame.QUIT:
            frame.quit = True
        elif event.type == pygame.KEYDOWN:
            frame.shift = bool(getattr(event, "mod", 0) & pygame.KMOD_SHIFT)
            if event.key == pygame.K_ESCAPE:
                frame.quit = True
            elif event.key in KEY_DIRECTIONS:
                frame.direction = KEY_DIRECTIONS[event.key]
    return frame

def apply_input(state: GameState, frame: InputFrame, shift_held: bool = False) -> None:
    if frame.direction is not None:
        state.chain.set_direction(frame.direction)
    if state.cfg.boost_from_key_state:
        state.boost = shift_held
    elif frame.shift is not None:
        state.boost = frame.shift

def handle_input(state: GameState) -> bool:
    """Poll pygame, steer the chain, update the boost flag. Return False to quit."""
    frame = resolve_events(pygame.event.get())
    if frame.quit:
        return False
    shift_held = bool(pygame.key.get_mods() & pygame.KMOD_SHIFT)
    apply_input(state, frame, shift_held)
    return True

def step_game(state: GameState, dt: float, width: float, height: float) -> bool:
    """
    Advance the game by one frame of `dt` seconds.
    Returns True if alive, False once a terminal collision was recorded.
    """
    if not state.alive:
        return False
    chain = state.chain

    chain.reset_speed()
    if state.boost:
        chain.boost(state.cfg.boost_factor)
    chain.advance(dt)

    # Wall collision
    if out_of_bounds(chain.position(), width, height):
        state.crash = BOUNDARY
        return False

    # Self collision, segments next to the head always overlap it
    for seg in chain.body[state.cfg.self_collision_skip:]:
        if chain.intersects(seg):
            state.crash = SELF
            return False

    # Eat / grow
    if chain.intersects(state.food):
        state.food.move_to(spawn_food(state.rng, state.cfg))
        chain.grow()

    return True

def draw_game(screen: pygame.Surface, state: GameState) -> None:
    screen.fill(BG)
    # body under the head
    for seg in reversed(state.chain.body):
        draw_cell(screen, seg)
    draw_cell(screen, state.chain.head)
    draw_cell(screen, state.food)
