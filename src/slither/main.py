# main.py
import argparse

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, TITLE, Config
from .game import CRASH_MESSAGES, new_game_state, handle_input, step_game, draw_game


def parse_args(argv=None) -> Config:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Continuous-motion snake. Steer with HJKL or arrows, Shift to boost.")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Seed for food placement.")
    parser.add_argument("--fps", type=int, default=defaults.fps, help="Frame-rate cap.")
    parser.add_argument("--speed", type=float, default=defaults.speed, help="Base speed in pixels per second.")
    parser.add_argument("--growth", type=int, default=defaults.growth_batch, help="Segments added per food.")
    parser.add_argument("--skip", type=int, default=defaults.self_collision_skip,
                        help="Segments behind the head ignored by the self-collision check.")
    parser.add_argument("--event-boost", action="store_true",
                        help="Latch Shift from the last key press instead of reading the held key.")
    args = parser.parse_args(argv)
    return Config(
        seed=args.seed,
        fps=args.fps,
        speed=args.speed,
        growth_batch=args.growth,
        self_collision_skip=args.skip,
        boost_from_key_state=not args.event_boost,
    ).validate()


def main(argv=None):
    cfg = parse_args(argv)
    if cfg.self_collision_skip < cfg.min_skip:
        print(f"[GAME] warning: skip window {cfg.self_collision_skip} < {cfg.min_skip}, "
              "expect false self-collisions")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    state = new_game_state(cfg)
    print(f"[GAME] start speed={cfg.speed} fps={cfg.fps} seed={cfg.seed}")
    running = True
    clock.tick()

    while running:
        # 1) input
        running = handle_input(state)
        if not running:
            print("[GAME] quit")
            break

        # 2) update
        dt = clock.tick(cfg.fps) / 1000.0
        width, height = screen.get_size()
        if not step_game(state, dt, width, height):
            print(f"[GAME] {CRASH_MESSAGES[state.crash]} (length {len(state.chain)})")
            break

        # 3) render
        draw_game(screen, state)
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
