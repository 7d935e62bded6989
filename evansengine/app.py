"""Window setup and the main loop."""

from __future__ import annotations

import argparse
import os
from typing import Optional

import pygame

from evansengine.game import Game
from evansengine.player import read_movement

WINDOW_TITLE = "Evans Engine"
WINDOW_SIZE = (800, 600)


def run(game: Game, surface: pygame.Surface, max_frames: Optional[int] = None) -> int:
    """Run frames until the window is closed or ``max_frames`` are drawn."""
    previous = pygame.time.get_ticks()
    frames = 0
    running = True
    while running and (max_frames is None or frames < max_frames):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        surface.fill((0, 0, 0))

        now = pygame.time.get_ticks()
        delta_time = (now - previous) / 1000.0
        previous = now

        game.render(surface)
        game.update(delta_time, surface, read_movement(pygame.key.get_pressed()))

        pygame.display.flip()
        frames += 1
    return frames


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="evansengine", description="Run the game.")
    parser.add_argument("--root", default=None, help="directory holding Resources/")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the window and play until it is closed."""
    args = _parse_args(argv)
    if args.root is not None:
        os.chdir(args.root)

    pygame.display.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
    except pygame.error as exc:
        print(f"SDL_CreateWindow failed: {exc}")
        pygame.quit()
        return 1
    pygame.display.set_caption(WINDOW_TITLE)

    with Game() as game:
        game.init()
        run(game, screen, args.frames)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())