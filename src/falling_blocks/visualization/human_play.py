from __future__ import annotations

import argparse
from typing import Dict, Optional, Sequence

import pygame

from falling_blocks.game import Button, GameConfig, InputSnapshot, new_game, update
from .renderer import Renderer


KEY_TO_BUTTON: Dict[int, Button] = {
    pygame.K_LEFT: Button.LEFT,
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_UP: Button.UP,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_SPACE: Button.A,
}


def read_buttons(keys: Sequence[bool]) -> list[Button]:
    return [button for key, button in KEY_TO_BUTTON.items() if keys[key]]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=30)
    p.add_argument("--fps", type=int, default=60)
    return p


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = new_game(GameConfig(random_seed=args.seed))
        font = pygame.font.SysFont(None, 28)
        renderer = Renderer(cell_size=args.cell_size, font=font)

        screen = pygame.display.set_mode(renderer.window_size(game.view()))
        pygame.display.set_caption("Falling Blocks")

        snapshot = InputSnapshot()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            keys = pygame.key.get_pressed()
            if keys[pygame.K_ESCAPE]:
                running = False

            snapshot = InputSnapshot.from_held(read_buttons(keys), snapshot)
            update(game, snapshot, pygame.time.get_ticks() / 1000.0)

            renderer.draw(screen, game.view())
            pygame.display.flip()
            clock.tick(args.fps)
        print(f"Final score: {game.score}  lines: {game.line_count}  level: {game.level}")
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
