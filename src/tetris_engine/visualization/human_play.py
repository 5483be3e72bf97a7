from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from tetris_engine.game import Command, CommandQueue, GameConfig, GravityClock, TetrisGame
from .renderer import Renderer


logger = logging.getLogger(__name__)


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_UP: Command.ROTATE,
    pygame.K_p: Command.PAUSE,
    pygame.K_r: Command.RESET,
}


def run(config: Optional[GameConfig] = None) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = TetrisGame(config)
        game.ensure_piece()
        commands = CommandQueue(game)
        gravity = GravityClock(game.config.tick_interval_ms, pygame.time.get_ticks())
        renderer = Renderer(cell_size=28)

        h, w = game.grid.grid.shape
        screen = pygame.display.set_mode(renderer.window_size(h, w))
        pygame.display.set_caption("Tetris")

        running = True
        while running:
            # Input events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            commands.put(command)

            # Gravity; no ticks pile up while paused
            now = pygame.time.get_ticks()
            if game.is_paused() or game.is_game_over():
                gravity.restart(now)
            else:
                commands.put_ticks(gravity.update(now))

            for command in commands.process_pending():
                if command == Command.RESET:
                    gravity.restart(now)
                    logger.info("Game restarted")

            renderer.draw(screen, game.get_renderable_board(), game.get_score(), game.status)
            clock.tick(60)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tick_ms", type=int, default=1000)
    p.add_argument("--log_level", type=str, default="INFO")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s")
    run(GameConfig(random_seed=args.seed, tick_interval_ms=args.tick_ms))


if __name__ == "__main__":  # pragma: no cover
    main()
