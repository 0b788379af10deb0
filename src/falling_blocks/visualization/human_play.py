from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame

from falling_blocks.game import Action, GameConfig, GameEngine
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.DOWN,
}

RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)


def run(config: Optional[GameConfig] = None, cell_size: int = 28) -> None:
    config = config or GameConfig()
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = GameEngine.from_config(config)
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.height, game.width))
        pygame.display.set_caption("Falling Blocks")

        # The gravity timer stops while the game-over overlay is up.
        gravity_running = True

        @game.events.on_game_over
        def _stop_gravity(final_score: int) -> None:
            nonlocal gravity_running
            gravity_running = False
            logger.info("Final score: %d", final_score)

        last_fall = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif game.game_over:
                        if event.key in RESTART_KEYS:
                            game.reset()
                            gravity_running = True
                            last_fall = pygame.time.get_ticks()
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.step(action)

            now = pygame.time.get_ticks()
            if gravity_running and now - last_fall >= config.gravity_ms:
                game.tick_down()
                last_fall = now

            renderer.draw(screen, game.board, game.next_piece, game.score, game.game_over)
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
