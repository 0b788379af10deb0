from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from falling_blocks.game import PieceDescriptor, geometry
from .palette import color_for_value


# Width of the side panel in cells (next-piece preview and score)
PANEL_CELLS = 6


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, height: int, width: int) -> tuple[int, int]:
        return (
            width * self.cell_size + PANEL_CELLS * self.cell_size + self.margin * 3,
            height * self.cell_size + self.margin * 2,
        )

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        return self._font

    def _cell_rect(self, x0: int, y0: int, col: int, row: int) -> pygame.Rect:
        return pygame.Rect(
            x0 + col * self.cell_size,
            y0 + row * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                pygame.draw.rect(surf, color_for_value(int(state[y, x])), self._cell_rect(0, 0, x, y))
        return surf

    def _draw_next(self, screen: pygame.Surface, next_piece: PieceDescriptor, x0: int, y0: int) -> None:
        screen.blit(self.font.render("Next", True, (230, 230, 230)), (x0, y0))
        geo = geometry(next_piece.kind, next_piece.orientation)
        top = y0 + 30
        for row, col in geo.cells():
            rect = self._cell_rect(x0, top, col - geo.left, row - geo.top)
            pygame.draw.rect(screen, color_for_value(int(next_piece.kind)), rect)

    def draw(
        self,
        screen: pygame.Surface,
        state: np.ndarray,
        next_piece: PieceDescriptor,
        score: int,
        game_over: bool = False,
    ) -> None:
        h, w = state.shape
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin))

        panel_x = self.margin * 2 + w * self.cell_size
        self._draw_next(screen, next_piece, panel_x, self.margin)
        score_y = self.margin + 5 * self.cell_size
        screen.blit(self.font.render(f"Score: {score}", True, (230, 230, 230)), (panel_x, score_y))

        if game_over:
            lines = [f"Game over. Your score is: {score}", "Enter/R: play again, ESC: quit"]
            for i, txt in enumerate(lines):
                img = self.font.render(txt, True, (255, 100, 100))
                rect = img.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2 + i * 30))
                screen.blit(img, rect)
        pygame.display.flip()
