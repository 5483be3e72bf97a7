from __future__ import annotations

import numpy as np
import pygame

from tetris_engine.game import GameStatus

from .palette import color_for_value


class Renderer:
    def __init__(self, cell_size: int = 28, margin: int = 20, header: int = 40) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.header = header
        self._font: pygame.font.Font | None = None

    def window_size(self, rows: int, cols: int) -> tuple[int, int]:
        return (cols * self.cell_size + self.margin * 2, rows * self.cell_size + self.margin * 2 + self.header)

    def _font_or_default(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 32)
        return self._font

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(state[y, x])), rect)
        return surf

    def _draw_overlay(self, screen: pygame.Surface, grid_rect: pygame.Rect, status: GameStatus, score: int) -> None:
        shade = pygame.Surface(grid_rect.size, pygame.SRCALPHA)
        shade.fill((0, 0, 0, 190))
        screen.blit(shade, grid_rect.topleft)
        font = self._font_or_default()
        if status == GameStatus.GAME_OVER:
            lines = ["Game Over!", f"Score: {score}", "R to play again"]
        else:
            lines = ["Paused", "P to resume"]
        for i, txt in enumerate(lines):
            img = font.render(txt, True, (255, 255, 255))
            rect = img.get_rect(center=(grid_rect.centerx, grid_rect.centery + (i - 1) * 32))
            screen.blit(img, rect)

    def draw(self, screen: pygame.Surface, state: np.ndarray, score: int, status: GameStatus) -> None:
        screen.fill((10, 10, 14))
        font = self._font_or_default()
        screen.blit(font.render(f"Score: {score}", True, (230, 230, 230)), (self.margin, self.margin // 2))
        origin = (self.margin, self.margin + self.header)
        grid_surf = self._grid_surface(state)
        screen.blit(grid_surf, origin)
        if status != GameStatus.RUNNING:
            self._draw_overlay(screen, grid_surf.get_rect(topleft=origin), status, score)
        pygame.display.flip()
