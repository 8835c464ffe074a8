from __future__ import annotations

from typing import FrozenSet, List, Optional, Tuple

import numpy as np
import pygame

from falling_blocks.game import GameStatus, Piece, TetrisGame
from falling_blocks.game.colors import GHOST_COLOR, color_for_value


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_cells: int = 6) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_cells = panel_cells
        self._font: Optional[pygame.font.Font] = None
        # Clickable areas from the last frame; all of them start, pause or resume
        self.click_targets: List[pygame.Rect] = []

    def window_size(self, rows: int, cols: int) -> Tuple[int, int]:
        width = cols * self.cell_size + self.panel_cells * self.cell_size + self.margin * 3
        height = rows * self.cell_size + self.margin * 2
        return width, height

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 26)
        return self._font

    def _grid_surface(self, board: np.ndarray, ghost: FrozenSet[Tuple[int, int]]) -> pygame.Surface:
        h, w = board.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                v = int(board[y, x])
                # Ghost only shows through empty cells
                color = GHOST_COLOR if v == 0 and (y, x) in ghost else color_for_value(v)
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def _draw_preview(self, screen: pygame.Surface, piece: Piece, x0: int, y0: int) -> None:
        shape = piece.shape
        color = color_for_value(int(piece.kind))
        for py in range(shape.shape[0]):
            for px in range(shape.shape[1]):
                if shape[py, px]:
                    rect = pygame.Rect(
                        x0 + px * self.cell_size,
                        y0 + py * self.cell_size,
                        self.cell_size - 1,
                        self.cell_size - 1,
                    )
                    pygame.draw.rect(screen, color, rect)

    def _banner(self, status: GameStatus) -> Optional[str]:
        if status is GameStatus.NOT_STARTED:
            return "Press Enter to start"
        if status is GameStatus.PAUSED:
            return "Paused - Enter to resume"
        if status is GameStatus.GAME_OVER:
            return "Game Over - Enter to restart"
        return None

    def _button_label(self, status: GameStatus) -> str:
        return {
            GameStatus.NOT_STARTED: "Start",
            GameStatus.RUNNING: "Pause",
            GameStatus.PAUSED: "Resume",
            GameStatus.GAME_OVER: "Play Again",
        }[status]

    def draw(self, screen: pygame.Surface, game: TetrisGame, best_score: int = 0, flash: bool = False) -> None:
        board = game.overlay_board()
        grid_surf = self._grid_surface(board, game.ghost_cells())
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))

        font = self._font_obj()
        panel_x = self.margin * 2 + board.shape[1] * self.cell_size
        y = self.margin
        for line in (f"Score: {game.score}", f"Lines: {game.lines}", f"Best: {best_score}", "Next:"):
            screen.blit(font.render(line, True, (230, 230, 230)), (panel_x, y))
            y += 28
        self._draw_preview(screen, game.next_piece, panel_x, y + 4)

        button = pygame.Rect(panel_x, y + 5 * self.cell_size, 4 * self.cell_size, 36)
        pygame.draw.rect(screen, (70, 70, 80), button, border_radius=8)
        label = font.render(self._button_label(game.status), True, (255, 255, 255))
        screen.blit(label, label.get_rect(center=button.center))
        self.click_targets = [button]

        banner = self._banner(game.status)
        if banner is not None:
            text = font.render(banner, True, (255, 255, 255))
            rect = text.get_rect(center=(self.margin + grid_surf.get_width() // 2, screen.get_height() // 2))
            screen.blit(text, rect)
            self.click_targets.append(rect)

        if flash:
            overlay = pygame.Surface(screen.get_size())
            overlay.fill((255, 255, 255))
            overlay.set_alpha(200)
            screen.blit(overlay, (0, 0))
        pygame.display.flip()
