"""
Pygame renderer for Reversi.
Draws a CellGrid: stones, candidate markers, the highlighted move,
the status line and the help overlay.
"""

import pygame
from typing import Optional

from ..game.position import Position
from .display import CellGrid, STONE_CHARS
from ..game.board import BLACK, WHITE

# Window settings
CELL_SIZE = 64
BOARD_MARGIN = 40
STATUS_HEIGHT = 48
INFO_HEIGHT = 28
STONE_RADIUS = CELL_SIZE // 2 - 6

# Colors
COLOR_BG = (40, 44, 52)
COLOR_BOARD = (34, 120, 60)
COLOR_LINE = (20, 60, 30)
COLOR_BLACK_STONE = (20, 20, 20)
COLOR_WHITE_STONE = (240, 240, 240)
COLOR_TEXT = (220, 220, 220)
COLOR_HIGHLIGHT = (255, 80, 80)
COLOR_HIGHLIGHT_REVERSE = (255, 200, 100)
COLOR_CANDIDATE = (120, 200, 120)

HELP_TEXT = [
    "Simple game of REVERSI",
    "",
    "The status line shows the White and Black",
    "stone counts and the value of the best move.",
    "",
    "Valid moves are marked by their value,",
    "'1'..'9' or '+', the highlighted one is",
    "ringed - the highest value is preselected.",
    "",
    "H      help",
    "SPACE  select next move",
    "ENTER  play the selected move",
    "Click  select a marked move",
    "U      undo a move",
    "C      stop the computer's search",
    "N      new game",
    "Q/ESC  quit",
]


class Renderer:
    """Renders a CellGrid with pygame. Attach it to the grid to get redraws."""

    def __init__(self, grid_size: int):
        pygame.init()
        pygame.display.set_caption("Reversi")

        self.grid_size = grid_size
        self.board_pixels = grid_size * CELL_SIZE
        width = self.board_pixels + 2 * BOARD_MARGIN
        height = self.board_pixels + 2 * BOARD_MARGIN + STATUS_HEIGHT + INFO_HEIGHT
        self.screen = pygame.display.set_mode((max(width, 520), height))
        self.clock = pygame.time.Clock()

        # Fonts
        self.font_medium = pygame.font.Font(None, 32)
        self.font_small = pygame.font.Font(None, 24)

    def board_to_screen(self, pos: Position) -> tuple:
        """Center of a cell in screen coordinates. y grows upwards."""
        x = BOARD_MARGIN + pos.x * CELL_SIZE + CELL_SIZE // 2
        y = STATUS_HEIGHT + BOARD_MARGIN + (self.grid_size - 1 - pos.y) * CELL_SIZE + CELL_SIZE // 2
        return (x, y)

    def screen_to_board(self, x: int, y: int) -> Optional[Position]:
        """Convert screen coordinates to a board position."""
        bx = (x - BOARD_MARGIN) // CELL_SIZE
        row = (y - STATUS_HEIGHT - BOARD_MARGIN) // CELL_SIZE
        by = self.grid_size - 1 - row
        if 0 <= bx < self.grid_size and 0 <= by < self.grid_size:
            return Position(bx, by)
        return None

    def draw(self, grid: CellGrid):
        """Render the complete grid."""
        self.screen.fill(COLOR_BG)

        self._render_status(grid.status)
        if grid.info:
            self._render_info(grid.info)
        self._render_board(grid)

        if grid.help_lines:
            self._render_help_overlay(grid.help_lines)

        pygame.display.flip()

    def _render_status(self, status: str):
        text = self.font_medium.render(status, True, COLOR_TEXT)
        self.screen.blit(text, (BOARD_MARGIN, (STATUS_HEIGHT - text.get_height()) // 2))

    def _render_info(self, info: str):
        """Render the info line below the board and its coordinate labels."""
        height = self.screen.get_height()
        text = self.font_small.render(info, True, COLOR_CANDIDATE)
        y = height - INFO_HEIGHT + (INFO_HEIGHT - text.get_height()) // 2
        self.screen.blit(text, (BOARD_MARGIN, y))

    def _render_board(self, grid: CellGrid):
        """Render the board, stones and markers."""
        top = STATUS_HEIGHT + BOARD_MARGIN
        board_rect = pygame.Rect(BOARD_MARGIN, top, self.board_pixels, self.board_pixels)
        pygame.draw.rect(self.screen, COLOR_BOARD, board_rect)

        # Grid lines
        for i in range(self.grid_size + 1):
            x = BOARD_MARGIN + i * CELL_SIZE
            pygame.draw.line(self.screen, COLOR_LINE, (x, top), (x, top + self.board_pixels), 2)
            y = top + i * CELL_SIZE
            pygame.draw.line(self.screen, COLOR_LINE,
                             (BOARD_MARGIN, y), (BOARD_MARGIN + self.board_pixels, y), 2)

        # Coordinate labels
        for i in range(self.grid_size):
            x, _ = self.board_to_screen(Position(i, 0))
            text = self.font_small.render(str(i), True, COLOR_TEXT)
            self.screen.blit(text, (x - text.get_width() // 2, top + self.board_pixels + 8))

            _, y = self.board_to_screen(Position(0, i))
            text = self.font_small.render(str(i), True, COLOR_TEXT)
            self.screen.blit(text, (BOARD_MARGIN - 20, y - text.get_height() // 2))

        # Stones
        for pos, char in grid.chars.cells():
            if char == STONE_CHARS[BLACK]:
                self._render_stone(pos, COLOR_BLACK_STONE)
            elif char == STONE_CHARS[WHITE]:
                self._render_stone(pos, COLOR_WHITE_STONE)

        # Candidate markers with their capture values
        for pos, label in grid.labels.items():
            x, y = self.board_to_screen(pos)
            pygame.draw.circle(self.screen, COLOR_CANDIDATE, (x, y), 12, 2)
            text = self.font_small.render(label, True, COLOR_TEXT)
            self.screen.blit(text, (x - text.get_width() // 2, y - text.get_height() // 2))

        # Highlighted move
        if grid.highlight is not None:
            x, y = self.board_to_screen(grid.highlight)
            color = COLOR_HIGHLIGHT_REVERSE if grid.reverse else COLOR_HIGHLIGHT
            pygame.draw.circle(self.screen, color, (x, y), STONE_RADIUS, 3)

    def _render_stone(self, pos: Position, color: tuple):
        """Render a single stone."""
        x, y = self.board_to_screen(pos)

        # Shadow
        pygame.draw.circle(self.screen, (15, 40, 20), (x + 2, y + 2), STONE_RADIUS)
        pygame.draw.circle(self.screen, color, (x, y), STONE_RADIUS)

    def _render_help_overlay(self, lines: list):
        """Render the help text over the board."""
        width, height = self.screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 210))
        self.screen.blit(overlay, (0, 0))

        y = 30
        for line in lines:
            text = self.font_small.render(line, True, COLOR_TEXT)
            self.screen.blit(text, (30, y))
            y += 24

        hint = self.font_small.render("Press H or ENTER to close", True, (120, 120, 120))
        self.screen.blit(hint, (30, height - 40))

    def tick(self, fps: int = 30):
        """Control frame rate."""
        self.clock.tick(fps)

    def quit(self):
        """Clean up pygame."""
        pygame.quit()
