"""
Keyboard and mouse input for Reversi.
Turns pygame events into game commands.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import pygame

from ..game.position import Position


class InputAction(Enum):
    """Game commands a player can issue."""
    NONE = auto()
    QUIT = auto()
    NEXT_MOVE = auto()       # Highlight the next candidate
    PLAY_MOVE = auto()       # Play the highlighted candidate / confirm
    SELECT_CELL = auto()     # Highlight the candidate under the mouse
    UNDO = auto()
    CANCEL_SEARCH = auto()   # Stop the computer's search
    NEW_GAME = auto()
    TOGGLE_HELP = auto()


@dataclass
class Command:
    """A game command, with the board cell for SELECT_CELL."""
    action: InputAction
    position: Optional[Position] = None


class InputHandler:
    """Maps pygame events to Commands."""

    KEY_MAP = {
        pygame.K_ESCAPE: InputAction.QUIT,
        pygame.K_q: InputAction.QUIT,
        pygame.K_SPACE: InputAction.NEXT_MOVE,
        pygame.K_RETURN: InputAction.PLAY_MOVE,
        pygame.K_KP_ENTER: InputAction.PLAY_MOVE,
        pygame.K_u: InputAction.UNDO,
        pygame.K_c: InputAction.CANCEL_SEARCH,
        pygame.K_n: InputAction.NEW_GAME,
        pygame.K_h: InputAction.TOGGLE_HELP,
    }

    def __init__(self, renderer):
        # Needed to map clicks to cells
        self.renderer = renderer

    def poll(self) -> list[Command]:
        """Drain the pygame queue. Events without a meaning are dropped."""
        commands = (self.translate(event) for event in pygame.event.get())
        return [c for c in commands if c.action != InputAction.NONE]

    def translate(self, event: pygame.event.Event) -> Command:
        if event.type == pygame.QUIT:
            return Command(InputAction.QUIT)
        if event.type == pygame.KEYDOWN:
            return Command(self.KEY_MAP.get(event.key, InputAction.NONE))
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._click(event.pos)
        return Command(InputAction.NONE)

    def _click(self, pixel: tuple) -> Command:
        cell = self.renderer.screen_to_board(*pixel)
        if cell is None:
            return Command(InputAction.NONE)
        return Command(InputAction.SELECT_CELL, position=cell)
