from .display import CellGrid, DisplaySurface, Renderable, stone_to_char

__all__ = ['CellGrid', 'DisplaySurface', 'Renderable', 'stone_to_char']
