from .engine import SearchEngine, SearchStats, MoveChoice, NO_MOVE

__all__ = ['SearchEngine', 'SearchStats', 'MoveChoice', 'NO_MOVE']
