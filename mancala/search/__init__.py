"""Multi-turn search built on sequence trees."""

from .minimax import Minimax, MinimaxConfig, MinimaxResult

__all__ = ["Minimax", "MinimaxConfig", "MinimaxResult"]
