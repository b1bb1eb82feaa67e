"""Relay-sowing Mancala engine and move-chain solver."""

from . import agents, core, evaluation, search, solver
from .agents import MinimaxPolicy, Policy, RandomPolicy, SequencePolicy
from .core import (
    Board,
    Game,
    GameStatus,
    InvalidPocketError,
    InvalidPocketReason,
    Move,
    Side,
    Winner,
    format_game,
    initialize_game,
    play_move,
    possible_moves,
)
from .evaluation import EvaluationResult, evaluate_policies, play_game
from .search import Minimax, MinimaxConfig, MinimaxResult
from .solver import EvalMethod, SequenceTree, SolverConfig, evaluate, recommend_sequence

__all__ = [
    "agents",
    "core",
    "evaluation",
    "search",
    "solver",
    "Board",
    "Game",
    "GameStatus",
    "InvalidPocketError",
    "InvalidPocketReason",
    "Move",
    "Side",
    "Winner",
    "format_game",
    "initialize_game",
    "play_move",
    "possible_moves",
    "SequenceTree",
    "EvalMethod",
    "evaluate",
    "SolverConfig",
    "recommend_sequence",
    "Minimax",
    "MinimaxConfig",
    "MinimaxResult",
    "Policy",
    "RandomPolicy",
    "SequencePolicy",
    "MinimaxPolicy",
    "EvaluationResult",
    "evaluate_policies",
    "play_game",
]
