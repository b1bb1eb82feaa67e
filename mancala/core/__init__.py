"""Core game logic for the relay-sowing Mancala solver."""

from .state import (
    IN_PROGRESS,
    NUM_PITS,
    POCKETS_PER_SIDE,
    STORE_INDEX,
    Board,
    EndReason,
    Game,
    GameStatus,
    InvalidPocketError,
    InvalidPocketReason,
    Move,
    PocketLocation,
    Side,
    Winner,
)
from .rules import (
    STARTING_STONES,
    TOTAL_STONES,
    default_pockets,
    evaluate_status,
    initialize_game,
    legal_pockets,
    play_move,
    possible_moves,
    replay_sequence,
)
from .render import format_game

__all__ = [
    "Board",
    "EndReason",
    "Game",
    "GameStatus",
    "IN_PROGRESS",
    "InvalidPocketError",
    "InvalidPocketReason",
    "Move",
    "NUM_PITS",
    "POCKETS_PER_SIDE",
    "PocketLocation",
    "STARTING_STONES",
    "STORE_INDEX",
    "Side",
    "TOTAL_STONES",
    "Winner",
    "default_pockets",
    "evaluate_status",
    "format_game",
    "initialize_game",
    "legal_pockets",
    "play_move",
    "possible_moves",
    "replay_sequence",
]
