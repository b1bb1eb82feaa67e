from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np

from .state import (
    IN_PROGRESS,
    NUM_PITS,
    POCKETS_PER_SIDE,
    STORE_INDEX,
    Board,
    Game,
    GameStatus,
    InvalidPocketError,
    InvalidPocketReason,
    Move,
    PocketLocation,
    Side,
    Winner,
)

STARTING_STONES = 4
TOTAL_STONES = 2 * NUM_PITS * STARTING_STONES


def default_pockets() -> List[int]:
    return [STARTING_STONES] * NUM_PITS + [0]


def initialize_game(
    player_pockets: Optional[Sequence[int]] = None,
    opponent_pockets: Optional[Sequence[int]] = None,
    player_turn: Side = Side.PLAYER,
) -> Game:
    board = Board.from_pockets(
        player_pockets if player_pockets is not None else default_pockets(),
        opponent_pockets if opponent_pockets is not None else default_pockets(),
        player_turn,
    )
    return Game(board=board, status=evaluate_status(board))


def legal_pockets(game: Game) -> List[int]:
    side = game.player_turn
    return [index for index in range(NUM_PITS) if game.board.get_stones((index, side)) > 0]


def play_move(game: Game, pocket: PocketLocation, *, in_place: bool = False) -> Game:
    """Play ``pocket`` and resolve the whole sowing chain.

    The last stone of each sow decides what happens next: landing in the
    mover's store ends the chain and the mover keeps the turn, landing in an
    empty pocket ends the chain and passes the turn, and landing in an occupied
    pocket (on either side) picks that pocket up and sows it again.

    Raises ``InvalidPocketError`` with the first failing reason, checked in the
    order wrong player, empty pocket, store pocket, out of bounds.
    """
    index, side = pocket
    in_bounds = 0 <= index < POCKETS_PER_SIDE
    if side != game.board.player_turn:
        raise InvalidPocketError(InvalidPocketReason.WRONG_PLAYER, pocket)
    if in_bounds and game.board.get_stones(pocket) == 0:
        raise InvalidPocketError(InvalidPocketReason.EMPTY_POCKET, pocket)
    if index == STORE_INDEX:
        raise InvalidPocketError(InvalidPocketReason.STORE_POCKET, pocket)
    if not in_bounds:
        raise InvalidPocketError(InvalidPocketReason.OUT_OF_BOUNDS_POCKET, pocket)

    target = game if in_place else game.copy()
    board = target.board
    landing = board.pickup_stones((index, Side(side)))
    while True:
        landing_index, landing_side = landing
        if landing_side == board.player_turn and landing_index == STORE_INDEX:
            break
        if board.get_stones(landing) == 1:
            board.switch_player()
            break
        landing = board.pickup_stones(landing)

    target.status = evaluate_status(board)
    return target


def evaluate_status(board: Board) -> GameStatus:
    winner = _check_for_game_end(board)
    if winner is not None:
        return GameStatus.win(winner)
    leader = _check_for_technical_win(board)
    if leader is not None:
        return GameStatus.technical_win(leader)
    return IN_PROGRESS


def possible_moves(game: Game) -> List[Move]:
    mover = game.player_turn
    moves: List[Move] = []
    for index in legal_pockets(game):
        result = play_move(game, (index, mover))
        moves.append(
            Move(
                pocket=index,
                score=result.board.store(mover),
                free_turn=result.player_turn == mover,
                game=result,
            )
        )
    return moves


def replay_sequence(game: Game, pockets: Iterable[int]) -> Game:
    """Play pocket indices in order for whichever side is to move."""
    current = game.copy()
    for index in pockets:
        play_move(current, (index, current.player_turn), in_place=True)
    return current


def _check_for_game_end(board: Board) -> Optional[Winner]:
    pits = board.pockets[:, :NUM_PITS]
    if np.any(pits[Side.PLAYER]) and np.any(pits[Side.OPPONENT]):
        return None
    player_store = board.store(Side.PLAYER)
    opponent_store = board.store(Side.OPPONENT)
    if player_store > opponent_store:
        return Winner.PLAYER
    if player_store < opponent_store:
        return Winner.OPPONENT
    return Winner.TIE


def _check_for_technical_win(board: Board) -> Optional[Side]:
    remaining = board.pit_stones()
    player_store = board.store(Side.PLAYER)
    opponent_store = board.store(Side.OPPONENT)
    if remaining + player_store < opponent_store:
        return Side.OPPONENT
    if remaining + opponent_store < player_store:
        return Side.PLAYER
    return None
