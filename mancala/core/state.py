from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

PocketArray = NDArray[np.int16]

NUM_PITS = 6
STORE_INDEX = 6
POCKETS_PER_SIDE = 7


class Side(IntEnum):
    PLAYER = 0
    OPPONENT = 1

    def opposite(self) -> "Side":
        return Side.OPPONENT if self == Side.PLAYER else Side.PLAYER

    def __str__(self) -> str:
        return "Player" if self == Side.PLAYER else "Opponent"


# (pocket index, side); index 6 is the side's store
PocketLocation = Tuple[int, Side]


class Winner(Enum):
    PLAYER = "player"
    OPPONENT = "opponent"
    TIE = "tie"

    @staticmethod
    def from_side(side: Side) -> "Winner":
        return Winner.PLAYER if side == Side.PLAYER else Winner.OPPONENT


class EndReason(Enum):
    WIN = "win"
    TECHNICAL_WIN = "technical_win"


@dataclass(frozen=True)
class GameStatus:
    reason: Optional[EndReason] = None
    winner: Optional[Winner] = None

    @staticmethod
    def win(winner: Winner) -> "GameStatus":
        return GameStatus(EndReason.WIN, winner)

    @staticmethod
    def technical_win(side: Side) -> "GameStatus":
        return GameStatus(EndReason.TECHNICAL_WIN, Winner.from_side(side))

    @property
    def in_progress(self) -> bool:
        return self.reason is None

    @property
    def is_over(self) -> bool:
        return self.reason is not None

    def __str__(self) -> str:
        if self.reason is None:
            return "InProgress"
        if self.reason == EndReason.WIN:
            return f"Over(Win({self.winner.name.title()}))"
        return f"Over(TechnicalWin({self.winner.name.title()}))"


IN_PROGRESS = GameStatus()


class InvalidPocketReason(Enum):
    EMPTY_POCKET = "empty_pocket"
    WRONG_PLAYER = "wrong_player"
    STORE_POCKET = "store_pocket"
    OUT_OF_BOUNDS_POCKET = "out_of_bounds_pocket"


class InvalidPocketError(ValueError):
    def __init__(self, reason: InvalidPocketReason, pocket: PocketLocation) -> None:
        super().__init__(f"Cannot play pocket {pocket[0]} on {pocket[1]} side: {reason.value}")
        self.reason = reason
        self.pocket = pocket


@dataclass(eq=False)
class Board:
    pockets: PocketArray  # shape (2, 7), dtype=np.int16, row per Side, column 6 = store
    player_turn: Side = Side.PLAYER

    @staticmethod
    def from_pockets(
        player_pockets: Sequence[int],
        opponent_pockets: Sequence[int],
        player_turn: Side = Side.PLAYER,
    ) -> "Board":
        pockets = np.array([list(player_pockets), list(opponent_pockets)], dtype=np.int16)
        if pockets.shape != (2, POCKETS_PER_SIDE):
            raise ValueError(f"Each side needs exactly {POCKETS_PER_SIDE} pockets.")
        if (pockets < 0).any():
            raise ValueError("Pocket counts must be non-negative.")
        return Board(pockets=pockets, player_turn=Side(player_turn))

    def copy(self) -> "Board":
        return Board(pockets=self.pockets.copy(), player_turn=self.player_turn)

    def get_stones(self, pocket: PocketLocation) -> int:
        index, side = pocket
        return int(self.pockets[side, index])

    def store(self, side: Side) -> int:
        return int(self.pockets[side, STORE_INDEX])

    def pits(self, side: Side) -> Tuple[int, ...]:
        return tuple(int(v) for v in self.pockets[side, :NUM_PITS])

    def pit_stones(self) -> int:
        return int(self.pockets[:, :NUM_PITS].sum())

    def total_stones(self) -> int:
        return int(self.pockets.sum())

    def switch_player(self) -> None:
        self.player_turn = self.player_turn.opposite()

    def pop_stones(self, pocket: PocketLocation) -> int:
        index, side = pocket
        stones = int(self.pockets[side, index])
        self.pockets[side, index] = 0
        return stones

    def increment_stones(self, pocket: PocketLocation) -> None:
        index, side = pocket
        self.pockets[side, index] += 1

    def pickup_stones(self, pocket: PocketLocation) -> PocketLocation:
        """Sow the contents of ``pocket`` counter-clockwise, one stone per pocket.

        The store of the side to move receives a stone like any pit. The other
        store is skipped: reaching it wraps to pit 0 of the next side without
        dropping. Returns the location of the last stone placed.
        """
        stones = self.pop_stones(pocket)
        index, side = pocket
        while stones > 0:
            index += 1
            if side == self.player_turn and index == STORE_INDEX:
                self.increment_stones((STORE_INDEX, side))
                stones -= 1
                if stones == 0:
                    break
                index = 0
                side = side.opposite()
            elif index > STORE_INDEX or (side != self.player_turn and index == STORE_INDEX):
                index = 0
                side = side.opposite()
            stones -= 1
            self.increment_stones((index, side))
        return index, Side(side)


@dataclass
class Game:
    board: Board
    status: GameStatus = IN_PROGRESS

    def copy(self) -> "Game":
        return Game(board=self.board.copy(), status=self.status)

    @property
    def player_turn(self) -> Side:
        return self.board.player_turn

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return (
            self.status == other.status
            and self.board.player_turn == other.board.player_turn
            and np.array_equal(self.board.pockets, other.board.pockets)
        )

    def __repr__(self) -> str:
        player = " ".join(str(v) for v in self.board.pockets[Side.PLAYER])
        opponent = " ".join(str(v) for v in self.board.pockets[Side.OPPONENT])
        return (
            f"Game(turn={self.board.player_turn}, status={self.status})\n"
            f"player:   {player}\n"
            f"opponent: {opponent}"
        )


@dataclass(frozen=True)
class Move:
    pocket: int
    score: int  # mover's store after the move
    free_turn: bool
    # shared with the sequence tree; copy before playing on it in place
    game: Game
