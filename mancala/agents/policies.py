from __future__ import annotations

from copy import deepcopy
from typing import List, Optional

import numpy as np

from mancala.core import Game, legal_pockets, play_move
from mancala.search import Minimax, MinimaxConfig
from mancala.solver import SolverConfig, recommend_sequence


class Policy:
    """Policy interface choosing a full move chain for the side to move."""

    def choose(self, game: Game) -> List[int]:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return an independent copy of this policy."""
        return self


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, game: Game) -> List[int]:
        current = game.copy()
        mover = current.player_turn
        sequence: List[int] = []
        while not current.is_over and current.player_turn == mover:
            pockets = legal_pockets(current)
            if not pockets:
                break
            index = int(self.rng.choice(pockets))
            play_move(current, (index, mover), in_place=True)
            sequence.append(index)
        return sequence

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


class SequencePolicy(Policy):
    """Best single-turn chain from the sequence tree."""

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = deepcopy(config) if config else SolverConfig()

    def choose(self, game: Game) -> List[int]:
        return recommend_sequence(game, self.config)


class MinimaxPolicy(Policy):
    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self.config = deepcopy(config) if config else MinimaxConfig()
        self.search = Minimax(self.config)

    def choose(self, game: Game) -> List[int]:
        return self.search.run(game).sequence

    def spawn(self, seed: Optional[int] = None) -> "MinimaxPolicy":
        return MinimaxPolicy(self.config)
