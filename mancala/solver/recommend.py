from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from mancala.core import Game, Side

from .evaluators import EvalMethod
from .sequence_tree import SequenceTree


@dataclass
class SolverConfig:
    eval_method: EvalMethod = EvalMethod.BY_DIFFERENCE
    prefer_win: bool = True
    # None: maximize for Player, minimize for Opponent
    maximize: Optional[bool] = None

    def maximize_for(self, side: Side) -> bool:
        if self.maximize is not None:
            return self.maximize
        return side == Side.PLAYER


def build_tree(game: Game, player_turn: Optional[Side] = None) -> SequenceTree:
    tree = SequenceTree(game)
    tree.generate_tree(game.player_turn if player_turn is None else player_turn)
    return tree


def recommend_sequence(game: Game, config: Optional[SolverConfig] = None) -> List[int]:
    config = config or SolverConfig()
    tree = build_tree(game)
    return tree.get_best_sequence(
        config.eval_method,
        prefer_win=config.prefer_win,
        maximize=config.maximize_for(game.player_turn),
    )
