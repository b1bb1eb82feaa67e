from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from mancala.core import Game, Side
from mancala.solver import EvalMethod, SequenceTreeIndex, build_tree, evaluate

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    depth: int = 2
    eval_method: EvalMethod = EvalMethod.BY_DIFFERENCE


@dataclass
class MinimaxResult:
    value: float
    sequence: List[int] = field(default_factory=list)
    nodes_expanded: int = 0


class Minimax:
    """Plain minimax where one ply is a whole turn.

    The children of a position are the chain ends of its sequence tree, so a
    ply already covers every free-turn continuation of the side to move. Player
    maximizes the evaluation and Opponent minimizes it.
    """

    def __init__(self, config: Optional[MinimaxConfig] = None) -> None:
        self.config = config or MinimaxConfig()
        self._nodes_expanded = 0

    def run(self, game: Game) -> MinimaxResult:
        self._nodes_expanded = 0
        value, sequence = self._search(game, self.config.depth)
        logger.debug(
            "Minimax depth=%d value=%.1f sequence=%s nodes=%d",
            self.config.depth,
            value,
            sequence,
            self._nodes_expanded,
        )
        return MinimaxResult(value=value, sequence=sequence, nodes_expanded=self._nodes_expanded)

    # ------------------------------------------------------------------
    def _search(self, game: Game, depth: int) -> Tuple[float, List[int]]:
        if depth <= 0 or game.is_over:
            return evaluate(game, self.config.eval_method), []

        tree = build_tree(game)
        self._nodes_expanded += len(tree)
        if not tree.leaf_nodes:
            return evaluate(game, self.config.eval_method), []

        maximize = game.player_turn == Side.PLAYER
        best_value = float("-inf") if maximize else float("inf")
        best_index: Optional[SequenceTreeIndex] = None
        for index in tree.leaf_nodes:
            value, _ = self._search(tree.node_game(index), depth - 1)
            if (value > best_value) if maximize else (value < best_value):
                best_value = value
                best_index = index

        if best_index is None:
            raise RuntimeError("Failed to select a chain end.")
        return best_value, tree.get_move_sequence(best_index)
