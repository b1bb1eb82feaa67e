from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from mancala.core import Game, Move, Side, possible_moves

from .evaluators import EvalMethod, evaluate

logger = logging.getLogger(__name__)

SequenceTreeIndex = int
ROOT_INDEX: SequenceTreeIndex = 0


class SequenceTreeError(RuntimeError):
    pass


@dataclass(frozen=True)
class RootNode:
    game: Game


@dataclass(frozen=True)
class MoveNode:
    move: Move
    parent: SequenceTreeIndex


NodeKind = Union[RootNode, MoveNode]


@dataclass
class SequenceNode:
    kind: NodeKind
    depth: int = 0
    # ancestor indices from the root, excluding this node
    path: Tuple[SequenceTreeIndex, ...] = ()
    children: List[SequenceTreeIndex] = field(default_factory=list)

    @property
    def game(self) -> Game:
        if isinstance(self.kind, RootNode):
            return self.kind.game
        return self.kind.move.game


class SequenceTree:
    """Every chain of moves one side can make within a single turn.

    Nodes live in a flat list and refer to each other by index only. Nodes are
    appended and never removed or reordered, so the indices stored in paths,
    parent links and the leaf/game-over lists stay valid while the tree grows.
    """

    def __init__(self, game: Game) -> None:
        self.nodes: List[SequenceNode] = [SequenceNode(RootNode(game.copy()))]
        self.leaf_nodes: List[SequenceTreeIndex] = []
        self.game_over_nodes: List[SequenceTreeIndex] = []

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root_game(self) -> Game:
        return self.nodes[ROOT_INDEX].game.copy()

    def node_game(self, index: SequenceTreeIndex) -> Game:
        """Copy of the game stored at ``index``; the stored snapshot is never handed out."""
        return self.nodes[index].game.copy()

    def move_node(self, index: SequenceTreeIndex) -> MoveNode:
        kind = self.nodes[index].kind
        if not isinstance(kind, MoveNode):
            raise SequenceTreeError(f"Node {index} is not a move node.")
        return kind

    def max_depth(self) -> int:
        return max(node.depth for node in self.nodes)

    # ------------------------------------------------------------------
    def generate_tree(self, player_turn: Side, parent_index: SequenceTreeIndex = ROOT_INDEX) -> None:
        # Children are pushed in reverse so they are expanded first-to-last,
        # giving the same node numbering as a recursive pre-order expansion.
        pending: List[SequenceTreeIndex] = [parent_index]
        while pending:
            index = pending.pop()
            game = self.nodes[index].game
            if game.is_over or game.player_turn != player_turn:
                continue
            created = self._create_children(possible_moves(game), index)
            pending.extend(reversed(created))
        logger.debug(
            "Generated sequence tree: %d nodes, %d leaves, %d game over",
            len(self.nodes),
            len(self.leaf_nodes),
            len(self.game_over_nodes),
        )

    def _create_children(self, moves: List[Move], parent_index: SequenceTreeIndex) -> List[SequenceTreeIndex]:
        parent = self.nodes[parent_index]
        created: List[SequenceTreeIndex] = []
        for move in moves:
            child = SequenceNode(
                MoveNode(move, parent_index),
                depth=parent.depth + 1,
                path=parent.path + (parent_index,),
            )
            self.nodes.append(child)
            child_index = len(self.nodes) - 1
            parent.children.append(child_index)
            created.append(child_index)
            game_over = move.game.is_over
            if not move.free_turn or game_over:
                self.leaf_nodes.append(child_index)
            if game_over:
                self.game_over_nodes.append(child_index)
        return created

    # ------------------------------------------------------------------
    def get_move_sequence(self, node_index: SequenceTreeIndex) -> List[int]:
        sequence = [
            kind.move.pocket
            for kind in (self.nodes[i].kind for i in self.nodes[node_index].path)
            if isinstance(kind, MoveNode)
        ]
        sequence.append(self.move_node(node_index).move.pocket)
        return sequence

    def best_leaf(
        self,
        eval_method: EvalMethod = EvalMethod.BY_DIFFERENCE,
        prefer_win: bool = False,
        maximize: bool = True,
    ) -> Optional[SequenceTreeIndex]:
        candidates = self.leaf_nodes
        if prefer_win and self.game_over_nodes:
            candidates = self.game_over_nodes

        best_index: Optional[SequenceTreeIndex] = None
        best_value = float("-inf") if maximize else float("inf")
        for index in candidates:
            value = evaluate(self.move_node(index).move.game, eval_method)
            if (value > best_value) if maximize else (value < best_value):
                best_value = value
                best_index = index
        return best_index

    def get_best_sequence(
        self,
        eval_method: EvalMethod = EvalMethod.BY_DIFFERENCE,
        prefer_win: bool = False,
        maximize: bool = True,
    ) -> List[int]:
        """Pocket sequence of the best-scoring chain end, or ``[]`` if none."""
        index = self.best_leaf(eval_method, prefer_win, maximize)
        if index is None:
            return []
        return self.get_move_sequence(index)
