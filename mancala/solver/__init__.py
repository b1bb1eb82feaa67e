"""Turn-level move chain enumeration and selection."""

from .evaluators import EvalMethod, EvaluationFn, eval_by_difference, evaluate
from .sequence_tree import (
    ROOT_INDEX,
    MoveNode,
    RootNode,
    SequenceNode,
    SequenceTree,
    SequenceTreeError,
    SequenceTreeIndex,
)
from .recommend import SolverConfig, build_tree, recommend_sequence

__all__ = [
    "EvalMethod",
    "EvaluationFn",
    "MoveNode",
    "ROOT_INDEX",
    "RootNode",
    "SequenceNode",
    "SequenceTree",
    "SequenceTreeError",
    "SequenceTreeIndex",
    "SolverConfig",
    "build_tree",
    "eval_by_difference",
    "evaluate",
    "recommend_sequence",
]
