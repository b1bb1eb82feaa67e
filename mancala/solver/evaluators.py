from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from mancala.core import Game, Side


class EvalMethod(Enum):
    BY_DIFFERENCE = "by_difference"


EvaluationFn = Callable[[Game], float]


def eval_by_difference(game: Game) -> float:
    """Player store minus Opponent store; positive favours Player."""
    return float(game.board.store(Side.PLAYER) - game.board.store(Side.OPPONENT))


_EVALUATORS: Dict[EvalMethod, EvaluationFn] = {
    EvalMethod.BY_DIFFERENCE: eval_by_difference,
}


def evaluate(game: Game, method: EvalMethod = EvalMethod.BY_DIFFERENCE) -> float:
    try:
        fn = _EVALUATORS[method]
    except KeyError:
        raise ValueError(f"No evaluator registered for {method!r}.") from None
    return fn(game)
