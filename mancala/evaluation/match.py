from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from mancala.agents import Policy
from mancala.core import Game, Side, Winner, initialize_game, play_move

logger = logging.getLogger(__name__)


@dataclass
class MatchRecord:
    game: Game
    turns: int
    sequences: List[List[int]]

    @property
    def winner(self) -> Optional[Winner]:
        return self.game.status.winner


@dataclass
class EvaluationResult:
    games_played: int
    player_wins: int
    opponent_wins: int
    ties: int
    unfinished: int
    average_turns: float

    def winrate_player(self) -> float:
        return self.player_wins / max(1, self.games_played)

    def winrate_opponent(self) -> float:
        return self.opponent_wins / max(1, self.games_played)


def play_game(
    policy_player: Policy,
    policy_opponent: Policy,
    *,
    game: Optional[Game] = None,
    max_turns: int = 200,
) -> MatchRecord:
    current = game.copy() if game is not None else initialize_game()
    sequences: List[List[int]] = []
    turns = 0
    while not current.is_over and turns < max_turns:
        mover = current.player_turn
        policy = policy_player if mover == Side.PLAYER else policy_opponent
        sequence = policy.choose(current.copy())
        if not sequence:
            raise RuntimeError(f"Policy produced no move for {mover} on an unfinished game.")
        for index in sequence:
            play_move(current, (index, mover), in_place=True)
        sequences.append(sequence)
        turns += 1
    return MatchRecord(game=current, turns=turns, sequences=sequences)


def evaluate_policies(
    policy_player: Policy,
    policy_opponent: Policy,
    *,
    episodes: int,
    game_factory: Optional[Callable[[], Game]] = None,
    max_turns: int = 200,
    seed: Optional[int] = None,
) -> EvaluationResult:
    """Play ``episodes`` games; each policy is re-spawned per game from seeds drawn off ``seed``."""
    game_factory = game_factory or initialize_game
    rng = np.random.default_rng(seed)

    player_wins = 0
    opponent_wins = 0
    ties = 0
    unfinished = 0
    total_turns = 0

    for episode in range(episodes):
        record = play_game(
            policy_player.spawn(int(rng.integers(2**32))),
            policy_opponent.spawn(int(rng.integers(2**32))),
            game=game_factory(),
            max_turns=max_turns,
        )
        total_turns += record.turns
        if record.winner == Winner.PLAYER:
            player_wins += 1
        elif record.winner == Winner.OPPONENT:
            opponent_wins += 1
        elif record.winner == Winner.TIE:
            ties += 1
        else:
            unfinished += 1
        logger.debug("Episode %d finished after %d turns: %s", episode, record.turns, record.game.status)

    return EvaluationResult(
        games_played=episodes,
        player_wins=player_wins,
        opponent_wins=opponent_wins,
        ties=ties,
        unfinished=unfinished,
        average_turns=total_turns / max(1, episodes),
    )
