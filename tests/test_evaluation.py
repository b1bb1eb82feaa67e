import numpy as np
import pytest

from mancala.agents import MinimaxPolicy, Policy, RandomPolicy, SequencePolicy
from mancala.core import TOTAL_STONES, Side, initialize_game, replay_sequence
from mancala.evaluation import evaluate_policies, play_game
from mancala.search import MinimaxConfig
from mancala.solver import EvalMethod, eval_by_difference, evaluate


class EmptyPolicy(Policy):
    def choose(self, game):
        return []


def test_eval_by_difference_is_player_positive() -> None:
    game = initialize_game([0] * 6 + [30], [0] * 6 + [18])
    assert eval_by_difference(game) == 12.0
    assert evaluate(game, EvalMethod.BY_DIFFERENCE) == 12.0
    assert evaluate(initialize_game()) == 0.0


def test_random_policy_returns_complete_turn() -> None:
    game = initialize_game()
    policy = RandomPolicy(np.random.default_rng(3))
    sequence = policy.choose(game)

    assert sequence
    result = replay_sequence(game, sequence)
    assert result.is_over or result.player_turn == Side.OPPONENT
    assert game.board.store(Side.PLAYER) == 0


def test_play_game_sequence_vs_random() -> None:
    record = play_game(SequencePolicy(), RandomPolicy(np.random.default_rng(0)), max_turns=200)

    assert record.turns == len(record.sequences)
    assert record.game.board.total_stones() == TOTAL_STONES
    if record.turns < 200:
        assert record.game.is_over
        assert record.winner is not None


def test_play_game_with_minimax_from_small_position() -> None:
    game = initialize_game([0, 0, 0, 0, 2, 3, 0], [0, 0, 0, 0, 0, 1, 0])
    record = play_game(MinimaxPolicy(MinimaxConfig(depth=2)), RandomPolicy(np.random.default_rng(1)), game=game)
    assert record.sequences[0] == [4, 5]
    assert record.game.is_over


def test_play_game_rejects_empty_choice() -> None:
    with pytest.raises(RuntimeError):
        play_game(EmptyPolicy(), RandomPolicy(), max_turns=5)


def test_evaluate_random_vs_random_small() -> None:
    result = evaluate_policies(RandomPolicy(), RandomPolicy(), episodes=3)
    assert result.games_played == 3
    assert result.player_wins + result.opponent_wins + result.ties + result.unfinished == 3
    assert result.average_turns > 0
    assert 0.0 <= result.winrate_player() <= 1.0


class RecordingPolicy(RandomPolicy):
    def __init__(self, seeds) -> None:
        super().__init__()
        self.seeds = seeds

    def spawn(self, seed=None) -> RandomPolicy:
        self.seeds.append(seed)
        return RandomPolicy(np.random.default_rng(seed))


def spawned_seeds(seed):
    seeds = []
    evaluate_policies(RecordingPolicy(seeds), RecordingPolicy(seeds), episodes=4, seed=seed)
    return seeds


def test_evaluation_seed_controls_spawned_policies() -> None:
    assert len(spawned_seeds(5)) == 8
    assert spawned_seeds(5) == spawned_seeds(5)
    assert spawned_seeds(5) != spawned_seeds(6)


def test_evaluation_is_reproducible_for_a_seed() -> None:
    first = evaluate_policies(RandomPolicy(), RandomPolicy(), episodes=6, seed=12345)
    second = evaluate_policies(RandomPolicy(), RandomPolicy(), episodes=6, seed=12345)
    assert first == second
