import argparse

import pytest

from mancala.core import InvalidPocketError, Side, format_game, initialize_game, play_move
from mancala.search import MinimaxConfig
from mancala.solver import EvalMethod, SolverConfig

from scripts.play_console import (
    ConsoleSession,
    build_configs,
    load_yaml_config,
    parse_pockets,
    parse_side,
    run_menu,
)


def scripted(inputs):
    it = iter(inputs)
    return lambda prompt="": next(it)


def make_args(**overrides) -> argparse.Namespace:
    values = {"eval_method": None, "prefer_win": None, "depth": None}
    values.update(overrides)
    return argparse.Namespace(**values)


def test_stash_and_load_restore_snapshot() -> None:
    session = ConsoleSession()
    assert not session.load()

    session.play(2)
    session.stash()
    session.play(0)
    assert session.load()
    assert session.game == play_move(initialize_game(), (2, Side.PLAYER))

    # later play does not leak into the stash
    session.play(0)
    assert session.load()
    assert session.game.board.store(Side.PLAYER) == 1


def test_test_move_does_not_commit() -> None:
    session = ConsoleSession()
    result = session.test_move(2)
    assert result.board.store(Side.PLAYER) == 1
    assert session.game == initialize_game()


def test_invalid_play_leaves_game_unchanged() -> None:
    session = ConsoleSession()
    with pytest.raises(InvalidPocketError):
        session.play(6)
    assert session.game == initialize_game()


def test_find_best_uses_side_to_move() -> None:
    session = ConsoleSession(SolverConfig(prefer_win=False))
    session.enter_board([0, 0, 0, 0, 2, 3, 0], [0, 0, 0, 0, 0, 1, 0], Side.PLAYER)
    assert session.find_best() == [4, 5]
    assert len(session.generate_tree()) == 4


def test_parse_helpers() -> None:
    assert parse_pockets("1 2 3 4 5 6 7") == [1, 2, 3, 4, 5, 6, 7]
    assert parse_pockets("0,0,0,0,0,1,3") == [0, 0, 0, 0, 0, 1, 3]
    with pytest.raises(ValueError):
        parse_pockets("1 2 3")
    assert parse_side("Player") == Side.PLAYER
    assert parse_side("o") == Side.OPPONENT
    with pytest.raises(ValueError):
        parse_side("nobody")


def test_run_menu_plays_stashes_and_loads(capsys) -> None:
    session = ConsoleSession()
    run_menu(session, scripted(["p", "2", "s", "r", "l", "p", "9", "f", "q"]))

    assert session.game == play_move(initialize_game(), (2, Side.PLAYER))
    out = capsys.readouterr().out
    assert "Game stashed." in out
    assert "Invalid move: out_of_bounds_pocket" in out
    assert "Best chain:" in out


def test_run_menu_manual_entry(capsys) -> None:
    session = ConsoleSession()
    inputs = ["m", "0 0 0 0 0 0 20", "0 0 0 0 0 0 28", "player", "f", "m", "1 2", "q"]
    run_menu(session, scripted(inputs))

    assert str(session.game.status) == "Over(Win(Opponent))"
    out = capsys.readouterr().out
    assert "No recommendation for this position." in out
    assert "Board not changed" in out


def test_format_game_marks_selected_pocket() -> None:
    text = format_game(initialize_game(), selected=(2, Side.PLAYER))
    assert "Player's turn" in text
    assert "Game state: InProgress" in text
    assert text.count("->") == 1


def test_build_configs_merges_yaml_and_flags(tmp_path) -> None:
    path = tmp_path / "solver.yaml"
    path.write_text("solver:\n  prefer_win: false\nsearch:\n  depth: 3\n", encoding="utf-8")
    cfg = load_yaml_config(str(path))

    solver_config, minimax_config = build_configs(cfg, make_args())
    assert solver_config == SolverConfig(prefer_win=False)
    assert minimax_config == MinimaxConfig(depth=3)

    solver_config, minimax_config = build_configs(cfg, make_args(prefer_win=True, depth=1, eval_method="by_difference"))
    assert solver_config.prefer_win
    assert solver_config.eval_method == EvalMethod.BY_DIFFERENCE
    assert minimax_config.depth == 1


def test_load_yaml_config_missing_file(tmp_path) -> None:
    assert load_yaml_config(str(tmp_path / "missing.yaml")) == {}
    assert load_yaml_config(None) == {}
