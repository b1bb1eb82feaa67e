#!/usr/bin/env python3
"""Explore relay-sowing Mancala positions from the console."""

import argparse
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import yaml

from mancala import (
    EvalMethod,
    Game,
    InvalidPocketError,
    Minimax,
    MinimaxConfig,
    MinimaxResult,
    SequenceTree,
    Side,
    SolverConfig,
    format_game,
    initialize_game,
    play_move,
    recommend_sequence,
)
from mancala.core import POCKETS_PER_SIDE
from mancala.solver import build_tree

MENU = """Main Menu
(R)eset Game
(M)anually Enter Board State
(S)tash Game
(L)oad Game
(T)est Move
(P)lay Move
(G)enerate Sequence Tree
(F)ind best move
(X) Search several turns
(Q)uit"""


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_configs(cfg: Dict, args: argparse.Namespace) -> Tuple[SolverConfig, MinimaxConfig]:
    solver_cfg = dict(cfg.get("solver", {}))
    search_cfg = dict(cfg.get("search", {}))
    if args.eval_method is not None:
        solver_cfg["eval_method"] = args.eval_method
        search_cfg["eval_method"] = args.eval_method
    if args.prefer_win is not None:
        solver_cfg["prefer_win"] = args.prefer_win
    if args.depth is not None:
        search_cfg["depth"] = args.depth
    for section in (solver_cfg, search_cfg):
        if "eval_method" in section:
            section["eval_method"] = EvalMethod(section["eval_method"])
    return SolverConfig(**solver_cfg), MinimaxConfig(**search_cfg)


def parse_pockets(raw: str) -> List[int]:
    values = [int(token) for token in raw.replace(",", " ").split()]
    if len(values) != POCKETS_PER_SIDE:
        raise ValueError(f"Expected {POCKETS_PER_SIDE} numbers (six pits then the store).")
    return values


def parse_side(raw: str) -> Side:
    value = raw.strip().lower()
    if value in {"p", "player"}:
        return Side.PLAYER
    if value in {"o", "opponent"}:
        return Side.OPPONENT
    raise ValueError("Side must be 'player' or 'opponent'.")


class ConsoleSession:
    """The authoritative current game plus a single stashed snapshot."""

    def __init__(
        self,
        solver_config: Optional[SolverConfig] = None,
        minimax_config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.solver_config = solver_config or SolverConfig()
        self.minimax_config = minimax_config or MinimaxConfig()
        self.game: Game = initialize_game()
        self.stashed: Optional[Game] = None

    def reset(self) -> None:
        self.game = initialize_game()

    def enter_board(self, player_pockets: List[int], opponent_pockets: List[int], player_turn: Side) -> None:
        self.game = initialize_game(player_pockets, opponent_pockets, player_turn)

    def stash(self) -> None:
        self.stashed = self.game.copy()

    def load(self) -> bool:
        if self.stashed is None:
            return False
        self.game = self.stashed.copy()
        return True

    def test_move(self, index: int) -> Game:
        return play_move(self.game, (index, self.game.player_turn))

    def play(self, index: int) -> Game:
        self.game = play_move(self.game, (index, self.game.player_turn))
        return self.game

    def generate_tree(self) -> SequenceTree:
        return build_tree(self.game)

    def find_best(self) -> List[int]:
        return recommend_sequence(self.game, self.solver_config)

    def search(self) -> MinimaxResult:
        return Minimax(self.minimax_config).run(self.game)


def prompt_pocket(input_fn: Callable[[str], str]) -> Optional[int]:
    raw = input_fn("Pocket index (0-5): ").strip()
    try:
        return int(raw)
    except ValueError:
        print("Please enter a number.")
        return None


def run_menu(session: ConsoleSession, input_fn: Callable[[str], str] = input) -> None:
    while True:
        print()
        print(format_game(session.game))
        print()
        print(MENU)
        choice = input_fn("> ").strip().lower()

        if choice == "q":
            return
        if choice == "r":
            session.reset()
        elif choice == "m":
            try:
                player = parse_pockets(input_fn("Player pockets (6 pits then store): "))
                opponent = parse_pockets(input_fn("Opponent pockets (6 pits then store): "))
                side = parse_side(input_fn("Side to move (player/opponent): "))
                session.enter_board(player, opponent, side)
            except ValueError as exc:
                print(f"Board not changed: {exc}")
        elif choice == "s":
            session.stash()
            print("Game stashed.")
        elif choice == "l":
            if not session.load():
                print("Nothing stashed yet.")
        elif choice in {"t", "p"}:
            index = prompt_pocket(input_fn)
            if index is None:
                continue
            try:
                if choice == "t":
                    result = session.test_move(index)
                    print(format_game(result, selected=(index, session.game.player_turn)))
                else:
                    session.play(index)
            except InvalidPocketError as exc:
                print(f"Invalid move: {exc.reason.value}")
        elif choice == "g":
            tree = session.generate_tree()
            print(
                f"Sequence tree: {len(tree)} nodes, {len(tree.leaf_nodes)} chain ends, "
                f"{len(tree.game_over_nodes)} game over, depth {tree.max_depth()}"
            )
        elif choice == "f":
            sequence = session.find_best()
            if sequence:
                print(f"Best chain: {' -> '.join(str(i) for i in sequence)}")
            else:
                print("No recommendation for this position.")
        elif choice == "x":
            result = session.search()
            if result.sequence:
                print(
                    f"Best chain over {session.minimax_config.depth} turns: "
                    f"{' -> '.join(str(i) for i in result.sequence)} (value {result.value:+.0f})"
                )
            else:
                print("No recommendation for this position.")
        else:
            print("Unknown option.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Explore relay-sowing Mancala positions in the console.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--eval-method", choices=[m.value for m in EvalMethod])
    parser.add_argument("--prefer-win", dest="prefer_win", action="store_true", default=None)
    parser.add_argument("--no-prefer-win", dest="prefer_win", action="store_false")
    parser.set_defaults(prefer_win=None)
    parser.add_argument("--depth", type=int, help="Turns searched by the (X) option")
    parser.add_argument("--verbose", action="store_true", help="Enable debug-level logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    solver_config, minimax_config = build_configs(load_yaml_config(args.config), args)
    run_menu(ConsoleSession(solver_config, minimax_config))


if __name__ == "__main__":
    main()
