#!/usr/bin/env python3
"""Play a solver policy against a baseline and report the results."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import yaml

from mancala.agents import MinimaxPolicy, Policy, RandomPolicy, SequencePolicy
from mancala.evaluation import evaluate_policies
from mancala.search import MinimaxConfig
from mancala.solver import EvalMethod, SolverConfig


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def make_policy(kind: str, cfg: Dict, seed: Optional[int]) -> Policy:
    if kind == "random":
        return RandomPolicy(np.random.default_rng(seed))
    if kind == "sequence":
        solver_cfg = dict(cfg.get("solver", {}))
        if "eval_method" in solver_cfg:
            solver_cfg["eval_method"] = EvalMethod(solver_cfg["eval_method"])
        return SequencePolicy(SolverConfig(**solver_cfg))
    if kind == "minimax":
        search_cfg = dict(cfg.get("search", {}))
        if "eval_method" in search_cfg:
            search_cfg["eval_method"] = EvalMethod(search_cfg["eval_method"])
        return MinimaxPolicy(MinimaxConfig(**search_cfg))
    raise ValueError(f"Unknown policy kind: {kind}")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--policy", choices=["random", "sequence", "minimax"], default="sequence")
    parser.add_argument("--baseline", choices=["random", "sequence", "minimax"])
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--max-turns", type=int)
    parser.add_argument("--depth", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--swap-sides", action="store_true", help="Let the baseline move first")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    cfg = load_yaml_config(args.config)
    eval_cfg = cfg.get("evaluation", {})
    if args.depth is not None:
        cfg.setdefault("search", {})["depth"] = args.depth
    episodes = args.episodes if args.episodes is not None else eval_cfg.get("episodes", 20)
    max_turns = args.max_turns if args.max_turns is not None else eval_cfg.get("max_turns", 200)
    baseline = args.baseline or eval_cfg.get("baseline", "random")
    seed = args.seed if args.seed is not None else eval_cfg.get("seed")

    policy = make_policy(args.policy, cfg, seed)
    baseline_policy = make_policy(baseline, cfg, None if seed is None else seed + 1)
    if args.swap_sides:
        result = evaluate_policies(baseline_policy, policy, episodes=episodes, max_turns=max_turns, seed=seed)
    else:
        result = evaluate_policies(policy, baseline_policy, episodes=episodes, max_turns=max_turns, seed=seed)

    output = {
        "policy": args.policy,
        "baseline": baseline,
        "policy_side": "opponent" if args.swap_sides else "player",
        "games": result.games_played,
        "player_wins": result.player_wins,
        "opponent_wins": result.opponent_wins,
        "ties": result.ties,
        "unfinished": result.unfinished,
        "average_turns": result.average_turns,
        "player_winrate": result.winrate_player(),
        "opponent_winrate": result.winrate_opponent(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
