"""Evaluation helpers for Mancala policies."""

from .match import EvaluationResult, MatchRecord, evaluate_policies, play_game

__all__ = ["EvaluationResult", "MatchRecord", "evaluate_policies", "play_game"]
