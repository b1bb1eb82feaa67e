"""Move-chain policies."""

from .policies import MinimaxPolicy, Policy, RandomPolicy, SequencePolicy

__all__ = ["MinimaxPolicy", "Policy", "RandomPolicy", "SequencePolicy"]
