"""Host-facing runtime: boundary results, cancellation and the turn loop."""

from .boundary import Decision, ensure_version, request_action
from .cancellation import CancellationToken
from .loop import BattleHost, LoopStats, run_turn_loop

__all__ = [
    "BattleHost",
    "CancellationToken",
    "Decision",
    "LoopStats",
    "ensure_version",
    "request_action",
    "run_turn_loop",
]
