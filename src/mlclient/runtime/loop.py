"""Synchronous turn loop driving both sides' models against a host.

The host owns the simulation: it emits the state for the side to move and
interprets whatever action or sentinel comes back. The loop only routes
states to the right model, resolves placeholders on first use, and stops on
cancellation or after ``max_battles`` resets.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from mlclient.core.contracts import ACTION_RENDER_ANSI, ACTION_RESET, Model, Side, State
from mlclient.core.config_validation import validate_non_negative_int
from mlclient.models.placeholders import is_placeholder
from mlclient.session.baggage import Baggage

from .boundary import ensure_version
from .cancellation import CancellationToken

logger = logging.getLogger(__name__)

Resolver = Callable[[Model], Model]


class BattleHost(Protocol):
    """Simulation side of the turn loop."""

    def observe(self) -> tuple[Side, State]:
        """Return the side to move and its current state."""

    def apply(self, side: Side, action: int) -> None:
        """Apply an action or sentinel chosen for ``side``."""


@dataclass(slots=True)
class LoopStats:
    """Counters accumulated by :func:`run_turn_loop`."""

    steps: int = 0
    battles: int = 0
    renders: int = 0


def run_turn_loop(
    *,
    host: BattleHost,
    session: Baggage,
    token: CancellationToken,
    resolve: Resolver | None = None,
    max_battles: int = 0,
) -> LoopStats:
    """Run turns until cancelled or ``max_battles`` battles have ended.

    Parameters
    ----------
    host : BattleHost
        Simulation host.
    session : Baggage
        Session context with both sides' models.
    token : CancellationToken
        Checked before every turn.
    resolve : Callable[[Model], Model] | None, optional
        Turns a placeholder model into a live one. Called once per side, the
        first time the side moves.
    max_battles : int, optional
        Number of ``ACTION_RESET`` answers after which to stop; ``0`` runs
        until cancelled.

    Returns
    -------
    LoopStats
        Steps, finished battles and render requests observed.

    Raises
    ------
    TypeError
        If a placeholder reaches the live path without a resolver, or the
        resolver returns another placeholder.
    SchemaVersionMismatchError
        If a state's version differs from its model's.
    """

    validate_non_negative_int(max_battles, field_name="max_battles")
    live: dict[Side, Model] = {}
    stats = LoopStats()

    while not token.cancelled:
        side, state = host.observe()
        model = live.get(side)
        if model is None:
            model = _resolve_model(session.model_for(side), resolve)
            live[side] = model

        ensure_version(model, state)
        action = model.get_action(state)
        stats.steps += 1
        if action == ACTION_RENDER_ANSI:
            stats.renders += 1

        host.apply(side, action)

        if action == ACTION_RESET:
            stats.battles += 1
            if max_battles and stats.battles >= max_battles:
                logger.info("reached max_battles=%d", max_battles)
                break

    logger.info("turn loop finished: %s", stats)
    return stats


def _resolve_model(model: Model, resolve: Resolver | None) -> Model:
    if not is_placeholder(model):
        return model
    if resolve is None:
        raise TypeError(f"placeholder {model!r} reached the decision path without a resolver")

    resolved = resolve(model)
    if is_placeholder(resolved):
        raise TypeError(f"resolver returned another placeholder for {model!r}")
    logger.info("resolved %r -> %r", model, resolved)
    return resolved
