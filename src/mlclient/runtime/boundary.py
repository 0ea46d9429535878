"""Explicit decision results for hosts that do not use exceptions.

:func:`request_action` runs one decision and folds every
:class:`~mlclient.core.ContractViolationError` into a :class:`Decision` that
carries its :class:`~mlclient.core.ErrorKind`. The violation is still fatal;
the host decides how to abort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mlclient.core.contracts import Model, State
from mlclient.core.errors import ContractViolationError, ErrorKind, SchemaVersionMismatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of one decision request.

    Parameters
    ----------
    action : int | None
        Chosen action or sentinel; ``None`` when the request failed.
    error_kind : ErrorKind | None, optional
        Category of the contract violation, if any.
    message : str, optional
        Human-readable error description.
    """

    action: int | None
    error_kind: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def ensure_version(model: Model, state: State) -> None:
    """Raise :class:`SchemaVersionMismatchError` unless versions agree."""

    expected = model.get_version()
    actual = state.version()
    if expected != actual:
        raise SchemaVersionMismatchError(expected=expected, actual=actual)


def request_action(model: Model, state: State) -> Decision:
    """Ask ``model`` for an action, reporting contract violations as data.

    Parameters
    ----------
    model : Model
        Live (non-placeholder) model.
    state : State
        Current state handle.

    Returns
    -------
    Decision
        ``Decision(action)`` on success, otherwise a failed decision with
        ``error_kind`` set. Exceptions outside the contract-violation family
        propagate unchanged.
    """

    try:
        ensure_version(model, state)
        return Decision(action=int(model.get_action(state)))
    except ContractViolationError as exc:
        logger.error("%s: %s", exc.kind.value, exc)
        return Decision(action=None, error_kind=exc.kind, message=str(exc))
