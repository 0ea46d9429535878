"""Schema adapter machinery shared by every schema version.

A schema version is described by three things: its version number, the
supplementary-data type the simulation attaches to each state, and the
action space that turns a legality mask into a concrete action. Only the
action space differs in behavior between versions; decoding is generic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np

from mlclient.core.contracts import Side, State, SupplementaryType
from mlclient.core.errors import SchemaVersionMismatchError, SupplementaryDataTypeError


@dataclass(frozen=True, slots=True)
class SupplementaryData:
    """Per-turn metadata attached to a state.

    Each schema version subclasses this type so that supplementary data from
    one version never passes as another version's.

    Parameters
    ----------
    side : Side
        Side whose turn it is.
    type : SupplementaryType
        Whether this is a regular turn or the answer to a render request.
    is_battle_ended : bool, optional
        Whether the battle has ended.
    ansi_render : str, optional
        Pre-rendered battlefield text, set on ``ANSI_RENDER`` turns.
    """

    side: Side
    type: SupplementaryType = SupplementaryType.REGULAR
    is_battle_ended: bool = False
    ansi_render: str = ""


@dataclass(frozen=True, slots=True)
class StateView:
    """Typed view of one state, produced by :meth:`SchemaAdapter.decode`."""

    version: int
    side: Side
    type: SupplementaryType
    is_battle_ended: bool
    ansi_render: str
    action_mask: np.ndarray
    battlefield_state: np.ndarray

    @property
    def render_requested(self) -> bool:
        """Whether this state answers a previous render request."""

        return self.type is SupplementaryType.ANSI_RENDER


class ActionSpace(Protocol):
    """Version-specific decoding strategy for legality masks."""

    prompt_text: str

    def random_valid_action(self, view: StateView, rng: np.random.Generator) -> int:
        """Sample an action uniformly among the legal ones in ``view``."""


class SchemaAdapter:
    """Decode states of exactly one schema version.

    Parameters
    ----------
    version : int
        Schema version handled by this adapter.
    supplementary_type : type[SupplementaryData]
        Concrete supplementary type states of this version carry.
    action_space : ActionSpace
        Mask decoding strategy for this version.
    """

    def __init__(
        self,
        version: int,
        supplementary_type: type[SupplementaryData],
        action_space: ActionSpace,
    ) -> None:
        self.version = int(version)
        self.supplementary_type = supplementary_type
        self.action_space = action_space

    def __repr__(self) -> str:
        return f"SchemaAdapter(version={self.version})"

    def check_version(self, state: State) -> None:
        """Raise :class:`SchemaVersionMismatchError` for foreign states."""

        actual = state.version()
        if actual != self.version:
            raise SchemaVersionMismatchError(expected=self.version, actual=actual)

    def supplementary_data(self, state: State) -> SupplementaryData:
        """Downcast the state's supplementary data to this version's type.

        Raises
        ------
        SupplementaryDataTypeError
            If the payload is not an instance of ``supplementary_type``.
        """

        payload = state.get_supplementary_data()
        if not isinstance(payload, self.supplementary_type):
            raise SupplementaryDataTypeError(self.supplementary_type, type(payload))
        return payload

    def decode(self, state: State) -> StateView:
        """Build the typed view of ``state``.

        Parameters
        ----------
        state : State
            Opaque state handle from the simulation.

        Returns
        -------
        StateView
            Decoded view.

        Raises
        ------
        SchemaVersionMismatchError
            If the state reports a different schema version.
        SupplementaryDataTypeError
            If the supplementary payload belongs to another version.
        """

        self.check_version(state)
        sup = self.supplementary_data(state)
        return StateView(
            version=self.version,
            side=Side(sup.side),
            type=sup.type,
            is_battle_ended=bool(sup.is_battle_ended),
            ansi_render=sup.ansi_render,
            action_mask=np.asarray(state.get_action_mask(), dtype=bool),
            battlefield_state=np.asarray(state.get_battlefield_state(), dtype=float),
        )


__all__ = ["ActionSpace", "SchemaAdapter", "StateView", "SupplementaryData"]
