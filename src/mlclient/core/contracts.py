"""Protocol contracts for decision models and simulation states.

This module defines the capability interface shared by every decision policy
and the opaque state handle the simulation passes into it. The contracts are
intentionally schema-agnostic: version-specific decoding lives in
:mod:`mlclient.schema`.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

ACTION_RESET: int = -1
ACTION_RENDER_ANSI: int = -2
PLACEHOLDER_SENTINEL: int = -666


class ModelType(enum.Enum):
    """Type tag reported by :meth:`Model.get_type`."""

    SCRIPTED = "scripted"
    TORCH_PATH = "torch_path"
    USER = "user"
    FUNCTION = "function"


class Side(enum.IntEnum):
    """Combat side a state or model belongs to."""

    LEFT = 0
    RIGHT = 1
    BOTH = 2


class SupplementaryType(enum.Enum):
    """Discriminator for per-turn supplementary data."""

    REGULAR = "regular"
    ANSI_RENDER = "ansi_render"


@runtime_checkable
class State(Protocol):
    """Opaque state handle emitted by the simulation once per turn.

    Notes
    -----
    ``get_supplementary_data`` returns an untyped object. Consumers must check
    it against the supplementary type of the schema version they were built
    for before reading any field.
    """

    def version(self) -> int:
        """Return the schema version this state was encoded with."""

    def get_supplementary_data(self) -> Any:
        """Return the version-specific supplementary data object."""

    def get_battlefield_state(self) -> Sequence[float]:
        """Return the raw numeric feature vector."""

    def get_action_mask(self) -> Sequence[bool]:
        """Return the action-legality mask, one flag per action index."""


@runtime_checkable
class Model(Protocol):
    """Capability interface implemented by every decision policy.

    Notes
    -----
    Placeholder variants only carry an identity through initialization. The
    host resolves them into real models by ``get_type()`` and ``get_name()``;
    their decision methods are never meant to be reached.
    """

    def get_type(self) -> ModelType:
        """Return the model type tag."""

    def get_name(self) -> str:
        """Return the stable identifier the host uses for resolution."""

    def get_version(self) -> int:
        """Return the schema version this model was built against."""

    def get_action(self, state: State) -> int:
        """Choose an action (or sentinel) for ``state``."""

    def get_value(self, state: State) -> float:
        """Return a value estimate for ``state``."""


@dataclass(frozen=True, slots=True)
class StaticState:
    """Immutable :class:`State` implementation.

    Parameters
    ----------
    schema_version : int
        Version tag reported by :meth:`version`.
    supplementary_data : Any
        Version-specific supplementary payload.
    action_mask : Sequence[bool], optional
        Action-legality mask.
    battlefield_state : Sequence[float], optional
        Numeric side-channel vector.
    """

    schema_version: int
    supplementary_data: Any
    action_mask: Sequence[bool] = field(default_factory=tuple)
    battlefield_state: Sequence[float] = field(default_factory=tuple)

    def version(self) -> int:
        return self.schema_version

    def get_supplementary_data(self) -> Any:
        return self.supplementary_data

    def get_battlefield_state(self) -> Sequence[float]:
        return self.battlefield_state

    def get_action_mask(self) -> Sequence[bool]:
        return self.action_mask


__all__ = [
    "ACTION_RENDER_ANSI",
    "ACTION_RESET",
    "PLACEHOLDER_SENTINEL",
    "Model",
    "ModelType",
    "Side",
    "State",
    "StaticState",
    "SupplementaryType",
]
