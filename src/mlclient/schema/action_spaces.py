"""Uniform-random decoding of legality masks.

Two layouts exist:

- flat: one mask bit per action index, index 0 reserved;
- composite: a small block of primary-action bits followed by one block of
  sub-action bits per target hex. Composite actions pack the hex into the
  high bits and the primary action into the low byte.
"""

from __future__ import annotations

import logging

import numpy as np

from mlclient.core.contracts import ACTION_RESET
from mlclient.schema.base import StateView

logger = logging.getLogger(__name__)

_RANDOM_PROMPT_SUFFIX = "blank or 0 for a random valid action"


def uniform_pick(candidates: np.ndarray, rng: np.random.Generator) -> int:
    """Return one element of a non-empty candidate array, uniformly."""

    return int(candidates[int(rng.integers(len(candidates)))])


def encode_action(hex_index: int, primary_action: int) -> int:
    """Pack a (hex, primary action) pair into one composite action."""

    return (int(hex_index) << 8) | int(primary_action)


def decode_action(action: int) -> tuple[int, int]:
    """Split a composite action into ``(hex, primary_action)``."""

    return action >> 8, action & 0xFF


class FlatActionSpace:
    """Flat index action space.

    Decision Rule
        Every index ``>= 1`` with a set mask bit is a candidate; one is drawn
        uniformly. With no candidates the reset sentinel is returned.
    """

    prompt_text = f"Enter an integer ({_RANDOM_PROMPT_SUFFIX}): "

    def legal_actions(self, mask: np.ndarray) -> np.ndarray:
        """Return legal action indices, skipping reserved index 0."""

        return np.flatnonzero(np.asarray(mask, dtype=bool)[1:]) + 1

    def random_valid_action(self, view: StateView, rng: np.random.Generator) -> int:
        legal = self.legal_actions(view.action_mask)
        if legal.size == 0:
            logger.info("No valid actions => reset")
            return ACTION_RESET
        return uniform_pick(legal, rng)


class CompositeActionSpace:
    """Primary-action plus target-hex action space.

    Parameters
    ----------
    n_primary_actions : int
        Size of the primary-action block at the start of the mask.
    move_action : int
        First primary action that addresses a hex. Primary ``move_action + k``
        maps to sub-action ``k`` within each hex block.
    n_hexes : int
        Number of target hexes.
    actions_per_hex : int
        Sub-actions per hex block.
    shooting_index : int
        Offset of the shooting flag in the battlefield-state vector.

    Notes
    -----
    Primary action 0 (retreat) is never sampled. A primary below
    ``move_action`` needs no hex, nor does one above it while the active
    unit is shooting. Primaries that need a hex but have none legal are
    dropped before the draw.
    """

    prompt_text = f"Enter an action ((hex << 8) | primary action; {_RANDOM_PROMPT_SUFFIX}): "

    def __init__(
        self,
        *,
        n_primary_actions: int,
        move_action: int,
        n_hexes: int,
        actions_per_hex: int,
        shooting_index: int,
    ) -> None:
        if not 0 < move_action < n_primary_actions:
            raise ValueError("move_action must lie within the primary-action block")
        if n_primary_actions - move_action > actions_per_hex:
            raise ValueError("actions_per_hex must cover every hex-addressed primary action")

        self.n_primary_actions = n_primary_actions
        self.move_action = move_action
        self.n_hexes = n_hexes
        self.actions_per_hex = actions_per_hex
        self.shooting_index = shooting_index

    @property
    def mask_size(self) -> int:
        return self.n_primary_actions + self.n_hexes * self.actions_per_hex

    def hex_mask_offset(self, hex_index: int, primary_action: int) -> int:
        """Return the mask index for ``primary_action`` targeting ``hex_index``."""

        base = self.n_primary_actions + hex_index * self.actions_per_hex
        return base + primary_action - self.move_action

    def valid_hexes(self, mask: np.ndarray, primary_action: int) -> np.ndarray:
        """Return the hexes where ``primary_action`` is legal."""

        per_hex = np.asarray(mask, dtype=bool)[self.n_primary_actions : self.mask_size]
        per_hex = per_hex.reshape(self.n_hexes, self.actions_per_hex)
        return np.flatnonzero(per_hex[:, primary_action - self.move_action])

    def needs_hex(self, primary_action: int, *, shooting: bool) -> bool:
        if primary_action < self.move_action:
            return False
        return not (primary_action > self.move_action and shooting)

    def is_shooting(self, battlefield_state: np.ndarray) -> bool:
        # 0.0 or 1.0 on the wire; compare with 0.5 to avoid float noise
        return bool(battlefield_state[self.shooting_index] > 0.5)

    def random_valid_action(self, view: StateView, rng: np.random.Generator) -> int:
        mask = view.action_mask
        if mask.size != self.mask_size:
            raise ValueError(f"expected an action mask of size {self.mask_size}, got {mask.size}")

        primaries = np.flatnonzero(mask[1 : self.n_primary_actions]) + 1
        shooting = False
        if primaries.size and primaries.max() > self.move_action:
            shooting = self.is_shooting(view.battlefield_state)

        candidates: list[int] = []
        hexes_by_primary: dict[int, np.ndarray] = {}
        for primary in primaries.tolist():
            if not self.needs_hex(primary, shooting=shooting):
                candidates.append(primary)
                continue
            hexes = self.valid_hexes(mask, primary)
            if hexes.size:
                candidates.append(primary)
                hexes_by_primary[primary] = hexes

        if not candidates:
            logger.info("No valid primary actions => reset")
            return ACTION_RESET

        primary = uniform_pick(np.asarray(candidates), rng)
        if primary not in hexes_by_primary:
            return primary

        return encode_action(uniform_pick(hexes_by_primary[primary], rng), primary)


__all__ = [
    "CompositeActionSpace",
    "FlatActionSpace",
    "decode_action",
    "encode_action",
    "uniform_pick",
]
