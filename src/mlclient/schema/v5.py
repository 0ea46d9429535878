"""Schema version 5: composite (hex, primary action) addressing."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from mlclient.schema.action_spaces import CompositeActionSpace
from mlclient.schema.base import SchemaAdapter, SupplementaryData

VERSION = 5

N_HEXES = 165
N_ENEMY_SLOTS = 10


class PrimaryAction(enum.IntEnum):
    """Primary actions; ``AMOVE_k`` attacks enemy slot ``k``."""

    RETREAT = 0
    WAIT = 1
    MOVE = 2
    AMOVE_0 = 3
    AMOVE_1 = 4
    AMOVE_2 = 5
    AMOVE_3 = 6
    AMOVE_4 = 7
    AMOVE_5 = 8
    AMOVE_6 = 9
    AMOVE_7 = 10
    AMOVE_8 = 11
    AMOVE_9 = 12


N_PRIMARY_ACTIONS = len(PrimaryAction)
# MOVE plus one attack-move per enemy slot
AMOVE_ACTIONS_PER_HEX = 1 + N_ENEMY_SLOTS


class MiscAttribute(enum.IntEnum):
    """Leading attributes of the battlefield-state vector."""

    PRIMARY_ACTION_MASK = 0
    SHOOTING = 1


# (attribute, encoding, encoded size)
MISC_ENCODING: tuple[tuple[MiscAttribute, str, int], ...] = (
    (MiscAttribute.PRIMARY_ACTION_MASK, "raw", N_PRIMARY_ACTIONS),
    (MiscAttribute.SHOOTING, "raw", 1),
)

SHOOTING_OFFSET = sum(size for _, _, size in MISC_ENCODING[: MiscAttribute.SHOOTING])
ACTION_MASK_SIZE = N_PRIMARY_ACTIONS + N_HEXES * AMOVE_ACTIONS_PER_HEX


@dataclass(frozen=True, slots=True)
class SupplementaryDataV5(SupplementaryData):
    """Supplementary data attached to version 5 states."""


ACTION_SPACE = CompositeActionSpace(
    n_primary_actions=N_PRIMARY_ACTIONS,
    move_action=PrimaryAction.MOVE,
    n_hexes=N_HEXES,
    actions_per_hex=AMOVE_ACTIONS_PER_HEX,
    shooting_index=SHOOTING_OFFSET,
)

SCHEMA = SchemaAdapter(VERSION, SupplementaryDataV5, ACTION_SPACE)
