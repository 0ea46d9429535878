"""Tests for uniform-random action sampling over legality masks."""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from mlclient.core import ACTION_RESET, Side, StaticState
from mlclient.schema import SupplementaryDataV5, SupplementaryDataV10, decode_action, encode_action, get_schema, v5

PA = v5.PrimaryAction


def _flat_view(mask):
    state = StaticState(10, SupplementaryDataV10(side=Side.LEFT), action_mask=mask)
    return get_schema(10).decode(state)


def _v5_mask(primaries=(), hexes=()) -> np.ndarray:
    """Build a v5 mask from legal primaries and (hex, primary) pairs."""

    mask = np.zeros(v5.ACTION_MASK_SIZE, dtype=bool)
    for primary in primaries:
        mask[primary] = True
    for hex_index, primary in hexes:
        mask[v5.ACTION_SPACE.hex_mask_offset(hex_index, primary)] = True
    return mask


def _v5_view(mask, *, shooting=False):
    battlefield = np.zeros(v5.SHOOTING_OFFSET + 1)
    battlefield[v5.SHOOTING_OFFSET] = 1.0 if shooting else 0.0
    state = StaticState(5, SupplementaryDataV5(side=Side.LEFT), action_mask=mask, battlefield_state=battlefield)
    return get_schema(5).decode(state)


def test_flat_sampling_returns_only_legal_indices() -> None:
    """Flat sampling never returns index 0 or an unset index."""

    space = get_schema(10).action_space
    view = _flat_view([True, False, True, False, True, True])
    rng = np.random.default_rng(0)

    draws = {space.random_valid_action(view, rng) for _ in range(200)}

    assert draws == {2, 4, 5}


def test_flat_sampling_is_approximately_uniform() -> None:
    """Each legal index is drawn with roughly equal frequency."""

    space = get_schema(10).action_space
    view = _flat_view([False, True, False, True, True, False, True])
    rng = np.random.default_rng(1)

    counts = Counter(space.random_valid_action(view, rng) for _ in range(8000))

    assert set(counts) == {1, 3, 4, 6}
    for count in counts.values():
        assert count / 8000 == pytest.approx(0.25, abs=0.03)


@pytest.mark.parametrize("mask", [[], [True], [True, False, False], [False, False]])
def test_flat_sampling_without_legal_actions_resets(mask) -> None:
    """No legal index >= 1 yields the reset sentinel."""

    space = get_schema(10).action_space

    assert space.random_valid_action(_flat_view(mask), np.random.default_rng(0)) == ACTION_RESET


def test_composite_encoding_packs_hex_in_high_bits() -> None:
    """Composite actions keep the primary action in the low byte."""

    action = encode_action(164, PA.AMOVE_3)

    assert action == (164 << 8) | PA.AMOVE_3
    assert decode_action(action) == (164, PA.AMOVE_3)


def test_composite_skips_retreat() -> None:
    """Retreat is never sampled even when it is the only legal primary."""

    space = v5.ACTION_SPACE
    view = _v5_view(_v5_mask(primaries=[PA.RETREAT]))

    assert space.random_valid_action(view, np.random.default_rng(0)) == ACTION_RESET


def test_composite_wait_needs_no_hex() -> None:
    """Primaries below MOVE are returned directly."""

    space = v5.ACTION_SPACE
    view = _v5_view(_v5_mask(primaries=[PA.RETREAT, PA.WAIT]))

    assert space.random_valid_action(view, np.random.default_rng(0)) == PA.WAIT


def test_composite_move_targets_a_legal_hex() -> None:
    """MOVE is packed with one of its legal hexes."""

    space = v5.ACTION_SPACE
    legal_hexes = {3, 40, 120}
    view = _v5_view(_v5_mask(primaries=[PA.MOVE], hexes=[(h, PA.MOVE) for h in legal_hexes]))
    rng = np.random.default_rng(2)

    draws = [decode_action(space.random_valid_action(view, rng)) for _ in range(300)]

    assert {primary for _, primary in draws} == {PA.MOVE}
    assert {hex_index for hex_index, _ in draws} == legal_hexes


def test_composite_attack_while_shooting_needs_no_hex() -> None:
    """Attack primaries are returned bare while the shooting flag is set."""

    space = v5.ACTION_SPACE
    view = _v5_view(_v5_mask(primaries=[PA.AMOVE_4]), shooting=True)

    assert space.random_valid_action(view, np.random.default_rng(0)) == PA.AMOVE_4


def test_composite_attack_in_melee_uses_its_hex_block() -> None:
    """Without shooting, attacks read their own sub-action column per hex."""

    space = v5.ACTION_SPACE
    mask = _v5_mask(primaries=[PA.AMOVE_1], hexes=[(10, PA.AMOVE_1), (11, PA.MOVE)])
    view = _v5_view(mask, shooting=False)

    action = space.random_valid_action(view, np.random.default_rng(0))

    assert decode_action(action) == (10, PA.AMOVE_1)


def test_composite_never_picks_primary_without_legal_hex() -> None:
    """A hex-requiring primary with no legal hex is excluded from the draw."""

    space = v5.ACTION_SPACE
    mask = _v5_mask(primaries=[PA.WAIT, PA.MOVE, PA.AMOVE_0], hexes=[(7, PA.AMOVE_0)])
    view = _v5_view(mask, shooting=False)
    rng = np.random.default_rng(3)

    draws = {space.random_valid_action(view, rng) for _ in range(300)}

    assert draws == {int(PA.WAIT), encode_action(7, PA.AMOVE_0)}


def test_composite_resets_when_only_hexless_primaries_are_legal() -> None:
    """If every legal primary lacks a hex, sampling resets."""

    space = v5.ACTION_SPACE
    view = _v5_view(_v5_mask(primaries=[PA.MOVE, PA.AMOVE_2]), shooting=False)

    assert space.random_valid_action(view, np.random.default_rng(0)) == ACTION_RESET


def test_composite_distribution_is_uniform_per_stage() -> None:
    """Primaries are drawn uniformly, then hexes uniformly within a primary."""

    space = v5.ACTION_SPACE
    mask = _v5_mask(
        primaries=[PA.WAIT, PA.MOVE],
        hexes=[(1, PA.MOVE), (2, PA.MOVE), (3, PA.MOVE), (4, PA.MOVE)],
    )
    view = _v5_view(mask)
    rng = np.random.default_rng(4)
    n = 8000

    counts = Counter(space.random_valid_action(view, rng) for _ in range(n))

    assert counts[int(PA.WAIT)] / n == pytest.approx(0.5, abs=0.03)
    for hex_index in (1, 2, 3, 4):
        assert counts[encode_action(hex_index, PA.MOVE)] / n == pytest.approx(0.125, abs=0.02)


def test_composite_rejects_wrong_mask_size() -> None:
    """Masks with a foreign layout are rejected."""

    space = v5.ACTION_SPACE
    view = _v5_view(np.ones(20, dtype=bool))

    with pytest.raises(ValueError, match="action mask of size"):
        space.random_valid_action(view, np.random.default_rng(0))
