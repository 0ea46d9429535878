"""Decision policies used by user agents besides uniform-random sampling."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TextIO

from mlclient.core.errors import RecordedActionsExhaustedError


class RecordedActions:
    """Replay a pre-recorded action sequence strictly in order.

    Parameters
    ----------
    actions : Sequence[int]
        Non-negative action values, consumed front to back.

    Raises
    ------
    ValueError
        If any action is negative.
    """

    def __init__(self, actions: Sequence[int]) -> None:
        values = tuple(int(action) for action in actions)
        negative = [action for action in values if action < 0]
        if negative:
            raise ValueError(f"recorded actions must be non-negative, got {negative}")

        self._actions = values
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._actions)

    @property
    def consumed(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        return len(self._actions) - self._cursor

    def next(self) -> int:
        """Return the next recorded action.

        Raises
        ------
        RecordedActionsExhaustedError
            If every recorded action has been consumed.
        """

        if self._cursor >= len(self._actions):
            raise RecordedActionsExhaustedError(consumed=self._cursor)
        action = self._actions[self._cursor]
        self._cursor += 1
        return action


def prompt_action(
    prompt_text: str,
    *,
    input_fn: Callable[[], str],
    stream: TextIO,
    err_stream: TextIO,
) -> int:
    """Ask the operator for a non-negative action.

    Blank input and end of input count as ``0``, which callers treat as "pick
    a random valid action". Non-numeric and negative input is rejected and re-prompted. Any
    other value is returned as-is, without a legality check.
    """

    while True:
        stream.write(prompt_text)
        stream.flush()
        try:
            raw = input_fn().strip()
        except EOFError:
            # closed stdin reads as a blank line
            return 0
        if not raw:
            return 0

        try:
            value = int(raw)
        except ValueError:
            err_stream.write("Invalid input!\n")
            continue

        if value >= 0:
            return value
        err_stream.write("Invalid input!\n")
