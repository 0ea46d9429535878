"""Loading recorded action sequences for replay."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_recorded_actions(path: str | Path) -> tuple[int, ...]:
    """Read whitespace-separated non-negative integer actions from a file.

    Parameters
    ----------
    path : str | pathlib.Path
        Text file, typically one action per line.

    Returns
    -------
    tuple[int, ...]
        Actions in file order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If a token is not a non-negative integer.
    """

    actions_path = Path(path)
    if not actions_path.is_file():
        raise FileNotFoundError(f"Failed to open recorded actions file: {actions_path}")

    actions: list[int] = []
    text = actions_path.read_text(encoding="utf-8")
    for line_number, line in enumerate(text.splitlines(), start=1):
        for token in line.split():
            try:
                action = int(token)
            except ValueError:
                raise ValueError(
                    f"{actions_path}:{line_number}: expected an integer action, got {token!r}"
                ) from None
            if action < 0:
                raise ValueError(f"{actions_path}:{line_number}: actions must be non-negative, got {action}")
            logger.debug("Loaded action: %d", action)
            actions.append(action)

    return tuple(actions)
