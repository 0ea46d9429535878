"""Per-version schema adapters and action-space decoding."""

from __future__ import annotations

from . import v5, v10, v11
from .action_spaces import CompositeActionSpace, FlatActionSpace, decode_action, encode_action
from .base import ActionSpace, SchemaAdapter, StateView, SupplementaryData
from .v5 import SupplementaryDataV5
from .v10 import SupplementaryDataV10
from .v11 import SupplementaryDataV11

SCHEMA_ADAPTERS: dict[int, SchemaAdapter] = {
    v5.VERSION: v5.SCHEMA,
    v10.VERSION: v10.SCHEMA,
    v11.VERSION: v11.SCHEMA,
}


def get_schema(version: int) -> SchemaAdapter:
    """Return the adapter for ``version``.

    Raises
    ------
    KeyError
        If no adapter is registered for ``version``.
    """

    try:
        return SCHEMA_ADAPTERS[int(version)]
    except KeyError:
        supported = sorted(SCHEMA_ADAPTERS)
        raise KeyError(f"unsupported schema version {version!r}; supported: {supported}") from None


__all__ = [
    "ActionSpace",
    "CompositeActionSpace",
    "FlatActionSpace",
    "SCHEMA_ADAPTERS",
    "SchemaAdapter",
    "StateView",
    "SupplementaryData",
    "SupplementaryDataV10",
    "SupplementaryDataV11",
    "SupplementaryDataV5",
    "decode_action",
    "encode_action",
    "get_schema",
]
