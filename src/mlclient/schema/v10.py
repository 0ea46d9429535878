"""Schema version 10: flat action indices."""

from __future__ import annotations

from dataclasses import dataclass

from mlclient.schema.action_spaces import FlatActionSpace
from mlclient.schema.base import SchemaAdapter, SupplementaryData

VERSION = 10


@dataclass(frozen=True, slots=True)
class SupplementaryDataV10(SupplementaryData):
    """Supplementary data attached to version 10 states."""


SCHEMA = SchemaAdapter(VERSION, SupplementaryDataV10, FlatActionSpace())
