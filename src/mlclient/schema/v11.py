"""Schema version 11: flat action indices, new supplementary payload type."""

from __future__ import annotations

from dataclasses import dataclass

from mlclient.schema.action_spaces import FlatActionSpace
from mlclient.schema.base import SchemaAdapter, SupplementaryData

VERSION = 11


@dataclass(frozen=True, slots=True)
class SupplementaryDataV11(SupplementaryData):
    """Supplementary data attached to version 11 states."""


SCHEMA = SchemaAdapter(VERSION, SupplementaryDataV11, FlatActionSpace())
