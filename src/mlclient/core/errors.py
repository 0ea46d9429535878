"""Fatal contract violations raised by the decision layer.

Every error carries an :class:`ErrorKind` so a host that prefers error codes
can translate it uniformly (see :func:`mlclient.runtime.request_action`).
"""

from __future__ import annotations

import enum
from collections.abc import Sequence


class ErrorKind(enum.Enum):
    """Machine-readable category of a contract violation."""

    VERSION_MISMATCH = "version_mismatch"
    SUPPLEMENTARY_DATA_TYPE = "supplementary_data_type"
    RECORDED_ACTIONS_EXHAUSTED = "recorded_actions_exhausted"
    UNKNOWN_SCRIPTED_MODEL = "unknown_scripted_model"


class ContractViolationError(RuntimeError):
    """Base class for unrecoverable decision-layer errors."""

    kind: ErrorKind


class SchemaVersionMismatchError(ContractViolationError):
    """A state was passed to a policy built for a different schema version."""

    kind = ErrorKind.VERSION_MISMATCH

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected version {expected}, got: {actual}")
        self.expected = expected
        self.actual = actual


class SupplementaryDataTypeError(ContractViolationError):
    """Supplementary data could not be downcast to the expected type."""

    kind = ErrorKind.SUPPLEMENTARY_DATA_TYPE

    def __init__(self, expected_type: type, actual_type: type) -> None:
        super().__init__(
            "anycast for supplementary data error: "
            f"expected {expected_type.__module__}.{expected_type.__qualname__}, "
            f"got {actual_type.__module__}.{actual_type.__qualname__}"
        )
        self.expected_type = expected_type
        self.actual_type = actual_type


class RecordedActionsExhaustedError(ContractViolationError):
    """A replay policy was asked for more actions than were recorded."""

    kind = ErrorKind.RECORDED_ACTIONS_EXHAUSTED

    def __init__(self, consumed: int) -> None:
        super().__init__(f"No more recorded actions (all {consumed} consumed)")
        self.consumed = consumed


class UnknownScriptedModelError(ContractViolationError):
    """A scripted placeholder was constructed from an unknown keyword."""

    kind = ErrorKind.UNKNOWN_SCRIPTED_MODEL

    def __init__(self, keyword: str, known: Sequence[str]) -> None:
        super().__init__(
            f"Unsupported scripted AI keyword: {keyword!r}; expected one of {list(known)}"
        )
        self.keyword = keyword
        self.known = tuple(known)


__all__ = [
    "ContractViolationError",
    "ErrorKind",
    "RecordedActionsExhaustedError",
    "SchemaVersionMismatchError",
    "SupplementaryDataTypeError",
    "UnknownScriptedModelError",
]
