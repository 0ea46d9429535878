"""Core contracts, sentinels and error taxonomy for the decision layer."""

from .config_validation import validate_allowed_keys, validate_choice, validate_non_negative_int
from .contracts import (
    ACTION_RENDER_ANSI,
    ACTION_RESET,
    PLACEHOLDER_SENTINEL,
    Model,
    ModelType,
    Side,
    State,
    StaticState,
    SupplementaryType,
)
from .errors import (
    ContractViolationError,
    ErrorKind,
    RecordedActionsExhaustedError,
    SchemaVersionMismatchError,
    SupplementaryDataTypeError,
    UnknownScriptedModelError,
)

__all__ = [
    "ACTION_RENDER_ANSI",
    "ACTION_RESET",
    "PLACEHOLDER_SENTINEL",
    "ContractViolationError",
    "ErrorKind",
    "Model",
    "ModelType",
    "RecordedActionsExhaustedError",
    "SchemaVersionMismatchError",
    "Side",
    "State",
    "StaticState",
    "SupplementaryDataTypeError",
    "SupplementaryType",
    "UnknownScriptedModelError",
    "validate_allowed_keys",
    "validate_choice",
    "validate_non_negative_int",
]
