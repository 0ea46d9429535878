"""Session context, configuration and recorded-action loading."""

from .baggage import Baggage, ModelIdentity
from .builder import benchmark_header, build_session
from .config import (
    DEFAULT_MODEL_PATH,
    LOGLEVELS,
    SUPPORTED_CONFIG_SUFFIXES,
    SessionConfig,
    load_config_mapping,
    load_session_config,
    session_config_from_mapping,
)
from .recordings import load_recorded_actions

__all__ = [
    "Baggage",
    "DEFAULT_MODEL_PATH",
    "LOGLEVELS",
    "ModelIdentity",
    "SUPPORTED_CONFIG_SUFFIXES",
    "SessionConfig",
    "benchmark_header",
    "build_session",
    "load_config_mapping",
    "load_recorded_actions",
    "load_session_config",
    "session_config_from_mapping",
]
