"""Declarative session configuration.

A session config names the AI for each side, the schema version user agents
speak, and the user-agent switches. It can be built from a mapping or loaded
from a JSON/YAML file; unknown keys and bad values fail fast.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from mlclient.core.config_validation import (
    validate_allowed_keys,
    validate_choice,
    validate_non_negative_int,
)
from mlclient.models.placeholders import AI_MMAI_USER, AI_STUPIDAI
from mlclient.schema import SCHEMA_ADAPTERS

SUPPORTED_CONFIG_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")
LOGLEVELS: tuple[str, ...] = ("trace", "debug", "info", "warn", "error")
DEFAULT_MODEL_PATH = "AI/MMAI/models/model.zip"


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Configuration for one run.

    Parameters
    ----------
    left_ai, right_ai : str
        ``MMAI_USER`` for a user agent, ``MMAI_MODEL`` for a trained model
        loaded by the simulation, or a scripted AI keyword.
    left_model, right_model : str
        Model paths used when the side's AI is ``MMAI_MODEL``.
    schema_version : int
        Schema version spoken by user agents.
    interactive : bool
        Prompt for every user-agent action.
    prerecorded : str | None
        Path of a recorded-actions file to replay.
    benchmark : bool
        Measure user-agent throughput.
    autorender : bool
        Let one user agent request renders.
    verbose : bool
        Debug-log every user-agent action.
    dev_mode : bool
        Training-mode flag forwarded to the simulation.
    max_battles : int
        Stop after this many battles (``0`` disables the limit).
    loglevel : str
        One of :data:`LOGLEVELS`.

    Raises
    ------
    ValueError
        If a field holds an invalid value.
    """

    left_ai: str = AI_MMAI_USER
    right_ai: str = AI_STUPIDAI
    left_model: str = DEFAULT_MODEL_PATH
    right_model: str = DEFAULT_MODEL_PATH
    schema_version: int = 10
    interactive: bool = False
    prerecorded: str | None = None
    benchmark: bool = False
    autorender: bool = True
    verbose: bool = False
    dev_mode: bool = True
    max_battles: int = 0
    loglevel: str = "warn"

    def __post_init__(self) -> None:
        validate_non_negative_int(self.max_battles, field_name="max_battles")
        validate_non_negative_int(self.schema_version, field_name="schema_version")
        if self.schema_version not in SCHEMA_ADAPTERS:
            raise ValueError(
                f"Bad value for schema_version: {self.schema_version}; expected one of {sorted(SCHEMA_ADAPTERS)}"
            )
        validate_choice(self.loglevel, field_name="loglevel", choices=LOGLEVELS)
        for name in ("left_ai", "right_ai", "left_model", "right_model"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"Bad value for {name}: expected a non-empty string, got {value!r}")
        if self.interactive and self.prerecorded is not None:
            raise ValueError("interactive and prerecorded are mutually exclusive")

    def to_mapping(self) -> dict[str, Any]:
        return asdict(self)


def session_config_from_mapping(mapping: Mapping[str, Any]) -> SessionConfig:
    """Build a :class:`SessionConfig` from a plain mapping.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Session fields; omitted keys keep their defaults.

    Returns
    -------
    SessionConfig
        Validated config.

    Raises
    ------
    ValueError
        If unknown keys or invalid values are present.
    """

    allowed = tuple(item.name for item in fields(SessionConfig))
    validate_allowed_keys(mapping, field_name="session", allowed_keys=allowed)
    return SessionConfig(**dict(mapping))


def load_config_mapping(path: str | Path) -> dict[str, Any]:
    """Load one JSON/YAML config file whose root is an object mapping.

    Raises
    ------
    ValueError
        If suffix is unsupported or config root is not an object mapping.
    ImportError
        If YAML parsing is requested without PyYAML installed.
    """

    config_path = Path(path)
    suffix = config_path.suffix.lower()

    if suffix == ".json":
        with config_path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    elif suffix in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:  # pragma: no cover - exercised only without pyyaml
            raise ImportError(
                "YAML config loading requires PyYAML. Install with `pip install pyyaml`."
            ) from exc
        with config_path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle)
    else:
        supported = ", ".join(SUPPORTED_CONFIG_SUFFIXES)
        raise ValueError(
            f"unsupported config file extension {suffix!r}; expected one of {supported}"
        )

    if not isinstance(raw, dict):
        raise ValueError("config root must be a JSON/YAML object")
    return raw


def load_session_config(path: str | Path) -> SessionConfig:
    """Load and validate a session config file."""

    return session_config_from_mapping(load_config_mapping(path))


__all__ = [
    "DEFAULT_MODEL_PATH",
    "LOGLEVELS",
    "SUPPORTED_CONFIG_SUFFIXES",
    "SessionConfig",
    "load_config_mapping",
    "load_session_config",
    "session_config_from_mapping",
]
