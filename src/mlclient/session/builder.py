"""Turn a :class:`SessionConfig` into the session context."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mlclient.agents.base import AgentOptions
from mlclient.core.contracts import Model, Side
from mlclient.models.placeholders import AI_MMAI_MODEL, AI_MMAI_USER
from mlclient.plugins import PluginRegistry, build_default_registry

from .baggage import Baggage
from .config import SessionConfig
from .recordings import load_recorded_actions

logger = logging.getLogger(__name__)

_BENCHMARKABLE_AIS = (AI_MMAI_USER, AI_MMAI_MODEL)


def build_session(
    config: SessionConfig,
    *,
    registry: PluginRegistry | None = None,
    agent_kwargs: Mapping[str, Any] | None = None,
) -> Baggage:
    """Create both sides' models and wrap them in a :class:`Baggage`.

    Parameters
    ----------
    config : SessionConfig
        Validated session config.
    registry : PluginRegistry | None, optional
        Component registry; the default registry is built when omitted.
    agent_kwargs : Mapping[str, Any] | None, optional
        Extra keyword arguments for user agents (streams, input function,
        random generator factory).

    Returns
    -------
    Baggage
        Session context for the simulation.

    Raises
    ------
    ValueError
        If benchmarking is requested without a user agent or trained model.
    UnknownScriptedModelError
        If a side names an unknown scripted AI.
    KeyError
        If no user agent exists for ``config.schema_version``.
    """

    if config.benchmark and not ({config.left_ai, config.right_ai} & set(_BENCHMARKABLE_AIS)):
        raise ValueError("benchmark requires at least one AI of type MMAI_USER or MMAI_MODEL")

    registry = registry if registry is not None else build_default_registry()
    actions = load_recorded_actions(config.prerecorded) if config.prerecorded else ()

    # only one user agent renders, otherwise both would request a render each turn
    autorender = config.autorender
    models: dict[Side, Model] = {}
    for side, ai, model_path in (
        (Side.LEFT, config.left_ai, config.left_model),
        (Side.RIGHT, config.right_ai, config.right_model),
    ):
        if ai == AI_MMAI_USER:
            options = AgentOptions(
                benchmark=config.benchmark,
                interactive=config.interactive,
                autorender=autorender,
                verbose=config.verbose,
                actions=actions,
            )
            manifest = registry.agent_for_schema(config.schema_version)
            models[side] = manifest.factory(options=options, **dict(agent_kwargs or {}))
            autorender = False
        elif ai == AI_MMAI_MODEL:
            models[side] = registry.create_model("torch_path", path=model_path)
        else:
            models[side] = registry.create_model("scripted", keyword=ai)
        logger.info("%s model -> %r", side.name.lower(), models[side])

    return Baggage(model_left=models[Side.LEFT], model_right=models[Side.RIGHT], dev_mode=config.dev_mode)


def benchmark_header(config: SessionConfig) -> str:
    """Return the banner printed before a benchmark run."""

    lines = ["Benchmark:"]
    for label, ai, model_path in (
        ("Attacker", config.left_ai, config.left_model),
        ("Defender", config.right_ai, config.right_model),
    ):
        suffix = f" {model_path}" if ai == AI_MMAI_MODEL else ""
        lines.append(f"* {label} AI: {ai}{suffix}")
    return "\n".join(lines) + "\n"
