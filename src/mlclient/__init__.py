"""Top-level package for ``mlclient``.

The package is organized around one per-turn exchange with a simulation:

1. the simulation emits a versioned :class:`~mlclient.core.State`,
2. the side's :class:`~mlclient.core.Model` answers with an action or a
   sentinel (``ACTION_RENDER_ANSI`` / ``ACTION_RESET``),
3. the simulation interprets the answer and advances.

Models are either live (user agents, function models) or placeholders that
only carry a name for the simulation to resolve. Schema-version specifics
are confined to :mod:`mlclient.schema`.
"""

from .agents import AgentOptions, UserAgent, make_user_agent
from .core import (
    ACTION_RENDER_ANSI,
    ACTION_RESET,
    ContractViolationError,
    ErrorKind,
    Model,
    ModelType,
    Side,
    State,
    StaticState,
)
from .models import FunctionModel, ScriptedModel, TorchPathModel, make_scripted_model, make_user_model
from .runtime import CancellationToken, Decision, request_action, run_turn_loop
from .schema import get_schema
from .session import Baggage, SessionConfig, build_session

__all__ = [
    "ACTION_RENDER_ANSI",
    "ACTION_RESET",
    "AgentOptions",
    "Baggage",
    "CancellationToken",
    "ContractViolationError",
    "Decision",
    "ErrorKind",
    "FunctionModel",
    "Model",
    "ModelType",
    "ScriptedModel",
    "SessionConfig",
    "Side",
    "State",
    "StaticState",
    "TorchPathModel",
    "UserAgent",
    "build_session",
    "get_schema",
    "make_scripted_model",
    "make_user_agent",
    "make_user_model",
    "request_action",
    "run_turn_loop",
]
