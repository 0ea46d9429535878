"""Schema-generic user agent.

The agent answers the simulation's per-turn ``get_action`` calls. It
negotiates renders, reports battle resets, and otherwise decides through one
of three policies: interactive prompting, recorded-action replay, or
uniform-random sampling. Everything version-specific is delegated to the
:class:`~mlclient.schema.SchemaAdapter` the agent is built with.

Render negotiation spans two calls. The simulation can only render after
being told the agent is about to act, and the rendered text arrives with the
following state:

1. a regular state arrives: the agent stores its view and answers
   ``ACTION_RENDER_ANSI``;
2. the render state arrives: the agent prints the text and decides using the
   view stored in step 1.

Any other answer drops the stored view. After a battle reset the agent is
``DONE``: the first regular state of the next battle is decided without a
render request.
"""

from __future__ import annotations

import enum
import logging
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

import numpy as np

from mlclient.core.contracts import ACTION_RENDER_ANSI, ACTION_RESET, ModelType, State
from mlclient.schema.base import SchemaAdapter, StateView

from .policies import RecordedActions, prompt_action
from .throughput import ThroughputMeter

logger = logging.getLogger(__name__)

CONSTANT_VALUE = -666.0


class HandshakePhase(enum.Enum):
    """Render-negotiation state of a user agent."""

    AWAIT_RENDER_REQUEST = "await_render_request"
    AWAIT_ACTION = "await_action"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class AgentOptions:
    """User-agent behavior switches.

    Parameters
    ----------
    benchmark : bool, optional
        Measure throughput. Implies uniform-random decisions and disables
        render negotiation.
    interactive : bool, optional
        Prompt the operator for every action.
    autorender : bool, optional
        Request a render before every decision.
    verbose : bool, optional
        Debug-log every returned action.
    actions : Sequence[int], optional
        Recorded actions to replay. Empty means no replay.
    """

    benchmark: bool = False
    interactive: bool = False
    autorender: bool = True
    verbose: bool = False
    actions: Sequence[int] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", tuple(int(action) for action in self.actions))


class UserAgent:
    """User agent bound to one schema version.

    Parameters
    ----------
    schema : SchemaAdapter
        Adapter for the schema version this agent understands.
    options : AgentOptions | None, optional
        Behavior switches; defaults to :class:`AgentOptions()`.
    input_fn : Callable[[], str], optional
        Reads one line of operator input.
    rng_factory : Callable[[], numpy.random.Generator], optional
        Creates the generator for each random decision. The default draws
        fresh OS entropy every time, so no seed is shared across turns.
    clock : Callable[[], float], optional
        Clock used for throughput reports.
    stream, err_stream : TextIO | None, optional
        Console streams; ``None`` uses the current ``sys.stdout`` /
        ``sys.stderr``.
    """

    def __init__(
        self,
        schema: SchemaAdapter,
        options: AgentOptions | None = None,
        *,
        input_fn: Callable[[], str] = input,
        rng_factory: Callable[[], np.random.Generator] = np.random.default_rng,
        clock: Callable[[], float] = time.perf_counter,
        stream: TextIO | None = None,
        err_stream: TextIO | None = None,
    ) -> None:
        self.schema = schema
        self.options = options if options is not None else AgentOptions()
        self.phase = HandshakePhase.AWAIT_RENDER_REQUEST
        self.meter = ThroughputMeter(benchmark=self.options.benchmark, clock=clock, stream=stream)
        self.recording = RecordedActions(self.options.actions) if self.options.actions else None

        self._input_fn = input_fn
        self._rng_factory = rng_factory
        self._stream = stream
        self._err_stream = err_stream
        self._captured: StateView | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(version={self.schema.version}, options={self.options!r})"

    def get_type(self) -> ModelType:
        return ModelType.USER

    def get_name(self) -> str:
        return f"UserAgent (v{self.schema.version})"

    def get_version(self) -> int:
        return self.schema.version

    def get_value(self, state: State) -> float:
        del state
        return CONSTANT_VALUE

    def get_action(self, state: State) -> int:
        """Answer one simulation call.

        Parameters
        ----------
        state : State
            Current state handle.

        Returns
        -------
        int
            ``ACTION_RENDER_ANSI``, ``ACTION_RESET`` or a concrete action.

        Raises
        ------
        SchemaVersionMismatchError
            If ``state`` belongs to another schema version.
        SupplementaryDataTypeError
            If the supplementary payload belongs to another version.
        RecordedActionsExhaustedError
            If replay runs out of recorded actions.
        """

        view = self.schema.decode(state)
        benchmark = self.options.benchmark
        self.meter.step()

        if view.render_requested:
            self._write(view.ansi_render + "\n")
            action = self._decide(self._take_captured(view))
            self.phase = HandshakePhase.AWAIT_RENDER_REQUEST
        elif self.options.autorender and not benchmark and self.phase is HandshakePhase.AWAIT_RENDER_REQUEST:
            logger.debug("Side: %d", view.side)
            self._captured = view
            self.phase = HandshakePhase.AWAIT_ACTION
            action = ACTION_RENDER_ANSI
        elif view.is_battle_ended:
            self.meter.reset()
            if not benchmark:
                logger.debug("battle ended => sending ACTION_RESET")
            self._captured = None
            self.phase = HandshakePhase.DONE
            action = ACTION_RESET
        else:
            action = self._decide(view)
            self._captured = None
            self.phase = HandshakePhase.AWAIT_RENDER_REQUEST

        if self.options.verbose and not benchmark:
            logger.debug("get_action returning: %d", action)
        return action

    def random_valid_action(self, view: StateView) -> int:
        """Sample uniformly among legal actions of ``view``."""

        return self.schema.action_space.random_valid_action(view, self._rng_factory())

    def _decide(self, view: StateView) -> int:
        if self.options.benchmark:
            return self.random_valid_action(view)

        if self.options.interactive:
            value = prompt_action(
                self.schema.action_space.prompt_text,
                input_fn=self._input_fn,
                stream=self._stream or sys.stdout,
                err_stream=self._err_stream or sys.stderr,
            )
            return self.random_valid_action(view) if value == 0 else value

        if self.recording is not None:
            return self.recording.next()

        return self.random_valid_action(view)

    def _take_captured(self, fallback: StateView) -> StateView:
        captured, self._captured = self._captured, None
        if captured is None:
            logger.debug("render state without a preceding render request; using its own mask")
            return fallback
        return captured

    def _write(self, text: str) -> None:
        out = self._stream or sys.stdout
        out.write(text)
        out.flush()
