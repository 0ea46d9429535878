"""Tests for the render-negotiating user agent."""

from __future__ import annotations

import io
import logging

import numpy as np
import pytest

from mlclient.agents import AgentOptions, HandshakePhase, UserAgentV5, UserAgentV10, UserAgentV11, make_user_agent
from mlclient.core import ACTION_RENDER_ANSI, ACTION_RESET, ModelType, Side, StaticState, SupplementaryType
from mlclient.core.errors import RecordedActionsExhaustedError, SchemaVersionMismatchError
from mlclient.schema import SupplementaryDataV5, SupplementaryDataV10, decode_action, v5


class CountingRng:
    """Generator factory that counts how often it is asked for a generator."""

    def __init__(self, seed: int = 0) -> None:
        self.calls = 0
        self._rng = np.random.default_rng(seed)

    def __call__(self) -> np.random.Generator:
        self.calls += 1
        return self._rng


def _regular(mask, *, ended=False, side=Side.LEFT) -> StaticState:
    return StaticState(10, SupplementaryDataV10(side=side, is_battle_ended=ended), action_mask=mask)


def _render(mask=(), text="<render>") -> StaticState:
    sup = SupplementaryDataV10(side=Side.LEFT, type=SupplementaryType.ANSI_RENDER, ansi_render=text)
    return StaticState(10, sup, action_mask=mask)


def _agent(options: AgentOptions, **kwargs) -> UserAgentV10:
    kwargs.setdefault("stream", io.StringIO())
    kwargs.setdefault("err_stream", io.StringIO())
    kwargs.setdefault("rng_factory", CountingRng())
    return UserAgentV10(options, **kwargs)


def test_agent_identity() -> None:
    """User agents report their type, name, version and a constant value."""

    agent = _agent(AgentOptions())

    assert agent.get_type() is ModelType.USER
    assert agent.get_name() == "UserAgent (v10)"
    assert agent.get_version() == 10
    assert agent.get_value(_regular([False, True])) == pytest.approx(-666.0)
    assert UserAgentV5().get_version() == 5
    assert UserAgentV11().get_name() == "UserAgent (v11)"


def test_make_user_agent_by_version() -> None:
    """Factory picks the agent class bound to the requested version."""

    assert isinstance(make_user_agent(5), UserAgentV5)
    assert isinstance(make_user_agent(10, AgentOptions(autorender=False)), UserAgentV10)
    with pytest.raises(KeyError, match="supported"):
        make_user_agent(3)


def test_version_mismatch_is_fatal() -> None:
    """An agent bound to v5 refuses a v10 state."""

    agent = UserAgentV5(AgentOptions(autorender=False), stream=io.StringIO())

    with pytest.raises(SchemaVersionMismatchError, match="Expected version 5, got: 10"):
        agent.get_action(_regular([False, True]))


def test_render_handshake_uses_previously_captured_mask() -> None:
    """First call requests a render; the next decides on the captured mask."""

    rng = CountingRng()
    out = io.StringIO()
    agent = _agent(AgentOptions(autorender=True), rng_factory=rng, stream=out)

    first = agent.get_action(_regular([False, True, False, False]))

    assert first == ACTION_RENDER_ANSI
    assert agent.phase is HandshakePhase.AWAIT_ACTION
    assert rng.calls == 0

    second = agent.get_action(_render(mask=[False, False, False, True], text="<battlefield>"))

    assert second == 1
    assert agent.phase is HandshakePhase.AWAIT_RENDER_REQUEST
    assert rng.calls == 1
    assert "<battlefield>\n" in out.getvalue()


def test_render_request_does_not_consume_replay() -> None:
    """Replay advances only on the decision call after the render."""

    agent = _agent(AgentOptions(autorender=True, actions=[3, 7, 2]))

    assert agent.get_action(_regular([False, True])) == ACTION_RENDER_ANSI
    assert agent.recording.consumed == 0
    assert agent.get_action(_render()) == 3
    assert agent.get_action(_regular([False, True])) == ACTION_RENDER_ANSI
    assert agent.get_action(_render()) == 7
    assert agent.recording.consumed == 2


def test_replay_yields_recorded_sequence_then_fails() -> None:
    """Replay returns 3, 7, 2 in order and a fourth call is fatal."""

    agent = _agent(AgentOptions(autorender=False, actions=[3, 7, 2]))
    state = _regular([False, True])

    assert [agent.get_action(state) for _ in range(3)] == [3, 7, 2]
    with pytest.raises(RecordedActionsExhaustedError):
        agent.get_action(state)


def test_random_policy_without_autorender() -> None:
    """Without autorender, regular states are decided immediately."""

    agent = _agent(AgentOptions(autorender=False))

    assert agent.get_action(_regular([False, False, True])) == 2
    assert agent.get_action(_regular([True, False, False])) == ACTION_RESET


def test_battle_end_sends_reset_and_spins() -> None:
    """Ended battles answer ACTION_RESET and draw a spinner glyph."""

    out = io.StringIO()
    agent = _agent(AgentOptions(autorender=False), stream=out)

    action = agent.get_action(_regular([False, True], ended=True))

    assert action == ACTION_RESET
    assert agent.phase is HandshakePhase.DONE
    assert agent.meter.resets == 1
    assert out.getvalue() == "\r\\"


def test_autorender_requests_render_before_battle_end() -> None:
    """With autorender, a battle-end state is rendered before it is reset."""

    agent = _agent(AgentOptions(autorender=True))

    assert agent.get_action(_regular([False, False], ended=True)) == ACTION_RENDER_ANSI
    # captured mask has no legal action, so the decision is a reset
    assert agent.get_action(_render()) == ACTION_RESET


def test_render_state_without_request_uses_own_mask() -> None:
    """An unsolicited render state is decided on its own mask."""

    agent = _agent(AgentOptions(autorender=False))

    assert agent.get_action(_render(mask=[False, False, True])) == 2


def test_regular_state_after_render_request_drops_captured_view() -> None:
    """A render never reuses a view captured two calls earlier."""

    agent = _agent(AgentOptions(autorender=True))

    assert agent.get_action(_regular([False, True, False])) == ACTION_RENDER_ANSI
    # host skipped the render; this state is decided on its own mask
    assert agent.get_action(_regular([False, False, True])) == 2
    assert agent.get_action(_render(mask=[False, False, True])) == 2


def test_reset_drops_captured_view() -> None:
    """A render arriving after a reset uses its own mask."""

    agent = _agent(AgentOptions(autorender=True))

    assert agent.get_action(_regular([False, True, False], ended=True)) == ACTION_RENDER_ANSI
    assert agent.get_action(_regular([False, True, False], ended=True)) == ACTION_RESET
    assert agent.get_action(_render(mask=[False, False, True])) == 2


def test_first_turn_after_reset_is_decided_without_render() -> None:
    """After a reset the next battle opens with a direct decision."""

    agent = _agent(AgentOptions(autorender=True))
    ended = _regular([False, False, False], ended=True)

    assert agent.get_action(_regular([False, True, False])) == ACTION_RENDER_ANSI
    assert agent.get_action(_render()) == 1
    assert agent.get_action(ended) == ACTION_RENDER_ANSI
    assert agent.get_action(ended) == ACTION_RESET
    assert agent.phase is HandshakePhase.DONE

    assert agent.get_action(_regular([False, False, True])) == 2
    assert agent.phase is HandshakePhase.AWAIT_RENDER_REQUEST
    assert agent.get_action(_regular([False, False, True])) == ACTION_RENDER_ANSI


def test_benchmark_emits_throughput_every_ten_resets() -> None:
    """Ten resets while benchmarking print a summary and zero the counters."""

    ticks = iter(float(i) for i in range(100))
    out = io.StringIO()
    agent = _agent(AgentOptions(benchmark=True), stream=out, clock=lambda: next(ticks))
    ended = _regular([False, True], ended=True)

    for _ in range(9):
        assert agent.get_action(ended) == ACTION_RESET
    assert agent.meter.resets == 9
    assert "steps/s" not in out.getvalue()

    assert agent.get_action(ended) == ACTION_RESET

    assert "steps/s:" in out.getvalue()
    assert "resets/s:" in out.getvalue()
    assert agent.meter.resets == 0
    assert agent.meter.steps == 0


def test_benchmark_disables_render_and_forces_random() -> None:
    """Benchmarking never requests renders and ignores replay."""

    agent = _agent(AgentOptions(benchmark=True, autorender=True, actions=[9]))

    assert agent.get_action(_regular([False, False, False, True])) == 3
    assert agent.recording.consumed == 0


def test_interactive_reprompts_on_bad_input() -> None:
    """Non-numeric and negative input re-prompt; other values pass through."""

    answers = iter(["abc", "-3", "42"])
    err = io.StringIO()
    out = io.StringIO()
    agent = _agent(
        AgentOptions(interactive=True, autorender=False),
        input_fn=lambda: next(answers),
        stream=out,
        err_stream=err,
    )

    # 42 is not legal in this mask; operator input is trusted
    assert agent.get_action(_regular([False, True])) == 42
    assert err.getvalue().count("Invalid input!") == 2
    assert out.getvalue().count("Enter an integer") == 3


def test_interactive_end_of_input_picks_random() -> None:
    """Closed stdin behaves like a blank answer."""

    def closed_stdin() -> str:
        raise EOFError

    agent = _agent(AgentOptions(interactive=True, autorender=False), input_fn=closed_stdin)

    assert agent.get_action(_regular([False, False, True])) == 2


@pytest.mark.parametrize("answer", ["", "0", "  "])
def test_interactive_blank_or_zero_picks_random(answer: str) -> None:
    """Blank or zero input falls back to a random valid action."""

    rng = CountingRng()
    agent = _agent(AgentOptions(interactive=True, autorender=False), input_fn=lambda: answer, rng_factory=rng)

    assert agent.get_action(_regular([False, False, True])) == 2
    assert rng.calls == 1


def test_v5_agent_samples_composite_actions() -> None:
    """The v5 agent packs hex and primary action."""

    mask = np.zeros(v5.ACTION_MASK_SIZE, dtype=bool)
    mask[v5.PrimaryAction.MOVE] = True
    mask[v5.ACTION_SPACE.hex_mask_offset(42, v5.PrimaryAction.MOVE)] = True
    state = StaticState(
        5,
        SupplementaryDataV5(side=Side.RIGHT),
        action_mask=mask,
        battlefield_state=np.zeros(v5.SHOOTING_OFFSET + 1),
    )
    agent = UserAgentV5(AgentOptions(autorender=False), stream=io.StringIO())

    assert decode_action(agent.get_action(state)) == (42, v5.PrimaryAction.MOVE)


def test_verbose_logs_returned_action(caplog) -> None:
    """Verbose agents debug-log every answer."""

    agent = _agent(AgentOptions(autorender=False, verbose=True))

    with caplog.at_level(logging.DEBUG, logger="mlclient.agents.base"):
        agent.get_action(_regular([False, True]))

    assert any("get_action returning: 1" in record.getMessage() for record in caplog.records)


def test_agents_keep_independent_state() -> None:
    """Two agents never share handshake state or counters."""

    left = _agent(AgentOptions(autorender=True))
    right = _agent(AgentOptions(autorender=True))

    assert left.get_action(_regular([False, True])) == ACTION_RENDER_ANSI

    assert right.phase is HandshakePhase.AWAIT_RENDER_REQUEST
    assert right.meter.steps == 0
    assert right.get_action(_regular([False, True])) == ACTION_RENDER_ANSI
