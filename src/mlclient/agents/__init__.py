"""User agents: render negotiation plus interactive, replay and random policies."""

from .base import AgentOptions, HandshakePhase, UserAgent
from .policies import RecordedActions, prompt_action
from .throughput import RESETS_PER_REPORT, ThroughputMeter, ThroughputSample
from .versions import USER_AGENTS, UserAgentV5, UserAgentV10, UserAgentV11, make_user_agent

__all__ = [
    "AgentOptions",
    "HandshakePhase",
    "RESETS_PER_REPORT",
    "RecordedActions",
    "ThroughputMeter",
    "ThroughputSample",
    "USER_AGENTS",
    "UserAgent",
    "UserAgentV10",
    "UserAgentV11",
    "UserAgentV5",
    "make_user_agent",
    "prompt_action",
]
