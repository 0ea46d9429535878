"""User agents bound to each supported schema version."""

from __future__ import annotations

from typing import Any

from mlclient.plugins import ComponentManifest
from mlclient.schema import v5, v10, v11

from .base import AgentOptions, UserAgent


class UserAgentV5(UserAgent):
    """User agent for schema version 5 (composite hex actions)."""

    def __init__(self, options: AgentOptions | None = None, **kwargs: Any) -> None:
        super().__init__(v5.SCHEMA, options, **kwargs)


class UserAgentV10(UserAgent):
    """User agent for schema version 10 (flat actions)."""

    def __init__(self, options: AgentOptions | None = None, **kwargs: Any) -> None:
        super().__init__(v10.SCHEMA, options, **kwargs)


class UserAgentV11(UserAgent):
    """User agent for schema version 11 (flat actions)."""

    def __init__(self, options: AgentOptions | None = None, **kwargs: Any) -> None:
        super().__init__(v11.SCHEMA, options, **kwargs)


USER_AGENTS: dict[int, type[UserAgent]] = {
    v5.VERSION: UserAgentV5,
    v10.VERSION: UserAgentV10,
    v11.VERSION: UserAgentV11,
}


def make_user_agent(version: int, options: AgentOptions | None = None, **kwargs: Any) -> UserAgent:
    """Build the user agent for schema ``version``.

    Raises
    ------
    KeyError
        If no agent exists for ``version``.
    """

    try:
        agent_cls = USER_AGENTS[int(version)]
    except KeyError:
        raise KeyError(
            f"no user agent for schema version {version!r}; supported: {sorted(USER_AGENTS)}"
        ) from None
    return agent_cls(options, **kwargs)


PLUGIN_MANIFESTS = [
    ComponentManifest(
        kind="agent",
        component_id=f"user_agent_v{version}",
        factory=agent_cls,
        description=f"Render-negotiating user agent for schema v{version}",
        schema_version=version,
    )
    for version, agent_cls in USER_AGENTS.items()
]
