"""Model backed by externally supplied decision callables."""

from __future__ import annotations

from collections.abc import Callable

from mlclient.core.contracts import ModelType, State
from mlclient.plugins import ComponentManifest

ActionFn = Callable[[State], int]
ValueFn = Callable[[State], float]


class FunctionModel:
    """Forward decisions to a pair of callables.

    Unlike the placeholders, this model is live: the simulation calls
    :meth:`get_action` and :meth:`get_value` directly, which lets a policy be
    injected programmatically without implementing the full interface.

    Parameters
    ----------
    version : int
        Schema version the callables understand.
    name : str
        Identifier reported by :meth:`get_name`.
    get_action : Callable[[State], int]
        Decision callable.
    get_value : Callable[[State], float]
        Value-estimate callable.
    """

    def __init__(self, version: int, name: str, get_action: ActionFn, get_value: ValueFn) -> None:
        self._version = int(version)
        self._name = name
        self._get_action = get_action
        self._get_value = get_value

    def __repr__(self) -> str:
        return f"FunctionModel(version={self._version}, name={self._name!r})"

    def get_type(self) -> ModelType:
        return ModelType.FUNCTION

    def get_name(self) -> str:
        return self._name

    def get_version(self) -> int:
        return self._version

    def get_action(self, state: State) -> int:
        return self._get_action(state)

    def get_value(self, state: State) -> float:
        return self._get_value(state)


def make_user_model(
    version: int,
    get_action: ActionFn,
    get_value: ValueFn,
    name: str = "MMAI_USER",
) -> FunctionModel:
    """Build a :class:`FunctionModel` for programmatic policy injection."""

    return FunctionModel(version=version, name=name, get_action=get_action, get_value=get_value)


PLUGIN_MANIFESTS = [
    ComponentManifest(
        kind="model",
        component_id="function",
        factory=make_user_model,
        description="Live model forwarding to user-supplied callables",
    ),
]
