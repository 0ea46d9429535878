"""Placeholder models resolved into real decision-makers by the host.

Placeholders have neither a version nor decision logic. They only carry a
name (a scripted AI keyword or a path to a trained model) from process start
to the simulation, which instantiates the corresponding AI itself. Their
decision methods are tripwires: each call logs a warning and returns
:data:`~mlclient.core.PLACEHOLDER_SENTINEL`.
"""

from __future__ import annotations

import logging

from mlclient.core.contracts import PLACEHOLDER_SENTINEL, ModelType, State
from mlclient.core.errors import UnknownScriptedModelError
from mlclient.plugins import ComponentManifest

logger = logging.getLogger(__name__)

AI_STUPIDAI = "StupidAI"
AI_BATTLEAI = "BattleAI"
AI_MMAI_USER = "MMAI_USER"  # user-provided get_action
AI_MMAI_MODEL = "MMAI_MODEL"  # pre-trained model's get_action
AI_MMAI_SCRIPT_SUMMONER = "MMAI_SCRIPT_SUMMONER"

SCRIPTED_AI_KEYWORDS: tuple[str, ...] = (
    AI_STUPIDAI,
    AI_BATTLEAI,
    AI_MMAI_USER,
    AI_MMAI_MODEL,
    AI_MMAI_SCRIPT_SUMMONER,
)


class PlaceholderModel:
    """Identity-only model; subclasses set ``model_type``."""

    model_type: ModelType

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"

    def get_type(self) -> ModelType:
        return self.model_type

    def get_name(self) -> str:
        return self._name

    def get_version(self) -> int:
        return self._tripwire("get_version")

    def get_action(self, state: State) -> int:
        del state
        return self._tripwire("get_action")

    def get_value(self, state: State) -> float:
        del state
        return float(self._tripwire("get_value"))

    def _tripwire(self, method: str) -> int:
        logger.warning(
            "method %s called on placeholder model %r; returning %d",
            method,
            self,
            PLACEHOLDER_SENTINEL,
        )
        return PLACEHOLDER_SENTINEL


class ScriptedModel(PlaceholderModel):
    """Placeholder for a scripted AI implemented inside the simulation.

    Parameters
    ----------
    keyword : str
        One of :data:`SCRIPTED_AI_KEYWORDS`.

    Raises
    ------
    UnknownScriptedModelError
        If ``keyword`` is not a known scripted AI.
    """

    model_type = ModelType.SCRIPTED

    def __init__(self, keyword: str) -> None:
        if keyword not in SCRIPTED_AI_KEYWORDS:
            raise UnknownScriptedModelError(keyword, SCRIPTED_AI_KEYWORDS)
        super().__init__(keyword)


class TorchPathModel(PlaceholderModel):
    """Placeholder carrying the path of a trained model file.

    The path is carried verbatim; checking that it exists is up to whoever
    constructs the placeholder.
    """

    model_type = ModelType.TORCH_PATH

    def __init__(self, path: str) -> None:
        super().__init__(str(path))


def is_placeholder(model: object) -> bool:
    """Return whether ``model`` must be resolved by the host before use."""

    get_type = getattr(model, "get_type", None)
    if get_type is None:
        return False
    return get_type() in (ModelType.SCRIPTED, ModelType.TORCH_PATH)


def make_scripted_model(keyword: str) -> ScriptedModel:
    """Factory used by plugin discovery for scripted placeholders."""

    return ScriptedModel(keyword)


def make_torch_path_model(path: str) -> TorchPathModel:
    """Factory used by plugin discovery for model-path placeholders."""

    return TorchPathModel(path)


PLUGIN_MANIFESTS = [
    ComponentManifest(
        kind="model",
        component_id="scripted",
        factory=make_scripted_model,
        description="Placeholder naming a scripted AI built into the simulation",
    ),
    ComponentManifest(
        kind="model",
        component_id="torch_path",
        factory=make_torch_path_model,
        description="Placeholder carrying the path of a trained model",
    ),
]
