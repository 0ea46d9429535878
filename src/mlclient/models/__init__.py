"""Model variants: placeholders resolved by the host and callable-backed models."""

from .function import FunctionModel, make_user_model
from .placeholders import (
    AI_BATTLEAI,
    AI_MMAI_MODEL,
    AI_MMAI_SCRIPT_SUMMONER,
    AI_MMAI_USER,
    AI_STUPIDAI,
    SCRIPTED_AI_KEYWORDS,
    PlaceholderModel,
    ScriptedModel,
    TorchPathModel,
    is_placeholder,
    make_scripted_model,
    make_torch_path_model,
)

__all__ = [
    "AI_BATTLEAI",
    "AI_MMAI_MODEL",
    "AI_MMAI_SCRIPT_SUMMONER",
    "AI_MMAI_USER",
    "AI_STUPIDAI",
    "FunctionModel",
    "PlaceholderModel",
    "SCRIPTED_AI_KEYWORDS",
    "ScriptedModel",
    "TorchPathModel",
    "is_placeholder",
    "make_scripted_model",
    "make_torch_path_model",
    "make_user_model",
]
