"""Session context handed from process start into the simulation loop."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from mlclient.core.contracts import Model, ModelType, Side


@dataclass(frozen=True, slots=True)
class ModelIdentity:
    """What the host needs to resolve one side's model."""

    side: Side
    type: ModelType
    name: str


@dataclass(frozen=True, slots=True)
class Baggage:
    """Both sides' models plus the training-mode flag.

    Created once at startup and read by the simulation on every turn. Each
    slot holds either a live model (user agent or function model) or a
    placeholder the simulation resolves itself.

    Parameters
    ----------
    model_left : Model
        Model playing the left side.
    model_right : Model
        Model playing the right side.
    dev_mode : bool, optional
        Training-mode flag forwarded to the simulation.
    """

    model_left: Model
    model_right: Model
    dev_mode: bool = True

    def __post_init__(self) -> None:
        for side, model in ((Side.LEFT, self.model_left), (Side.RIGHT, self.model_right)):
            if not isinstance(model, Model):
                raise TypeError(f"{side.name.lower()} model does not implement Model: {model!r}")

    def model_for(self, side: Side) -> Model:
        """Return the model for ``side``.

        Raises
        ------
        ValueError
            If ``side`` is :attr:`Side.BOTH`.
        """

        if side == Side.LEFT:
            return self.model_left
        if side == Side.RIGHT:
            return self.model_right
        raise ValueError(f"no single model for side {side!r}")

    def iter_models(self) -> Iterator[tuple[Side, Model]]:
        yield Side.LEFT, self.model_left
        yield Side.RIGHT, self.model_right

    def describe(self) -> tuple[ModelIdentity, ModelIdentity]:
        """Return the identity records for both sides."""

        left, right = (
            ModelIdentity(side=side, type=model.get_type(), name=model.get_name())
            for side, model in self.iter_models()
        )
        return left, right
