"""Component manifests and auto-discovery registry.

Model variants and user agents register themselves by exposing a
``PLUGIN_MANIFESTS`` constant in their module. The session builder creates
both sides' models through this registry, so new policy variants plug in
without touching the builder.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import Any, Callable, Literal

logger = logging.getLogger(__name__)

ComponentKind = Literal["model", "agent"]


@dataclass(frozen=True, slots=True)
class ComponentManifest:
    """Manifest for one model or user-agent factory.

    Parameters
    ----------
    kind : {"model", "agent"}
        ``"model"`` for placeholder and function models, ``"agent"`` for
        user agents.
    component_id : str
        Identifier unique within ``kind`` (``"scripted"``,
        ``"user_agent_v10"``, ...).
    factory : Callable[..., Any]
        Builds the component from keyword arguments.
    version : str, optional
        Manifest version label.
    description : str, optional
        One-line summary.
    schema_version : int | None, optional
        Schema version a user agent speaks; ``None`` for version-agnostic
        components.
    """

    kind: ComponentKind
    component_id: str
    factory: Callable[..., Any]
    version: str = "1.0.0"
    description: str = ""
    schema_version: int | None = None

    @property
    def key(self) -> tuple[ComponentKind, str]:
        return self.kind, self.component_id


class PluginRegistry:
    """Lookup table of component manifests keyed by ``(kind, component_id)``."""

    def __init__(self) -> None:
        self._entries: dict[tuple[ComponentKind, str], ComponentManifest] = {}

    def __contains__(self, key: tuple[ComponentKind, str]) -> bool:
        return key in self._entries

    def register(self, manifest: ComponentManifest) -> None:
        """Add ``manifest``; re-registering an equal manifest is a no-op.

        Raises
        ------
        ValueError
            If a different manifest is already registered under the same key,
            or another agent already claims the same schema version.
        """

        existing = self._entries.get(manifest.key)
        if existing is not None:
            if existing != manifest:
                raise ValueError(
                    f"manifest conflict for {manifest.kind}:{manifest.component_id}; already registered"
                )
            return

        if manifest.kind == "agent" and manifest.schema_version is not None:
            for other in self.list(kind="agent"):
                if other.schema_version == manifest.schema_version:
                    raise ValueError(
                        f"schema version {manifest.schema_version} already served by {other.component_id}"
                    )

        self._entries[manifest.key] = manifest
        logger.debug("registered %s:%s", manifest.kind, manifest.component_id)

    def get(self, kind: ComponentKind, component_id: str) -> ComponentManifest:
        """Return the manifest registered under ``(kind, component_id)``.

        Raises
        ------
        KeyError
            If nothing is registered under the key.
        """

        try:
            return self._entries[(kind, component_id)]
        except KeyError:
            known = [item.component_id for item in self.list(kind=kind)]
            raise KeyError(f"unknown {kind} component {component_id!r}; registered: {known}") from None

    def list(self, kind: ComponentKind | None = None) -> tuple[ComponentManifest, ...]:
        """Return manifests sorted by kind and ID, optionally of one kind."""

        entries = [item for item in self._entries.values() if kind is None or item.kind == kind]
        return tuple(sorted(entries, key=lambda item: item.key))

    def create(self, kind: ComponentKind, component_id: str, **kwargs: Any) -> Any:
        return self.get(kind, component_id).factory(**kwargs)

    def create_model(self, component_id: str, **kwargs: Any) -> Any:
        """Build a placeholder or function model by ID."""

        return self.create("model", component_id, **kwargs)

    def create_agent(self, component_id: str, **kwargs: Any) -> Any:
        """Build a user agent by ID."""

        return self.create("agent", component_id, **kwargs)

    def agent_for_schema(self, schema_version: int) -> ComponentManifest:
        """Return the user-agent manifest bound to ``schema_version``.

        Raises
        ------
        KeyError
            If no agent speaks the version.
        """

        for manifest in self.list(kind="agent"):
            if manifest.schema_version == schema_version:
                return manifest
        served = sorted(item.schema_version for item in self.list(kind="agent") if item.schema_version is not None)
        raise KeyError(f"no user agent registered for schema version {schema_version}; registered: {served}")

    def discover(self, package_name: str) -> tuple[ComponentManifest, ...]:
        """Import ``package_name`` and its submodules and register their manifests.

        Parameters
        ----------
        package_name : str
            Dotted package name. Every module in the tree may define
            ``PLUGIN_MANIFESTS``.

        Returns
        -------
        tuple[ComponentManifest, ...]
            Manifests found during this call, in module order.

        Raises
        ------
        TypeError
            If a ``PLUGIN_MANIFESTS`` entry is not a :class:`ComponentManifest`.
        """

        package = importlib.import_module(package_name)
        module_names = [package.__name__]
        if hasattr(package, "__path__"):
            module_names.extend(
                info.name for info in pkgutil.walk_packages(package.__path__, prefix=package.__name__ + ".")
            )

        found: list[ComponentManifest] = []
        for module_name in module_names:
            module = importlib.import_module(module_name)
            for manifest in getattr(module, "PLUGIN_MANIFESTS", ()):
                if not isinstance(manifest, ComponentManifest):
                    raise TypeError(f"{module_name}.PLUGIN_MANIFESTS must contain ComponentManifest objects")
                self.register(manifest)
                found.append(manifest)

        logger.debug("discovered %d manifests in %s", len(found), package_name)
        return tuple(found)


def build_default_registry() -> PluginRegistry:
    """Registry with every built-in model and user agent discovered."""

    registry = PluginRegistry()
    registry.discover("mlclient.models")
    registry.discover("mlclient.agents")
    return registry
