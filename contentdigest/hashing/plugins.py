"""
Entry-point discovery for third-party hash algorithms.

External packages register algorithms by adding to their pyproject.toml:

    [project.entry-points."contentdigest.algorithms"]
    k12 = "my_package.hashing:K12Strategy"

The entry point name becomes the algorithm name. The target may be a
HashStrategy subclass, a HashStrategy instance, or a callable that takes the
registry and registers whatever it needs itself.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any

from ..core.di import get_logger
from ..core.exceptions import PluginLoadError
from .strategies import HashStrategy

if TYPE_CHECKING:
    from .registry import AlgorithmRegistry

ENTRY_POINT_GROUP = "contentdigest.algorithms"


def discover_algorithm_plugins(
    registry: AlgorithmRegistry, group: str = ENTRY_POINT_GROUP
) -> list[str]:
    """
    Load algorithm providers registered via entry points.

    Broken providers are logged and skipped so they cannot stop startup.

    Returns:
        Names of entry points that loaded successfully
    """
    loaded = []
    for ep in entry_points(group=group):
        try:
            _register_entrypoint(registry, ep.name, ep.load())
        except Exception as e:
            # Don't fail startup due to broken external plugins
            get_logger().debug("Failed to load algorithm plugin %s: %s", ep.name, e)
            continue
        loaded.append(ep.name)
    return loaded


def _register_entrypoint(registry: AlgorithmRegistry, name: str, target: Any) -> None:
    """Register one loaded entry point target based on its shape."""
    if isinstance(target, type) and issubclass(target, HashStrategy):
        if getattr(target, "__abstractmethods__", None):
            raise PluginLoadError("strategy class is abstract", plugin_name=name)
        registry.register(name, target())
    elif isinstance(target, HashStrategy):
        registry.register(name, target)
    elif callable(target):
        target(registry)
    else:
        raise PluginLoadError(
            f"unsupported entry point target {type(target).__name__}", plugin_name=name
        )
