"""
Application bootstrap for contentdigest.

Registers the logger and the process-wide algorithm registry with the DI
container. Call once at startup, before any digest is computed; library
users who skip it get a default registry on first use.
"""

from __future__ import annotations

import threading

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .settings import DigestSettings, load_settings

_initialized = False
_bootstrap_lock = threading.Lock()


def bootstrap(settings: DigestSettings | None = None) -> ServiceContainer:
    """
    Bootstrap contentdigest.

    Args:
        settings: Loaded settings; read from config files and env if omitted

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    with _bootstrap_lock:
        if _initialized:
            return container

        if settings is None:
            settings = load_settings()

        _register_core_services(container, settings)
        _initialized = True

    return container


def _register_core_services(container: ServiceContainer, settings: DigestSettings) -> None:
    """Register the logger and the algorithm registry."""
    from ..hashing.registry import install_default_registry
    from ..services.logging import DigestLogger

    logger = DigestLogger(
        level=settings.logging.level,
        console_enabled=settings.logging.console,
        file_enabled=settings.logging.file,
    )
    container.register_singleton(ILogger, implementation=logger)  # type: ignore[type-abstract]

    if settings.config_error:
        logger.warning("%s", settings.config_error)

    # Keeps a registry created by earlier library use, with its registrations
    load_plugins = settings.digest.load_plugins
    install_default_registry(container, load_plugins=load_plugins)
    logger.debug(
        "Bootstrapped contentdigest (default algorithm %s, plugins %s)",
        settings.digest.algorithm,
        "on" if load_plugins else "off",
    )


def reset() -> None:
    """Forget the bootstrap and drop the container (for testing)."""
    global _initialized

    with _bootstrap_lock:
        _initialized = False
        ServiceContainer.reset()
