"""
Click context extension for the contentdigest CLI.

Provides DigestContext, created once per invocation and handed to commands
through Click's ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..algorithm import Algorithm
from ..core.bootstrap import bootstrap
from ..core.settings import DigestSettings, load_settings
from ..hashing.registry import AlgorithmRegistry, get_registry


@dataclass
class DigestContext:
    """Extended context passed through the Click command chain.

    Attributes:
        cwd: Current working directory
        settings: Merged settings (init, env, TOML, defaults)
        registry: The process-wide algorithm registry
    """

    cwd: Path
    settings: DigestSettings
    registry: AlgorithmRegistry

    @classmethod
    def create(cls, cwd: Path | None = None) -> DigestContext:
        """Load settings, bootstrap services and build the context."""
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        bootstrap(settings)

        return cls(cwd=cwd, settings=settings, registry=get_registry())

    @property
    def default_algorithm(self) -> Algorithm:
        return Algorithm(self.settings.digest.algorithm)

    @property
    def chunk_size(self) -> int:
        return self.settings.digest.chunk_size
