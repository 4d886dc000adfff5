"""
Logger interface for contentdigest diagnostics.

Registry changes, plugin loading and settings problems are reported through
ILogger. Command results are printed with click.echo and never logged here.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Diagnostic logger resolved from the service container.

    Messages use %-style formatting with the arguments passed separately, so
    nothing is formatted when the level is filtered out.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def set_level(self, level: str) -> None:
        """
        Change the threshold of every attached handler.

        Args:
            level: One of 'debug', 'info', 'warning', 'error'
        """
        pass
