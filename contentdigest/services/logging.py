"""
Logger implementation for contentdigest diagnostics.

Output is off unless settings enable it: logging.console writes to stderr,
logging.file writes to ~/.contentdigest/contentdigest.log.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger


class DigestLogger(ILogger):
    """
    ILogger backed by a stdlib logger with its own handlers.

    The underlying logger accepts everything; each handler filters at the
    configured level, so set_level() only touches handlers.
    """

    LOG_FILE_PATH = Path.home() / ".contentdigest" / "contentdigest.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3
    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "contentdigest",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            name: stdlib logger name; existing handlers on it are replaced
            level: debug, info, warning or error; anything else means warning
            console_enabled: Attach a stderr handler
            file_enabled: Attach a rotating file handler
            log_file: File handler target, defaults to LOG_FILE_PATH
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers.clear()
        self._logger.propagate = False
        self._handlers: list[logging.Handler] = []

        log_level = self._to_level(level)
        if console_enabled:
            self._attach(logging.StreamHandler(sys.stderr), log_level)
        if file_enabled:
            path = log_file or self.LOG_FILE_PATH
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                path, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT
            )
            self._attach(handler, log_level)

    def _to_level(self, level: str) -> int:
        return self.LEVEL_MAP.get(level.lower(), logging.WARNING)

    def _attach(self, handler: logging.Handler, level: int) -> None:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        lvl = self._to_level(level)
        for handler in self._handlers:
            handler.setLevel(lvl)


class NullLogger(ILogger):
    """Discards everything; used before bootstrap and in tests."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
