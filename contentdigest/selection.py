"""
Choosing an algorithm from user-supplied text, e.g. a command-line option.
"""

from __future__ import annotations

from .algorithm import CANONICAL, Algorithm, require_available


class AlgorithmFlag:
    """
    Holds an algorithm selected by name.

    A failed set() leaves the previous selection untouched.
    """

    def __init__(self, algorithm: Algorithm | None = None) -> None:
        self.algorithm = algorithm

    def set(self, value: str) -> None:
        """
        Select an algorithm. Empty selects the canonical algorithm.

        Raises:
            UnsupportedAlgorithmError: If the name is unknown or unavailable
        """
        if value == "":
            self.algorithm = CANONICAL
            return
        self.algorithm = require_available(value)

    def __str__(self) -> str:
        if self.algorithm is None:
            return "unset"
        return str(self.algorithm)

    def __repr__(self) -> str:
        return f"AlgorithmFlag({self.algorithm!r})"
