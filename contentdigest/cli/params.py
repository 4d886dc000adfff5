"""Click parameter types for digests and algorithm names."""

from __future__ import annotations

from typing import Any

import click

from ..algorithm import Algorithm
from ..core.exceptions import DigestValidationError
from ..digest import Digest
from ..selection import AlgorithmFlag


class AlgorithmParamType(click.ParamType):
    """Algorithm option; empty selects the canonical algorithm."""

    name = "algorithm"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Algorithm:
        if isinstance(value, Algorithm):
            return value
        flag = AlgorithmFlag()
        try:
            flag.set(value)
        except DigestValidationError as e:
            self.fail(f"{e.message}: {value}", param, ctx)
        return flag.algorithm  # type: ignore[return-value]


class DigestParamType(click.ParamType):
    """A digest argument, validated on parse."""

    name = "digest"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Digest:
        if isinstance(value, Digest):
            return value
        try:
            return Digest.parse(value)
        except DigestValidationError as e:
            self.fail(f"{e.message}: {value}", param, ctx)


ALGORITHM = AlgorithmParamType()
DIGEST = DigestParamType()
