"""Result type used for every fallible packaging step.

Each step returns ``Ok(value)`` or ``Err(error)`` instead of raising, so the
packager can stop at the first failure and report exactly which step and
which artifact directory broke.

Usage:
    moved = move_file(page, man_dir)
    if isinstance(moved, Err):
        # Attach context while propagating
        return moved.map_err(lambda e: IoFailed(e.operation, e.path, e.reason, artifact=name))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The error value (a frozen dataclass from package_errors).
    """

    error: E

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Transform the error, e.g. to attach the artifact name."""
        return Err(f(self.error))


Result: TypeAlias = Ok[T] | Err[E]
