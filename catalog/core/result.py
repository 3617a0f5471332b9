"""Typed Results — discriminated success/failure values passed between layers.

Invariants:
    - A Result is exactly one of Success(value) or Failure(error)
    - Failure.error is always a CatalogError (the boundary maps it by type)
    - Normal control flow never raises: absence and invalid input travel as Failure

Design Decisions:
    - Frozen dataclasses over a third-party Either type: pattern-matchable, no dependency
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from catalog.core.errors import CatalogError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: CatalogError

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure]
