"""Collaborator contract consumed by the availability engine."""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar


T = TypeVar("T")


class Store(Protocol[T]):
    """Minimal record store: read everything, add one record.

    ``add`` returns the canonical stored form of the record, e.g. with its
    identifier populated. Callers must use that value rather than the one
    they passed in.
    """

    def get_all(self) -> Sequence[T]:
        ...

    def add(self, record: T) -> T:
        ...
