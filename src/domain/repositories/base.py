"""Generic repository base interface.

Repository[T] is the root abstraction for the data-access interfaces in this
domain layer.  Concrete implementations live in src/infrastructure/persistence/
and are wired at the application boundary.

Design notes:
  - All methods are synchronous; every call is one or two round trips.
  - T is the domain model type (never an ORM row).
  - Identities are store-generated integers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract save/delete interface for a domain entity."""

    @abstractmethod
    def save(self, entity: T) -> T | None:
        """Insert or update the entity and return the stored version, or None on failure."""

    @abstractmethod
    def delete(self, id: int) -> None:
        """Remove the entity with the given primary key.  Absent keys are a no-op."""
