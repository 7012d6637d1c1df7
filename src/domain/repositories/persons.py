"""Person repository interface."""

from __future__ import annotations

from abc import abstractmethod

from src.domain.models.person import Person

from .base import Repository


class PersonRepository(Repository[Person]):
    """Read/write interface for Person entities.

    save() upserts by identity: a person without an id is inserted, a person
    with an id updates the matching row, and an id that matches nothing falls
    back to an insert with a freshly generated id.

    None of the methods raise on store failures.  Lookups return None (or an
    empty list) and writes become no-ops; the failure is logged instead.
    """

    @abstractmethod
    def ensure_schema(self) -> bool:
        """Create the backing table if it is missing.  True when the table is present afterwards."""

    @abstractmethod
    def find(self, person_id: int) -> Person | None:
        """Return the person with the given id, or None."""

    @abstractmethod
    def find_by_house(self, house: str) -> list[Person]:
        """Return every person of the given house; empty when there are none."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every stored person."""
