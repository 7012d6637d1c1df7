"""Person domain model.

A pure value object with no ORM or persistence concerns.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Person(BaseModel):
    """A person of the realm, identified in storage by a generated id.

    id is None until the person has been stored.  name, city and house are
    free-form and may be None; no validation happens at this layer.

    Equality and hashing use the natural key (name, city, house) only, the
    same triple the person table keeps unique.  Two persons that differ only
    in id compare equal.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str | None = None
    city: str | None = None
    house: str | None = None

    @classmethod
    def create(cls, name: str | None, city: str | None, house: str | None) -> Person:
        """Named constructor for a not-yet-stored person."""
        return cls(name=name, city=city, house=house)

    @property
    def key(self) -> tuple[str | None, str | None, str | None]:
        return (self.name, self.city, self.house)

    def with_id(self, id: int) -> Person:
        return self.model_copy(update={"id": id})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.name}, {self.city}, {self.house}"
