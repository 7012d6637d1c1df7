"""SQLAlchemy implementation of PersonRepository."""

from __future__ import annotations

import logging

from sqlalchemy import delete, insert, inspect, select, update

from src.domain.errors import ConstraintViolation, SchemaConflict, StoreError
from src.domain.models.person import Person as DomainPerson
from src.domain.repositories.persons import PersonRepository
from src.infrastructure.database import ConnectionFactory
from src.infrastructure.persistence.models.person import TABLE_NAME, person_table

logger = logging.getLogger(__name__)


class SqlPersonRepository(PersonRepository):
    """Person storage on top of a ConnectionFactory.

    Each public call opens its own scoped connection.  Store errors are
    logged here and never propagate to the caller.
    """

    def __init__(self, connections: ConnectionFactory) -> None:
        self._connections = connections

    @staticmethod
    def _to_domain(row) -> DomainPerson:
        return DomainPerson(id=row.id, name=row.name, city=row.city, house=row.house)

    def ensure_schema(self) -> bool:
        """Create the person table unless it exists.  True when it is present afterwards."""
        try:
            with self._connections.open() as conn:
                exists = inspect(conn).has_table(TABLE_NAME)
                if not exists:
                    person_table.create(conn)
        except (SchemaConflict, ConstraintViolation) as exc:
            # Another process created the table between the check and the CREATE.
            # PostgreSQL can report that as a unique violation on pg_type.
            logger.info("Table %r created concurrently: %s", TABLE_NAME, exc)
            return True
        except StoreError as exc:
            logger.error("Could not create table %r: %s", TABLE_NAME, exc)
            return False
        if exists:
            logger.info("Table %r already exists; keeping it", TABLE_NAME)
        else:
            logger.info("Created table %r", TABLE_NAME)
        return True

    def save(self, entity: DomainPerson) -> DomainPerson | None:
        """Insert or update a person and return it as stored.

        A person whose id matches no row is inserted with a new id; the
        given id is discarded.  Saving a natural key that is already stored
        leaves the table unchanged and returns the stored row.  The key is
        looked up before writing because the unique constraint treats NULL
        attributes as distinct; the constraint still catches concurrent writers.
        """
        try:
            stored = self._select_by_key(entity)
            if stored is not None:
                logger.warning("Person '%s' is already stored with id=%s", entity, stored.id)
                return stored
            if entity.id is not None:
                if self._update(entity) > 0:
                    return entity
                logger.info("No person with id=%s; inserting '%s' as a new row", entity.id, entity)
            return self._insert(entity)
        except ConstraintViolation:
            logger.warning("Person '%s' is already stored", entity)
        except StoreError as exc:
            logger.error("Could not save person '%s': %s", entity, exc)
            return None
        return self._find_by_key(entity)

    def _insert(self, entity: DomainPerson) -> DomainPerson:
        stmt = insert(person_table).values(name=entity.name, city=entity.city, house=entity.house)
        with self._connections.open() as conn:
            (new_id,) = conn.execute(stmt).inserted_primary_key
        return entity.with_id(new_id)

    def _update(self, entity: DomainPerson) -> int:
        stmt = (
            update(person_table)
            .where(person_table.c.id == entity.id)
            .values(name=entity.name, city=entity.city, house=entity.house)
        )
        return self._connections.execute(stmt)

    def _select_by_key(self, entity: DomainPerson) -> DomainPerson | None:
        stmt = select(person_table).where(
            person_table.c.name == entity.name,
            person_table.c.city == entity.city,
            person_table.c.house == entity.house,
        )
        rows = self._connections.query(stmt)
        return self._to_domain(rows[0]) if rows else None

    def _find_by_key(self, entity: DomainPerson) -> DomainPerson | None:
        try:
            return self._select_by_key(entity)
        except StoreError as exc:
            logger.error("Could not look up person '%s': %s", entity, exc)
            return None

    def delete(self, id: int) -> None:
        stmt = delete(person_table).where(person_table.c.id == id)
        try:
            deleted = self._connections.execute(stmt)
        except StoreError as exc:
            logger.error("Could not delete person id=%s: %s", id, exc)
            return
        if not deleted:
            logger.debug("No person with id=%s to delete", id)

    def delete_all(self) -> None:
        try:
            deleted = self._connections.execute(delete(person_table))
        except StoreError as exc:
            logger.error("Could not delete persons: %s", exc)
            return
        logger.info("Deleted %d person(s)", deleted)

    def find(self, person_id: int) -> DomainPerson | None:
        stmt = select(person_table).where(person_table.c.id == person_id)
        try:
            rows = self._connections.query(stmt)
        except StoreError as exc:
            logger.error("Could not find person id=%s: %s", person_id, exc)
            return None
        return self._to_domain(rows[0]) if rows else None

    def find_by_house(self, house: str) -> list[DomainPerson]:
        stmt = select(person_table).where(person_table.c.house == house).order_by(person_table.c.id)
        try:
            rows = self._connections.query(stmt)
        except StoreError as exc:
            logger.error("Could not find persons of house %r: %s", house, exc)
            return []
        return [self._to_domain(row) for row in rows]
