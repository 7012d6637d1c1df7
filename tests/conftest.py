"""Shared fixtures: an in-memory SQLite store and the person CSV fixture.

SQLite ignores GENERATED ALWAYS AS IDENTITY and falls back to rowid
identities, which hand out 1, 2, ... on a fresh table just like the
production identity column.
"""

from __future__ import annotations

import csv
from pathlib import Path

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.pool import StaticPool

from src.domain.models.person import Person
from src.infrastructure.database import ConnectionFactory
from src.infrastructure.persistence.models.person import person_table
from src.infrastructure.persistence.repositories import (
    SqlPersonRepository,
    reset_person_repository,
)

GOT_CSV = Path(__file__).parent / "data" / "got.csv"


def read_csv(path: Path, limit: int) -> list[Person]:
    """Read up to limit persons from a ``name;city;house`` file with a header line."""
    with path.open(encoding="utf-8", newline="") as fh:
        reader = csv.reader(fh, delimiter=";")
        next(reader, None)
        persons = []
        for row in reader:
            if len(persons) >= limit:
                break
            if row:
                persons.append(Person.create(row[0], row[1], row[2]))
    return persons


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def connections(engine):
    return ConnectionFactory(engine)


@pytest.fixture
def repository(connections):
    repo = SqlPersonRepository(connections)
    repo.ensure_schema()
    return repo


@pytest.fixture
def count_rows(engine):
    def _count() -> int:
        with engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(person_table)).scalar_one()

    return _count


@pytest.fixture
def got_persons():
    def _load(limit: int) -> list[Person]:
        return read_csv(GOT_CSV, limit)

    return _load


@pytest.fixture(autouse=True)
def _fresh_shared_repository():
    reset_person_repository()
    yield
    reset_person_repository()
