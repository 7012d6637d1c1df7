"""Tests for the person ORM table definition."""

from sqlalchemy import Identity, UniqueConstraint
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from src.infrastructure.database import Base
from src.infrastructure.persistence.models.person import TABLE_NAME, person_table


def test_table_is_registered_with_base_metadata():
    assert Base.metadata.tables[TABLE_NAME] is person_table


def test_id_is_an_always_generated_identity_primary_key():
    id_column = person_table.c.id
    assert id_column.primary_key
    assert isinstance(id_column.identity, Identity)
    assert id_column.identity.always is True


def test_attribute_columns_are_varchar_255():
    for name in ("name", "city", "house"):
        assert person_table.c[name].type.length == 255
        assert person_table.c[name].nullable


def test_natural_key_is_unique():
    uniques = [c for c in person_table.constraints if isinstance(c, UniqueConstraint)]
    assert [[col.name for col in u.columns] for u in uniques] == [["name", "city", "house"]]
    assert uniques[0].name == "person_uq"


def test_postgres_ddl_uses_generated_always_identity():
    ddl = str(CreateTable(person_table).compile(dialect=postgresql.dialect()))
    assert "GENERATED ALWAYS AS IDENTITY" in ddl
    assert "UNIQUE (name, city, house)" in ddl
