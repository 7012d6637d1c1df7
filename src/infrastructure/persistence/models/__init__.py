"""ORM model registry. Importing it registers every mapper class with
Base.metadata before Alembic or SQLAlchemy runs.
"""

from src.infrastructure.persistence.models.person import TABLE_NAME, Person, person_table

__all__ = [
    "TABLE_NAME",
    "Person",
    "person_table",
]
