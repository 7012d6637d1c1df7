"""Persistence package.

Importing this package registers the ORM mappers with Base.metadata
(required for Alembic autogenerate) and exports the repository
implementation and its shared-instance accessor.
"""

from src.infrastructure.persistence.models import *  # noqa: F401, F403
from src.infrastructure.persistence.models import __all__ as _orm_all
from src.infrastructure.persistence.repositories import (
    SqlPersonRepository,
    get_person_repository,
    reset_person_repository,
)

__all__ = _orm_all + [
    "SqlPersonRepository",
    "get_person_repository",
    "reset_person_repository",
]
