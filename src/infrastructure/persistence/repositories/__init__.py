"""Concrete SQLAlchemy repository implementations.

Exports SqlPersonRepository and the process-wide accessor used at the
application boundary.  Applications that manage their own engine construct
SqlPersonRepository(ConnectionFactory(engine)) directly instead.
"""

from __future__ import annotations

import threading

from src.infrastructure.database import ConnectionFactory, get_engine

from .persons import SqlPersonRepository

_instance: SqlPersonRepository | None = None
_instance_lock = threading.Lock()


def get_person_repository(connections: ConnectionFactory | None = None) -> SqlPersonRepository:
    """Return the shared repository, creating it and its table on first use.

    connections only matters for the call that creates the instance; it
    defaults to a factory over get_engine().  Concurrent first callers all
    receive the same instance and the table is ensured once.

    When the table cannot be ensured (store unavailable) the repository is
    returned without being cached, so the next call retries.
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                repository = SqlPersonRepository(connections or ConnectionFactory(get_engine()))
                if not repository.ensure_schema():
                    return repository
                _instance = repository
    return _instance


def reset_person_repository() -> None:
    """Forget the shared repository so the next access re-detects the schema."""
    global _instance
    with _instance_lock:
        _instance = None


__all__ = [
    "SqlPersonRepository",
    "get_person_repository",
    "reset_person_repository",
]
