"""Translation of SQLAlchemy exceptions into the StoreError taxonomy."""

from __future__ import annotations

from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    ProgrammingError,
    SQLAlchemyError,
)

from src.domain.errors import (
    ConstraintViolation,
    SchemaConflict,
    StoreError,
    StoreUnavailable,
)


def _driver_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


def translate_error(exc: SQLAlchemyError) -> StoreError:
    """Map a SQLAlchemy exception onto the matching StoreError subclass.

    The caller chains the original with ``raise ... from exc``.
    """
    message = _driver_message(exc)
    if isinstance(exc, IntegrityError):
        return ConstraintViolation(message)
    # SQLite reports duplicate DDL as OperationalError, PostgreSQL as ProgrammingError.
    if isinstance(exc, (OperationalError, ProgrammingError)) and "already exists" in message.lower():
        return SchemaConflict(message)
    if isinstance(exc, InterfaceError) or (isinstance(exc, DBAPIError) and exc.connection_invalidated):
        return StoreUnavailable(message)
    return StoreError(message)
