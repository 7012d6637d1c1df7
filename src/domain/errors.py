"""Store error taxonomy.

Raised inside the persistence layer and caught at the repository boundary,
where each one is logged and turned into a benign result (None, an empty
list or a no-op).  Callers of the public repository API never see them.

A missing identity is not an error at all: it shows up as None from a
lookup, a zero row count from an update or delete, and the insert fallback
in save().
"""


class StoreError(Exception):
    """Base class for every failure reported by the backing store."""


class StoreUnavailable(StoreError):
    """A connection to the store could not be opened."""


class SchemaConflict(StoreError):
    """A table was created while it already existed."""


class ConstraintViolation(StoreError):
    """A write collided with a uniqueness constraint (duplicate natural key)."""
