"""Domain model package.

Domain objects are Pydantic models with no ORM or infrastructure
dependencies.  Import from this package to avoid coupling application code to
individual module paths.
"""

from .person import Person

__all__ = ["Person"]
