"""Domain repository interfaces.

Abstractions are defined here with abc.ABC and @abstractmethod.  Concrete
implementations live in src/infrastructure/persistence/ and are wired at the
application boundary.
"""

from .base import Repository
from .persons import PersonRepository

__all__ = [
    "Repository",
    "PersonRepository",
]
