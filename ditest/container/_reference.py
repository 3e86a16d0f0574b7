from __future__ import annotations

import enum
from dataclasses import dataclass


class InvalidBehavior(enum.Enum):
    """What the container should do when a referenced service does not exist"""

    EXCEPTION_ON_INVALID_REFERENCE = 1
    NULL_ON_INVALID_REFERENCE = 2
    IGNORE_ON_INVALID_REFERENCE = 3


@dataclass(frozen=True)
class Reference:
    """A placeholder for "the service registered under this id".

    Used as a definition argument, method call argument or parameter value
    wherever another service should be wired in instead of a literal value.
    """

    id: str
    invalid_behavior: InvalidBehavior = InvalidBehavior.EXCEPTION_ON_INVALID_REFERENCE

    def __str__(self) -> str:
        return self.id
