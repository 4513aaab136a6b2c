"""Reference to a game unit affected by a command."""

from dataclasses import dataclass
from enum import Enum


class ReferenceType(Enum):
    """Kind of unit a reference points at."""

    NULL = "null"
    SHIP = "ship"
    PLANET = "planet"
    MINEFIELD = "minefield"


@dataclass(frozen=True)
class Reference:
    """Typed unit reference; the default instance refers to nothing."""

    type: ReferenceType = ReferenceType.NULL
    id: int = 0

    def is_set(self) -> bool:
        """Check whether this reference points at a unit."""
        return self.type is not ReferenceType.NULL
