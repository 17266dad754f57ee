from enum import Enum
from typing import List

from .errors import ValidationError


class TournamentStatus(str, Enum):
    """
    Tournament status. Changes only through explicit updates, and any
    status may be set from any other (a completed tournament can be
    reopened).
    """
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> List[str]:
        return [s.value for s in cls]


def parse_status(value) -> TournamentStatus:
    try:
        return TournamentStatus(value)
    except ValueError:
        raise ValidationError(
            f"status must be one of {', '.join(TournamentStatus.values())}",
            field='status'
        )
