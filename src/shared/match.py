"""
Match Entity

A live match between a home and an away team. Holds the current score pair,
the lifecycle status and the identity assigned by the data store.

Lifecycle:
    PENDING -> IN_PROGRESS -> COMPLETED

Status and score are changed through the Scoreboard; the setters here do not
enforce transition order on their own.
"""

from enum import Enum
from typing import Dict, Any, Optional, Sequence, Tuple

from .interfaces import Persistable, Renderable, UNASSIGNED_ID
from .team import Team


# Home score, away score. None until the match is started.
Score = Optional[Tuple[int, int]]


class MatchStatus(Enum):
    """Lifecycle states of a match"""
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


def _normalize_score(score: Optional[Sequence[int]]) -> Score:
    """
    Validate a score pair and convert it to a tuple.

    Raises:
        ValueError: If score is not None or a pair of non-negative ints
    """
    if score is None:
        return None

    try:
        home_score, away_score = score
    except (TypeError, ValueError):
        raise ValueError(f"Invalid score: {score!r}. Must be a (home, away) pair.")

    for value in (home_score, away_score):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"Invalid score: {score!r}. Scores must be non-negative integers.")

    return (home_score, away_score)


class Match(Persistable, Renderable):
    """
    Match between two teams.

    Created PENDING with no score and an unassigned id. Use `create_match`
    rather than building the object by hand.
    """

    def __init__(self, home: Team, away: Team):
        """
        Initialize a pending match

        Args:
            home: Home team
            away: Away team
        """
        self._home = home
        self._away = away
        self._score: Score = None
        self._status = MatchStatus.PENDING
        self._id = UNASSIGNED_ID

    @classmethod
    def create_match(cls, home: Team, away: Team) -> 'Match':
        """Factory for a new pending match"""
        return cls(home, away)

    @property
    def id(self) -> int:
        return self._id

    def set_id(self, item_id: int) -> None:
        self._id = item_id

    @property
    def home(self) -> Team:
        return self._home

    @property
    def away(self) -> Team:
        return self._away

    @property
    def score(self) -> Score:
        return self._score

    @property
    def status(self) -> MatchStatus:
        return self._status

    @property
    def is_in_progress(self) -> bool:
        return self._status == MatchStatus.IN_PROGRESS

    @property
    def total_score(self) -> Optional[int]:
        """Sum of both scores, or None if the match has no score"""
        if self._score is None:
            return None
        return sum(self._score)

    def update_score(self, score: Optional[Sequence[int]]) -> None:
        """
        Replace the score pair.

        Args:
            score: (home, away) pair of non-negative ints, or None to clear

        Raises:
            ValueError: If score is malformed
        """
        self._score = _normalize_score(score)

    def update_status(self, status: MatchStatus) -> None:
        self._status = status

    def start(self) -> None:
        """Mark the match as in progress"""
        self.update_status(MatchStatus.IN_PROGRESS)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'home': self._home.to_dict(),
            'away': self._away.to_dict(),
            'score': list(self._score) if self._score is not None else None
        }

    def __str__(self) -> str:
        """Summary line, e.g. 'Mexico 0 - Canada 5'. Empty if there is no score."""
        if self._score is None:
            return ""
        home_score, away_score = self._score
        return f"{self._home.name} {home_score} - {self._away.name} {away_score}"

    def __repr__(self) -> str:
        return (
            f"Match(id={self._id}, home={self._home.name!r}, away={self._away.name!r}, "
            f"score={self._score}, status={self._status.name})"
        )


def create_match(home: Team, away: Team) -> Match:
    """
    Create a pending match between two teams.

    Args:
        home: Home team
        away: Away team

    Returns:
        Match with no score, PENDING status and an unassigned id
    """
    return Match.create_match(home, away)
