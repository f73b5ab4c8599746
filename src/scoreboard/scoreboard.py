"""
Scoreboard System

Live scoreboard over a keyed data store. Starts matches, records score
updates, completes matches and produces a ranked summary of the matches
currently in progress.

The scoreboard never keeps its own copy of match state: every mutation
re-fetches the match from the store by identity.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Sequence

from logging_config import get_logger
from shared.match import Match, MatchStatus
from stores.base_store import DataStore


logger = get_logger(__name__)


def _summary_sort_key(match: Match):
    """Rank by total score, then by identity (later matches win ties)"""
    return (match.total_score or 0, match.id)


class ScoreboardInterface(ABC):
    """Operations offered by a live scoreboard"""

    @abstractmethod
    def add(self, match: Match) -> None:
        pass

    @abstractmethod
    def update(self, match_id: int, score: Optional[Sequence[int]]) -> bool:
        pass

    @abstractmethod
    def complete(self, match_id: int) -> bool:
        pass

    @abstractmethod
    def get_summaries(self) -> List[Match]:
        pass

    @abstractmethod
    def get_text_summaries(self) -> List[str]:
        pass


class Scoreboard(ScoreboardInterface):
    """
    Live scoreboard for matches in progress.

    Unknown identities are not errors: update() and complete() return False
    and leave the store untouched.
    """

    def __init__(self, store: DataStore[Match]):
        """
        Initialize scoreboard

        Args:
            store: Data store holding the matches. Kept for the scoreboard's lifetime.
        """
        self._store = store

    @property
    def store(self) -> DataStore[Match]:
        return self._store

    def add(self, match: Match) -> None:
        """
        Start a match and put it on the board.

        Resets the score to 0-0, marks the match in progress and stores it,
        which assigns its identity. Adding the same match twice stores it
        under two identities; callers must not do that.

        Args:
            match: Match to start
        """
        match.update_score((0, 0))
        match.start()
        self._store.add(match)
        logger.debug(f"Started match {match.id}: {match.home.name} vs {match.away.name}")

    def update(self, match_id: int, score: Optional[Sequence[int]]) -> bool:
        """
        Replace the score of a stored match.

        Args:
            match_id: Identity of the match
            score: New (home, away) score pair

        Returns:
            True if the match was found and updated, False otherwise

        Raises:
            ValueError: If score is malformed
        """
        match = self._store.get_by_id(match_id)
        if match is None:
            logger.warning(f"Cannot update score: no match with id {match_id}")
            return False

        match.update_score(score)
        logger.debug(f"Updated match {match_id}: {match}")
        return True

    def complete(self, match_id: int) -> bool:
        """
        Finish a match in progress, removing it from the summaries.

        Only in-progress matches can be completed. Pending or already
        completed matches are left unchanged.

        Args:
            match_id: Identity of the match

        Returns:
            True if the match was completed, False otherwise
        """
        match = self._store.get_by_id(match_id)
        if match is None:
            logger.warning(f"Cannot complete: no match with id {match_id}")
            return False

        if not match.is_in_progress:
            logger.warning(f"Cannot complete match {match_id}: status is {match.status.value}")
            return False

        match.update_status(MatchStatus.COMPLETED)
        logger.debug(f"Completed match {match_id}")
        return True

    def get_summaries(self) -> List[Match]:
        """
        Get matches in progress, ranked.

        Ordered by descending total score; ties go to the most recently
        added match (higher identity first). A match without a score counts
        as 0.

        Returns:
            Live match references in ranking order
        """
        in_progress = self._store.get_all_by(lambda match: match.is_in_progress)
        return sorted(in_progress, key=_summary_sort_key, reverse=True)

    def get_text_summaries(self) -> List[str]:
        """One summary line per match in progress, in ranking order"""
        return [str(match) for match in self.get_summaries()]

    def get_summary_dicts(self) -> List[Dict[str, Any]]:
        """Ranked summaries as dictionaries for JSON serialization"""
        return [match.to_dict() for match in self.get_summaries()]

    def __repr__(self) -> str:
        return f"Scoreboard(store={self._store!r})"
