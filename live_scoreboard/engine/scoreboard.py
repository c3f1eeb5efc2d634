"""
Registry of live football matches.

Owns every live match keyed by its id and derives the sorted scoreboard on
demand.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional

from .exceptions import DuplicateMatchError, MatchNotFoundError
from .match import Match
from ..logger.event_logger import ScoreboardEventLogger


class FootballScoreboard:
    """
    In-memory scoreboard of live football matches.

    Matches returned by start_match are the registry's own instances, so score
    updates made on them show up in the scoreboard straight away.

    Scoreboard order:
    - Total score, highest first
    - Equal totals: most recently updated first
    - Still equal: order the matches were started in
    """

    def __init__(self,
                 clock: Callable[[], datetime] = datetime.now,
                 event_logger: Optional[ScoreboardEventLogger] = None):
        """
        Initialize an empty scoreboard.

        Args:
            clock: Time source handed to every started match
            event_logger: Optional logger recording starts, updates and removals
        """
        self._clock = clock
        self.event_logger = event_logger
        self._live_matches: Dict[str, Match] = {}

    def start_match(self, home_name: str, away_name: str, match_id: str) -> Match:
        """
        Start a new match at 0-0 and register it.

        Args:
            home_name: Name of the home team
            away_name: Name of the away team
            match_id: Identifier, unique among live matches

        Returns:
            The registered match

        Raises:
            DuplicateMatchError: If a live match already uses match_id
        """
        if match_id in self._live_matches:
            raise DuplicateMatchError(match_id)

        on_update = self.event_logger.log_score_updated if self.event_logger is not None else None
        match = Match(home_name, away_name, match_id, clock=self._clock, on_update=on_update)
        self._live_matches[match_id] = match

        if self.event_logger is not None:
            self.event_logger.log_match_started(match)

        return match

    def remove_match(self, match_id: str) -> None:
        """
        Remove a live match.

        Raises:
            MatchNotFoundError: If no live match uses match_id
        """
        if match_id not in self._live_matches:
            raise MatchNotFoundError(match_id)

        match = self._live_matches.pop(match_id)
        match.detach()

        if self.event_logger is not None:
            self.event_logger.log_match_removed(match)

    def get_match(self, match_id: str) -> Optional[Match]:
        return self._live_matches.get(match_id)

    @property
    def live_matches(self) -> Mapping[str, Match]:
        """Read-only view of live matches by id."""
        return MappingProxyType(self._live_matches)

    @property
    def scoreboard(self) -> List[Match]:
        """Live matches sorted by total score, then by most recent update."""
        # sorted() is stable with reverse=True, so full ties keep start order
        return sorted(
            self._live_matches.values(),
            key=lambda match: (match.total_score, match.last_updated_date),
            reverse=True
        )

    def __len__(self) -> int:
        return len(self._live_matches)

    def __contains__(self, match_id: object) -> bool:
        return match_id in self._live_matches
