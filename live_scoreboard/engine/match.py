"""
Live football match state.

Holds the teams, scores and timestamps of one ongoing match. Score updates are
applied directly on the match; the owning scoreboard sees them immediately.
"""

from datetime import datetime
from typing import Any, Callable, Dict, NamedTuple, Optional


class MatchScore(NamedTuple):
    """Snapshot of a match score."""
    home_score: int
    away_score: int
    total_score: int


class Match:
    """
    Single football match with a mutable score.

    Tracks:
    - Home and away team names
    - Home, away and total score
    - Creation and last update timestamps
    """

    def __init__(self,
                 home_name: str,
                 away_name: str,
                 match_id: str,
                 clock: Callable[[], datetime] = datetime.now,
                 on_update: Optional[Callable[["Match"], None]] = None):
        """
        Initialize a match at 0-0.

        Args:
            home_name: Name of the home team
            away_name: Name of the away team
            match_id: Unique identifier for the match
            clock: Zero-argument callable returning the current time
            on_update: Called with the match after every score update
        """
        self._home_name = home_name
        self._away_name = away_name
        self._match_id = match_id
        self._clock = clock
        self._on_update = on_update

        self._home_score = 0
        self._away_score = 0
        self._total_score = 0

        self._created_date = clock()
        self._last_updated_date = self._created_date

    @property
    def home_name(self) -> str:
        return self._home_name

    @property
    def away_name(self) -> str:
        return self._away_name

    @property
    def match_id(self) -> str:
        return self._match_id

    @property
    def home_score(self) -> int:
        return self._home_score

    @property
    def away_score(self) -> int:
        return self._away_score

    @property
    def total_score(self) -> int:
        return self._total_score

    @property
    def score(self) -> MatchScore:
        return MatchScore(self._home_score, self._away_score, self._total_score)

    @property
    def created_date(self) -> datetime:
        return self._created_date

    @property
    def last_updated_date(self) -> datetime:
        return self._last_updated_date

    def update_score(self, new_home_score: int, new_away_score: int) -> None:
        """
        Replace both scores and stamp the update time.

        Scores are taken as given, so corrections that lower a score are
        accepted.

        Args:
            new_home_score: New score for the home team
            new_away_score: New score for the away team
        """
        self._home_score = new_home_score
        self._away_score = new_away_score
        self._total_score = new_home_score + new_away_score

        # Never move backwards if the wall clock is adjusted
        self._last_updated_date = max(self._last_updated_date, self._clock())

        if self._on_update is not None:
            self._on_update(self)

    def detach(self) -> None:
        """Stop reporting score updates; called when the match is removed."""
        self._on_update = None

    def to_dict(self) -> Dict[str, Any]:
        """Flat dictionary view of the match."""
        return {
            'match_id': self._match_id,
            'home_name': self._home_name,
            'away_name': self._away_name,
            'home_score': self._home_score,
            'away_score': self._away_score,
            'total_score': self._total_score,
            'created_date': self._created_date,
            'last_updated_date': self._last_updated_date,
        }

    def __repr__(self) -> str:
        return (f"Match(id={self._match_id!r}, {self._home_name} {self._home_score}"
                f" - {self._away_name} {self._away_score})")
