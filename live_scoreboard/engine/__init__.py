"""
Live scoreboard engine components.

This module contains:
- Match state and score updates
- The registry of live matches and its scoreboard ordering
- Registry errors
"""

from .exceptions import ScoreboardError, DuplicateMatchError, MatchNotFoundError
from .match import Match, MatchScore
from .scoreboard import FootballScoreboard

__all__ = ['ScoreboardError', 'DuplicateMatchError', 'MatchNotFoundError',
           'Match', 'MatchScore', 'FootballScoreboard']
