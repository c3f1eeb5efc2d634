"""
Live Football Scoreboard Package

Tracks ongoing football matches and keeps a live-sorted scoreboard.
"""

__version__ = "1.0.0"
__author__ = "Live Scoreboard Team"

from .engine.exceptions import ScoreboardError, DuplicateMatchError, MatchNotFoundError
from .engine.match import Match, MatchScore
from .engine.scoreboard import FootballScoreboard
from .logger.event_logger import ScoreboardEventLogger

__all__ = [
    "FootballScoreboard",
    "Match",
    "MatchScore",
    "ScoreboardError",
    "DuplicateMatchError",
    "MatchNotFoundError",
    "ScoreboardEventLogger",
]
