"""
Event logging for the live scoreboard.
Provides PM4Py-compatible event logs of match starts, score updates and removals.
"""

from .event_logger import ScoreboardEvent, ScoreboardEventLogger

__all__ = ['ScoreboardEvent', 'ScoreboardEventLogger']
