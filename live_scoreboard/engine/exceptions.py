"""
Errors raised by the live scoreboard registry.
"""


class ScoreboardError(Exception):
    """Base class for scoreboard registry errors."""

    def __init__(self, match_id: str, message: str):
        super().__init__(message)
        self.match_id = match_id


class DuplicateMatchError(ScoreboardError):
    """A live match with the given id already exists."""

    def __init__(self, match_id: str):
        super().__init__(match_id, f"Live match with id: {match_id} already exists.")


class MatchNotFoundError(ScoreboardError):
    """No live match exists with the given id."""

    def __init__(self, match_id: str):
        super().__init__(match_id, f"Live match with id: {match_id} does not exist.")
