"""
Scoreboard event logging for process mining analysis.

Records match starts, score updates and removals as PM4Py-compatible events,
one case per started match.
"""

import pandas as pd
from datetime import datetime
from typing import Any, Callable, Dict, List, TYPE_CHECKING
from dataclasses import dataclass, asdict, fields

if TYPE_CHECKING:
    from ..engine.match import Match


@dataclass
class ScoreboardEvent:
    """
    Single scoreboard event.

    Conforms to PM4Py event log schema with the match score attached.
    """
    # PM4Py required fields
    timestamp: datetime
    case_id: str  # one case per started match
    activity: str  # match_started/score_updated/match_removed

    # Match context
    match_id: str
    home_name: str
    away_name: str

    # Score after the event
    home_score: int
    away_score: int
    total_score: int

    # Sequence tracking
    sequence_number: int = 0


class ScoreboardEventLogger:
    """
    Event logger for a live scoreboard.

    Captures registry activity in order. Exports to both CSV and XES formats
    for process mining analysis.
    """

    MATCH_STARTED = 'match_started'
    SCORE_UPDATED = 'score_updated'
    MATCH_REMOVED = 'match_removed'

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Initialize an empty event log.

        Args:
            clock: Time source for removal events
        """
        self.events: List[ScoreboardEvent] = []
        self.sequence_counter = 0
        self._clock = clock

        # Ids can be reused after removal, so cases are keyed by match instance
        self._case_ids: Dict['Match', str] = {}

    def log_match_started(self, match: 'Match') -> None:
        self._case_ids[match] = f"{match.match_id}#{self.sequence_counter}"
        self._log(self.MATCH_STARTED, match, match.created_date)

    def log_score_updated(self, match: 'Match') -> None:
        self._log(self.SCORE_UPDATED, match, match.last_updated_date)

    def log_match_removed(self, match: 'Match') -> None:
        self._log(self.MATCH_REMOVED, match, self._clock())
        self._case_ids.pop(match, None)

    def _log(self, activity: str, match: 'Match', timestamp: datetime) -> None:
        state = match.to_dict()
        event = ScoreboardEvent(
            timestamp=timestamp,
            case_id=self._case_ids.get(match, state['match_id']),
            activity=activity,
            match_id=state['match_id'],
            home_name=state['home_name'],
            away_name=state['away_name'],
            home_score=state['home_score'],
            away_score=state['away_score'],
            total_score=state['total_score'],
            sequence_number=self.sequence_counter
        )

        self.events.append(event)
        self.sequence_counter += 1

    def to_dataframe(self) -> pd.DataFrame:
        """
        Event log as a DataFrame with the PM4Py standard columns added.

        Returns:
            One row per event, in logging order
        """
        columns = [f.name for f in fields(ScoreboardEvent)]
        df = pd.DataFrame([asdict(event) for event in self.events], columns=columns)

        df['case:concept:name'] = df['case_id']
        df['concept:name'] = df['activity']
        df['time:timestamp'] = pd.to_datetime(df['timestamp'])

        return df

    def to_process_log(self) -> pd.DataFrame:
        """Event log formatted for PM4Py discovery algorithms."""
        import pm4py

        return pm4py.format_dataframe(
            self.to_dataframe(),
            case_id='case:concept:name',
            activity_key='concept:name',
            timestamp_key='time:timestamp'
        )

    def export_to_csv(self, filepath: str) -> None:
        """
        Export event log to CSV format.

        Args:
            filepath: Output file path
        """
        if not self.events:
            print("No events to export")
            return

        self.to_dataframe().to_csv(filepath, index=False)
        print(f"Event log exported to {filepath}")

    def export_to_xes(self, filepath: str) -> None:
        """
        Export event log to XES format using PM4Py.

        Args:
            filepath: Output file path (.xes)
        """
        if not self.events:
            print("No events to export")
            return

        import pm4py

        pm4py.write_xes(self.to_process_log(), filepath)
        print(f"XES event log exported to {filepath}")

    def get_summary_stats(self) -> Dict[str, Any]:
        """Get summary statistics for the event log."""
        if not self.events:
            return {}

        df = self.to_dataframe()
        final_scores = df.groupby('case_id', sort=False).last()

        return {
            'total_events': len(df),
            'matches_seen': df['case_id'].nunique(),
            'matches_started': int((df['activity'] == self.MATCH_STARTED).sum()),
            'score_updates': int((df['activity'] == self.SCORE_UPDATED).sum()),
            'matches_removed': int((df['activity'] == self.MATCH_REMOVED).sum()),
            'total_goals': int(final_scores['total_score'].sum()),
        }

    def __len__(self) -> int:
        return len(self.events)
