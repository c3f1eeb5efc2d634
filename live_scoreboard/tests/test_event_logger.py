"""
Test scoreboard event logs.

Validates event ordering, PM4Py columns and CSV export.
"""

import os

import pandas as pd
import pytest

from live_scoreboard.engine.scoreboard import FootballScoreboard
from live_scoreboard.logger.event_logger import ScoreboardEventLogger


@pytest.fixture
def event_logger(clock):
    return ScoreboardEventLogger(clock=clock)


@pytest.fixture
def played(event_logger, clock):
    """Two matches with a few updates and one removal."""
    scoreboard = FootballScoreboard(clock=clock, event_logger=event_logger)

    home = scoreboard.start_match("Spain", "Brazil", "1")
    away = scoreboard.start_match("Mexico", "Canada", "2")

    clock.advance(1)
    home.update_score(1, 0)
    clock.advance(1)
    away.update_score(0, 1)
    clock.advance(1)
    home.update_score(2, 0)
    clock.advance(1)
    scoreboard.remove_match("2")

    return event_logger


def test_events_in_logging_order(played):
    """Test that sequence numbers follow the order events were logged."""
    activities = [e.activity for e in played.events]

    assert activities == [
        'match_started', 'match_started',
        'score_updated', 'score_updated', 'score_updated',
        'match_removed',
    ]
    assert [e.sequence_number for e in played.events] == list(range(6))


def test_timestamps_chronological(played):
    """Test that timestamps are in chronological order."""
    df = played.to_dataframe()

    assert df['time:timestamp'].is_monotonic_increasing, "Timestamps are not in chronological order"


def test_events_carry_score_after_update(played):
    """Test that each event records the score at that point."""
    updates = [(e.match_id, e.home_score, e.away_score, e.total_score)
               for e in played.events if e.activity == 'score_updated']

    assert updates == [("1", 1, 0, 1), ("2", 0, 1, 1), ("1", 2, 0, 2)]


def test_required_columns_present(played):
    """Test that all required PM4Py columns are present."""
    df = played.to_dataframe()

    required_columns = [
        'timestamp', 'case_id', 'activity', 'match_id', 'home_name',
        'away_name', 'home_score', 'away_score', 'total_score',
        'case:concept:name', 'concept:name', 'time:timestamp'
    ]
    missing_columns = [col for col in required_columns if col not in df.columns]

    assert len(missing_columns) == 0, f"Missing required columns: {missing_columns}"
    assert df.isnull().sum().sum() == 0, "Event log has missing values"


def test_empty_log(event_logger):
    """Test that an empty log gives an empty frame and no stats."""
    df = event_logger.to_dataframe()

    assert len(df) == 0
    assert 'concept:name' in df.columns
    assert event_logger.get_summary_stats() == {}


def test_summary_stats(played):
    """Test summary statistics."""
    stats = played.get_summary_stats()

    assert stats == {
        'total_events': 6,
        'matches_seen': 2,
        'matches_started': 2,
        'score_updates': 3,
        'matches_removed': 1,
        'total_goals': 3,
    }


def test_export_to_csv(played, tmp_path):
    """Test that the CSV export reads back with one row per event."""
    csv_file = os.path.join(tmp_path, "events.csv")
    played.export_to_csv(csv_file)

    df = pd.read_csv(csv_file, dtype={'match_id': str, 'case_id': str, 'case:concept:name': str})

    assert len(df) == 6
    assert list(df['activity']) == [e.activity for e in played.events]
    assert list(df['case:concept:name']) == [e.case_id for e in played.events]


def test_export_empty_log_writes_nothing(event_logger, tmp_path, capsys):
    """Test that exporting an empty log skips the file."""
    csv_file = os.path.join(tmp_path, "events.csv")
    event_logger.export_to_csv(csv_file)

    assert not os.path.exists(csv_file)
    assert "No events to export" in capsys.readouterr().out


def test_reused_id_gets_new_case(event_logger, clock):
    """Test that a match restarted under a removed id is a separate case."""
    scoreboard = FootballScoreboard(clock=clock, event_logger=event_logger)

    scoreboard.start_match("Spain", "Brazil", "1").update_score(3, 0)
    scoreboard.remove_match("1")
    clock.advance(1)
    scoreboard.start_match("Mexico", "Canada", "1").update_score(1, 0)

    case_ids = [e.case_id for e in event_logger.events]
    assert case_ids[:3] == [case_ids[0]] * 3
    assert case_ids[3:] == [case_ids[3]] * 2
    assert case_ids[0] != case_ids[3]
    assert all(e.match_id == "1" for e in event_logger.events)

    stats = event_logger.get_summary_stats()
    assert stats['matches_seen'] == 2
    assert stats['total_goals'] == 4


def test_process_log_one_case_per_match(played):
    """Test that the PM4Py-formatted log keeps the case and activity columns."""
    log = played.to_process_log()

    assert len(log) == 6
    assert log['case:concept:name'].nunique() == 2
    assert set(log['concept:name']) == {'match_started', 'score_updated', 'match_removed'}


def test_export_to_xes(played, tmp_path):
    """Test that the XES export writes a file."""
    xes_file = os.path.join(tmp_path, "events.xes")
    played.export_to_xes(xes_file)

    assert os.path.exists(xes_file)
    assert os.path.getsize(xes_file) > 0


def test_export_empty_log_skips_xes(event_logger, tmp_path):
    """Test that exporting an empty log to XES skips the file."""
    xes_file = os.path.join(tmp_path, "events.xes")
    event_logger.export_to_xes(xes_file)

    assert not os.path.exists(xes_file)
