#!/usr/bin/env python3
"""
⚽ Live Football Scoreboard Demo
================================

Starts the five sample matches, applies their scores and prints the
scoreboard, then walks through a removal and an event log breakdown.

Usage:
    python -m live_scoreboard.demo
"""

import sys

from .engine.exceptions import ScoreboardError
from .engine.scoreboard import FootballScoreboard
from .logger.event_logger import ScoreboardEventLogger
from .scripts.run_scoreboard import SAMPLE_FIXTURES, print_scoreboard, run_fixtures


def main():
    """Run the sample scoreboard."""

    print("⚽ Live Football Scoreboard - Demo")
    print("=" * 60)

    event_logger = ScoreboardEventLogger()
    scoreboard = FootballScoreboard(event_logger=event_logger)

    try:
        run_fixtures(SAMPLE_FIXTURES, scoreboard)
        print_scoreboard(scoreboard.scoreboard)

        leader = scoreboard.scoreboard[0]
        print(f"\n📉 Removing leader: {leader.home_name} vs {leader.away_name}")
        scoreboard.remove_match(leader.match_id)
        print_scoreboard(scoreboard.scoreboard)

        print(f"\n🔁 Trying to remove it again...")
        scoreboard.remove_match(leader.match_id)

    except ScoreboardError as e:
        print(f"⚠️  {e}")

    df = event_logger.to_dataframe()

    print(f"\n=== EVENT BREAKDOWN ===")
    for activity, count in df['activity'].value_counts().items():
        percentage = (count / len(df)) * 100
        print(f"{activity:14}: {count:3} ({percentage:4.1f}%)")

    print(f"\n=== SAMPLE EVENT LOG ===")
    sample_cols = ['timestamp', 'activity', 'match_id', 'home_score', 'away_score']
    print(df[sample_cols].head(5).to_string(index=False))

    return True


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
