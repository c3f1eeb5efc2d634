"""
Live scoreboard script.

Provides the CLI interface for running sample or randomly generated fixtures
through the scoreboard and printing the result.
"""

import argparse
import os
import sys
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..engine.exceptions import ScoreboardError
from ..engine.match import Match
from ..engine.scoreboard import FootballScoreboard
from ..logger.event_logger import ScoreboardEventLogger

# (match_id, home, away, home_score, away_score)
Fixture = Tuple[str, str, str, int, int]

SAMPLE_FIXTURES: List[Fixture] = [
    ("1", "Mexico", "Canada", 0, 5),
    ("2", "Spain", "Brazil", 10, 2),
    ("3", "Germany", "France", 2, 2),
    ("4", "Uruguay", "Italy", 6, 6),
    ("5", "Argentina", "Australia", 3, 1),
]

TEAM_POOL = [
    "Mexico", "Canada", "Spain", "Brazil", "Germany", "France", "Uruguay",
    "Italy", "Argentina", "Australia", "England", "Portugal", "Netherlands",
    "Japan", "Morocco", "Senegal", "Croatia", "Belgium", "Korea", "Ghana",
]

DEFAULT_SEED = 42
DEFAULT_GOAL_RATE = 1.4  # Poisson mean goals per team


def generate_random_fixtures(n_matches: int,
                             random_seed: int = DEFAULT_SEED,
                             goal_rate: float = DEFAULT_GOAL_RATE) -> List[Fixture]:
    """
    Generate fixtures with Poisson-distributed goals.

    Teams are drawn without replacement from TEAM_POOL while it lasts, then
    suffixed with a round number.

    Args:
        n_matches: Number of fixtures
        random_seed: Seed for reproducibility
        goal_rate: Mean goals per team

    Returns:
        List of fixtures with ids "1".."n"
    """
    rng = np.random.default_rng(random_seed)
    fixtures = []

    for i in range(n_matches):
        round_number, slot = divmod(i, len(TEAM_POOL) // 2)
        if slot == 0:
            order = rng.permutation(len(TEAM_POOL))

        home = TEAM_POOL[order[2 * slot]]
        away = TEAM_POOL[order[2 * slot + 1]]
        if round_number > 0:
            home = f"{home} {round_number + 1}"
            away = f"{away} {round_number + 1}"

        home_goals, away_goals = rng.poisson(goal_rate, size=2)
        fixtures.append((str(i + 1), home, away, int(home_goals), int(away_goals)))

    return fixtures


def run_fixtures(fixtures: Sequence[Fixture],
                 scoreboard: Optional[FootballScoreboard] = None,
                 remove_ids: Sequence[str] = ()) -> FootballScoreboard:
    """
    Start each fixture, apply its score and remove the requested matches.

    Raises:
        ScoreboardError: On duplicate fixture ids or unknown removal ids
    """
    if scoreboard is None:
        scoreboard = FootballScoreboard(event_logger=ScoreboardEventLogger())

    for match_id, home, away, home_score, away_score in fixtures:
        scoreboard.start_match(home, away, match_id).update_score(home_score, away_score)

    for match_id in remove_ids:
        scoreboard.remove_match(match_id)

    return scoreboard


def format_match(match: Match) -> str:
    return f"{match.home_name} {match.home_score} - {match.away_name} {match.away_score}"


def print_scoreboard(scoreboard: List[Match], quiet: bool = False) -> None:
    """Print matches in scoreboard order."""
    if not quiet:
        print("Scoreboard:\n")

    for match in scoreboard:
        print(format_match(match))


def print_log_summary(event_logger: ScoreboardEventLogger) -> None:
    """Print event log statistics."""
    stats = event_logger.get_summary_stats()
    if not stats:
        return

    print(f"\n=== EVENT LOG ===")
    print(f"Total events: {stats['total_events']}")
    print(f"Matches started: {stats['matches_started']}")
    print(f"Score updates: {stats['score_updates']}")
    print(f"Matches removed: {stats['matches_removed']}")
    print(f"Total goals: {stats['total_goals']}")


def export_logs(event_logger: ScoreboardEventLogger, out_dir: str, xes: bool = False) -> List[str]:
    """
    Export the event log to out_dir.

    Returns:
        Paths written
    """
    os.makedirs(out_dir, exist_ok=True)

    csv_path = os.path.join(out_dir, "scoreboard_events.csv")
    event_logger.export_to_csv(csv_path)
    paths = [csv_path]

    if xes:
        xes_path = os.path.join(out_dir, "scoreboard_events.xes")
        event_logger.export_to_xes(xes_path)
        paths.append(xes_path)

    return paths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Live Football Scoreboard')
    parser.add_argument('--random', type=int, default=None, metavar='N',
                        help='Start N randomly generated matches instead of the sample fixtures')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed for reproducibility')
    parser.add_argument('--goal-rate', type=float, default=DEFAULT_GOAL_RATE, help='Mean goals per team')
    parser.add_argument('--remove', action='append', default=[], metavar='ID',
                        help='Remove a live match before printing (repeatable)')
    parser.add_argument('--export-dir', type=str, default=None, help='Output directory for event logs')
    parser.add_argument('--xes', action='store_true', help='Also export the event log as XES')
    parser.add_argument('--quiet', action='store_true', help='Print only the scoreboard lines')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.random is not None:
        fixtures = generate_random_fixtures(args.random, random_seed=args.seed, goal_rate=args.goal_rate)
    else:
        fixtures = SAMPLE_FIXTURES

    event_logger = ScoreboardEventLogger()
    scoreboard = FootballScoreboard(event_logger=event_logger)

    try:
        run_fixtures(fixtures, scoreboard, remove_ids=args.remove)
    except ScoreboardError as e:
        print(f"Error: {e}")
        return 1

    print_scoreboard(scoreboard.scoreboard, quiet=args.quiet)

    if not args.quiet:
        print_log_summary(event_logger)

    if args.export_dir:
        export_logs(event_logger, args.export_dir, xes=args.xes)

    return 0


if __name__ == "__main__":
    sys.exit(main())
