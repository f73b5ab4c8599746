#!/usr/bin/env python3
"""
Live Scoreboard Demonstration

Starts the scripted matches from ScoreboardSettings.DEMO_MATCHES, applies
their scores, finishes one of them and prints the ranked summary as text
and as JSON.
"""

import sys
import os
import json
import argparse

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from config.scoreboard_settings import ScoreboardSettings
from logging_config import setup_logging, setup_store_logging, get_logger
from scoreboard import Scoreboard
from shared import Team, create_match
from stores import MemoryDataStore


def run_demo(scoreboard: Scoreboard) -> None:
    """Play the scripted matches on the given scoreboard"""
    logger = get_logger("scoreboard_demo")

    matches = []
    for home, away, home_score, away_score in ScoreboardSettings.DEMO_MATCHES:
        match = create_match(Team(home), Team(away))
        scoreboard.add(match)
        scoreboard.update(match.id, (home_score, away_score))
        matches.append(match)
        logger.info(f"Kickoff #{match.id}: {match}")

    print("📋 Live Summary")
    print("-" * 30)
    for i, line in enumerate(scoreboard.get_text_summaries(), 1):
        print(f"{i}. {line}")
    print()

    finished = matches[0]
    scoreboard.complete(finished.id)
    print(f"🏁 Full time: {finished}")
    print()

    print("📋 Live Summary (JSON)")
    print("-" * 30)
    print(json.dumps(scoreboard.get_summary_dicts(), indent=2))


def main():
    """Demonstrate scoreboard functionality"""
    parser = argparse.ArgumentParser(description="Live scoreboard demo")
    parser.add_argument('--debug', action='store_true',
                        help='Log every scoreboard operation')
    parser.add_argument('--log-file', action='store_true',
                        help='Also write rotating log files')
    args = parser.parse_args()

    setup_logging(
        level="DEBUG" if args.debug else ScoreboardSettings.LOG_LEVEL,
        log_dir=ScoreboardSettings.LOG_DIR,
        enable_console=ScoreboardSettings.ENABLE_CONSOLE_LOGGING,
        enable_file=args.log_file or ScoreboardSettings.ENABLE_FILE_LOGGING,
        format_style="simple"
    )
    setup_store_logging(level="DEBUG" if args.debug else "WARNING")

    print("⚽ Live Scoreboard Demo")
    print("=" * 50)

    scoreboard = Scoreboard(MemoryDataStore("matches"))
    run_demo(scoreboard)

    print()
    print("✅ Scoreboard demonstration complete!")


if __name__ == "__main__":
    main()
