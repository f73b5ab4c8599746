"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Fresh memory stores and scoreboards
- Match factories
- A populated scoreboard with every odd-indexed match completed
"""

import sys
import random
from pathlib import Path
from typing import Callable, List, Tuple

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
tests_path = project_root / "tests"


def pytest_configure(config):
    """Configure pytest - runs very early in startup.

    src/ MUST come before tests/ so packages like `stores` and `scoreboard`
    are not shadowed by the test directories of the same name.
    """
    new_path = [p for p in sys.path if p not in (str(tests_path), str(src_path))]
    new_path.insert(0, str(src_path))
    sys.path[:] = new_path


# ============================================================================
# STORE / SCOREBOARD FIXTURES
# ============================================================================

@pytest.fixture
def memory_store():
    """Provides an empty MemoryDataStore."""
    from stores.memory_store import MemoryDataStore
    return MemoryDataStore("test_matches")


@pytest.fixture
def scoreboard(memory_store):
    """Provides a Scoreboard backed by a fresh MemoryDataStore."""
    from scoreboard.scoreboard import Scoreboard
    return Scoreboard(memory_store)


# ============================================================================
# MATCH FIXTURES
# ============================================================================

@pytest.fixture
def make_match():
    """
    Factory for a single pending match.

    Returns:
        Callable (home_name, away_name) -> Match
    """
    from shared.match import create_match
    from shared.team import Team

    def _make(home: str = "home", away: str = "away"):
        return create_match(Team(home), Team(away))

    return _make


@pytest.fixture
def make_matches(make_match):
    """
    Factory for several pending matches named home0/away0, home1/away1, ...

    Returns:
        Callable (how_many) -> List[Match]
    """
    def _make(how_many: int):
        return [make_match(f"home{i}", f"away{i}") for i in range(how_many)]

    return _make


@pytest.fixture
def score_rng():
    """Seeded RNG so score-dependent tests are reproducible."""
    return random.Random(2024)


@pytest.fixture
def setup_in_progress(score_rng) -> Callable:
    """
    Add matches to a scoreboard, give each a random score, then complete
    every match at an odd index.

    Returns:
        Callable (matches, scoreboard) -> List[(match_id, score)]
    """
    def _setup(matches: List, scoreboard) -> List[Tuple[int, Tuple[int, int]]]:
        for match in matches:
            scoreboard.add(match)

        scores = [
            (match.id, (score_rng.randint(0, 10), score_rng.randint(0, 10)))
            for match in matches
        ]
        for match_id, score in scores:
            scoreboard.update(match_id, score)

        for index, match in enumerate(matches):
            if index % 2:
                scoreboard.complete(match.id)

        return scores

    return _setup
