"""
Scoreboard Module

Live scoreboard producing ranked summaries of matches in progress.
"""

from .scoreboard import Scoreboard, ScoreboardInterface

__all__ = [
    'Scoreboard',
    'ScoreboardInterface'
]
