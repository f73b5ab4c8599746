"""
Shared Module

Entities and capability contracts used by both the stores and the
scoreboard.
"""

from .interfaces import Persistable, Renderable, UNASSIGNED_ID
from .team import Team
from .match import Match, MatchStatus, Score, create_match

__all__ = [
    'Persistable',
    'Renderable',
    'UNASSIGNED_ID',
    'Team',
    'Match',
    'MatchStatus',
    'Score',
    'create_match'
]
