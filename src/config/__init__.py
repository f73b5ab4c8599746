"""
Config Module

Class-level settings for logging, stores and the demo.
"""

from .scoreboard_settings import ScoreboardSettings

__all__ = ['ScoreboardSettings']
