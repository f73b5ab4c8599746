"""
Team Value Object

Immutable participant of a match, identified by its name.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Team:
    """A named team. Two teams with the same name are equal."""

    name: str

    def __post_init__(self):
        """Validate team name"""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Invalid team name: {self.name!r}. Must be a non-empty string.")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {'name': self.name}

    def __str__(self) -> str:
        return self.name
