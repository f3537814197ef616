"""
Station Model

Data model for metro stations, keyed by name with a stable integer index.
"""

from dataclasses import dataclass, field
from typing import Set, List, Dict, Any

from .metro_line import MetroLine


@dataclass
class Station:
    """
    A metro station in the network.

    The index is assigned by the network when the station is first
    referenced. Only the line set grows after creation, and only while
    the network is being built.
    """

    index: int
    name: str
    lines: Set[MetroLine] = field(default_factory=set)

    def __post_init__(self):
        """Validate station data after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Station name cannot be empty")
        if self.index < 0:
            raise ValueError("Station index cannot be negative")

    @property
    def is_interchange(self) -> bool:
        """Check if this station is served by more than one line."""
        return len(self.lines) > 1

    def add_line(self, line: MetroLine) -> None:
        """Mark this station as served by a line."""
        self.lines.add(line)

    def serves_line(self, line: MetroLine) -> bool:
        """Check if this station serves a specific line."""
        return line in self.lines

    def get_lines(self) -> List[MetroLine]:
        """Get the lines serving this station in declaration order."""
        return [line for line in MetroLine if line in self.lines]

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "index": self.index,
            "name": self.name,
            "lines": [line.value for line in self.get_lines()],
            "is_interchange": self.is_interchange,
        }

    def __str__(self) -> str:
        """String representation of the station."""
        return self.name

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        lines = ", ".join(line.value for line in self.get_lines())
        return f"Station(index={self.index}, name='{self.name}', lines=[{lines}])"
