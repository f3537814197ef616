"""
Connection Model

Directed half of a track segment between two adjacent stations on one line.
"""

from dataclasses import dataclass

from .metro_line import MetroLine


@dataclass(frozen=True)
class Connection:
    """Outgoing adjacency entry for a station."""

    to: int
    distance: float
    line: MetroLine
    travel_time: float

    @classmethod
    def create(cls, to: int, distance: float, line: MetroLine, speed_kmh: float) -> 'Connection':
        """Create a connection with travel time derived from the reference speed."""
        return cls(
            to=to,
            distance=distance,
            line=line,
            travel_time=(distance / speed_kmh) * 60,
        )

    def cost(self, minimize_time: bool) -> float:
        """Get the raw edge cost for the given metric."""
        return self.travel_time if minimize_time else self.distance
