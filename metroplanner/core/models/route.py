"""
Route Model

Data models for route query results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any

from .metro_line import MetroLine


class Objective(Enum):
    """Cost metric a route query optimizes for."""
    MINIMIZE_TIME = "time"
    MINIMIZE_DISTANCE = "distance"

    @property
    def minimize_time(self) -> bool:
        return self is Objective.MINIMIZE_TIME


@dataclass(frozen=True)
class RouteLeg:
    """A run of consecutive hops on the same line."""

    line: MetroLine
    from_index: int
    to_index: int
    stops: int


@dataclass
class RouteResult:
    """
    Result of a route query.

    path holds station indices from start to end inclusive; path_lines
    holds the line used for each hop, so it is one shorter than path.
    When found is False the sequences are empty and totals are zero.
    """

    path: List[int] = field(default_factory=list)
    path_lines: List[MetroLine] = field(default_factory=list)
    total_distance: float = 0.0
    total_time: float = 0.0
    interchanges: int = 0
    found: bool = False
    objective: Objective = Objective.MINIMIZE_TIME
    cost: float = 0.0

    @classmethod
    def not_found(cls, objective: Objective = Objective.MINIMIZE_TIME) -> 'RouteResult':
        """Create the empty result for a query with no route."""
        return cls(found=False, objective=objective)

    @property
    def station_count(self) -> int:
        return len(self.path)

    @property
    def legs(self) -> List[RouteLeg]:
        """Group hops into same-line legs."""
        legs: List[RouteLeg] = []
        if not self.found or not self.path_lines:
            return legs

        leg_start = 0
        for i in range(1, len(self.path_lines) + 1):
            if i == len(self.path_lines) or self.path_lines[i] != self.path_lines[leg_start]:
                legs.append(RouteLeg(
                    line=self.path_lines[leg_start],
                    from_index=self.path[leg_start],
                    to_index=self.path[i],
                    stops=i - leg_start,
                ))
                leg_start = i
        return legs

    def to_dict(self) -> Dict[str, Any]:
        """Convert route result to dictionary representation."""
        return {
            "found": self.found,
            "objective": self.objective.value,
            "path": list(self.path),
            "path_lines": [line.value for line in self.path_lines],
            "total_distance": self.total_distance,
            "total_time": self.total_time,
            "interchanges": self.interchanges,
            "cost": self.cost,
        }
