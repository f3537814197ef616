"""
Path Reconstructor

Turns search labels into an ordered route and derives its totals.
"""

import logging
from typing import Dict, List, Tuple

from ..models.metro_line import MetroLine
from ..models.network import MetroNetwork
from ..models.route import Objective, RouteResult
from ...managers.config_manager import RoutingConfig


class PathReconstructor:
    """Builds RouteResult objects from predecessor labels."""

    def __init__(self, network: MetroNetwork, routing_config: RoutingConfig):
        self.network = network
        self.routing_config = routing_config
        self.logger = logging.getLogger(__name__)

    def reconstruct(self, start_index: int, end_index: int, end_line: MetroLine,
                    labels: Dict, cost: float, objective: Objective) -> RouteResult:
        """
        Walk predecessor labels from the destination back to the start.

        Args:
            start_index: Index of the starting station
            end_index: Index of the destination station
            end_line: Line of arrival of the chosen terminal state
            labels: Search labels keyed by (station, line)
            cost: Search cost of the terminal state
            objective: Objective the search optimized

        Returns:
            Found RouteResult with path, per-hop lines and totals
        """
        path, path_lines = self.walk_back(start_index, end_index, end_line, labels)
        return self.build_result(path, path_lines, objective, cost)

    def walk_back(self, start_index: int, end_index: int, end_line: MetroLine,
                  labels: Dict) -> Tuple[List[int], List[MetroLine]]:
        """
        Follow parent pointers and return the path in travel order.

        Returns:
            Tuple of (station indices start to end, line of each hop)
        """
        path: List[int] = []
        path_lines: List[MetroLine] = []
        max_hops = len(labels)

        current = end_index
        current_line = end_line
        while current != start_index:
            if len(path_lines) > max_hops:
                raise RuntimeError(
                    f"Predecessor chain from station {end_index} does not reach station {start_index}"
                )
            label = labels[(current, current_line)]
            path.append(current)
            path_lines.append(current_line)
            current, current_line = label.parent, label.parent_line

        path.append(start_index)
        path.reverse()
        path_lines.reverse()
        return path, path_lines

    def build_result(self, path: List[int], path_lines: List[MetroLine],
                     objective: Objective, cost: float = 0.0) -> RouteResult:
        """
        Derive distance, time and interchange totals for a path.

        Each hop uses the connection on its own line, since two lines may
        share a segment between the same pair of stations. Interchanges are
        counted from the second hop on.

        Raises:
            ValueError: If a hop has no matching connection in the network
        """
        if len(path_lines) != len(path) - 1:
            raise ValueError("path_lines must have exactly one entry per hop")

        total_distance = 0.0
        travel_time = 0.0
        interchanges = 0

        for i, line in enumerate(path_lines):
            connection = self.network.find_connection(path[i], path[i + 1], line)
            if connection is None:
                raise ValueError(
                    f"No {line.display_name} connection between stations {path[i]} and {path[i + 1]}"
                )
            total_distance += connection.distance
            travel_time += connection.travel_time
            if i > 0 and path_lines[i - 1] != line:
                interchanges += 1

        total_time = travel_time + interchanges * self.routing_config.interchange_penalty_minutes

        self.logger.debug(
            f"Reconstructed route: {len(path)} stations, {total_distance:.1f} km, "
            f"{total_time:.1f} min, {interchanges} interchanges"
        )

        return RouteResult(
            path=path,
            path_lines=path_lines,
            total_distance=total_distance,
            total_time=total_time,
            interchanges=interchanges,
            found=True,
            objective=objective,
            cost=cost,
        )
