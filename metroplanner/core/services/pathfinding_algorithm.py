"""
Pathfinding Algorithm

Line-aware shortest path search over (station, line of arrival) states.

Continuing on the line you arrived on is free, while leaving a station on a
different line costs an interchange penalty. The best way to reach a station
therefore depends on the line you reach it by, so labels are kept per
(station, line) pair instead of per station. With non-negative costs this is
Dijkstra's algorithm over a graph of stations x lines nodes.
"""

import heapq
import logging
from dataclasses import dataclass
from itertools import count
from typing import Dict, List, Optional, Tuple

from ..models.connection import Connection
from ..models.metro_line import MetroLine
from ..models.network import MetroNetwork
from ..models.route import Objective, RouteResult
from ...managers.config_manager import RoutingConfig
from .path_reconstructor import PathReconstructor

State = Tuple[int, MetroLine]


@dataclass
class SearchLabel:
    """Best known way to reach one (station, line) state."""
    cost: float
    parent: Optional[int]
    parent_line: Optional[MetroLine]


class PathfindingAlgorithm:
    """Runs route queries against a read-only metro network."""

    def __init__(self, network: MetroNetwork, routing_config: Optional[RoutingConfig] = None):
        """
        Initialize the pathfinding algorithm.

        Args:
            network: Network to search; never modified
            routing_config: Interchange penalties; defaults to RoutingConfig()
        """
        self.network = network
        self.routing_config = routing_config or RoutingConfig()
        self.reconstructor = PathReconstructor(network, self.routing_config)
        self.logger = logging.getLogger(__name__)

    def find_path(self, start_name: str, end_name: str,
                  objective: Objective = Objective.MINIMIZE_TIME) -> RouteResult:
        """
        Find the optimal route between two stations.

        Args:
            start_name: Exact name of the starting station
            end_name: Exact name of the destination station
            objective: Cost metric to optimize

        Returns:
            RouteResult with found=False if a station is unknown or unreachable
        """
        start_index = self.network.get_index(start_name)
        end_index = self.network.get_index(end_name)

        if start_index is None or end_index is None:
            unknown = start_name if start_index is None else end_name
            self.logger.warning(f"Unknown station in route query: '{unknown}'")
            return RouteResult.not_found(objective)

        if start_index == end_index:
            return RouteResult(path=[start_index], found=True, objective=objective)

        labels = self.search(start_index, objective)

        end_line, end_cost = self._select_terminal_state(labels, end_index)
        if end_line is None:
            self.logger.info(f"No route from '{start_name}' to '{end_name}'")
            return RouteResult.not_found(objective)

        return self.reconstructor.reconstruct(
            start_index, end_index, end_line, labels, end_cost, objective
        )

    def search(self, start_index: int, objective: Objective) -> Dict[State, SearchLabel]:
        """
        Label every (station, line) state reachable from the start station.

        Args:
            start_index: Index of the starting station
            objective: Cost metric to optimize

        Returns:
            Mapping from state to its best label
        """
        minimize_time = objective.minimize_time
        penalty = self.routing_config.penalty_for(minimize_time)

        labels: Dict[State, SearchLabel] = {}
        frontier: List[Tuple[float, int, int, MetroLine]] = []
        # Insertion counter: equal costs pop first-in first-out
        sequence = count()

        start_station = self.network.get_station_by_index(start_index)
        for line in start_station.lines:
            labels[(start_index, line)] = SearchLabel(0.0, None, None)

        # No line of arrival at the start, so the first hop is never penalized
        for connection in self.network.connections_from(start_index):
            self._relax(labels, frontier, sequence, start_index, None, 0.0,
                        connection, minimize_time, penalty)

        states_expanded = 0
        while frontier:
            current_cost, _, current_index, current_line = heapq.heappop(frontier)

            if current_cost > labels[(current_index, current_line)].cost:
                continue  # stale entry
            states_expanded += 1

            for connection in self.network.connections_from(current_index):
                self._relax(labels, frontier, sequence, current_index, current_line,
                            current_cost, connection, minimize_time, penalty)

        self.logger.debug(
            f"Search from station {start_index} ({objective.value}) expanded "
            f"{states_expanded} states, labelled {len(labels)}"
        )
        return labels

    @staticmethod
    def _relax(labels: Dict[State, SearchLabel], frontier: list, sequence,
               current_index: int, current_line: Optional[MetroLine], current_cost: float,
               connection: Connection, minimize_time: bool, penalty: float) -> None:
        """Try to improve the state reached by following one connection."""
        new_cost = current_cost + connection.cost(minimize_time)
        if current_line is not None and connection.line != current_line:
            new_cost += penalty

        state = (connection.to, connection.line)
        label = labels.get(state)
        if label is None or new_cost < label.cost:
            labels[state] = SearchLabel(new_cost, current_index, current_line)
            heapq.heappush(frontier, (new_cost, next(sequence), connection.to, connection.line))

    @staticmethod
    def _select_terminal_state(labels: Dict[State, SearchLabel],
                               end_index: int) -> Tuple[Optional[MetroLine], float]:
        """Pick the cheapest line of arrival at the destination; earlier lines win ties."""
        best_line = None
        best_cost = float("inf")
        for line in MetroLine:
            label = labels.get((end_index, line))
            if label is not None and label.cost < best_cost:
                best_line = line
                best_cost = label.cost
        return best_line, best_cost
