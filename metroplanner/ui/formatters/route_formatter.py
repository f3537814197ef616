"""
Route Formatter

Handles formatting of route results and network listings for console display.
"""

import logging
from typing import List, Optional

from ...core.models.metro_line import MetroLine
from ...core.models.network import MetroNetwork
from ...core.models.route import RouteResult
from ...managers.config_manager import DisplayConfig


class RouteFormatter:
    """Formats route results and station listings as plain text."""

    def __init__(self, network: MetroNetwork, display_config: Optional[DisplayConfig] = None):
        """
        Initialize the route formatter.

        Args:
            network: Network the formatted routes refer to
            display_config: Output settings, defaults to DisplayConfig()
        """
        self.network = network
        self.display_config = display_config or DisplayConfig()
        self.logger = logging.getLogger(__name__)

    def icon(self, emoji: str, fallback: str = "") -> str:
        """Return the emoji, or the fallback when emoji are switched off."""
        return emoji if self.display_config.use_emoji else fallback

    def _line_label(self, line: MetroLine) -> str:
        marker = self.icon(line.emoji)
        return f"{marker} {line.display_name}" if marker else line.display_name

    def rule(self, char: str = "=", width: Optional[int] = None) -> str:
        return char * (width or self.display_config.separator_width)

    def _heading(self, emoji: str, text: str) -> str:
        icon = self.icon(emoji)
        return f"{icon} {text}" if icon else text

    def format_route(self, result: RouteResult) -> str:
        """
        Format a route result with boarding, interchanges and a summary.

        Args:
            result: Route to format

        Returns:
            Multi-line text
        """
        if not result.found:
            return self._heading("❌", "No route found between specified stations.")

        lines: List[str] = ["", self.rule(), self._heading("🚇", "OPTIMAL ROUTE FOUND"), self.rule(), ""]

        current_line: Optional[MetroLine] = None
        for i, station_index in enumerate(result.path):
            station = self.network.get_station_by_index(station_index)

            if i < len(result.path_lines):
                hop_line = result.path_lines[i]
                if current_line is None:
                    lines.append(f"{self._heading('🚀', 'Board')} {self._line_label(hop_line)}")
                    lines.append("")
                elif hop_line != current_line:
                    lines.append("")
                    lines.append(f"   {self._heading('🔄', 'INTERCHANGE →')} {self._line_label(hop_line)}")
                    lines.append("")
                current_line = hop_line

            marker = self.icon(current_line.emoji, "-") if current_line else self.icon("📍", "-")
            entry = f"{marker} {i + 1:2d}. {station.name}"
            if station.is_interchange:
                entry += f" {self.icon('🔄', '(interchange)')}"
            lines.append(entry)

            if i < len(result.path) - 1:
                lines.append("     |")

        lines.extend(self._format_summary(result))
        return "\n".join(lines)

    def _format_summary(self, result: RouteResult) -> List[str]:
        summary = [
            "",
            self.rule(),
            self._heading("📊", "JOURNEY SUMMARY"),
            self.rule(),
            f"{self._heading('🗺️ ', 'Total Distance:')} {result.total_distance:.1f} km",
            f"{self._heading('⏱️ ', 'Estimated Time:')} {result.total_time:.0f} minutes",
            f"{self._heading('🚉', 'Total Stations:')} {result.station_count}",
            f"{self._heading('🔄', 'Interchanges:')} {result.interchanges}",
        ]
        if result.interchanges > 0 and self.display_config.show_interchange_tip:
            summary.append(self._heading("💡", "Tip: Allow extra 2-3 minutes for each interchange"))
        summary.append(self.rule())
        return summary

    def format_network_statistics(self) -> str:
        """Format station counts for the network and each line."""
        stats = self.network.get_network_statistics()
        lines = [
            "",
            self._heading("🚇", "PUNE METRO NETWORK STATISTICS"),
            self.rule(width=50),
            f"Total Stations: {stats['total_stations']}",
        ]
        for line, station_count in stats["stations_per_line"].items():
            lines.append(f"{self._line_label(line)}: {station_count} stations")
        lines.append(f"{self._heading('🔄', 'Interchange Stations:')} {stats['interchange_stations']}")
        lines.append(self.rule(width=50))
        return "\n".join(lines)

    def format_stations_by_line(self) -> str:
        """Format the sorted station list of every line."""
        lines = ["", self._heading("📍", "STATIONS BY LINE"), self.rule(width=60)]
        for line in MetroLine:
            stations = self.network.stations_on_line(line)
            lines.append(f"{self._line_label(line)} ({len(stations)} stations):")
            lines.extend(f"   {i:2d}. {name}" for i, name in enumerate(stations, 1))
            lines.append("")
        return "\n".join(lines)

    def format_all_stations(self) -> str:
        """Format the sorted list of every station."""
        stations = self.network.all_stations()
        lines = ["", self._heading("📍", f"ALL STATIONS ({len(stations)} total):"), self.rule("-", 50)]
        lines.extend(f"{i:2d}. {name}" for i, name in enumerate(stations, 1))
        lines.append("")
        return "\n".join(lines)

    def format_matches(self, matches: List[str]) -> str:
        """Format a numbered list of station name matches."""
        lines = [self._heading("🔍", "Multiple matches found:")]
        lines.extend(f"   {i}. {name}" for i, name in enumerate(matches, 1))
        return "\n".join(lines)
