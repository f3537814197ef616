"""
Console Menu

Interactive text menu for planning routes from a terminal.
"""

import logging
from typing import Callable, Optional

from ..core.interfaces.i_route_service import IRouteService
from ..core.interfaces.i_station_service import IStationService
from .formatters.route_formatter import RouteFormatter

logger = logging.getLogger(__name__)

MENU_OPTIONS = [
    ("🗺️ ", "Find Optimal Route"),
    ("🔄", "Find Alternative Route"),
    ("📋", "View All Stations"),
    ("🚇", "View Stations by Line"),
    ("📊", "Network Statistics"),
    ("❌", "Exit"),
]


class MenuExit(Exception):
    """Raised to leave the menu loop, e.g. when input runs out."""

    pass


class ConsoleMenu:
    """Six-option route planner menu driven by injectable input/output functions."""

    def __init__(self, route_service: IRouteService, station_service: IStationService,
                 formatter: RouteFormatter,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        """
        Initialize the console menu.

        Args:
            route_service: Service answering route queries
            station_service: Service resolving typed station names
            formatter: Formatter for routes and listings
            input_func: Prompt reader, defaults to input()
            output_func: Line writer, defaults to print()
        """
        self.route_service = route_service
        self.station_service = station_service
        self.formatter = formatter
        self._input = input_func
        self._output = output_func
        self._icon = formatter.icon

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            raise MenuExit()

    def _pause(self) -> None:
        self._read("\nPress Enter to continue...")

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        self._output(f"{self._icon('🚇 ')}PUNE METRO - INTELLIGENT ROUTE PLANNER")
        self._output(self.formatter.rule())

        try:
            while True:
                self._show_menu()
                choice = self._read(f"Choose option (1-{len(MENU_OPTIONS)}): ").strip()

                if not choice.isdigit():
                    self._output(f"{self._icon('❌ ')}Invalid input. Please try again.\n")
                    continue

                if not self.handle_choice(int(choice)):
                    break
        except MenuExit:
            logger.debug("Input closed, leaving menu")

        self._output(f"{self._icon('🙏 ')}Thank you for using Pune Metro Route Planner!")

    def _show_menu(self) -> None:
        self._output(f"{self._icon('🎯 ')}MAIN MENU:")
        for number, (emoji, label) in enumerate(MENU_OPTIONS, 1):
            self._output(f"{number}. {self._icon(emoji + ' ')}{label}")
        self._output("")

    def handle_choice(self, choice: int) -> bool:
        """
        Run one menu option.

        Args:
            choice: Menu number

        Returns:
            False when the user chose to exit, True otherwise
        """
        if choice == 1:
            self._plan_route(alternative=False)
        elif choice == 2:
            self._plan_route(alternative=True)
        elif choice == 3:
            self._output(self.formatter.format_all_stations())
            self._pause()
        elif choice == 4:
            self._output(self.formatter.format_stations_by_line())
            self._pause()
        elif choice == 5:
            self._output(self.formatter.format_network_statistics())
            self._pause()
        elif choice == 6:
            return False
        else:
            self._output(f"{self._icon('❌ ')}Invalid option. Please choose 1-{len(MENU_OPTIONS)}.\n")
        return True

    def _plan_route(self, alternative: bool) -> None:
        title = "ALTERNATIVE ROUTE PLANNING" if alternative else "ROUTE PLANNING"
        self._output(f"\n{self._icon('🔄 ' if alternative else '🗺️  ')}{title}")
        self._output("-" * (len(title) + 5))

        start = self.prompt_station(f"{self._icon('🚀 ')}From Station: ")
        end = self.prompt_station(f"{self._icon('🎯 ')}To Station: ")

        if start == end:
            self._output(f"{self._icon('😊 ')}You're already at your destination!\n")
            return

        if alternative:
            result = self.route_service.find_alternative(start, end)
            self._output(f"\n{self._icon('🔄 ')}Finding best alternative route...")
        else:
            result = self.route_service.find_path(start, end)

        self._output(self.formatter.format_route(result))
        self._pause()

    def prompt_station(self, prompt: str) -> str:
        """
        Ask for a station until the input resolves to exactly one name.

        Args:
            prompt: Prompt text

        Returns:
            Exact station name
        """
        while True:
            text = self._read(prompt).strip()

            if not text:
                self._output(f"{self._icon('❌ ')}Please enter a station name.")
                continue

            if text == "list":
                self._output(self.formatter.format_all_stations())
                continue

            matches = self.station_service.get_station_suggestions(text)
            if not matches:
                self._output(f"{self._icon('❌ ')}No stations found matching '{text}'")
                self._output(f"{self._icon('💡 ')}Type 'list' to see all stations or try a partial name.")
                continue

            resolved = self.station_service.resolve_station_name(text)
            if resolved is not None:
                return resolved

            selected = self._choose_match(matches)
            if selected is not None:
                return selected

    def _choose_match(self, matches) -> Optional[str]:
        """Let the user pick one of several matches; None means search again."""
        self._output(self.formatter.format_matches(matches))
        answer = self._read(f"Select station (1-{len(matches)}) or 0 to search again: ").strip()

        if answer.isdigit():
            choice = int(answer)
            if choice == 0:
                return None
            if 1 <= choice <= len(matches):
                return matches[choice - 1]

        self._output(f"{self._icon('❌ ')}Invalid selection.")
        return None
