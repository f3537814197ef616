"""
Main entry point for the Metro Planner route planning application.

This module sets up logging, loads the configuration, builds the network
services, and either answers a single route query or starts the
interactive console menu.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from metroplanner.core.models.route import Objective
from metroplanner.core.services.json_network_repository import NetworkDataError
from metroplanner.core.services.service_factory import ServiceFactory
from metroplanner.managers.config_manager import (
    ConfigData,
    ConfigManager,
    ConfigurationError,
    VALID_LOG_LEVELS,
)
from metroplanner.ui.console_menu import ConsoleMenu
from metroplanner.ui.formatters.route_formatter import RouteFormatter
from version import __app_display_name__, get_version_string


def get_log_directory() -> Path:
    """Get the per-platform log directory."""
    if sys.platform == "darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "MetroPlanner"
    elif sys.platform == "win32":  # Windows
        return Path(os.environ.get("APPDATA", Path.home())) / "MetroPlanner" / "logs"
    else:  # Linux and others
        return Path.home() / ".local" / "share" / "metroplanner" / "logs"


def setup_logging(config: ConfigData, level_override: Optional[str] = None) -> None:
    """
    Setup application logging with optional file output.

    Args:
        config: Loaded configuration
        level_override: Level from the command line, wins over the config
    """
    level_name = (level_override or config.logging.level).upper()
    level = getattr(logging, level_name, logging.WARNING)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.logging.log_to_file:
        log_dir = get_log_directory()
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(str(log_dir / "metro_planner.log")))
        except OSError as e:
            print(f"Warning: Failed to open log file in {log_dir}: {e}", file=sys.stderr)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Set specific log levels for different modules
    logging.getLogger("metroplanner.core").setLevel(level)
    logging.getLogger("metroplanner.ui").setLevel(level)
    logging.getLogger("metroplanner.managers").setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description=f"{__app_display_name__} - line-aware route planning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the interactive menu
  metroplanner

  # Fastest route between two stations
  metroplanner --from "Vanaz" --to "Ramwadi"

  # Shortest route, or the best alternative
  metroplanner --from "PCMC Bhavan" --to "Vanaz" --objective distance
  metroplanner --from "PCMC Bhavan" --to "Vanaz" --alternative
        """,
    )
    parser.add_argument("--config", help="Path to the configuration file")
    parser.add_argument("--from", dest="start", metavar="STATION", help="Start station")
    parser.add_argument("--to", dest="end", metavar="STATION", help="Destination station")
    parser.add_argument(
        "--objective",
        choices=[objective.value for objective in Objective],
        default=Objective.MINIMIZE_TIME.value,
        help="Cost to minimize (default: time)",
    )
    parser.add_argument(
        "--alternative", action="store_true", help="Show the best alternative route"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Override the configured log level",
    )
    parser.add_argument("--version", action="version", version=get_version_string())
    return parser


def run_query(factory: ServiceFactory, formatter: RouteFormatter, start: str, end: str,
              objective: Objective, alternative: bool) -> int:
    """
    Answer a single route query and print the result.

    Returns:
        int: 0 when a route was found, 1 otherwise
    """
    station_service = factory.get_station_service()
    route_service = factory.get_route_service()

    start_name = station_service.resolve_station_name(start) or start
    end_name = station_service.resolve_station_name(end) or end

    if alternative:
        result = route_service.find_alternative(start_name, end_name)
    else:
        result = route_service.find_path(start_name, end_name, objective)

    print(formatter.format_route(result))
    return 0 if result.found else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if bool(args.start) != bool(args.end):
        parser.error("--from and --to must be given together")

    try:
        config = ConfigManager(args.config).load_config()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config, args.log_level)
    logger = logging.getLogger(__name__)
    logger.info(f"Starting {get_version_string()}")

    try:
        factory = ServiceFactory(config)
        formatter = RouteFormatter(factory.get_network(), config.display)

        if args.start:
            return run_query(
                factory, formatter, args.start, args.end,
                Objective(args.objective), args.alternative,
            )

        menu = ConsoleMenu(
            factory.get_route_service(), factory.get_station_service(), formatter
        )
        menu.run()
        return 0

    except (ConfigurationError, NetworkDataError, FileNotFoundError) as e:
        logger.error(f"Startup failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
