"""
Version information for the Metro Planner application.

Centralized version management for the route planner and its
packaged network data.
"""

# Core application information
__version__ = "1.2.0"
__version_info__ = (1, 2, 0)
__app_name__ = "Metro Planner"
__app_display_name__ = "Metro Planner - Pune Metro Route Planner"
__description__ = "Line-aware shortest route planning for the Pune Metro network"

# Feature information
__features__ = [
    "Fastest route search with interchange penalties",
    "Shortest distance route search",
    "Alternative routes with fewer interchanges",
    "Station lookup by partial name",
    "Network statistics by line",
]

# Network data information
__network_name__ = "Pune Metro"
__network_data_version__ = "1.0.0"
__python_version_required__ = "3.9+"

# License information
__license__ = "GPL v3"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_full_version_info() -> str:
    """Get comprehensive version information."""
    return f"""
{__app_display_name__}
Version: {__version__}
Network: {__network_name__} (data v{__network_data_version__})
"""
