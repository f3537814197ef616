"""
Data path resolver for finding network data files in development and installed environments.
"""
from pathlib import Path


def get_data_directory() -> Path:
    """
    Get the data directory path.

    Returns:
        Path to the data directory

    Raises:
        FileNotFoundError: If no data directory can be found
    """
    # Packaged data, relative to this file (metroplanner/utils/ -> metroplanner/data/)
    package_data_dir = Path(__file__).parent.parent / "data"
    if package_data_dir.exists():
        return package_data_dir

    # Running from a checkout in the current working directory
    cwd_data_dir = Path.cwd() / "metroplanner" / "data"
    if cwd_data_dir.exists():
        return cwd_data_dir

    raise FileNotFoundError(
        "Could not find data directory. Searched in:\n"
        f"- Package path: {package_data_dir}\n"
        f"- Current directory: {cwd_data_dir}\n"
        "Please ensure the data directory exists in the expected location."
    )
