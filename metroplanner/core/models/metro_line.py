"""
Metro Line Model

Closed set of metro line identifiers used to tag stations and connections.
"""

from enum import Enum


class MetroLine(Enum):
    """Lines of the metro network."""
    PURPLE = "purple"
    AQUA = "aqua"
    RED = "red"

    @property
    def display_name(self) -> str:
        """Get the human-readable line name."""
        return _DISPLAY_NAMES[self]

    @property
    def emoji(self) -> str:
        """Get the colour marker used in console output."""
        return _EMOJI[self]

    @classmethod
    def from_key(cls, key: str) -> 'MetroLine':
        """
        Parse a line key as used in the network data files.

        Args:
            key: Line key such as "aqua" (case-insensitive)

        Returns:
            The matching MetroLine

        Raises:
            ValueError: If the key does not name a known line
        """
        normalized = (key or "").strip().lower()
        for line in cls:
            if line.value == normalized:
                return line
        raise ValueError(f"Unknown metro line: '{key}'")

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    MetroLine.PURPLE: "Purple Line",
    MetroLine.AQUA: "Aqua Line",
    MetroLine.RED: "Red Line",
}

_EMOJI = {
    MetroLine.PURPLE: "🟣",
    MetroLine.AQUA: "🔵",
    MetroLine.RED: "🔴",
}
