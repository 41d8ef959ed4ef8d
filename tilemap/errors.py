"""
tilemap/errors.py
-----------------
Exceptions raised by the tilemap pipeline.

Placement problems (a zone too small for a bed, no door spot) are never
raised; they are logged and the item is skipped. Only structural input
problems and broken connectivity guarantees surface as exceptions.
"""


class ZoneMapError(Exception):
    """Base class for every tilemap failure the map generator should catch."""


class MalformedZoneGridError(ZoneMapError, ValueError):
    """The zone grid is empty, ragged, or uses symbols outside the alphabet."""


class ConnectivityRepairError(ZoneMapError, RuntimeError):
    """Part of the map could not be connected to the entry point."""

    def __init__(self, message, unreachable=None):
        super().__init__(message)
        self.unreachable = list(unreachable or [])


class MapParseError(ZoneMapError, ValueError):
    """A map document (LLM answer or JSON file) could not be parsed."""


class MisplacedEntranceError(ZoneMapError, RuntimeError):
    """An entrance tile ended up off the bottom row of the floor."""

    def __init__(self, message, entrances=None):
        super().__init__(message)
        self.entrances = list(entrances or [])
