"""
tilemap/symbols.py
------------------
Closed alphabets of the tilemap pipeline.

  - ZoneSymbol : room-purpose symbols authored upstream (input)
  - TileSymbol : furnished tile symbols consumed by the scene (output)

Both are single-character str enums so rows can be built with "".join().
"""

from enum import Enum


class ZoneSymbol(str, Enum):
    WALL = "#"
    FLOOR = "."
    KITCHEN = "K"
    DINING = "D"
    WALKWAY = "W"
    ENTRANCE = "E"
    LOUNGE = "L"
    BEDROOM = "B"
    STAIRS = "S"
    RESTROOM = "R"


class TileSymbol(str, Enum):
    WALL = "#"
    FLOOR = "."
    KITCHEN_FLOOR = ","
    COUNTER = "C"
    OVEN = "O"
    BOWL_STACK = "B"
    STORAGE = "S"
    PLAYER_SPAWN = "P"
    TABLE = "T"
    CHAIR = "h"
    BED = "b"
    SOFA = "s"
    LAMP = "l"
    BOOKSHELF = "k"
    TOILET = "t"
    SINK = "w"
    MIRROR = "M"
    STAIRS = "H"
    WINDOW = "W"
    ENTRANCE = "E"


# Rooms that get enclosed by walls with a single door
PRIVATE_ZONES = frozenset({ZoneSymbol.BEDROOM, ZoneSymbol.RESTROOM, ZoneSymbol.LOUNGE})

# Zones that never need a door punched for them
OPEN_ZONES = frozenset({
    ZoneSymbol.WALL,
    ZoneSymbol.WALKWAY,
    ZoneSymbol.ENTRANCE,
    ZoneSymbol.FLOOR,
    ZoneSymbol.STAIRS,
})

# Circulation zones; the diagonal fixer never walls them in
CIRCULATION_ZONES = frozenset({ZoneSymbol.WALKWAY, ZoneSymbol.ENTRANCE, ZoneSymbol.STAIRS})

# Tiles a character cannot walk through
BLOCKING_TILES = frozenset({TileSymbol.WALL, TileSymbol.WINDOW, TileSymbol.MIRROR})
