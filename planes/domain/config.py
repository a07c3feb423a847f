import os

# Grid defaults of the classic game
DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_PLANE_COUNT = 3

# Probe outcomes, also used as board marks in text dumps
EMPTY = "."
MISS = "o"
HIT = "x"
DEAD = "*"

OUTCOMES = (HIT, MISS, DEAD)

# Plane orientations. Orientation 0 is the shape as declared (head first,
# body towards increasing rows).
NORTH_SOUTH = 0
SOUTH_NORTH = 1
WEST_EAST = 2
EAST_WEST = 3

ORIENTATIONS = (NORTH_SOUTH, SOUTH_NORTH, WEST_EAST, EAST_WEST)
ORIENTATION_COUNT = len(ORIENTATIONS)

ORIENTATION_NAMES = {
    NORTH_SOUTH: "NorthSouth",
    SOUTH_NORTH: "SouthNorth",
    WEST_EAST: "WestEast",
    EAST_WEST: "EastWest",
}

# Choice map markers; any value >= 0 is a heat score.
CHOICE_ELIMINATED = -1
CHOICE_CONSUMED = -2

# Returned by the influence estimate for cells with nothing left to learn.
NOT_USEFUL = -1

# Move selector blend: (completion available, exploration available) ->
# percent weights for (head seeking, orientation completion, exploration).
BLEND_WEIGHTS = {
    (True, True): (60, 30, 10),
    (False, True): (70, 0, 30),
    (True, False): (70, 30, 0),
    (False, False): (100, 0, 0),
}

# Random plane placement on a PlaneGrid
RANDOM_LAYOUT_MAX_ATTEMPTS = 1000


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() not in {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
        return value if value > 0 else default
    except ValueError:
        return default


SIM_GAMES = _env_int("PLANES_SIM_GAMES", 200)

# Debug log (enable with --debug on the harness or PLANES_DEBUG=1)
DEBUG_ENABLED = _env_flag("PLANES_DEBUG", False)
DEBUG_LOG_PATH = os.getenv("PLANES_DEBUG_LOG", "planes_debug.log")
