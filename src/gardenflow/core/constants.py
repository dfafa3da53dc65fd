from enum import Enum

# Feet between two beds whose connector trellises face each other.
CONNECTOR_SPACING = 3.0
EDGE_TOLERANCE = 0.1
GRID_STEP = 0.5
SNAP_SEARCH_RADIUS = 3.0
SNAP_ANGLE_STEP_DEG = 45
MAX_TRELLIS_SPAN = 6.0

MIN_BED_DIMENSION = 1.0
MAX_BED_DIMENSION = 20.0
MIN_PLOT_DIMENSION = 5.0
MAX_PLOT_DIMENSION = 100.0
DEFAULT_WALKWAY_WIDTH = 3.0


class Side(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class TrellisKind(str, Enum):
    ATTACHMENT = "attachment"
    CONNECTOR = "connector"


class ErrorKind(str, Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    COLLISION = "collision"
    NO_SPACE_FOUND = "no_space_found"
    DIMENSION_TOO_LARGE = "dimension_too_large"


class AdvisoryKind(str, Enum):
    INFO = "info"
    WARNING = "warning"
