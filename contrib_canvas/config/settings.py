#region Imports
import os
from pathlib import Path
from typing import Final
#endregion


#region Constants
# User configuration directory
CONFIG_DIR: Final[Path] = Path.home() / ".config" / "contrib-canvas"

# Environment variable overriding the config file location
CONFIG_ENV_VAR: Final[str] = "CONTRIB_CANVAS_CONFIG"

# Print tracebacks on CLI errors
DEBUG: Final[bool] = os.getenv("CONTRIB_CANVAS_DEBUG", "false").lower() == "true"

# Heatmap cell geometry (logical pixels)
BOX_WIDTH: Final[int] = 10
BOX_MARGIN: Final[int] = 2
CELL_STRIDE: Final[int] = BOX_WIDTH + BOX_MARGIN

# Vertical space reserved above the grid for month labels
TEXT_HEIGHT: Final[int] = 15

# Page chrome
HEADER_HEIGHT: Final[int] = 60
CANVAS_MARGIN: Final[int] = 20
FOOTER_PADDING: Final[int] = 10
SEPARATOR_Y: Final[int] = 55

# One year block: month labels + 7 rows + one spare row + margin
YEAR_HEIGHT: Final[int] = TEXT_HEIGHT + CELL_STRIDE * 8 + CANVAS_MARGIN

# Max week columns of a grid anchored on the Saturday on/before January 1
GRID_WEEKS: Final[int] = 53
GRID_DAYS_PER_WEEK: Final[int] = 7

# Trend line chart
LINE_CHART_HEIGHT: Final[int] = 500
X_AXIS_HEIGHT: Final[int] = 50
Y_AXIS_WIDTH: Final[int] = 50
TICK_LENGTH: Final[int] = 30
MARKER_SIZE: Final[int] = 10
#endregion


#region Functions


def get_config_path() -> Path:
    """
    Get the path of the user configuration file.

    Returns:
        Value of CONTRIB_CANVAS_CONFIG when set, otherwise
        ~/.config/contrib-canvas/config.json
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "config.json"
#endregion
