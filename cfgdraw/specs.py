"""Layout and style settings for graph images."""

from __future__ import annotations

from enum import Enum

from cfgdraw.colors import Color


class DisplayMode(Enum):
    """How much of each block is shown."""

    DETAILED = "detailed"
    MINIMAL = "minimal"


class ColorGeneration(Enum):
    """How new colours are picked."""

    CYCLIC = "cyclic"
    RANDOM = "random"


COLOR_GEN_MODE = ColorGeneration.CYCLIC
BLOCK_MODE = DisplayMode.MINIMAL
DISPLAY_BYTECODE = BLOCK_MODE is DisplayMode.DETAILED

HORIZONTAL_IMPROVEMENT_N_ITERS = 100
BLOCK_WIDTH = 200.0
TEXT_SIZE = 15.0
LEFT_PADDING = 100.0
TOP_PADDING = 100.0
X_SPACE_BETWEEN_BLOCKS = 400.0
Y_SPACE_BETWEEN_BLOCKS = 200.0

BACKGROUND_COLOR = Color(255, 255, 255, 255)
DEFAULT_BLOCK_COLOR = Color(255, 0, 0, 0)
SPECIAL_BLOCK_COLOR = Color(255, 0, 255, 0)
EXTERNAL_CONNECTIONS_COUNT_COLOR = Color(255, 255, 0, 0)
DEFAULT_CONNECTIONS_COLOR = Color(255, 0, 0, 0)

CYCLIC_COLORS = (
    Color(255, 255, 0, 0),
    Color(255, 0, 255, 0),
    Color(255, 0, 0, 255),
    Color(255, 255, 0, 255),
)