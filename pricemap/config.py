"""Application configuration."""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
HALLS_DIR = DATA_DIR / "halls"
CONFIG_DIR = DATA_DIR / "config"
MAPPER_CONFIG_PATH = CONFIG_DIR / "mapper.yaml"

# Diagram markers
SEAT_FILL = "#CACED2"
STAGE_FILL = "#DCDFE2"

# Seat primitive defaults
DEFAULT_SEAT_WIDTH = 16.0
DEFAULT_SEAT_HEIGHT = 16.0
DEFAULT_CORNER_RADIUS = 6.0
LEGACY_SEAT_OFFSET = 4.0  # Half-size of a legacy path seat

# Stage fallback when the diagram has no stage primitive
FALLBACK_STAGE_Y = 50.0
FALLBACK_STAGE_BOTTOM_Y = 60.0
DEFAULT_DIAGRAM_WIDTH = 1000.0

# Size assumed for loaded diagrams without a viewBox
DEFAULT_LOADED_WIDTH = 2004.0
DEFAULT_LOADED_HEIGHT = 1252.0

# Price mapper defaults
DEFAULT_THRESHOLDS = {
    "very_low": 500.0,
    "low": 1500.0,
    "medium": 3500.0,
    "high": 7000.0,
    "very_high": 15000.0,
}
DEFAULT_MIN_PRICES_FOR_STATS = 5

# Retrieval settings
DEFAULT_HALL = os.getenv("PRICEMAP_DEFAULT_HALL", str(HALLS_DIR / "medium-optimized.svg"))
FETCH_TIMEOUT = float(os.getenv("PRICEMAP_FETCH_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("PRICEMAP_LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up a basic console handler for scripts."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
