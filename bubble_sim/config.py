"""Configuration for bubble-sim environment variables."""

import os
from pathlib import Path
from typing import Optional

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Environment
ENV = os.getenv("BUBBLE_SIM_ENV", "development")
DEBUG = os.getenv("DEBUG", "False").lower() == "true"

# Paths (created on demand by the modules that write into them)
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", PROJECT_ROOT / "output"))
LOGS_DIR = Path(os.getenv("LOGS_DIR", PROJECT_ROOT / "logs"))
CONFIG_DIR = Path(os.getenv("CONFIG_DIR", PROJECT_ROOT / "config"))

# Simulation settings
RESOLUTION = tuple(map(int, os.getenv("RESOLUTION", "800,600").split(",")))
FPS = int(os.getenv("FPS", "60"))
_seed = os.getenv("SEED")
SEED: Optional[int] = int(_seed) if _seed else None

# Revenue that maps to an intensity of 1.0
INTENSITY_BASELINE = float(os.getenv("INTENSITY_BASELINE", "50000"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"

__all__ = [
    "PROJECT_ROOT",
    "ENV",
    "DEBUG",
    "OUTPUT_DIR",
    "LOGS_DIR",
    "CONFIG_DIR",
    "RESOLUTION",
    "FPS",
    "SEED",
    "INTENSITY_BASELINE",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_TO_FILE",
]
