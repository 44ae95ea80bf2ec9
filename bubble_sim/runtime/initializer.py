import json
import logging
from pathlib import Path
from typing import Optional, Union

from bubble_sim.config import CONFIG_DIR
from bubble_sim.core_types import SimulationConfig

logger = logging.getLogger(__name__)


def load_config(name: Union[str, Path] = "config.json", root: Optional[Path] = None) -> dict:
    """Read a JSON overrides file; a missing file means no overrides."""
    path = Path(name)
    if not path.is_absolute():
        path = (root or CONFIG_DIR) / path
    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return data


def initialize(name: Union[str, Path] = "config.json", root: Optional[Path] = None) -> SimulationConfig:
    cfg = load_config(name, root)
    return SimulationConfig.from_dict(cfg)


__all__ = ["load_config", "initialize"]
