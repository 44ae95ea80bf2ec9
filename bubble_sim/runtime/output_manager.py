import json
from pathlib import Path
from typing import Any, Mapping, Optional

from bubble_sim.config import OUTPUT_DIR
from bubble_sim.core_types import Snapshot


def _out_dir(out_dir: Optional[Path]) -> Path:
    path = Path(out_dir) if out_dir is not None else OUTPUT_DIR
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_frame(frame: Snapshot, name: str = "frame.json", out_dir: Optional[Path] = None) -> str:
    """Write a snapshot as JSON; payloads that are not JSON types are stringified"""
    path = _out_dir(out_dir) / name
    with open(path, "w", encoding="utf-8") as f:
        json.dump(frame.to_dict(), f, default=str, indent=2)
    return str(path)


def save_metrics(metrics: Mapping[str, Any], name: str = "metrics.json", out_dir: Optional[Path] = None) -> str:
    p = _out_dir(out_dir) / name
    with open(p, "w", encoding="utf-8") as f:
        json.dump(dict(metrics), f, default=str, indent=2)
    return str(p)


__all__ = ["save_frame", "save_metrics"]
