import math
import time
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from bubble_sim.config import FPS, RESOLUTION, SEED
from bubble_sim.core_types import Bounds, SimulationConfig, Vec2
from bubble_sim.core.simulation import BubbleSimulation
from bubble_sim.demo_data import RESTAURANT_FACTS
from bubble_sim.runtime import initializer, output_manager
from bubble_sim.utils.metrics import compute_basic_stats, kinetic_energy

logger = logging.getLogger(__name__)


def orbit_pointer(frame: int, bounds: Bounds, period: int = 240) -> Vec2:
    """Pointer path circling the middle of the surface"""
    angle = 2.0 * math.pi * frame / period
    radius = 0.3 * min(bounds.width, bounds.height)
    return (bounds.width / 2.0 + radius * math.cos(angle),
            bounds.height / 2.0 + radius * math.sin(angle))


def run_loop(iterations: int = 300, dt: Optional[float] = None,
             bounds: Sequence[float] = RESOLUTION,
             payloads: Optional[Sequence[Any]] = None,
             config: Optional[SimulationConfig] = None,
             seed: Optional[int] = SEED,
             orbit: bool = False,
             press_frame: Optional[int] = None,
             press_bubble: int = 0,
             save_every: int = 0,
             out_dir: Optional[Path] = None,
             realtime: bool = False) -> Dict[str, Any]:
    """Drive a simulation headlessly and summarise the run.

    ``press_frame`` presses the center of ``press_bubble`` on that frame;
    ``save_every`` writes every n-th snapshot as JSON.
    """
    dt = dt if dt is not None else 1.0 / FPS
    config = config or initializer.initialize()
    if payloads is None:
        payloads = [fact.to_dict() for fact in RESTAURANT_FACTS]

    sim = BubbleSimulation(config=config, seed=seed).initialize(bounds, payloads)
    selections = []
    sim.on_select(selections.append)

    frames = []
    step_times = []
    energies = []
    for i in range(iterations):
        if press_frame is not None and i == press_frame:
            target = sim.entities.get(press_bubble)
            if target is not None:
                sim.pointer_pressed(tuple(target.position))

        pointer = orbit_pointer(i, sim.bounds) if orbit else None
        start = time.perf_counter()
        snapshot = sim.step(dt, pointer)
        step_times.append((time.perf_counter() - start) * 1000.0)
        energies.append(kinetic_energy(sim.bubbles))

        if save_every and i % save_every == 0:
            frames.append(output_manager.save_frame(snapshot, name=f"frame_{i:05d}.json", out_dir=out_dir))
        if realtime:
            time.sleep(dt)

    final = sim.snapshot()
    summary = {
        "iterations": iterations,
        "bubbles": len(final.bubbles),
        "particles": len(final.particles),
        "connections": len(final.connections),
        "expanded": final.expanded.id if final.expanded is not None else None,
        "selections": len(selections),
        "step_ms": compute_basic_stats(step_times),
        "kinetic_energy": compute_basic_stats(energies),
        "frames": frames,
    }
    if save_every:
        summary["metrics_file"] = output_manager.save_metrics(summary, out_dir=out_dir)

    sim.destroy()
    logger.info(f"Ran {iterations} frames, mean step {summary['step_ms'].get('mean', 0.0):.3f} ms")
    return summary


if __name__ == "__main__":
    print(run_loop())
