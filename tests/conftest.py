"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bubble_sim.core_types import Bounds, SimulationConfig
from bubble_sim.core.entities import Bubble
from bubble_sim.demo_data import RESTAURANT_FACTS


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running simulation tests")


def make_bubble(bubble_id=0, x=100.0, y=100.0, radius=40.0, vx=0.0, vy=0.0,
                mass=4.0, friction=1.0, stiffness=0.05, payload=None):
    """Build a bubble with explicit state for physics tests."""
    return Bubble(
        id=bubble_id,
        position=(x, y),
        velocity=(vx, vy),
        base_radius=radius,
        radius=radius,
        target_radius=radius,
        mass=mass,
        spring_stiffness=stiffness,
        friction=friction,
        payload=payload,
    )


@pytest.fixture
def quiet_config():
    """Config with every force except the one under test switched off."""
    return SimulationConfig(mouse_attraction=0.0, ambient_lift=0.0, friction=1.0)


@pytest.fixture
def bounds():
    return Bounds(800.0, 600.0)


@pytest.fixture
def payloads():
    """Eight demo payloads, as a host would pass them."""
    return [fact.to_dict() for fact in RESTAURANT_FACTS]


@pytest.fixture
def temp_output_dir(tmp_path):
    """Provide a temporary directory for test outputs."""
    return tmp_path / "outputs"


@pytest.fixture(scope="session")
def project_root_path():
    """Provide the project root path."""
    return Path(__file__).parent.parent
