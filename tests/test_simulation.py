"""
Tests for the BubbleSimulation handle.
Covers the host lifecycle, input routing, snapshots and system-wide invariants.
"""

import math

import numpy as np
import pytest

from bubble_sim import (
    BubbleSimulation,
    PressOutcome,
    SelectionPhase,
    SimulationConfig,
    initialize,
    intensity_from_revenue,
)

DT = 1.0 / 60.0


@pytest.fixture
def sim(payloads):
    return initialize({"width": 800, "height": 600}, payloads, seed=3)


def center_of(sim, bubble_id):
    bubble = sim.entities.get(bubble_id)
    return (float(bubble.position[0]), float(bubble.position[1]))


class TestInitialization:

    def test_example_scenario(self, sim, payloads):
        snapshot = sim.snapshot()
        assert len(snapshot.bubbles) == 8
        assert len(snapshot.particles) == 50
        assert snapshot.expanded is None

        received = []
        sim.on_select(received.append)
        before = len(sim.particles.burst)

        outcome = sim.pointer_pressed(center_of(sim, 3))

        assert outcome is PressOutcome.EXPANDED
        assert sim.bubbles[3].is_expanded
        assert len(sim.particles.burst) == before + sim.config.burst_count
        assert received == [payloads[3]]
        assert sim.snapshot().expanded.id == 3
        assert len(sim.snapshot().particles) == 50 + sim.config.burst_count

    def test_bubbles_start_inside_bounds(self, sim):
        for bubble in sim.bubbles:
            assert bubble.radius <= bubble.position[0] <= 800 - bubble.radius
            assert bubble.radius <= bubble.position[1] <= 600 - bubble.radius
            assert bubble.mass > 0

    def test_bounds_accept_tuples(self, payloads):
        sim = initialize((640, 480), payloads, seed=1)
        assert sim.bounds.width == 640
        assert sim.bounds.height == 480

    def test_zero_entities_runs_particles_only(self):
        sim = initialize({"width": 800, "height": 600}, [], seed=1)
        for _ in range(5):
            snapshot = sim.step(DT)
        assert snapshot.bubbles == []
        assert len(snapshot.particles) == 50
        assert sim.pointer_pressed((10, 10)) is PressOutcome.NONE

    def test_step_before_initialize_is_a_no_op(self):
        sim = BubbleSimulation(seed=1)
        snapshot = sim.step(DT, pointer=(10, 10))
        assert snapshot.bubbles == [] and snapshot.particles == []
        assert sim.pointer_pressed((10, 10)) is PressOutcome.NONE
        assert sim.pointer_moved((10, 10)) is None

    def test_zero_size_bounds_never_produce_nan(self, payloads):
        sim = initialize({"width": 0, "height": 0}, payloads, seed=2)
        for _ in range(20):
            snapshot = sim.step(DT, pointer=(0, 0))
        for bubble in snapshot.bubbles:
            assert math.isfinite(bubble.x) and math.isfinite(bubble.y)
            assert math.isfinite(bubble.radius)
        for particle in snapshot.particles:
            assert math.isfinite(particle.x) and math.isfinite(particle.y)

    def test_resize_takes_effect(self, sim):
        sim.resize({"width": 300, "height": 300})
        for _ in range(3):
            sim.step(DT)
        assert sim.bounds.width == 300
        for bubble in sim.bubbles:
            assert 0.0 <= bubble.position[0] <= 300.0
            assert 0.0 <= bubble.position[1] <= 300.0


class TestStep:

    def test_step_advances_frame(self, sim):
        sim.step(DT)
        sim.step(DT)
        assert sim.snapshot().frame == 2

    def test_non_positive_delta_is_skipped(self, sim):
        before = [tuple(b.position) for b in sim.bubbles]
        sim.step(0.0)
        sim.step(-1.0)
        sim.step(float("nan"))
        assert sim.snapshot().frame == 0
        assert [tuple(b.position) for b in sim.bubbles] == before

    def test_frame_scale(self, sim):
        assert sim.frame_scale(None) == 1.0
        assert sim.frame_scale(DT) == pytest.approx(1.0)
        assert sim.frame_scale(1.0) == sim.config.max_frame_scale
        assert sim.frame_scale(0.0) == 0.0

    def test_pointer_in_step_refreshes_hover(self, sim):
        snapshot = sim.step(DT, pointer=center_of(sim, 5))
        assert snapshot.bubbles[5].is_hovered
        assert sim.selection_state.phase is SelectionPhase.HOVERED

    def test_pointer_moved_sets_hover(self, sim):
        assert sim.pointer_moved(center_of(sim, 1)) == 1
        sim.pointer_moved({"x": -500, "y": -500})
        assert not any(b.is_hovered for b in sim.bubbles)

    def test_pointer_moved_refreshes_snapshot(self, sim):
        sim.pointer_moved(center_of(sim, 2))
        assert sim.snapshot().bubbles[2].is_hovered
        assert sim.snapshot().frame == 0

        snapshot = sim.step(0.0, pointer=(-500, -500))
        assert not any(b.is_hovered for b in snapshot.bubbles)

    def test_malformed_pointer_is_ignored(self, sim):
        snapshot = sim.step(DT, pointer=(1, 2, 3))
        assert snapshot.frame == 1
        assert sim.pointer_moved((5,)) is None

    def test_connections_within_threshold(self, sim):
        for _ in range(30):
            snapshot = sim.step(DT)
        positions = {b.id: (b.x, b.y) for b in snapshot.bubbles}
        for link in snapshot.connections:
            assert link.a < link.b
            distance = math.dist(positions[link.a], positions[link.b])
            assert distance < sim.config.connection_distance
            assert 0.0 < link.alpha <= sim.config.connection_max_alpha


class TestInvariants:

    @pytest.mark.slow
    def test_radius_and_exclusivity_hold_under_random_input(self, sim):
        rng = np.random.default_rng(9)
        for _ in range(400):
            point = (float(rng.uniform(0, 800)), float(rng.uniform(0, 600)))
            action = rng.integers(3)
            if action == 0:
                sim.pointer_pressed(point)
            elif action == 1:
                sim.pointer_moved(point)
            snapshot = sim.step(float(rng.uniform(0.0, 0.1)))

            assert all(b.radius >= sim.config.min_radius for b in snapshot.bubbles)
            assert sum(b.is_expanded for b in snapshot.bubbles) <= 1
            assert len(sim.particles.ambient) == sim.config.ambient_count

    def test_double_press_restores_state(self, sim):
        target = center_of(sim, 4)
        sim.pointer_pressed(target)
        sim.pointer_pressed(target)

        assert not any(b.is_expanded for b in sim.bubbles)
        assert sim.selection_state.phase is not SelectionPhase.EXPANDED

    def test_expanded_bubble_grows(self, sim):
        sim.pointer_pressed(center_of(sim, 2))
        for _ in range(120):
            sim.step(DT)
        bubble = sim.bubbles[2]
        assert bubble.radius > bubble.base_radius * 1.2


class TestHostControls:

    def test_pause_freezes_and_resume_continues(self, sim):
        sim.step(DT)
        sim.pause()
        frozen = [tuple(b.position) for b in sim.bubbles]
        for _ in range(5):
            sim.step(DT)
        assert sim.paused
        assert [tuple(b.position) for b in sim.bubbles] == frozen

        sim.resume()
        sim.step(DT)
        assert [tuple(b.position) for b in sim.bubbles] != frozen

    def test_hover_shows_while_paused(self, sim):
        sim.pause()
        snapshot = sim.step(DT, pointer=center_of(sim, 5))

        assert sim.bubbles[5].is_hovered
        assert snapshot.bubbles[5].is_hovered
        assert snapshot.frame == 0

    def test_off_select_stops_events(self, sim, payloads):
        kept, dropped = [], []
        sim.on_select(kept.append)
        sim.on_select(dropped.append)
        sim.off_select(dropped.append)
        sim.off_select(print)

        sim.pointer_pressed(center_of(sim, 3))

        assert kept == [payloads[3]]
        assert dropped == []

    def test_destroy_releases_everything(self, sim):
        released = []
        sim.bind_frame_handle(lambda: released.append(True))

        sim.destroy()
        sim.destroy()

        assert released == [True]
        assert sim.is_destroyed
        snapshot = sim.step(DT)
        assert snapshot.bubbles == [] and snapshot.particles == []
        assert len(sim.particles) == 0

    def test_destroy_drops_callbacks(self, sim, payloads):
        received = []
        sim.on_select(received.append)
        sim.destroy()

        sim.initialize({"width": 800, "height": 600}, payloads)
        sim.pointer_pressed(center_of(sim, 0))

        assert received == []
        assert sim.bubbles[0].is_expanded

    def test_on_select_as_decorator(self, sim, payloads):
        seen = []

        @sim.on_select
        def remember(payload):
            seen.append(payload["title"])

        sim.pointer_pressed(center_of(sim, 6))
        assert seen == [payloads[6]["title"]]

    def test_intensity_scales_mass_and_spring(self, sim):
        bubble = sim.bubbles[0]
        base_mass = bubble.mass

        sim.set_intensity(2.0)
        assert bubble.mass == pytest.approx(base_mass * 2.0)
        assert bubble.spring_stiffness == pytest.approx(sim.config.spring_stiffness * 2.0)

        sim.set_intensity(0.0)
        assert bubble.mass == sim.config.min_mass
        assert bubble.mass > 0

        sim.set_intensity(float("nan"))
        assert bubble.mass == sim.config.min_mass

    def test_zero_intensity_keeps_speeds_bounded(self, sim):
        sim.set_intensity(intensity_from_revenue(0))
        top = 0.0
        for _ in range(200):
            sim.step(DT)
            top = max(top, max(float(np.hypot(*b.velocity)) for b in sim.bubbles))

        assert math.isfinite(top)
        assert top < 250.0
        for bubble in sim.bubbles:
            assert 0.0 <= bubble.position[0] <= 800.0
            assert 0.0 <= bubble.position[1] <= 600.0

    def test_intensity_from_revenue(self):
        assert intensity_from_revenue(50000) == 1.0
        assert intensity_from_revenue(100000) == 2.0
        assert intensity_from_revenue(-10) == 0.0
        assert intensity_from_revenue(10, baseline=0) == 1.0


class TestIsolation:

    def test_instances_are_independent(self, payloads):
        a = initialize({"width": 800, "height": 600}, payloads, seed=21)
        b = initialize({"width": 800, "height": 600}, payloads, seed=21)

        a.pointer_pressed(center_of(a, 0))
        for _ in range(10):
            a.step(DT)

        assert not any(bubble.is_expanded for bubble in b.bubbles)
        assert b.snapshot().frame == 0
        assert len(b.particles.burst) == 0

    def test_same_seed_is_deterministic(self, payloads):
        a = initialize({"width": 800, "height": 600}, payloads, seed=8)
        b = initialize({"width": 800, "height": 600}, payloads, seed=8)
        for _ in range(25):
            snap_a = a.step(DT, pointer=(400, 300))
            snap_b = b.step(DT, pointer=(400, 300))
        assert snap_a == snap_b

    def test_custom_config_is_per_instance(self, payloads):
        small = initialize((800, 600), payloads, config=SimulationConfig(ambient_count=5), seed=1)
        default = initialize((800, 600), payloads, seed=1)
        assert len(small.snapshot().particles) == 5
        assert len(default.snapshot().particles) == 50


class TestPhysicsApi:

    def test_create_engine_is_uninitialized(self, payloads):
        from bubble_sim.physics_api import create_engine, get_settings

        sim = create_engine(config=get_settings(burst_count=4), seed=0)
        assert not sim.is_initialized
        assert sim.step(DT).bubbles == []

        sim.initialize((800, 600), payloads)
        sim.pointer_pressed(center_of(sim, 1))
        assert len(sim.particles.burst) == 4
