import numpy as np
import pytest

from agent import Agent
from population import AgentPopulation
from settings import SpawnMode


@pytest.fixture
def population():
    return AgentPopulation(100, 60)


def test_starts_empty(population):
    assert len(population) == 0
    assert population.positions.shape == (0, 2)


def test_spawn_point_places_everyone_at_center(population, rng):
    population.spawn_point(50, rng)
    assert len(population) == 50
    assert (population.positions == [50.0, 30.0]).all()
    assert ((population.angles >= 0) & (population.angles < 2 * np.pi)).all()
    assert len(np.unique(population.angles)) == 50


def test_spawn_random_uses_whole_cells(population, rng):
    population.spawn_random(500, rng)
    xs, ys = population.positions.T
    assert len(population) == 500
    assert (xs == np.floor(xs)).all() and (ys == np.floor(ys)).all()
    assert xs.min() >= 0 and xs.max() < 100
    assert ys.min() >= 0 and ys.max() < 60


def test_spawn_circle_stays_inside_radius_and_faces_out(population, rng):
    population.spawn_circle(400, 20.0, rng)
    offsets = population.positions - [50.0, 30.0]
    distances = np.hypot(offsets[:, 0], offsets[:, 1])
    assert len(population) == 400
    assert (distances <= 20.0 + 1e-9).all()
    outward = distances > 1e-3
    direction = np.arctan2(offsets[outward, 1], offsets[outward, 0]) % (2 * np.pi)
    np.testing.assert_allclose(np.cos(direction), np.cos(population.angles[outward]), atol=1e-9)
    np.testing.assert_allclose(np.sin(direction), np.sin(population.angles[outward]), atol=1e-9)


def test_inward_circle_is_circle_turned_around():
    outward = AgentPopulation(100, 60)
    inward = AgentPopulation(100, 60)
    outward.spawn_circle(200, 15.0, np.random.default_rng(5))
    inward.spawn_inward_circle(200, 15.0, np.random.default_rng(5))
    np.testing.assert_array_equal(inward.positions, outward.positions)
    np.testing.assert_allclose(inward.angles, (outward.angles + np.pi) % (2 * np.pi))
    assert ((inward.angles >= 0) & (inward.angles < 2 * np.pi)).all()


def test_spawn_replaces_existing_agents(population, rng):
    population.spawn_random(30, rng)
    population.spawn_point(5, rng)
    assert len(population) == 5


def test_spawn_dispatches_on_mode(population, rng):
    population.spawn(SpawnMode.POINT, 3, rng)
    assert (population.positions == [50.0, 30.0]).all()
    population.spawn("inward_circle", 7, rng, radius=4.0)
    assert len(population) == 7


def test_zero_agents(population, rng):
    population.spawn_circle(0, 10.0, rng)
    assert len(population) == 0


def test_rejects_negative_counts_and_radius(population, rng):
    with pytest.raises(ValueError):
        population.spawn_point(-1, rng)
    with pytest.raises(ValueError):
        population.spawn_circle(10, -2.0, rng)


def test_agents_round_trip_through_views(population):
    population.set_agents([Agent(1.5, 2.5, 0.3), Agent(4.0, 5.0, -1.0)])
    assert population[1] == Agent(4.0, 5.0, -1.0)
    assert [a.x for a in population] == [1.5, 4.0]
    population.clear()
    assert population.to_agents() == []


def test_replace_checks_lengths(population):
    with pytest.raises(ValueError):
        population.replace([[1.0, 1.0]], [0.0, 1.0])
