import logging

import numpy as np

from population import AgentPopulation
from sensors import sense_all, window_sums
from settings import SimulationParams, SpawnMode
from steering import steer, move
from trail_field import TrailField

log = logging.getLogger(__name__)


class SimulationNotReadyError(RuntimeError):
    """Raised when stepping a simulation that has no spawned population."""


class Simulation:
    """Agents coupled to a diffusing, evaporating trail field.

    Each ``step`` senses the field, steers and moves every agent, runs the
    field stencil update and finally lets every agent deposit on its cell.
    All randomness comes from ``rng`` (a ``numpy.random.Generator``).
    """

    def __init__(self, width: int, height: int, params: SimulationParams = None, seed=None, rng=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Field dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.params = params if params is not None else SimulationParams()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.field = TrailField(width, height)
        self.population = AgentPopulation(width, height)
        self.can_run = False
        self.step_count = 0

    @classmethod
    def from_settings(cls, settings):
        sim = cls(settings.width, settings.height, settings.params, seed=settings.seed)
        sim.spawn(settings.spawn_mode, settings.num_agents, settings.spawn_radius)
        return sim

    @property
    def agents(self):
        return self.population.to_agents()

    def __len__(self) -> int:
        return len(self.population)

    def reset(self):
        self.field.clear()
        self.population.clear()
        self.can_run = False
        self.step_count = 0
        log.debug("Simulation reset")

    def spawn(self, mode: SpawnMode, n_agents: int, radius: float = 0.0):
        self.population.spawn(mode, n_agents, self.rng, radius)
        self.can_run = True

    def spawn_point(self, n_agents: int):
        self.spawn(SpawnMode.POINT, n_agents)

    def spawn_random(self, n_agents: int):
        self.spawn(SpawnMode.RANDOM, n_agents)

    def spawn_circle(self, n_agents: int, radius: float):
        self.spawn(SpawnMode.CIRCLE, n_agents, radius)

    def spawn_inward_circle(self, n_agents: int, radius: float):
        self.spawn(SpawnMode.INWARD_CIRCLE, n_agents, radius)

    def set_agents(self, agents):
        """Place an explicit list of agents, replacing the population."""
        self.population.set_agents(agents)
        self.can_run = True

    def sense(self):
        """Forward, left and right sensor readings for every agent."""
        p = self.params
        values = self.field.values
        sums = window_sums(values, p.sense_size)
        xs, ys = self.population.positions[:, 0], self.population.positions[:, 1]
        angles = self.population.angles
        return tuple(
            sense_all(values, xs, ys, angles, offset, p.sense_distance, p.sense_size, sums)
            for offset in (0.0, p.sense_angle_difference, -p.sense_angle_difference)
        )

    def step(self, dt: float):
        if not np.isfinite(dt) or dt < 0:
            raise ValueError(f"dt must be a finite, non-negative number, got {dt}")
        if not self.can_run:
            raise SimulationNotReadyError("Spawn agents before stepping the simulation")
        p = self.params
        population = self.population

        weight_forward, weight_left, weight_right = self.sense()
        steer_strength = self.rng.random(len(population))
        angles = population.angles + steer(weight_forward, weight_left, weight_right,
                                           steer_strength, p.turn_speed, dt)

        positions, angles, hit_wall = move(population.positions, angles, p.move_speed * dt,
                                           self.width, self.height, self.rng)
        population.positions = positions
        population.angles = angles

        self.field.update(dt, p.diffuse_speed, p.evaporation_speed)
        cells = positions.astype(int)
        self.field.deposit(cells[:, 0], cells[:, 1])

        self.step_count += 1
        if log.isEnabledFor(logging.DEBUG):
            log.debug("Step %d: dt=%.4f, %d agents hit a wall", self.step_count, dt,
                      int(np.count_nonzero(hit_wall)))

    def field_snapshot(self) -> np.ndarray:
        return self.field.snapshot()

    def __repr__(self) -> str:
        return f"Simulation(width={self.width}, height={self.height}, agents={len(self)}, steps={self.step_count})"
