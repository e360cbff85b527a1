import logging

import numpy as np

from agent import Agent
from constants import TWO_PI
from settings import SpawnMode

log = logging.getLogger(__name__)


class AgentPopulation:
    """Fixed-size set of agents stored as parallel numpy arrays.

    ``positions`` has shape (n, 2) holding x and y, ``angles`` has shape (n,).
    Every spawn method replaces the whole population.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.positions = np.empty((0, 2), dtype=float)
        self.angles = np.empty(0, dtype=float)

    def __len__(self) -> int:
        return len(self.angles)

    def __getitem__(self, index: int) -> Agent:
        x, y = self.positions[index]
        return Agent(x, y, self.angles[index])

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    def clear(self):
        self.positions = np.empty((0, 2), dtype=float)
        self.angles = np.empty(0, dtype=float)

    def replace(self, positions, angles):
        positions = np.asarray(positions, dtype=float).reshape(-1, 2)
        angles = np.asarray(angles, dtype=float).reshape(-1)
        if len(positions) != len(angles):
            raise ValueError(f"Got {len(positions)} positions for {len(angles)} angles")
        self.positions = positions.copy()
        self.angles = angles.copy()

    def set_agents(self, agents):
        agents = list(agents)
        self.replace([agent.pos for agent in agents], [agent.angle for agent in agents])

    def to_agents(self) -> list[Agent]:
        return list(self)

    def spawn_point(self, n_agents: int, rng: np.random.Generator):
        _check_count(n_agents)
        positions = np.tile(self.center, (n_agents, 1))
        angles = rng.uniform(0.0, TWO_PI, n_agents)
        self.replace(positions, angles)

    def spawn_random(self, n_agents: int, rng: np.random.Generator):
        _check_count(n_agents)
        xs = rng.integers(0, self.width, n_agents)
        ys = rng.integers(0, self.height, n_agents)
        angles = rng.uniform(0.0, TWO_PI, n_agents)
        self.replace(np.column_stack((xs, ys)), angles)

    def spawn_circle(self, n_agents: int, radius: float, rng: np.random.Generator):
        positions, angles = self._random_points_in_circle(n_agents, radius, rng)
        self.replace(positions, angles)

    def spawn_inward_circle(self, n_agents: int, radius: float, rng: np.random.Generator):
        positions, angles = self._random_points_in_circle(n_agents, radius, rng)
        self.replace(positions, (angles + np.pi) % TWO_PI)

    def spawn(self, mode: SpawnMode, n_agents: int, rng: np.random.Generator, radius: float = 0.0):
        match SpawnMode.parse(mode):
            case SpawnMode.POINT:
                self.spawn_point(n_agents, rng)
            case SpawnMode.RANDOM:
                self.spawn_random(n_agents, rng)
            case SpawnMode.CIRCLE:
                self.spawn_circle(n_agents, radius, rng)
            case SpawnMode.INWARD_CIRCLE:
                self.spawn_inward_circle(n_agents, radius, rng)
        log.debug("Spawned %d agents (%s)", len(self), SpawnMode.parse(mode).name)

    def _random_points_in_circle(self, n_agents, radius, rng):
        # sqrt keeps the density uniform over the disk area
        _check_count(n_agents)
        if radius < 0:
            raise ValueError(f"radius must not be negative, got {radius}")
        angles = rng.uniform(0.0, TWO_PI, n_agents)
        r = radius * np.sqrt(rng.random(n_agents))
        cx, cy = self.center
        positions = np.column_stack((cx + r * np.cos(angles), cy + r * np.sin(angles)))
        return positions, angles

    def __repr__(self) -> str:
        return f"AgentPopulation(n={len(self)}, width={self.width}, height={self.height})"


def _check_count(n_agents):
    if n_agents < 0:
        raise ValueError(f"Number of agents must not be negative, got {n_agents}")
