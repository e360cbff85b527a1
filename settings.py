import json
import logging
from dataclasses import dataclass, fields, asdict
from enum import Enum

import constants

log = logging.getLogger(__name__)


class SpawnMode(Enum):
    POINT = 0
    RANDOM = 1
    CIRCLE = 2
    INWARD_CIRCLE = 3

    @classmethod
    def parse(cls, value):
        """Accept a SpawnMode, its value, or its name in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper().replace("-", "_")]
            except KeyError:
                raise ValueError(f"Unknown spawn mode: {value!r}") from None
        return cls(value)


@dataclass(frozen=True)
class SimulationParams:
    """Movement, sensing and field constants for one simulation run.

    Speeds are per second; ``sense_angle_difference`` is in radians,
    ``sense_distance`` in grid units and ``sense_size`` is the half-width of
    the square sensing window in cells.
    """
    move_speed: float = 50.0
    evaporation_speed: float = 0.25
    diffuse_speed: float = 8.0
    sense_angle_difference: float = 1.0
    sense_distance: float = 10.0
    sense_size: int = 3
    turn_speed: float = 30.0

    def __post_init__(self):
        if int(self.sense_size) != self.sense_size or self.sense_size < 0:
            raise ValueError(f"sense_size must be a non-negative integer, got {self.sense_size!r}")
        object.__setattr__(self, "sense_size", int(self.sense_size))

    @classmethod
    def from_dict(cls, params_dict: dict):
        known = {f.name for f in fields(cls)}
        for key in params_dict:
            if key not in known:
                log.warning("Ignoring unknown simulation parameter %r", key)
        return cls(**{k: v for k, v in params_dict.items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)


def _color(value) -> tuple[int, int, int]:
    color = tuple(int(c) for c in value)
    if len(color) != 3 or any(c < 0 or c > 255 for c in color):
        raise ValueError(f"Colors must be three components between 0 and 255, got {value!r}")
    return color


class Settings:
    # Default Settings
    width: int = constants.field_width
    height: int = constants.field_height
    window_width: int = constants.window_width
    window_height: int = constants.window_height
    num_agents: int = 150000
    spawn_mode: SpawnMode = SpawnMode.INWARD_CIRCLE
    spawn_radius: float = 300.0
    seed = None
    pheromone_color: tuple = (57, 173, 227)
    background_color: tuple = (48, 27, 117)
    params: SimulationParams = SimulationParams(
        evaporation_speed=0.25,
        diffuse_speed=5.0,
        turn_speed=100.0,
        sense_angle_difference=2.0,
        sense_distance=15.0,
        sense_size=3,
        move_speed=25.0,
    )

    def __init__(self):
        pass

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field dimensions must be positive, got {self.width}x{self.height}")
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(f"Window dimensions must be positive, got {self.window_width}x{self.window_height}")
        if self.num_agents < 0:
            raise ValueError(f"num_agents must not be negative, got {self.num_agents}")
        if self.spawn_radius < 0:
            raise ValueError(f"spawn_radius must not be negative, got {self.spawn_radius}")
        return self

    @classmethod
    def from_dict(cls, settings_dict: dict):
        instance = cls()
        for key, value in settings_dict.items():
            if key.startswith("_") or not hasattr(instance, key) or callable(getattr(instance, key)):
                log.warning("Ignoring unknown setting %r", key)
                continue
            match key:
                case "params":
                    value = value if isinstance(value, SimulationParams) else SimulationParams.from_dict(value)
                case "spawn_mode":
                    value = SpawnMode.parse(value)
                case "pheromone_color" | "background_color":
                    value = _color(value)
                case "width" | "height" | "window_width" | "window_height" | "num_agents":
                    value = int(value)
                case "spawn_radius":
                    value = float(value)
            setattr(instance, key, value)
        return instance.validate()

    @classmethod
    def from_file(cls, file_path: str):
        with open(file_path, 'r') as f:
            settings_dict = json.load(f)
        log.debug("Loaded settings from %s", file_path)
        return cls.from_dict(settings_dict)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "window_width": self.window_width,
            "window_height": self.window_height,
            "num_agents": self.num_agents,
            "spawn_mode": self.spawn_mode.name,
            "spawn_radius": self.spawn_radius,
            "seed": self.seed,
            "pheromone_color": list(self.pheromone_color),
            "background_color": list(self.background_color),
            "params": self.params.to_dict(),
        }
