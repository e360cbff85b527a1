import numpy as np


class Agent:
    def __init__(self, x=0.0, y=0.0, angle=0.0):
        self.pos = np.array([x, y], dtype=float)
        self.angle = float(angle)

    @property
    def x(self) -> float:
        return float(self.pos[0])

    @x.setter
    def x(self, value: float):
        self.pos[0] = value

    @property
    def y(self) -> float:
        return float(self.pos[1])

    @y.setter
    def y(self, value: float):
        self.pos[1] = value

    def __eq__(self, other):
        if not isinstance(other, Agent):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.angle == other.angle

    def __repr__(self) -> str:
        return f"Agent(x={self.x}, y={self.y}, angle={self.angle})"
