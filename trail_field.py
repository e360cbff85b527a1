import numpy as np
from scipy.ndimage import convolve

from constants import BLUR_KERNEL, DEPOSIT_VALUE


class TrailField:
    """Trail intensity grid backed by two flat buffers.

    Cells are addressed ``[x, y]``; the flat offset of a cell is
    ``x * height + y``. ``update`` reads the live buffer, writes the other one
    and then flips ``parity`` so the freshly written buffer becomes live.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Field dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._buffers = np.zeros((2, width * height))
        self.parity = 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.width, self.height

    def index(self, x, y):
        return x * self.height + y

    def _grid(self, parity: int) -> np.ndarray:
        return self._buffers[parity].reshape(self.width, self.height)

    @property
    def values(self) -> np.ndarray:
        """Writable (width, height) view of the live buffer."""
        return self._grid(self.parity)

    def __getitem__(self, key):
        return self.values[key]

    def __setitem__(self, key, value):
        self.values[key] = value

    def clear(self):
        self._buffers.fill(0.0)
        self.parity = 0

    def update(self, dt: float, diffuse_speed: float, evaporation_speed: float):
        current = self._grid(self.parity)
        target = self._grid(1 - self.parity)

        # Out-of-range neighbours count as zero, the divisor stays 9
        convolve(current, BLUR_KERNEL, output=target, mode='constant', cval=0.0)

        diffuse_weight = diffuse_speed * dt
        target *= diffuse_weight
        target += (1.0 - diffuse_weight) * current
        target -= evaporation_speed * dt
        np.maximum(target, 0.0, out=target)

        self.parity = 1 - self.parity

    def deposit(self, xs, ys):
        """Set the cells under the given (integer) coordinates to the deposit value."""
        self.values[xs, ys] = DEPOSIT_VALUE

    def snapshot(self) -> np.ndarray:
        """Read-only view of the live buffer.

        The view is not a copy: after the next ``update`` it shows the
        previous generation, and the update after that overwrites it.
        Callers that keep frames must ``.copy()`` them.
        """
        view = self.values.view()
        view.flags.writeable = False
        return view

    def total(self) -> float:
        return float(self.values.sum())

    def __repr__(self) -> str:
        return f"TrailField(width={self.width}, height={self.height}, total={self.total():.3f})"
