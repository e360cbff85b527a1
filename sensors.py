import numpy as np
from scipy.ndimage import convolve


def sensor_centers(xs, ys, angles, angle_offset, sense_distance):
    """Grid cell under each sensor, truncated toward zero like an int cast."""
    sensor_angles = angles + angle_offset
    sensor_x = np.trunc(xs + np.cos(sensor_angles) * sense_distance).astype(int)
    sensor_y = np.trunc(ys + np.sin(sensor_angles) * sense_distance).astype(int)
    return sensor_x, sensor_y


def sense(values: np.ndarray, x: float, y: float, angle: float, angle_offset: float,
          sense_distance: float, sense_size: int) -> float:
    """Sum the trail in the square window around one sensor.

    Every sampled coordinate is clamped to the grid on its own, so windows
    hanging over an edge count the edge cells several times.
    """
    width, height = values.shape
    sensor_x, sensor_y = sensor_centers(x, y, angle, angle_offset, sense_distance)
    offsets = np.arange(-sense_size, sense_size + 1)
    ix = np.clip(sensor_x + offsets, 0, width - 1)
    iy = np.clip(sensor_y + offsets, 0, height - 1)
    return float(values[np.ix_(ix, iy)].sum())


def window_sums(values: np.ndarray, sense_size: int) -> np.ndarray:
    """Clamped window sum for every sensor center in [-sense_size, dim - 1 + sense_size].

    The result is offset by ``sense_size``: the sum for center (x, y) sits at
    ``[x + sense_size, y + sense_size]``.
    """
    size = 2 * sense_size + 1
    padded = np.pad(values, sense_size, mode='edge')
    return convolve(padded, np.ones((size, size)), mode='nearest')


def sense_all(values: np.ndarray, xs, ys, angles, angle_offset: float,
              sense_distance: float, sense_size: int, sums: np.ndarray = None) -> np.ndarray:
    """Vectorised ``sense`` for a whole population.

    Centers further out than ``sense_size`` cells read the same clamped
    window as the nearest in-range center, so they are limited first.
    """
    width, height = values.shape
    if sums is None:
        sums = window_sums(values, sense_size)
    sensor_x, sensor_y = sensor_centers(xs, ys, angles, angle_offset, sense_distance)
    sensor_x = np.clip(sensor_x, -sense_size, width - 1 + sense_size) + sense_size
    sensor_y = np.clip(sensor_y, -sense_size, height - 1 + sense_size) + sense_size
    return sums[sensor_x, sensor_y]
