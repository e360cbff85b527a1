import numpy as np

from constants import TWO_PI, WALL_MARGIN


def steer(weight_forward, weight_left, weight_right, steer_strength, turn_speed: float, dt: float):
    """Angle change for every agent from its three sensor readings.

    The branches are checked in order and the first match wins. The last one
    (turn left when left < right) can never fire after the right-turn branch
    was rejected; it is kept so the chain stays as it is.
    """
    turn = turn_speed * dt
    delta = np.zeros_like(steer_strength, dtype=float)

    mask_forward = (weight_forward > weight_left) & (weight_forward > weight_right)
    undecided = ~mask_forward
    mask_random = undecided & (weight_forward < weight_left) & (weight_forward < weight_right)
    undecided &= ~mask_random
    mask_right = undecided & (weight_right > weight_left)
    undecided &= ~mask_right
    mask_left = undecided & (weight_left < weight_right)

    delta[mask_random] = (steer_strength[mask_random] - 0.5) * 2 * turn
    delta[mask_right] = -steer_strength[mask_right] * turn
    delta[mask_left] = steer_strength[mask_left] * turn
    return delta


def move(positions, angles, distance: float, width: int, height: int, rng: np.random.Generator):
    """Advance every agent by ``distance`` along its heading.

    Agents that end up outside the grid are clamped back inside on both axes
    and get a fresh random heading. Returns the new positions, the new
    angles and the mask of agents that hit a wall.
    """
    directions = np.column_stack((np.cos(angles), np.sin(angles)))
    new_positions = positions + directions * distance
    new_angles = np.array(angles, dtype=float)

    out_of_bounds_mask = (new_positions[:, 0] < 0) | (new_positions[:, 0] >= width) | (
            new_positions[:, 1] < 0) | (new_positions[:, 1] >= height)
    hits = int(np.count_nonzero(out_of_bounds_mask))
    if hits:
        upper = np.array([max(width - WALL_MARGIN, 0.0), max(height - WALL_MARGIN, 0.0)])
        new_positions[out_of_bounds_mask] = np.clip(new_positions[out_of_bounds_mask], 0.0, upper)
        new_angles[out_of_bounds_mask] = rng.random(hits) * TWO_PI

    return new_positions, new_angles, out_of_bounds_mask
