import numpy as np

TWO_PI = 2 * np.pi

# Field and window size of the default run
field_width, field_height = 1280, 720
window_width, window_height = 640, 385

# Agents that leave the grid are pushed back to at most dimension - WALL_MARGIN
WALL_MARGIN = 1.01

# Value written into a cell an agent occupies
DEPOSIT_VALUE = 1.0

# The 3x3 blur always divides by 9, even at the border
BLUR_DIVISOR = 9.0
BLUR_KERNEL = np.ones((3, 3)) / BLUR_DIVISOR
