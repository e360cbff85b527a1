import numpy as np
import pygame


def field_to_rgb(values: np.ndarray, background_color, pheromone_color) -> np.ndarray:
    """Blend from the background to the pheromone color by trail intensity.

    Returns a (width, height, 3) uint8 array, the layout ``pygame.surfarray``
    expects.
    """
    background = np.asarray(background_color, dtype=float)
    pheromone = np.asarray(pheromone_color, dtype=float)
    intensities = np.clip(values, 0.0, 1.0)[:, :, np.newaxis]
    colors = background + (pheromone - background) * intensities
    return np.rint(colors).astype(np.uint8)


def blit_field(surface: pygame.Surface, values: np.ndarray, background_color, pheromone_color):
    colors = field_to_rgb(values, background_color, pheromone_color)
    pixel_array = pygame.surfarray.pixels3d(surface)
    pixel_array[:, :, :] = colors
    # Release the surface lock
    del pixel_array
