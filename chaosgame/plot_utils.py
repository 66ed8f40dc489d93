import logging

import numpy as np
from matplotlib import colormaps
from PIL import Image

from chaosgame.game import ChaosGame


def rgba_to_rgb(color):
    return [int(c * 255) for c in color[:3]]


def normalize_counts(canvas_array):
    """Scale hit counts to [0, 1] on a log scale; an empty canvas stays all zero."""
    counts = np.log1p(np.asarray(canvas_array, dtype=np.float64))
    max_val = counts.max()
    if max_val == 0:
        return counts
    return counts / max_val


def colorize(canvas_array, colormap_name="inferno"):
    """Map a canvas of hit counts to an (height, width, 3) uint8 RGB image."""
    colormap = colormaps[colormap_name]
    normalized = normalize_counts(canvas_array)
    return (colormap(normalized)[:, :, :3] * 255).astype(np.uint8)


def save_canvas_image(canvas_array, file_path, colormap_name="inferno"):
    """Colorize a canvas and save it with Pillow."""
    colored = colorize(canvas_array, colormap_name)
    image = Image.fromarray(colored)
    image.save(file_path)
    logging.info(f"Chaos game successfully exported to {file_path}.")
    return image


def render_description(description, iterations, resolution, seed=None):
    """Run a fresh game to completion without a window and return its canvas."""
    width, height = resolution
    logging.info(f"Rendering {iterations} iterations at resolution {resolution}...")
    game = ChaosGame(description, width, height, seed=seed)
    game.run_iterations(iterations)
    return game.current_canvas_snapshot()
