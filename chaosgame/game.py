import logging
import threading
from enum import Enum
from time import time

import numpy as np

from chaosgame.canvas import ChaosCanvas
from chaosgame.orbit import iterate_affine, iterate_julia
from chaosgame.transforms import AFFINE, pack_transforms
from chaosgame.vectors import Vector2D


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class ChaosGame:
    """
    Runs the chaos game for one description on one canvas.

    Steps are scheduled with ``request_steps`` and carried out in batches by
    ``run_steps``, so an animation timer can advance the orbit one batch per
    tick. ``run_iterations`` does the same synchronously. All mutation of the
    canvas and the current point happens under a single lock.
    """

    DEFAULT_BATCH_SIZE = 10_000

    def __init__(self, description, width, height, seed=None, batch_size=DEFAULT_BATCH_SIZE):
        self._lock = threading.Lock()
        self.rng = np.random.default_rng(seed)
        self.batch_size = batch_size
        self.new_game(description, (width, height))

    @property
    def description(self):
        return self._description

    @property
    def canvas(self):
        return self._canvas

    @property
    def current_point(self):
        return self._current_point

    @property
    def state(self):
        return self._state

    @property
    def remaining_steps(self):
        return self._remaining

    def new_game(self, description, canvas_size):
        """
        Start over with a new description on a fresh canvas of ``(width, height)``.
        Descriptions always hold at least one transform, so iteration cannot fail.
        """
        width, height = canvas_size
        canvas = ChaosCanvas(width, height, description.min_coords, description.max_coords)

        with self._lock:
            self._description = description
            self._canvas = canvas
            self._packed = pack_transforms(description.transforms)
            self._iterate = iterate_affine if description.kind == AFFINE else iterate_julia
            self._current_point = description.center
            self._remaining = 0
            self._state = GameState.IDLE

        logging.info(
            f"New {description.kind} game with {len(description.transforms)} transforms on a {width}x{height} canvas."
        )

    def reset_current_point(self):
        with self._lock:
            self._current_point = self._description.center

    def clear_canvas(self):
        with self._lock:
            self._canvas.clear()

    def step(self):
        """Apply one randomly chosen transform and plot the result."""
        with self._lock:
            transforms = self._description.transforms
            transform = transforms[self.rng.integers(len(transforms))]
            self._current_point = transform.transform(self._current_point)
            self._canvas.put_pixel(self._current_point)

    def request_steps(self, steps):
        """Schedule ``steps`` more steps to be carried out by ``run_steps``."""
        if steps < 0:
            raise ValueError(f"Number of steps must not be negative, got {steps}")
        with self._lock:
            self._remaining = int(steps)
            self._state = GameState.RUNNING if steps else GameState.IDLE
            self._start_time = time()
        logging.info(f"Running {steps} steps...")

    def run_steps(self, steps=None):
        """
        Carry out up to ``steps`` of the scheduled steps (one batch by default).

        Returns True while scheduled steps remain, False once the run is
        finished or was stopped.
        """
        if steps is not None and steps <= 0:
            raise ValueError(f"Number of steps per call must be positive, got {steps}")
        with self._lock:
            if self._state is not GameState.RUNNING:
                return False

            count = min(self._remaining, self.batch_size if steps is None else steps)
            self._advance(count)
            self._remaining -= count

            if self._remaining == 0:
                self._state = GameState.IDLE
                logging.info(f"Chaos game run completed in {time() - self._start_time:.2f} seconds.")
                return False
            return True

    def run_iterations(self, steps):
        self.request_steps(steps)
        while self.run_steps():
            pass

    def stop(self):
        """Drop the remaining scheduled steps. Pixels already plotted are kept."""
        with self._lock:
            if self._state is GameState.RUNNING:
                logging.info(f"Chaos game stopped with {self._remaining} steps left.")
            self._remaining = 0
            self._state = GameState.STOPPED

    def current_canvas_snapshot(self):
        with self._lock:
            return self._canvas.get_canvas_array()

    def _advance(self, count):
        if count <= 0:
            return
        choices = self.rng.integers(0, len(self._description.transforms), size=count)
        first, second = self._packed
        points = self._iterate(first, second, choices, self._current_point.x0, self._current_point.x1)
        self._canvas.put_pixels(points)
        self._current_point = Vector2D(float(points[-1, 0]), float(points[-1, 1]))
