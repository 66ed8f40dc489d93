import numpy as np

from chaosgame.description import validate_bounds
from chaosgame.exceptions import ConstructionError
from chaosgame.transforms import AffineTransform2D
from chaosgame.vectors import Matrix2x2, Vector2D


class ChaosCanvas:
    """
    A width x height grid of hit counts over the box [min_coords, max_coords].

    Model coordinates are mapped to (row, column) indices with an affine
    transform: x0 runs left to right over the columns, x1 runs bottom to top
    over the rows, so row 0 holds max_coords.x1. Indices are truncated toward
    zero; points mapping outside the grid are ignored.
    """

    def __init__(self, width, height, min_coords, max_coords):
        if width <= 0 or height <= 0:
            raise ConstructionError(f"Canvas size must be positive, got {width}x{height}")
        validate_bounds(min_coords, max_coords)

        self.width = int(width)
        self.height = int(height)
        self.min_coords = min_coords
        self.max_coords = max_coords
        self._canvas = np.zeros((self.height, self.width), dtype=np.int32)

        self.transform_coords_to_indices = AffineTransform2D(
            Matrix2x2(
                0.0,
                (self.height - 1) / (min_coords.x1 - max_coords.x1),
                (self.width - 1) / (max_coords.x0 - min_coords.x0),
                0.0,
            ),
            Vector2D(
                (self.height - 1) * max_coords.x1 / (max_coords.x1 - min_coords.x1),
                (self.width - 1) * min_coords.x0 / (min_coords.x0 - max_coords.x0),
            ),
        )

    @property
    def shape(self):
        return self._canvas.shape

    def indices(self, point):
        """(row, column) for a model-space point, or None when off the canvas."""
        mapped = self.transform_coords_to_indices.transform(point)
        if not (np.isfinite(mapped.x0) and np.isfinite(mapped.x1)):
            return None
        row, column = int(mapped.x0), int(mapped.x1)
        if 0 <= row < self.height and 0 <= column < self.width:
            return row, column
        return None

    def put_pixel(self, point):
        cell = self.indices(point)
        if cell is not None:
            self._canvas[cell] += 1

    def put_pixels(self, points):
        """Vectorised put_pixel for an (n, 2) array of model-space points."""
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        matrix = self.transform_coords_to_indices.matrix
        vector = self.transform_coords_to_indices.vector
        x0, x1 = points[:, 0], points[:, 1]

        with np.errstate(invalid="ignore"):
            rows = matrix.a00 * x0 + matrix.a01 * x1 + vector.x0
            columns = matrix.a10 * x0 + matrix.a11 * x1 + vector.x1

        finite = np.isfinite(rows) & np.isfinite(columns)
        rows = np.trunc(rows[finite])
        columns = np.trunc(columns[finite])
        inside = (rows >= 0) & (rows < self.height) & (columns >= 0) & (columns < self.width)

        np.add.at(self._canvas, (rows[inside].astype(np.intp), columns[inside].astype(np.intp)), 1)

    def get_pixel(self, point):
        cell = self.indices(point)
        if cell is None:
            return 0
        return int(self._canvas[cell])

    def get_canvas_array(self):
        return self._canvas.copy()

    def clear(self):
        self._canvas.fill(0)
