"""
Reading and writing chaos game descriptions as text files.

Format (``#`` starts a comment, blank lines are ignored)::

    Affine2D | Julia
    minX, minY
    maxX, maxY
    a00, a01, a10, a11, x0, x1    # one line per transform, Affine2D only
    real, imaginary               # exactly one line, Julia only

Fields are separated by a comma followed by a space. ``1,2`` is one field.
"""

import logging
import math
from pathlib import Path

from chaosgame.description import ChaosGameDescription, validate_bounds
from chaosgame.exceptions import CouldNotReadError, CouldNotWriteError, FileFormatError
from chaosgame.transforms import AFFINE, JULIA, AffineTransform2D, julia_pair
from chaosgame.vectors import Complex, Matrix2x2, Vector2D

FIELD_SEPARATOR = ", "
AFFINE_FIELDS = 6
JULIA_FIELDS = 2


def divide_to_records(text):
    """Split file content into comment-free, non-empty records of trimmed fields."""
    records = []
    for line in text.splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            records.append([field.strip() for field in line.split(FIELD_SEPARATOR)])
    return records


def parse_numbers(fields, message):
    try:
        numbers = [float(field) for field in fields]
    except ValueError as e:
        raise FileFormatError(message) from e
    if not all(math.isfinite(number) for number in numbers):
        raise FileFormatError(message)
    return numbers


def parse_description(text):
    """Parse the text format into a ChaosGameDescription."""
    records = divide_to_records(text)
    if len(records) < 3:
        raise FileFormatError("The file should have at least three lines")

    type_record = records[0]
    if len(type_record) != 1:
        raise FileFormatError("The file should have one transformation type")
    kind = type_record[0]
    if kind not in (AFFINE, JULIA):
        raise FileFormatError(f"The file has an unsupported transformation type: {kind}")

    min_record, max_record = records[1], records[2]
    if len(min_record) != 2 or len(max_record) != 2:
        raise FileFormatError("The file should have two min/max coordinates each")
    min_x, min_y = parse_numbers(min_record, "The min coordinates in the file are not numbers")
    max_x, max_y = parse_numbers(max_record, "The max coordinates in the file are not numbers")
    min_coords, max_coords = Vector2D(min_x, min_y), Vector2D(max_x, max_y)
    validate_bounds(min_coords, max_coords, error=FileFormatError)

    if kind == AFFINE:
        transforms = parse_affine_transforms(records[3:])
    else:
        transforms = parse_julia_transforms(records[3:])

    return ChaosGameDescription(transforms, min_coords, max_coords)


def parse_affine_transforms(records):
    if not records:
        raise FileFormatError("The file should have at least one affine transformation")

    rows = []
    for record in records:
        if len(record) != AFFINE_FIELDS:
            raise FileFormatError(
                f"The file should have {AFFINE_FIELDS} values for each transformation, got {len(record)}"
            )
        rows.append(parse_numbers(record, "The transformations in the file should only contain numbers"))

    return [
        AffineTransform2D(Matrix2x2(a00, a01, a10, a11), Vector2D(x0, x1))
        for a00, a01, a10, a11, x0, x1 in rows
    ]


def parse_julia_transforms(records):
    if len(records) != 1:
        raise FileFormatError("The file should have exactly one Julia transformation")
    record = records[0]
    if len(record) != JULIA_FIELDS:
        raise FileFormatError(f"The Julia transformation should have {JULIA_FIELDS} values")
    real, imaginary = parse_numbers(record, "The Julia transformation should only contain numbers")
    return list(julia_pair(Complex(real, imaginary)))


def read_from_file(path):
    """Read a ChaosGameDescription from a text file."""
    try:
        with open(path, "r", encoding="utf-8") as file:
            text = file.read()
    except UnicodeDecodeError as e:
        raise FileFormatError(f"{path} is not a UTF-8 text file") from e
    except OSError as e:
        raise CouldNotReadError(f"Could not read {path}") from e

    description = parse_description(text)
    logging.info(f"Description loaded from {path}")
    return description


def format_number(value):
    return repr(float(value))


def format_description(description):
    """Serialise a ChaosGameDescription to the text format."""
    min_coords, max_coords = description.min_coords, description.max_coords
    lines = [
        description.kind,
        f"{format_number(min_coords.x0)}, {format_number(min_coords.x1)}",
        f"{format_number(max_coords.x0)}, {format_number(max_coords.x1)}",
    ]

    if description.kind == AFFINE:
        for transform in description.transforms:
            m, v = transform.matrix, transform.vector
            values = (m.a00, m.a01, m.a10, m.a11, v.x0, v.x1)
            lines.append(", ".join(format_number(value) for value in values))
    else:
        # sign is implied by the fixed +/- pairing
        constant = description.transforms[0].point
        lines.append(f"{format_number(constant.real)}, {format_number(constant.imaginary)}")

    return "\n".join(lines) + "\n"


def write_to_file(description, path):
    """Write a ChaosGameDescription to a text file."""
    content = format_description(description)
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.write(content)
    except OSError as e:
        raise CouldNotWriteError(f"Could not write to {path}") from e
    logging.info(f"Description saved to {path}")


def list_description_files(directory):
    """Sorted paths of the regular files in ``directory``."""
    try:
        return sorted(str(path) for path in Path(directory).iterdir() if path.is_file())
    except OSError as e:
        raise CouldNotReadError(f"Could not list files in {directory}") from e
