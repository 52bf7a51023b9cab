from __future__ import annotations

from .constants import GRID_MAX_EASTING, GRID_MAX_NORTHING
from .vectors import GPSCoordinate, GridCoordinate

__all__ = (
    "format_gps_coordinate",
    "format_grid_coordinate",
    "format_grid_coordinate_as_grid_reference",
    "parse_grid_reference",
)

#: Side length of the squares identified by the letter pairs of a grid
#: reference, in metres
SQUARE_SIZE = 100000

#: Letters of the squares; the letter I is not used
_LETTERS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"


def format_gps_coordinate(coord: GPSCoordinate) -> str:
    """Formats a GPS coordinate in a human-readable way."""
    return coord.format()


def format_grid_coordinate(coord: GridCoordinate) -> str:
    """Formats a grid coordinate in a human-readable way, with millimetre
    precision.
    """
    return coord.format()


def format_grid_coordinate_as_grid_reference(
    coord: GridCoordinate, digits: int = 10
) -> str:
    """Formats a grid coordinate as an Ordnance Survey grid reference, e.g.
    ``SK 00100 71875``.

    Args:
        coord: the grid coordinate
        digits: total number of digits in the numeric part of the reference;
            must be an even number between 0 and 10. The coordinate is
            truncated, not rounded, to the corresponding precision.

    Returns:
        the formatted grid reference

    Raises:
        ValueError: if the number of digits is invalid or the coordinate is
            outside the grid
    """
    if digits not in (0, 2, 4, 6, 8, 10):
        raise ValueError(f"invalid number of digits: {digits!r}")

    easting, northing = coord.easting, coord.northing
    if not (0 <= easting < GRID_MAX_EASTING and 0 <= northing < GRID_MAX_NORTHING):
        raise ValueError(f"{coord.format()} is outside the National Grid")

    e_square, n_square = int(easting // SQUARE_SIZE), int(northing // SQUARE_SIZE)

    # The first letter identifies the 500 km square, the second one the
    # 100 km square within it; both are laid out in 5x5 blocks from the
    # north-west corner
    first = (19 - n_square) - (19 - n_square) % 5 + (e_square + 10) // 5
    second = (19 - n_square) * 5 % 25 + e_square % 5
    letters = _LETTERS[first] + _LETTERS[second]

    half = digits // 2
    if not half:
        return letters

    divisor = 10 ** (5 - half)
    e = int((easting % SQUARE_SIZE) // divisor)
    n = int((northing % SQUARE_SIZE) // divisor)
    return f"{letters} {e:0{half}d} {n:0{half}d}"


def parse_grid_reference(value: str) -> GridCoordinate:
    """Parses an Ordnance Survey grid reference like ``SK 001 718`` or
    ``TQ3080``.

    Args:
        value: the grid reference to parse; whitespace is ignored

    Returns:
        the grid coordinate of the south-west corner of the referenced
        square

    Raises:
        ValueError: if the grid reference is malformed or refers to a square
            outside the grid
    """
    ref = "".join(value.split()).upper()
    if len(ref) < 2 or ref[0] not in _LETTERS or ref[1] not in _LETTERS:
        raise ValueError(f"invalid grid reference: {value!r}")

    digits = ref[2:]
    if len(digits) > 10 or len(digits) % 2 or (digits and not digits.isdigit()):
        raise ValueError(f"invalid grid reference: {value!r}")

    first, second = _LETTERS.index(ref[0]), _LETTERS.index(ref[1])
    e_square = ((first - 2) % 5) * 5 + second % 5
    n_square = (19 - (first // 5) * 5) - second // 5
    if not (
        0 <= e_square * SQUARE_SIZE < GRID_MAX_EASTING
        and 0 <= n_square * SQUARE_SIZE < GRID_MAX_NORTHING
    ):
        raise ValueError(f"grid reference outside the National Grid: {value!r}")

    half = len(digits) // 2
    e = int(digits[:half].ljust(5, "0")) if half else 0
    n = int(digits[half:].ljust(5, "0")) if half else 0

    return GridCoordinate(
        easting=e_square * SQUARE_SIZE + e, northing=n_square * SQUARE_SIZE + n
    )
