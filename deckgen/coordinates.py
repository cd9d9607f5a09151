from collections.abc import Sequence
from logging import getLogger

_logger = getLogger(__name__)


def polycoord(xs: Sequence[float], ys: Sequence[float]) -> tuple[str, str]:
    """Encode polygon or polyline coordinates as two strings of percentages.

    Each value is formatted with two decimals and values are separated by a single \
    space, without trailing space: `[10, 20, 30]` gives `"10.00 20.00 30.00"`.

    Args:
        xs: X coordinates.
        ys: Y coordinates, parallel to `xs`.

    Returns:
        The encoded x and y coordinates. Both are empty strings if the sequences \
        don't have the same length or hold less than 3 points.
    """
    n_points = len(xs)
    if n_points < 3 or len(ys) != n_points:
        _logger.warning(
            "Cannot encode %d x and %d y coordinates: need at least 3 pairs",
            n_points,
            len(ys),
        )
        return "", ""
    return " ".join(f"{x:.2f}" for x in xs), " ".join(f"{y:.2f}" for y in ys)
