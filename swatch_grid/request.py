"""Request and grid shape value objects.

A :class:`SwatchRequest` is a snapshot of the viewer state taken by the host
for one render. It is immutable for the duration of that render; changing the
seed or step means building a new request.
"""

import math
from dataclasses import dataclass
from typing import Optional

from swatch_grid.errors import InvalidCount, InvalidSeed, InvalidStep


@dataclass(frozen=True)
class SwatchRequest:
    """Inputs for a single render.

    Attributes:
        count: Number of swatches to produce (positive).
        seed: Starting hue; reduced modulo 1 by the hue sequence.
        step: Hue increment applied between consecutive swatches.
    """

    count: int
    seed: float
    step: float


@dataclass(frozen=True)
class GridShape:
    """Rows and columns chosen for a swatch count.

    Attributes:
        rows: Number of rows (``a`` in the cost search).
        cols: Number of columns, ``ceil(count / rows)``.
    """

    rows: int
    cols: int

    @property
    def cells(self) -> int:
        return self.rows * self.cols


def check_count(count: object, limit: Optional[int] = None) -> int:
    """Return ``count`` if it is a positive int within ``limit``.

    Raises:
        InvalidCount: For zero, negatives, non-integers (``bool`` included) or
            values above ``limit``.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidCount(count)
    if limit is not None and count > limit:
        raise InvalidCount(count, limit)
    return count


def check_request(request: SwatchRequest, max_count: Optional[int] = None) -> None:
    """Validate every field of ``request``."""
    check_count(request.count, max_count)
    if not math.isfinite(request.seed):
        raise InvalidSeed(request.seed)
    if not math.isfinite(request.step):
        raise InvalidStep(request.step)
