"""Track sizing: distributes an extent across rows or columns."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..core.track import CONTENT_WEIGHT, Content, Fixed, Flex, TrackSize

logger = logging.getLogger(__name__)


def resolve(
    specs: Sequence[TrackSize],
    total_extent: float,
    track_count: int,
) -> list[float]:
    """Compute concrete sizes for a list of tracks.

    Fixed tracks get their requested extent first. Whatever is left (never
    less than zero) is split between the remaining tracks in proportion to
    their weight: the factor for Flex, 1.0 for Content. Tracks beyond the
    end of `specs` are treated as Content.

    Malformed specs never raise: negative sizes are clamped to zero.

    Args:
        specs: Size specification per track
        total_extent: Available extent along the axis
        track_count: Number of tracks on the axis

    Returns:
        List of `track_count` non-negative sizes
    """
    if track_count <= 0:
        return []
    if total_extent <= 0:
        return [0.0] * track_count

    sizes = np.zeros(track_count, dtype=np.float64)
    weights = np.zeros(track_count, dtype=np.float64)
    fixed = np.zeros(track_count, dtype=bool)

    # First pass: fixed allocations and flexible weights
    for i in range(track_count):
        spec = specs[i] if i < len(specs) else Content()
        if isinstance(spec, Fixed):
            sizes[i] = spec.pixels
            fixed[i] = True
        elif isinstance(spec, Flex):
            weights[i] = spec.factor
        else:
            weights[i] = CONTENT_WEIGHT

    remaining = max(total_extent - float(sizes[fixed].sum()), 0.0)
    total_weight = float(weights.sum())

    # Second pass: share what is left between flexible tracks
    if total_weight > 0 and remaining > 0:
        unit = remaining / total_weight
        sizes[~fixed] = weights[~fixed] * unit

    result = np.clip(sizes, 0.0, None).tolist()
    logger.debug("Resolved %d tracks over %g: %s", track_count, total_extent, result)
    return result
