# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Dominant color detection by exact-value counting.

Two passes over the sampled pixels:
1. Histogram: count exact (R, G, B) keys among opaque pixels and track the
   mode. Ties go to the first key to reach the maximum in row-major scan
   order.
2. Similarity: count opaque pixels within a Euclidean RGB distance of the
   mode.

Only the single mode is needed, so there is no palette reduction here.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from iconadapt.schema import ColorKey
from iconadapt.analyze.colorspace import rgb_distance
from iconadapt.analyze.config import ALPHA_THRESHOLD, DISTANCE_THRESHOLD


def opaque_mask(
    rgba_pixels: NDArray[np.uint8],
    alpha_threshold: int = ALPHA_THRESHOLD,
) -> NDArray[np.bool_]:
    """Boolean mask of pixels whose alpha exceeds ``alpha_threshold``."""
    return rgba_pixels[:, 3] > alpha_threshold


def build_histogram(
    rgba_pixels: NDArray[np.uint8],
    alpha_threshold: int = ALPHA_THRESHOLD,
) -> tuple[Counter, Optional[ColorKey], int]:
    """
    Count exact RGB values among opaque pixels and find the mode.

    The scan runs in row-major order and the mode only changes when a key's
    running count strictly exceeds the best so far, so among keys with equal
    final counts the one that got there first wins.

    Args:
        rgba_pixels: (N, 4) array of RGBA values, row-major
        alpha_threshold: Alpha must exceed this to count as opaque

    Returns:
        (histogram, main_color, opaque_count). main_color is None when no
        pixel is opaque.
    """
    opaque_rgb = rgba_pixels[opaque_mask(rgba_pixels, alpha_threshold), :3]

    histogram: Counter = Counter()
    main_color: Optional[ColorKey] = None
    max_count = 0

    for r, g, b in opaque_rgb.tolist():
        key = (r, g, b)
        histogram[key] += 1
        count = histogram[key]
        if count > max_count:
            max_count = count
            main_color = key

    return histogram, main_color, len(opaque_rgb)


def count_similar(
    rgba_pixels: NDArray[np.uint8],
    main_color: ColorKey,
    alpha_threshold: int = ALPHA_THRESHOLD,
    distance_threshold: float = DISTANCE_THRESHOLD,
) -> int:
    """
    Count opaque pixels strictly closer than ``distance_threshold`` to
    ``main_color`` in RGB space.
    """
    opaque_rgb = rgba_pixels[opaque_mask(rgba_pixels, alpha_threshold), :3]
    if len(opaque_rgb) == 0:
        return 0
    distances = rgb_distance(opaque_rgb, main_color)
    return int(np.count_nonzero(distances < distance_threshold))
