# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Color helpers for 8-bit sRGB triples.

Luma here is the plain BT.601 weighted sum on gamma-encoded values. The
consumer only needs a binary light/dark signal, so no linearization is
applied.
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray

from iconadapt.schema import ColorKey
from iconadapt.analyze.config import DARK_LUMINANCE_THRESHOLD, LUMA_WEIGHTS

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]{6}")


def luminance(rgb: ColorKey) -> float:
    """
    Perceptual luma of an 8-bit color, normalized to [0, 1].

    luminance = (0.299*R + 0.587*G + 0.114*B) / 255
    """
    r, g, b = rgb
    wr, wg, wb = LUMA_WEIGHTS
    return (wr * r + wg * g + wb * b) / 255


def is_dark_color(rgb: ColorKey, threshold: float = DARK_LUMINANCE_THRESHOLD) -> bool:
    """True if the color's luma falls below ``threshold``."""
    return luminance(rgb) < threshold


def rgb_to_hex(rgb: ColorKey) -> str:
    """
    Format an 8-bit triple as lowercase "#rrggbb".

    Raises:
        ValueError: if any channel is outside 0-255
    """
    for channel in rgb:
        if not 0 <= int(channel) <= 255:
            raise ValueError(f"Channel must be 0-255, got {channel}")
    r, g, b = (int(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color: str) -> ColorKey:
    """
    Parse "#rrggbb" (any case, leading '#' optional) to an 8-bit triple.

    Raises:
        ValueError: on malformed input
    """
    value = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX_DIGITS_RE.fullmatch(value):
        raise ValueError(f"Expected 6 hex digits, got {hex_color!r}")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def rgb_distance(pixels: NDArray[np.uint8], rgb: ColorKey) -> NDArray[np.float64]:
    """
    Euclidean distance in RGB space from each pixel to one color.

    Args:
        pixels: (N, 3) array of RGB values [0-255]
        rgb: Reference color

    Returns:
        (N,) array of distances
    """
    diff = pixels.astype(np.float64) - np.asarray(rgb, dtype=np.float64)
    return np.sqrt(np.sum(diff ** 2, axis=1))
