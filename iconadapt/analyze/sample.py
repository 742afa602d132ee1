# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Fixed-size sampling canvas.

Every analysis runs on a small square canvas so the two counting passes
cost the same regardless of source size. Sources are fit with an
aspect-preserving "contain" resize and centered; the leftover area is
fully transparent.
"""

from __future__ import annotations

import numpy as np
from PIL import Image

from iconadapt.schema import PixelBuffer
from iconadapt.analyze.config import SAMPLE_SIZE

_TRANSPARENT = (0, 0, 0, 0)
_BLACK = (0, 0, 0)


def fit_contain(buffer: PixelBuffer, size: int = SAMPLE_SIZE) -> PixelBuffer:
    """
    Resize ``buffer`` to fit inside a size x size canvas.

    Uses Lanczos resampling (Pillow premultiplies alpha for RGBA, so edge
    colors do not bleed from transparent pixels). Buffers already at the
    target size are returned unchanged. RGB buffers stay RGB; there is no
    alpha to pad with, so the margin is black.

    Raises:
        ValueError: for zero-sized buffers
    """
    if buffer.width == 0 or buffer.height == 0:
        raise ValueError(
            f"Cannot resample empty buffer ({buffer.width}x{buffer.height})"
        )
    if buffer.width == size and buffer.height == size:
        return buffer

    img = Image.fromarray(np.ascontiguousarray(buffer.pixels))

    # Contained size; each side keeps at least one pixel
    scale = min(size / buffer.width, size / buffer.height)
    new_width = min(size, max(1, round(buffer.width * scale)))
    new_height = min(size, max(1, round(buffer.height * scale)))
    resized = img.resize((new_width, new_height), Image.Resampling.LANCZOS)

    canvas = Image.new(img.mode, (size, size), _TRANSPARENT if buffer.has_alpha else _BLACK)
    canvas.paste(resized, ((size - new_width) // 2, (size - new_height) // 2))
    return PixelBuffer.from_array(np.array(canvas, dtype=np.uint8))
