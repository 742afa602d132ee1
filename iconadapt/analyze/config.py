# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Analyzer tuning.

These values encode a visual heuristic tuned against real icon sets.
Change the defaults only with product sign-off; pass an AnalyzerConfig
to experiment instead.
"""

from __future__ import annotations

from dataclasses import dataclass


# Alpha must exceed this to count as opaque (majority opacity, tolerates
# anti-aliased edges)
ALPHA_THRESHOLD = 128

# RGB Euclidean distance below which a pixel matches the dominant color
DISTANCE_THRESHOLD = 30.0

# Fraction of opaque pixels that must match the dominant color
SIMILARITY_THRESHOLD = 0.85

# Fraction of sampled pixels that must be transparent
TRANSPARENCY_THRESHOLD = 0.1

# Edge length of the square sampling canvas (32x32 = 1024 pixels)
SAMPLE_SIZE = 32

# Luma below this is "dark"; simple midpoint, not gamma-corrected
DARK_LUMINANCE_THRESHOLD = 0.5

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


@dataclass(frozen=True)
class AnalyzerConfig:
    """Configuration for icon color analysis."""

    alpha_threshold: int = ALPHA_THRESHOLD
    distance_threshold: float = DISTANCE_THRESHOLD
    similarity_threshold: float = SIMILARITY_THRESHOLD
    transparency_threshold: float = TRANSPARENCY_THRESHOLD
    sample_size: int = SAMPLE_SIZE
    dark_luminance_threshold: float = DARK_LUMINANCE_THRESHOLD

    def __post_init__(self) -> None:
        if not 0 <= self.alpha_threshold <= 255:
            raise ValueError(f"alpha_threshold must be 0-255, got {self.alpha_threshold}")
        if self.distance_threshold <= 0:
            raise ValueError(
                f"distance_threshold must be > 0, got {self.distance_threshold}"
            )
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError(
                f"similarity_threshold must be 0-1, got {self.similarity_threshold}"
            )
        if not 0.0 <= self.transparency_threshold <= 1.0:
            raise ValueError(
                f"transparency_threshold must be 0-1, got {self.transparency_threshold}"
            )
        if self.sample_size < 1:
            raise ValueError(f"sample_size must be >= 1, got {self.sample_size}")


DEFAULT_CONFIG = AnalyzerConfig()
