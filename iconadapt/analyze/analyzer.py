# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Main analysis API.

Decides whether a decoded bitmap is a flat single-color icon over a
transparent background and, if so, reports its color and whether it is
dark. Callers use the verdict to pick a contrasting background; the
fallback (no adaptation) is always safe, so analysis never raises.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

import numpy as np
from numpy.typing import NDArray

from iconadapt.schema import NOT_SIMPLE, AnalysisResult, IconStats, PixelBuffer
from iconadapt.analyze.colorspace import is_dark_color, rgb_to_hex
from iconadapt.analyze.config import DEFAULT_CONFIG, AnalyzerConfig
from iconadapt.analyze.histogram import build_histogram, count_similar
from iconadapt.analyze.sample import fit_contain

logger = logging.getLogger(__name__)

StatsObserver = Callable[[IconStats], None]


def log_stats(stats: IconStats) -> None:
    """Default observer: log the per-image summary at DEBUG."""
    logger.debug("icon analysis: %s", stats.summary())


def analyze(
    buffer: Union[PixelBuffer, NDArray[np.uint8]],
    *,
    config: Optional[AnalyzerConfig] = None,
    observer: Optional[StatsObserver] = log_stats,
    label: Optional[str] = None,
) -> AnalysisResult:
    """
    Classify a decoded bitmap as a simple flat-color icon or not.

    Steps:
    - Buffers without an alpha channel are rejected outright
    - The buffer is fit into the sampling canvas (32x32 by default)
    - Pass 1 finds the most common exact RGB among opaque pixels
    - Pass 2 counts opaque pixels near that color
    - The icon is simple when similarity > 0.85 and transparency > 0.1

    Args:
        buffer: PixelBuffer, or a (H, W, 3|4) uint8 array
        config: Thresholds (uses defaults if None)
        observer: Called with IconStats once both passes have run.
            Defaults to logging at DEBUG; pass None to disable.
        label: Optional source name included in the stats

    Returns:
        AnalysisResult. Any failure, including malformed input, yields
        the not-simple result.

    Example:
        >>> pixels = np.zeros((32, 32, 4), dtype=np.uint8)
        >>> pixels[:16] = [255, 0, 0, 255]
        >>> analyze(pixels, observer=None)
        AnalysisResult(is_simple_icon=True, main_color='#ff0000', is_dark=True, needs_adaptation=True)
    """
    cfg = config or DEFAULT_CONFIG
    try:
        return _analyze(buffer, cfg, observer, label)
    except Exception as e:
        logger.warning("icon analysis failed for %s: %s", label or "<buffer>", e)
        return NOT_SIMPLE


def _analyze(
    buffer: Union[PixelBuffer, NDArray[np.uint8]],
    cfg: AnalyzerConfig,
    observer: Optional[StatsObserver],
    label: Optional[str],
) -> AnalysisResult:
    if not isinstance(buffer, PixelBuffer):
        buffer = PixelBuffer.from_array(buffer)

    # Icons without transparency are never candidates
    if not buffer.has_alpha:
        return NOT_SIMPLE

    if buffer.total_pixels == 0:
        return NOT_SIMPLE

    sampled = fit_contain(buffer, cfg.sample_size)
    rgba = sampled.flat()
    total_pixels = sampled.total_pixels

    histogram, main_color, opaque_pixels = build_histogram(rgba, cfg.alpha_threshold)
    if main_color is None:
        return NOT_SIMPLE

    similar_pixels = count_similar(
        rgba,
        main_color,
        alpha_threshold=cfg.alpha_threshold,
        distance_threshold=cfg.distance_threshold,
    )

    transparency_ratio = (total_pixels - opaque_pixels) / total_pixels
    similarity_ratio = similar_pixels / opaque_pixels

    # Both gates: mostly one color AND a transparent margin
    is_simple = (
        similarity_ratio > cfg.similarity_threshold
        and transparency_ratio > cfg.transparency_threshold
    )

    is_dark = is_dark_color(main_color, cfg.dark_luminance_threshold)
    hex_color = rgb_to_hex(main_color)

    if observer is not None:
        observer(IconStats(
            color_count=len(histogram),
            opaque_pixels=opaque_pixels,
            total_pixels=total_pixels,
            transparency_ratio=transparency_ratio,
            similarity_ratio=similarity_ratio,
            main_color=hex_color,
            is_dark=is_dark,
            is_simple_icon=is_simple,
            label=label,
        ))

    if not is_simple:
        return NOT_SIMPLE

    return AnalysisResult.simple(main_color=hex_color, is_dark=is_dark)


class IconColorAnalyzer:
    """
    Reusable analyzer bound to a config and observer.

    Holds no per-call state, so one instance can serve concurrent calls
    on independent buffers.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        observer: Optional[StatsObserver] = log_stats,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.observer = observer

    def analyze(
        self,
        buffer: Union[PixelBuffer, NDArray[np.uint8]],
        label: Optional[str] = None,
    ) -> AnalysisResult:
        return analyze(buffer, config=self.config, observer=self.observer, label=label)
