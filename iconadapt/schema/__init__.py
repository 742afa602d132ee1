# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Schema definitions for icon analysis.

All types in this module are immutable (frozen dataclasses) and scoped to
a single analysis call. Nothing is persisted or shared across calls.
"""

from iconadapt.schema.icon_analysis import (
    NOT_SIMPLE,
    AnalysisResult,
    ColorKey,
    IconStats,
    PixelBuffer,
)

__all__ = [
    # Input
    "PixelBuffer",
    "ColorKey",
    # Diagnostics (observer payload)
    "IconStats",
    # Verdict
    "AnalysisResult",
    "NOT_SIMPLE",
]
