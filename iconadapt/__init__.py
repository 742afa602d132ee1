# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Iconadapt -- Flat-color icon detection for background adaptation.

Decides whether a decoded icon is a single flat color over a transparent
background and, if so, reports that color and whether it is dark, so the
surrounding UI can pick a contrasting background.

Quick start::

    from iconadapt import analyze, load_buffer

    result = analyze(load_buffer("assets/icon.png"))
    result.is_simple_icon   # True for flat glyphs
    result.main_color       # "#1e90ff"
    result.to_dict()        # Wire payload
"""

from __future__ import annotations

__version__ = "1.0.0"

from iconadapt.analyze import AnalyzerConfig, IconColorAnalyzer, analyze
from iconadapt.load import UnsupportedReferenceError, load_buffer
from iconadapt.schema import (
    NOT_SIMPLE,
    AnalysisResult,
    IconStats,
    PixelBuffer,
)

__all__ = [
    # Core API
    "analyze",
    "IconColorAnalyzer",
    "AnalyzerConfig",
    # Types
    "PixelBuffer",
    "AnalysisResult",
    "IconStats",
    "NOT_SIMPLE",
    # Loading
    "load_buffer",
    "UnsupportedReferenceError",
    # Version
    "__version__",
]
