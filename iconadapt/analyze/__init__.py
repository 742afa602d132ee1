# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Analysis core for Iconadapt.

Pure, deterministic classification of decoded pixel buffers. No file or
network I/O happens here.
"""

from iconadapt.analyze.analyzer import IconColorAnalyzer, analyze, log_stats
from iconadapt.analyze.config import AnalyzerConfig

__all__ = ["analyze", "IconColorAnalyzer", "AnalyzerConfig", "log_stats"]
