# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Request handler for "analyze this image" calls.

Resolves and decodes the reference, runs the analyzer, and returns a
plain-data payload. Like the analyzer itself it never raises: a reference
that cannot be resolved or decoded answers with the not-simple payload.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from iconadapt.analyze import AnalyzerConfig, analyze, log_stats
from iconadapt.analyze.analyzer import StatsObserver
from iconadapt.load import (
    PathLike,
    UnsupportedReferenceError,
    load_buffer,
    reference_label,
)
from iconadapt.schema import NOT_SIMPLE
from iconadapt.runtime.payload import SerializerFormat, to_payload

logger = logging.getLogger(__name__)


def handle_analyze_image(
    reference: str,
    *,
    asset_dirs: Sequence[PathLike] = (),
    config: Optional[AnalyzerConfig] = None,
    observer: Optional[StatsObserver] = log_stats,
    format: SerializerFormat = SerializerFormat.DICT,
) -> Union[dict, str]:
    """Analyze the image behind ``reference`` and return the payload.

    Args:
        reference: Data URI, file URL, or local/asset path. http(s)
            references are answered with the not-simple payload.
        asset_dirs: Search roots for relative references.
        config: Analyzer thresholds.
        observer: Stats observer passed through to the analyzer.
        format: Payload format.

    Returns:
        ``{"isSimpleIcon", "mainColor", "isDark", "needsAdaptation"}`` as a
        dict, or JSON text for the JSON formats.
    """
    label = reference_label(reference)
    logger.debug("analyzing %s", label)

    try:
        buffer = load_buffer(reference, asset_dirs)
    except UnsupportedReferenceError as e:
        logger.info("skipping %s: %s", label, e)
        return to_payload(NOT_SIMPLE, format)
    except Exception as e:
        logger.warning("could not load %s: %s", label, e)
        return to_payload(NOT_SIMPLE, format)

    result = analyze(buffer, config=config, observer=observer, label=label)
    return to_payload(result, format)
