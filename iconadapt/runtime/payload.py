# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Result payloads for request/response delivery.

The payload is the AnalysisResult exactly as measured, rendered with its
wire field names. Nothing is added or inferred.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Union

from iconadapt.schema import AnalysisResult


class SerializerFormat(Enum):
    """Output format for payloads."""

    DICT = "dict"
    JSON = "json"
    JSON_PRETTY = "json_pretty"


def to_payload(
    result: AnalysisResult,
    format: SerializerFormat = SerializerFormat.DICT,
) -> Union[dict, str]:
    """Render a result as a plain dict or JSON string.

    Example (JSON)::

        {"isSimpleIcon":true,"mainColor":"#1e90ff","isDark":false,"needsAdaptation":true}
    """
    data = result.to_dict()
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    if format == SerializerFormat.JSON:
        return json.dumps(data, separators=(",", ":"))
    return data
