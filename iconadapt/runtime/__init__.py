# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Iconadapt.

Answers "analyze this image" requests with plain-data payloads that can
cross a request/response boundary (IPC, HTTP, RPC). The delivery layer
never modifies analysis content.
"""

from iconadapt.runtime.payload import SerializerFormat, to_payload
from iconadapt.runtime.handler import handle_analyze_image

__all__ = [
    "handle_analyze_image",
    "to_payload",
    "SerializerFormat",
]
