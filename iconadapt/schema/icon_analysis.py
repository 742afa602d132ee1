# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Icon analysis schema — records exchanged with the analyzer.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same pixels → same verdict
- Transient: Every record is scoped to a single analysis call
- Serializable: AnalysisResult is plain data with stable wire names

Wire format:
    AnalysisResult.to_dict() emits the field names consumers expect across
    a request/response boundary:

        {"isSimpleIcon": true, "mainColor": "#ff0000",
         "isDark": true, "needsAdaptation": true}
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Color Keys
# =============================================================================

# Exact (R, G, B) triple, 0-255 per channel. Alpha is never part of the key.
ColorKey = tuple[int, int, int]

_HEX_RE = re.compile(r"#[0-9a-f]{6}")


# =============================================================================
# Pixel Buffer
# =============================================================================


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """
    Read-only view of decoded pixels.

    Pixels are stored row-major as a (H, W, C) uint8 array, where C is 4
    for RGBA buffers and 3 for buffers decoded without an alpha channel.
    The array is marked non-writeable; the analyzer only ever reads it.

    Attributes:
        pixels: (H, W, C) uint8 array
    """
    pixels: NDArray[np.uint8]

    def __post_init__(self) -> None:
        """Validate array layout."""
        if not isinstance(self.pixels, np.ndarray):
            raise TypeError(
                f"Expected numpy array, got {type(self.pixels)}"
            )
        if self.pixels.ndim != 3 or self.pixels.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {self.pixels.shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {self.pixels.dtype}")

    @classmethod
    def from_array(cls, array: NDArray[np.uint8]) -> PixelBuffer:
        """Wrap a read-only copy of ``array`` so callers keep ownership."""
        if not isinstance(array, np.ndarray):
            raise TypeError(f"Expected numpy array, got {type(array)}")
        pixels = np.array(array, copy=True)
        pixels.setflags(write=False)
        return cls(pixels)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        width: int,
        height: int,
        channels: int = 4,
    ) -> PixelBuffer:
        """
        Wrap raw interleaved pixel bytes (e.g. a decoder's raw output).

        Args:
            data: width * height * channels bytes, row-major
            width: Image width in pixels
            height: Image height in pixels
            channels: 4 for RGBA, 3 for RGB

        Raises:
            ValueError: if the byte count does not match the dimensions
        """
        if channels not in (3, 4):
            raise ValueError(f"Channels must be 3 or 4, got {channels}")
        expected = width * height * channels
        if len(data) != expected:
            raise ValueError(
                f"Expected {expected} bytes for {width}x{height}x{channels}, "
                f"got {len(data)}"
            )
        pixels = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, channels)
        return cls(pixels)

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def channels(self) -> int:
        return int(self.pixels.shape[2])

    @property
    def has_alpha(self) -> bool:
        """True for 4-channel (RGBA) buffers."""
        return self.channels == 4

    @property
    def total_pixels(self) -> int:
        return self.width * self.height

    def flat(self) -> NDArray[np.uint8]:
        """Return the (H*W, C) row-major view of the pixels."""
        return self.pixels.reshape(-1, self.channels)


# =============================================================================
# Diagnostics
# =============================================================================


@dataclass(frozen=True, slots=True)
class IconStats:
    """
    Per-image statistics gathered during an analysis.

    Handed to the analyzer's observer once both passes have run. Not part
    of the result contract; used for diagnostics only.
    """
    color_count: int
    opaque_pixels: int
    total_pixels: int
    transparency_ratio: float
    similarity_ratio: float
    main_color: str
    is_dark: bool
    is_simple_icon: bool
    label: Optional[str] = None

    def summary(self) -> str:
        """
        One-line summary for logs.

        Example:
            "logo.png | colors:3 transparent:50% similar:98% main:#ff0000(dark) | simple"
        """
        name = self.label or "<buffer>"
        tone = "dark" if self.is_dark else "light"
        verdict = "simple" if self.is_simple_icon else "complex"
        return (
            f"{name} | colors:{self.color_count} "
            f"transparent:{self.transparency_ratio * 100:.0f}% "
            f"similar:{self.similarity_ratio * 100:.0f}% "
            f"main:{self.main_color}({tone}) | {verdict}"
        )


# =============================================================================
# Analysis Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    Verdict for one icon.

    Attributes:
        is_simple_icon: True if the icon is a flat single-color glyph over
            a transparent background
        main_color: Dominant color as lowercase "#rrggbb"; None unless
            is_simple_icon
        is_dark: True if the dominant color's luma is below the midpoint
        needs_adaptation: True if the consumer should adapt the surrounding
            background; always equal to is_simple_icon
    """
    is_simple_icon: bool
    main_color: Optional[str] = None
    is_dark: bool = False
    needs_adaptation: bool = False

    def __post_init__(self) -> None:
        """Validate result invariants."""
        if self.needs_adaptation != self.is_simple_icon:
            raise ValueError(
                "needs_adaptation must equal is_simple_icon, "
                f"got {self.needs_adaptation} and {self.is_simple_icon}"
            )
        if not self.is_simple_icon and self.main_color is not None:
            raise ValueError("main_color must be None unless is_simple_icon")
        if self.is_simple_icon:
            if self.main_color is None or not _HEX_RE.fullmatch(self.main_color):
                raise ValueError(
                    f"main_color must be lowercase '#rrggbb', got {self.main_color!r}"
                )

    @classmethod
    def not_simple(cls) -> AnalysisResult:
        """The safe default: no adaptation."""
        return cls(is_simple_icon=False, main_color=None, is_dark=False, needs_adaptation=False)

    @classmethod
    def simple(cls, main_color: str, is_dark: bool) -> AnalysisResult:
        return cls(
            is_simple_icon=True,
            main_color=main_color,
            is_dark=is_dark,
            needs_adaptation=True,
        )

    def to_dict(self) -> dict:
        """Serialize with wire field names."""
        return {
            "isSimpleIcon": self.is_simple_icon,
            "mainColor": self.main_color,
            "isDark": self.is_dark,
            "needsAdaptation": self.needs_adaptation,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> AnalysisResult:
        """Deserialize from a wire dictionary."""
        is_simple = bool(data["isSimpleIcon"])
        return cls(
            is_simple_icon=is_simple,
            main_color=data.get("mainColor"),
            is_dark=bool(data.get("isDark", False)),
            needs_adaptation=bool(data.get("needsAdaptation", is_simple)),
        )

    @classmethod
    def from_json(cls, json_str: str) -> AnalysisResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


NOT_SIMPLE = AnalysisResult.not_simple()
