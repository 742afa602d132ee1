# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""
Image reference resolution and decoding.

Turns an image reference (data URI, file URL, local or packaged asset
path) into a PixelBuffer. This is the I/O side of the system; the analysis
core never imports it. Remote references are rejected before any fetch.
"""

from __future__ import annotations

import base64
import io
import re
from pathlib import Path
from typing import Sequence, Union
from urllib.parse import unquote_to_bytes, urlparse
from urllib.request import url2pathname

import numpy as np
from PIL import Image

from iconadapt.schema import PixelBuffer

PathLike = Union[str, Path]

_SPLIT_RE = re.compile(r"[/\\]")

# Modes that carry an alpha band natively
_ALPHA_MODES = {"RGBA", "RGBa", "LA", "La", "PA"}

# Dev-server asset URLs ("/src/assets/x.png") are rooted at an asset dir,
# not at the filesystem root
_DEV_SERVER_PREFIX = "/src/"


class UnsupportedReferenceError(ValueError):
    """Raised for references this loader refuses to resolve (http/https)."""


def reference_label(reference: str) -> str:
    """Short display name for a reference: the last path segment."""
    if reference.startswith("data:"):
        return "data-uri"
    name = _SPLIT_RE.split(reference)[-1]
    return name or "unknown"


def resolve_reference(
    reference: str,
    asset_dirs: Sequence[PathLike] = (),
) -> Union[bytes, Path]:
    """
    Resolve an image reference to raw bytes or a local path.

    Args:
        reference: One of:
            - ``data:image/...;base64,...`` URI — decoded to bytes
            - ``file:`` URL — percent-decoded to a local path
            - Dev-server path (``/src/...``) — treated as relative
            - Absolute path — used as given
            - Relative path (e.g. ``./assets/icon.png``) — searched in
              ``asset_dirs`` in order; the first existing candidate wins
        asset_dirs: Directories searched for relative references. When none
            exist, the reference resolves against the first directory (or
            the working directory if none are given).

    Returns:
        bytes for data URIs, Path otherwise

    Raises:
        UnsupportedReferenceError: for http/https references
        ValueError: for malformed data URIs
    """
    if reference.startswith(("http://", "https://")):
        raise UnsupportedReferenceError(
            f"Remote image references are not supported: {reference}"
        )

    if reference.startswith("data:"):
        return _decode_data_uri(reference)

    raw_path = _file_url_to_path(reference) if reference.startswith("file:") else reference
    if raw_path.startswith(_DEV_SERVER_PREFIX):
        raw_path = raw_path[1:]
    path = Path(raw_path)
    if path.is_absolute():
        return path

    roots = [Path(d) for d in asset_dirs]
    for root in roots:
        candidate = root / path
        if candidate.exists():
            return candidate
    return (roots[0] if roots else Path.cwd()) / path


def load_buffer(
    reference: str,
    asset_dirs: Sequence[PathLike] = (),
) -> PixelBuffer:
    """
    Resolve and decode an image reference.

    Images with transparency (an alpha band, or a ``transparency`` entry on
    palette/grayscale/RGB images) decode to 4-channel RGBA. Everything else
    decodes to 3-channel RGB, which the analyzer rejects.

    Raises:
        UnsupportedReferenceError: for http/https references
        FileNotFoundError: if a path does not exist
        PIL.UnidentifiedImageError: if the data is not a decodable image
    """
    source = resolve_reference(reference, asset_dirs)

    if isinstance(source, bytes):
        fp: Union[io.BytesIO, Path] = io.BytesIO(source)
    else:
        if not source.is_file():
            raise FileNotFoundError(f"Image not found: {source}")
        fp = source

    with Image.open(fp) as img:
        has_alpha = img.mode in _ALPHA_MODES or "transparency" in img.info
        img = img.convert("RGBA" if has_alpha else "RGB")
        pixels = np.array(img, dtype=np.uint8)

    pixels.setflags(write=False)
    return PixelBuffer(pixels)


def _decode_data_uri(reference: str) -> bytes:
    """Decode a ``data:`` URI payload."""
    header, sep, payload = reference.partition(",")
    if not sep:
        raise ValueError("Malformed data URI: missing ',' separator")
    if not header.startswith("data:image/"):
        raise UnsupportedReferenceError(
            f"Data URI is not an image: {header[:40]}"
        )
    if header.endswith(";base64"):
        try:
            return base64.b64decode("".join(payload.split()), validate=True)
        except ValueError as e:
            raise ValueError(f"Malformed base64 payload in data URI: {e}") from e
    return unquote_to_bytes(payload)


def _file_url_to_path(reference: str) -> str:
    """
    Convert a ``file:`` URL to a local path string.

    ``file:///abs/icon.png`` gives ``/abs/icon.png``. A host part other
    than ``localhost`` is read as the first path segment, so
    ``file://assets/icon.png`` gives ``assets/icon.png``.
    """
    parsed = urlparse(reference)
    path = parsed.path
    if parsed.netloc and parsed.netloc != "localhost":
        path = f"{parsed.netloc}{path}"
    return url2pathname(path)
