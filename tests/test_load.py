# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""Tests for reference resolution and decoding."""

import base64
import io
from pathlib import Path

import numpy as np
import pytest
from PIL import Image, UnidentifiedImageError

from iconadapt.load import (
    UnsupportedReferenceError,
    load_buffer,
    reference_label,
    resolve_reference,
)


def _rgba_png_bytes(size=16):
    img = np.zeros((size, size, 4), dtype=np.uint8)
    img[: size // 2] = [0, 0, 255, 255]
    buf = io.BytesIO()
    Image.fromarray(img).save(buf, format="PNG")
    return buf.getvalue()


def _data_uri(data: bytes, mime="image/png") -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


@pytest.fixture
def icon_file(tmp_path):
    path = tmp_path / "icon.png"
    path.write_bytes(_rgba_png_bytes())
    return path


class TestResolveReference:

    def test_http_rejected(self):
        with pytest.raises(UnsupportedReferenceError):
            resolve_reference("https://example.com/icon.png")
        with pytest.raises(UnsupportedReferenceError):
            resolve_reference("http://example.com/icon.png")

    def test_unsupported_is_value_error(self):
        assert issubclass(UnsupportedReferenceError, ValueError)

    def test_data_uri_decoded(self):
        payload = _rgba_png_bytes()
        assert resolve_reference(_data_uri(payload)) == payload

    def test_data_uri_bad_base64(self):
        with pytest.raises(ValueError, match="base64"):
            resolve_reference("data:image/png;base64,@@@")

    def test_data_uri_missing_separator(self):
        with pytest.raises(ValueError, match="separator"):
            resolve_reference("data:image/png;base64")

    def test_data_uri_must_be_image(self):
        with pytest.raises(UnsupportedReferenceError):
            resolve_reference("data:text/plain,hello")

    def test_absolute_path(self, icon_file):
        assert resolve_reference(str(icon_file)) == icon_file

    def test_file_url(self, icon_file):
        assert resolve_reference(icon_file.as_uri()) == icon_file

    def test_file_url_percent_decoded(self, tmp_path):
        path = tmp_path / "my icon.png"
        assert "%20" in path.as_uri()
        assert resolve_reference(path.as_uri()) == path

    def test_file_url_without_slashes(self, tmp_path):
        (tmp_path / "assets").mkdir()
        target = tmp_path / "assets" / "a.png"
        target.write_bytes(b"")
        assert resolve_reference("file:assets/a.png", [tmp_path]) == target
        assert resolve_reference("file://assets/a.png", [tmp_path]) == target

    def test_dev_server_path_searched_in_asset_dirs(self, tmp_path):
        renderer = tmp_path / "renderer"
        (renderer / "src" / "assets").mkdir(parents=True)
        target = renderer / "src" / "assets" / "x.png"
        target.write_bytes(b"")
        assert resolve_reference("/src/assets/x.png", [tmp_path / "out", renderer]) == target

    def test_data_uri_tolerates_line_breaks(self):
        payload = _rgba_png_bytes()
        encoded = base64.b64encode(payload).decode("ascii")
        wrapped = "\n".join(encoded[i:i + 40] for i in range(0, len(encoded), 40))
        assert resolve_reference(f"data:image/png;base64,{wrapped} ") == payload

    def test_asset_dirs_searched_in_order(self, tmp_path):
        first = tmp_path / "out"
        second = tmp_path / "src"
        (first / "assets").mkdir(parents=True)
        (second / "assets").mkdir(parents=True)
        (second / "assets" / "logo.png").write_bytes(b"")

        assert resolve_reference("./assets/logo.png", [first, second]) == (
            second / "assets" / "logo.png"
        )

        (first / "assets" / "logo.png").write_bytes(b"")
        assert resolve_reference("assets/logo.png", [first, second]) == (
            first / "assets" / "logo.png"
        )

    def test_missing_relative_falls_back_to_first_dir(self, tmp_path):
        assert resolve_reference("nope.png", [tmp_path, tmp_path / "x"]) == tmp_path / "nope.png"

    def test_relative_without_dirs_uses_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_reference("nope.png") == Path.cwd() / "nope.png"


class TestLoadBuffer:

    def test_rgba_png(self, icon_file):
        buf = load_buffer(str(icon_file))
        assert buf.has_alpha
        assert buf.pixels.shape == (16, 16, 4)
        assert buf.pixels[0, 0].tolist() == [0, 0, 255, 255]
        assert buf.pixels[15, 0, 3] == 0

    def test_buffer_is_read_only(self, icon_file):
        assert not load_buffer(str(icon_file)).pixels.flags.writeable

    def test_rgb_png_has_no_alpha(self, tmp_path):
        path = tmp_path / "photo.png"
        Image.new("RGB", (8, 8), (10, 20, 30)).save(path)
        buf = load_buffer(str(path))
        assert buf.channels == 3

    def test_palette_with_transparency_becomes_rgba(self, tmp_path):
        path = tmp_path / "pal.png"
        img = Image.new("P", (8, 8), 0)
        img.putpalette([0, 0, 0, 255, 0, 0] + [0] * (256 * 3 - 6))
        img.paste(1, (0, 0, 8, 4))
        img.save(path, transparency=0)
        buf = load_buffer(str(path))
        assert buf.has_alpha
        assert buf.pixels[0, 0].tolist() == [255, 0, 0, 255]
        assert buf.pixels[7, 0, 3] == 0

    def test_grayscale_alpha_becomes_rgba(self, tmp_path):
        path = tmp_path / "la.png"
        Image.new("LA", (4, 4), (200, 255)).save(path)
        buf = load_buffer(str(path))
        assert buf.pixels[0, 0].tolist() == [200, 200, 200, 255]

    def test_data_uri(self):
        buf = load_buffer(_data_uri(_rgba_png_bytes(size=8)))
        assert buf.pixels.shape == (8, 8, 4)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_buffer(str(tmp_path / "missing.png"))

    def test_undecodable_data(self):
        with pytest.raises(UnidentifiedImageError):
            load_buffer(_data_uri(b"definitely not an image"))


class TestReferenceLabel:

    def test_posix_path(self):
        assert reference_label("/a/b/icon.png") == "icon.png"

    def test_windows_path(self):
        assert reference_label("C:\\icons\\app.ico") == "app.ico"

    def test_data_uri(self):
        assert reference_label("data:image/png;base64,AAAA") == "data-uri"

    def test_trailing_separator(self):
        assert reference_label("/a/b/") == "unknown"
