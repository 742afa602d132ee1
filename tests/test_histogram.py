# Copyright (c) 2026 Iconadapt
# SPDX-License-Identifier: MIT

"""Tests for the histogram (mode) and similarity passes."""

import numpy as np

from iconadapt.analyze.histogram import build_histogram, count_similar, opaque_mask

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def _row(*pixels):
    """Build an (N, 4) RGBA array from (r, g, b, a) tuples."""
    return np.array(pixels, dtype=np.uint8).reshape(-1, 4)


class TestOpaqueMask:

    def test_threshold_is_strict(self):
        pixels = _row((0, 0, 0, 128), (0, 0, 0, 129), (0, 0, 0, 255), (0, 0, 0, 0))
        assert opaque_mask(pixels).tolist() == [False, True, True, False]


class TestBuildHistogram:

    def test_counts_only_opaque(self):
        pixels = _row((*RED, 255), (*RED, 200), (*BLUE, 100), (*BLUE, 0))
        histogram, main, opaque = build_histogram(pixels)
        assert opaque == 2
        assert histogram == {RED: 2}
        assert main == RED

    def test_alpha_not_part_of_key(self):
        pixels = _row((*RED, 255), (*RED, 130))
        histogram, _, _ = build_histogram(pixels)
        assert histogram[RED] == 2

    def test_mode_wins(self):
        pixels = _row((*BLUE, 255), (*RED, 255), (*RED, 255))
        _, main, _ = build_histogram(pixels)
        assert main == RED

    def test_tie_goes_to_first_to_reach_max(self):
        # A B B A: B reaches 2 before A does
        pixels = _row((*RED, 255), (*BLUE, 255), (*BLUE, 255), (*RED, 255))
        _, main, _ = build_histogram(pixels)
        assert main == BLUE

    def test_tie_in_alternating_scan(self):
        # A B A B: A reaches 2 first
        pixels = _row((*RED, 255), (*BLUE, 255), (*RED, 255), (*BLUE, 255))
        _, main, _ = build_histogram(pixels)
        assert main == RED

    def test_no_opaque_pixels(self):
        pixels = _row((*RED, 0), (*BLUE, 128))
        histogram, main, opaque = build_histogram(pixels)
        assert opaque == 0
        assert main is None
        assert len(histogram) == 0

    def test_keys_are_python_ints(self):
        _, main, _ = build_histogram(_row((*RED, 255)))
        assert all(type(c) is int for c in main)

    def test_custom_alpha_threshold(self):
        pixels = _row((*RED, 100))
        _, main, opaque = build_histogram(pixels, alpha_threshold=50)
        assert opaque == 1
        assert main == RED


class TestCountSimilar:

    def test_within_distance(self):
        pixels = _row(
            (*RED, 255),
            (245, 10, 10, 255),   # distance ~17.3
            (230, 0, 0, 255),     # distance 25
            (200, 0, 0, 255),     # distance 55
            (*BLUE, 255),
        )
        assert count_similar(pixels, RED) == 3

    def test_distance_threshold_is_strict(self):
        pixels = _row((225, 0, 0, 255))  # exactly 30 away
        assert count_similar(pixels, RED) == 0
        assert count_similar(pixels, RED, distance_threshold=30.01) == 1

    def test_ignores_transparent(self):
        pixels = _row((*RED, 0), (*RED, 128), (*RED, 255))
        assert count_similar(pixels, RED) == 1

    def test_empty(self):
        pixels = np.zeros((0, 4), dtype=np.uint8)
        assert count_similar(pixels, RED) == 0
