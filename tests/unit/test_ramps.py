import unittest

import numpy as np

from ascii_art.errors import EmptyRamp
from ascii_art.ramps import RAMPS, get_ramp, glyph_index, glyph_indices, resolve_ramp


class RampRegistryTests(unittest.TestCase):
    def test_named_ramp_glyph_counts(self):
        expected = {
            "standard": 70,
            "detailed": 12,
            "simple": 10,
            "blocks": 5,
            "dots": 6,
            "binary": 2,
            "tech": 22,
            "custom": 0,
        }
        self.assertEqual({k: len(v) for k, v in RAMPS.items()}, expected)

    def test_ramps_run_dark_to_light(self):
        self.assertEqual(RAMPS["standard"][0], "$")
        self.assertEqual(RAMPS["standard"][-1], " ")
        self.assertEqual(RAMPS["blocks"], "█▓▒░ ")

    def test_resolve_custom(self):
        self.assertEqual(resolve_ramp("custom", "ab"), "ab")
        with self.assertRaises(EmptyRamp):
            resolve_ramp("custom", "")
        with self.assertRaises(EmptyRamp):
            resolve_ramp("custom", "x")

    def test_resolve_defaults_to_standard(self):
        self.assertEqual(resolve_ramp(None), RAMPS["standard"])

    def test_unknown_ramp(self):
        with self.assertRaises(KeyError):
            get_ramp("nope")


class GlyphIndexTests(unittest.TestCase):
    def test_index_always_in_range(self):
        for length in (2, 5, 6, 12, 70):
            for gray in range(-60, 320, 3):
                for invert in (False, True):
                    idx = glyph_index(gray, length, invert)
                    self.assertGreaterEqual(idx, 0)
                    self.assertLessEqual(idx, length - 1)

    def test_endpoints(self):
        self.assertEqual(glyph_index(0, 10), 0)
        self.assertEqual(glyph_index(255, 10), 9)
        self.assertEqual(glyph_index(0, 10, invert=True), 9)
        self.assertEqual(glyph_index(255, 10, invert=True), 0)

    def test_floor_not_round(self):
        # 127 / 255 * 1 = 0.498 -> 0, 254.9 -> 0.99 -> 0
        self.assertEqual(glyph_index(127, 2), 0)
        self.assertEqual(glyph_index(254.9, 2), 0)

    def test_array_matches_scalar(self):
        grays = np.linspace(-10, 265, 211)
        for invert in (False, True):
            vec = glyph_indices(grays, 70, invert)
            self.assertEqual(vec.tolist(), [glyph_index(g, 70, invert) for g in grays])


if __name__ == "__main__":
    unittest.main()
