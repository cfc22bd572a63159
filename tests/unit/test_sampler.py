import unittest

from ascii_art.errors import InvalidDimensions
from ascii_art.options import RenderOptions
from ascii_art.sampler import braille_grid_size, grid_size, sample, sample_braille

from helpers import noise, solid


class GridSizeTests(unittest.TestCase):
    def test_aspect_formula(self):
        self.assertEqual(grid_size(200, 100, 80, 0.5), (80, 20))
        self.assertEqual(grid_size(100, 300, 10, 0.5), (10, 15))
        # 10 / 20 * 10 * 0.5 = 2.5 -> floor
        self.assertEqual(grid_size(20, 10, 10, 0.5), (10, 2))

    def test_height_never_zero(self):
        self.assertEqual(grid_size(1000, 1, 10, 0.5), (10, 1))

    def test_rejects_bad_input(self):
        with self.assertRaises(InvalidDimensions):
            grid_size(10, 10, 0, 0.5)
        with self.assertRaises(InvalidDimensions):
            grid_size(0, 10, 5, 0.5)

    def test_braille_ignores_aspect(self):
        self.assertEqual(braille_grid_size(100, 100, 10), (20, 20))
        self.assertEqual(braille_grid_size(40, 20, 10), (20, 10))
        self.assertEqual(braille_grid_size(1000, 1, 10), (20, 1))


class SampleTests(unittest.TestCase):
    def test_same_size_is_passthrough(self):
        src = noise(2, 2)
        self.assertIs(sample(src, RenderOptions(output_width=2, aspect_ratio=1.0)), src)

    def test_downsample_dimensions(self):
        out = sample(noise(8, 8), RenderOptions(output_width=4))
        self.assertEqual(out.size, (4, 2))

    def test_upsample_dimensions(self):
        out = sample(solid(3, 3, (10, 20, 30)), RenderOptions(output_width=9, aspect_ratio=1.0))
        self.assertEqual(out.size, (9, 9))
        self.assertEqual(out.pixel(4, 4), (10, 20, 30, 255))

    def test_braille_sample_dimensions(self):
        out = sample_braille(noise(40, 20), RenderOptions(output_width=10))
        # dots 20 x floor(20 / 40 * 20) = 20x10, whatever the aspect ratio
        self.assertEqual(out.size, (20, 10))
        out = sample_braille(noise(40, 20), RenderOptions(output_width=10, aspect_ratio=2.0))
        self.assertEqual(out.size, (20, 10))

    def test_deterministic(self):
        src = noise(37, 23, seed=9)
        for method in ("box", "nearest", "bilinear", "lanczos"):
            opts = RenderOptions(output_width=11, resample=method)
            self.assertEqual(sample(src, opts).pixels, sample(src, opts).pixels)


if __name__ == "__main__":
    unittest.main()
