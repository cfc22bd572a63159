import unittest

import numpy as np

from ascii_art.options import RenderOptions
from ascii_art.rendering.edge_mode import EDGE_CHARS, EdgeRenderer, classify, sobel

from helpers import from_gray_rows, solid


def square(**kw):
    return RenderOptions(output_width=6, aspect_ratio=1.0, **kw)


class SobelTests(unittest.TestCase):
    def test_flat_image_has_no_gradient(self):
        gx, gy = sobel(np.full((4, 5), 77.0))
        self.assertTrue((gx == 0).all())
        self.assertTrue((gy == 0).all())

    def test_single_pixel_clamps(self):
        gx, gy = sobel(np.array([[200.0]]))
        self.assertEqual((gx[0, 0], gy[0, 0]), (0.0, 0.0))

    def test_step_response(self):
        gray = np.array([[0.0, 0.0, 255.0, 255.0]] * 3)
        gx, gy = sobel(gray)
        self.assertEqual(gx[1].tolist(), [0.0, 1020.0, 1020.0, 0.0])
        self.assertTrue((gy == 0).all())


class ClassifyTests(unittest.TestCase):
    def test_direction_bands(self):
        cases = {
            (1.0, 0.0): EDGE_CHARS["horizontal"],     # 0 deg
            (1.0, 1.0): EDGE_CHARS["diagonal_right"],  # 45
            (0.0, 1.0): EDGE_CHARS["vertical"],        # 90
            (-1.0, 1.0): EDGE_CHARS["diagonal_left"],  # 135
            (-1.0, 0.0): EDGE_CHARS["horizontal"],     # 180 -> 0
            (1.0, -1.0): EDGE_CHARS["diagonal_left"],  # -45 -> 135
        }
        for (gx, gy), glyph in cases.items():
            out = classify(np.array([[gx * 100]]), np.array([[gy * 100]]), 1)
            self.assertEqual(out[0, 0], glyph, (gx, gy))

    def test_below_threshold_is_blank(self):
        out = classify(np.array([[3.0]]), np.array([[4.0]]), 5.0001)
        self.assertEqual(out[0, 0], " ")
        out = classify(np.array([[3.0]]), np.array([[4.0]]), 5)
        self.assertNotEqual(out[0, 0], " ")


class EdgeRendererTests(unittest.TestCase):
    def test_uniform_image_is_blank(self):
        src = solid(6, 6, (120, 60, 200))
        for threshold in (1, 50, 128, 255):
            out = EdgeRenderer().render(src, square(threshold=threshold))
            self.assertEqual(out, (" " * 6 + "\n") * 6)

    def test_vertical_step_gives_horizontal_gradient_glyph(self):
        src = from_gray_rows([[0, 0, 0, 255, 255, 255]] * 6)
        out = EdgeRenderer().render(src, square(threshold=50))
        self.assertEqual(out, "  ──  \n" * 6)

    def test_horizontal_step(self):
        src = from_gray_rows([[0] * 6] * 3 + [[255] * 6] * 3)
        out = EdgeRenderer().render(src, square(threshold=50))
        rows = out.split("\n")[:-1]
        self.assertEqual(rows, [" " * 6, " " * 6, "│" * 6, "│" * 6, " " * 6, " " * 6])

    def test_ignores_invert(self):
        src = from_gray_rows([[0, 0, 0, 255, 255, 255]] * 6)
        self.assertEqual(
            EdgeRenderer().render(src, square()),
            EdgeRenderer().render(src, square(invert=True)),
        )


if __name__ == "__main__":
    unittest.main()
