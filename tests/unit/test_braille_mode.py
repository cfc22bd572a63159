import unittest

from ascii_art.options import RenderOptions
from ascii_art.rendering.braille_mode import BrailleRenderer

from helpers import from_gray_rows, noise, solid


def cell_options(**kw):
    # 2x4 source, width 1 -> dot buffer 2 x floor(4 / 2 * 2) = 2x4, sampled 1:1
    return RenderOptions(output_width=1, **kw)


class BrailleRendererTests(unittest.TestCase):
    def test_white_block_all_dots(self):
        out = BrailleRenderer().render(solid(2, 4, (255, 255, 255)), cell_options())
        self.assertEqual(out, chr(0x28FF) + "\n")

    def test_black_block(self):
        src = solid(2, 4, (0, 0, 0))
        self.assertEqual(BrailleRenderer().render(src, cell_options()), chr(0x2800) + "\n")
        self.assertEqual(BrailleRenderer().render(src, cell_options(invert=True)), chr(0x28FF) + "\n")

    def test_bit_layout(self):
        expected = {
            (0, 0): 0x01, (1, 0): 0x08,
            (0, 1): 0x02, (1, 1): 0x10,
            (0, 2): 0x04, (1, 2): 0x20,
            (0, 3): 0x40, (1, 3): 0x80,
        }
        for (x, y), bit in expected.items():
            rows = [[0, 0] for _ in range(4)]
            rows[y][x] = 255
            out = BrailleRenderer().render(from_gray_rows(rows), cell_options())
            self.assertEqual(out, chr(0x2800 | bit) + "\n", (x, y))

    def test_partial_rows_stay_off(self):
        # 2x2 source -> dot buffer 2x2: only the top two dot rows exist
        out = BrailleRenderer().render(solid(2, 2, (255, 255, 255)), cell_options())
        self.assertEqual(out, chr(0x2800 | 0x1B) + "\n")

    def test_threshold_is_strict(self):
        out = BrailleRenderer().render(solid(2, 4, (255, 255, 255)), cell_options(threshold=255))
        self.assertEqual(out, chr(0x2800) + "\n")

    def test_output_shape(self):
        opts = RenderOptions(output_width=10)
        out = BrailleRenderer().render(noise(40, 40), opts)
        # dots 20 x floor(40 / 40 * 20) = 20x20 -> ceil(20 / 4) = 5 rows
        rows = out.split("\n")[:-1]
        self.assertEqual(len(rows), 5)
        self.assertTrue(all(len(r) == 10 for r in rows))
        self.assertTrue(all(0x2800 <= ord(c) <= 0x28FF for r in rows for c in r))

    def test_row_count_matches_classic(self):
        from ascii_art.rendering.ramp_mode import ClassicRenderer

        src = noise(100, 100, seed=4)
        opts = RenderOptions(output_width=10)
        braille = BrailleRenderer().render(src, opts).split("\n")[:-1]
        classic = ClassicRenderer().render(src, opts).split("\n")[:-1]
        self.assertEqual(len(braille), len(classic))
        self.assertEqual(len(braille), 5)


if __name__ == "__main__":
    unittest.main()
