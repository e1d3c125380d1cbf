"""
Tests for the tile layout planner.
"""

import itertools
import unittest

from meshproj.tiling import TileLayout, plan_tiles


class TestPlanTiles(unittest.TestCase):

    def test_single_primitive_covers_grid(self):
        self.assertEqual(plan_tiles(1, 2, 2), TileLayout(2, 2, 1, 1))

    def test_square_grid(self):
        # tiles_per_col = sqrt(16) = 4, tiles_per_row = 4
        self.assertEqual(plan_tiles(16, 8, 8), TileLayout(2, 2, 4, 4))

    def test_aspect_ratio(self):
        # tiles_per_col = floor(sqrt(8 * 4 / 8)) = 2, tiles_per_row = 4
        self.assertEqual(plan_tiles(8, 8, 4), TileLayout(2, 2, 4, 2))

    def test_more_primitives_than_pixels(self):
        layout = plan_tiles(10, 3, 3)
        self.assertEqual(layout, TileLayout(1, 1, 3, 3))
        self.assertEqual(layout.origin(9), (0, 0))
        self.assertEqual(layout.origin(10), (1, 0))

    def test_zero_sized_tile_falls_back_to_pixels(self):
        # tiles_per_col = 2, tiles_per_row = 4 > width
        self.assertEqual(plan_tiles(8, 3, 3), TileLayout(1, 1, 3, 3))

    def test_tiles_per_col_at_least_one(self):
        # sqrt(1 * 2 / 4) < 1
        self.assertEqual(plan_tiles(1, 4, 2), TileLayout(4, 2, 1, 1))

    def test_no_primitives(self):
        self.assertEqual(plan_tiles(0, 5, 3).capacity, 1)

    def test_origin_and_block(self):
        layout = plan_tiles(16, 8, 8)
        self.assertEqual(layout.origin(0), (0, 0))
        self.assertEqual(layout.origin(5), (2, 2))
        self.assertEqual(layout.block(5), (slice(2, 4), slice(2, 4)))

    def test_rows_past_capacity_keep_their_tile(self):
        # tiles_per_col = tiles_per_row = 3, 10 面目は 4 行目に入る
        layout = plan_tiles(10, 5, 5)
        self.assertEqual(layout, TileLayout(1, 1, 3, 3))
        self.assertEqual(layout.origin(9), (0, 3))

    def test_rows_below_image_wrap_to_capacity(self):
        # 7 面, 3x6: 4 行目のタイルは y = 6 となり画像からはみ出す
        layout = plan_tiles(7, 3, 6)
        self.assertEqual(layout, TileLayout(1, 2, 2, 3))
        self.assertEqual(layout.origin(5), (1, 4))
        self.assertEqual(layout.origin(6), (0, 0))

    def test_origins_inside_grid(self):
        for width, height in itertools.product(range(1, 9), repeat=2):
            for count in range(1, width * height + 1):
                layout = plan_tiles(count, width, height)
                self.assertGreater(layout.pixels_w, 0)
                self.assertGreater(layout.pixels_h, 0)
                for i in range(count):
                    x, y = layout.origin(i)
                    self.assertTrue(0 <= x < width and 0 <= y < height,
                                    (count, width, height, i, x, y))


if __name__ == '__main__':
    unittest.main()
