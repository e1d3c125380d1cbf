"""
Tests for the Vector3 value type.
"""

import math
import unittest

import numpy as np

from meshproj.vector import Vector3


class TestVector3(unittest.TestCase):

    def setUp(self):
        self.a = Vector3(1.0, 2.0, 3.0)
        self.b = Vector3(4.0, -5.0, 6.0)

    def test_arithmetic(self):
        self.assertEqual(self.a.add(self.b), Vector3(5.0, -3.0, 9.0))
        self.assertEqual(self.a.sub(self.b), Vector3(-3.0, 7.0, -3.0))
        self.assertEqual(self.a.negate(), Vector3(-1.0, -2.0, -3.0))
        self.assertEqual(self.a.scale(2), Vector3(2.0, 4.0, 6.0))
        self.assertEqual(self.b.divide(2), Vector3(2.0, -2.5, 3.0))

    def test_operations_do_not_mutate(self):
        self.a.add(self.b)
        self.assertEqual(self.a, Vector3(1.0, 2.0, 3.0))
        with self.assertRaises(AttributeError):
            self.a.x = 10.0

    def test_min_max(self):
        self.assertEqual(self.a.minimum(self.b), Vector3(1.0, -5.0, 3.0))
        self.assertEqual(self.a.maximum(self.b), Vector3(4.0, 2.0, 6.0))

    def test_dot_and_cross(self):
        self.assertEqual(self.a.dot(self.b), 4.0 - 10.0 + 18.0)
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        self.assertEqual(x.cross(y), Vector3(0.0, 0.0, 1.0))
        self.assertEqual(y.cross(x), Vector3(0.0, 0.0, -1.0))
        cross = self.a.cross(self.b)
        np.testing.assert_allclose(cross.to_array(),
                                   np.cross(self.a.to_array(),
                                            self.b.to_array()))

    def test_normalized(self):
        n = Vector3(3.0, 0.0, 4.0).normalized()
        self.assertAlmostEqual(n.length(), 1.0)
        self.assertAlmostEqual(n.x, 0.6)
        self.assertAlmostEqual(n.z, 0.8)

    def test_zero_vector_normalizes_to_nan(self):
        n = Vector3().normalized()
        self.assertTrue(all(math.isnan(c) for c in n))

    def test_divide_by_zero_is_not_an_error(self):
        v = Vector3(1.0, -1.0, 0.0).divide(0)
        self.assertEqual(v.x, float('inf'))
        self.assertEqual(v.y, float('-inf'))
        self.assertTrue(math.isnan(v.z))

    def test_indexing(self):
        self.assertEqual([self.a[0], self.a[1], self.a[2]], [1.0, 2.0, 3.0])
        self.assertEqual(list(self.a), [1.0, 2.0, 3.0])
        with self.assertRaises(IndexError):
            self.a[3]

    def test_array_bridge(self):
        array = self.a.to_array()
        self.assertEqual(array.dtype, np.float64)
        self.assertEqual(Vector3.from_array(array), self.a)
        self.assertEqual(Vector3.splat(0.5), Vector3(0.5, 0.5, 0.5))


if __name__ == '__main__':
    unittest.main()
