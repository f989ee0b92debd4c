# test/test_delete.py

import random
import unittest

from ..xkd_tree import XkdTree
from ...Geometry.point2d import Point2D
from ...Geometry.rectangle2d import Rectangle2D
from ...Geometry.labeled_point import LabeledPoint2D, labeled_points_from_array
from ...PointDistribution import generate_uniform_points


class TestDelete(unittest.TestCase):

    def setUp(self):
        self.tree = XkdTree(2, Rectangle2D(Point2D(0, 0), Point2D(10, 10)))
        self.a = LabeledPoint2D(1, 1, "a")
        self.b = LabeledPoint2D(9, 2, "b")
        self.c = LabeledPoint2D(5, 5, "c")
        for p in (self.a, self.b, self.c):
            self.tree.insert(p)

    def test_delete_collapses_empty_leaf(self):
        removed = self.tree.delete(Point2D(1, 1))
        self.assertIs(removed, self.a)
        self.assertEqual(self.tree.size(), 2)
        # 左叶子被删空，父节点由右兄弟顶替
        self.assertEqual(self.tree.list(), ["[ {b 9.0 2.0} {c 5.0 5.0} ]"])
        self.assertIsNone(self.tree.find(Point2D(1, 1)))
        self.assertIs(self.tree.nearest_neighbor(Point2D(0, 0)), self.c)

    def test_delete_keeps_nonempty_leaf(self):
        self.assertIs(self.tree.delete(Point2D(9, 2)), self.b)
        self.assertEqual(self.tree.list(), ["(x=5.0)", "[ {c 5.0 5.0} ]", "[ {a 1.0 1.0} ]"])

    def test_delete_missing_raises(self):
        before = self.tree.list()
        with self.assertRaises(KeyError):
            self.tree.delete(Point2D(3, 3))
        self.assertEqual(self.tree.list(), before)
        self.assertEqual(self.tree.size(), 3)

    def test_delete_on_empty_tree(self):
        self.tree.clear()
        with self.assertRaises(KeyError):
            self.tree.delete(Point2D(1, 1))

    def test_delete_everything(self):
        for p in (self.b, self.a, self.c):
            self.tree.delete(p.get_point2d())
        self.assertEqual(self.tree.size(), 0)
        self.assertEqual(self.tree.list(), ["[ ]"])
        self.tree.insert(self.a)
        self.assertEqual(self.tree.list(), ["[ {a 1.0 1.0} ]"])

    def test_delete_duplicate_from_left_first(self):
        tree = XkdTree(2, Rectangle2D(Point2D(0, 0), Point2D(10, 10)))
        x = LabeledPoint2D(5, 5, "x")
        y = LabeledPoint2D(5, 5, "y")
        z = LabeledPoint2D(5, 5, "z")
        tree.bulk_insert([x, y, z])
        self.assertIs(tree.delete(Point2D(5, 5)), x)
        self.assertEqual(tree.list(), ["[ {y 5.0 5.0} {z 5.0 5.0} ]"])
        self.assertIs(tree.find(Point2D(5, 5)), y)

    def test_random_deletes_keep_queries_correct(self):
        random.seed(5)
        tree = XkdTree(3, Rectangle2D(Point2D(0, 0), Point2D(10, 10)))
        pts = labeled_points_from_array(generate_uniform_points(200, seed=3))
        tree.bulk_insert(pts)
        random.shuffle(pts)
        gone, kept = pts[:120], pts[120:]
        for p in gone:
            self.assertIs(tree.delete(p.get_point2d()), p)
        self.assertEqual(tree.size(), len(kept))
        self.assertEqual(len(list(tree)), len(kept))
        for p in gone:
            self.assertIsNone(tree.find(p.get_point2d()))
        for p in kept:
            self.assertIs(tree.find(p.get_point2d()), p)

        for qx, qy in generate_uniform_points(50, seed=4):
            q = Point2D(qx, qy)
            best = tree.nearest_neighbor(q)
            expected = min(q.distance(p.get_point2d()) for p in kept)
            self.assertAlmostEqual(q.distance(best.get_point2d()), expected, places=9)


if __name__ == "__main__":
    unittest.main()
