from xkdtree.Geometry.point2d import Point2D
from xkdtree.Geometry.rectangle2d import Rectangle2D
from xkdtree.Geometry.labeled_point import LabeledPoint2D, labeled_points_from_array
from xkdtree.KdTree.errors import XkdTreeError, OutOfBoundsError, InvariantViolationError
from xkdtree.KdTree.xkd_tree import XkdTree

__all__ = [
    "Point2D",
    "Rectangle2D",
    "LabeledPoint2D",
    "labeled_points_from_array",
    "XkdTree",
    "XkdTreeError",
    "OutOfBoundsError",
    "InvariantViolationError",
]
