import math

from xkdtree.Geometry.point2d import Point2D


class Rectangle2D:
    """
    闭合的轴对齐矩形 [low.x, high.x] × [low.y, high.y]。

    不带参数构造时是空矩形（low = +inf, high = -inf），
    之后通过 expand() 逐点扩张，用来测量一个桶的包围盒。
    """

    def __init__(self, low: Point2D = None, high: Point2D = None):
        if low is None and high is None:
            self.low = [math.inf, math.inf]
            self.high = [-math.inf, -math.inf]
            return
        if low is None or high is None:
            raise ValueError("low 和 high 必须同时给出")
        self.low = [low.x, low.y]
        self.high = [high.x, high.y]

    def is_empty(self) -> bool:
        return self.low[0] > self.high[0] or self.low[1] > self.high[1]

    def expand(self, p: Point2D) -> "Rectangle2D":
        """扩张矩形使其包含 p，原地修改并返回自身。"""
        for axis in (0, 1):
            v = p.get(axis)
            if v < self.low[axis]:
                self.low[axis] = v
            if v > self.high[axis]:
                self.high[axis] = v
        return self

    def width(self, axis: int) -> float:
        if self.is_empty():
            return 0.0
        return self.high[axis] - self.low[axis]

    def contains(self, p: Point2D) -> bool:
        return (self.low[0] <= p.x <= self.high[0]
                and self.low[1] <= p.y <= self.high[1])

    def distance_sq(self, p: Point2D) -> float:
        """p 到矩形的平方距离；p 在矩形内时为 0。"""
        total = 0.0
        for axis in (0, 1):
            v = p.get(axis)
            if v < self.low[axis]:
                gap = self.low[axis] - v
            elif v > self.high[axis]:
                gap = v - self.high[axis]
            else:
                continue
            total += gap * gap
        return total

    def left_part(self, axis: int, value: float) -> "Rectangle2D":
        part = self.copy()
        part.high[axis] = value
        return part

    def right_part(self, axis: int, value: float) -> "Rectangle2D":
        part = self.copy()
        part.low[axis] = value
        return part

    def copy(self) -> "Rectangle2D":
        rect = Rectangle2D()
        rect.low = list(self.low)
        rect.high = list(self.high)
        return rect

    def __eq__(self, other):
        if not isinstance(other, Rectangle2D):
            return NotImplemented
        return self.low == other.low and self.high == other.high

    def __repr__(self):
        return f"Rectangle2D([{self.low[0]}, {self.high[0]}] x [{self.low[1]}, {self.high[1]}])"
