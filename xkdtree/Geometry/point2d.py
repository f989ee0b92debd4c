import math


class Point2D:
    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def get(self, axis: int) -> float:
        """按维度取坐标：0 = x，1 = y。"""
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        raise IndexError(f"axis 必须是 0 或 1，实际 {axis}")

    def distance_sq(self, other: "Point2D") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: "Point2D") -> float:
        return math.sqrt(self.distance_sq(other))

    def to_tuple(self):
        return (self.x, self.y)

    def __eq__(self, other):
        # 精确比较：树内的查找依赖坐标完全相等
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __str__(self):
        return f"{self.x} {self.y}"

    def __repr__(self):
        return f"Point2D({self.x}, {self.y})"
