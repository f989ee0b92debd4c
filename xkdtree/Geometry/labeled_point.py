import numpy as np

from xkdtree.Geometry.point2d import Point2D


class LabeledPoint2D:
    """带标签的二维点，构造后不可修改。标签只用于桶内排序。"""
    __slots__ = ("_point", "_label")

    def __init__(self, x: float, y: float, label: str):
        if not isinstance(label, str):
            raise ValueError(f"label 必须是字符串，实际 {type(label).__name__}")
        object.__setattr__(self, "_point", Point2D(x, y))
        object.__setattr__(self, "_label", label)

    def __setattr__(self, name, value):
        raise AttributeError("LabeledPoint2D is immutable")

    @property
    def point(self) -> Point2D:
        return self._point

    @property
    def label(self) -> str:
        return self._label

    @property
    def x(self) -> float:
        return self._point.x

    @property
    def y(self) -> float:
        return self._point.y

    def get(self, axis: int) -> float:
        return self._point.get(axis)

    def get_point2d(self) -> Point2D:
        return self._point

    def get_label(self) -> str:
        return self._label

    def __eq__(self, other):
        if not isinstance(other, LabeledPoint2D):
            return NotImplemented
        return self._label == other._label and self._point == other._point

    def __hash__(self):
        return hash((self._label, self._point))

    def __str__(self):
        return f"{self._label} {self._point}"

    def __repr__(self):
        return f"LabeledPoint2D({self._label!r}, {self.x}, {self.y})"


def labeled_points_from_array(coords, labels=None):
    """
    把 (n, 2) 的坐标数组转换为 LabeledPoint2D 列表。

    参数
    ----
    coords : array-like, shape (n, 2)
        点坐标，例如 PointDistribution 生成的 list[(x, y)] 或 numpy 数组
    labels : None 或长度 n 的字符串序列
        None 时使用 "p0", "p1", ...

    返回
    ----
    points : list[LabeledPoint2D]
    """
    arr = np.asarray(coords, dtype=float)
    if arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"coords 的形状必须是 (n, 2)，实际 {arr.shape}")

    n = arr.shape[0]
    if labels is None:
        labels = [f"p{i}" for i in range(n)]
    elif len(labels) != n:
        raise ValueError(f"labels 长度 {len(labels)} 与点数 {n} 不一致")

    return [LabeledPoint2D(x, y, str(lab)) for (x, y), lab in zip(arr.tolist(), labels)]
