# node.py

from xkdtree.Geometry.geometry import by_label, sort_key_for_axis, bounding_box, widest_axis
from xkdtree.KdTree.errors import InvariantViolationError
from xkdtree.logger import logger


class Node:
    """
    XkdTree 的节点接口。两种形态：
      - InternalNode：只保存切分维度 cut_dim 和切分值 cut_val，以及左右孩子
      - ExternalNode：叶节点，保存至多 bucket_size 个带标签点（桶）
    """

    def is_leaf(self):
        raise NotImplementedError

    def find(self, pt):
        raise NotImplementedError

    def bulk_insert(self, pts, bucket_size):
        raise NotImplementedError

    def delete(self, pt):
        raise NotImplementedError

    def list(self, res):
        raise NotImplementedError

    def nearest_neighbor(self, center, cell, best):
        raise NotImplementedError

    def walk(self):
        raise NotImplementedError

    def height(self):
        raise NotImplementedError


class InternalNode(Node):
    __slots__ = ("cut_dim", "cut_val", "left", "right")

    def __init__(self, cut_dim, cut_val, left, right):
        self.cut_dim = cut_dim  # 0 = x, 1 = y
        self.cut_val = cut_val
        self.left = left
        self.right = right

    def is_leaf(self):
        return False

    def _check(self):
        if self.left is None or self.right is None:
            raise InvariantViolationError(
                f"internal node {self.label()} is missing a child")
        if self.cut_dim not in (0, 1):
            raise InvariantViolationError(f"bad cutting dimension {self.cut_dim}")

    def label(self):
        axis = "x" if self.cut_dim == 0 else "y"
        return f"({axis}={self.cut_val})"

    def find(self, pt):
        """
        大于切分值走右边，小于走左边；相等时先查左边，找不到再查右边。
        叶子分裂按下标划分，与切分值相等的点可能落在左边。
        """
        self._check()
        v = pt.get(self.cut_dim)
        if v > self.cut_val:
            return self.right.find(pt)
        if v < self.cut_val:
            return self.left.find(pt)
        found = self.left.find(pt)
        if found is None:
            return self.right.find(pt)
        return found

    def bulk_insert(self, pts, bucket_size):
        self._check()
        left_pts = []
        right_pts = []
        for p in pts:
            if p.get(self.cut_dim) >= self.cut_val:
                right_pts.append(p)
            else:
                left_pts.append(p)
        self.left = self.left.bulk_insert(left_pts, bucket_size)
        self.right = self.right.bulk_insert(right_pts, bucket_size)
        return self

    def delete(self, pt):
        """
        返回 (被删除的点, 替换本节点的子树)。
        某个孩子被删空时，用另一个孩子顶替本节点。
        """
        self._check()
        v = pt.get(self.cut_dim)
        if v > self.cut_val:
            sides = ("right",)
        elif v < self.cut_val:
            sides = ("left",)
        else:
            sides = ("left", "right")

        for side in sides:
            removed, replacement = getattr(self, side).delete(pt)
            if removed is None:
                continue
            if replacement is None:
                return removed, (self.right if side == "left" else self.left)
            setattr(self, side, replacement)
            return removed, self
        return None, self

    def list(self, res):
        # 右到左的先序遍历
        self._check()
        res.append(self.label())
        self.right.list(res)
        self.left.list(res)

    def nearest_neighbor(self, center, cell, best):
        self._check()
        left_cell = cell.left_part(self.cut_dim, self.cut_val)
        right_cell = cell.right_part(self.cut_dim, self.cut_val)

        if center.get(self.cut_dim) < self.cut_val:
            near, near_cell, far, far_cell = self.left, left_cell, self.right, right_cell
        else:
            near, near_cell, far, far_cell = self.right, right_cell, self.left, left_cell

        best = near.nearest_neighbor(center, near_cell, best)
        # 远侧单元比当前最优更近时才需要进入
        if best is None or far_cell.distance_sq(center) < center.distance_sq(best.get_point2d()):
            best = far.nearest_neighbor(center, far_cell, best)
        return best

    def walk(self):
        self._check()
        yield from self.right.walk()
        yield from self.left.walk()

    def height(self):
        self._check()
        return 1 + max(self.left.height(), self.right.height())

    def __repr__(self):
        return f"InternalNode{self.label()}"


class ExternalNode(Node):
    __slots__ = ("points",)

    def __init__(self, points=None):
        self.points = list(points) if points else []  # 桶

    def is_leaf(self):
        return True

    def find(self, pt):
        for p in self.points:
            if p.get_point2d() == pt:
                return p
        return None

    def bulk_insert(self, pts, bucket_size):
        """
        把 pts 加入桶并按标签排序；超过 bucket_size 时分裂：
          1) 测量桶内所有点的包围盒
          2) 取较宽的一边作为切分维度（相等取 x）
          3) 按切分维度排序，另一维度打破平局
          4) 奇数个取中位点坐标，偶数个取中间两点的平均值
          5) 按下标划分：[0, m) 去左边，[m, n) 去右边
        返回替换本节点的子树。
        """
        self.points.extend(pts)
        self.points.sort(key=by_label)

        if len(self.points) <= bucket_size:
            return self

        box = bounding_box(self.points)
        cut_dim = widest_axis(box)
        self.points.sort(key=sort_key_for_axis(cut_dim))

        n = len(self.points)
        m = n // 2
        if n % 2 != 0:
            cut_val = self.points[m].get(cut_dim)
        else:
            cut_val = (self.points[m - 1].get(cut_dim) + self.points[m].get(cut_dim)) / 2

        logger.debug("split bucket of %d points on %s at %s",
                     n, "x" if cut_dim == 0 else "y", cut_val)

        # 按下标划分，保证两侧都非空，重复坐标也能终止
        left = ExternalNode().bulk_insert(self.points[:m], bucket_size)
        right = ExternalNode().bulk_insert(self.points[m:], bucket_size)
        return InternalNode(cut_dim, cut_val, left, right)

    def delete(self, pt):
        for i, p in enumerate(self.points):
            if p.get_point2d() == pt:
                del self.points[i]
                return p, (self if self.points else None)
        return None, self

    def list(self, res):
        res.append("[ " + "".join("{" + str(p) + "} " for p in self.points) + "]")

    def nearest_neighbor(self, center, cell, best):
        best_dist = None if best is None else center.distance_sq(best.get_point2d())
        for p in self.points:
            d = center.distance_sq(p.get_point2d())
            if best_dist is None or d < best_dist:
                best = p
                best_dist = d
        return best

    def walk(self):
        yield from self.points

    def height(self):
        return 0

    def __repr__(self):
        return f"ExternalNode({len(self.points)} points)"
