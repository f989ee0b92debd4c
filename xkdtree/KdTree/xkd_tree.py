from xkdtree.Geometry.rectangle2d import Rectangle2D
from xkdtree.KdTree.errors import OutOfBoundsError
from xkdtree.KdTree.node import ExternalNode
from xkdtree.logger import logger

DEFAULT_BUCKET_SIZE = 8


class XkdTree:
    """
    Bucketed kd-tree (XkdTree).

    Internal nodes only carry a cutting dimension and a cutting value, leaves
    (external nodes) hold up to ``bucket_size`` labeled points. When a bucket
    overflows it is split on the wider side of its own bounding box.
    """

    def __init__(self, bucket_size: int, bbox: Rectangle2D):
        if isinstance(bucket_size, bool) or not isinstance(bucket_size, int) or bucket_size < 1:
            raise ValueError(f"bucket_size 必须是 >= 1 的整数，实际 {bucket_size!r}")
        if not isinstance(bbox, Rectangle2D) or bbox.is_empty():
            raise ValueError("bbox 必须是非空的 Rectangle2D")
        self._bucket_size = bucket_size
        self._bbox = bbox.copy()
        self._size = 0
        self.root = ExternalNode()

    @property
    def bucket_size(self) -> int:
        return self._bucket_size

    @property
    def bbox(self) -> Rectangle2D:
        return self._bbox.copy()

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def clear(self):
        """删除所有点，根节点置空，下次插入或列出时重新建立空叶子。"""
        self._size = 0
        self.root = None
        logger.info("tree cleared")

    def find(self, pt):
        """返回坐标等于 pt 的第一个带标签点，没有则返回 None。"""
        if self._size == 0:
            return None
        return self.root.find(pt)

    def insert(self, pt):
        if not self._bbox.contains(pt.get_point2d()):
            logger.warning("rejected point outside bounding box: %s", pt)
            raise OutOfBoundsError(pt)
        self.bulk_insert([pt])

    def bulk_insert(self, pts):
        """
        一次插入一批点。先检查所有点都在包围盒内，
        只要有一个点越界就抛出 OutOfBoundsError，树保持不变。
        """
        pts = list(pts)
        for p in pts:
            if not self._bbox.contains(p.get_point2d()):
                logger.warning("rejected batch of %d points, %s is outside bounding box",
                               len(pts), p)
                raise OutOfBoundsError(p)
        if self._size == 0 or self.root is None:
            self.root = ExternalNode()
        self.root = self.root.bulk_insert(pts, self._bucket_size)
        self._size += len(pts)

    def delete(self, pt):
        """
        删除坐标等于 pt 的第一个点并返回它。
        叶子被删空时由兄弟子树顶替父节点；找不到时抛出 KeyError。
        """
        removed = None
        if self._size > 0:
            removed, replacement = self.root.delete(pt)
        if removed is None:
            raise KeyError(f"no point at {pt} in tree")
        self.root = replacement if replacement is not None else ExternalNode()
        self._size -= 1
        logger.debug("deleted %s, %d points left", removed, self._size)
        return removed

    def list(self):
        """右到左先序遍历，返回每个节点的字符串。"""
        if self._size == 0 or self.root is None:
            self.root = ExternalNode()
        res = []
        self.root.list(res)
        return res

    def nearest_neighbor(self, center):
        """返回离 center 最近的点；空树返回 None。"""
        if self._size == 0:
            return None
        return self.root.nearest_neighbor(center, self._bbox, None)

    def points(self):
        """按右到左先序的叶子顺序遍历所有点。"""
        if self._size == 0 or self.root is None:
            return iter(())
        return self.root.walk()

    def __iter__(self):
        return self.points()

    def height(self) -> int:
        if self._size == 0 or self.root is None:
            return 0
        return self.root.height()

    def draw(self, show=False, ax=None):
        from xkdtree.KdTree.draw import draw_tree
        return draw_tree(self, show=show, ax=ax)

    def __repr__(self):
        return f"XkdTree(bucket_size={self._bucket_size}, size={self._size}, bbox={self._bbox!r})"


# === 使用示例 ===
if __name__ == "__main__":
    from xkdtree.Geometry.point2d import Point2D
    from xkdtree.Geometry.labeled_point import labeled_points_from_array
    from xkdtree.PointDistribution import generate_clustered_points

    pts = generate_clustered_points(200, 3, x_range=(0, 10), y_range=(0, 10),
                                    std_dev=0.8, layout="grid", seed=42)
    tree = XkdTree(4, Rectangle2D(Point2D(0, 0), Point2D(10, 10)))
    tree.bulk_insert(labeled_points_from_array(pts))

    for line in tree.list()[:10]:
        print(line)
    print("size =", tree.size(), "height =", tree.height())
    print("nearest to (5, 5):", tree.nearest_neighbor(Point2D(5, 5)))
    tree.draw(show=True)
