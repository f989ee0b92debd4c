from xkdtree.Geometry.rectangle2d import Rectangle2D


def by_label(lp):
    """桶内默认顺序：按标签字典序。"""
    return lp.get_label()


def by_x_then_y(lp):
    return (lp.get(0), lp.get(1))


def by_y_then_x(lp):
    return (lp.get(1), lp.get(0))


def sort_key_for_axis(axis):
    """
    切分维度对应的排序键：先按切分维度，再按另一维度打破平局。
    次关键字决定切分结果，不能省略。
    """
    if axis == 0:
        return by_x_then_y
    if axis == 1:
        return by_y_then_x
    raise IndexError(f"axis 必须是 0 或 1，实际 {axis}")


def bounding_box(points):
    """
    input a list of labeled points, then measure their bounding box
    :param points:
    :return: Rectangle2D, empty if points is empty
    """
    box = Rectangle2D()
    for lp in points:
        box.expand(lp.get_point2d())
    return box


def widest_axis(box):
    # 宽度相同时选 x
    return 0 if box.width(0) >= box.width(1) else 1
