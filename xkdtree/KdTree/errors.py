class XkdTreeError(Exception):
    """Base class for errors raised by the XkdTree package."""


class OutOfBoundsError(XkdTreeError, ValueError):
    """插入的点落在树的包围盒之外。"""

    def __init__(self, point, message=None):
        self.point = point
        if message is None:
            message = f"Attempt to insert a point outside bounding box: {point}"
        super().__init__(message)


class InvariantViolationError(XkdTreeError, RuntimeError):
    """树的内部结构被破坏，正常使用下不应出现。"""
