import matplotlib.pyplot as plt

from xkdtree.KdTree.node import InternalNode


def _draw_node(ax, node, cell, color):
    if node is None:
        return
    if isinstance(node, InternalNode):
        # 切分线只画在当前单元内部
        if node.cut_dim == 0:
            ax.plot([node.cut_val, node.cut_val], [cell.low[1], cell.high[1]], color=color, lw=1)
        else:
            ax.plot([cell.low[0], cell.high[0]], [node.cut_val, node.cut_val], color=color, lw=1)
        _draw_node(ax, node.left, cell.left_part(node.cut_dim, node.cut_val), color)
        _draw_node(ax, node.right, cell.right_part(node.cut_dim, node.cut_val), color)
        return

    for p in node.points:
        ax.plot(p.x, p.y, 'ro', ms=3)
        ax.annotate(p.label, (p.x, p.y), textcoords="offset points", xytext=(3, 3), fontsize=7)


def draw_tree(tree, show=True, ax=None, color='b'):
    """
    利用 matplotlib 绘制 XkdTree：包围盒、每个内部节点的切分线（裁剪到其单元）以及所有点。
    返回绘制用的 Axes。
    """
    if ax is None:
        plt.figure()
        ax = plt.gca()

    bbox = tree.bbox
    xs = [bbox.low[0], bbox.high[0], bbox.high[0], bbox.low[0], bbox.low[0]]
    ys = [bbox.low[1], bbox.low[1], bbox.high[1], bbox.high[1], bbox.low[1]]
    ax.plot(xs, ys, 'k-', lw=2)

    if tree.size() > 0:
        _draw_node(ax, tree.root, bbox, color)

    ax.set_aspect('equal')
    ax.set_title(f"XkdTree (bucket size {tree.bucket_size}, {tree.size()} points)")
    if show:
        plt.show()
    return ax
