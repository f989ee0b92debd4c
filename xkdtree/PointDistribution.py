import numpy as np


def generate_uniform_points(n, x_range=(0, 10), y_range=(0, 10), seed=None):
    """在 [xmin, xmax] × [ymin, ymax] 内均匀生成 n 个点，返回 list[(x, y)]。"""
    rng = np.random.default_rng(seed)
    low = [x_range[0], y_range[0]]
    high = [x_range[1], y_range[1]]
    return rng.uniform(low, high, size=(n, 2)).tolist()


def cluster_centers(k, x_range, y_range, layout):
    """
    k 个簇中心，shape (k, 2)。
    "x_split" 沿 x 等距排开、y 取中线；"grid" 取近似 √k×√k 网格的格子中心。
    """
    (xmin, xmax), (ymin, ymax) = x_range, y_range
    if layout == "x_split":
        xs = np.linspace(xmin, xmax, k + 2)[1:-1]
        return np.column_stack([xs, np.full(k, (ymin + ymax) / 2)])
    if layout == "grid":
        cols = int(np.ceil(np.sqrt(k)))
        rows = int(np.ceil(k / cols))
        xs = xmin + (np.arange(cols) + 0.5) * (xmax - xmin) / cols
        ys = ymin + (np.arange(rows) + 0.5) * (ymax - ymin) / rows
        gx, gy = np.meshgrid(xs, ys)
        return np.column_stack([gx.ravel(), gy.ravel()])[:k]
    raise ValueError(f"layout 必须是 'x_split' 或 'grid'，实际 {layout!r}")


def generate_clustered_points(n, k, x_range=(0, 10), y_range=(0, 10),
                              std_dev=0.5, layout="x_split", seed=None):
    """k 个高斯簇的 n 个点，裁剪到区域内，保证都能插入以该区域为包围盒的树。"""
    if k < 1:
        raise ValueError("k 必须 >= 1")
    rng = np.random.default_rng(seed)
    centers = cluster_centers(k, x_range, y_range, layout)

    which = rng.integers(0, k, size=n)
    pts = rng.normal(loc=centers[which], scale=std_dev)
    # 簇边缘的点贴到边界上
    pts = np.clip(pts, [x_range[0], y_range[0]], [x_range[1], y_range[1]])
    return pts.tolist()


def generate_duplicate_points(n, point=(5.0, 5.0)):
    """n 个坐标完全相同的点，用来测试重复坐标时的分裂。"""
    return [tuple(point) for _ in range(n)]


if __name__ == "__main__":
    import matplotlib.pyplot as plt

    pts = generate_clustered_points(5000, 4, std_dev=0.6, layout="grid", seed=0)
    xs, ys = zip(*pts)
    plt.figure(figsize=(6, 6))
    plt.scatter(xs, ys, s=5, alpha=0.5)
    plt.xlim(0, 10); plt.ylim(0, 10)
    plt.title("Clustered points")
    plt.show()
