import math
import os

import matplotlib
import matplotlib.pyplot as plt


def plot_distances(distances, title="Distance From Start", save_path=None):
    """
    Bar chart of finite distances; unreachable node names go in the title.
    Saves to `save_path` when given (non-interactive backend), else shows.
    """
    if save_path:
        matplotlib.use('Agg')
    reachable = {n: d for n, d in distances.items() if not math.isinf(d)}
    unreachable = [str(n) for n, d in distances.items() if math.isinf(d)]
    if unreachable:
        title = f"{title} (unreachable: {', '.join(unreachable)})"

    fig = plt.figure()
    plt.bar([str(n) for n in reachable], list(reachable.values()))
    plt.title(title)
    plt.xlabel("Node")
    plt.ylabel("Distance")
    plt.grid(True, axis='y')
    plt.tight_layout()
    if save_path:
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
        fig.savefig(save_path)
        plt.close(fig)
        return save_path
    plt.show()
    return None
