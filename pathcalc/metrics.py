import math

import numpy as np


def distance_summary(distances, start_name=None):
    """
    Summarise a name -> distance mapping.
    Finite distances other than the start's own 0.0 feed mean/min/max;
    all three are 0.0 when nothing else is reachable.
    """
    finite = [d for name, d in distances.items()
              if not math.isinf(d) and name != start_name]
    unreachable = sum(1 for d in distances.values() if math.isinf(d))
    values = np.array(finite, dtype=float)
    return {
        "reachable": len(distances) - unreachable,
        "unreachable": unreachable,
        "mean": float(np.mean(values)) if values.size else 0.0,
        "min": float(np.min(values)) if values.size else 0.0,
        "max": float(np.max(values)) if values.size else 0.0,
    }
