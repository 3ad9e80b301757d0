import math

from pathcalc.distance_calculator import get_calculator
from pathcalc.baseline_dijkstra import networkx_distances
from pathcalc.topology import build_demo_graph, load_graph_yaml, topology_summary
from pathcalc.metrics import distance_summary


def load_topology(config):
    path = config.get("topology_path")
    if path:
        print(f"Loading topology from {path}...")
        return load_graph_yaml(path)
    print("Building demo topology...")
    return build_demo_graph()


def verify_distances(distances, reference):
    """Raise RuntimeError listing every node whose distance disagrees."""
    mismatches = []
    for name, expected in reference.items():
        got = distances.get(name)
        if got is None:
            mismatches.append((name, got, expected))
        elif math.isinf(expected) or math.isinf(got):
            if got != expected:
                mismatches.append((name, got, expected))
        elif not math.isclose(got, expected, rel_tol=1e-9, abs_tol=1e-9):
            mismatches.append((name, got, expected))
    if mismatches:
        detail = ", ".join(f"{n}: {g} != {e}" for n, g, e in mismatches)
        raise RuntimeError(f"Distance mismatch against networkx: {detail}")


def format_distance(distance):
    """Whole numbers print without a trailing .0; unreachable prints as inf."""
    if math.isinf(distance):
        return "inf"
    if float(distance).is_integer():
        return str(int(distance))
    return str(distance)


def format_distances(distances):
    """One `Name, Distance` line per entry, in result order."""
    return [f"{name}, {format_distance(distance)}" for name, distance in distances.items()]


def run_calculation(config):
    graph = load_topology(config)
    print(f"Topology: {topology_summary(graph)}")

    algo = config.get("calculator", "naive")
    start = config.get("start_node", "A")
    print(f"Calculator selected: {algo} (start node {start})")
    calculator = get_calculator(algo)

    distances = calculator.calculate_distances(graph, start)

    if config.get("verify", False):
        verify_distances(distances, networkx_distances(graph, start))
        print("Verified against networkx.")

    print("\n=== Distances ===")
    for line in format_distances(distances):
        print(line)
    print("\n=== Summary ===")
    print(distance_summary(distances, start))

    if config.get("plot", False):
        from pathcalc.visualize import plot_distances
        plot_distances(distances, f"Distance From {start}", config.get("plot_path"))
    return distances
