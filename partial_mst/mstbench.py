## Benchmark the partial tree MST against edge-sorted Kruskal and networkx

import argparse
import os
import re
import time

from typing import Any, Callable

import networkx as nx

from partial_mst import nx_utils
from partial_mst.graph import Graph
from partial_mst.mst import minimum_spanning_tree, reference_weight, total_weight


def run_partial_trees(graph: Graph, _g: nx.Graph) -> int:
    return total_weight(minimum_spanning_tree(graph))


def run_kruskal(graph: Graph, _g: nx.Graph) -> int:
    return reference_weight(graph)


def run_networkx(_graph: Graph, g: nx.Graph) -> int:
    return nx_utils.mst_weight(g)


def save_graph(g: nx.Graph, outdir: str, test_name: str, binary: bool=False) -> str:
    fname = os.path.join(outdir, re.sub(r'[^\w.-]+', '_', test_name) + ('.bin' if binary else '.txt'))
    nx_utils.to_output_file(g, nx_utils.stored_weight(g), fname, binary=binary)
    return fname


def measure(impl: Callable[[Graph, nx.Graph], int], graph: Graph, g: nx.Graph, nreps: int) -> dict[str, Any]:
    compute_times = []
    weights = []
    for _ in range(nreps):
        start = time.perf_counter()
        weights.append(impl(graph, g))
        compute_times.append(time.perf_counter() - start)

    metrics: dict[str, Any] = {
        'compute_times': compute_times,
        'avg_compute_time': sum(compute_times)/len(compute_times),
    }
    if min(weights) == max(weights):
        metrics['weight'] = weights[0]
    return metrics


def print_stats(all_metrics: dict[str, dict[str, dict[str, Any]]], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        speedups = []
        for (test, metrics) in all_metrics[impl].items():
            print(f'  {test} ({len(metrics["compute_times"])} runs):')

            expected = all_metrics[baseline][test].get('weight')
            if 'weight' not in metrics or metrics['weight'] != expected:
                print('    Inconsistent result on this test')
                continue

            speedup = all_metrics[baseline][test]['avg_compute_time'] / metrics['avg_compute_time']
            speedups.append(speedup)

            print(f'    Compute time = {metrics["avg_compute_time"]:0.4f}s, weight = {metrics["weight"]}')
            print(f'    Speedup over {baseline} = {speedup:0.2f}x')
            print()

        if speedups:
            print(f'Average speedup of {impl}: {sum(speedups)/len(speedups):0.2f}')
        print()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark the partial tree MST against reference implementations')
    parser.add_argument('-r', '--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random weights',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)
    parser.add_argument('-o', '--outdir',
                        help='also save each generated graph here, for rerunning with partial-mst')
    parser.add_argument('-b', '--binary',
                        action='store_true',
                        help='save graphs in the binary format')

    args = parser.parse_args(argv)

    if args.outdir is not None:
        os.makedirs(args.outdir, exist_ok=True)

    # Which impl is the one being benchmarked against
    BASELINE = 'Kruskal'

    impls = {
        BASELINE: run_kruskal,
        'Partial trees': run_partial_trees,
        'networkx': run_networkx,
    }

    tests = {
        '2-degree Circulant n=500':
            lambda: nx.circulant_graph(500, [1, 2]),

        'Hypercube d=8, n=256':
            lambda: nx.convert_node_labels_to_integers(nx.hypercube_graph(8)),

        'Connected Caveman Graph, 50 groups of size k=10, n=500':
            lambda: nx.connected_caveman_graph(50, 10),

        'Complete Graph n=100':
            lambda: nx.complete_graph(100),
    }

    all_metrics: dict[str, dict[str, dict[str, Any]]] = {
        impl: {} for impl in impls.keys()
    }

    for (test_name, test_gen) in tests.items():
        print(f'Generating graph for test "{test_name}"...')
        g = nx_utils.set_weights(test_gen(),
                                 nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed))
        graph = nx_utils.from_networkx(g)
        if args.outdir is not None:
            print(f'  Saved to {save_graph(g, args.outdir, test_name, args.binary)}')

        for (impl, run) in impls.items():
            print(f'  Running {impl} impl on test "{test_name}"...')
            metrics = measure(run, graph, g, args.reps)
            if 'weight' not in metrics:
                print(f'!!! Error on {impl}: inconsistent outputs')
            all_metrics[impl][test_name] = metrics
            print('   ', {k: v for (k, v) in metrics.items() if k != 'compute_times'})
        print()

    print_stats(all_metrics, BASELINE)


if __name__ == '__main__':
    main()
