## Command line runner for the partial tree MST

import argparse
import logging
import sys
import time

from partial_mst.graph import Graph, GraphFormatError
from partial_mst.kruskal import Edge, kruskal
from partial_mst.partial_tree_list import execute, initialize
from partial_mst.structures import Arc

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger('partial_mst').setLevel(level)


def total_weight(arcs: list[Arc]) -> int:
    return sum(arc.weight for arc in arcs)


def reference_weight(graph: Graph) -> int:
    index = {v.name: i for (i, v) in enumerate(graph.vertices)}
    edges = [Edge(index[u], index[v], w) for (u, v, w) in graph.edges]
    return sum(e.weight for e in kruskal(len(graph), edges))


def minimum_spanning_tree(graph: Graph) -> list[Arc]:
    return execute(initialize(graph))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='partial-mst',
                                     description='Minimum spanning tree by merging partial trees')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('-f', '--file',
                        help='graph in text format')
    source.add_argument('-bf', '--bin-file',
                        help='graph in binary format')
    parser.add_argument('-r', '--reps',
                        default=1,
                        help='the number of times to repeat the computation',
                        type=int)
    parser.add_argument('--verify',
                        action='store_true',
                        help='check the total weight against edge-sorted Kruskal')
    parser.add_argument('-e', '--edges',
                        action='store_true',
                        help='print the chosen edges')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet',
                        action='store_true',
                        help='hide the timing lines')

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.reps < 1:
        parser.error('--reps must be at least 1')

    start = time.perf_counter()
    try:
        if args.file is not None:
            graph = Graph.from_file(args.file)
        else:
            graph = Graph.from_bin_file(args.bin_file)
    except (OSError, GraphFormatError) as e:
        print(f'partial-mst: {e}', file=sys.stderr)
        return 2
    if not args.quiet:
        print(f'File read time (sec): {time.perf_counter() - start:0.6f}')

    weights = []
    for rep in range(args.reps):
        start = time.perf_counter()
        ptlist = initialize(graph)
        init_time = time.perf_counter() - start
        if rep == 0 and not args.quiet:
            print(f'Initialization time (sec): {init_time:0.6f}')

        start = time.perf_counter()
        mst = execute(ptlist)
        if not args.quiet:
            print(f'Computation time (sec): {time.perf_counter() - start:0.6f}')

        weights.append(total_weight(mst))
        print(f'Total weight: {weights[-1]}')

    if len(mst) != len(graph) - 1:
        logger.warning(f'MST has {len(mst)} edges for {len(graph)} vertices; is the graph connected?')

    if args.edges:
        for arc in mst:
            print(arc)

    if args.verify:
        expected = reference_weight(graph)
        if any(w != expected for w in weights):
            print(f'Verification FAILED: expected total weight {expected}')
            return 1
        print('Verification passed')

    return 0


if __name__ == '__main__':
    sys.exit(main())
