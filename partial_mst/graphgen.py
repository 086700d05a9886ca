import argparse

import numpy as np


def generate_edges(nvertices: int,
                   density: float=0.5,
                   min_weight: int=1,
                   max_weight: int=100,
                   seed: int=0) -> list[tuple[int, int, int]]:
    '''
    Random connected undirected graph with no self-loops or parallel edges.

    A random spanning tree is laid down first so the result is always
    connected, then random extra edges are added until the graph holds
    density * n(n-1)/2 edges (or n-1, whichever is larger).
    '''
    rng = np.random.default_rng(seed)

    max_edges = nvertices * (nvertices-1) // 2
    total_edges = min(max(int(density * max_edges), nvertices - 1), max_edges)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=bool)

    # attach each vertex (in random order) to one already placed
    order = rng.permutation(nvertices)
    for k in range(1, nvertices):
        parent = order[rng.integers(0, k)]
        i, j = sorted((int(order[k]), int(parent)))
        adj_matrix[i, j] = True

    # Only bother filling upper triangle for undirected graphs
    rows, cols = np.triu_indices(nvertices, k=1)
    free = np.flatnonzero(~adj_matrix[rows, cols])
    extra = total_edges - (nvertices - 1 if nvertices else 0)
    chosen = rng.choice(free, size=extra, replace=False) if extra > 0 else np.empty(0, dtype=np.intp)
    adj_matrix[rows[chosen], cols[chosen]] = True

    weights = rng.integers(min_weight, max_weight, endpoint=True, size=(nvertices, nvertices))

    return [(int(i), int(j), int(weights[i, j])) for (i, j) in zip(*np.nonzero(adj_matrix))]


def write_graph(fname: str, nvertices: int, edges: list[tuple[int, int, int]], binary: bool=False) -> None:
    if binary:
        header = np.array([nvertices, len(edges)], dtype='<i4')
        body = np.array(edges, dtype='<i4').reshape(-1)
        with open(fname, 'wb') as f:
            f.write(header.tobytes())
            f.write(body.tobytes())
    else:
        with open(fname, 'w') as f:
            f.write(f'{nvertices} {len(edges)}\n')
            for (u, v, w) in edges:
                f.write(f'{u} {v} {w}\n')


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate connected graphs for the MST runner')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    if args.nvertices < 1:
        parser.error('nvertices must be at least 1')
    if args.min_weight < 0 or args.min_weight > args.max_weight:
        parser.error('need 0 <= --min-weight <= --max-weight')

    edges = generate_edges(args.nvertices, args.density, args.min_weight, args.max_weight, args.seed)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({len(edges)} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        print('Graph edges:')
        for edge in edges:
            print(f'  {edge}')

    write_graph(args.outfile, args.nvertices, edges, binary=args.binary)


if __name__ == '__main__':
    main()
