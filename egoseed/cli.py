#!/usr/bin/env python
"""Command line entry points for seeded subgraph extraction."""

import argparse
import sys
from xml.etree.ElementTree import ParseError
import networkx as nx
from egoseed.decompose import EgoDecomposer
from egoseed.errors import EgoSeedError, InvalidSeedError
from egoseed.io import GraphFileSink, read_graph, write_graph
from egoseed.seed import extract, max_degree_node, node_with_label
import logging
logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace with the selected command and its options.
    """
    parser = argparse.ArgumentParser(
        prog='egoseed',
        description='Extract breadth first seeded subgraphs from graph files.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log traversal and masking details.')
    subparsers = parser.add_subparsers(dest='command', required=True)

    decompose = subparsers.add_parser(
        'decompose',
        help='Extract components by iteratively seeding from the maximum '
             'degree node.')
    decompose.add_argument('input', help='Input graph file.')
    decompose.add_argument('outpref', help='Prefix of the output files.')
    decompose.add_argument('-m', '--maxcmps', type=int, default=10,
                           help='Maximum number of components to extract.')
    decompose.add_argument('-d', '--depth', type=int, default=1,
                           help='Subgraph extraction depth.')
    decompose.add_argument('-s', '--suffix', default='.json',
                           choices=['.json', '.graphml'],
                           help='Output file format.')

    seed = subparsers.add_parser(
        'seed', help='Extract a subgraph from a single seed node.')
    seed.add_argument('input', help='Input graph file.')
    seed.add_argument('output', help='Output graph file (.json or .graphml).')
    selection = seed.add_mutually_exclusive_group(required=True)
    selection.add_argument('-n', '--nodeid', type=int,
                           help='Index of the seed node.')
    selection.add_argument('-m', '--maxdeg', action='store_true',
                           help='Use the node with maximum degree as seed.')
    selection.add_argument('-l', '--label',
                           help='Use the first node with this label as seed.')
    seed.add_argument('-d', '--depth', type=int, default=1,
                      help='Depth to extract.')
    return parser.parse_args(argv)


def load(path):
    try:
        return read_graph(path)
    except (OSError, ValueError, KeyError, TypeError, ParseError,
            nx.NetworkXError) as e:
        logger.error('Could not read in %s: %s' % (path, e))
        return None


def run_decompose(args):
    graph = load(args.input)
    if graph is None:
        return 1
    decomposer = EgoDecomposer(
        depth=args.depth,
        max_components=args.maxcmps,
        sink=GraphFileSink(args.outpref, suffix=args.suffix))
    try:
        decomposer.run(graph)
    except EgoSeedError as e:
        logger.error('%s' % e)
        return 1
    return 0


def get_seed_node(args, graph):
    if args.nodeid is not None:
        return args.nodeid
    if args.maxdeg:
        return max_degree_node(graph)
    return label_seed_node(graph, args.label)


def label_seed_node(graph, label):
    """Find the node labelled label, falling back to its integer value."""
    try:
        return node_with_label(graph, label)
    except InvalidSeedError:
        try:
            value = int(label)
        except ValueError:
            value = None
        if value is None:
            raise
    return node_with_label(graph, value)


def run_seed(args):
    graph = load(args.input)
    if graph is None:
        return 1
    try:
        seed = get_seed_node(args, graph)
        subgraph, _ = extract(graph, [seed], args.depth)
    except EgoSeedError as e:
        logger.error('Error creating seed subgraph: %s' % e)
        return 1
    try:
        write_graph(subgraph, args.output)
    except (OSError, ValueError, nx.NetworkXError) as e:
        logger.error('Could not write to %s: %s' % (args.output, e))
        return 1
    logger.info('Seeded subgraph (%d nodes): %s' % (
        subgraph.number_of_nodes(), args.output))
    return 0


def main(argv=None):
    args = parse_arguments(argv)
    logging.basicConfig(
        stream=sys.stdout,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(message)s')
    if args.depth < 0:
        logger.error('Depth must be non negative')
        return 1
    if args.command == 'decompose' and args.maxcmps < 0:
        logger.error('Maximum number of components must be non negative')
        return 1
    if args.command == 'decompose':
        return run_decompose(args)
    return run_seed(args)


if __name__ == '__main__':
    sys.exit(main())
