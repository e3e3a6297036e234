#!/usr/bin/env python
"""
Extract the subgraph grown from one or more seed nodes by breadth first
search to a fixed depth, together with the graph of the nodes left out.
"""

import collections
import numpy as np
from toolz import curry
from egoseed.bfs import bfs
from egoseed.component import LABEL, check_indexed, node_degree
from egoseed.errors import CompactionError, EgoSeedError, InvalidSeedError
from egoseed.mask import complement, mask_graph
import logging
logger = logging.getLogger(__name__)


def check_seed(graph, seed):
    n_nodes = graph.number_of_nodes()
    if isinstance(seed, (bool, np.bool_)) or not isinstance(seed, (int, np.integer)):
        raise InvalidSeedError(seed, n_nodes)
    if not 0 <= seed < n_nodes:
        raise InvalidSeedError(seed, n_nodes)
    return int(seed)


def check_seeds(graph, seeds):
    seeds = [check_seed(graph, seed) for seed in seeds]
    seeds = list(collections.OrderedDict.fromkeys(seeds))
    if len(seeds) == 0:
        raise InvalidSeedError(None, graph.number_of_nodes())
    return seeds


def check_depth(depth):
    if isinstance(depth, bool) or not isinstance(depth, (int, np.integer)) or depth < 0:
        raise ValueError('Depth must be a non negative integer, got %r' % (depth,))
    return int(depth)


def max_degree_node(graph):
    """Return the lowest index node among those of maximum degree.

    Node 0 is returned when the graph has no edges.
    """
    max_degree = 0
    max_degree_id = 0
    for u in range(graph.number_of_nodes()):
        degree = node_degree(graph, u)
        if degree > max_degree:
            max_degree = degree
            max_degree_id = u
    return max_degree_id


def node_with_label(graph, label):
    """Return the lowest index node whose label equals label."""
    for u in range(graph.number_of_nodes()):
        if graph.nodes[u].get(LABEL) == label:
            return u
    raise InvalidSeedError(label, graph.number_of_nodes())


def _mark_level(state, context):
    keep_mask, max_depth = context
    keep_mask[state.this_level] = True
    return state.depth >= max_depth


def seed_mask(graph, seeds, depth=1):
    """Mark every node within depth edges of a seed.

    Parameters
    ----------
    graph : Networkx undirected graph
        Graph indexed by 0..n-1.

    seeds : iterable of int
        Seed node indices.

    depth : int
        Maximum distance from the seeds; 0 selects the seeds only.

    Returns
    -------
    keep_mask : array of bool
        One entry per node.
    """
    check_indexed(graph)
    seeds = check_seeds(graph, seeds)
    depth = check_depth(depth)
    keep_mask = np.zeros(graph.number_of_nodes(), dtype=bool)
    keep_mask[seeds] = True
    bfs(graph, seeds, _mark_level, (keep_mask, depth))
    return keep_mask


@curry
def extract(graph, seeds, depth=1):
    """Extract the seeded subgraph and the remainder graph.

    Both graphs are built from the same keep mask: the subgraph from the
    nodes reached within depth, the remainder from all the others. Each
    is renumbered to its own index space 0..k-1.

    Returns
    -------
    subgraph, remainder : Networkx undirected graphs

    Raises
    ------
    InvalidSeedError
        If a seed is not a node index of graph, or no seed is given.
    CompactionError
        If building either graph fails.
    """
    keep_mask = seed_mask(graph, seeds, depth)
    try:
        subgraph = mask_graph(graph, keep_mask)
        remainder = mask_graph(graph, complement(keep_mask))
    except EgoSeedError as e:
        raise CompactionError('Could not build the seeded subgraph: %s' % e) from e
    logger.debug('seeded subgraph: %d nodes, remainder: %d nodes' % (
        subgraph.number_of_nodes(), remainder.number_of_nodes()))
    return subgraph, remainder
