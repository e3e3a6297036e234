#!/usr/bin/env python
"""Build graphs that contain only the nodes selected by a boolean mask."""

import copy
import numpy as np
import networkx as nx
from egoseed.component import LABEL, check_indexed
from egoseed.errors import AllocationError, LabelMissingError
import logging
logger = logging.getLogger(__name__)


def as_keep_mask(graph, keep_mask):
    n_nodes = graph.number_of_nodes()
    keep_mask = np.asarray(keep_mask, dtype=bool)
    if keep_mask.shape != (n_nodes,):
        raise ValueError(
            'Mask has shape %s, expected one entry per node (%d)' %
            (keep_mask.shape, n_nodes))
    return keep_mask


def complement(keep_mask):
    return ~np.asarray(keep_mask, dtype=bool)


def make_index_map(keep_mask):
    """Pair each kept node index with its index in the masked graph.

    Kept nodes are numbered in ascending order of their input index, so
    the output indices are exactly 0..k-1 and preserve the input order.

    Parameters
    ----------
    keep_mask : array of bool
        One entry per node of the input graph.

    Returns
    -------
    index_map : list[(int, int)]
        The (source index, target index) pairs.
    """
    kept = np.flatnonzero(np.asarray(keep_mask, dtype=bool))
    return [(int(u), v) for v, u in enumerate(kept)]


def _add_nodes(graph, out_graph, index_map):
    for u, v in index_map:
        attributes = graph.nodes[u]
        if LABEL not in attributes:
            raise LabelMissingError(u)
        out_graph.add_node(v, **copy.deepcopy(attributes))


def _add_edges(graph, out_graph, source2target):
    # only the neighbours of kept nodes are scanned; each pair is added once
    # from its endpoint with the lower output index
    for u, v in source2target.items():
        for w in graph.neighbors(u):
            target = source2target.get(w)
            if target is not None and v < target:
                out_graph.add_edge(v, target, **graph.edges[u, w])


def mask_graph(graph, keep_mask):
    """Build the subgraph induced by the kept nodes, renumbered to 0..k-1.

    Node attributes (the label included) and edge attributes are copied;
    the input graph is left untouched.

    Parameters
    ----------
    graph : Networkx undirected graph
        Graph indexed by 0..n-1.

    keep_mask : array of bool
        keep_mask[i] is True if node i is included in the output.

    Returns
    -------
    graph : Networkx undirected graph
        The masked graph.

    Raises
    ------
    ValueError
        If the graph is not indexed by 0..n-1 or the mask has the wrong
        length.
    LabelMissingError
        If a kept node has no label.
    AllocationError
        If the output graph or the index map cannot be allocated.
    """
    check_indexed(graph)
    keep_mask = as_keep_mask(graph, keep_mask)
    try:
        index_map = make_index_map(keep_mask)
        source2target = dict(index_map)
        out_graph = nx.Graph()
        _add_nodes(graph, out_graph, index_map)
        _add_edges(graph, out_graph, source2target)
    except MemoryError as e:
        raise AllocationError(
            'Could not allocate a graph of %d nodes' %
            int(keep_mask.sum())) from e
    logger.debug('masked graph: %d/%d nodes  %d/%d edges' % (
        out_graph.number_of_nodes(), graph.number_of_nodes(),
        out_graph.number_of_edges(), graph.number_of_edges()))
    return out_graph


def remove_nodes(graph, nodes):
    """Build a graph with the listed node indices dropped."""
    check_indexed(graph)
    n_nodes = graph.number_of_nodes()
    keep_mask = np.ones(n_nodes, dtype=bool)
    for u in nodes:
        if not 0 <= u < n_nodes:
            raise ValueError('Node %s is not in the graph' % (u,))
        keep_mask[u] = False
    return mask_graph(graph, keep_mask)
