#!/usr/bin/env python
"""Level by level breadth first search."""

import collections
from collections import deque
import numpy as np
import logging
logger = logging.getLogger(__name__)


BfsState = collections.namedtuple('BfsState', 'depth this_level visited')


class BreadthFirstSearch(object):
    """Breadth first search expanding one depth level at a time.

    The search starts from a set of root nodes, which form level 0.
    Each call to step() discovers the nodes one edge further away from
    the roots. A node is discovered at most once; the set of visited
    nodes only grows.

    Parameters
    ----------
    graph : Networkx graph
        The graph to search, indexed by 0..n-1.

    roots : iterable of int
        The nodes to start the search from.

    subgraph_mask : array of bool, optional
        One entry per node, True for the nodes excluded from the search.
        Roots are never excluded.
    """

    def __init__(self, graph, roots, subgraph_mask=None):
        self.graph = graph
        n_nodes = graph.number_of_nodes()
        if subgraph_mask is None:
            self.excluded = np.zeros(n_nodes, dtype=bool)
        else:
            self.excluded = np.asarray(subgraph_mask, dtype=bool)
            if self.excluded.shape != (n_nodes,):
                raise ValueError(
                    'Subgraph mask has shape %s, expected one entry per node (%d)' %
                    (self.excluded.shape, n_nodes))
        self.depth = 0
        self.this_level = list(collections.OrderedDict.fromkeys(roots))
        self.visited = set(self.this_level)
        # q is the frontier to be expanded at the next step
        self.q = deque(self.this_level)

    @property
    def state(self):
        return BfsState(self.depth, list(self.this_level), frozenset(self.visited))

    def step(self):
        """Discover the next level; return its state, None when exhausted."""
        next_level = []
        while len(self.q) > 0:
            u = self.q.popleft()
            for v in self.graph.neighbors(u):
                if v not in self.visited and not self.excluded[v]:
                    self.visited.add(v)
                    next_level.append(v)
        if not next_level:
            return None
        self.depth += 1
        self.this_level = next_level
        self.q.extend(next_level)
        logger.debug('bfs depth %d: %d new nodes, %d visited' % (
            self.depth, len(next_level), len(self.visited)))
        return self.state

    def run(self, level_callback=None, context=None):
        """Search until exhausted or until level_callback returns True.

        level_callback(state, context) is called for level 0 and then
        once for every completed level.
        """
        state = self.state
        while state is not None:
            if level_callback is not None and level_callback(state, context):
                break
            state = self.step()
        return self.visited


def bfs(graph, roots, level_callback=None, context=None, subgraph_mask=None):
    search = BreadthFirstSearch(graph, roots, subgraph_mask=subgraph_mask)
    return search.run(level_callback, context)


def bfs_levels(graph, roots, max_depth=None):
    """Yield the BfsState of each level up to max_depth inclusive."""
    search = BreadthFirstSearch(graph, roots)
    state = search.state
    while state is not None:
        yield state
        if max_depth is not None and state.depth >= max_depth:
            break
        state = search.step()
