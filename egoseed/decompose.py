#!/usr/bin/env python
"""
Decompose a graph into successive ego network components.

Each round takes the node of maximum degree of the working graph as seed,
extracts the subgraph within a fixed breadth first depth from it, hands
the subgraph to an output sink and continues on the remainder. The
decomposition stops after max_components rounds or when no nodes are
left.
"""

from toolz import curry
from egoseed.component import GraphComponent, SeedComponent, serialize
from egoseed.component import check_indexed, get_subgraphs_from_graph_component
from egoseed.component import index_graph
from egoseed.errors import EgoSeedError, ExtractionError, PersistError
from egoseed.seed import check_depth, extract, max_degree_node
import logging
logger = logging.getLogger(__name__)


RUNNING = 'running'
EXTRACTING = 'extracting'
DONE = 'done'


class EgoDecomposer(object):
    """Round by round max degree seeded decomposition.

    Parameters
    ----------
    depth : int
        Breadth first search depth used in every round.

    max_components : int
        Maximum number of components to extract.

    sink : callable, optional
        sink(subgraph, index) persists a component and returns its name.
        Without a sink components are named by their index.

    should_stop : callable, optional
        Checked at the start of every round; the decomposition ends as
        soon as it returns True.
    """

    def __init__(self, depth=1, max_components=10, sink=None, should_stop=None):
        self.depth = check_depth(depth)
        if max_components < 0:
            raise ValueError('max_components must be non negative')
        self.max_components = max_components
        self.sink = sink
        self.should_stop = should_stop
        self.graph = None
        self.n_rounds = 0
        self.components = []
        self.status = DONE

    def start(self, graph):
        check_indexed(graph)
        self.graph = graph
        self.n_rounds = 0
        self.components = []
        self.status = RUNNING
        if self.max_components == 0:
            self.status = DONE
        return self

    def _persist(self, subgraph, index):
        if self.sink is None:
            return str(index)
        try:
            return self.sink(subgraph, index)
        except PersistError:
            raise
        except Exception as e:
            raise PersistError(str(index), str(e)) from e

    def _extract_round(self):
        seed = max_degree_node(self.graph)
        try:
            subgraph, remainder = extract(self.graph, [seed], self.depth)
        except EgoSeedError as e:
            raise ExtractionError(
                'Error creating seed subgraph %d: %s' % (self.n_rounds, e)) from e
        name = self._persist(subgraph, self.n_rounds)
        component = SeedComponent(
            graph=subgraph, index=self.n_rounds, name=name, seed=seed)
        return component, remainder

    def step(self):
        """Run one round; return the extracted SeedComponent or None."""
        if self.status != RUNNING:
            return None
        if self.graph.number_of_nodes() == 0 or (
                self.should_stop is not None and self.should_stop()):
            self.status = DONE
            return None

        self.status = EXTRACTING
        try:
            component, remainder = self._extract_round()
        except Exception:
            self.status = DONE
            raise

        logger.info('Seeded subgraph %d (%d nodes): %s' % (
            component.index, component.graph.number_of_nodes(), component.name))
        self.components.append(component)
        self.graph = remainder
        self.n_rounds += 1
        if self.n_rounds >= self.max_components:
            self.status = DONE
        else:
            self.status = RUNNING
        return component

    def run(self, graph):
        """Decompose graph; return the list of extracted SeedComponents."""
        self.start(graph)
        while self.status == RUNNING:
            self.step()
        return self.components


@curry
def decompose_ego_components(graph, depth=1, max_components=10, sink=None):
    decomposer = EgoDecomposer(
        depth=depth, max_components=max_components, sink=sink)
    return decomposer.run(graph)


@curry
def decompose_seeded(graph_component, depth=1, max_components=10):
    """Decompose each subgraph of a GraphComponent into seeded components."""
    new_subgraphs_list = []
    new_signatures_list = []
    subgraphs = get_subgraphs_from_graph_component(graph_component)
    for subgraph, signature in zip(subgraphs, graph_component.signatures):
        subgraph = index_graph(subgraph)
        components = decompose_ego_components(
            subgraph, depth=depth, max_components=max_components)
        new_subgraphs = [component.graph for component in components]
        new_signature = serialize(['seeded', depth], signature)
        new_signatures = [new_signature] * len(new_subgraphs)
        new_subgraphs_list += new_subgraphs
        new_signatures_list += new_signatures

    gc = GraphComponent(
        graph=graph_component.graph,
        subgraphs=new_subgraphs_list,
        signatures=new_signatures_list)
    return gc


def sdd(*args, **kargs):
    return decompose_seeded(*args, **kargs)
