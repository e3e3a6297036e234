"""Shared fixtures for the seeded decomposition tests."""

import networkx as nx
import pytest


def labelled(graph, prefix=''):
    """Label every node of an indexed graph with prefix + its index."""
    for u in graph.nodes():
        graph.nodes[u]['label'] = '%s%d' % (prefix, u) if prefix else u
    return graph


def labels_of(graph):
    return [graph.nodes[u]['label'] for u in range(graph.number_of_nodes())]


@pytest.fixture
def path_graph():
    """Path 0-1-2-3-4, every node labelled with its index."""
    return labelled(nx.path_graph(5))


@pytest.fixture
def random_graph():
    return labelled(nx.gnp_random_graph(30, 0.12, seed=7))
