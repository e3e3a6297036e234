#!/usr/bin/env python
"""
Provides the definition of GraphComponent, SeedComponent and utility functions.

Graphs handled here are undirected networkx graphs whose nodes are the
dense integer indices 0..n-1. Every node carries an opaque payload in
the 'label' attribute. Each derived graph is a fresh index space: no
reference to the node ids of the graph it was built from is kept.

A GraphComponent is a named tuple containing 3 fields:
a graph, the list of subgraphs extracted from it and one signature
per subgraph.
A SeedComponent is one extracted subgraph together with its 0-based
sequence number, its output name and the seed it was grown from.
"""


import networkx as nx
import collections


LABEL = 'label'


def serialize(iterable, signature1=None):
    seq = [str(element) for element in iterable]
    seq = '+'.join(seq)
    if signature1:
        seq += '(' + signature1 + ')'
    return seq


GraphComponent = collections.namedtuple(
    'GraphComponent', 'graph subgraphs signatures')

SeedComponent = collections.namedtuple(
    'SeedComponent', 'graph index name seed')


def convert(graph):
    """Convert a graph to a GraphComponent namedtuple.

    Parameters
    ----------
    graph : Networkx undirected graph
        A graph.

    Returns
    -------
    GraphComponent : namedtuple
        GraphComponent(graph=graph, subgraphs=[graph], signatures=['.'])

    """
    gc = GraphComponent(graph=graph, subgraphs=[graph], signatures=['.'])
    return gc


def set_signature(subgraphs, signatures):
    new_subgraphs = []
    for g, s in zip(subgraphs, signatures):
        gg = g.copy()
        gg.graph['signature'] = s
        new_subgraphs.append(gg)
    return new_subgraphs


def get_subgraphs_from_graph_component(graph_component):
    return set_signature(graph_component.subgraphs, graph_component.signatures)


def index_graph(graph, label_attribute=LABEL):
    """Renumber the nodes of a graph to the dense range 0..n-1.

    Nodes are numbered in the graph's node iteration order, unless they
    already are the integers 0..n-1, in which case they are kept. A node that
    has no label receives its original identifier as label.

    Parameters
    ----------
    graph : Networkx graph
        Any graph; directed graphs are converted to undirected ones.

    Returns
    -------
    graph : Networkx undirected graph
        The indexed graph.
    """
    if nx.is_directed(graph):
        graph = graph.to_undirected()
    if is_indexed(graph):
        original_ids = list(range(graph.number_of_nodes()))
    else:
        original_ids = list(graph.nodes())
    mapping = {original_id: u for u, original_id in enumerate(original_ids)}
    indexed = nx.Graph(nx.relabel_nodes(graph, mapping, copy=True))
    for original_id, u in mapping.items():
        if label_attribute not in indexed.nodes[u]:
            indexed.nodes[u][label_attribute] = original_id
    return indexed


def is_indexed(graph):
    n_nodes = graph.number_of_nodes()
    return all(u in graph for u in range(n_nodes))


def check_indexed(graph):
    """Raise ValueError unless the nodes of graph are exactly 0..n-1."""
    if nx.is_directed(graph) or graph.is_multigraph():
        raise ValueError('Expected an undirected simple graph')
    if not is_indexed(graph):
        raise ValueError(
            'Graph nodes must be the integer indices 0..%d' %
            (graph.number_of_nodes() - 1))


def node_degree(graph, u):
    """Number of distinct neighbours of node u."""
    return len(graph[u])
