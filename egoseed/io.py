#!/usr/bin/env python
"""Read graphs from files and write extracted components."""

import json
import os
import networkx as nx
from egoseed.component import index_graph
from egoseed.errors import PersistError
import logging
logger = logging.getLogger(__name__)


def _suffix(path):
    return os.path.splitext(str(path))[1].lower()


def read_graph(path):
    """Read a graph and index its nodes as 0..n-1.

    The format is chosen from the file suffix: node-link JSON (.json),
    GraphML (.graphml); anything else is read as a
    whitespace separated edge list.
    """
    suffix = _suffix(path)
    if suffix == '.json':
        with open(path) as f:
            graph = nx.node_link_graph(json.load(f), edges='links')
    elif suffix == '.graphml':
        graph = nx.read_graphml(path)
    else:
        graph = nx.read_edgelist(path)
    logger.debug('read %s: %d nodes %d edges' % (
        path, graph.number_of_nodes(), graph.number_of_edges()))
    return index_graph(graph)


def write_graph(graph, path):
    """Write a graph as node-link JSON (.json) or GraphML (.graphml)."""
    suffix = _suffix(path)
    if suffix == '.json':
        with open(path, 'w') as f:
            json.dump(nx.node_link_data(graph, edges='links'), f)
    elif suffix == '.graphml':
        nx.write_graphml(graph, path)
    else:
        raise ValueError('Unsupported output format: %s' % path)


def component_name(prefix, index, suffix='.json'):
    return '%s_%02d%s' % (prefix, index, suffix)


class GraphFileSink(object):
    """Write each component to its own numbered file.

    Component i is written to '<prefix>_<ii><suffix>'.
    """

    def __init__(self, prefix, suffix='.json'):
        self.prefix = prefix
        self.suffix = suffix

    def __call__(self, graph, index):
        name = component_name(self.prefix, index, self.suffix)
        try:
            write_graph(graph, name)
        except (OSError, TypeError, ValueError, nx.NetworkXError) as e:
            raise PersistError(name, str(e)) from e
        return name


class MemorySink(object):
    """Keep the components in memory, in extraction order."""

    def __init__(self, prefix='component'):
        self.prefix = prefix
        self.graphs = []
        self.names = []

    def __call__(self, graph, index):
        name = component_name(self.prefix, index, suffix='')
        self.graphs.append(graph)
        self.names.append(name)
        return name
