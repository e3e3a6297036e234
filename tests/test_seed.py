"""Tests for seeded subgraph extraction and seed selection."""

import networkx as nx
import numpy as np
import pytest

from egoseed.errors import CompactionError, InvalidSeedError, LabelMissingError
from egoseed.seed import extract, max_degree_node, node_with_label, seed_mask

from conftest import labelled, labels_of


def reached_within(graph, seeds, depth):
    reached = set()
    for seed in seeds:
        reached.update(nx.single_source_shortest_path_length(
            graph, seed, cutoff=depth))
    return reached


class TestExtract:
    """Subgraph and remainder extraction."""

    def test_path_depth_one(self, path_graph):
        subgraph, remainder = extract(path_graph, [1], 1)

        assert labels_of(subgraph) == [0, 1, 2]
        assert sorted(subgraph.edges()) == [(0, 1), (1, 2)]
        assert labels_of(remainder) == [3, 4]
        assert list(remainder.edges()) == [(0, 1)]

    def test_depth_zero_selects_seeds_only(self, path_graph):
        subgraph, remainder = extract(path_graph, [2], 0)

        assert labels_of(subgraph) == [2]
        assert subgraph.number_of_edges() == 0
        assert labels_of(remainder) == [0, 1, 3, 4]
        assert sorted(remainder.edges()) == [(0, 1), (2, 3)]

    def test_depth_beyond_eccentricity(self, path_graph):
        subgraph, remainder = extract(path_graph, [0], 10)

        assert subgraph.number_of_nodes() == 5
        assert remainder.number_of_nodes() == 0

    @pytest.mark.parametrize('depth', [0, 1, 2, 3])
    def test_depth_bound(self, random_graph, depth):
        seeds = [0, 11]
        expected = reached_within(random_graph, seeds, depth)

        subgraph, remainder = extract(random_graph, seeds, depth)

        assert set(labels_of(subgraph)) == expected
        assert set(labels_of(remainder)) == set(random_graph.nodes()) - expected

    def test_unreachable_nodes_stay_in_remainder(self):
        graph = labelled(nx.disjoint_union(nx.star_graph(3), nx.path_graph(2)))

        subgraph, remainder = extract(graph, [0], 5)

        assert labels_of(subgraph) == [0, 1, 2, 3]
        assert labels_of(remainder) == [4, 5]
        assert remainder.has_edge(0, 1)

    def test_multiple_seeds(self, path_graph):
        subgraph, remainder = extract(path_graph, [0, 4], 1)

        assert labels_of(subgraph) == [0, 1, 3, 4]
        assert sorted(subgraph.edges()) == [(0, 1), (2, 3)]
        assert labels_of(remainder) == [2]

    def test_repeated_extraction_is_identical(self, random_graph):
        first = extract(random_graph, [3], 2)
        second = extract(random_graph, [3], 2)

        for g1, g2 in zip(first, second):
            assert labels_of(g1) == labels_of(g2)
            assert sorted(g1.edges()) == sorted(g2.edges())

    def test_curried(self, path_graph):
        extract_two = extract(depth=2)

        subgraph, remainder = extract_two(path_graph, [0])

        assert labels_of(subgraph) == [0, 1, 2]

    def test_seed_out_of_range(self, path_graph):
        with pytest.raises(InvalidSeedError) as exc_info:
            extract(path_graph, [5], 1)
        assert exc_info.value.seed == 5

    def test_negative_seed(self, path_graph):
        with pytest.raises(InvalidSeedError):
            extract(path_graph, [-1], 1)

    def test_non_integer_seed(self, path_graph):
        with pytest.raises(InvalidSeedError):
            extract(path_graph, ['a'], 1)

    def test_no_seeds(self, path_graph):
        with pytest.raises(InvalidSeedError):
            extract(path_graph, [], 1)

    def test_negative_depth(self, path_graph):
        with pytest.raises(ValueError):
            extract(path_graph, [0], -1)

    def test_missing_label_is_a_compaction_failure(self, path_graph):
        del path_graph.nodes[4]['label']

        with pytest.raises(CompactionError) as exc_info:
            extract(path_graph, [0], 1)
        assert isinstance(exc_info.value.__cause__, LabelMissingError)


class TestSeedMask:
    """Keep mask computation."""

    def test_mask(self, path_graph):
        keep_mask = seed_mask(path_graph, [3], 1)

        assert keep_mask.dtype == bool
        assert list(keep_mask) == [False, False, True, True, True]

    def test_numpy_seed(self, path_graph):
        keep_mask = seed_mask(path_graph, np.array([0]), 0)

        assert list(keep_mask) == [True, False, False, False, False]


class TestSeedSelection:
    """Choosing seed nodes."""

    def test_max_degree_prefers_lowest_index(self, path_graph):
        assert max_degree_node(path_graph) == 1

    def test_max_degree(self):
        graph = labelled(nx.star_graph(4))
        graph = nx.relabel_nodes(graph, {0: 4, 4: 0})

        assert max_degree_node(graph) == 4

    def test_max_degree_without_edges(self):
        graph = nx.empty_graph(3)

        assert max_degree_node(graph) == 0

    def test_max_degree_counts_neighbours(self):
        graph = nx.path_graph(3)
        graph.add_edge(2, 2)

        assert max_degree_node(graph) == 1

    def test_node_with_label(self):
        graph = labelled(nx.path_graph(3), prefix='n')

        assert node_with_label(graph, 'n2') == 2

    def test_node_with_unknown_label(self, path_graph):
        with pytest.raises(InvalidSeedError):
            node_with_label(path_graph, 'missing')
