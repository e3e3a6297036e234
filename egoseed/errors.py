#!/usr/bin/env python
"""
Exceptions raised while extracting and decomposing seeded subgraphs.

Low level failures (InvalidSeedError, AllocationError, LabelMissingError)
are raised where they happen; CompactionError, ExtractionError and
PersistError wrap them on the way up, chaining the original exception.
"""


class EgoSeedError(Exception):
    """Base exception for seeded decompositions."""

    pass


class InvalidSeedError(EgoSeedError):
    """A seed does not identify a node of the graph."""

    def __init__(self, seed, n_nodes=None):
        self.seed = seed
        self.n_nodes = n_nodes
        msg = 'Invalid seed node: %s' % (seed,)
        if n_nodes is not None:
            msg += ' (graph has %d nodes)' % n_nodes
        super().__init__(msg)


class AllocationError(EgoSeedError):
    """An output graph or an intermediate mapping could not be sized."""

    pass


class LabelMissingError(EgoSeedError):
    """A node of the input graph has no label."""

    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__('Node %s has no label' % (node_id,))


class CompactionError(EgoSeedError):
    """Building a masked graph failed."""

    pass


class ExtractionError(EgoSeedError):
    """Extracting a seeded subgraph failed."""

    pass


class PersistError(EgoSeedError):
    """A component could not be written to the output sink."""

    def __init__(self, name, reason=''):
        self.name = name
        self.reason = reason
        msg = 'Could not write to %s' % name
        if reason:
            msg += ' (reason: %s)' % reason
        super().__init__(msg)
