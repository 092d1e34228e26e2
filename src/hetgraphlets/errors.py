"""Exception taxonomy for graphlet enumeration and counting.

Every error is terminal for the run that raised it: callers discard any
partial state and never receive a partially filled result.
"""
from __future__ import annotations


class HetGraphletsError(Exception):
    """Base class for all errors raised by hetgraphlets."""


class InvalidNode(HetGraphletsError, IndexError):
    """A node id outside ``[0, number_of_nodes)`` was queried."""

    def __init__(self, node: object, number_of_nodes: int) -> None:
        self.node = node
        self.number_of_nodes = number_of_nodes
        super().__init__(
            f"Node {node!r} is not in the graph view "
            f"(valid ids are 0..{number_of_nodes - 1})."
        )


class InvalidGraphletSize(HetGraphletsError, ValueError):
    """A requested or encountered graphlet size is outside the supported range."""

    def __init__(self, size: int, minimum: int, maximum: int) -> None:
        self.size = size
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Graphlet size {size} is outside the supported range "
            f"[{minimum}, {maximum}]."
        )


class CountOverflow(HetGraphletsError, OverflowError):
    """A count reached the configured ceiling.

    The offending counter is left saturated at ``ceiling``.
    """

    def __init__(self, orbit_id: int, ceiling: int, node: int | None = None) -> None:
        self.orbit_id = orbit_id
        self.ceiling = ceiling
        self.node = node
        where = "globally" if node is None else f"for node {node}"
        super().__init__(
            f"Count of orbit {orbit_id} {where} reached the ceiling {ceiling}."
        )


class RunCancelled(HetGraphletsError):
    """The caller cancelled a run; its partial results were discarded."""


class RegistryContention(HetGraphletsError):
    """Two workers raced to register the same orbit.

    Never raised: the registry lock serializes registration. Kept so the
    internal contract has a name in logs and docs.
    """
