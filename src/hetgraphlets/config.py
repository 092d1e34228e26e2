from __future__ import annotations

import os
from dataclasses import dataclass, replace

from hetgraphlets.errors import InvalidGraphletSize


MIN_GRAPHLET_SIZE = 2
# Brute-force canonicalization stays tractable up to here.
MAX_GRAPHLET_SIZE = 8

DEFAULT_COUNT_CEILING = 2**64 - 1

ENV_MAX_SIZE = "HETGRAPHLETS_MAX_SIZE"
ENV_WORKERS = "HETGRAPHLETS_WORKERS"
ENV_CHUNK_SIZE = "HETGRAPHLETS_CHUNK_SIZE"


def check_graphlet_size(size: int, maximum: int = MAX_GRAPHLET_SIZE) -> int:
    """Return *size* unchanged, or raise InvalidGraphletSize."""
    if not MIN_GRAPHLET_SIZE <= size <= maximum:
        raise InvalidGraphletSize(size, MIN_GRAPHLET_SIZE, maximum)
    return size


@dataclass(frozen=True)
class GraphletConfig:
    """
    Parameters of one counting run.

    max_graphlet_size: largest subset size K; every size 2..K is counted.
    directed:          keep edge direction in the induced subgraphs.
                       Connectivity is always tested ignoring direction.
    workers:           number of worker threads anchoring the enumeration.
    chunk_size:        anchors handed to a worker at a time.
    count_ceiling:     largest representable count; reaching past it
                       raises CountOverflow.
    """

    max_graphlet_size: int = 4
    directed: bool = False
    workers: int = 1
    chunk_size: int = 64
    count_ceiling: int = DEFAULT_COUNT_CEILING

    def validate(self) -> "GraphletConfig":
        check_graphlet_size(self.max_graphlet_size)
        if self.workers <= 0:
            raise ValueError("workers must be positive.")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive.")
        if self.count_ceiling <= 0:
            raise ValueError("count_ceiling must be positive.")
        return self

    def with_overrides(self, **overrides) -> "GraphletConfig":
        return replace(self, **overrides).validate()

    @classmethod
    def from_env(cls, **overrides) -> "GraphletConfig":
        """Build a config from HETGRAPHLETS_* environment variables.

        Explicit keyword overrides win over the environment.
        """
        values: dict = {}
        raw = os.environ.get(ENV_MAX_SIZE)
        if raw is not None:
            values["max_graphlet_size"] = int(raw)
        raw = os.environ.get(ENV_WORKERS)
        if raw is not None:
            values["workers"] = int(raw)
        raw = os.environ.get(ENV_CHUNK_SIZE)
        if raw is not None:
            values["chunk_size"] = int(raw)
        values.update(overrides)
        return cls(**values).validate()
