"""Run orchestration: enumerate, classify and aggregate graphlet occurrences."""
from __future__ import annotations

import logging
import threading
from multiprocessing.pool import ThreadPool
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from hetgraphlets.canon.canonical import canonical_signature
from hetgraphlets.config import GraphletConfig, check_graphlet_size
from hetgraphlets.counting.aggregator import CountTable, GraphletCounts
from hetgraphlets.enumerate.esu import enumerate_anchor, enumerate_containing
from hetgraphlets.errors import RunCancelled
from hetgraphlets.graph.view import GraphView, SubgraphInstance
from hetgraphlets.orbits.registry import OrbitRegistry
from hetgraphlets.utils.connectivity import is_connected_subset

logger = logging.getLogger(__name__)

# Per-worker memo: labelled induced structure -> orbit id.
_local = threading.local()

Job = Tuple[GraphView, List[int], OrbitRegistry, GraphletConfig, Optional[threading.Event]]


def _worker_init() -> None:
    _local.cache = {}


def _classify(instance: SubgraphInstance, registry: OrbitRegistry, cache: Dict[tuple, int]) -> int:
    key = (instance.node_types, instance.edges)
    orbit_id = cache.get(key)
    if orbit_id is None:
        orbit_id = registry.get_or_register(canonical_signature(instance)).orbit_id
        cache[key] = orbit_id
    return orbit_id


def _count_chunk(job: Job) -> CountTable:
    """Enumerate and classify every subset anchored in one chunk of nodes."""
    view, anchors, registry, config, cancel = job
    cache = _local.cache
    table = CountTable(config.count_ceiling)
    for v in anchors:
        if cancel is not None and cancel.is_set():
            raise RunCancelled(f"Run cancelled before anchor {v}.")
        for instance in enumerate_anchor(
            view, v, config.max_graphlet_size, directed=config.directed
        ):
            table.increment(instance.nodes, _classify(instance, registry, cache))
    logger.debug("Chunk %d..%d done: %d instances.", anchors[0], anchors[-1], table.instances())
    return table


def _chunked(it: Iterable[int], size: int) -> Iterable[List[int]]:
    buf: List[int] = []
    for x in it:
        buf.append(x)
        if len(buf) >= size:
            yield buf
            buf = []
    if buf:
        yield buf


def _prepare(
    view: GraphView,
    config: Optional[GraphletConfig],
    registry: Optional[OrbitRegistry],
) -> Tuple[GraphletConfig, OrbitRegistry]:
    config = (config or GraphletConfig()).validate()
    if config.directed and not view.directed:
        raise ValueError("directed=True needs a directed graph view.")
    if registry is None:
        registry = OrbitRegistry(directed=config.directed)
    elif registry.directed != config.directed:
        raise ValueError("The orbit registry and the config disagree on directedness.")
    return config, registry


def count_graphlets(
    view: GraphView,
    config: Optional[GraphletConfig] = None,
    *,
    registry: Optional[OrbitRegistry] = None,
    cancel: Optional[threading.Event] = None,
) -> GraphletCounts:
    """
    Count every connected induced graphlet of size 2..K in *view*.

    Anchors are split into chunks of ``config.chunk_size`` nodes and handed to
    ``config.workers`` threads. Each chunk fills its own CountTable, which is
    merged into the run total when the chunk is done; the orbit registry is
    the only structure the workers share.

    cancel: checked before every anchor. Once set, the run raises
            RunCancelled and no partial result is returned.
    """
    config, registry = _prepare(view, config, registry)

    # Nodes without a larger neighbour anchor nothing.
    anchors = [
        v for v in range(view.number_of_nodes)
        if any(u > v for u in view.connectivity_neighbors(v))
    ]
    logger.info(
        "Counting graphlets of size 2..%d on %r: %d anchors, %d worker(s).",
        config.max_graphlet_size, view, len(anchors), config.workers,
    )

    total = CountTable(config.count_ceiling)
    jobs = (
        (view, chunk, registry, config, cancel)
        for chunk in _chunked(anchors, config.chunk_size)
    )

    if config.workers == 1:
        _worker_init()
        for job in jobs:
            total.merge(_count_chunk(job))
    else:
        with ThreadPool(processes=config.workers, initializer=_worker_init) as pool:
            for table in pool.imap_unordered(_count_chunk, jobs, chunksize=1):
                total.merge(table)

    result = total.freeze(registry)
    logger.info(
        "Counted %d graphlet instances in %d orbits.",
        result.total(), len(result.orbit_counts),
    )
    return result


def count_subsets(
    view: GraphView,
    subsets: Iterable[Sequence[int]],
    config: Optional[GraphletConfig] = None,
    *,
    registry: Optional[OrbitRegistry] = None,
) -> GraphletCounts:
    """Classify and count explicitly given node subsets.

    Every subset must be connected and have 2..K nodes; this is how callers
    plug in their own enumeration (e.g. a filtered or precomputed one).
    """
    config, registry = _prepare(view, config, registry)
    cache: Dict[tuple, int] = {}
    table = CountTable(config.count_ceiling)
    for subset in subsets:
        instance = view.induced(subset, directed=config.directed)
        check_graphlet_size(instance.size, config.max_graphlet_size)
        if not is_connected_subset(view, instance.nodes):
            raise ValueError(f"Subset {instance.nodes} is not connected.")
        table.increment(instance.nodes, _classify(instance, registry, cache))
    return table.freeze(registry)


def edge_graphlet_counts(
    view: GraphView,
    src: int,
    dst: int,
    config: Optional[GraphletConfig] = None,
    *,
    registry: Optional[OrbitRegistry] = None,
) -> GraphletCounts:
    """Count the graphlets of size 2..K that contain the edge (src, dst).

    The edge itself is counted as the single size-2 graphlet. Node counts
    cover every node of each graphlet, src and dst included.
    """
    config, registry = _prepare(view, config, registry)
    if dst not in view.connectivity_neighbors(src):
        raise ValueError(f"There is no edge between {src} and {dst}.")

    cache: Dict[tuple, int] = {}
    table = CountTable(config.count_ceiling)
    for instance in enumerate_containing(
        view, (src, dst), config.max_graphlet_size, directed=config.directed
    ):
        table.increment(instance.nodes, _classify(instance, registry, cache))
    return table.freeze(registry)
