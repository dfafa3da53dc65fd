"""Graph view of a bed layout.

Beds are nodes. Two beds are joined when they form part of the same
end-to-end row (``kind="row"``) or when their connector trellises face each
other (``kind="connector"``).
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Set, Tuple

import networkx as nx

from .catalog import TrellisType
from .garden import Bed
from .spacing import beds_are_end_to_end, beds_have_facing_connectors


def build_bed_graph(beds: Iterable[Bed], catalog: Mapping[str, TrellisType] | None = None) -> nx.Graph:
    """Build an undirected adjacency graph over the beds."""

    bed_list = list(beds)
    graph = nx.Graph()
    for bed in bed_list:
        graph.add_node(bed.id, name=bed.name, position=(bed.x, bed.y), size=(bed.width, bed.length))

    for i, a in enumerate(bed_list):
        for b in bed_list[i + 1:]:
            if beds_are_end_to_end(a, b):
                graph.add_edge(a.id, b.id, kind="row")
            elif beds_have_facing_connectors(a, b, catalog):
                graph.add_edge(a.id, b.id, kind="connector")
    return graph


def bed_rows(graph: nx.Graph) -> List[Set[str]]:
    """Return groups of two or more beds joined end to end, largest first."""

    rows = nx.Graph()
    rows.add_edges_from((u, v) for u, v, kind in graph.edges(data="kind") if kind == "row")
    components = [set(c) for c in nx.connected_components(rows)]
    components.sort(key=lambda c: (-len(c), sorted(c)))
    return components


def connector_pairs(graph: nx.Graph) -> List[Tuple[str, str]]:
    """Return bed id pairs linked by facing connector trellises."""

    pairs = [tuple(sorted((str(u), str(v)))) for u, v, kind in graph.edges(data="kind") if kind == "connector"]
    return sorted(pairs)  # type: ignore[return-value]
