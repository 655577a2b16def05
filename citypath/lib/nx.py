"""NetworkX graph conversion utilities.

Convert between undirected NetworkX graphs and ``CityGraph``.

Example:
    >>> import networkx as nx
    >>> from citypath.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", length=2)
    >>> G.add_edge("B", "C", length=3)
    >>>
    >>> graph, city_map = from_networkx(G)
    >>> city_map.to_city["A"].name
    'A'
    >>>
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import TYPE_CHECKING, Any, Dict, Hashable, Union

import networkx as nx

from citypath.model.graph import City, CityGraph

if TYPE_CHECKING:
    NxGraph = Union[nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class CityMap:
    """Bidirectional mapping between NetworkX node labels and cities.

    Attributes:
        to_city: Maps original node labels to cities.
        to_label: Maps city handles back to the original labels.
    """

    to_city: Dict[Hashable, City] = field(default_factory=dict)
    to_label: Dict[int, Hashable] = field(default_factory=dict)

    def __len__(self) -> int:
        """Return the number of mapped nodes."""
        return len(self.to_city)


def from_networkx(
    G: NxGraph,
    *,
    length_attr: str = "length",
    default_length: int = 1,
) -> tuple[CityGraph, CityMap]:
    """Build a ``CityGraph`` from an undirected NetworkX graph.

    Node labels become city names via ``str()``. Parallel edges of a
    MultiGraph become parallel streets.

    Args:
        G: Undirected ``nx.Graph`` or ``nx.MultiGraph``.
        length_attr: Edge attribute holding the street length.
        default_length: Length used when an edge lacks ``length_attr``.

    Returns:
        Tuple of (graph, city_map).

    Raises:
        ValueError: If ``G`` is directed, or a length is not a non-negative
            integer.
    """
    if G.is_directed():
        raise ValueError("Directed graphs are not supported; streets are undirected")

    graph = CityGraph()
    city_map = CityMap()
    for label in G.nodes():
        city = graph.add_city(str(label))
        city_map.to_city[label] = city
        city_map.to_label[city.index] = label

    for u, v, data in G.edges(data=True):
        length = data.get(length_attr, default_length)
        if isinstance(length, float) and length.is_integer():
            length = int(length)
        if not isinstance(length, Integral) or isinstance(length, bool):
            raise ValueError(
                f"Edge ({u!r}, {v!r}) has non-integer {length_attr} {length!r}"
            )
        length = int(length)
        graph.add_street(city_map.to_city[u], city_map.to_city[v], length)

    return graph, city_map


def to_networkx(graph: CityGraph, *, length_attr: str = "length") -> nx.MultiGraph:
    """Convert a ``CityGraph`` to an ``nx.MultiGraph``.

    Nodes are city handles carrying a ``name`` attribute; each street becomes
    one edge with ``length_attr`` set.
    """
    G = nx.MultiGraph()
    for city in graph:
        G.add_node(city.index, name=city.name)
    for street in graph.streets:
        G.add_edge(
            street.first.index, street.second.index, **{length_attr: street.length}
        )
    return G
