"""City graph model: cities, streets, and the graph that owns them.

Cities live in a ``CityGraph`` arena and carry a stable integer ``index``
assigned on creation. Algorithms that build dense structures index by this
handle. City equality is identity: two cities sharing a display name are
still distinct nodes.

Streets are undirected. ``CityGraph.add_street`` is the only way a street
enters the adjacency lists of its endpoints; a ``Street`` constructed on its
own is a detached value and does not modify either city.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from citypath.exceptions import InvalidCityError


@dataclass(eq=False)
class City:
    """A node of the routing graph.

    Attributes:
        name (str): Display name. Not required to be unique.
        index (int): Handle assigned by the owning graph (-1 when detached).
        streets (List[Street]): Incident streets in insertion order.
        attrs (Dict[str, Any]): Free-form metadata (e.g., coordinates).
    """

    name: str
    index: int = -1
    streets: List[Street] = field(default_factory=list, repr=False)
    attrs: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def degree(self) -> int:
        """Number of incident streets, parallel streets counted separately."""
        return len(self.streets)

    def neighbors(self) -> Iterator[Tuple[City, Street]]:
        """Yield ``(neighbor, street)`` for every incident street."""
        for street in self.streets:
            yield street.other_city(self), street


@dataclass(frozen=True, eq=False)
class Street:
    """An undirected weighted edge between two cities.

    Equality is structural: two streets are equal when their lengths match
    and they join the same pair of cities, in either order. Streets order by
    length.

    Attributes:
        first (City): One endpoint.
        second (City): The other endpoint.
        length (int): Non-negative street length (default 1).
    """

    first: City
    second: City
    length: int = 1

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Street length must be non-negative, got {self.length}")

    @property
    def cities(self) -> Tuple[City, City]:
        return (self.first, self.second)

    def other_city(self, city: City) -> City:
        """Return the endpoint opposite ``city``.

        Raises:
            InvalidCityError: If ``city`` is not an endpoint of this street.
        """
        if self.first is city:
            return self.second
        if self.second is city:
            return self.first
        name = getattr(city, "name", city)
        raise InvalidCityError(f"City '{name}' is not on this street")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Street):
            return NotImplemented
        if self is other:
            return True
        if self.length != other.length:
            return False
        return (self.first is other.first and self.second is other.second) or (
            self.first is other.second and self.second is other.first
        )

    def __hash__(self) -> int:
        return hash((frozenset((id(self.first), id(self.second))), self.length))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Street):
            return NotImplemented
        return self.length < other.length

    def __repr__(self) -> str:
        return f"Street({self.first.name!r}, {self.second.name!r}, length={self.length})"


class CityGraph:
    """Arena of cities and the streets joining them.

    The graph only grows: cities and streets can be added, never removed.
    Parallel streets between the same pair of cities are kept as separate
    streets.
    """

    def __init__(self) -> None:
        self._cities: List[City] = []
        self._streets: List[Street] = []

    #
    # Construction
    #
    def add_city(self, name: str, **attrs: Any) -> City:
        """Create a city owned by this graph and return it.

        Args:
            name: Display name for the city.
            **attrs: Arbitrary metadata stored on ``City.attrs``.

        Returns:
            City: The new city, with ``index`` equal to its position.
        """
        city = City(name=name, index=len(self._cities), attrs=dict(attrs))
        self._cities.append(city)
        return city

    def add_cities(self, *names: str) -> List[City]:
        """Create several cities at once, in order."""
        return [self.add_city(name) for name in names]

    def add_street(self, a: City, b: City, length: int = 1) -> Street:
        """Join two cities of this graph with a street.

        The street is appended to the adjacency lists of both endpoints. A
        self-loop (``a is b``) is registered once.

        Args:
            a: First endpoint. Must belong to this graph.
            b: Second endpoint. Must belong to this graph.
            length: Non-negative street length.

        Returns:
            Street: The new street.

        Raises:
            InvalidCityError: If either city does not belong to this graph.
            ValueError: If ``length`` is negative.
        """
        for city in (a, b):
            if city not in self:
                name = getattr(city, "name", city)
                raise InvalidCityError(f"City '{name}' does not belong to this graph")

        street = Street(a, b, length)
        a.streets.append(street)
        if b is not a:
            b.streets.append(street)
        self._streets.append(street)
        return street

    #
    # Access
    #
    @property
    def cities(self) -> List[City]:
        """All cities in handle order (a copy)."""
        return list(self._cities)

    @property
    def streets(self) -> List[Street]:
        """All streets in insertion order (a copy)."""
        return list(self._streets)

    def city(self, index: int) -> City:
        """Return the city with handle ``index``."""
        return self._cities[index]

    def find(self, name: str) -> Optional[City]:
        """Return the first city named ``name``, or None."""
        for city in self._cities:
            if city.name == name:
                return city
        return None

    def __contains__(self, city: object) -> bool:
        if not isinstance(city, City):
            return False
        return 0 <= city.index < len(self._cities) and self._cities[city.index] is city

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def __repr__(self) -> str:
        return f"CityGraph(cities={len(self._cities)}, streets={len(self._streets)})"
