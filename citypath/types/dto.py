"""Small value types used inside the search algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field

from citypath.model.graph import City
from citypath.types.base import Cost


@dataclass(frozen=True, order=True)
class CityScore:
    """Priority-queue key linking a score to a city.

    Orders by ``score``, then by city name. The city itself never takes part
    in comparisons, so two distinct cities sharing a name and score compare
    equal without error.

    Attributes:
        score: Cost or priority; meaning depends on the algorithm.
        name: Tie-break key, the city's display name.
        city: The scored city.
    """

    score: Cost
    name: str = field(init=False)
    city: City = field(compare=False)

    def __init__(self, city: City, score: Cost) -> None:
        object.__setattr__(self, "city", city)
        object.__setattr__(self, "score", score)
        object.__setattr__(self, "name", city.name)
