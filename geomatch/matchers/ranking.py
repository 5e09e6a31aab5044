from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def rank_by_distance(scored: Sequence[Tuple[T, float]]) -> List[Tuple[T, float]]:
    """
    Order (item, distance_km) pairs by ascending distance.

    Distances are compared at full precision. sorted() is stable, so items at the
    same distance keep the order in which they were supplied.
    """
    return sorted(scored, key=lambda pair: pair[1])
