"""
Helpers for grouping records.
"""
from typing import Callable, Dict, Hashable, Iterable, List, TypeVar

T = TypeVar("T")
K1 = TypeVar("K1", bound=Hashable)
K2 = TypeVar("K2", bound=Hashable)


def group_by(
    outer_key: Callable[[T], K1],
    inner_key: Callable[[T], K2],
    records: Iterable[T],
) -> Dict[K1, Dict[K2, List[T]]]:
    """
    Partition records into a two-level mapping.

    Outer keys and, within each outer key, inner keys keep the order in which
    they were first seen.

    Args:
        outer_key: Selector for the first level key
        inner_key: Selector for the second level key
        records: Records to group

    Returns:
        Mapping of outer key -> inner key -> records in input order
    """
    groups: Dict[K1, Dict[K2, List[T]]] = {}
    for record in records:
        groups.setdefault(outer_key(record), {}).setdefault(inner_key(record), []).append(record)
    return groups
