"""Id assignment and reorder validation shared by the recipe and grocery collections."""
from collections import Counter
from typing import Iterable, List, Sequence, TypeVar

from recipez.domain.errors import ValidationError

T = TypeVar("T")


def next_id(items: Iterable) -> int:
    """Return max(existing id) + 1, or 1 for an empty collection.

    Ids are never reused while a higher id exists; an emptied collection restarts at 1.
    """
    return max((item.id for item in items), default=0) + 1


def reorder_by_ids(items: Sequence[T], ids: Sequence[int], label: str = "id") -> List[T]:
    """Return `items` rearranged into the order given by `ids`.

    `ids` must be an exact permutation of the current ids: no duplicates,
    nothing missing, nothing unknown. Anything else raises ValidationError
    and the input sequence is left untouched.
    """
    counts = Counter(ids)
    duplicates = sorted(i for i, n in counts.items() if n > 1)
    if duplicates:
        raise ValidationError(f"Duplicate {label}s in reorder request: {duplicates}")

    index = {item.id: item for item in items}
    unknown = [i for i in ids if i not in index]
    if unknown:
        raise ValidationError(f"Unknown {label}s in reorder request: {unknown}")
    missing = [item.id for item in items if item.id not in counts]
    if missing:
        raise ValidationError(f"Reorder request must include every {label}; missing: {missing}")

    return [index[i] for i in ids]


__all__ = ['next_id', 'reorder_by_ids']
