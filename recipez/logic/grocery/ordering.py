"""Display ordering for the grocery list (computed per render, never persisted)."""
from typing import List, Optional, Sequence

from recipez.domain.GroceryItem import GroceryItem


def filter_by_name(items: Sequence[GroceryItem], search: str) -> List[GroceryItem]:
    term = search.strip().lower()
    return [i for i in items if term in i.name.lower()]


def display_order(items: Sequence[GroceryItem], search: Optional[str] = None) -> List[GroceryItem]:
    """Unchecked items first, checked items last.

    Without a search term this is a stable partition, so the user's manual order
    survives inside each group. With a search term only matching items are
    returned and ties inside each group fall back to ascending id.
    """
    if search and search.strip():
        matching = filter_by_name(items, search)
        return sorted(matching, key=lambda i: (i.checked, i.id))
    # sorted() is stable: relative order within each group is preserved
    return sorted(items, key=lambda i: i.checked)


__all__ = ['display_order', 'filter_by_name']
