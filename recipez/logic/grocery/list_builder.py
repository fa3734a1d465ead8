"""Grocery list builder.

Provides merge_ingredients(items, incoming, timestamp): the ingest step that folds a
batch of recipe ingredients into the grocery list.
"""
from typing import Iterable, List

from recipez.domain.GroceryItem import GroceryItem
from recipez.domain.Ingredient import Ingredient
from recipez.logic.ids import next_id


def _find_by_name(items: List[GroceryItem], name: str):
    key = name.lower()
    for item in items:
        if item.key == key:
            return item  # first match wins when duplicates already exist
    return None


def merge_ingredients(items: List[GroceryItem], incoming: Iterable[Ingredient], timestamp: str):
    """Merge `incoming` ingredients into `items` in place, in input order.

    Args:
        items: current grocery items (mutated).
        incoming: ingredients to add.
        timestamp: value for addedAt on newly created items.

    Returns:
        (added, updated): lists of the GroceryItems created and of the existing
        items whose amount/unit were overwritten.

    Rules:
      - Identity is the case-insensitive name.
      - An existing item's amount/unit are replaced only when the incoming entry
        carries both; a bare name re-add keeps the stored quantity.
      - New items get max id + 1 computed after earlier additions in the same
        batch, so ids within one batch strictly increase.
    """
    added: List[GroceryItem] = []
    updated: List[GroceryItem] = []
    for ing in incoming:
        existing = _find_by_name(items, ing.name)
        if existing is not None:
            if ing.has_quantity():
                existing.amount = ing.amount
                existing.unit = ing.unit
                if existing not in updated:
                    updated.append(existing)
            continue
        item = GroceryItem(
            id=next_id(items),
            name=ing.name,
            amount=ing.amount,
            unit=ing.unit,
            checked=False,
            added_at=timestamp,
        )
        items.append(item)
        added.append(item)
    return added, updated


__all__ = ['merge_ingredients']
