"""GroceryList aggregate: ordered collection of GroceryItem with ingest, toggle and reorder."""
from typing import Iterable, List, Optional

from recipez.domain.GroceryItem import GroceryItem
from recipez.domain.Ingredient import Ingredient
from recipez.domain.errors import NotFoundError
from recipez.logic.grocery.list_builder import merge_ingredients
from recipez.logic.ids import reorder_by_ids
from recipez.utilities.timestamps import utc_now_iso


class GroceryList:
    def __init__(self, items: Optional[List[GroceryItem]] = None):
        self.items: List[GroceryItem] = items[:] if items else []

    def get_items(self):
        '''
        Returns the list of grocery items in stored (manual) order.
        '''
        return self.items

    def get(self, item_id: int) -> GroceryItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise NotFoundError("Grocery item not found")

    def ingest(self, ingredients: Iterable[Ingredient], timestamp: Optional[str] = None):
        '''
        Merges a batch of ingredients into the list. Returns (added, updated).
        '''
        return merge_ingredients(self.items, ingredients, timestamp or utc_now_iso())

    def toggle(self, item_id: int, checked: Optional[bool] = None) -> GroceryItem:
        '''
        Flips the checked flag, or sets it when an explicit value is given.
        '''
        item = self.get(item_id)
        item.checked = (not item.checked) if checked is None else bool(checked)
        return item

    def remove(self, item_id: int) -> GroceryItem:
        item = self.get(item_id)
        self.items.remove(item)
        return item

    def remove_checked(self) -> int:
        '''
        Removes every checked item in one pass and returns how many were removed.
        '''
        before = len(self.items)
        self.items = [i for i in self.items if not i.checked]
        return before - len(self.items)

    def clear(self):
        self.items = []

    def reorder(self, item_ids: List[int]) -> List[GroceryItem]:
        self.items = reorder_by_ids(self.items, item_ids, label="item id")
        return self.items

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Grocery List:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        '''
        Builds the aggregate from the persisted list of dictionaries.
        '''
        return GroceryList([GroceryItem.from_dict(entry) for entry in data or []])

    def to_dict(self):
        return [item.to_dict() for item in self.items]
