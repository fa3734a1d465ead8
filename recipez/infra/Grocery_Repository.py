"""Grocery list repository helpers (file persistence)."""
import logging
from typing import Iterable, List, Optional

from recipez.domain.GroceryItem import GroceryItem
from recipez.domain.GroceryList import GroceryList
from recipez.domain.errors import StorageError
from recipez.domain.Ingredient import Ingredient
from recipez.infra.Json_Store import CollectionStore, JsonListStore
from recipez.infra.paths import GROCERY_LIST_FILE

logger = logging.getLogger(__name__)


class GroceryRepository:
    def __init__(self, path=GROCERY_LIST_FILE, store: Optional[CollectionStore] = None):
        self.store = store or JsonListStore(path)

    def _load(self) -> GroceryList:
        data = self.store.read()
        try:
            return GroceryList.from_dict(data)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("Malformed grocery entry in %s: %s", self.store.name, e)
            raise StorageError(f"Data file {self.store.name} holds a malformed grocery item") from e

    def _save(self, grocery_list: GroceryList):
        self.store.write(grocery_list.to_dict())

    def list_items(self) -> List[GroceryItem]:
        return self._load().get_items()

    def ingest(self, ingredients: Iterable[Ingredient]) -> List[GroceryItem]:
        """Merge a batch and persist it with a single write.

        If the write fails nothing from the batch is stored and StorageError propagates.
        """
        with self.store.locked():
            grocery_list = self._load()
            added, updated = grocery_list.ingest(ingredients)
            self._save(grocery_list)
        logger.info("Grocery ingest: %d added, %d updated, %d total",
                    len(added), len(updated), len(grocery_list))
        return grocery_list.get_items()

    def set_checked(self, item_id: int, checked: Optional[bool] = None) -> GroceryItem:
        with self.store.locked():
            grocery_list = self._load()
            item = grocery_list.toggle(item_id, checked)
            self._save(grocery_list)
        logger.info("Grocery item id=%s checked=%s", item_id, item.checked)
        return item

    def remove_item(self, item_id: int) -> GroceryItem:
        with self.store.locked():
            grocery_list = self._load()
            item = grocery_list.remove(item_id)
            self._save(grocery_list)
        logger.info("Grocery item removed id=%s", item_id)
        return item

    def remove_checked(self) -> int:
        with self.store.locked():
            grocery_list = self._load()
            removed = grocery_list.remove_checked()
            self._save(grocery_list)
        logger.info("Removed %d checked grocery item(s)", removed)
        return removed

    def clear(self):
        with self.store.locked():
            grocery_list = self._load()
            grocery_list.clear()
            self._save(grocery_list)
        logger.info("Grocery list cleared")

    def reorder(self, item_ids: List[int]) -> List[GroceryItem]:
        with self.store.locked():
            grocery_list = self._load()
            items = grocery_list.reorder(item_ids)
            self._save(grocery_list)
        logger.info("Grocery list reordered (%d)", len(items))
        return items
