import logging
from typing import List, Optional

from recipez.domain.Ingredient import Ingredient
from recipez.domain.Recipe import Recipe
from recipez.domain.RecipeBook import RecipeBook
from recipez.domain.errors import StorageError
from recipez.infra.Json_Store import CollectionStore, JsonListStore
from recipez.infra.paths import RECIPES_FILE
from recipez.logic.recipes.search import collect_tags, filter_recipes

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Recipe store: every mutation is one locked read-modify-write of the collection."""

    def __init__(self, path=RECIPES_FILE, store: Optional[CollectionStore] = None):
        self.store = store or JsonListStore(path)

    def _load(self) -> RecipeBook:
        data = self.store.read()
        try:
            return RecipeBook.from_dict(data)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error("Malformed recipe entry in %s: %s", self.store.name, e)
            raise StorageError(f"Data file {self.store.name} holds a malformed recipe") from e

    def _save(self, book: RecipeBook):
        self.store.write(book.to_dict())

    def list_recipes(self, query: Optional[str] = None, tag: Optional[str] = None) -> List[Recipe]:
        recipes = self._load().recipes
        if query or tag:
            return filter_recipes(recipes, query, tag)
        return recipes

    def list_tags(self) -> List[str]:
        return collect_tags(self._load().recipes)

    def get_recipe(self, recipe_id: int) -> Recipe:
        return self._load().get(recipe_id)

    def create_recipe(self, title: str, ingredients: List[Ingredient], instructions: str,
                      tags: Optional[List[str]] = None) -> Recipe:
        with self.store.locked():
            book = self._load()
            recipe = book.create(title, ingredients, instructions, tags)
            self._save(book)
        logger.info("Recipe created id=%s title=%r", recipe.id, recipe.title)
        return recipe

    def update_recipe(self, recipe_id: int, title: str, ingredients: List[Ingredient],
                      instructions: str, tags: Optional[List[str]] = None) -> Recipe:
        with self.store.locked():
            book = self._load()
            recipe = book.update(recipe_id, title, ingredients, instructions, tags)
            self._save(book)
        logger.info("Recipe updated id=%s", recipe_id)
        return recipe

    def delete_recipe(self, recipe_id: int) -> Recipe:
        with self.store.locked():
            book = self._load()
            recipe = book.delete(recipe_id)
            self._save(book)
        logger.info("Recipe deleted id=%s", recipe_id)
        return recipe

    def reorder_recipes(self, recipe_ids: List[int]) -> List[Recipe]:
        with self.store.locked():
            book = self._load()
            recipes = book.reorder(recipe_ids)
            self._save(book)
        logger.info("Recipes reordered (%d)", len(recipes))
        return recipes
