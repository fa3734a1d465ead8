"""RecipeBook aggregate: the ordered recipe collection with CRUD and manual ordering."""
from typing import List, Optional

from recipez.domain.Ingredient import Ingredient
from recipez.domain.Recipe import Recipe
from recipez.domain.errors import NotFoundError
from recipez.logic.ids import next_id, reorder_by_ids
from recipez.utilities.timestamps import utc_now_iso


class RecipeBook:
    def __init__(self, recipes: Optional[List[Recipe]] = None):
        self.recipes: List[Recipe] = recipes[:] if recipes else []

    def get(self, recipe_id: int) -> Recipe:
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        raise NotFoundError("Recipe not found")

    def create(self, title: str, ingredients: List[Ingredient], instructions: str,
               tags: Optional[List[str]] = None) -> Recipe:
        recipe = Recipe(
            id=next_id(self.recipes),
            title=title,
            ingredients=ingredients,
            instructions=instructions,
            tags=tags,
            created_at=utc_now_iso(),
        )
        self.recipes.append(recipe)
        return recipe

    def update(self, recipe_id: int, title: str, ingredients: List[Ingredient],
               instructions: str, tags: Optional[List[str]] = None) -> Recipe:
        recipe = self.get(recipe_id)
        recipe.replace_content(title, ingredients, instructions, tags, updated_at=utc_now_iso())
        return recipe

    def delete(self, recipe_id: int) -> Recipe:
        recipe = self.get(recipe_id)
        self.recipes.remove(recipe)
        return recipe

    def reorder(self, recipe_ids: List[int]) -> List[Recipe]:
        self.recipes = reorder_by_ids(self.recipes, recipe_ids, label="recipe id")
        return self.recipes

    def __len__(self) -> int:
        return len(self.recipes)

    @staticmethod
    def from_dict(data):
        return RecipeBook([Recipe.from_dict(entry) for entry in data or []])

    def to_dict(self):
        return [recipe.to_dict() for recipe in self.recipes]
