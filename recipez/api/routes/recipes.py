from fastapi import APIRouter, Depends, Query
from typing import Optional

from recipez.api.routes.grocery import get_grocery_repository
from recipez.infra.Grocery_Repository import GroceryRepository
from recipez.infra.Recipe_Repository import RecipeRepository
from recipez.utilities.validators import RecipeInput, RecipeReorderInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])

_repository: Optional[RecipeRepository] = None


def get_recipe_repository() -> RecipeRepository:
    global _repository
    if _repository is None:
        _repository = RecipeRepository()
    return _repository


@router.get("")
def list_recipes(q: Optional[str] = Query(default=None, description="Free-text search"),
                 tag: Optional[str] = Query(default=None, description="Only recipes carrying this tag"),
                 repo: RecipeRepository = Depends(get_recipe_repository)):
    """Return all recipes in stored order, optionally filtered by search text and tag."""
    return [r.to_dict() for r in repo.list_recipes(q, tag)]


@router.get("/tags")
def list_tags(repo: RecipeRepository = Depends(get_recipe_repository)):
    return repo.list_tags()


# Declared before /{recipe_id} so "reorder" is not parsed as an id
@router.put("/reorder")
def reorder_recipes(payload: RecipeReorderInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    return [r.to_dict() for r in repo.reorder_recipes(payload.recipe_ids)]


@router.get("/{recipe_id}")
def get_recipe(recipe_id: int, repo: RecipeRepository = Depends(get_recipe_repository)):
    return repo.get_recipe(recipe_id).to_dict()


@router.post("", status_code=201)
def create_recipe(payload: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.create_recipe(payload.title, payload.ingredient_list(), payload.instructions, payload.tags)
    return recipe.to_dict()


@router.put("/{recipe_id}")
def update_recipe(recipe_id: int, payload: RecipeInput,
                  repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.update_recipe(recipe_id, payload.title, payload.ingredient_list(),
                                payload.instructions, payload.tags)
    return recipe.to_dict()


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: int, repo: RecipeRepository = Depends(get_recipe_repository)):
    repo.delete_recipe(recipe_id)
    return {"message": "Recipe deleted successfully"}


@router.post("/{recipe_id}/grocery-list")
def add_recipe_to_grocery_list(recipe_id: int,
                               repo: RecipeRepository = Depends(get_recipe_repository),
                               grocery: GroceryRepository = Depends(get_grocery_repository)):
    """Ingest every ingredient of a stored recipe into the grocery list."""
    recipe = repo.get_recipe(recipe_id)
    return [i.to_dict() for i in grocery.ingest(recipe.ingredients)]
