"""
Input validation schemas using Pydantic for request bodies.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional

from recipez.domain.Ingredient import Ingredient


class IngredientInput(BaseModel):
    """Schema for one ingredient entry (recipe ingredient or grocery ingest entry)."""
    name: str = Field(..., min_length=1)
    amount: str = ""
    unit: str = ""

    @field_validator('amount', 'unit', mode='before')
    @classmethod
    def coerce_text(cls, v: Any):
        """Accept numbers (stored as text) and treat null as empty."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def to_domain(self) -> Ingredient:
        return Ingredient(self.name, self.amount, self.unit)


class RecipeInput(BaseModel):
    """Schema for recipe create/update (full replace)."""
    title: str = Field(..., min_length=1)
    ingredients: List[IngredientInput]
    instructions: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        """Validate recipe title."""
        if not v.strip():
            raise ValueError('Recipe title cannot be empty')
        return v

    @field_validator('tags', mode='before')
    @classmethod
    def default_tags(cls, v):
        """A missing or null tag list is an empty list."""
        return [] if v is None else v

    def ingredient_list(self) -> List[Ingredient]:
        return [ing.to_domain() for ing in self.ingredients]


class GroceryIngestInput(BaseModel):
    """Schema for POST /grocery-list."""
    ingredients: List[IngredientInput]

    def ingredient_list(self) -> List[Ingredient]:
        return [ing.to_domain() for ing in self.ingredients]


class GroceryItemUpdate(BaseModel):
    """Schema for PUT /grocery-list/{id}; an absent 'checked' means flip."""
    checked: Optional[bool] = None


class RecipeReorderInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipe_ids: List[int] = Field(..., alias='recipeIds')


class GroceryReorderInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_ids: List[int] = Field(..., alias='itemIds')
