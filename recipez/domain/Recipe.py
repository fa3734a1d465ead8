"""Recipe domain entity: title, ingredients, instructions, tags, timestamps."""
from recipez.domain.Ingredient import Ingredient, _text
from typing import List, Optional


class Recipe:
    def __init__(self, id: int, title: str = "", ingredients: Optional[List[Ingredient]] = None,
                 instructions: str = "", tags: Optional[List[str]] = None,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id
        self.title = title
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions
        # tags is always a list, never None
        self.tags = tags[:] if tags else []
        self.created_at = created_at
        self.updated_at = updated_at

    def __str__(self) -> str:
        return f"#{self.id} {self.title} - {len(self.ingredients)} ingredients - Tags: {', '.join(self.tags)}"

    __repr__ = __str__

    def replace_content(self, title: str, ingredients: List[Ingredient], instructions: str,
                        tags: Optional[List[str]], updated_at: str):
        '''Full replace of the editable fields; id and created_at are kept.'''
        self.title = title
        self.ingredients = ingredients[:]
        self.instructions = instructions
        self.tags = tags[:] if tags else []
        self.updated_at = updated_at

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Recipe(
            id=int(d.get("id", 0)),
            title=_text(d.get("title")),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients") or []],
            instructions=_text(d.get("instructions")),
            tags=[_text(t) for t in d.get("tags") or []],
            created_at=d.get("createdAt"),
            updated_at=d.get("updatedAt"),
        )

    def to_dict(self):
        data = {
            "id": self.id,
            "title": self.title,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "tags": self.tags,
            "createdAt": self.created_at,
        }
        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at
        return data
