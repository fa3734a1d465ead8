"""Recipe search and tag filtering.

A recipe matches when the tag filter is empty or present in its tags, and the
query is empty or a case-insensitive substring of the title, an ingredient's
name/amount/unit, the instructions, or a tag.
"""
from typing import List, Optional, Sequence

from recipez.domain.Recipe import Recipe


def _haystack(recipe: Recipe) -> List[str]:
    fields = [recipe.title, recipe.instructions]
    for ing in recipe.ingredients:
        fields.extend((ing.name, ing.amount, ing.unit))
    fields.extend(recipe.tags)
    return [f.lower() for f in fields if f]


def recipe_matches(recipe: Recipe, query: Optional[str] = None, tag: Optional[str] = None) -> bool:
    if tag and tag not in recipe.tags:
        return False
    term = (query or "").strip().lower()
    if not term:
        return True
    return any(term in field for field in _haystack(recipe))


def filter_recipes(recipes: Sequence[Recipe], query: Optional[str] = None,
                   tag: Optional[str] = None) -> List[Recipe]:
    return [r for r in recipes if recipe_matches(r, query, tag)]


def collect_tags(recipes: Sequence[Recipe]) -> List[str]:
    """Sorted distinct tags across all recipes (for the filter dropdown)."""
    all_tags = set()
    for r in recipes:
        all_tags.update(r.tags)
    return sorted(all_tags)


__all__ = ['recipe_matches', 'filter_recipes', 'collect_tags']
