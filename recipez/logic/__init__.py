"""Core business logic layer.

Subpackages:
- grocery: ingredient merge (ingest), display ordering, shopping list export
- recipes: search and tag filtering

Module ids holds the id-assignment and reorder helpers shared by both collections.
"""
__all__ = ["grocery", "recipes", "ids"]
