from pathlib import Path

from recipez.utilities.config import DATA_DIR
from recipez.utilities.constants import RECIPES_FILENAME, GROCERY_LIST_FILENAME

# Centralized paths for data files (single source of truth)
RECIPES_FILE: Path = DATA_DIR / RECIPES_FILENAME
GROCERY_LIST_FILE: Path = DATA_DIR / GROCERY_LIST_FILENAME

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'GROCERY_LIST_FILE']
