from typing import Final

APP_NAME: Final[str] = "Recip-EZ"
RECIPES_FILENAME: Final[str] = "recipes.json"
GROCERY_LIST_FILENAME: Final[str] = "grocery-list.json"

# ISO-8601, UTC, millisecond precision (e.g. 2025-01-31T12:00:00.000Z)
TIMESTAMP_TIMESPEC: Final[str] = "milliseconds"
EXPORT_DATE_FORMAT: Final[str] = "%m/%d/%Y"
