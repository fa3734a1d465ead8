"""Plain-text rendering of the grocery list, suitable for pasting into a message."""
from datetime import date
from typing import Optional, Sequence

from recipez.domain.GroceryItem import GroceryItem
from recipez.utilities.constants import APP_NAME


def _line(item: GroceryItem) -> str:
    qty = f" ({item.amount} {item.unit})" if item.has_quantity() else ""
    return f"• {item.name}{qty}\n"


def format_grocery_text(items: Sequence[GroceryItem], today: Optional[date] = None) -> str:
    """Render items as a "To Buy" / "Already Got" list. Empty sections are omitted.

    The "To Buy" section is always followed by a blank line, so a list with
    nothing checked ends with two blank lines before the footer.
    """
    today = today or date.today()
    to_buy = [i for i in items if not i.checked]
    got = [i for i in items if i.checked]

    text = "🛒 Grocery List\n"
    text += "=" * 20 + "\n\n"
    if to_buy:
        text += "📝 To Buy:\n"
        text += "".join(_line(i) for i in to_buy)
        text += "\n"
    if got:
        text += "✅ Already Got:\n"
        text += "".join(_line(i) for i in got)
    # month/day/year without zero padding, e.g. 3/4/2025
    text += f"\nGenerated by {APP_NAME} on {today.month}/{today.day}/{today.year}"
    return text


__all__ = ['format_grocery_text']
