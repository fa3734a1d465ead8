"""GroceryItem domain entity: one line of the shopping list."""
from typing import Optional

from recipez.domain.Ingredient import Ingredient, _text


class GroceryItem(Ingredient):
    def __init__(self, id: int, name: str = "", amount: str = "", unit: str = "",
                 checked: bool = False, added_at: Optional[str] = None):
        super().__init__(name, amount, unit)
        self.id = id
        self.checked = bool(checked)
        self.added_at = added_at

    @property
    def key(self) -> str:
        '''Merge identity: the lower-cased name, nothing else normalised.'''
        return self.name.lower()

    def __str__(self) -> str:
        mark = "x" if self.checked else " "
        return f"[{mark}] #{self.id} {super().__str__()}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return GroceryItem(
            id=int(d.get("id", 0)),
            name=_text(d.get("name")),
            amount=d.get("amount"),
            unit=d.get("unit"),
            checked=d.get("checked", False),
            added_at=d.get("addedAt"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "checked": self.checked,
            "addedAt": self.added_at,
        }
