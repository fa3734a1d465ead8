"""Ingredient domain entity: name plus free-text amount and unit."""
from typing import Any


def _text(value: Any) -> str:
    '''Amounts and units are free text; numbers keep their string form, None becomes "".'''
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class Ingredient:
    def __init__(self, name: str = "", amount: str = "", unit: str = ""):
        self.name = name
        self.amount = _text(amount)
        self.unit = _text(unit)

    def has_quantity(self) -> bool:
        '''True only when both amount and unit are set.'''
        return bool(self.amount) and bool(self.unit)

    def __str__(self) -> str:
        if self.amount or self.unit:
            return f"{self.name} - {self.amount} {self.unit}".rstrip()
        return self.name

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=_text(d.get("name")),
            amount=d.get("amount"),
            unit=d.get("unit"),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
        }
