"""Ingredient entity: item name, free-text amount and shopping category."""


class Ingredient:
    def __init__(self, item: str = "", amount: str = "", category: str = ""):
        self.item = item
        # Amounts are opaque text ("200g", "1 unit"); they are never parsed
        self.amount = amount
        self.category = category

    def category_key(self) -> str:
        return self.category.strip().lower()

    def item_key(self) -> str:
        return self.item.strip().lower()

    def __str__(self) -> str:
        return f"{self.item} - {self.amount} ({self.category})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            item=d.get("item", ""),
            amount=d.get("amount", ""),
            category=d.get("category", ""),
        )

    def to_dict(self):
        return {
            "item": self.item,
            "amount": self.amount,
            "category": self.category,
        }
