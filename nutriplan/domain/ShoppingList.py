"""ShoppingList checklist: which consolidated shopping lines the user has ticked."""
from typing import Dict


def checklist_key(category_key: str, item_key: str) -> str:
    # Plain hyphen join: ("a", "b-c") and ("a-b", "c") share one key.
    return f"{category_key}-{item_key}"


class ShoppingList:
    def __init__(self):
        self.checked: Dict[str, bool] = {}

    def toggle(self, category_key: str, item_key: str) -> bool:
        '''
        Flips the checked state of one line and returns the new state.
        '''
        key = checklist_key(category_key, item_key)
        self.checked[key] = not self.checked.get(key, False)
        return self.checked[key]

    def is_checked(self, category_key: str, item_key: str) -> bool:
        return self.checked.get(checklist_key(category_key, item_key), False)

    def checked_count(self) -> int:
        return sum(1 for v in self.checked.values() if v)

    def clear(self):
        '''
        Unticks everything (used when a new plan replaces the old one).
        '''
        self.checked.clear()

    def __str__(self) -> str:
        return f"Shopping List ({self.checked_count()} checked)"

    def __repr__(self) -> str:
        return self.__str__()
