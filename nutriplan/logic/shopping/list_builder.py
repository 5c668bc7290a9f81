"""Shopping list builder.

Consolidates every ingredient of a week plan into one line per
(category, item), remembering each amount and where the item is used.
Provides consolidate(plan), summarize_amounts(amounts), progress(checked, total),
translate_category(category) and build_shopping_list(plan, checklist).
"""
from typing import Dict, List, Mapping, Optional

from nutriplan.domain.ShoppingList import ShoppingList, checklist_key
from nutriplan.domain.WeekPlan import WeekPlan
from nutriplan.utilities.constants import CATEGORY_TRANSLATIONS


class GroupedItem:
    """One consolidated shopping line."""

    def __init__(self, name: str):
        self.name = name  # casing of the first occurrence
        self.amounts: List[str] = []
        self.occurrences: List[str] = []

    def summary(self) -> str:
        return summarize_amounts(self.amounts)

    def __str__(self) -> str:
        return f"{self.name}: {self.summary()} [{', '.join(self.occurrences)}]"

    __repr__ = __str__


def consolidate(plan: WeekPlan) -> Dict[str, Dict[str, GroupedItem]]:
    """Group the plan's ingredients by category key, then item key.

    Days, meals and ingredients are walked in plan order, which fixes the
    display name of each line and the order of its amounts and occurrences.
    """
    categories: Dict[str, Dict[str, GroupedItem]] = {}
    for day in plan.days:
        day_short = day.short_day()
        for meal in day.meals:
            for ing in meal.ingredients:
                items = categories.setdefault(ing.category_key(), {})
                item_key = ing.item_key()
                grouped = items.get(item_key)
                if grouped is None:
                    grouped = items[item_key] = GroupedItem(ing.item)
                grouped.amounts.append(ing.amount)
                grouped.occurrences.append(f"{day_short} ({meal.type})")
    return categories


def summarize_amounts(amounts: List[str]) -> str:
    """"3x 1 unit" when every amount is the same text, else "100g + 50g"."""
    if len(amounts) > 1 and len(set(amounts)) == 1:
        return f"{len(amounts)}x {amounts[0]}"
    return " + ".join(amounts)


def progress(checked: Mapping[str, bool], total_items: int) -> float:
    """Percentage of ticked lines; 0 for an empty list."""
    if total_items <= 0:
        return 0.0
    checked_count = sum(1 for v in checked.values() if v)
    return checked_count / total_items * 100


def translate_category(category: str) -> str:
    label = CATEGORY_TRANSLATIONS.get(category.strip().lower())
    if label is not None:
        return label
    return category[:1].upper() + category[1:]


def count_items(consolidated: Mapping[str, Mapping[str, GroupedItem]]) -> int:
    return sum(len(items) for items in consolidated.values())


def build_shopping_list(plan: WeekPlan, checklist: Optional[ShoppingList] = None):
    """Shopping list view for a plan.

    Returns structure:
    {
      'categories': [
         {'key': 'grains', 'label': 'Grãos 🍚', 'count': 1,
          'items': [{'key': 'rice', 'id': 'grains-rice', 'name': 'Rice',
                     'amounts': [...], 'amount_display': '2x 100g',
                     'occurrences': [...], 'used_for': 'Monday (Lunch), ...',
                     'checked': False}]},
         ...
      ],
      'total_items': int, 'checked_count': int, 'progress': float, 'progress_display': '50%'
    }
    """
    checklist = checklist or ShoppingList()
    consolidated = consolidate(plan)

    categories = []
    for category_key, items in consolidated.items():
        if not items:
            continue
        lines = []
        for item_key, grouped in items.items():
            lines.append({
                'key': item_key,
                'id': checklist_key(category_key, item_key),
                'name': grouped.name,
                'amounts': list(grouped.amounts),
                'amount_display': grouped.summary(),
                'occurrences': list(grouped.occurrences),
                'used_for': ", ".join(grouped.occurrences),
                'checked': checklist.is_checked(category_key, item_key),
            })
        categories.append({
            'key': category_key,
            'label': translate_category(category_key),
            'count': len(lines),
            'items': lines,
        })

    total_items = count_items(consolidated)
    pct = progress(checklist.checked, total_items)
    return {
        'categories': categories,
        'total_items': total_items,
        'checked_count': checklist.checked_count(),
        'progress': pct,
        'progress_display': f"{round(pct)}%",
    }


__all__ = [
    'GroupedItem', 'consolidate', 'summarize_amounts', 'progress',
    'translate_category', 'count_items', 'build_shopping_list',
]
