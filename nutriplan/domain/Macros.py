"""Macros value object: protein, carbs, fats (grams) and calories."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Macros:
    """Macro-nutrient totals for a meal, a day or a daily target."""

    protein: float = 0
    carbs: float = 0
    fats: float = 0
    calories: float = 0

    def __add__(self, other: "Macros") -> "Macros":
        return Macros(
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fats=self.fats + other.fats,
            calories=self.calories + other.calories,
        )

    @staticmethod
    def from_dict(data):
        '''Creates Macros from a dictionary; missing or null fields count as 0.'''
        d = data if isinstance(data, dict) else {}
        return Macros(
            protein=d.get('protein') or 0,
            carbs=d.get('carbs', d.get('carbohydrates')) or 0,
            fats=d.get('fats', d.get('fat')) or 0,
            calories=d.get('calories') or 0,
        )

    def to_dict(self):
        return {
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
            "calories": self.calories,
        }
