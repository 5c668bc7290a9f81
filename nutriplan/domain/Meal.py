"""Meal domain entity: one Breakfast/Lunch/Snack/Dinner slot of a day."""
from typing import List, Optional

from nutriplan.domain.Ingredient import Ingredient
from nutriplan.domain.Macros import Macros


class Meal:
    def __init__(self, id: str = "", name: str = "", type: str = "", calories: float = 0,
                 macros: Optional[Macros] = None, ingredients: Optional[List[Ingredient]] = None,
                 instructions: Optional[List[str]] = None, prep_time: str = ""):
        self.id = id
        self.name = name
        self.type = type
        self.calories = calories
        self.macros = macros or Macros()
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.prep_time = prep_time

    def __str__(self) -> str:
        return f"{self.type}: {self.name} - {self.calories} kcal - {self.prep_time}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Meal(
            id=d.get("id", ""),
            name=d.get("name", ""),
            type=d.get("type", ""),
            calories=d.get("calories", 0),
            macros=Macros.from_dict(d.get("macros")),
            ingredients=[Ingredient.from_dict(i) for i in d["ingredients"]],
            instructions=list(d.get("instructions", [])),
            prep_time=d.get("prepTime", d.get("prep_time", "")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "calories": self.calories,
            "macros": self.macros.to_dict(),
            "ingredients": [i.to_dict() for i in self.ingredients],
            "instructions": self.instructions,
            "prepTime": self.prep_time,
        }
