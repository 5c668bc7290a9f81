"""DayPlan domain entity: the meals of one day and the day's macro totals."""
from typing import List, Optional

from nutriplan.domain.Macros import Macros
from nutriplan.domain.Meal import Meal


class DayPlan:
    def __init__(self, day: str = "", meals: Optional[List[Meal]] = None, total_macros: Optional[Macros] = None):
        self.day = day
        self.meals = meals[:] if meals else []
        # As reported by the provider; not reconciled with the meals
        self.total_macros = total_macros or Macros()

    def short_day(self) -> str:
        '''Day name up to its first hyphen ("Segunda-feira" -> "Segunda"); whole name otherwise.'''
        return self.day.split('-')[0]

    def meals_calories(self) -> float:
        return sum(m.calories for m in self.meals)

    def __str__(self) -> str:
        return f"{self.day} - {len(self.meals)} meals - {self.total_macros.calories} kcal"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return DayPlan(
            day=d.get("day", ""),
            meals=[Meal.from_dict(m) for m in d["meals"]],
            total_macros=Macros.from_dict(d.get("totalMacros", d.get("total_macros"))),
        )

    def to_dict(self):
        return {
            "day": self.day,
            "meals": [m.to_dict() for m in self.meals],
            "totalMacros": self.total_macros.to_dict(),
        }
