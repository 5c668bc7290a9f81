"""UserProfile domain entity: biometrics, goal, activity level and computed macros."""
from typing import Optional

from nutriplan.domain.Macros import Macros


class UserProfile:
    def __init__(self, age: int = 0, weight: float = 0, height: float = 0, gender: str = "",
                 goal: str = "", activity_level: str = "", dietary_restrictions: str = "",
                 calculated_macros: Optional[Macros] = None):
        self.age = age
        self.weight = weight  # kg
        self.height = height  # cm
        self.gender = gender
        self.goal = goal
        self.activity_level = activity_level
        self.dietary_restrictions = dietary_restrictions
        self.calculated_macros = calculated_macros

    def with_macros(self, macros: Macros) -> "UserProfile":
        '''Returns a copy of this profile carrying the given calculated macros.'''
        return UserProfile(self.age, self.weight, self.height, self.gender, self.goal,
                           self.activity_level, self.dietary_restrictions, macros)

    def goal_label(self) -> str:
        return self.goal.replace('_', ' ', 1)

    def __str__(self) -> str:
        return (f"{self.gender}, {self.age}y, {self.weight}kg, {self.height}cm - "
                f"{self.goal} ({self.activity_level})")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        macros = d.get("calculatedMacros", d.get("calculated_macros"))
        return UserProfile(
            age=d.get("age", 0),
            weight=d.get("weight", 0),
            height=d.get("height", 0),
            gender=d.get("gender", ""),
            goal=d.get("goal", ""),
            activity_level=d.get("activityLevel", d.get("activity_level", "")),
            dietary_restrictions=d.get("dietaryRestrictions", d.get("dietary_restrictions", "")) or "",
            calculated_macros=Macros.from_dict(macros) if macros else None,
        )

    def to_dict(self):
        return {
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "gender": self.gender,
            "goal": self.goal,
            "activityLevel": self.activity_level,
            "dietaryRestrictions": self.dietary_restrictions,
            "calculatedMacros": self.calculated_macros.to_dict() if self.calculated_macros else None,
        }
