"""WeekPlan aggregate: a titled sequence of day plans (seven expected, not enforced)."""
from typing import List, Optional

from nutriplan.domain.DayPlan import DayPlan


class WeekPlan:
    def __init__(self, id: str = "", title: str = "", days: Optional[List[DayPlan]] = None):
        self.id = id
        self.title = title
        self.days = days[:] if days else []

    def get_day(self, index: int) -> DayPlan:
        '''Returns the day at index; raises IndexError for negative or out-of-range values.'''
        if index < 0 or index >= len(self.days):
            raise IndexError(f"Day index {index} out of range (plan has {len(self.days)} days)")
        return self.days[index]

    def __str__(self) -> str:
        return f"{self.title} ({len(self.days)} days)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return WeekPlan(
            id=str(d.get("id", "")),
            title=d.get("title", ""),
            days=[DayPlan.from_dict(day) for day in d["days"]],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "days": [day.to_dict() for day in self.days],
        }
