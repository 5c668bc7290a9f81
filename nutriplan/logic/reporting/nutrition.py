"""Nutrition figures for the dashboard."""
from typing import Optional

from nutriplan.domain.Macros import Macros
from nutriplan.domain.UserProfile import UserProfile
from nutriplan.domain.WeekPlan import WeekPlan
from nutriplan.utilities.constants import MACRO_CHART_ROWS

FIELDS = ('calories', 'protein', 'carbs', 'fats')


def macro_chart_data(macros: Optional[Macros]):
    """Bar chart rows for protein, carbs and fats; empty when nothing was computed yet."""
    if macros is None:
        return []
    return [
        {'name': label, 'val': getattr(macros, field), 'unit': 'g', 'color': color}
        for field, label, color in MACRO_CHART_ROWS
    ]


def compute_week_nutrition(plan: WeekPlan, target_calories: Optional[float] = None):
    """Aggregate nutrition stats for the given week plan.

    Returns structure:
    {
      'days': [
         {'day': 'Monday', 'calories': n, 'protein': g, 'carbs': g, 'fats': g,
          'meals_calories': n, 'meal_count': int, 'target_deviation': pct | None},
         ...
      ],
      'week_totals': {'calories': n, 'protein': g, 'carbs': g, 'fats': g},
      'daily_average': {'calories': n, 'protein': g, 'carbs': g, 'fats': g},
      'target_calories': n | None
    }
    Day figures come from each day's reported totals; 'meals_calories' is the
    sum over its meals, kept separately since the two are never reconciled.
    """
    empty = {'calories': 0, 'protein': 0, 'carbs': 0, 'fats': 0}
    if not plan or not plan.days:
        return {'days': [], 'week_totals': dict(empty), 'daily_average': dict(empty),
                'target_calories': target_calories}

    days_result = []
    totals = Macros()

    for day in plan.days:
        m = day.total_macros
        deviation = None
        if target_calories:
            deviation = round((m.calories - target_calories) / target_calories * 100, 1)
        days_result.append({
            'day': day.day,
            'calories': m.calories,
            'protein': m.protein,
            'carbs': m.carbs,
            'fats': m.fats,
            'meals_calories': day.meals_calories(),
            'meal_count': len(day.meals),
            'target_deviation': deviation,
        })
        totals = totals + m

    n = len(plan.days)
    return {
        'days': days_result,
        'week_totals': {k: getattr(totals, k) for k in FIELDS},
        'daily_average': {k: round(getattr(totals, k) / n, 1) for k in FIELDS},
        'target_calories': target_calories,
    }


def build_dashboard(profile: UserProfile, plan: Optional[WeekPlan] = None, advice: str = "",
                    is_generating: bool = False):
    macros = profile.calculated_macros
    target = macros.calories if macros else None
    return {
        'calories': macros.calories if macros else 0,
        'goal': profile.goal,
        'goal_label': profile.goal_label(),
        'macros': macros.to_dict() if macros else None,
        'chart': macro_chart_data(macros),
        'advice': advice,
        'has_plan': plan is not None,
        'is_generating': is_generating,
        'nutrition': compute_week_nutrition(plan, target) if plan is not None else None,
    }


__all__ = ["macro_chart_data", "compute_week_nutrition", "build_dashboard"]
