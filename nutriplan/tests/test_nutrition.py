import unittest

from nutriplan.domain.Macros import Macros
from nutriplan.domain.UserProfile import UserProfile
from nutriplan.domain.WeekPlan import WeekPlan
from nutriplan.logic.reporting.nutrition import build_dashboard, compute_week_nutrition, macro_chart_data
from nutriplan.tests.factories import day_dict, make_plan, plan_dict


class TestNutrition(unittest.TestCase):

    def test_chart_rows(self):
        rows = macro_chart_data(Macros(protein=150, carbs=200, fats=60, calories=1940))
        self.assertEqual([r["name"] for r in rows], ["Proteína", "Carboidratos", "Gorduras"])
        self.assertEqual([r["val"] for r in rows], [150, 200, 60])
        self.assertTrue(all(r["unit"] == "g" for r in rows))
        self.assertEqual(macro_chart_data(None), [])

    def test_week_totals_and_deviation(self):
        plan = make_plan(plan_dict([
            day_dict("Monday", [], calories=1800),
            day_dict("Tuesday", [], calories=2200),
        ]))
        report = compute_week_nutrition(plan, target_calories=2000)
        self.assertEqual(report["week_totals"]["calories"], 4000)
        self.assertEqual(report["week_totals"]["protein"], 240)
        self.assertEqual(report["week_totals"], {"calories": 4000, "protein": 240, "carbs": 400, "fats": 120})
        self.assertEqual(report["daily_average"]["fats"], 60)
        self.assertEqual(report["daily_average"]["calories"], 2000)
        self.assertEqual([d["target_deviation"] for d in report["days"]], [-10.0, 10.0])
        self.assertEqual(report["days"][0]["meal_count"], 0)

    def test_empty_plan(self):
        report = compute_week_nutrition(WeekPlan(id="1", title="Empty"))
        self.assertEqual(report["days"], [])
        self.assertEqual(report["week_totals"]["calories"], 0)

    def test_dashboard_without_plan(self):
        profile = UserProfile(30, 70, 170, "female", "lose_weight", "moderate", "",
                              Macros(120, 150, 50, 1530))
        data = build_dashboard(profile, advice="Drink water")
        self.assertEqual(data["calories"], 1530)
        self.assertEqual(data["goal_label"], "lose weight")
        self.assertFalse(data["has_plan"])
        self.assertIsNone(data["nutrition"])
        self.assertEqual(len(data["chart"]), 3)

    def test_dashboard_with_plan(self):
        profile = UserProfile(30, 70, 170, "female", "maintain", "moderate", "", Macros(120, 150, 50, 1820))
        data = build_dashboard(profile, make_plan())
        self.assertTrue(data["has_plan"])
        self.assertEqual(data["nutrition"]["days"][0]["target_deviation"], 0.0)
