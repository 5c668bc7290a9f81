import pytest
from pydantic import ValidationError

from nutriplan.utilities.validators import (
    MacroCalculationResponse, ShoppingToggleInput, UserProfileInput, ViewChangeInput, WeekPlanSchema
)
from nutriplan.utilities.constants import ACTIVITY_LEVELS, GENDERS, GOALS, MEAL_TYPES, VIEWS
from nutriplan.tests.factories import day_dict, meal_dict, plan_dict, rice_plan_dict

PROFILE = {
    "age": 34, "weight": 82.5, "height": 180, "gender": "male",
    "goal": "lose_weight", "activityLevel": "moderate", "dietaryRestrictions": "  lactose  ",
}


def test_profile_aliases_and_strip():
    profile = UserProfileInput.model_validate(PROFILE)
    assert profile.activity_level == "moderate"
    assert profile.dietary_restrictions == "lactose"
    dumped = profile.model_dump(by_alias=True)
    assert dumped["activityLevel"] == "moderate"
    assert dumped["calculatedMacros"] is None


@pytest.mark.parametrize("field,value", [
    ("age", 0), ("weight", -1), ("height", 0), ("gender", "other"),
    ("goal", "bulk"), ("activityLevel", "extreme"),
])
def test_profile_rejects_invalid_values(field, value):
    with pytest.raises(ValidationError):
        UserProfileInput.model_validate(dict(PROFILE, **{field: value}))


def test_week_plan_accepts_valid_payload():
    parsed = WeekPlanSchema.model_validate(rice_plan_dict())
    assert len(parsed.days) == 2
    assert parsed.days[0].meals[1].prep_time == "15 min"
    assert parsed.model_dump(by_alias=True)["days"][0]["totalMacros"]["calories"] == 1820


def test_week_plan_rejects_unknown_meal_type():
    bad = plan_dict([day_dict("Monday", [meal_dict("Brunch", "Eggs", [("Eggs", "2", "Dairy")])])])
    with pytest.raises(ValidationError):
        WeekPlanSchema.model_validate(bad)


def test_week_plan_rejects_missing_ingredients():
    bad = rice_plan_dict()
    del bad["days"][0]["meals"][0]["ingredients"]
    with pytest.raises(ValidationError):
        WeekPlanSchema.model_validate(bad)


def test_blank_meal_id_is_replaced():
    data = plan_dict([day_dict("Monday", [meal_dict("Lunch", "Soup", [("Leek", "1", "Produce")], meal_id=" ")])])
    parsed = WeekPlanSchema.model_validate(data)
    assert parsed.days[0].meals[0].id.strip()


def test_macro_response_rejects_negative_values():
    with pytest.raises(ValidationError):
        MacroCalculationResponse.model_validate(
            {"macros": {"protein": -5, "carbs": 1, "fats": 1, "calories": 1}, "advice": "x"})


def test_toggle_input_normalizes_keys():
    payload = ShoppingToggleInput(category=" Grains ", item="RICE")
    assert (payload.category, payload.item) == ("grains", "rice")


@pytest.mark.parametrize("field,values", [
    ("gender", GENDERS), ("goal", GOALS), ("activityLevel", ACTIVITY_LEVELS),
])
def test_profile_accepts_every_known_choice(field, values):
    for value in values:
        profile = UserProfileInput.model_validate(dict(PROFILE, **{field: value}))
        assert profile.model_dump(by_alias=True)[field] == value


def test_every_meal_type_is_accepted():
    meals = [meal_dict(t, f"Meal {t}", [("Oats", "50g", "Grains")]) for t in MEAL_TYPES]
    parsed = WeekPlanSchema.model_validate(plan_dict([day_dict("Monday", meals)]))
    assert [m.type for m in parsed.days[0].meals] == list(MEAL_TYPES)


def test_view_change_checks_known_views():
    for view in VIEWS:
        assert ViewChangeInput(view=view).view == view
    with pytest.raises(ValidationError, match="view must be one of"):
        ViewChangeInput(view="SETTINGS")
