"""
Input validation schemas using Pydantic.

Covers both what the user submits (profile, view changes, checklist toggles)
and what the AI provider sends back (macros and week plans). Field aliases
keep the camelCase names used on the wire.
"""
from uuid import uuid4
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nutriplan.utilities.constants import ACTIVITY_LEVELS, GENDERS, GOALS, MEAL_TYPES, VIEWS


def _one_of(value: str, allowed, field: str) -> str:
    if value not in allowed:
        raise ValueError(f"{field} must be one of: {', '.join(allowed)}")
    return value


class MacrosSchema(BaseModel):
    """Schema for a macro-nutrient block."""
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fats: float = Field(..., ge=0)
    calories: float = Field(..., ge=0)


class UserProfileInput(BaseModel):
    """Schema for the profile form."""
    model_config = ConfigDict(populate_by_name=True)

    age: int = Field(..., gt=0, le=130)
    weight: float = Field(..., gt=0, le=700)
    height: float = Field(..., gt=0, le=300)
    gender: str
    goal: str
    activity_level: str = Field(..., alias="activityLevel")
    dietary_restrictions: str = Field("", alias="dietaryRestrictions", max_length=1000)
    calculated_macros: Optional[MacrosSchema] = Field(None, alias="calculatedMacros")

    @field_validator('dietary_restrictions')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip() if isinstance(v, str) else v

    @field_validator('gender')
    @classmethod
    def check_gender(cls, v):
        return _one_of(v, GENDERS, "gender")

    @field_validator('goal')
    @classmethod
    def check_goal(cls, v):
        return _one_of(v, GOALS, "goal")

    @field_validator('activity_level')
    @classmethod
    def check_activity_level(cls, v):
        return _one_of(v, ACTIVITY_LEVELS, "activityLevel")


class MacroCalculationResponse(BaseModel):
    """Schema the macro-calculation answer must satisfy."""
    macros: MacrosSchema
    advice: str


class IngredientSchema(BaseModel):
    item: str = Field(..., min_length=1)
    amount: str
    category: str


class MealSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = Field(..., min_length=1)
    type: str
    calories: float = Field(..., ge=0)
    macros: MacrosSchema
    ingredients: List[IngredientSchema]
    instructions: List[str]
    prep_time: str = Field(..., alias="prepTime")

    @field_validator('id')
    @classmethod
    def fill_blank_id(cls, v):
        """Providers sometimes send an empty id; give the meal one of its own."""
        return v.strip() if v and v.strip() else uuid4().hex

    @field_validator('type')
    @classmethod
    def check_meal_type(cls, v):
        return _one_of(v, MEAL_TYPES, "type")


class DayPlanSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day: str = Field(..., min_length=1)
    meals: List[MealSchema]
    total_macros: MacrosSchema = Field(..., alias="totalMacros")


class WeekPlanSchema(BaseModel):
    """Schema the plan-generation answer must satisfy."""
    title: str
    days: List[DayPlanSchema]


class ViewChangeInput(BaseModel):
    view: str

    @field_validator('view')
    @classmethod
    def check_view(cls, v):
        return _one_of(v, VIEWS, "view")


class DaySelectionInput(BaseModel):
    index: int = Field(..., ge=0)


class ShoppingToggleInput(BaseModel):
    """Identifies one shopping list line by its category and item keys."""
    category: str = Field(..., min_length=1)
    item: str = Field(..., min_length=1)

    @field_validator('category', 'item')
    @classmethod
    def normalize_key(cls, v):
        """Accept display casing; keys are lower-cased and trimmed."""
        return v.strip().lower()
