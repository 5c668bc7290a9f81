from typing import Final

MEAL_TYPES: Final[tuple[str, ...]] = ("Breakfast", "Lunch", "Snack", "Dinner")
GENDERS: Final[tuple[str, ...]] = ("male", "female")
GOALS: Final[tuple[str, ...]] = ("lose_weight", "maintain", "gain_muscle")
ACTIVITY_LEVELS: Final[tuple[str, ...]] = ("sedentary", "light", "moderate", "active", "very_active")

VIEWS: Final[tuple[str, ...]] = ("SETUP", "DASHBOARD", "MEAL_PLAN", "SHOPPING")
THEMES: Final[tuple[str, ...]] = ("light", "dark")

DEFAULT_TARGET_CALORIES: Final[int] = 2000
DEFAULT_PROFILE: Final[dict] = {
    "age": 30,
    "weight": 70,
    "height": 170,
    "gender": "female",
    "goal": "lose_weight",
    "activityLevel": "moderate",
    "dietaryRestrictions": "",
}

# Shopping list category labels (keys are lower-cased category names)
CATEGORY_TRANSLATIONS: Final[dict[str, str]] = {
    "produce": "Hortifruti 🍎",
    "dairy": "Laticínios 🧀",
    "meat": "Carnes 🥩",
    "pantry": "Despensa 🥫",
    "bakery": "Padaria 🍞",
    "frozen": "Congelados 🧊",
    "beverages": "Bebidas 🥤",
    "seafood": "Peixes e Frutos do Mar 🐟",
    "household": "Casa 🏠",
    "supplements": "Suplementos 💊",
    "spices": "Temperos 🧂",
    "grains": "Grãos 🍚",
    "pasta": "Massas 🍝",
    "canned": "Enlatados 🥫",
    "vegetables": "Vegetais 🥦",
    "fruits": "Frutas 🍇",
    "snacks": "Lanches 🍿",
    "oils": "Óleos e Gorduras 🫒",
    "condiments": "Condimentos 🍅",
}

# Dashboard chart rows: (macro field, label, color)
MACRO_CHART_ROWS: Final[tuple[tuple[str, str, str], ...]] = (
    ("protein", "Proteína", "#10b981"),
    ("carbs", "Carboidratos", "#3b82f6"),
    ("fats", "Gorduras", "#f59e0b"),
)

MACROS_PROMPT_TEMPLATE: Final[str] = (
    """
    Calculate the ideal daily macros (protein, carbohydrates, fats, total calories) for this person:
    Age: {age}
    Weight: {weight}kg
    Height: {height}cm
    Gender: {gender}
    Activity level: {activity_level}
    Goal: {goal}
    Restrictions: {restrictions}

    Also give a short motivational and nutritional piece of advice ("advice") written in {language}.
    """
)

PLAN_PROMPT_TEMPLATE: Final[str] = (
    """
    Create a complete weekly menu (7 days, starting on Monday) written in {language} for a person with this profile:
    Target calories: {calories}
    Goal: {goal}
    Dietary restrictions: {restrictions}

    Every day must have Breakfast, Lunch, Snack and Dinner (use exactly these English values for the meal "type").
    Recipes should be healthy, practical and "fitness" oriented.
    Give each ingredient a shopping category such as Produce, Dairy, Meat, Pantry, Grains or Spices.

    The answer must strictly follow the provided JSON schema.
    """
)

# Strict JSON schemas sent to the provider (every property required, no extras)
MACROS_JSON_SCHEMA: Final[dict] = {
    "type": "object",
    "properties": {
        "protein": {"type": "number"},
        "carbs": {"type": "number"},
        "fats": {"type": "number"},
        "calories": {"type": "number"},
    },
    "required": ["protein", "carbs", "fats", "calories"],
    "additionalProperties": False,
}

MACROS_RESPONSE_JSON_SCHEMA: Final[dict] = {
    "type": "object",
    "properties": {
        "macros": MACROS_JSON_SCHEMA,
        "advice": {"type": "string"},
    },
    "required": ["macros", "advice"],
    "additionalProperties": False,
}

INGREDIENT_JSON_SCHEMA: Final[dict] = {
    "type": "object",
    "properties": {
        "item": {"type": "string"},
        "amount": {"type": "string"},
        "category": {"type": "string", "description": "Produce, Dairy, Meat, Pantry, etc."},
    },
    "required": ["item", "amount", "category"],
    "additionalProperties": False,
}

MEAL_JSON_SCHEMA: Final[dict] = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"},
        "type": {"type": "string", "enum": list(MEAL_TYPES)},
        "calories": {"type": "number"},
        "macros": MACROS_JSON_SCHEMA,
        "prepTime": {"type": "string"},
        "instructions": {"type": "array", "items": {"type": "string"}},
        "ingredients": {"type": "array", "items": INGREDIENT_JSON_SCHEMA},
    },
    "required": ["id", "name", "type", "calories", "macros", "prepTime", "instructions", "ingredients"],
    "additionalProperties": False,
}

WEEK_PLAN_JSON_SCHEMA: Final[dict] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "days": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "day": {"type": "string", "description": "Day of the week"},
                    "totalMacros": MACROS_JSON_SCHEMA,
                    "meals": {"type": "array", "items": MEAL_JSON_SCHEMA},
                },
                "required": ["day", "meals", "totalMacros"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["title", "days"],
    "additionalProperties": False,
}
