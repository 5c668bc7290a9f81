import re
import json
import time
import logging
from json import JSONDecodeError
from typing import NamedTuple, Optional

from openai import OpenAI, OpenAIError
from pydantic import ValidationError
from fastapi import APIRouter, Depends, HTTPException

from nutriplan.api.session import get_session, require_profile
from nutriplan.domain.Macros import Macros
from nutriplan.domain.UserProfile import UserProfile
from nutriplan.domain.WeekPlan import WeekPlan
from nutriplan.infra.Session_Repository import Session
from nutriplan.utilities.config import (
    OPENAI_MODEL, GENERATED_LANGUAGE, MISSING_API_KEY_WARNING, get_api_key
)
from nutriplan.utilities.constants import (
    DEFAULT_TARGET_CALORIES, MACROS_PROMPT_TEMPLATE, PLAN_PROMPT_TEMPLATE,
    MACROS_RESPONSE_JSON_SCHEMA, WEEK_PLAN_JSON_SCHEMA
)
from nutriplan.utilities.validators import (
    MacroCalculationResponse, UserProfileInput, WeekPlanSchema
)

logger = logging.getLogger(__name__)


# === Errors ===
class AIServiceError(Exception):
    """The provider could not produce a usable answer (network, API or format)."""


class AIConfigurationError(AIServiceError):
    """No API key is configured."""


class AIResponseError(AIServiceError):
    """The answer was empty, not JSON, or did not match the schema."""


class MacroResult(NamedTuple):
    macros: Macros
    advice: str


# === Helper: Get OpenAI Client ===
def _get_openai_client():
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    api_key = get_api_key()
    if not api_key:
        return None
    return OpenAI(api_key=api_key)


def _require_client():
    client = _get_openai_client()
    if client is None:
        logger.warning("OPENAI_API_KEY not set; cannot call the AI provider.")
        raise AIConfigurationError(MISSING_API_KEY_WARNING)
    return client


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _request_json(client, prompt: str, schema_name: str, schema: dict) -> dict:
    """Single structured-output call; any failure becomes an AIServiceError."""
    try:
        response = client.responses.create(
            model=OPENAI_MODEL,
            input=prompt,
            text={
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "schema": schema,
                    "strict": True,
                }
            },
        )
    except OpenAIError as e:
        raise AIServiceError(f"AI provider request failed: {e}") from e

    raw = (response.output_text or "").strip()
    if not raw:
        raise AIResponseError("AI returned an empty response")

    try:
        return json.loads(_strip_code_fences(raw))
    except JSONDecodeError as e:
        raise AIResponseError(f"AI output is not valid JSON: {e}") from e


# === Prompts ===
def build_macros_prompt(profile: UserProfile) -> str:
    return MACROS_PROMPT_TEMPLATE.format(
        age=profile.age,
        weight=profile.weight,
        height=profile.height,
        gender=profile.gender,
        activity_level=profile.activity_level,
        goal=profile.goal,
        restrictions=profile.dietary_restrictions or "None",
        language=GENERATED_LANGUAGE,
    )


def build_plan_prompt(profile: UserProfile) -> str:
    macros = profile.calculated_macros
    return PLAN_PROMPT_TEMPLATE.format(
        calories=(macros.calories if macros and macros.calories else DEFAULT_TARGET_CALORIES),
        goal=profile.goal,
        restrictions=profile.dietary_restrictions or "None",
        language=GENERATED_LANGUAGE,
    )


# === Provider calls ===
def calculate_user_macros(profile: UserProfile) -> MacroResult:
    """Ask the provider for daily macro targets plus a short piece of advice."""
    client = _require_client()
    data = _request_json(client, build_macros_prompt(profile), "user_macros", MACROS_RESPONSE_JSON_SCHEMA)
    try:
        parsed = MacroCalculationResponse.model_validate(data)
    except ValidationError as e:
        raise AIResponseError(f"Macro response does not match the schema: {e}") from e
    return MacroResult(Macros.from_dict(parsed.macros.model_dump()), parsed.advice)


def generate_weekly_plan(profile: UserProfile, plan_id: Optional[str] = None) -> WeekPlan:
    """Ask the provider for a 7-day plan; the plan id defaults to the current time in ms."""
    client = _require_client()
    data = _request_json(client, build_plan_prompt(profile), "week_plan", WEEK_PLAN_JSON_SCHEMA)
    try:
        parsed = WeekPlanSchema.model_validate(data)
    except ValidationError as e:
        raise AIResponseError(f"Meal plan does not match the schema: {e}") from e
    plan_dict = parsed.model_dump(by_alias=True)
    plan_dict["id"] = plan_id or str(int(time.time() * 1000))
    return WeekPlan.from_dict(plan_dict)


# === FastAPI Endpoints ===
router = APIRouter()


@router.post("/api/profile")
def submit_profile(payload: UserProfileInput, session: Session = Depends(get_session)):
    profile = UserProfile.from_dict(payload.model_dump(by_alias=True))
    try:
        result = calculate_user_macros(profile)
    except AIConfigurationError:
        raise HTTPException(status_code=503, detail=MISSING_API_KEY_WARNING)
    except AIServiceError:
        logger.exception("Error calculating macros")
        raise HTTPException(status_code=502, detail="Could not calculate macros. Check your API key and try again.")

    session.profile = profile.with_macros(result.macros)
    session.advice = result.advice
    session.view = "DASHBOARD"
    return {"profile": session.profile.to_dict(), "advice": session.advice, "view": session.view}


@router.post("/api/plan/generate")
def generate_plan(session: Session = Depends(get_session)):
    profile = require_profile(session)
    if not session.start_generation():
        raise HTTPException(status_code=409, detail="A meal plan is already being generated")
    try:
        plan = generate_weekly_plan(profile)
    except AIConfigurationError:
        raise HTTPException(status_code=503, detail=MISSING_API_KEY_WARNING)
    except AIServiceError:
        logger.exception("Error generating meal plan")
        raise HTTPException(status_code=502, detail="Could not generate the meal plan. Please try again.")
    finally:
        session.finish_generation()

    session.set_plan(plan)
    session.view = "MEAL_PLAN"
    logger.info("Generated plan %s with %d days", plan.id, len(plan.days))
    return {"plan": plan.to_dict(), "view": session.view}
