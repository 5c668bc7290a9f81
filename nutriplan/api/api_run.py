from fastapi import FastAPI, Depends, HTTPException
import logging

from nutriplan.api.session import get_session, require_profile
from nutriplan.infra.Session_Repository import Session
from nutriplan.logic.reporting.nutrition import build_dashboard
from nutriplan.utilities.config import MISSING_API_KEY_WARNING, api_key_configured
from nutriplan.utilities.constants import DEFAULT_PROFILE
from nutriplan.utilities.validators import ViewChangeInput

# Routers
from nutriplan.api.routes import plan, shopping
from nutriplan.api.api_ai import router as ai_router

# Logging
logger = logging.getLogger("nutriplan_app")

# Initialize FastAPI app
app = FastAPI(title="NutriPlan API")

# Include routers
app.include_router(ai_router)
app.include_router(plan.router)
app.include_router(shopping.router)


@app.on_event("startup")
def _startup_config_check():
    """Warn once at startup when the AI provider cannot be reached for lack of a key."""
    if not api_key_configured():
        logger.warning(MISSING_API_KEY_WARNING)


def _config_warning():
    return None if api_key_configured() else MISSING_API_KEY_WARNING


# -------------------- Session / view state --------------------
@app.get("/api/session")
def session_state(session: Session = Depends(get_session)):
    return {
        "view": session.view,
        "theme": session.theme,
        "has_profile": session.profile is not None,
        "has_plan": session.plan is not None,
        "is_generating": session.is_generating,
        "selected_day": session.selected_day,
        "api_key_configured": api_key_configured(),
        "warning": _config_warning(),
    }


@app.post("/api/view")
def change_view(payload: ViewChangeInput, session: Session = Depends(get_session)):
    # Every view but the profile form needs a profile first
    if payload.view != "SETUP" and session.profile is None:
        raise HTTPException(status_code=409, detail="Profile not configured")
    session.view = payload.view
    return {"view": session.view}


@app.post("/api/theme/toggle")
def toggle_theme(session: Session = Depends(get_session)):
    return {"theme": session.toggle_theme()}


# -------------------- Profile / dashboard --------------------
@app.get("/api/profile")
def get_profile(session: Session = Depends(get_session)):
    """Current profile, or the form defaults when none has been submitted."""
    if session.profile is None:
        return {"profile": dict(DEFAULT_PROFILE, calculatedMacros=None), "advice": "", "is_default": True}
    return {"profile": session.profile.to_dict(), "advice": session.advice, "is_default": False}


@app.get("/api/dashboard")
def dashboard(session: Session = Depends(get_session)):
    profile = require_profile(session)
    data = build_dashboard(profile, session.plan, session.advice, session.is_generating)
    data["warning"] = _config_warning()
    return data
