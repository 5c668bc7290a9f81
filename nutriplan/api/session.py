"""Request-scoped access to the caller's in-memory session."""
from fastapi import HTTPException, Request, Response

from nutriplan.domain.UserProfile import UserProfile
from nutriplan.domain.WeekPlan import WeekPlan
from nutriplan.infra.Session_Repository import SESSIONS, Session
from nutriplan.utilities.config import SESSION_COOKIE


def get_session(request: Request, response: Response) -> Session:
    """FastAPI dependency: the caller's session, created (and cookied) on first use."""
    session, created = SESSIONS.get_or_create(request.cookies.get(SESSION_COOKIE))
    if created:
        response.set_cookie(SESSION_COOKIE, session.id, httponly=True, samesite="lax")
    return session


def require_profile(session: Session) -> UserProfile:
    if session.profile is None:
        raise HTTPException(status_code=409, detail="Profile not configured")
    return session.profile


def require_plan(session: Session) -> WeekPlan:
    if session.plan is None:
        raise HTTPException(status_code=404, detail="No meal plan generated yet")
    return session.plan
