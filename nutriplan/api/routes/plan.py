from fastapi import APIRouter, Depends, HTTPException, Response

from nutriplan.api.session import get_session, require_plan
from nutriplan.infra.Session_Repository import Session
from nutriplan.infra.pdf_utils import generate_pdf_for_week
from nutriplan.utilities.validators import DaySelectionInput

router = APIRouter()


def _day_or_404(session: Session, index: int):
    plan = require_plan(session)
    try:
        return plan.get_day(index)
    except IndexError:
        raise HTTPException(status_code=404, detail="Day not found")


@router.get("/api/plan")
def get_plan(session: Session = Depends(get_session)):
    plan = require_plan(session)
    return {
        "plan": plan.to_dict(),
        "selected_day": session.selected_day,
        "day_tabs": [day.day for day in plan.days],
    }


@router.get("/api/plan/days/{index}")
def get_plan_day(index: int, session: Session = Depends(get_session)):
    return _day_or_404(session, index).to_dict()


@router.post("/api/plan/select-day")
def select_day(payload: DaySelectionInput, session: Session = Depends(get_session)):
    day = _day_or_404(session, payload.index)
    session.selected_day = payload.index
    return {"selected_day": session.selected_day, "day": day.to_dict()}


@router.get("/export_pdf")
def export_pdf(session: Session = Depends(get_session)):
    plan = require_plan(session)
    pdf_bytes = generate_pdf_for_week(plan)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=meal_plan_{plan.id}.pdf"
        },
    )
