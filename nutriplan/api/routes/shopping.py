from fastapi import APIRouter, Depends, HTTPException, Response

from nutriplan.api.session import get_session, require_plan
from nutriplan.domain.ShoppingList import checklist_key
from nutriplan.infra.Session_Repository import Session
from nutriplan.infra.pdf_utils import generate_pdf_for_shopping_list
from nutriplan.logic.shopping.list_builder import build_shopping_list, consolidate
from nutriplan.utilities.validators import ShoppingToggleInput

router = APIRouter()


# -------------------- API: Shopping List (JSON) --------------------
@router.get('/api/shopping-list')
@router.get('/api/shopping-list/')
def api_shopping_list(session: Session = Depends(get_session)):
    plan = require_plan(session)
    return build_shopping_list(plan, session.checklist)


@router.post('/api/shopping-list/toggle')
def toggle_item(payload: ShoppingToggleInput, session: Session = Depends(get_session)):
    plan = require_plan(session)
    # Only lines of the current plan can be ticked
    if payload.item not in consolidate(plan).get(payload.category, {}):
        raise HTTPException(status_code=404, detail="Item not on the shopping list")
    checked = session.toggle_item(payload.category, payload.item)
    summary = build_shopping_list(plan, session.checklist)
    return {
        "id": checklist_key(payload.category, payload.item),
        "checked": checked,
        "checked_count": summary["checked_count"],
        "total_items": summary["total_items"],
        "progress": summary["progress"],
    }


@router.post('/api/shopping-list/reset')
def reset_checklist(session: Session = Depends(get_session)):
    session.reset_checklist()
    return {"checked_count": 0, "progress": 0.0}


@router.get('/export_shopping_pdf')
def export_shopping_pdf(session: Session = Depends(get_session)):
    plan = require_plan(session)
    pdf_bytes = generate_pdf_for_shopping_list(plan, build_shopping_list(plan, session.checklist))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=shopping_list_{plan.id}.pdf"
        },
    )
