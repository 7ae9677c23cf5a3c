from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.core.auth import Identity, require_identity
from app.core.db import get_db
from app.models.entities import Debt
from app.routers.resources import build_resource_router
from app.schemas.ledger import DebtCreate, DebtResponse, DebtStatusUpdate
from app.services.access import require_family_member
from app.services.debts import apply_status
from app.services.resources import Resource, get_row

debts = Resource(
    model=Debt,
    create_schema=DebtCreate,
    response_schema=DebtResponse,
    item_key="debt",
    label="Debt",
    filters=(("status", "status"),),
)

router = build_resource_router(debts, prefix="/v1/debts", tag="debts")


@router.patch("")
def update_debt_status(
    payload: DebtStatusUpdate,
    debt_id: int = Query(alias="id"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    debt = get_row(db, debts, debt_id)
    require_family_member(db, debt.family_id, identity.email)
    apply_status(debt, payload.status)
    db.commit()
    db.refresh(debt)
    return {"success": True, "debt": DebtResponse.model_validate(debt).model_dump(by_alias=True, mode="json")}
