from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.auth import Identity, require_identity
from app.core.db import get_db
from app.schemas.summary import FamilySummaryResponse
from app.services.access import require_family_member
from app.services.summary import family_summary

router = APIRouter(prefix="/v1/summary", tags=["summary"], dependencies=[Depends(require_identity)])


@router.get("", response_model=FamilySummaryResponse)
def get_family_summary(
    family_id: int = Query(alias="familyId"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    require_family_member(db, family_id, identity.email)
    return FamilySummaryResponse(**family_summary(db, family_id))
