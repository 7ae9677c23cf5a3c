from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.auth import Identity, require_identity
from app.core.db import get_db
from app.schemas.common import SuccessResponse
from app.schemas.families import CategoryCreate
from app.services.access import require_family_member
from app.services.families import ensure_category, list_category_names

router = APIRouter(prefix="/v1/categories", tags=["categories"], dependencies=[Depends(require_identity)])


@router.get("", response_model=list[str])
def list_categories(
    family_id: int = Query(alias="familyId"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    require_family_member(db, family_id, identity.email)
    return list_category_names(db, family_id)


@router.post("", response_model=SuccessResponse)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    require_family_member(db, payload.family_id, identity.email)
    ensure_category(db, payload.family_id, payload.name)
    return SuccessResponse()
