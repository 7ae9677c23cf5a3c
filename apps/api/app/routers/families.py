import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth import Identity, require_identity
from app.core.db import get_db
from app.schemas.families import (
    FamilyCreate,
    FamilyCreateResponse,
    FamilyMemberCreate,
    FamilyMemberCreateResponse,
    FamilyMemberResponse,
    FamilyResponse,
)
from app.services import families as family_service
from app.services.access import require_family_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/families", tags=["families"], dependencies=[Depends(require_identity)])


@router.get("", response_model=FamilyResponse)
def get_my_family(
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    """
    The caller's family with its members embedded.

    404 tells the client to show the "create a family" flow instead of the
    dashboard, so it is only returned when the caller has no membership.
    """
    family = family_service.find_family_for_email(db, identity.email)
    if family is None:
        raise HTTPException(status_code=404, detail="Family not found")
    return FamilyResponse.model_validate(family)


@router.post("", response_model=FamilyCreateResponse, status_code=201)
def create_family(
    payload: FamilyCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    family = family_service.create_family(db, payload.family_name, payload.member_name, identity.email)
    family_id = family.id
    # Best effort: the family and its admin stay even if seeding fails.
    try:
        family_service.seed_default_categories(db, family_id)
    except SQLAlchemyError:
        db.rollback()
        logger.warning("seeding default categories failed for family %s", family_id, exc_info=True)
    return FamilyCreateResponse(family_id=family_id)


@router.post("/members", response_model=FamilyMemberCreateResponse, status_code=201)
def add_family_member(
    payload: FamilyMemberCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_identity),
):
    require_family_admin(db, payload.family_id, identity.email)
    member = family_service.add_member(db, payload.family_id, str(payload.email), payload.name)
    return FamilyMemberCreateResponse(member=FamilyMemberResponse.model_validate(member))
