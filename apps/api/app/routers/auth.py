from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.auth import Identity, require_identity
from app.core.db import get_db
from app.models.entities import Family, FamilyMember
from app.schemas.families import MembershipSummary, MeResponse

router = APIRouter(prefix="/v1", tags=["auth"])


@router.get("/me", response_model=MeResponse)
def get_me(
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db),
):
    """Returns the authenticated caller and every family membership they hold."""
    memberships = db.execute(
        select(FamilyMember, Family)
        .join(Family, Family.id == FamilyMember.family_id)
        .where(FamilyMember.email == identity.email)
        .order_by(FamilyMember.joined_at.asc(), Family.id.asc())
    ).all()

    return MeResponse(
        email=identity.email,
        name=identity.display_name,
        memberships=[
            MembershipSummary(
                family_id=family.id,
                family_name=family.family_name,
                member_id=str(member.id),
                is_admin=member.is_admin,
            )
            for member, family in memberships
        ],
    )
