from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.entities import CustomSection, FamilyMember

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Membership:
    id: int
    email: str
    is_admin: bool


def get_member_by_email(db: Session, family_id: int, email: str) -> FamilyMember | None:
    return db.execute(
        select(FamilyMember).where(FamilyMember.family_id == family_id, FamilyMember.email == email.strip().lower())
    ).scalar_one_or_none()


def authorize_member(db: Session, family_id: int, email: str) -> Membership | None:
    member = get_member_by_email(db, family_id, email)
    if member is None:
        return None
    return Membership(id=member.id, email=member.email, is_admin=member.is_admin)


def authorize_admin(db: Session, family_id: int, email: str) -> Membership | None:
    membership = authorize_member(db, family_id, email)
    if membership is None or not membership.is_admin:
        return None
    return membership


def section_family_id(db: Session, section_id: int) -> int:
    family_id = db.execute(select(CustomSection.family_id).where(CustomSection.id == section_id)).scalar_one_or_none()
    if family_id is None:
        raise HTTPException(status_code=404, detail="Section not found")
    return family_id


def require_family_member(db: Session, family_id: int, email: str) -> Membership:
    membership = authorize_member(db, family_id, email)
    if membership is None:
        logger.info("denied %s: not a member of family %s", email, family_id)
        raise HTTPException(status_code=403, detail="Unauthorized. You are not a member of this family.")
    return membership


def require_family_admin(db: Session, family_id: int, email: str) -> Membership:
    membership = authorize_admin(db, family_id, email)
    if membership is None:
        logger.info("denied %s: not an admin of family %s", email, family_id)
        raise HTTPException(status_code=403, detail="Unauthorized. Only family admins can add members.")
    return membership


def authorize_by_section(db: Session, section_id: int, email: str) -> Membership:
    # A missing section is 404; an existing section in another family is 403.
    return require_family_member(db, section_family_id(db, section_id), email)
