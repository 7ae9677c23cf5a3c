from __future__ import annotations

import logging

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.entities import Category, Family, FamilyMember

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Bills & Utilities",
    "Entertainment",
    "Healthcare",
    "Education",
    "Other",
)


def create_family(db: Session, family_name: str, member_name: str, email: str) -> Family:
    """Create the family and its founding member, who is always the admin."""
    family = Family(family_name=family_name)
    db.add(family)
    db.flush()
    db.add(
        FamilyMember(
            family_id=family.id,
            email=email.strip().lower(),
            name=member_name,
            is_admin=True,
        )
    )
    db.commit()
    db.refresh(family)
    logger.info("created family %s for %s", family.id, email)
    return family


def seed_default_categories(db: Session, family_id: int) -> None:
    existing = set(db.execute(select(Category.name).where(Category.family_id == family_id)).scalars().all())
    for name in DEFAULT_CATEGORIES:
        if name not in existing:
            db.add(Category(family_id=family_id, name=name))
    db.commit()


def find_family_for_email(db: Session, email: str) -> Family | None:
    # Emails are unique per family, not globally; the earliest membership wins.
    return db.execute(
        select(Family)
        .join(FamilyMember, FamilyMember.family_id == Family.id)
        .where(FamilyMember.email == email.strip().lower())
        .order_by(FamilyMember.joined_at.asc(), FamilyMember.id.asc())
        .limit(1)
    ).scalar_one_or_none()


def add_member(db: Session, family_id: int, email: str, name: str) -> FamilyMember:
    email = email.strip().lower()
    existing = db.execute(
        select(FamilyMember.id).where(FamilyMember.family_id == family_id, FamilyMember.email == email)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=400, detail="Member already exists")

    member = FamilyMember(family_id=family_id, email=email, name=name, is_admin=False)
    db.add(member)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Member already exists") from None
    db.refresh(member)
    return member


def list_category_names(db: Session, family_id: int) -> list[str]:
    return list(
        db.execute(select(Category.name).where(Category.family_id == family_id).order_by(Category.name.asc()))
        .scalars()
        .all()
    )


def ensure_category(db: Session, family_id: int, name: str) -> None:
    """Insert the category unless the family already has one with that name."""
    exists = db.execute(
        select(Category.id).where(Category.family_id == family_id, Category.name == name)
    ).first()
    if exists is not None:
        return
    db.add(Category(family_id=family_id, name=name))
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same name.
        db.rollback()
