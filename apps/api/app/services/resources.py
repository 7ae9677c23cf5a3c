from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.services.access import Membership, authorize_by_section, require_family_member

# List filter values that mean "no filter" in the web client.
_UNFILTERED = frozenset({"", "All"})


@dataclass(frozen=True)
class OwnerScope:
    """How a resource hangs off a family: directly, or through a custom section."""

    param: str
    field: str
    # (db, owner id, email) -> Membership; raises 403 (and 404 for a missing section).
    authorize: Callable[[Session, int, str], Membership]


FAMILY_SCOPE = OwnerScope(param="familyId", field="family_id", authorize=require_family_member)

SECTION_SCOPE = OwnerScope(param="sectionId", field="section_id", authorize=authorize_by_section)


@dataclass(frozen=True)
class Resource:
    model: type
    create_schema: type[BaseModel]
    response_schema: type[BaseModel]
    item_key: str
    label: str
    scope: OwnerScope = FAMILY_SCOPE
    # (query param, model attribute) pairs accepted as equality filters on list.
    filters: tuple[tuple[str, str], ...] = ()
    load_options: tuple[Any, ...] = ()


def list_rows(db: Session, resource: Resource, owner_id: int, filters: dict[str, str | None] | None = None) -> list[Any]:
    model = resource.model
    query = select(model).where(getattr(model, resource.scope.field) == owner_id)
    for attr, value in (filters or {}).items():
        if value is None or value in _UNFILTERED:
            continue
        query = query.where(getattr(model, attr) == value)
    if resource.load_options:
        query = query.options(*resource.load_options)
    query = query.order_by(model.created_at.desc(), model.id.desc())
    return list(db.execute(query).scalars().all())


def create_row(db: Session, resource: Resource, payload: BaseModel) -> Any:
    row = resource.model(**payload.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def get_row(db: Session, resource: Resource, row_id: int) -> Any:
    row = db.get(resource.model, row_id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"{resource.label} not found")
    return row


def delete_row(db: Session, row: Any) -> None:
    db.delete(row)
    db.commit()
