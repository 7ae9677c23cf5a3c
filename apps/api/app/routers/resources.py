from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.core.auth import Identity, require_identity
from app.core.db import get_db
from app.services.resources import Resource, create_row, delete_row, get_row, list_rows


def build_resource_router(resource: Resource, prefix: str, tag: str) -> APIRouter:
    """
    List / create / delete endpoints for one family-owned (or section-owned) resource.

    Authentication is a router dependency so it runs before any query or body
    validation. Every handler then checks membership of the owning family
    before its statement executes.
    """
    router = APIRouter(prefix=prefix, tags=[tag], dependencies=[Depends(require_identity)])
    scope = resource.scope

    @router.get("", response_model=list[resource.response_schema])
    def list_items(
        request: Request,
        owner_id: int = Query(alias=scope.param),
        db: Session = Depends(get_db),
        identity: Identity = Depends(require_identity),
    ):
        scope.authorize(db, owner_id, identity.email)
        filters = {attr: request.query_params.get(param) for param, attr in resource.filters}
        rows = list_rows(db, resource, owner_id, filters)
        return [resource.response_schema.model_validate(row) for row in rows]

    @router.post("", status_code=201)
    def create_item(
        payload: resource.create_schema,
        db: Session = Depends(get_db),
        identity: Identity = Depends(require_identity),
    ):
        scope.authorize(db, getattr(payload, scope.field), identity.email)
        row = create_row(db, resource, payload)
        item = resource.response_schema.model_validate(row)
        return {"success": True, resource.item_key: item.model_dump(by_alias=True, mode="json")}

    @router.delete("")
    def delete_item(
        item_id: int = Query(alias="id"),
        db: Session = Depends(get_db),
        identity: Identity = Depends(require_identity),
    ):
        row = get_row(db, resource, item_id)
        scope.authorize(db, getattr(row, scope.field), identity.email)
        delete_row(db, row)
        return {"success": True}

    return router
