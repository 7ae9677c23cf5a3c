from app.models.entities import Current
from app.routers.resources import build_resource_router
from app.schemas.ledger import CurrentCreate, CurrentResponse
from app.services.resources import Resource

currents = Resource(
    model=Current,
    create_schema=CurrentCreate,
    response_schema=CurrentResponse,
    item_key="current",
    label="Current",
    filters=(("type", "type"),),
)

router = build_resource_router(currents, prefix="/v1/currents", tag="currents")
