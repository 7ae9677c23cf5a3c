from app.models.entities import Saving
from app.routers.resources import build_resource_router
from app.schemas.ledger import SavingCreate, SavingResponse
from app.services.resources import Resource

savings = Resource(
    model=Saving,
    create_schema=SavingCreate,
    response_schema=SavingResponse,
    item_key="saving",
    label="Saving",
)

router = build_resource_router(savings, prefix="/v1/savings", tag="savings")
