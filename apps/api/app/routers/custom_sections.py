from sqlalchemy.orm import selectinload

from app.models.entities import CustomSection, CustomSectionTransaction
from app.routers.resources import build_resource_router
from app.schemas.ledger import (
    CustomSectionCreate,
    CustomSectionResponse,
    SectionTransactionCreate,
    SectionTransactionResponse,
)
from app.services.resources import SECTION_SCOPE, Resource

custom_sections = Resource(
    model=CustomSection,
    create_schema=CustomSectionCreate,
    response_schema=CustomSectionResponse,
    item_key="section",
    label="Section",
    load_options=(selectinload(CustomSection.transactions),),
)

section_transactions = Resource(
    model=CustomSectionTransaction,
    create_schema=SectionTransactionCreate,
    response_schema=SectionTransactionResponse,
    item_key="transaction",
    label="Transaction",
    scope=SECTION_SCOPE,
)

router = build_resource_router(custom_sections, prefix="/v1/custom-sections", tag="custom-sections")
transactions_router = build_resource_router(
    section_transactions, prefix="/v1/custom-sections/transactions", tag="custom-sections"
)
