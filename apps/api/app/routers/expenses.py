from app.models.entities import Expense
from app.routers.resources import build_resource_router
from app.schemas.ledger import ExpenseCreate, ExpenseResponse
from app.services.resources import Resource

expenses = Resource(
    model=Expense,
    create_schema=ExpenseCreate,
    response_schema=ExpenseResponse,
    item_key="expense",
    label="Expense",
    filters=(("category", "category"),),
)

router = build_resource_router(expenses, prefix="/v1/expenses", tag="expenses")
