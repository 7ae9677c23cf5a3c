from pydantic import Field

from app.schemas.common import ApiModel


class FamilySummaryResponse(ApiModel):
    family_id: int
    total_expenses: float
    total_savings: float
    total_credits: float
    total_debits: float
    current_balance: float
    outstanding_debts: float
    active_debt_count: int
    overdue_debt_count: int
    recent_expenses: float
    expenses_by_category: dict[str, float] = Field(default_factory=dict)
