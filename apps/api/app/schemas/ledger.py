from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import Field, StringConstraints, field_validator, model_validator

from app.models.entities import CurrentTypeEnum, DebtStatusEnum, SectionTypeEnum
from app.schemas.common import ApiModel, decimal_to_float, id_to_str
from app.services.debts import is_overdue

Amount = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
ShortText = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]
SectionName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class EntryCreate(ApiModel):
    amount: Amount
    description: str | None = None
    added_by: ShortText | None = None

    @field_validator("description", "added_by", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Any:
        return _blank_to_none(value)


class FamilyEntryCreate(EntryCreate):
    family_id: int


class ExpenseCreate(FamilyEntryCreate):
    category: ShortText | None = None

    @field_validator("category", mode="before")
    @classmethod
    def _optional_category(cls, value: Any) -> Any:
        return _blank_to_none(value)


class SavingCreate(FamilyEntryCreate):
    goal: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)

    @field_validator("goal", mode="before")
    @classmethod
    def _optional_goal(cls, value: Any) -> Any:
        return _blank_to_none(value)


class CurrentCreate(FamilyEntryCreate):
    type: CurrentTypeEnum


class DebtCreate(FamilyEntryCreate):
    creditor: ShortText | None = None
    due_date: date | None = None
    status: DebtStatusEnum = DebtStatusEnum.pending.value

    @field_validator("creditor", "due_date", mode="before")
    @classmethod
    def _optional_fields(cls, value: Any) -> Any:
        return _blank_to_none(value)


class DebtStatusUpdate(ApiModel):
    status: DebtStatusEnum


class CustomSectionCreate(ApiModel):
    family_id: int
    name: SectionName
    type: SectionTypeEnum


class SectionTransactionCreate(EntryCreate):
    section_id: int


class EntryResponse(ApiModel):
    id: str
    amount: float
    description: str | None = None
    added_by: str | None = None
    created_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> Any:
        return id_to_str(value)

    @field_validator("amount", mode="before")
    @classmethod
    def _amount(cls, value: Any) -> Any:
        return decimal_to_float(value)


class ExpenseResponse(EntryResponse):
    category: str | None = None


class SavingResponse(EntryResponse):
    goal: float | None = None

    @field_validator("goal", mode="before")
    @classmethod
    def _goal(cls, value: Any) -> Any:
        return decimal_to_float(value)


class CurrentResponse(EntryResponse):
    type: str


class DebtResponse(EntryResponse):
    creditor: str | None = None
    due_date: date | None = None
    status: str
    is_overdue: bool = False

    @model_validator(mode="after")
    def _derive_overdue(self) -> "DebtResponse":
        self.is_overdue = is_overdue(self.status, self.due_date)
        return self


class SectionTransactionResponse(EntryResponse):
    section_id: str

    @field_validator("section_id", mode="before")
    @classmethod
    def _section_id(cls, value: Any) -> Any:
        return id_to_str(value)


class CustomSectionResponse(ApiModel):
    id: str
    name: str
    type: str
    family_id: int
    transactions: list[SectionTransactionResponse] = Field(default_factory=list)
    transaction_count: int = 0
    total: float = 0.0
    created_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> Any:
        return id_to_str(value)

    @model_validator(mode="after")
    def _totals(self) -> "CustomSectionResponse":
        self.transaction_count = len(self.transactions)
        self.total = round(sum(item.amount for item in self.transactions), 2)
        return self
