from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base


def _utcnow() -> datetime:
    # Timestamp columns hold naive UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CurrentTypeEnum(str, Enum):
    credit = "credit"
    debit = "debit"


class DebtStatusEnum(str, Enum):
    pending = "pending"
    paid = "paid"
    overdue = "overdue"


class SectionTypeEnum(str, Enum):
    expense = "expense"
    saving = "saving"


class Family(Base):
    __tablename__ = "families"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    family_name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    members: Mapped[list["FamilyMember"]] = relationship(
        back_populates="family", cascade="all, delete-orphan", order_by="FamilyMember.id"
    )
    categories: Mapped[list["Category"]] = relationship(cascade="all, delete-orphan")
    expenses: Mapped[list["Expense"]] = relationship(cascade="all, delete-orphan")
    savings: Mapped[list["Saving"]] = relationship(cascade="all, delete-orphan")
    currents: Mapped[list["Current"]] = relationship(cascade="all, delete-orphan")
    debts: Mapped[list["Debt"]] = relationship(cascade="all, delete-orphan")
    custom_sections: Mapped[list["CustomSection"]] = relationship(cascade="all, delete-orphan")


class FamilyMember(Base):
    __tablename__ = "family_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    family_id: Mapped[int] = mapped_column(ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    joined_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    family: Mapped[Family] = relationship(back_populates="members")

    __table_args__ = (UniqueConstraint("family_id", "email", name="uq_family_members_family_email"),)


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    family_id: Mapped[int] = mapped_column(ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (UniqueConstraint("family_id", "name", name="uq_categories_family_name"),)


class Expense(Base):
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    family_id: Mapped[int] = mapped_column(ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    category: Mapped[str | None] = mapped_column(String(255))
    added_by: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)


class Saving(Base):
    __tablename__ = "savings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    family_id: Mapped[int] = mapped_column(ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    goal: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    added_by: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)


class Current(Base):
    __tablename__ = "currents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    family_id: Mapped[int] = mapped_column(ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    added_by: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    __table_args__ = (CheckConstraint("type IN ('credit', 'debit')", name="ck_currents_type"),)


class Debt(Base):
    __tablename__ = "debts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    family_id: Mapped[int] = mapped_column(ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    creditor: Mapped[str | None] = mapped_column(String(255))
    due_date: Mapped[date | None] = mapped_column(Date)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=DebtStatusEnum.pending.value)
    added_by: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    __table_args__ = (CheckConstraint("status IN ('pending', 'paid', 'overdue')", name="ck_debts_status"),)


class CustomSection(Base):
    __tablename__ = "custom_sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    family_id: Mapped[int] = mapped_column(ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    transactions: Mapped[list["CustomSectionTransaction"]] = relationship(
        back_populates="section",
        cascade="all, delete-orphan",
        order_by=lambda: [CustomSectionTransaction.created_at.desc(), CustomSectionTransaction.id.desc()],
    )

    __table_args__ = (CheckConstraint("type IN ('expense', 'saving')", name="ck_custom_sections_type"),)


class CustomSectionTransaction(Base):
    __tablename__ = "custom_section_transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    section_id: Mapped[int] = mapped_column(ForeignKey("custom_sections.id", ondelete="CASCADE"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    added_by: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)

    section: Mapped[CustomSection] = relationship(back_populates="transactions")


Index("ix_family_members_family_id", FamilyMember.family_id)
Index("ix_expenses_family_created", Expense.family_id, Expense.created_at)
Index("ix_savings_family_created", Saving.family_id, Saving.created_at)
Index("ix_currents_family_created", Current.family_id, Current.created_at)
Index("ix_debts_family_created", Debt.family_id, Debt.created_at)
Index("ix_custom_sections_family_id", CustomSection.family_id)
Index("ix_custom_section_transactions_section_id", CustomSectionTransaction.section_id)
