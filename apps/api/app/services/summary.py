from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session

from app.models.entities import Current, CurrentTypeEnum, Debt, DebtStatusEnum, Expense, Saving

RECENT_DAYS = 30
UNCATEGORIZED = "Uncategorized"


def _money(value: Any) -> float:
    return round(float(Decimal(str(value or 0))), 2)


def _sum(db: Session, column, *criteria) -> float:
    return _money(db.execute(select(func.coalesce(func.sum(column), 0)).where(*criteria)).scalar_one())


def family_summary(db: Session, family_id: int, today: date | None = None, now: datetime | None = None) -> dict:
    """
    Dashboard totals for one family.

    Credits add to the current-account balance and debits subtract from it.
    Outstanding debts are those still pending or marked overdue; overdue count
    also includes pending debts whose due date has passed.
    """
    today = today or date.today()
    now = now or datetime.now(timezone.utc).replace(tzinfo=None)
    open_statuses = (DebtStatusEnum.pending.value, DebtStatusEnum.overdue.value)

    credits = _sum(db, Current.amount, Current.family_id == family_id, Current.type == CurrentTypeEnum.credit.value)
    debits = _sum(db, Current.amount, Current.family_id == family_id, Current.type == CurrentTypeEnum.debit.value)

    active_debt_count = db.execute(
        select(func.count(Debt.id)).where(Debt.family_id == family_id, Debt.status.in_(open_statuses))
    ).scalar_one()
    overdue_debt_count = db.execute(
        select(func.count(Debt.id)).where(
            Debt.family_id == family_id,
            or_(
                Debt.status == DebtStatusEnum.overdue.value,
                and_(Debt.status == DebtStatusEnum.pending.value, Debt.due_date < today),
            ),
        )
    ).scalar_one()

    by_category: dict[str, float] = {}
    rows = db.execute(
        select(Expense.category, func.sum(Expense.amount))
        .where(Expense.family_id == family_id)
        .group_by(Expense.category)
    ).all()
    for category, total in rows:
        key = category or UNCATEGORIZED
        by_category[key] = round(by_category.get(key, 0.0) + _money(total), 2)

    return {
        "family_id": family_id,
        "total_expenses": _sum(db, Expense.amount, Expense.family_id == family_id),
        "total_savings": _sum(db, Saving.amount, Saving.family_id == family_id),
        "total_credits": credits,
        "total_debits": debits,
        "current_balance": round(credits - debits, 2),
        "outstanding_debts": _sum(db, Debt.amount, Debt.family_id == family_id, Debt.status.in_(open_statuses)),
        "active_debt_count": active_debt_count,
        "overdue_debt_count": overdue_debt_count,
        "recent_expenses": _sum(
            db,
            Expense.amount,
            Expense.family_id == family_id,
            Expense.created_at >= now - timedelta(days=RECENT_DAYS),
        ),
        "expenses_by_category": by_category,
    }
