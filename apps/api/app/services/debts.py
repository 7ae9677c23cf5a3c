from __future__ import annotations

from datetime import date

from fastapi import HTTPException

from app.models.entities import Debt, DebtStatusEnum

_ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    DebtStatusEnum.pending.value: frozenset({DebtStatusEnum.paid.value, DebtStatusEnum.overdue.value}),
    DebtStatusEnum.overdue.value: frozenset({DebtStatusEnum.paid.value}),
    DebtStatusEnum.paid.value: frozenset(),
}


def is_overdue(status: str, due_date: date | None, today: date | None = None) -> bool:
    """Display-time overdue flag; never written back to the row."""
    if status == DebtStatusEnum.overdue.value:
        return True
    if status != DebtStatusEnum.pending.value or due_date is None:
        return False
    return due_date < (today or date.today())


def can_transition(current: str, target: str) -> bool:
    return target in _ALLOWED_TRANSITIONS.get(current, frozenset())


def apply_status(debt: Debt, target: str) -> Debt:
    if not can_transition(debt.status, target):
        raise HTTPException(status_code=400, detail=f"cannot change debt status from {debt.status} to {target}")
    debt.status = target
    return debt
