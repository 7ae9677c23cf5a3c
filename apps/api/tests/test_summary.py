from datetime import date, datetime, timedelta, timezone

from sqlalchemy import select

from app.models.entities import Expense, Family, FamilyMember
from app.services.summary import family_summary


def _seed(client, headers, family_id):
    client.post("/v1/expenses", json={"familyId": family_id, "amount": 10, "category": "Food"}, headers=headers)
    client.post("/v1/expenses", json={"familyId": family_id, "amount": 5.5}, headers=headers)
    client.post("/v1/savings", json={"familyId": family_id, "amount": 100}, headers=headers)
    client.post("/v1/currents", json={"familyId": family_id, "amount": 200, "type": "credit"}, headers=headers)
    client.post("/v1/currents", json={"familyId": family_id, "amount": 50.25, "type": "debit"}, headers=headers)
    client.post(
        "/v1/debts", json={"familyId": family_id, "amount": 30, "dueDate": "2000-01-01"}, headers=headers
    )
    client.post("/v1/debts", json={"familyId": family_id, "amount": 20, "status": "paid"}, headers=headers)
    client.post("/v1/debts", json={"familyId": family_id, "amount": 15, "status": "overdue"}, headers=headers)


def test_family_summary_totals(client, auth_headers, make_family):
    family_id = make_family()
    headers = auth_headers("alice@x.com")
    _seed(client, headers, family_id)

    response = client.get(f"/v1/summary?familyId={family_id}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {
        "familyId": family_id,
        "totalExpenses": 15.5,
        "totalSavings": 100.0,
        "totalCredits": 200.0,
        "totalDebits": 50.25,
        "currentBalance": 149.75,
        "outstandingDebts": 45.0,
        "activeDebtCount": 2,
        "overdueDebtCount": 2,
        "recentExpenses": 15.5,
        "expensesByCategory": {"Food": 10.0, "Uncategorized": 5.5},
    }


def test_recent_expenses_window(client, db_session, auth_headers, make_family):
    family_id = make_family()
    headers = auth_headers("alice@x.com")
    _seed(client, headers, family_id)

    later = family_summary(db_session, family_id, today=date(2999, 1, 1), now=datetime(2999, 1, 1))
    assert later["recent_expenses"] == 0
    assert later["total_expenses"] == 15.5


def test_summary_is_gated(client, auth_headers, make_family):
    family_id = make_family()
    response = client.get(f"/v1/summary?familyId={family_id}", headers=auth_headers("mallory@x.com"))
    assert response.status_code == 403


def test_timestamps_are_naive_utc_and_required(client, db_session, auth_headers, make_family):
    family_id = make_family()
    client.post("/v1/expenses", json={"familyId": family_id, "amount": 10}, headers=auth_headers("alice@x.com"))

    created_at = db_session.execute(select(Expense.created_at)).scalar_one()
    utc_now = datetime.now(timezone.utc).replace(tzinfo=None)
    assert created_at.tzinfo is None
    assert abs(utc_now - created_at) < timedelta(minutes=5)
    assert family_summary(db_session, family_id)["recent_expenses"] == 10

    for column in (Expense.created_at, Family.created_at, FamilyMember.joined_at):
        assert column.property.columns[0].nullable is False
