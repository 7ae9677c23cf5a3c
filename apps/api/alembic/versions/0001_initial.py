"""initial family finance schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

# Matches the naive UTC values the application writes.
_UTC_NOW = sa.text("timezone('utc', now())")


def _family_fk() -> sa.Column:
    return sa.Column(
        "family_id",
        sa.Integer(),
        sa.ForeignKey("families.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "families",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("family_name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=_UTC_NOW),
    )

    op.create_table(
        "family_members",
        sa.Column("id", sa.Integer(), primary_key=True),
        _family_fk(),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("joined_at", sa.DateTime(), nullable=False, server_default=_UTC_NOW),
        sa.UniqueConstraint("family_id", "email", name="uq_family_members_family_email"),
    )
    op.create_index("ix_family_members_family_id", "family_members", ["family_id"], unique=False)

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        _family_fk(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("family_id", "name", name="uq_categories_family_name"),
    )

    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer(), primary_key=True),
        _family_fk(),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(length=255), nullable=True),
        sa.Column("added_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=_UTC_NOW),
    )
    op.create_index("ix_expenses_family_created", "expenses", ["family_id", "created_at"], unique=False)

    op.create_table(
        "savings",
        sa.Column("id", sa.Integer(), primary_key=True),
        _family_fk(),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("goal", sa.Numeric(10, 2), nullable=True),
        sa.Column("added_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=_UTC_NOW),
    )
    op.create_index("ix_savings_family_created", "savings", ["family_id", "created_at"], unique=False)

    op.create_table(
        "currents",
        sa.Column("id", sa.Integer(), primary_key=True),
        _family_fk(),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=10), nullable=False),
        sa.Column("added_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=_UTC_NOW),
        sa.CheckConstraint("type IN ('credit', 'debit')", name="ck_currents_type"),
    )
    op.create_index("ix_currents_family_created", "currents", ["family_id", "created_at"], unique=False)

    op.create_table(
        "debts",
        sa.Column("id", sa.Integer(), primary_key=True),
        _family_fk(),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("creditor", sa.String(length=255), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="pending"),
        sa.Column("added_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=_UTC_NOW),
        sa.CheckConstraint("status IN ('pending', 'paid', 'overdue')", name="ck_debts_status"),
    )
    op.create_index("ix_debts_family_created", "debts", ["family_id", "created_at"], unique=False)

    op.create_table(
        "custom_sections",
        sa.Column("id", sa.Integer(), primary_key=True),
        _family_fk(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=10), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=_UTC_NOW),
        sa.CheckConstraint("type IN ('expense', 'saving')", name="ck_custom_sections_type"),
    )
    op.create_index("ix_custom_sections_family_id", "custom_sections", ["family_id"], unique=False)

    op.create_table(
        "custom_section_transactions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "section_id",
            sa.Integer(),
            sa.ForeignKey("custom_sections.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("added_by", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=_UTC_NOW),
    )
    op.create_index(
        "ix_custom_section_transactions_section_id",
        "custom_section_transactions",
        ["section_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_table("custom_section_transactions")
    op.drop_table("custom_sections")
    op.drop_table("debts")
    op.drop_table("currents")
    op.drop_table("savings")
    op.drop_table("expenses")
    op.drop_table("categories")
    op.drop_table("family_members")
    op.drop_table("families")
