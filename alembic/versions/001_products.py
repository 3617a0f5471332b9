"""Products table.

Revision ID: 001_products
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_products"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("price_in_cents", sa.Integer, nullable=False),
        sa.CheckConstraint(
            "price_in_cents > 0", name="ck_products_price_positive",
        ),
        sa.CheckConstraint(
            "length(trim(name)) > 0", name="ck_products_name_not_blank",
        ),
    )


def downgrade() -> None:
    op.drop_table("products")
