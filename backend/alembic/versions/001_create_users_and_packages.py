"""Create users and packages collections

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `users` and `packages` tables.
Rollback: downgrade() drops both tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create both collections with their lookup indexes."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone_number", sa.Text(), nullable=False),
        sa.Column(
            "password",
            sa.String(255),
            nullable=False,
            comment="bcrypt hash of the user's password",
        ),
        sa.Column("role_id", sa.Integer(), nullable=False),
        # Soft-delete flag: 0 = active, 1 = deleted
        sa.Column(
            "is_deleted",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
            comment="Soft-delete flag: 0 = active, 1 = deleted",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_email_is_deleted", "users", ["email", "is_deleted"])
    op.create_index("idx_users_is_deleted", "users", ["is_deleted"])

    op.create_table(
        "packages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop both collections (destructive)."""
    op.drop_table("packages")
    op.drop_index("idx_users_is_deleted", table_name="users")
    op.drop_index("idx_users_email_is_deleted", table_name="users")
    op.drop_table("users")
