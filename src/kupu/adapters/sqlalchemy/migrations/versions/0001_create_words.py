"""create words table

Revision ID: 0001_create_words
Revises:
Create Date: 2026-01-27 15:04:05

"""
from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001_create_words"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("day_index", sa.Integer(), nullable=True),
        sa.Column("word", sa.String(), nullable=False),
        sa.Column("meaning", sa.String(), nullable=False),
        sa.Column("link", sa.String(), nullable=True),
        sa.Column("photo", sa.String(), nullable=True),
        sa.Column("photo_attribution", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.CheckConstraint(
            "day_index IS NULL OR (day_index >= 1 AND day_index <= 366)",
            name=op.f("ck_words_day_index_range"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_words")),
        sa.UniqueConstraint("day_index", name=op.f("uq_words_words_day_index")),
    )
    op.create_index("ix_words_word", "words", ["word"], unique=False)
    op.create_index("ix_words_is_active", "words", ["is_active"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_words_is_active", table_name="words")
    op.drop_index("ix_words_word", table_name="words")
    op.drop_table("words")
