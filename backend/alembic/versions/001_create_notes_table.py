"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Baseline schema: the `notes` table and its created_at DESC index.
       Column meaning is documented in app/models/note.py.

Rollback: downgrade() drops the table (all notes are lost).
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
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.Uuid(),
            nullable=False,
            comment="Unique identifier, assigned at creation and never changed",
        ),
        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Trimmed, non-empty title",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Trimmed, non-empty body",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was last modified (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
        # Stored values are trimmed; blank rows can never be written
        sa.CheckConstraint("length(trim(title)) > 0", name="ck_notes_title_not_blank"),
        sa.CheckConstraint("length(trim(content)) > 0", name="ck_notes_content_not_blank"),
    )

    op.create_index(
        "idx_notes_created_at",
        "notes",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_notes_created_at", table_name="notes")
    op.drop_table("notes")
