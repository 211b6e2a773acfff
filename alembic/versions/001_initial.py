"""Initial tables: users, progress, quiz_scores, reviewed_flashcards.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(32), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(32), nullable=False),
        sa.Column("quizzes_completed", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("flashcards_reviewed", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("streak", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("last_active", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_progress_user_id"), "progress", ["user_id"], unique=True)

    op.create_table(
        "quiz_scores",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("progress_id", sa.Integer(), nullable=False),
        sa.Column("quiz_id", sa.String(255), nullable=True),
        sa.Column("score", sa.Float(), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["progress_id"], ["progress.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_quiz_scores_progress_id"), "quiz_scores", ["progress_id"], unique=False)

    op.create_table(
        "reviewed_flashcards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("progress_id", sa.Integer(), nullable=False),
        sa.Column("card_id", sa.String(255), nullable=False),
        sa.Column("last_reviewed", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["progress_id"], ["progress.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("progress_id", "card_id", name="uq_reviewed_flashcards_card"),
    )
    op.create_index(
        op.f("ix_reviewed_flashcards_progress_id"), "reviewed_flashcards", ["progress_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_reviewed_flashcards_progress_id"), table_name="reviewed_flashcards")
    op.drop_table("reviewed_flashcards")
    op.drop_index(op.f("ix_quiz_scores_progress_id"), table_name="quiz_scores")
    op.drop_table("quiz_scores")
    op.drop_index(op.f("ix_progress_user_id"), table_name="progress")
    op.drop_table("progress")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
