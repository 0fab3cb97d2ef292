"""Initial schema: accounts, course content and learner progress.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ------------------------------------------------------------------ #
    # 1. ACCOUNTS                                                          #
    # ------------------------------------------------------------------ #

    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.Text, nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column("role", sa.Text, nullable=False, server_default="user"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.CheckConstraint("role IN ('admin', 'user')", name="ck_users_role"),
    )

    # ------------------------------------------------------------------ #
    # 2. COURSE CONTENT                                                    #
    # ------------------------------------------------------------------ #

    op.create_table(
        "modules",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index("idx_modules_order_index", "modules", ["order_index"])

    op.create_table(
        "lessons",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "module_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("modules.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("order_index", sa.Integer, nullable=False, server_default="0"),
    )
    op.create_index("idx_lessons_module_id", "lessons", ["module_id"])
    op.create_index("idx_lessons_order_index", "lessons", ["order_index"])
    op.create_index("idx_lessons_module_order", "lessons", ["module_id", "order_index"])

    op.create_table(
        "tasks",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "lesson_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("lessons.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("task_type", sa.Text, nullable=False),
        sa.Column("question", sa.Text, nullable=False),
        sa.Column("explanation", sa.Text, nullable=False),
        sa.CheckConstraint(
            "task_type IN ('fill_code', 'multiple_choice', 'debug_code', 'string_cmp')",
            name="ck_tasks_task_type",
        ),
    )
    op.create_index("idx_tasks_lesson_id", "tasks", ["lesson_id"])

    op.create_table(
        "task_answers",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "task_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("tasks.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("answer_text", sa.Text, nullable=False),
        sa.Column("image", sa.Text, nullable=False),
        sa.Column("is_correct", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    # ------------------------------------------------------------------ #
    # 3. LEARNER PROGRESS                                                  #
    # ------------------------------------------------------------------ #

    op.create_table(
        "user_progress",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "lesson_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("lessons.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", sa.Text, nullable=False),
        sa.CheckConstraint("status IN ('done', 'in_progress')", name="ck_user_progress_status"),
    )
    op.create_index("idx_user_progress_user_lesson", "user_progress", ["user_id", "lesson_id"])
    op.create_index("idx_user_progress_lesson_user", "user_progress", ["lesson_id", "user_id"])
    op.create_index("idx_user_progress_user_status", "user_progress", ["user_id", "status"])

    op.create_table(
        "user_task_attempts",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "task_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("tasks.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "selected_answer_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("task_answers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("is_correct", sa.Boolean, nullable=False),
    )

    op.create_table(
        "progress_tokens",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("token", sa.Text, nullable=False),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=True,
        ),
        sa.UniqueConstraint("token", name="idx_progress_tokens_token"),
    )


def downgrade() -> None:
    # Drop in reverse dependency order (leaves first, roots last).
    op.drop_table("progress_tokens")
    op.drop_table("user_task_attempts")

    op.drop_index("idx_user_progress_user_status", table_name="user_progress")
    op.drop_index("idx_user_progress_lesson_user", table_name="user_progress")
    op.drop_index("idx_user_progress_user_lesson", table_name="user_progress")
    op.drop_table("user_progress")

    op.drop_table("task_answers")

    op.drop_index("idx_tasks_lesson_id", table_name="tasks")
    op.drop_table("tasks")

    op.drop_index("idx_lessons_module_order", table_name="lessons")
    op.drop_index("idx_lessons_order_index", table_name="lessons")
    op.drop_index("idx_lessons_module_id", table_name="lessons")
    op.drop_table("lessons")

    op.drop_index("idx_modules_order_index", table_name="modules")
    op.drop_table("modules")

    op.drop_table("users")
