"""initial_schema

Create the forum schema:
- Users (email/password accounts)
- Questions and Tags (many-to-many via question_tags)
- Answers (threaded through parent_id)
- Votes (one up/down vote per user and answer)

Revision ID: 3c1f0d9a7b21
Revises:
Create Date: 2026-10-19 10:12:44.201733

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0d9a7b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from Postgres 13
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_direction AS ENUM ('up', 'down');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])
    op.create_index(
        "idx_questions_created_at", "questions", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # TAGS and QUESTION_TAGS tables
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_tags_name"),
    )

    op.create_table(
        "question_tags",
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.PrimaryKeyConstraint("question_id", "tag_id", name="pk_question_tags"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_question_tags_tag_id", "question_tags", ["tag_id"])

    # ========================================================================
    # ANSWERS table (replies point at their parent answer)
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["answers.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index("idx_answers_parent_id", "answers", ["parent_id"])

    # ========================================================================
    # VOTES table (the primary key allows one vote per user and answer)
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("answer_id", sa.UUID(), nullable=False),
        sa.Column(
            "direction",
            postgresql.ENUM("up", "down", name="vote_direction", create_type=False),
            nullable=False,
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("user_id", "answer_id", name="pk_votes"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["answer_id"], ["answers.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_votes_answer_id", "votes", ["answer_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("votes")
    op.drop_table("answers")
    op.drop_table("question_tags")
    op.drop_table("tags")
    op.drop_table("questions")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS vote_direction")
