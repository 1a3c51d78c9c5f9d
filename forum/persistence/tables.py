"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=True),
    Column("password_hash", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_created_at", questions_table.c.created_at.desc())

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(50), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTION_TAGS TABLE (many-to-many)
# ============================================================================
question_tags_table = Table(
    "question_tags",
    metadata,
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    PrimaryKeyConstraint("question_id", "tag_id", name="pk_question_tags"),
)

Index("idx_question_tags_tag_id", question_tags_table.c.tag_id)

# ============================================================================
# ANSWERS TABLE (parent_id threads replies)
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=True
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_parent_id", answers_table.c.parent_id)

# ============================================================================
# VOTES TABLE (one row per user/answer pair)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "direction",
        postgresql.ENUM("up", "down", name="vote_direction", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "answer_id", name="pk_votes"),
)

Index("idx_votes_answer_id", votes_table.c.answer_id)
