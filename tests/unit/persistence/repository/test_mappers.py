"""Unit tests for row/domain mappers."""

from datetime import datetime
from uuid import uuid4

from forum.domain.value import VoteDirection
from forum.persistence.mappers import (
    answer_to_dict,
    question_to_dict,
    row_to_answer,
    row_to_answer_owner,
    row_to_question,
    row_to_vote,
    vote_to_dict,
)
from tests.conftest import make_answer, make_question, make_user


class TestMappers:
    """Tests for the persistence mappers."""

    def test_question_dict_leaves_tags_to_link_table(self):
        question = make_question(make_user(), tags=["python"])

        data = question_to_dict(question)

        assert "tag_names" not in data
        assert row_to_question(data, ["python"]) == question

    def test_answer_parent_survives_round_trip(self):
        author = make_user()
        question = make_question(author)
        parent = make_answer(question, author)
        reply = make_answer(question, author, parent=parent, minutes=1)

        assert row_to_answer(answer_to_dict(reply)).parent_id == parent.id

    def test_vote_direction_is_stored_as_text(self):
        now = datetime.now()
        row = {
            "user_id": str(uuid4()),
            "answer_id": str(uuid4()),
            "direction": "down",
            "created_at": now,
            "updated_at": now,
        }

        vote = row_to_vote(row)

        assert vote.direction == VoteDirection.DOWN
        assert vote_to_dict(vote)["direction"] == "down"

    def test_answer_owner_from_join_row(self):
        user_id, question_id = uuid4(), uuid4()

        owner = row_to_answer_owner(
            {
                "author_id": user_id,
                "email": "Owner@Example.com",
                "question_id": question_id,
            }
        )

        assert owner.user_id == user_id
        assert owner.email.root == "owner@example.com"
        assert owner.question_id == question_id
