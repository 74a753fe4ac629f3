import dataclasses

import pytest

from practicekit.qa_models import (
    Answer,
    AnswerDetail,
    AnswerId,
    DBError,
    InvalidUUIDError,
    OtherDBError,
    Question,
    QuestionDetail,
    QuestionId,
)


def test_question_detail_equality_and_clone():
    detail = QuestionDetail("123", "test title", "test description", "now")
    copy = dataclasses.replace(detail)
    assert copy == detail
    assert dataclasses.replace(detail, title="other") != detail


def test_answer_detail_round_trip_through_dict():
    detail = AnswerDetail("456", "123", "test content", "now")
    assert AnswerDetail(**dataclasses.asdict(detail)) == detail


def test_simple_records_hold_fields():
    assert Question("t", "d").title == "t"
    assert Answer("123", "c").question_uuid == "123"
    assert QuestionId("123").question_uuid == "123"
    assert AnswerId("456").answer_uuid == "456"


def test_records_are_immutable():
    question = Question("t", "d")
    with pytest.raises(dataclasses.FrozenInstanceError):
        question.title = "x"
    assert question.title == "t"
    assert question == Question("t", "d")


def test_invalid_uuid_error_message():
    err = InvalidUUIDError("test")
    assert str(err) == "Invalid UUID provided: test"
    assert err.detail == "test"
    assert isinstance(err, DBError)


def test_other_error_keeps_cause():
    cause = OSError("oh no!")
    err = OtherDBError(cause)
    assert str(err) == "Database error occurred"
    assert err.cause is cause
    with pytest.raises(DBError):
        raise err