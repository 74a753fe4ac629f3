"""Records and errors of the questions-and-answers service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Question:
    """A question as submitted by a client."""

    title: str
    description: str


@dataclass(frozen=True)
class QuestionDetail:
    """A stored question."""

    question_uuid: str
    title: str
    description: str
    created_at: str


@dataclass(frozen=True)
class QuestionId:
    """A reference to a stored question."""

    question_uuid: str


@dataclass(frozen=True)
class Answer:
    """An answer to a question as submitted by a client."""

    question_uuid: str
    content: str


@dataclass(frozen=True)
class AnswerDetail:
    """A stored answer."""

    answer_uuid: str
    question_uuid: str
    content: str
    created_at: str


@dataclass(frozen=True)
class AnswerId:
    """A reference to a stored answer."""

    answer_uuid: str


class DBError(Exception):
    """Base class of every storage failure."""


class InvalidUUIDError(DBError):
    """A UUID was malformed or referred to nothing."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid UUID provided: {detail}")
        self.detail = detail


class OtherDBError(DBError):
    """The database failed for a reason other than a bad UUID."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__("Database error occurred")
        self.cause = cause