"""Storage of questions and answers in SQLite."""

from __future__ import annotations

import os
import sqlite3
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from practicekit.qa_models import (
    Answer,
    AnswerDetail,
    InvalidUUIDError,
    OtherDBError,
    Question,
    QuestionDetail,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS questions (
    question_uuid TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    description TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS answers (
    answer_uuid TEXT PRIMARY KEY,
    question_uuid TEXT NOT NULL
        REFERENCES questions (question_uuid) ON DELETE CASCADE,
    content TEXT NOT NULL,
    created_at TEXT NOT NULL
);
"""


def connect(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open a database with foreign-key checks turned on."""
    db = sqlite3.connect(path)
    db.execute("PRAGMA foreign_keys = ON")
    return db


def init_schema(db: sqlite3.Connection) -> None:
    """Create the questions and answers tables if they do not exist."""
    db.executescript(_SCHEMA)
    db.commit()


def _parse_uuid(value: str, what: str) -> str:
    try:
        return str(uuid.UUID(value))
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidUUIDError(f"Could not parse {what} UUID: {value}") from exc


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(sep=" ")


class QuestionsDao(ABC):
    """Storage operations on questions."""

    @abstractmethod
    async def create_question(self, question: Question) -> QuestionDetail: ...

    @abstractmethod
    async def delete_question(self, question_uuid: str) -> None: ...

    @abstractmethod
    async def get_questions(self) -> list[QuestionDetail]: ...


class AnswersDao(ABC):
    """Storage operations on answers."""

    @abstractmethod
    async def create_answer(self, answer: Answer) -> AnswerDetail: ...

    @abstractmethod
    async def delete_answer(self, answer_uuid: str) -> None: ...

    @abstractmethod
    async def get_answers(self, question_uuid: str) -> list[AnswerDetail]: ...


class QuestionsDaoImpl(QuestionsDao):
    """Questions kept in an SQLite database."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db

    async def create_question(self, question: Question) -> QuestionDetail:
        detail = QuestionDetail(
            question_uuid=str(uuid.uuid4()),
            title=question.title,
            description=question.description,
            created_at=_now(),
        )
        try:
            with self._db:
                self._db.execute(
                    "INSERT INTO questions (question_uuid, title, description, created_at)"
                    " VALUES (?, ?, ?, ?)",
                    (
                        detail.question_uuid,
                        detail.title,
                        detail.description,
                        detail.created_at,
                    ),
                )
        except sqlite3.Error as exc:
            raise OtherDBError(exc) from exc
        return detail

    async def delete_question(self, question_uuid: str) -> None:
        key = _parse_uuid(question_uuid, "question")
        try:
            with self._db:
                self._db.execute(
                    "DELETE FROM questions WHERE question_uuid = ?", (key,)
                )
        except sqlite3.Error as exc:
            raise OtherDBError(exc) from exc

    async def get_questions(self) -> list[QuestionDetail]:
        try:
            rows = self._db.execute(
                "SELECT question_uuid, title, description, created_at"
                " FROM questions ORDER BY rowid"
            ).fetchall()
        except sqlite3.Error as exc:
            raise OtherDBError(exc) from exc
        return [QuestionDetail(*row) for row in rows]


class AnswersDaoImpl(AnswersDao):
    """Answers kept in an SQLite database."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db

    async def create_answer(self, answer: Answer) -> AnswerDetail:
        question_key = _parse_uuid(answer.question_uuid, "answer")
        detail = AnswerDetail(
            answer_uuid=str(uuid.uuid4()),
            question_uuid=question_key,
            content=answer.content,
            created_at=_now(),
        )
        try:
            with self._db:
                self._db.execute(
                    "INSERT INTO answers (answer_uuid, question_uuid, content, created_at)"
                    " VALUES (?, ?, ?, ?)",
                    (
                        detail.answer_uuid,
                        detail.question_uuid,
                        detail.content,
                        detail.created_at,
                    ),
                )
        except sqlite3.IntegrityError as exc:
            if "FOREIGN KEY" in str(exc).upper():
                raise InvalidUUIDError(
                    f"Invalid question UUID: {answer.question_uuid}"
                ) from exc
            raise OtherDBError(exc) from exc
        except sqlite3.Error as exc:
            raise OtherDBError(exc) from exc
        return detail

    async def delete_answer(self, answer_uuid: str) -> None:
        key = _parse_uuid(answer_uuid, "answer")
        try:
            with self._db:
                self._db.execute("DELETE FROM answers WHERE answer_uuid = ?", (key,))
        except sqlite3.Error as exc:
            raise OtherDBError(exc) from exc

    async def get_answers(self, question_uuid: str) -> list[AnswerDetail]:
        key = _parse_uuid(question_uuid, "question")
        try:
            rows = self._db.execute(
                "SELECT answer_uuid, question_uuid, content, created_at"
                " FROM answers WHERE question_uuid = ? ORDER BY rowid",
                (key,),
            ).fetchall()
        except sqlite3.Error as exc:
            raise OtherDBError(exc) from exc
        return [AnswerDetail(*row) for row in rows]