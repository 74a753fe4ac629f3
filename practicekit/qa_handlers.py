"""Service operations of the questions-and-answers API, independent of HTTP."""

from __future__ import annotations

import logging

from practicekit.qa_models import (
    Answer,
    AnswerDetail,
    AnswerId,
    DBError,
    InvalidUUIDError,
    Question,
    QuestionDetail,
    QuestionId,
)
from practicekit.qa_persistence import AnswersDao, QuestionsDao

logger = logging.getLogger(__name__)

DEFAULT_INTERNAL_MESSAGE = "Something went wrong! Please try again."


class HandlerError(Exception):
    """A failure to report back to the client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(HandlerError):
    """The client sent something that cannot be used."""


class InternalError(HandlerError):
    """The service failed; the message is safe to show to clients."""

    def __init__(self, message: str = DEFAULT_INTERNAL_MESSAGE) -> None:
        super().__init__(message)


async def create_question(
    question: Question, questions_dao: QuestionsDao
) -> QuestionDetail:
    """Store a question and return it as stored."""
    try:
        return await questions_dao.create_question(question)
    except DBError as exc:
        logger.error("%r", exc)
        raise InternalError() from exc


async def read_questions(questions_dao: QuestionsDao) -> list[QuestionDetail]:
    """Return every stored question."""
    try:
        return await questions_dao.get_questions()
    except DBError as exc:
        logger.error("%r", exc)
        raise InternalError() from exc


async def delete_question(question_id: QuestionId, questions_dao: QuestionsDao) -> None:
    """Remove a question."""
    try:
        await questions_dao.delete_question(question_id.question_uuid)
    except DBError as exc:
        raise InternalError() from exc


async def create_answer(answer: Answer, answers_dao: AnswersDao) -> AnswerDetail:
    """Store an answer; a bad question UUID is the client's fault."""
    try:
        return await answers_dao.create_answer(answer)
    except InvalidUUIDError as exc:
        logger.error("%r", exc)
        raise BadRequestError(exc.detail) from exc
    except DBError as exc:
        logger.error("%r", exc)
        raise InternalError() from exc


async def read_answers(
    question_id: QuestionId, answers_dao: AnswersDao
) -> list[AnswerDetail]:
    """Return every answer to the given question."""
    try:
        return await answers_dao.get_answers(question_id.question_uuid)
    except DBError as exc:
        logger.error("%r", exc)
        raise InternalError() from exc


async def delete_answer(answer_id: AnswerId, answers_dao: AnswersDao) -> None:
    """Remove an answer."""
    try:
        await answers_dao.delete_answer(answer_id.answer_uuid)
    except DBError as exc:
        raise InternalError() from exc