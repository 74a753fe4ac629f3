"""HTTP interface of the questions-and-answers service."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sqlite3
import sys
from collections.abc import Sequence
from dataclasses import asdict, fields
from typing import Any, TypeVar

import uvicorn
from dotenv import load_dotenv
from starlette.applications import Starlette
from starlette.datastructures import MutableHeaders
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from practicekit import qa_handlers
from practicekit.qa_handlers import BadRequestError, HandlerError
from practicekit.qa_models import Answer, AnswerId, Question, QuestionId
from practicekit.qa_persistence import (
    AnswersDao,
    AnswersDaoImpl,
    QuestionsDao,
    QuestionsDaoImpl,
    connect,
    init_schema,
)

M = TypeVar("M")

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, PATCH, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Allow-Credentials": "true",
}


class CorsHeadersMiddleware:
    """Add permissive CORS headers to every response and answer preflights."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in _CORS_HEADERS.items():
                    headers[name] = value
            await send(message)

        if scope["method"] == "OPTIONS":
            response = PlainTextResponse("", status_code=200)
            await response(scope, receive, send_with_headers)
            return
        await self.app(scope, receive, send_with_headers)


class _InvalidBody(Exception):
    pass


async def _parse_body(request: Request, model: type[M]) -> M:
    try:
        data: Any = json.loads(await request.body())
    except ValueError as exc:
        raise _InvalidBody("malformed JSON body") from exc
    if not isinstance(data, dict):
        raise _InvalidBody("expected a JSON object")
    values = {}
    for f in fields(model):  # type: ignore[arg-type]
        value = data.get(f.name)
        if not isinstance(value, str):
            raise _InvalidBody(f"field {f.name!r} must be a string")
        values[f.name] = value
    return model(**values)


async def _handler_error(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, HandlerError)
    status = 400 if isinstance(exc, BadRequestError) else 500
    return PlainTextResponse(exc.message, status_code=status)


async def _invalid_body(request: Request, exc: Exception) -> Response:
    return PlainTextResponse(str(exc), status_code=422)


def create_app(questions_dao: QuestionsDao, answers_dao: AnswersDao) -> Starlette:
    """Build the application over the given storage."""

    async def create_question(request: Request) -> Response:
        question = await _parse_body(request, Question)
        detail = await qa_handlers.create_question(question, questions_dao)
        return JSONResponse(asdict(detail))

    async def read_questions(request: Request) -> Response:
        questions = await qa_handlers.read_questions(questions_dao)
        return JSONResponse([asdict(q) for q in questions])

    async def delete_question(request: Request) -> Response:
        question_id = await _parse_body(request, QuestionId)
        await qa_handlers.delete_question(question_id, questions_dao)
        return Response(status_code=200)

    async def create_answer(request: Request) -> Response:
        answer = await _parse_body(request, Answer)
        detail = await qa_handlers.create_answer(answer, answers_dao)
        return JSONResponse(asdict(detail))

    async def read_answers(request: Request) -> Response:
        question_id = await _parse_body(request, QuestionId)
        answers = await qa_handlers.read_answers(question_id, answers_dao)
        return JSONResponse([asdict(a) for a in answers])

    async def delete_answer(request: Request) -> Response:
        answer_id = await _parse_body(request, AnswerId)
        await qa_handlers.delete_answer(answer_id, answers_dao)
        return Response(status_code=200)

    routes = [
        Route("/question", create_question, methods=["POST"]),
        Route("/questions", read_questions, methods=["GET"]),
        Route("/question", delete_question, methods=["DELETE"]),
        Route("/answer", create_answer, methods=["POST"]),
        Route("/answers", read_answers, methods=["GET"]),
        Route("/answer", delete_answer, methods=["DELETE"]),
    ]
    return Starlette(
        routes=routes,
        middleware=[Middleware(CorsHeadersMiddleware)],
        exception_handlers={
            HandlerError: _handler_error,
            _InvalidBody: _invalid_body,
        },
    )


def _database_path(database_url: str) -> str:
    prefix = "sqlite:///"
    return database_url[len(prefix):] if database_url.startswith(prefix) else database_url


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the API over the SQLite database named by DATABASE_URL."""
    parser = argparse.ArgumentParser(description="Serve the questions-and-answers API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    load_dotenv()
    database_url = os.environ.get("DATABASE_URL")
    if not database_url:
        print("DATABASE_URL must be set.", file=sys.stderr)
        return 1
    try:
        db = connect(_database_path(database_url))
        init_schema(db)
    except sqlite3.Error as exc:
        print(f"Failed to open the database: {exc}", file=sys.stderr)
        return 1

    app = create_app(QuestionsDaoImpl(db), AnswersDaoImpl(db))
    try:
        uvicorn.run(app, host=args.host, port=args.port)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())