"""An in-memory users service with a small JSON HTTP interface."""

from __future__ import annotations

import argparse
import json
import sys
import threading
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route


@dataclass(frozen=True)
class User:
    """A stored user."""

    id: int
    name: str
    email: str


class UserStore:
    """A thread-safe list of users.

    A new user's id is one more than the number of users currently stored.
    """

    def __init__(self) -> None:
        self._users: list[User] = []
        self._lock = threading.Lock()

    def all(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def get(self, user_id: int) -> User | None:
        with self._lock:
            return next((user for user in self._users if user.id == user_id), None)

    def create(self, name: str, email: str) -> User:
        with self._lock:
            user = User(len(self._users) + 1, name, email)
            self._users.append(user)
            return user

    def update(self, user_id: int, name: str, email: str) -> User | None:
        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == user_id:
                    updated = User(user_id, name, email)
                    self._users[index] = updated
                    return updated
        return None

    def delete(self, user_id: int) -> User | None:
        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == user_id:
                    return self._users.pop(index)
        return None


class _BodyError(Exception):
    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


def _not_found() -> Response:
    return PlainTextResponse("Not Found", status_code=404)


def _is_json(request: Request) -> bool:
    media_type = request.headers.get("content-type", "").split(";", 1)[0]
    return media_type.strip().lower() == "application/json"


def _validate_user(data: Any) -> tuple[str, str]:
    if not isinstance(data, dict):
        raise _BodyError(422, "expected a JSON object")
    user_id = data.get("id")
    if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id < 0:
        raise _BodyError(422, "id must be a non-negative integer")
    name, email = data.get("name"), data.get("email")
    if not isinstance(name, str) or not isinstance(email, str):
        raise _BodyError(422, "name and email must be strings")
    return name, email


async def _read_user(request: Request) -> tuple[str, str]:
    raw = await request.body()
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise _BodyError(400, "malformed JSON body") from exc
    return _validate_user(data)


def create_app(store: UserStore | None = None) -> Starlette:
    """Build the application serving the given store (a fresh one by default)."""
    users = UserStore() if store is None else store

    async def list_users(request: Request) -> Response:
        return JSONResponse([asdict(user) for user in users.all()])

    async def get_user(request: Request) -> Response:
        user = users.get(request.path_params["user_id"])
        return _not_found() if user is None else JSONResponse(asdict(user))

    async def create_user(request: Request) -> Response:
        if not _is_json(request):
            return _not_found()
        try:
            name, email = await _read_user(request)
        except _BodyError as exc:
            return PlainTextResponse(exc.detail, status_code=exc.status_code)
        return JSONResponse(asdict(users.create(name, email)))

    async def update_user(request: Request) -> Response:
        if not _is_json(request):
            return _not_found()
        try:
            name, email = await _read_user(request)
        except _BodyError as exc:
            return PlainTextResponse(exc.detail, status_code=exc.status_code)
        user = users.update(request.path_params["user_id"], name, email)
        return _not_found() if user is None else JSONResponse(asdict(user))

    async def delete_user(request: Request) -> Response:
        user = users.delete(request.path_params["user_id"])
        return _not_found() if user is None else JSONResponse(asdict(user))

    routes = [
        Route("/users", list_users, methods=["GET"]),
        Route("/users", create_user, methods=["POST"]),
        Route("/users/{user_id:int}", get_user, methods=["GET"]),
        Route("/users/{user_id:int}", update_user, methods=["PUT"]),
        Route("/users/{user_id:int}", delete_user, methods=["DELETE"]),
    ]
    return Starlette(routes=routes)


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the users API."""
    parser = argparse.ArgumentParser(description="Serve the users API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)
    uvicorn.run(create_app(), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())