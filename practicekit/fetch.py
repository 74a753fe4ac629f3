"""Fetch several posts from a JSON API concurrently."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Iterable, Sequence
from typing import Any

import httpx

BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_IDS = tuple(range(1, 11))


def post_url(post_id: int) -> str:
    """Return the URL of the post with the given id."""
    return f"{BASE_URL}/posts/{post_id}"


async def fetch_posts(
    ids: Iterable[int], client: httpx.AsyncClient | None = None
) -> list[Any]:
    """Request every post at once and return the decoded bodies in id order.

    Raises httpx.HTTPError on transport failures and ValueError when a body
    is not JSON.
    """
    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await fetch_posts(ids, own_client)

    async def fetch_one(post_id: int) -> Any:
        response = await client.get(post_url(post_id))
        return response.json()

    return list(await asyncio.gather(*(fetch_one(post_id) for post_id in ids)))


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch the given post ids (1 to 10 by default) and print them as JSON."""
    parser = argparse.ArgumentParser(description="Fetch posts concurrently.")
    parser.add_argument("ids", nargs="*", type=int, help="post ids to fetch")
    args = parser.parse_args(argv)
    ids = args.ids or list(DEFAULT_IDS)
    try:
        posts = asyncio.run(fetch_posts(ids))
    except (httpx.HTTPError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(posts))
    return 0


if __name__ == "__main__":
    sys.exit(main())