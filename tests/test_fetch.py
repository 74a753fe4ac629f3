import json

import httpx
import pytest
import respx

from practicekit.fetch import BASE_URL, fetch_posts, main, post_url


def test_post_url_format():
    assert post_url(3) == "https://jsonplaceholder.typicode.com/posts/3"
    assert post_url(7).startswith(BASE_URL)


@pytest.mark.asyncio
async def test_fetch_posts_in_order_with_client():
    with respx.mock() as router:
        for post_id in (1, 2, 3):
            router.get(post_url(post_id)).mock(
                return_value=httpx.Response(200, json={"id": post_id})
            )
        async with httpx.AsyncClient() as client:
            posts = await fetch_posts([3, 1, 2], client)
    assert posts == [{"id": 3}, {"id": 1}, {"id": 2}]


@pytest.mark.asyncio
async def test_fetch_posts_creates_own_client():
    with respx.mock() as router:
        route = router.get(post_url(5)).mock(
            return_value=httpx.Response(200, json={"title": "t"})
        )
        posts = await fetch_posts([5])
    assert posts == [{"title": "t"}]
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_fetch_posts_non_json_body_raises():
    with respx.mock() as router:
        router.get(post_url(1)).mock(return_value=httpx.Response(500, text="oops"))
        with pytest.raises(ValueError):
            await fetch_posts([1])


@pytest.mark.asyncio
async def test_fetch_posts_empty():
    assert await fetch_posts([]) == []


def test_main_prints_posts(capsys):
    with respx.mock() as router:
        for post_id in (1, 2):
            router.get(post_url(post_id)).mock(
                return_value=httpx.Response(200, json={"id": post_id})
            )
        assert main(["1", "2"]) == 0
    assert json.loads(capsys.readouterr().out) == [{"id": 1}, {"id": 2}]


def test_main_requests_default_ids(capsys):
    with respx.mock() as router:
        route = router.get(url__startswith=f"{BASE_URL}/posts/").mock(
            return_value=httpx.Response(200, json={})
        )
        assert main([]) == 0
        requested = sorted(int(call.request.url.path.rsplit("/", 1)[1]) for call in route.calls)
    assert requested == list(range(1, 11))
    assert json.loads(capsys.readouterr().out) == [{}] * 10


def test_main_reports_connection_error(capsys):
    with respx.mock() as router:
        router.get(post_url(1)).mock(side_effect=httpx.ConnectError("refused"))
        assert main(["1"]) == 1
    assert capsys.readouterr().err.startswith("Error:")