import pytest

from httpx_browserkit import Response


@pytest.fixture()
def not_found():
    return Response("hello", 404, {"X-Foo": "bar"})


@pytest.fixture()
def cookies():
    return Response(headers={"Set-Cookie": ["a=1", "b=2"]})
