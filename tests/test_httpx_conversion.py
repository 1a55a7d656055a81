import httpx

from httpx_browserkit import Response
from httpx_browserkit._utils import headers_from_httpx, headers_to_raw


class TestFromHttpx(object):
    def setup_method(self):
        self.upstream = httpx.Response(
            302,
            headers=[
                ("Set-Cookie", "a=1"),
                ("set-cookie", "b=2"),
                ("Location", "/next"),
            ],
            text="redirecting",
        )

    def test_content_and_status(self):
        response = Response.from_httpx(self.upstream)

        assert response.get_content() == "redirecting"
        assert response.get_status() == 302

    def test_repeated_headers_become_lists(self):
        headers = Response.from_httpx(self.upstream).get_headers()

        assert headers["Set-Cookie"] == ["a=1", "b=2"]
        assert headers["Location"] == "/next"

    def test_lookup(self):
        response = Response.from_httpx(self.upstream)

        assert response.get_header("location") == "/next"
        assert response.get_header("SET-COOKIE") == "a=1"
        assert response.get_header("set-cookie", False) == ["a=1", "b=2"]

    def test_utf8_header_values(self):
        upstream = httpx.Response(
            200, headers=[(b"X-Name", "café".encode("utf-8"))], text="x"
        )

        response = Response.from_httpx(upstream)

        assert response.get_header("x-name") == "café"
        assert response.get_headers()["X-Name"] == "café"

    def test_latin1_header_values(self):
        upstream = httpx.Response(
            200, headers=[(b"X-Name", "café".encode("latin-1"))], text="x"
        )

        assert Response.from_httpx(upstream).get_header("x-name") == "café"


def test_headers_to_raw_flattens_lists():
    assert headers_to_raw({"A": ["1", "2"], "B": "3", "C": 4}) == [
        ("A", "1"),
        ("A", "2"),
        ("B", "3"),
        ("C", "4"),
    ]


def test_headers_from_httpx_keeps_first_casing():
    headers = httpx.Headers([("X-Foo", "1"), ("x-foo", "2"), ("X-FOO", "3")])

    assert headers_from_httpx(headers) == {"X-Foo": ["1", "2", "3"]}
