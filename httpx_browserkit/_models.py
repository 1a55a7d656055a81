import logging
from typing import List, Optional, Union

import httpx

from ._types import HeaderMapping
from ._utils import headers_from_httpx, headers_to_raw

logger = logging.getLogger(__name__)

# Left out of the debug string, their values change from one run to the next.
NOISY_HEADERS = ("date", "cache-control")


class Response:
    """
    A response as seen by the test browser: body, status code and headers.

    The headers mapping is a set of name/value pairs. If a header is present
    multiple times then the value is a list of all the values.
    """

    def __init__(
        self,
        content: Union[str, bytes] = "",
        status: int = 200,
        headers: Optional[HeaderMapping] = None,
    ) -> None:
        self._raw_headers = headers if headers is not None else {}
        self.headers = httpx.Headers(
            headers_to_raw(self._raw_headers), encoding="utf-8"
        )
        self.status = status
        self.content = content

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "Response":
        """Build a response from one returned by an httpx client."""
        logger.debug("Converting httpx response with status %i", response.status_code)
        return cls(
            content=response.text,
            status=response.status_code,
            headers=headers_from_httpx(response.headers),
        )

    def __str__(self) -> str:
        return self.to_debug_string()

    def __repr__(self) -> str:
        return "Response(status=%r, headers=%r, content=%r)" % (
            self.status,
            self._raw_headers,
            self.content,
        )

    def to_debug_string(self) -> str:
        """
        Render all headers and the content, for comparing responses in tests.

        The `date` and `cache-control` headers are dropped and the header
        block is lowercased with carriage returns removed. Bytes content is
        decoded as UTF-8, undecodable bytes replaced.
        """
        content = self.get_content()
        if isinstance(content, bytes):
            content = content.decode("utf-8", "replace")

        headers = self.headers.copy()
        for name in NOISY_HEADERS:
            headers.pop(name, None)

        lines = "".join(
            self._build_header(name, value)
            for name, value in sorted(headers.multi_items(), key=lambda item: item[0])
        )
        return lines.lower().replace("\r", "") + "\n" + content

    def _build_header(self, name: str, value: str) -> str:
        return "%s: %s\n" % (name, value)

    def get_content(self) -> Union[str, bytes]:
        return self.content

    def get_status(self) -> int:
        return self.status

    def get_headers(self) -> HeaderMapping:
        """Return the headers exactly as they were given to the constructor."""
        return self._raw_headers

    def get_header(
        self, name: str, first: bool = True
    ) -> Union[Optional[str], List[str]]:
        """
        Look up a header by name, ignoring case.

        Returns the first value (or None) when `first` is true, otherwise a
        list of every value, empty when the header is missing.
        """
        values = self.headers.get_list(name)
        if first:
            return values[0] if values else None
        return values
