# SPDX-FileCopyrightText: 2015 Eric Larson
#
# SPDX-License-Identifier: Apache-2.0
import logging
from typing import Optional

import msgpack

from ._models import Response

logger = logging.getLogger(__name__)


class Serializer(object):
    def dumps(self, response: Response) -> bytes:
        data = {
            "response": {
                "content": response.get_content(),
                "status": response.get_status(),
                "headers": dict(response.get_headers()),
            },
        }

        return b",".join([b"bk=0", msgpack.dumps(data, use_bin_type=True)])

    def loads(self, data: bytes) -> Optional[Response]:
        # Short circuit if we've been given an empty set of data
        if not data:
            return None

        # Determine what version of the serializer the data was serialized
        # with
        try:
            ver, data = data.split(b",", 1)
        except ValueError:
            ver = b"bk=0"

        # Make sure that our "ver" is actually a version and isn't a false
        # positive from a , being in the data stream.
        if ver[:3] != b"bk=":
            data = ver + b"," + data
            ver = b"bk=0"

        # Get the version number out of the bk=N
        version = ver.split(b"=", 1)[-1].decode("ascii", "replace")

        try:
            loader = getattr(self, "_loads_v{}".format(version))
        except AttributeError:
            # This is a version we don't have a loads function for, so we'll
            # just treat it as a miss and return None
            logger.debug("Unknown snapshot version: %s", version)
            return None

        return loader(data)

    def prepare_response(self, snapshot: dict) -> Response:
        """Construct a response from snapshot data"""

        stored = snapshot["response"]

        return Response(
            content=stored["content"],
            status=stored["status"],
            headers=stored["headers"],
        )

    def _loads_v0(self, data: bytes) -> Optional[Response]:
        try:
            snapshot = msgpack.loads(data, raw=False)
        except ValueError:
            logger.debug("Ignoring snapshot that is not valid msgpack")
            return None

        try:
            return self.prepare_response(snapshot)
        except (KeyError, TypeError, AttributeError, UnicodeError):
            logger.debug("Ignoring snapshot with malformed response fields")
            return None
