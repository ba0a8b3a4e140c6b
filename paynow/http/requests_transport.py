"""
requests-backed transport

Posts application/x-www-form-urlencoded bodies through a shared
requests.Session. HTTP status codes are not interpreted here: Paynow reports
success or failure in the body itself.
"""

import logging
from typing import Mapping, Optional

import requests

from paynow.http.base import Transport
from paynow.utils import querystring

logger = logging.getLogger(__name__)


class RequestsTransport(Transport):

    DEFAULT_TIMEOUT = 30

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self._session = session or requests.Session()
        self._session.headers.update({
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "*/*",
        })

    def post(self, url: str, fields: Optional[Mapping[str, str]] = None) -> str:
        body = querystring.encode(fields) if fields else ''

        resp = self._session.post(url, data=body, timeout=self.timeout)
        logger.debug("Paynow POST %s HTTP %s", url, resp.status_code)

        # A body that is not text is a protocol failure, not a gateway reply
        try:
            return resp.content.decode(resp.encoding or 'utf-8')
        except LookupError as exc:
            raise requests.exceptions.ContentDecodingError(
                f"Unknown response encoding {resp.encoding!r}"
            ) from exc

    def close(self):
        self._session.close()
