from abc import ABC, abstractmethod
from typing import Mapping, Optional


class Transport(ABC):
    """Abstract HTTP transport used by the Paynow client"""

    @abstractmethod
    def post(self, url: str, fields: Optional[Mapping[str, str]] = None) -> str:
        """
        Send a form-encoded POST

        Args:
            url: Endpoint to post to
            fields: Ordered form fields, or None for an empty body

        Returns:
            Raw response body as text

        Raises:
            Any I/O error on network or protocol failure; the client wraps
            these into GatewayConnectionError.
        """
        pass
