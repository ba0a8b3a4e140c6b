from paynow.http.base import Transport
from paynow.http.requests_transport import RequestsTransport

__all__ = ['Transport', 'RequestsTransport']
