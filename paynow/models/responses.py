"""
Typed views over a decoded Paynow reply.

Each response is built once from a mapping the client has already checked
and never changes afterwards; nothing here validates or talks to the network.
"""

from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Mapping, Optional

from paynow.constants import STATUS_ERROR, STATUS_OK, STATUS_PAID
from paynow.utils.querystring import get_field


class GatewayResponse:
    """Fields common to every Paynow reply"""

    def __init__(self, data: Mapping[str, str]):
        self._data = MappingProxyType(dict(data))

    @property
    def data(self) -> Mapping[str, str]:
        return self._data

    @property
    def status(self) -> str:
        return get_field(self._data, 'status') or ''

    @property
    def error(self) -> Optional[str]:
        return get_field(self._data, 'error')

    @property
    def poll_url(self) -> Optional[str]:
        return get_field(self._data, 'pollurl')

    def __repr__(self):
        return f"{self.__class__.__name__}(status={self.status!r})"


class InitResponse(GatewayResponse):
    """Reply to a transaction initiation request"""

    @property
    def success(self) -> bool:
        return self.status.lower() == STATUS_OK

    @property
    def failed(self) -> bool:
        return self.status.lower() == STATUS_ERROR


class WebInitResponse(InitResponse):

    @property
    def redirect_url(self) -> Optional[str]:
        return get_field(self._data, 'browserurl')

    @property
    def has_redirect(self) -> bool:
        return bool(self.redirect_url)


class MobileInitResponse(InitResponse):

    @property
    def instructions(self) -> Optional[str]:
        return get_field(self._data, 'instructions')

    @property
    def paynow_reference(self) -> Optional[str]:
        return get_field(self._data, 'paynowreference')


class StatusResponse(GatewayResponse):
    """Transaction status from a poll or a result URL callback"""

    @property
    def reference(self) -> Optional[str]:
        return get_field(self._data, 'reference')

    @property
    def paynow_reference(self) -> Optional[str]:
        return get_field(self._data, 'paynowreference')

    @property
    def amount(self) -> Optional[Decimal]:
        raw = get_field(self._data, 'amount')
        if raw is None or raw == '':
            return None
        try:
            return Decimal(raw)
        except InvalidOperation:
            return None

    @property
    def paid(self) -> bool:
        return self.status.lower() == STATUS_PAID

    def is_paid(self) -> bool:
        return self.paid
