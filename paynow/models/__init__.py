from paynow.models.payment import LineItem, Payment, format_amount
from paynow.models.responses import (
    GatewayResponse,
    InitResponse,
    WebInitResponse,
    MobileInitResponse,
    StatusResponse,
)

__all__ = [
    'LineItem',
    'Payment',
    'format_amount',
    'GatewayResponse',
    'InitResponse',
    'WebInitResponse',
    'MobileInitResponse',
    'StatusResponse',
]
