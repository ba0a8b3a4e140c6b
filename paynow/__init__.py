"""
Paynow client
Build payment requests, submit them to Paynow and verify the signed replies
"""

from paynow.client import Paynow
from paynow.constants import MobileMoneyMethod
from paynow.errors import (
    PaynowError,
    ValidationError,
    ConfigurationError,
    InvalidReferenceError,
    EmptyCartError,
    GatewayConnectionError,
    ParseError,
    HashMismatchError,
)
from paynow.models import (
    LineItem,
    Payment,
    WebInitResponse,
    MobileInitResponse,
    StatusResponse,
)

__version__ = '1.0.0'

__all__ = [
    'Paynow',
    'MobileMoneyMethod',
    'LineItem',
    'Payment',
    'WebInitResponse',
    'MobileInitResponse',
    'StatusResponse',
    'PaynowError',
    'ValidationError',
    'ConfigurationError',
    'InvalidReferenceError',
    'EmptyCartError',
    'GatewayConnectionError',
    'ParseError',
    'HashMismatchError',
]
