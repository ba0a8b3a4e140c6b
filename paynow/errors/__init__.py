from paynow.errors.exceptions import (
    PaynowError,
    ValidationError,
    ConfigurationError,
    InvalidReferenceError,
    EmptyCartError,
    GatewayConnectionError,
    ParseError,
    HashMismatchError,
)

__all__ = [
    'PaynowError',
    'ValidationError',
    'ConfigurationError',
    'InvalidReferenceError',
    'EmptyCartError',
    'GatewayConnectionError',
    'ParseError',
    'HashMismatchError',
]
