class PaynowError(Exception):
    error = "Paynow error"

    def __init__(self, message=None):
        message = message or self.error
        super().__init__(message)
        self.message = message


class ValidationError(PaynowError):
    error = "Validation error"


class ConfigurationError(PaynowError):
    error = "Configuration error"


class InvalidReferenceError(PaynowError):
    error = "Invalid reference"

    def __init__(self, message=None):
        super().__init__(message or "Merchant reference cannot be empty")


class EmptyCartError(PaynowError):
    error = "Empty cart"

    def __init__(self, message=None):
        super().__init__(message or "Cart total must be greater than zero")


class GatewayConnectionError(PaynowError):
    error = "Connection error"


class ParseError(PaynowError):
    error = "Parse error"


class HashMismatchError(PaynowError):
    """Raised when a gateway reply cannot be trusted.

    ``gateway_error`` holds the error text Paynow sent back, if any.
    """
    error = "Hash mismatch"

    def __init__(self, gateway_error=None):
        self.gateway_error = gateway_error
        if gateway_error:
            message = f"Hashes do not match: {gateway_error}"
        else:
            message = "Hashes do not match"
        super().__init__(message)
