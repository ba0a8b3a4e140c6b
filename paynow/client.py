"""
Paynow Gateway Client
Based on the Paynow 3rd party integration interface.

Supported flows
---------------
Web (redirect)       POST /interface/initiatetransaction
    The payer is sent to the returned browserurl to complete payment.

Mobile money         POST /interface/remotetransaction
    Payment is pushed to the payer's wallet (Ecocash, OneMoney, ...).
    Requires the payer's auth email on the payment.

Status poll          POST <pollurl from the initiation reply>

Result callback      Paynow POSTs the same status payload to the result URL.
    parse_callback() validates it without any network call.

Every message is signed with an uppercase SHA-512 hash over the field values
followed by the integration key (see paynow.utils.hashing). The integration
key itself is never sent.

Thread-safety: a client holds no per-transaction state, but result_url and
return_url must not be changed while a submit is in flight.
"""

from decimal import Decimal
from typing import Dict, Mapping, Optional, Union

import requests

from paynow.config import (
    Config,
    INITIATE_MOBILE_TRANSACTION_URL,
    INITIATE_TRANSACTION_URL,
)
from paynow.constants import STATUS_ERROR
from paynow.errors import (
    ConfigurationError,
    EmptyCartError,
    GatewayConnectionError,
    HashMismatchError,
    InvalidReferenceError,
    ParseError,
    ValidationError,
)
from paynow.http import RequestsTransport, Transport
from paynow.models import MobileInitResponse, Payment, StatusResponse, WebInitResponse, format_amount
from paynow.utils import get_logger, hashing, querystring, validate_email, validate_phone_number
from paynow.utils.querystring import get_field

logger = get_logger(__name__)

# Failures raised by a transport that mean "the request did not go through"
_TRANSPORT_ERRORS = (requests.RequestException, OSError, UnicodeError)

DEFAULT_URL = 'http://localhost'


class Paynow:
    """
    A Paynow integration bound to one integration id and key.

    One instance can carry out any number of transactions.
    """

    def __init__(
            self,
            integration_id: str,
            integration_key: str,
            result_url: Optional[str] = None,
            return_url: Optional[str] = None,
            transport: Optional[Transport] = None,
            initiate_url: str = INITIATE_TRANSACTION_URL,
            mobile_url: str = INITIATE_MOBILE_TRANSACTION_URL
    ):
        if not integration_id:
            raise ValidationError("Integration id cannot be empty")
        if not integration_key:
            raise ValidationError("Integration key cannot be empty")

        self._integration_id = str(integration_id)
        self._integration_key = integration_key

        # URLs on the merchant site; callers may change these between transactions
        self.result_url = result_url or DEFAULT_URL
        self.return_url = return_url or DEFAULT_URL

        self.initiate_url = initiate_url
        self.mobile_url = mobile_url
        self._transport = transport or RequestsTransport()

    @classmethod
    def from_config(cls, config=None, transport: Optional[Transport] = None) -> 'Paynow':
        """
        Build a client from a Config class (see paynow.config)

        Args:
            config: Config class or instance; defaults to the base Config
            transport: Optional transport override

        Returns:
            Configured client
        """
        config = config or Config
        return cls(
            config.PAYNOW_INTEGRATION_ID,
            config.PAYNOW_INTEGRATION_KEY,
            result_url=config.PAYNOW_RESULT_URL,
            return_url=config.PAYNOW_RETURN_URL,
            transport=transport or RequestsTransport(timeout=config.PAYNOW_TIMEOUT),
            initiate_url=config.PAYNOW_INITIATE_URL,
            mobile_url=config.PAYNOW_MOBILE_URL,
        )

    @property
    def integration_id(self) -> str:
        return self._integration_id

    @property
    def integration_key(self) -> str:
        return self._integration_key

    def create_payment(self, reference: str, auth_email: Optional[str] = None, items=None) -> Payment:
        """
        Create a payment to submit through this client

        Args:
            reference: Unique transaction reference on the merchant site
            auth_email: Payer's email; required for mobile transactions
            items: Optional mapping of item name to amount, or list of LineItem

        Returns:
            New Payment instance
        """
        payment = Payment(reference, auth_email=auth_email)
        if isinstance(items, Mapping):
            for name, amount in items.items():
                payment.add_item(name, amount)
        elif items:
            for item in items:
                payment.add_item(item.name, item.amount, item.quantity)
        return payment

    # Public operations

    def submit_web(self, payment: Payment) -> WebInitResponse:
        """
        Initiate a web transaction

        Args:
            payment: Payment to send

        Returns:
            WebInitResponse carrying the browser redirect URL and poll URL

        Raises:
            InvalidReferenceError: If the payment reference is empty
            EmptyCartError: If the payment total is not greater than zero
            GatewayConnectionError: If the request could not be sent
            HashMismatchError: If Paynow returned an error or an untrusted reply
        """
        self._check_payment(payment)

        fields = self._build_request(payment)
        logger.debug("Initiating web transaction reference=%s", payment.reference)

        response = self._send(self.initiate_url, fields)

        if (get_field(response, 'status') or '').lower() == STATUS_ERROR \
                or not hashing.verify(response, self._integration_key):
            raise HashMismatchError(get_field(response, 'error'))

        logger.info("Web transaction initiated reference=%s", payment.reference)
        return WebInitResponse(response)

    def submit_mobile(self, payment: Payment, phone: str, method) -> MobileInitResponse:
        """
        Initiate a mobile money transaction

        Args:
            payment: Payment to send; must carry a valid auth email
            phone: Payer's mobile number
            method: Mobile money method, MobileMoneyMethod or plain string

        Returns:
            MobileInitResponse; ``success`` is False when Paynow reported an
            error, with the reason in ``error``

        Raises:
            InvalidReferenceError: If the payment reference is empty
            EmptyCartError: If the payment total is not greater than zero
            ConfigurationError: If the payment has no valid auth email
            ValidationError: If the phone number is malformed
            GatewayConnectionError: If the request could not be sent
            HashMismatchError: If the reply is unsigned, or a non-error reply
                fails verification
        """
        self._check_payment(payment)

        is_valid, error = validate_email(payment.auth_email)
        if not is_valid:
            raise ConfigurationError(
                f"Auth email is required for mobile transactions: {error}. "
                "Pass a valid email address when creating the payment"
            )

        is_valid, error = validate_phone_number(phone)
        if not is_valid:
            raise ValidationError(error)

        fields = self._build_request(payment, phone=phone, method=str(method))
        logger.debug("Initiating mobile transaction reference=%s method=%s", payment.reference, method)

        response = self._send(self.mobile_url, fields)

        if 'hash' not in response:
            raise HashMismatchError(get_field(response, 'error'))

        # Error replies are not guaranteed a valid hash, only non-error ones are checked
        if (get_field(response, 'status') or '').lower() != STATUS_ERROR \
                and not hashing.verify(response, self._integration_key):
            raise HashMismatchError(get_field(response, 'error'))

        result = MobileInitResponse(response)
        logger.info(
            "Mobile transaction reference=%s status=%s", payment.reference, result.status
        )
        return result

    def poll_status(self, poll_url: str) -> StatusResponse:
        """
        Poll Paynow for a transaction's status

        Args:
            poll_url: Poll URL from an earlier initiation reply

        Raises:
            GatewayConnectionError: If the request could not be sent
            HashMismatchError: If the reply is unsigned or fails verification
        """
        logger.debug("Polling transaction status %s", poll_url)
        return self._parse_status(self._send(poll_url, None))

    def parse_callback(self, body: Union[str, bytes, Mapping[str, str]]) -> StatusResponse:
        """
        Validate a status update Paynow posted to the result URL

        Args:
            body: Raw POST body, or the already-parsed form fields in the
                order they were received

        Raises:
            ParseError: If a raw body is not valid text
            HashMismatchError: If the update is unsigned or fails verification
        """
        if isinstance(body, Mapping):
            data = dict(body)
        else:
            data = querystring.decode(body)
        return self._parse_status(data)

    # Private helpers

    def _parse_status(self, data: Dict[str, str]) -> StatusResponse:
        if not hashing.verify(data, self._integration_key):
            raise HashMismatchError(get_field(data, 'error'))
        return StatusResponse(data)

    @staticmethod
    def _check_payment(payment: Payment):
        if not payment.reference or not payment.reference.strip():
            raise InvalidReferenceError()
        # Compare what is sent; a sub-cent total rounds to 0.00 on the wire
        if Decimal(format_amount(payment.total())) <= 0:
            raise EmptyCartError()

    def _build_request(self, payment: Payment, **extra: str) -> Dict[str, str]:
        """Payment fields, then merchant fields, then any extras, then the hash."""
        fields = payment.to_request_fields()
        fields['returnurl'] = self.return_url.strip()
        fields['resulturl'] = self.result_url.strip()
        fields['id'] = self._integration_id
        fields.update(extra)

        fields['hash'] = hashing.make(fields, self._integration_key)
        return fields

    def _send(self, url: str, fields: Optional[Dict[str, str]]) -> Dict[str, str]:
        try:
            body = self._transport.post(url, fields)
        except _TRANSPORT_ERRORS as exc:
            raise GatewayConnectionError(f"Request to Paynow failed: {exc}") from exc

        if not isinstance(body, (str, bytes)):
            raise GatewayConnectionError(
                f"Request to Paynow failed: expected a text body, got {type(body).__name__}"
            )

        try:
            return querystring.decode(body)
        except ParseError as exc:
            raise GatewayConnectionError(f"Request to Paynow failed: {exc.message}") from exc
