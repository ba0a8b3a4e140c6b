from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict, List, Optional

from marshmallow import ValidationError as SchemaValidationError

from paynow.constants import REQUEST_STATUS_MESSAGE
from paynow.errors import ValidationError
from paynow.schemas import LineItemSchema

_CENTS = Decimal('0.01')

_line_item_schema = LineItemSchema()


class LineItem:
    """One priced line in a payment's cart"""

    __slots__ = ('_name', '_amount', '_quantity')

    def __init__(self, name: str, amount, quantity: int = 1):
        try:
            data = _line_item_schema.load(
                {'name': name, 'amount': amount, 'quantity': quantity}
            )
        except SchemaValidationError as exc:
            raise ValidationError(_format_schema_errors(exc.messages)) from exc

        self._name = data['name'].strip()
        self._amount = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        self._quantity = data['quantity']

    @property
    def name(self) -> str:
        return self._name

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def line_total(self) -> Decimal:
        return self._amount * self._quantity

    def __repr__(self):
        return f"LineItem(name={self._name!r}, amount={self._amount}, quantity={self._quantity})"


class Payment:
    """
    A single transaction request on the merchant side.

    A payment is either itemized (a cart of line items) or direct (reference
    plus the payer's auth email, as used by mobile money flows); it may be
    both. The reference and auth email are fixed at creation, items can be
    added until the payment is submitted.

    Item order is preserved because it feeds the ``additionalinfo`` field and
    therefore the request hash.
    """

    KIND_ITEMIZED = 'itemized'
    KIND_DIRECT = 'direct'

    def __init__(
            self,
            reference: str,
            auth_email: Optional[str] = None,
            items: Optional[List[LineItem]] = None,
            description: Optional[str] = None
    ):
        self._reference = reference or ''
        self._auth_email = auth_email or None
        self._items: List[LineItem] = list(items or [])
        self.description = description

    @property
    def reference(self) -> str:
        return self._reference

    @property
    def auth_email(self) -> Optional[str]:
        return self._auth_email

    @property
    def items(self) -> tuple:
        return tuple(self._items)

    @property
    def kind(self) -> str:
        return self.KIND_ITEMIZED if self._items else self.KIND_DIRECT

    def add_item(self, name: str, amount, quantity: int = 1) -> 'Payment':
        """
        Append a line item to the cart

        Args:
            name: Item title shown to the payer
            amount: Unit price, Decimal or anything Decimal() accepts
            quantity: Number of units

        Returns:
            The payment, so calls can be chained

        Raises:
            ValidationError: If the name is empty, the amount is negative or
                the quantity is not a positive integer
        """
        self._items.append(LineItem(name, amount, quantity))
        return self

    def remove_item(self, name: str) -> int:
        """Drop every line with the given name; returns how many were removed."""
        before = len(self._items)
        self._items = [item for item in self._items if item.name != name]
        return before - len(self._items)

    def total(self) -> Decimal:
        return sum((item.line_total for item in self._items), Decimal('0'))

    def items_description(self) -> str:
        if not self._items:
            return self._reference
        return ', '.join(item.name for item in self._items)

    def to_request_fields(self) -> Dict[str, str]:
        """
        Render the payment as the ordered fields Paynow expects

        The client appends its own fields (URLs, integration id, hash) after
        these.
        """
        fields: Dict[str, str] = {
            'reference': self._reference,
            'amount': format_amount(self.total()),
            'additionalinfo': self.description or self.items_description(),
        }

        if self._auth_email:
            fields['authemail'] = self._auth_email

        if self._items:
            fields['itemcount'] = str(len(self._items))
            fields['itemquantity'] = str(sum(item.quantity for item in self._items))

        fields['status'] = REQUEST_STATUS_MESSAGE
        return fields

    def __repr__(self):
        return f"Payment(reference={self._reference!r}, kind={self.kind!r}, total={self.total()})"


def format_amount(amount: Decimal) -> str:
    """Two-decimal text form used on the wire."""
    try:
        return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation as exc:
        raise ValidationError(f"Amount {amount} is too large to send") from exc


def _format_schema_errors(messages) -> str:
    if isinstance(messages, dict):
        parts = []
        for field, errors in messages.items():
            if isinstance(errors, (list, tuple)):
                errors = '; '.join(str(e) for e in errors)
            parts.append(f"{field}: {errors}")
        return ', '.join(parts)
    return str(messages)
