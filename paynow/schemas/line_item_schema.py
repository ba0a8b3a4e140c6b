from marshmallow import Schema, fields, validates, ValidationError

from paynow.utils.validators import validate_amount


class LineItemSchema(Schema):
    """Cart line item input schema"""
    name = fields.Str(required=True)
    amount = fields.Raw(required=True)
    quantity = fields.Int(required=False, strict=True, load_default=1)

    @validates('name')
    def validate_name(self, value, **kwargs):
        if not value or not value.strip():
            raise ValidationError('Item name cannot be empty')

    @validates('amount')
    def validate_amount(self, value, **kwargs):
        is_valid, error = validate_amount(value)
        if not is_valid:
            raise ValidationError(error)

    @validates('quantity')
    def validate_quantity(self, value, **kwargs):
        if value < 1:
            raise ValidationError('Quantity must be a positive integer')
