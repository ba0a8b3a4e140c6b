from paynow.schemas.line_item_schema import LineItemSchema

__all__ = ['LineItemSchema']
