"""
Query-String Codec
Form-encodes request fields and decodes Paynow's URL-encoded replies
"""

from typing import Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl, urlencode

from paynow.errors import ParseError


def encode(fields: Mapping[str, str]) -> str:
    """
    Build an application/x-www-form-urlencoded body

    Args:
        fields: Ordered mapping of field name to value

    Returns:
        ``key=value`` pairs joined with ``&``, in the mapping's order
    """
    return urlencode([(key, '' if value is None else str(value)) for key, value in fields.items()])


def decode(body: Union[str, bytes]) -> Dict[str, str]:
    """
    Parse a URL-encoded reply body into a dict

    Malformed percent escapes are left as-is rather than rejected, and the
    last occurrence of a duplicated key wins.

    Args:
        body: Raw reply body

    Returns:
        Mapping of decoded keys to decoded values

    Raises:
        ParseError: If a bytes body is not valid UTF-8
    """
    if isinstance(body, bytes):
        try:
            body = body.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise ParseError(f"Response body is not valid text: {exc}") from exc

    if body is None:
        raise ParseError("Response body is empty")

    return dict(parse_qsl(body.strip(), keep_blank_values=True))


def get_field(data: Mapping[str, str], key: str) -> Optional[str]:
    """Case-insensitive field lookup; Paynow is not consistent about ``error`` vs ``Error``."""
    if key in data:
        return data[key]
    key = key.lower()
    for name, value in data.items():
        if name.lower() == key:
            return value
    return None
