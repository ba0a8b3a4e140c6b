"""
Integrity Hasher

Paynow signs every message with SHA-512 over the concatenated field values
followed by the integration key. The concatenation follows the mapping's
iteration order, so fields must never be reordered between assembly and
hashing.
"""

import hashlib
import hmac
from typing import Mapping

HASH_FIELD = 'hash'


def make(fields: Mapping[str, str], integration_key: str) -> str:
    """
    Compute the hash for a set of fields

    Args:
        fields: Ordered mapping of field values to sign
        integration_key: Merchant's shared secret

    Returns:
        Uppercase hexadecimal SHA-512 digest
    """
    payload = ''.join(
        str(value) for key, value in fields.items() if key != HASH_FIELD
    )
    payload += integration_key

    return hashlib.sha512(payload.encode('utf-8')).hexdigest().upper()


def verify(fields: Mapping[str, str], integration_key: str) -> bool:
    """Check the ``hash`` field of a mapping against the recomputed value."""
    received = fields.get(HASH_FIELD)
    if not received:
        return False

    expected = make(fields, integration_key)
    return hmac.compare_digest(
        expected.encode('utf-8'),
        str(received).upper().encode('utf-8'),
    )
