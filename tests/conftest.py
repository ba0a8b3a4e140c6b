"""
Pytest Configuration and Fixtures
"""
from unittest.mock import Mock

import pytest

from paynow import Paynow, Payment
from paynow.config import TestingConfig
from paynow.http import Transport


@pytest.fixture
def transport():
    """Transport stub; tests set post.return_value / side_effect."""
    return Mock(spec=Transport)


@pytest.fixture
def paynow(transport):
    """Client wired to the stub transport"""
    return Paynow.from_config(TestingConfig, transport=transport)


@pytest.fixture
def payment():
    """Itemized payment with a payer email, usable for both flows"""
    payment = Payment('INV-1', auth_email='payer@example.com')
    payment.add_item('Widget', '10.00', 2)
    return payment
