from decimal import Decimal

import pytest

from paynow.models import MobileInitResponse, StatusResponse, WebInitResponse


class TestWebInitResponse:

    def test_success_with_redirect(self):
        response = WebInitResponse({
            'status': 'Ok',
            'browserurl': 'https://paynow.test/Payment/ConfirmPayment/1',
            'pollurl': 'https://paynow.test/Interface/CheckPayment/?guid=1',
        })
        assert response.success is True
        assert response.has_redirect is True
        assert response.redirect_url == 'https://paynow.test/Payment/ConfirmPayment/1'
        assert response.poll_url == 'https://paynow.test/Interface/CheckPayment/?guid=1'
        assert response.error is None

    def test_error_response(self):
        response = WebInitResponse({'status': 'Error', 'Error': 'Invalid id'})
        assert response.success is False
        assert response.failed is True
        assert response.has_redirect is False
        assert response.error == 'Invalid id'

    def test_read_only(self):
        source = {'status': 'Ok'}
        response = WebInitResponse(source)
        source['status'] = 'Error'
        assert response.status == 'Ok'
        with pytest.raises(TypeError):
            response.data['status'] = 'Error'


class TestMobileInitResponse:

    def test_fields(self):
        response = MobileInitResponse({
            'status': 'Ok',
            'instructions': 'Dial *151*2*4# and enter your PIN',
            'paynowreference': '35216224',
            'pollurl': 'https://paynow.test/poll?guid=2',
        })
        assert response.success is True
        assert response.instructions == 'Dial *151*2*4# and enter your PIN'
        assert response.paynow_reference == '35216224'
        assert response.poll_url == 'https://paynow.test/poll?guid=2'


class TestStatusResponse:

    def test_paid(self):
        response = StatusResponse({
            'reference': 'INV-1',
            'paynowreference': '35216224',
            'amount': '10.00',
            'status': 'Paid',
            'pollurl': 'https://paynow.test/poll?guid=3',
        })
        assert response.is_paid() is True
        assert response.paid is True
        assert response.amount == Decimal('10.00')
        assert response.reference == 'INV-1'
        assert response.paynow_reference == '35216224'
        assert response.poll_url == 'https://paynow.test/poll?guid=3'

    @pytest.mark.parametrize("status", ['PAID', 'paid', 'Paid'])
    def test_paid_case_insensitive(self, status):
        assert StatusResponse({'status': status}).is_paid() is True

    @pytest.mark.parametrize("status", ['Awaiting Delivery', 'Cancelled', 'Created', ''])
    def test_not_paid(self, status):
        assert StatusResponse({'status': status}).is_paid() is False

    def test_missing_or_bad_amount(self):
        assert StatusResponse({'status': 'Paid'}).amount is None
        assert StatusResponse({'status': 'Paid', 'amount': 'n/a'}).amount is None
