from enum import Enum


class MobileMoneyMethod(str, Enum):
    """Mobile money wallets accepted by the remote transaction endpoint"""
    ECOCASH = 'ecocash'
    ONEMONEY = 'onemoney'
    TELECASH = 'telecash'

    def __str__(self):
        return self.value


# Paynow transaction statuses
STATUS_OK = 'ok'
STATUS_ERROR = 'error'
STATUS_PAID = 'paid'

# Fixed status token Paynow expects on initiation requests
REQUEST_STATUS_MESSAGE = 'Message'
