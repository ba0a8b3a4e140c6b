import os
from dotenv import load_dotenv

load_dotenv()

INITIATE_TRANSACTION_URL = 'https://www.paynow.co.zw/interface/initiatetransaction'
INITIATE_MOBILE_TRANSACTION_URL = 'https://www.paynow.co.zw/interface/remotetransaction'


class Config:
    """Base configuration"""
    PAYNOW_INTEGRATION_ID = os.getenv('PAYNOW_INTEGRATION_ID', '')
    PAYNOW_INTEGRATION_KEY = os.getenv('PAYNOW_INTEGRATION_KEY', '')

    PAYNOW_RESULT_URL = os.getenv('PAYNOW_RESULT_URL', 'http://localhost')
    PAYNOW_RETURN_URL = os.getenv('PAYNOW_RETURN_URL', 'http://localhost')

    PAYNOW_INITIATE_URL = os.getenv('PAYNOW_INITIATE_URL', INITIATE_TRANSACTION_URL)
    PAYNOW_MOBILE_URL = os.getenv('PAYNOW_MOBILE_URL', INITIATE_MOBILE_TRANSACTION_URL)

    # Seconds; handed to the transport, the client itself never times out
    PAYNOW_TIMEOUT = float(os.getenv('PAYNOW_TIMEOUT', '30'))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    PAYNOW_INTEGRATION_ID = '1201'
    PAYNOW_INTEGRATION_KEY = 'test-integration-key'
    PAYNOW_RESULT_URL = 'http://merchant.test/paynow/result'
    PAYNOW_RETURN_URL = 'http://merchant.test/paynow/return'
    PAYNOW_TIMEOUT = 5.0


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(name=None):
    """Resolve a config class by name, falling back to PAYNOW_ENV."""
    name = (name or os.getenv('PAYNOW_ENV', 'default')).lower()
    if name not in config:
        raise ValueError(f'Unknown config: {name}')
    return config[name]
