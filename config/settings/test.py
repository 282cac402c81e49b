"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

CART = {
    **CART,  # noqa: F405
    'TAX_RATE': Decimal('0.08'),  # noqa: F405
    'FLAT_SHIPPING_FEE': Decimal('9.99'),  # noqa: F405
    'FREE_SHIPPING_THRESHOLD': Decimal('50.00'),  # noqa: F405
    'MAX_ITEM_QUANTITY': 100,
    'LOGIN_MERGE_POLICY': 'discard',
}
