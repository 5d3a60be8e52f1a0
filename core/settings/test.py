import tempfile

from .base import *

SECRET_KEY = "test-secret-key-not-for-production"

DEBUG = False
ALLOWED_HOSTS = ["*"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "storefront-tests",
    }
}

REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = []

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
EMAIL_HOST_USER = "noreply@storefront.test"

ORDERS_FALLBACK_FILE = str(Path(tempfile.gettempdir()) / "storefront-test-orders.json")
