"""Test settings for Homely project.

Fast, isolated configuration for the test suite: in-memory SQLite, a
cheap password hasher and a small listing batch so pagination edges are
easy to reach.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

LISTINGS_BATCH = 10

FAVORITE_DEBOUNCE_SECONDS = 0.01
