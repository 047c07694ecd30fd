"""Development settings for Homely project.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts and verbose
logging of the domain apps. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Any local frontend may call the API
CORS_ALLOW_ALL_ORIGINS = True

LOGGING["loggers"]["apps"]["level"] = "DEBUG"  # noqa: F405
