"""
Django settings for the portfolio project.

Only what the blog content app needs: the app itself, templates for the
content tags, logging, and the BLOG_CONTENT overrides read by
blog.content.config.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "blog",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True

# Post content pipeline (see blog.content.config for every key)
BLOG_CONTENT = {
    "INTERLEAVE_RICH_TEXT": os.environ.get("BLOG_INTERLEAVE_RICH_TEXT", "0") == "1",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "blog": {
            "handlers": ["console"],
            "level": os.environ.get("BLOG_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
