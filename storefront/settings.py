"""
Django settings — Storefront REST API

Every deployment-specific value is read from a STOREFRONT_* environment
variable so the same settings module serves local development, tests and
production. Defaults target a local SQLite database; production points
STOREFRONT_DB_* at PostgreSQL.

Time handling: USE_TZ is on and TIME_ZONE is UTC. Revenue reports group
orders by the UTC calendar year of their creation timestamp.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value else default


SECRET_KEY = os.environ.get(
    "STOREFRONT_SECRET_KEY",
    "django-insecure-storefront-development-key",
)

DEBUG = _env_bool("STOREFRONT_DEBUG", True)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("STOREFRONT_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "rest_framework",
    "customers",
    "catalog",
    "orders",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "storefront.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "storefront.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": os.environ.get("STOREFRONT_DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("STOREFRONT_DB_NAME", str(BASE_DIR / "storefront.sqlite3")),
        "USER": os.environ.get("STOREFRONT_DB_USER", ""),
        "PASSWORD": os.environ.get("STOREFRONT_DB_PASSWORD", ""),
        "HOST": os.environ.get("STOREFRONT_DB_HOST", ""),
        "PORT": os.environ.get("STOREFRONT_DB_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

# Pagination bounds shared by every list endpoint.
STOREFRONT_PAGE_SIZE = _env_int("STOREFRONT_PAGE_SIZE", 10)
STOREFRONT_MAX_PAGE_SIZE = _env_int("STOREFRONT_MAX_PAGE_SIZE", 100)

# Identity is established upstream (identity provider / gateway). Deployments
# swap the authentication classes; roles are read from the user's groups.
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
        "rest_framework.authentication.BasicAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_SCHEMA_CLASS": "rest_framework.schemas.openapi.AutoSchema",
}

LOG_LEVEL = os.environ.get("STOREFRONT_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "customers": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "catalog": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "orders": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
}
