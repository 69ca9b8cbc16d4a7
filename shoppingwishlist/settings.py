"""
Django settings for the shoppingwishlist project.

For more information on this file, see
https://docs.djangoproject.com/en/stable/topics/settings/

For the full list of settings and their values, see
https://docs.djangoproject.com/en/stable/ref/settings/
"""

import os
from pathlib import Path

import environ

# Build paths inside the project like this: BASE_DIR / "subdir".
BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env()
env.read_env(os.path.join(BASE_DIR, ".env"))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="django-insecure-5oXq1h0bM7JrTzQ2wYkL9vC3nE8sA6dF4gH1jK0p")

# SECURITY WARNING: don"t run with debug turned on in production!
DEBUG = env.bool("DEBUG", default=True)

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["*"])


# Application definition

DJANGO_APPS = [
    "unfold",
    "unfold.contrib.simple_history",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

THIRD_PARTY_APPS = [
    "simple_history",
]

PROJECT_APPS = [
    "apps.wishlist.apps.WishlistConfig",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + PROJECT_APPS

UNFOLD = {
    "SITE_TITLE": "Shopping Wishlist Admin",
    "SITE_HEADER": "Shopping Wishlist",
}

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "simple_history.middleware.HistoryRequestMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "shoppingwishlist.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "shoppingwishlist.wsgi.application"

# Database
# https://docs.djangoproject.com/en/stable/ref/settings/#databases

DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

# Default primary key field type
# https://docs.djangoproject.com/en/stable/ref/settings/#default-auto-field

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

# Internationalization
# https://docs.djangoproject.com/en/stable/topics/i18n/

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

STATIC_URL = env("STATIC_URL", default="/static/")
STATIC_ROOT = BASE_DIR / "static_root"

# Sessions hold the wishlist content as plain JSON-serializable data.
SESSION_SERIALIZER = "django.contrib.sessions.serializers.JSONSerializer"

# Wishlist
WISHLIST = {
    # Default tax rate (percent) applied to every newly added item.
    "TAX": env.float("WISHLIST_TAX", default=21),
    "FORMAT": {
        "DECIMALS": env.int("WISHLIST_FORMAT_DECIMALS", default=2),
        "DECIMAL_POINT": env("WISHLIST_FORMAT_DECIMAL_POINT", default="."),
        "THOUSANDS_SEPARATOR": env("WISHLIST_FORMAT_THOUSANDS_SEPARATOR", default=","),
    },
    "DATABASE": {
        # None means the "default" database alias.
        "CONNECTION": env("WISHLIST_DATABASE_CONNECTION", default=None),
        "TABLE": env("WISHLIST_DATABASE_TABLE", default="shoppingwishlist"),
    },
    "SESSION_NAMESPACE": "wishlist",
    "DESTROY_ON_LOGOUT": env.bool("WISHLIST_DESTROY_ON_LOGOUT", default=False),
    "STORED_RETENTION_DAYS": env.int("WISHLIST_STORED_RETENTION_DAYS", default=90),
}

# Redis / Celery setup
if "REDIS_URL" in env:
    REDIS_URL = env("REDIS_URL")
else:
    REDIS_HOST = env("REDIS_HOST", default="localhost")
    REDIS_PORT = env("REDIS_PORT", default="6379")
    REDIS_URL = f"redis://{REDIS_HOST}:{REDIS_PORT}/0"

CELERY_BROKER_URL = CELERY_RESULT_BACKEND = REDIS_URL

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": '[{asctime}] {levelname} "{name}" {message}',
            "style": "{",
            "datefmt": "%d/%b/%Y %H:%M:%S",  # match Django server time format
        },
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": env("DJANGO_LOG_LEVEL", default="INFO"),
        },
        "shoppingwishlist": {
            "handlers": ["console"],
            "level": env("SHOPPINGWISHLIST_LOG_LEVEL", default="INFO"),
        },
        "apps": {
            "handlers": ["console"],
            "level": env("APPS_LOG_LEVEL", default="INFO"),
        },
    },
}
