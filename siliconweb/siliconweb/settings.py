import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "siliconweb-demo-insecure-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "assets",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "siliconweb.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "siliconweb" / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "assets.context_processors.siliconweb",
            ],
        },
    },
]

DATABASES = {}

STATIC_URL = "/static/"

SILICONWEB = {
    "BASE_URL": os.environ.get("SILICONWEB_BASE_URL", "/"),
    "CSS_PATH": "static/css",
    "JS_PATH": "static/js",
    "RENDER_IMMEDIATELY": False,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "assets": {
            "handlers": ["console"],
            "level": os.environ.get("SILICONWEB_LOG_LEVEL", "INFO"),
        },
    },
}
