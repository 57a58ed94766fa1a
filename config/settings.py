"""
ACL – Django Settings (Infrastructure Only)
============================================
Django backs the memory store table and the auth-user identity adapter.
The ACL container itself does not depend on a configured Django project.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("ACL_SECRET_KEY", "acl-dev-key-replace-before-deployment")

DEBUG = os.environ.get("ACL_DEBUG", "true").strip().lower() in {"1", "true", "yes", "on"}

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    # ── ACL Modules ───────────────────────────────────────
    "acl.memory_store",
]

# ── Database ──────────────────────────────────────────────────
# SQLite for development. Production DB configured separately.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("ACL_DB_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

# ── ACL ───────────────────────────────────────────────────────
ACL = {
    "DEFAULT_NAME": "default",
    "GUEST_ROLE": "guest",
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "acl": {
            "handlers": ["console"],
            "level": os.environ.get("ACL_LOG_LEVEL", "INFO").upper(),
            "propagate": True,
        },
    },
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ── Default Primary Key ──────────────────────────────────────
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
