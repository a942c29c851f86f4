"""SQLite-backed settings used for test runs in CI/local development."""

from __future__ import annotations

import os

# Provide defaults so the base settings module can import without environment variables.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALLOWED_HOSTS", "localhost,testserver")

from .settings import *  # noqa: E402,F401,F403

# Use an in-memory SQLite database for tests.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Disable migrations for project apps to speed up SQLite test setup.
PROJECT_APPS = [app for app in INSTALLED_APPS if app.startswith("apps.")]
MIGRATION_MODULES = {app.split(".", 1)[1]: None for app in PROJECT_APPS}

# Layout discovery tests point at their own temporary directories.
TEMPLATES[0]["DIRS"] = []

CMS_REVISIONS_LIMIT = 3
