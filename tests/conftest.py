"""Shared pytest configuration and fixtures for formkit tests."""

from __future__ import annotations

import django
import pytest
from django.conf import settings
from django.test import RequestFactory


def pytest_configure() -> None:
    settings.configure(
        DEBUG=True,
        SECRET_KEY="formkit-tests",
        ALLOWED_HOSTS=["testserver"],
        INSTALLED_APPS=[
            "django.contrib.contenttypes",
            "django.contrib.auth",
            "django_formkit",
            "tests.testapp",
        ],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [],
                "APP_DIRS": True,
                "OPTIONS": {
                    "context_processors": ["django.template.context_processors.request"],
                },
            }
        ],
        DATABASES={},
        ROOT_URLCONF="tests.urls",
        DEFAULT_AUTO_FIELD="django.db.models.AutoField",
        USE_TZ=True,
        FORMKIT={"PREVIEWS_ENABLED": True},
    )
    django.setup()


@pytest.fixture
def rf() -> RequestFactory:
    return RequestFactory()


@pytest.fixture
def subscriber():
    """Unsaved subscriber with a couple of attributes filled in."""
    from tests.testapp.models import Subscriber

    return Subscriber(email="ada@example.com", full_name="Ada Lovelace")


@pytest.fixture
def isolated_registry(monkeypatch):
    """Let a test register input types and previews without leaking them."""
    from django_formkit import registry

    monkeypatch.setattr(registry, "input_components", dict(registry.input_components))
    monkeypatch.setattr(registry, "previews", dict(registry.previews))
    return registry
